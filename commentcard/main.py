"""
Session runner.

Opens one comments screen session against the configured API, waits for
the initial fetch to settle and logs the resulting state.
"""

import asyncio
import sys
from typing import Optional

from commentcard.config import settings
from commentcard.models.error import error_message
from commentcard.models.state import UIState
from commentcard.services.comments_api import CommentsApi, get_comments_api
from commentcard.services.comments_repository import CommentsRepository
from commentcard.services.comments_store import CommentsStore
from commentcard.utils.logging import setup_logging, get_logger

logger = get_logger(__name__)


async def run_session(post_id: int, api: Optional[CommentsApi] = None) -> UIState:
    """
    Run one screen session until its initial fetch settles.

    Args:
        post_id: Post whose comments to load
        api: Comments API to use; defaults to the HTTP client from settings

    Returns:
        The UI state after the initial fetch
    """
    http_api = None
    if api is None:
        http_api = api = get_comments_api()

    try:
        async with CommentsStore(CommentsRepository(api), post_id=post_id) as store:
            state = await store.wait_for_fetch()
    finally:
        if http_api is not None:
            await http_api.close()

    if state.error is not None:
        logger.warning(
            f"Comments unavailable: {error_message(state.error)}",
            extra={"post_id": post_id, "error_category": state.error.category.value}
        )
    else:
        logger.info(
            f"Loaded {len(state.comments)} comments",
            extra={"post_id": post_id, "comment_count": len(state.comments)}
        )
    return state


def main() -> int:
    """Entry point; exits non-zero when the comments could not be loaded."""
    setup_logging(settings.log_level.upper())
    state = asyncio.run(run_session(settings.post_id))
    return 1 if state.error is not None else 0


if __name__ == "__main__":
    sys.exit(main())
