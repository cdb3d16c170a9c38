"""
Comments repository.

Turns one call to the comments API into a FetchResult. Every failure the
API raises is classified here, so callers never see a raw exception.
"""

import time

from commentcard.models.result import FetchResult
from commentcard.services.comments_api import CommentsApi
from commentcard.services.error_classifier import classify
from commentcard.utils.logging import get_logger, log_error_with_context


logger = get_logger(__name__)


class CommentsRepository:
    """
    Fetches comments and converts the outcome into a FetchResult.

    The repository is stateless: each fetch issues exactly one API call,
    with no retry and no caching.
    """

    def __init__(self, api: CommentsApi):
        """
        Initialize the repository.

        Args:
            api: Remote source of comments
        """
        self.api = api

    async def fetch(self, post_id: int) -> FetchResult:
        """
        Fetch the comments of a post.

        Nothing happens until the returned coroutine is awaited; it then
        produces exactly one result.

        Args:
            post_id: Post identifier

        Returns:
            FetchResult holding either the comments or the classified error
        """
        fetch_logger = logger.with_context(post_id=post_id)
        start_time = time.time()

        try:
            comments = await self.api.get_comments(post_id)
        except Exception as e:
            error = classify(e)
            log_error_with_context(
                fetch_logger,
                f"Comments fetch failed: {error.category.value}",
                e,
                error_category=error.category.value,
                status_code=error.code,
            )
            return FetchResult.failure(error)

        duration_ms = (time.time() - start_time) * 1000
        fetch_logger.info(
            f"Fetched {len(comments)} comments",
            extra={"comment_count": len(comments), "duration_ms": round(duration_ms, 2)}
        )
        return FetchResult.success(comments)
