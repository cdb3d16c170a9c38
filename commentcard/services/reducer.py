"""Pure state transitions of the comments screen."""

from commentcard.models.comment import to_comment_views
from commentcard.models.result import FetchResult
from commentcard.models.state import UIState


def start_loading(state: UIState) -> UIState:
    """Enter loading; comments already on screen stay visible."""
    return state.model_copy(update={"is_loading": True, "error": None})


def apply_result(state: UIState, result: FetchResult) -> UIState:
    """
    Apply a fetch outcome.

    A success replaces the comments. A failure keeps whatever comments were
    displayed before and sets the error.
    """
    if result.is_success:
        return UIState(
            is_loading=False,
            comments=to_comment_views(result.comments),
            error=None,
        )
    return state.model_copy(update={"is_loading": False, "error": result.error})


def attach_image(state: UIState, comment_id: int, image_ref: str) -> UIState:
    """
    Point one comment's avatar at a user-picked image.

    Returns the same state object when no displayed comment has the id.
    """
    if state.find_comment(comment_id) is None:
        return state

    comments = tuple(
        comment.with_avatar(image_ref) if comment.id == comment_id else comment
        for comment in state.comments
    )
    return state.model_copy(update={"comments": comments})
