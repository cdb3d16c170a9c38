"""UI state snapshot."""

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict

from .comment import CommentView
from .error import ErrorKind


class UIState(BaseModel):
    """Complete, immutable description of what the comments screen shows."""

    model_config = ConfigDict(frozen=True)

    is_loading: bool = False
    comments: Tuple[CommentView, ...] = ()
    error: Optional[ErrorKind] = None

    def find_comment(self, comment_id: int) -> Optional[CommentView]:
        """Get the view for a comment id, or None if it is not displayed."""
        for comment in self.comments:
            if comment.id == comment_id:
                return comment
        return None
