"""Data models for the comments screen."""

from .comment import (
    Comment,
    CommentView,
    normalize_body,
    to_comment_view,
    to_comment_views,
)
from .error import ERROR_MESSAGES, ErrorCategory, ErrorKind, error_message
from .event import Event, ImageAttached, ImageAttachRequested, Retry
from .result import FetchResult
from .state import UIState

__all__ = [
    # Comment models
    "Comment",
    "CommentView",
    "normalize_body",
    "to_comment_view",
    "to_comment_views",
    # Error models
    "ErrorCategory",
    "ErrorKind",
    "ERROR_MESSAGES",
    "error_message",
    # Event models
    "Event",
    "Retry",
    "ImageAttachRequested",
    "ImageAttached",
    # Result models
    "FetchResult",
    # State models
    "UIState",
]
