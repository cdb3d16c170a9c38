"""Comment data models."""

import re
from typing import Iterable, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


_LINE_BREAKS = re.compile(r"\r\n|\r|\n")


class Comment(BaseModel):
    """Comment record as returned by the remote comments endpoint."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    post_id: int = Field(alias="postId")
    name: str
    email: str
    body: str


class CommentView(BaseModel):
    """Presentation-ready comment with an optional user-attached avatar."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    email: str
    body: str
    avatar_ref: Optional[str] = None

    def with_avatar(self, avatar_ref: str) -> "CommentView":
        """Return a copy of this view pointing at a new avatar."""
        return self.model_copy(update={"avatar_ref": avatar_ref})


def normalize_body(body: str) -> str:
    """Collapse embedded line breaks so the body renders on a single line."""
    return _LINE_BREAKS.sub(" ", body)


def to_comment_view(comment: Comment) -> CommentView:
    """Map a remote comment to its presentation view."""
    return CommentView(
        id=comment.id,
        name=comment.name,
        email=comment.email,
        body=normalize_body(comment.body),
    )


def to_comment_views(comments: Iterable[Comment]) -> Tuple[CommentView, ...]:
    """Map fetched comments to views, preserving order."""
    return tuple(to_comment_view(comment) for comment in comments)
