"""Fetch result data model."""

from typing import Iterable, Optional, Tuple

from pydantic import BaseModel, ConfigDict, model_validator

from .comment import Comment
from .error import ErrorKind


class FetchResult(BaseModel):
    """Outcome of one comments fetch: either comments or an error, never both."""

    model_config = ConfigDict(frozen=True)

    comments: Optional[Tuple[Comment, ...]] = None
    error: Optional[ErrorKind] = None

    @model_validator(mode="after")
    def check_exactly_one_outcome(self) -> "FetchResult":
        if (self.comments is None) == (self.error is None):
            raise ValueError("FetchResult must hold either comments or an error")
        return self

    @classmethod
    def success(cls, comments: Iterable[Comment]) -> "FetchResult":
        return cls(comments=tuple(comments))

    @classmethod
    def failure(cls, error: ErrorKind) -> "FetchResult":
        return cls(error=error)

    @property
    def is_success(self) -> bool:
        return self.error is None
