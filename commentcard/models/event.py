"""Events submitted by the presentation layer."""

from typing import Union

from pydantic import BaseModel, ConfigDict


class Retry(BaseModel):
    """Request a fresh fetch, superseding any fetch still in flight."""

    model_config = ConfigDict(frozen=True)


class ImageAttachRequested(BaseModel):
    """The user started picking an avatar for a comment."""

    model_config = ConfigDict(frozen=True)

    comment_id: int


class ImageAttached(BaseModel):
    """The user picked an avatar for a comment."""

    model_config = ConfigDict(frozen=True)

    comment_id: int
    image_ref: str


Event = Union[Retry, ImageAttachRequested, ImageAttached]
