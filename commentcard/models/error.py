"""Fetch error taxonomy and user-facing messages."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, model_validator


class ErrorCategory(str, Enum):
    """Category of a failed comments fetch."""

    NOT_FOUND = "not_found"
    FORBIDDEN = "forbidden"
    SERVER_UNAVAILABLE = "server_unavailable"
    NO_CONNECTIVITY = "no_connectivity"
    TIMEOUT = "timeout"
    DATA_PARSING = "data_parsing"
    UNEXPECTED = "unexpected"


class ErrorKind(BaseModel):
    """Domain error carried by exactly one failed fetch.

    Only ``UNEXPECTED`` errors may carry a status code; it is the code of a
    response that none of the other categories account for.
    """

    model_config = ConfigDict(frozen=True)

    category: ErrorCategory
    code: Optional[int] = None

    @model_validator(mode="after")
    def check_code_only_for_unexpected(self) -> "ErrorKind":
        if self.code is not None and self.category is not ErrorCategory.UNEXPECTED:
            raise ValueError(f"{self.category.value} errors do not carry a status code")
        return self

    @classmethod
    def not_found(cls) -> "ErrorKind":
        return cls(category=ErrorCategory.NOT_FOUND)

    @classmethod
    def forbidden(cls) -> "ErrorKind":
        return cls(category=ErrorCategory.FORBIDDEN)

    @classmethod
    def server_unavailable(cls) -> "ErrorKind":
        return cls(category=ErrorCategory.SERVER_UNAVAILABLE)

    @classmethod
    def no_connectivity(cls) -> "ErrorKind":
        return cls(category=ErrorCategory.NO_CONNECTIVITY)

    @classmethod
    def timeout(cls) -> "ErrorKind":
        return cls(category=ErrorCategory.TIMEOUT)

    @classmethod
    def data_parsing(cls) -> "ErrorKind":
        return cls(category=ErrorCategory.DATA_PARSING)

    @classmethod
    def unexpected(cls, code: Optional[int] = None) -> "ErrorKind":
        return cls(category=ErrorCategory.UNEXPECTED, code=code)


ERROR_MESSAGES = {
    ErrorCategory.NOT_FOUND: "The requested content could not be found.",
    ErrorCategory.FORBIDDEN: "You don't have permission to view this content.",
    ErrorCategory.SERVER_UNAVAILABLE: "The server is having problems. Please try again later.",
    ErrorCategory.NO_CONNECTIVITY: "No internet connection. Please check your network and try again.",
    ErrorCategory.TIMEOUT: "The request timed out. Please try again.",
    ErrorCategory.DATA_PARSING: "We received an unexpected response from the server.",
    ErrorCategory.UNEXPECTED: "An unexpected error occurred.",
}


def error_message(error: ErrorKind) -> str:
    """
    Get the human-readable message for an error.

    Args:
        error: Error to describe

    Returns:
        Message suitable for showing next to a retry action
    """
    if error.category is ErrorCategory.UNEXPECTED and error.code is not None:
        return f"Something went wrong (error code: {error.code})."
    return ERROR_MESSAGES[error.category]
