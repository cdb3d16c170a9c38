"""
Error classification for comments fetches.

Maps any failure raised while fetching comments onto the closed ErrorKind
taxonomy. Rules are checked in order:

1. an explicit HTTP status code (404, 401/403, 5xx, anything else)
2. a timeout
3. any other transport or connectivity failure
4. a failure decoding the response body
5. anything else
"""

import asyncio
import json
from typing import Optional

import httpx
from pydantic import ValidationError

from commentcard.models.error import ErrorKind
from commentcard.services.comments_api import (
    ConnectivityError,
    DataParsingError,
    RequestTimeoutError,
)


_TIMEOUT_ERRORS = (RequestTimeoutError, httpx.TimeoutException, TimeoutError, asyncio.TimeoutError)
# OSError covers ConnectionError and socket level failures
_CONNECTIVITY_ERRORS = (ConnectivityError, httpx.TransportError, OSError)
_PARSING_ERRORS = (DataParsingError, ValidationError, json.JSONDecodeError, httpx.DecodingError)


def classify(failure: BaseException) -> ErrorKind:
    """
    Classify a fetch failure.

    The exception itself is checked first; its explicit ``__cause__`` chain
    is only consulted when the exception matches no rule.

    Args:
        failure: Exception raised by the comments API

    Returns:
        The ErrorKind describing the failure
    """
    current: Optional[BaseException] = failure
    seen = set()

    while current is not None and id(current) not in seen:
        seen.add(id(current))
        kind = _classify_single(current)
        if kind is not None:
            return kind
        current = current.__cause__

    return ErrorKind.unexpected()


def classify_status(status_code: int) -> ErrorKind:
    """Classify a non-successful HTTP status code."""
    if status_code == 404:
        return ErrorKind.not_found()
    if status_code in (401, 403):
        return ErrorKind.forbidden()
    if 500 <= status_code <= 599:
        return ErrorKind.server_unavailable()
    return ErrorKind.unexpected(code=status_code)


def _classify_single(failure: BaseException) -> Optional[ErrorKind]:
    status_code = _status_code_of(failure)
    if status_code is not None:
        return classify_status(status_code)
    if isinstance(failure, _TIMEOUT_ERRORS):
        return ErrorKind.timeout()
    if isinstance(failure, _CONNECTIVITY_ERRORS):
        return ErrorKind.no_connectivity()
    if isinstance(failure, _PARSING_ERRORS):
        return ErrorKind.data_parsing()
    return None


def _status_code_of(failure: BaseException) -> Optional[int]:
    if isinstance(failure, httpx.HTTPStatusError):
        return failure.response.status_code
    status_code = getattr(failure, "status_code", None)
    if isinstance(status_code, int) and not isinstance(status_code, bool):
        return status_code
    return None
