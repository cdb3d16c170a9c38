"""
Comments API client.

This module defines the remote fetch contract consumed by the repository
and an httpx-based implementation for the JSON comments endpoint
(``GET /posts/{post_id}/comments``).
"""

import time
from typing import List, Optional, Protocol

import httpx
from pydantic import TypeAdapter

from commentcard.models.comment import Comment
from commentcard.utils.logging import get_logger, log_api_call


logger = get_logger(__name__)

_COMMENT_LIST = TypeAdapter(List[Comment])


class CommentsApiError(Exception):
    """Base exception for comments API errors."""
    pass


class ApiStatusError(CommentsApiError):
    """The API answered with a non-successful HTTP status."""

    def __init__(self, status_code: int):
        super().__init__(f"API error response: {status_code}")
        self.status_code = status_code


class RequestTimeoutError(CommentsApiError):
    """The request did not complete in time."""
    pass


class ConnectivityError(CommentsApiError):
    """The API could not be reached (DNS, refused connection, dropped socket)."""
    pass


class DataParsingError(CommentsApiError):
    """The response body could not be decoded into comments."""
    pass


class CommentsApi(Protocol):
    """Remote source of comments for a post."""

    async def get_comments(self, post_id: int) -> List[Comment]:
        ...


class HttpCommentsApi:
    """
    Fetches comments over HTTP.

    Transport failures are re-raised as CommentsApiError subclasses with the
    original httpx exception chained as the cause.
    """

    SERVICE_NAME = "comments_api"

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the API client.

        Args:
            base_url: Base URL of the API (e.g. https://jsonplaceholder.typicode.com)
            timeout_seconds: Connect/read/write/pool timeout for each request
            transport: Optional httpx transport (e.g. httpx.MockTransport)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout_seconds),
            follow_redirects=True,
            headers={"Accept": "application/json"},
            transport=transport,
        )

        logger.info(f"HttpCommentsApi initialized for {self.base_url}")

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "HttpCommentsApi":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def get_comments(self, post_id: int) -> List[Comment]:
        """
        Retrieve all comments of a post.

        Args:
            post_id: Post identifier

        Returns:
            Comments in the order the API returned them

        Raises:
            ApiStatusError: If the API answered with a 4xx/5xx status
            RequestTimeoutError: If the request timed out
            ConnectivityError: If the API could not be reached
            DataParsingError: If the body is not a valid list of comments
        """
        endpoint = f"/posts/{post_id}/comments"
        start_time = time.time()

        try:
            response = await self._client.get(endpoint)
        except httpx.TimeoutException as e:
            self._log_failure(endpoint, start_time, e)
            raise RequestTimeoutError(f"Request timed out: GET {endpoint}") from e
        except httpx.TransportError as e:
            self._log_failure(endpoint, start_time, e)
            raise ConnectivityError(f"Could not reach comments API: {e}") from e

        duration_ms = (time.time() - start_time) * 1000

        if response.is_error:
            log_api_call(
                logger,
                service=self.SERVICE_NAME,
                endpoint=endpoint,
                method="GET",
                status_code=response.status_code,
                duration_ms=duration_ms,
                error=f"HTTP {response.status_code}",
            )
            raise ApiStatusError(response.status_code)

        log_api_call(
            logger,
            service=self.SERVICE_NAME,
            endpoint=endpoint,
            method="GET",
            status_code=response.status_code,
            duration_ms=duration_ms,
        )

        return self._decode(response)

    def _decode(self, response: httpx.Response) -> List[Comment]:
        """
        Decode a response body into comments.

        Args:
            response: Successful HTTP response

        Returns:
            Decoded comments

        Raises:
            DataParsingError: If the body is malformed or repeats a comment id
        """
        try:
            comments = _COMMENT_LIST.validate_python(response.json())
        except ValueError as e:
            # json.JSONDecodeError and pydantic.ValidationError are both ValueErrors
            logger.warning(f"Could not decode comments response: {e}")
            raise DataParsingError(f"Error parsing comments: {e}") from e

        seen_ids = set()
        for comment in comments:
            if comment.id in seen_ids:
                raise DataParsingError(f"Duplicate comment id in response: {comment.id}")
            seen_ids.add(comment.id)

        logger.debug(f"Decoded {len(comments)} comments")
        return comments

    def _log_failure(self, endpoint: str, start_time: float, error: Exception) -> None:
        log_api_call(
            logger,
            service=self.SERVICE_NAME,
            endpoint=endpoint,
            method="GET",
            duration_ms=(time.time() - start_time) * 1000,
            error=f"{type(error).__name__}: {error}",
        )


def get_comments_api() -> HttpCommentsApi:
    """
    Factory function to create HttpCommentsApi with settings from config.

    Returns:
        HttpCommentsApi instance configured with application settings
    """
    from commentcard.config import settings

    return HttpCommentsApi(
        base_url=settings.api_base_url,
        timeout_seconds=settings.request_timeout_seconds,
    )
