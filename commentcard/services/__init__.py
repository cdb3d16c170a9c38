"""Business logic services package."""

from commentcard.services.comments_api import (
    CommentsApi,
    HttpCommentsApi,
    CommentsApiError,
    ApiStatusError,
    RequestTimeoutError,
    ConnectivityError,
    DataParsingError,
    get_comments_api
)
from commentcard.services.error_classifier import classify, classify_status
from commentcard.services.comments_repository import CommentsRepository
from commentcard.services.comments_store import CommentsStore

__all__ = [
    'CommentsApi',
    'HttpCommentsApi',
    'CommentsApiError',
    'ApiStatusError',
    'RequestTimeoutError',
    'ConnectivityError',
    'DataParsingError',
    'get_comments_api',
    'classify',
    'classify_status',
    'CommentsRepository',
    'CommentsStore'
]
