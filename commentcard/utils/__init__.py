"""
Utility modules for the comments screen core.
"""

from commentcard.utils.logging import (
    get_logger,
    setup_logging,
    JSONFormatter,
    ContextLoggerAdapter,
    log_api_call,
    log_state_transition,
    log_error_with_context,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "JSONFormatter",
    "ContextLoggerAdapter",
    "log_api_call",
    "log_state_transition",
    "log_error_with_context",
]
