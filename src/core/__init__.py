"""Core business logic.

This module contains the platform-agnostic page indicator state model and
the logging and error handling it is built on.
"""

from src.core.errors import (
    ErrorCategory,
    InvalidPageCountError,
    OutOfBoundsError,
    PageIndicatorError,
    classify_error,
    is_boundary_error,
)
from src.core.logging import (
    bind_contextvars,
    clear_contextvars,
    configure_logging,
    get_logger,
    unbind_contextvars,
)
from src.core.page_indicator import (
    IndicatorMark,
    PageChangeCallback,
    PageIndicatorController,
    PageIndicatorState,
)

__all__ = [
    # Page indicator
    "IndicatorMark",
    "PageChangeCallback",
    "PageIndicatorController",
    "PageIndicatorState",
    # Error handling
    "ErrorCategory",
    "InvalidPageCountError",
    "OutOfBoundsError",
    "PageIndicatorError",
    "classify_error",
    "is_boundary_error",
    # Logging
    "bind_contextvars",
    "clear_contextvars",
    "configure_logging",
    "get_logger",
    "unbind_contextvars",
]
