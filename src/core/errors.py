"""Error types and classification for page indicator state.

Every error raised by this package derives from PageIndicatorError. Bounds
failures are the only errors a well-formed caller should ever see; they are
raised, never clamped, so a presentation layer can tell "already at the edge"
apart from a successful move.

Example:
    from src.core.errors import ErrorCategory, OutOfBoundsError, classify_error

    try:
        state = state.step_forward()
    except OutOfBoundsError as ex:
        if classify_error(ex) is ErrorCategory.OUT_OF_BOUNDS:
            next_button.disabled = True
"""

from enum import Enum, auto


class ErrorCategory(Enum):
    """Classification of error types for handling decisions."""

    OUT_OF_BOUNDS = auto()  # Position outside [0, total)
    INVALID_INPUT = auto()  # Malformed arguments (wrong type, negative count)
    UNKNOWN = auto()  # Unclassified error


class PageIndicatorError(Exception):
    """Base class for page indicator errors."""


class OutOfBoundsError(PageIndicatorError, IndexError):
    """A construction or transition would leave ``current`` outside the pages.

    Attributes:
        index: The position that was requested.
        total: The number of pages of the state being moved.
    """

    def __init__(self, index: int, total: int) -> None:
        super().__init__(f"page index {index} out of bounds for {total} page(s)")
        self.index = index
        self.total = total


class InvalidPageCountError(PageIndicatorError, ValueError):
    """The page count is negative.

    Attributes:
        total: The rejected page count.
    """

    def __init__(self, total: int) -> None:
        super().__init__(f"page count must be >= 0, got {total}")
        self.total = total


def classify_error(error: Exception) -> ErrorCategory:
    """Classify an exception into an error category.

    Args:
        error: The exception to classify.

    Returns:
        The ErrorCategory that best matches the error.
    """
    if isinstance(error, OutOfBoundsError):
        return ErrorCategory.OUT_OF_BOUNDS
    if isinstance(error, (InvalidPageCountError, TypeError)):
        return ErrorCategory.INVALID_INPUT
    return ErrorCategory.UNKNOWN


def is_boundary_error(error: Exception) -> bool:
    """Check if an error only means the requested page does not exist.

    Args:
        error: The exception to check.

    Returns:
        True if the caller can recover by not applying the transition.
    """
    return classify_error(error) is ErrorCategory.OUT_OF_BOUNDS
