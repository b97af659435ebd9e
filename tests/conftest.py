"""Shared pytest fixtures for page-dots tests."""

from collections.abc import Generator

import pytest
import structlog

from src.core.logging import clear_contextvars
from src.core.page_indicator import PageIndicatorController, PageIndicatorState


@pytest.fixture
def reset_logging() -> Generator[None, None, None]:
    """Start every test from structlog's default, uncached configuration."""
    structlog.reset_defaults()
    clear_contextvars()
    yield
    clear_contextvars()


@pytest.fixture
def five_pages() -> PageIndicatorState:
    """Provide a five-page state positioned on the middle page.

    Returns:
        PageIndicatorState: ``total=5, current=2``.
    """
    return PageIndicatorState.create(total=5, current=2)


@pytest.fixture
def controller(five_pages: PageIndicatorState) -> PageIndicatorController:
    """Provide a controller holding the five-page state.

    Returns:
        PageIndicatorController: A controller with no subscribers.
    """
    return PageIndicatorController(five_pages)
