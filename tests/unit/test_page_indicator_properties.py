"""Property-based tests for page indicator state transitions."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from src.core.errors import OutOfBoundsError
from src.core.page_indicator import PageIndicatorState

TOTALS = st.integers(min_value=1, max_value=200)


@st.composite
def states(draw: st.DrawFn) -> PageIndicatorState:
    total = draw(TOTALS)
    current = draw(st.integers(min_value=0, max_value=total - 1))
    return PageIndicatorState.create(total=total, current=current)


def outside(total: int) -> st.SearchStrategy[int]:
    return st.one_of(st.integers(max_value=-1), st.integers(min_value=total))


@given(total=TOTALS, data=st.data())
def test_create_reports_given_values(total: int, data: st.DataObject) -> None:
    """Any in-range position is accepted and reported back unchanged."""
    current = data.draw(st.integers(min_value=0, max_value=total - 1))
    state = PageIndicatorState.create(total=total, current=current)
    assert (state.total, state.current) == (total, current)


@given(total=TOTALS, data=st.data())
def test_create_rejects_out_of_range(total: int, data: st.DataObject) -> None:
    """Positions outside [0, total) fail construction."""
    current = data.draw(outside(total))
    with pytest.raises(OutOfBoundsError):
        PageIndicatorState.create(total=total, current=current)


@given(state=states())
def test_step_forward(state: PageIndicatorState) -> None:
    """Stepping forward advances by one or fails on the last page."""
    if state.current < state.total - 1:
        new_state = state.step_forward()
        assert new_state.current == state.current + 1
        assert new_state.total == state.total
    else:
        with pytest.raises(OutOfBoundsError):
            state.step_forward()
        assert state.current == state.total - 1


@given(state=states())
def test_step_backward(state: PageIndicatorState) -> None:
    """Stepping backward retreats by one or fails on the first page."""
    if state.current > 0:
        new_state = state.step_backward()
        assert new_state.current == state.current - 1
        assert new_state.total == state.total
    else:
        with pytest.raises(OutOfBoundsError):
            state.step_backward()


@given(state=states(), data=st.data())
def test_move_to_any_valid_index(state: PageIndicatorState, data: st.DataObject) -> None:
    """Every existing page is reachable regardless of the prior position."""
    index = data.draw(st.integers(min_value=0, max_value=state.total - 1))
    new_state = state.move_to(index)
    assert new_state.current == index
    assert new_state.total == state.total


@given(state=states(), data=st.data())
def test_move_to_invalid_index(state: PageIndicatorState, data: st.DataObject) -> None:
    """Indexes outside [0, total) fail."""
    index = data.draw(outside(state.total))
    with pytest.raises(OutOfBoundsError):
        state.move_to(index)


@given(state=states(), data=st.data())
def test_transitions_leave_original_untouched(
    state: PageIndicatorState, data: st.DataObject
) -> None:
    """Transitions on separate references yield independent results."""
    before = (state.total, state.current)
    copy = PageIndicatorState(total=state.total, current=state.current)
    index = data.draw(st.integers(min_value=0, max_value=state.total - 1))
    first = state.move_to(index)
    second = copy.move_to(index)
    assert first == second
    assert first is not second
    assert (state.total, state.current) == before
    assert (copy.total, copy.current) == before


@given(state=states())
def test_exactly_one_mark_selected(state: PageIndicatorState) -> None:
    """Renderers always see a single highlighted mark."""
    selected = [mark.index for mark in state.marks() if mark.selected]
    assert selected == [state.current]
