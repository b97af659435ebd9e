"""Page indicator business logic - platform agnostic."""

from collections import deque
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from src.core.errors import InvalidPageCountError, OutOfBoundsError
from src.core.logging import get_logger

logger = get_logger(__name__)

PageChangeCallback = Callable[["PageIndicatorState", "PageIndicatorState"], None]


def _require_int(name: str, value: object) -> None:
    # bool is an int subclass but never a page position
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


@dataclass(frozen=True)
class IndicatorMark:
    """One indicator mark as a renderer sees it."""

    index: int
    selected: bool


@dataclass(frozen=True)
class PageIndicatorState:
    """Position among a fixed number of pages.

    ``total == 0`` is the empty indicator: it only accepts ``current == 0``
    and every transition on it raises OutOfBoundsError.
    """

    total: int
    current: int = 0

    def __post_init__(self) -> None:
        _require_int("total", self.total)
        _require_int("current", self.current)
        if self.total < 0:
            raise InvalidPageCountError(self.total)
        if self.total == 0:
            if self.current != 0:
                raise OutOfBoundsError(self.current, self.total)
        elif not 0 <= self.current < self.total:
            raise OutOfBoundsError(self.current, self.total)

    @classmethod
    def create(cls, total: int, current: int = 0) -> "PageIndicatorState":
        """Create a validated state, raising OutOfBoundsError on a bad position."""
        return cls(total=total, current=current)

    @property
    def is_empty(self) -> bool:
        return self.total == 0

    @property
    def has_next(self) -> bool:
        return self.current < self.total - 1

    @property
    def has_prev(self) -> bool:
        return self.current > 0

    def is_current(self, index: int) -> bool:
        """Whether the mark at ``index`` is the highlighted one."""
        _require_int("index", index)
        return not self.is_empty and index == self.current

    def marks(self) -> Iterator[IndicatorMark]:
        """Yield one mark per page, in page order."""
        for index in range(self.total):
            yield IndicatorMark(index=index, selected=index == self.current)

    def step_forward(self) -> "PageIndicatorState":
        """Move to the next page, returns new state."""
        if not self.has_next:
            raise OutOfBoundsError(self.current + 1, self.total)
        return PageIndicatorState(total=self.total, current=self.current + 1)

    def step_backward(self) -> "PageIndicatorState":
        """Move to the previous page, returns new state."""
        if not self.has_prev:
            raise OutOfBoundsError(self.current - 1, self.total)
        return PageIndicatorState(total=self.total, current=self.current - 1)

    def move_to(self, index: int) -> "PageIndicatorState":
        """Jump to a specific page, returns new state."""
        _require_int("index", index)
        if not 0 <= index < self.total:
            raise OutOfBoundsError(index, self.total)
        return PageIndicatorState(total=self.total, current=index)


@dataclass(eq=False)
class _Subscription:
    callback: PageChangeCallback


class PageIndicatorController:
    """Holds the state a presentation layer renders and applies transitions.

    Successful transitions replace the held state and notify subscribers with
    ``(old, new)``. Rejected transitions leave the held state untouched.
    A transition started by an observer takes effect at once, but its
    notification is delivered after every observer has seen the current one.
    """

    def __init__(self, state: PageIndicatorState) -> None:
        self._state = state
        self._subscribers: list[_Subscription] = []
        # Changes made by observers wait until the current round is delivered
        self._pending: deque[tuple[PageIndicatorState, PageIndicatorState]] = deque()
        self._notifying = False

    @property
    def state(self) -> PageIndicatorState:
        return self._state

    def subscribe(self, callback: PageChangeCallback) -> Callable[[], None]:
        """Register a change observer.

        Args:
            callback: Called with the previous and the new state.

        Returns:
            A callable that removes the observer again.
        """
        subscription = _Subscription(callback)
        self._subscribers.append(subscription)

        def unsubscribe() -> None:
            self._subscribers = [s for s in self._subscribers if s is not subscription]

        return unsubscribe

    def step_forward(self) -> PageIndicatorState:
        return self._apply("step_forward", self._state.step_forward)

    def step_backward(self) -> PageIndicatorState:
        return self._apply("step_backward", self._state.step_backward)

    def move_to(self, index: int) -> PageIndicatorState:
        return self._apply("move_to", lambda: self._state.move_to(index))

    def try_step_forward(self) -> bool:
        """Step forward unless already at the last page."""
        return self._try(self.step_forward)

    def try_step_backward(self) -> bool:
        """Step backward unless already at the first page."""
        return self._try(self.step_backward)

    def try_move_to(self, index: int) -> bool:
        """Jump to ``index`` if it names an existing page."""
        return self._try(lambda: self.move_to(index))

    def reset(self, state: PageIndicatorState) -> None:
        """Replace the held state, e.g. after the page count changed."""
        old = self._state
        self._state = state
        logger.debug(
            "page_indicator_reset",
            old_total=old.total,
            total=state.total,
            current=state.current,
        )
        self._notify(old, state)

    def _apply(
        self, transition: str, step: Callable[[], PageIndicatorState]
    ) -> PageIndicatorState:
        old = self._state
        try:
            new = step()
        except OutOfBoundsError as ex:
            logger.info(
                "page_transition_rejected",
                transition=transition,
                total=ex.total,
                current=old.current,
                requested=ex.index,
            )
            raise
        self._state = new
        logger.debug(
            "page_changed",
            transition=transition,
            total=new.total,
            previous=old.current,
            current=new.current,
        )
        self._notify(old, new)
        return new

    def _try(self, action: Callable[[], PageIndicatorState]) -> bool:
        try:
            action()
        except OutOfBoundsError:
            return False
        return True

    def _notify(self, old: PageIndicatorState, new: PageIndicatorState) -> None:
        self._pending.append((old, new))
        if self._notifying:
            return
        self._notifying = True
        try:
            while self._pending:
                self._deliver(*self._pending.popleft())
        finally:
            self._notifying = False

    def _deliver(self, old: PageIndicatorState, new: PageIndicatorState) -> None:
        # Copy so observers may unsubscribe while being notified
        for subscription in list(self._subscribers):
            callback = subscription.callback
            try:
                callback(old, new)
            except Exception:
                logger.exception(
                    "page_observer_failed",
                    callback=getattr(callback, "__qualname__", repr(callback)),
                )
