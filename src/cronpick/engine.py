"""Selection transitions and click classification.

SelectionEngine computes new selections from picks; it never stores a
selection. ClickBuffer is a bounded debounce accumulator: clicks arriving
within the double-click window are collected and classified once, when the
window's timer fires.

Example:
    >>> engine = SelectionEngine(MINUTES)
    >>> engine.simple_click((1, 2), 3)
    (1, 2, 3)
    >>> engine.toggle_double_click((), 15)
    (0, 15, 30, 45)
"""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable, Sequence

from cronpick.parser import normalize_selection
from cronpick.units import UnitSpec

logger = logging.getLogger(__name__)

DOUBLE_CLICK_TIMEOUT = 0.3


class SelectMode(str, Enum):
    """Whether a field holds one value or many."""

    SINGLE = "single"
    MULTIPLE = "multiple"


class ClickKind(Enum):
    """Outcome of classifying a burst of clicks."""

    SIMPLE = "simple"
    DOUBLE = "double"
    PAIR = "pair"


@dataclass(frozen=True)
class ClickEvent:
    time: float
    value: int


@dataclass(frozen=True)
class ClickClassification:
    """What a burst of clicks means.

    Attributes:
        kind: SIMPLE toggles values, DOUBLE toggles a periodicity,
            PAIR toggles two different values picked in quick succession.
        values: Values involved, in click order.
    """

    kind: ClickKind
    values: tuple[int, ...]


class SelectionEngine:
    """Pure selection transitions for one field.

    Args:
        unit: Unit the field belongs to.
        mode: Single or multiple selection.
        option_count: Number of options offered; defaults to unit.total.
            A periodicity covering every offered option clears the field.
    """

    def __init__(
        self,
        unit: UnitSpec,
        mode: SelectMode = SelectMode.MULTIPLE,
        option_count: int | None = None,
    ) -> None:
        self._unit = unit
        self._mode = SelectMode(mode)
        self._option_count = unit.total if option_count is None else option_count

    @property
    def unit(self) -> UnitSpec:
        return self._unit

    @property
    def mode(self) -> SelectMode:
        return self._mode

    def simple_click(self, current: Iterable[int], picked: int | Iterable[int]) -> tuple[int, ...]:
        """Toggle picked values in the current selection.

        In single mode the pick replaces the selection. A result covering
        the whole domain becomes the empty selection.

        Raises:
            ValueOutOfRange: If a picked value is outside the unit's domain.
        """
        picks = [picked] if isinstance(picked, int) else list(picked)
        for value in picks:
            self._unit.validate(value)
        if not picks:
            return normalize_selection(current, self._unit)

        # Picks arrive in click order; the last one wins.
        if self._mode == SelectMode.SINGLE:
            return normalize_selection([picks[-1]], self._unit)

        selected = set(current)
        for value in picks:
            if value in selected:
                selected.discard(value)
            else:
                selected.add(value)
        return normalize_selection(selected, self._unit)

    def toggle_double_click(self, current: Iterable[int], value: int) -> tuple[int, ...]:
        """Toggle the periodicity "every value-th".

        Values 0 and 1 clear the field. A periodicity that covers every
        option, or that is already selected, also clears it.

        Raises:
            ValueOutOfRange: If value is outside the unit's domain.
        """
        self._unit.validate(value)
        if value in (0, 1):
            return ()

        candidate = tuple(i for i in self._unit.domain() if i % value == 0)
        if len(candidate) == self._option_count:
            return ()
        if candidate == tuple(sorted(set(current))):
            return ()
        return normalize_selection(candidate, self._unit)

    def apply(self, current: Iterable[int], classification: ClickClassification) -> tuple[int, ...]:
        """Compute the selection a classified click burst leads to."""
        if classification.kind == ClickKind.DOUBLE:
            return self.toggle_double_click(current, classification.values[-1])
        if classification.kind == ClickKind.PAIR:
            return self.simple_click(current, classification.values)
        return self.simple_click(current, classification.values[-1])

    @staticmethod
    def changed_value(current: Sequence[int], selected: Sequence[int]) -> int | None:
        """Value added to or removed from current to give selected.

        Returns the newest added value when the list grew, otherwise the
        first value no longer selected, or None if nothing was removed.
        """
        if len(selected) > len(current):
            return selected[-1]
        remaining = set(selected)
        for value in current:
            if value not in remaining:
                return value
        return None


def classify_clicks(events: Sequence[ClickEvent], timeout: float = DOUBLE_CLICK_TIMEOUT) -> ClickClassification:
    """Classify buffered clicks by the last two events."""
    if not events:
        raise ValueError("Cannot classify an empty click buffer")
    last = events[-1]
    if len(events) > 1:
        previous = events[-2]
        if last.time - previous.time < timeout:
            if last.value == previous.value:
                return ClickClassification(ClickKind.DOUBLE, (last.value,))
            return ClickClassification(ClickKind.PAIR, (previous.value, last.value))
    return ClickClassification(ClickKind.SIMPLE, (last.value,))


class ClickBuffer:
    """Debounce accumulator with a single cancellable timer.

    The first click of a burst starts the timer; later clicks within the
    window are appended to the same burst. When the timer fires the burst is
    classified, the buffer cleared and the callback invoked.

    Example:
        >>> with ClickBuffer(handle) as clicks:
        ...     clicks.push(5)
        ...     clicks.push(5)  # classified as DOUBLE after 300 ms
    """

    def __init__(
        self,
        callback: Callable[[ClickClassification], None],
        timeout: float = DOUBLE_CLICK_TIMEOUT,
        clock: Callable[[], float] = time.monotonic,
        timer_factory: Callable[..., Any] = threading.Timer,
    ) -> None:
        """Initialize the buffer.

        Args:
            callback: Receives each classification.
            timeout: Double-click window in seconds.
            clock: Monotonic time source.
            timer_factory: Builds the timer; called like threading.Timer.
        """
        if timeout <= 0:
            raise ValueError("timeout must be positive")
        self._callback = callback
        self._timeout = timeout
        self._clock = clock
        self._timer_factory = timer_factory
        self._events: list[ClickEvent] = []
        self._timer: Any = None
        self._generation = 0
        self._lock = threading.RLock()

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None

    @property
    def events(self) -> tuple[ClickEvent, ...]:
        with self._lock:
            return tuple(self._events)

    def push(self, value: int) -> bool:
        """Record a click.

        Returns:
            True if this click started a new timer.
        """
        with self._lock:
            self._events.append(ClickEvent(self._clock(), value))
            if self._timer is not None:
                return False
            self._generation += 1
            timer = self._timer_factory(self._timeout, self._fire, args=(self._generation,))
            timer.daemon = True
            self._timer = timer
            timer.start()
            logger.debug("Click timer started for value %s", value)
            return True

    def _fire(self, generation: int) -> None:
        with self._lock:
            # A cancelled timer may still reach this point; only the
            # pending timer's burst is classified.
            if self._timer is None or generation != self._generation:
                logger.debug("Ignoring stale click timer %d", generation)
                return
            events = self._events
            self._events = []
            self._timer = None

        if not events:
            return
        classification = classify_clicks(events, self._timeout)
        logger.debug(
            "Classified %d click(s) as %s %s",
            len(events),
            classification.kind.value,
            classification.values,
        )
        try:
            self._callback(classification)
        except Exception:
            logger.exception("Click callback failed for %s", classification)
            raise

    def flush(self) -> ClickClassification | None:
        """Classify pending clicks now instead of waiting for the timer."""
        with self._lock:
            timer = self._timer
            events = self._events
            if timer is None or not events:
                return None
            timer.cancel()
            self._timer = None
            self._events = []
        classification = classify_clicks(events, self._timeout)
        self._callback(classification)
        return classification

    def cancel(self) -> None:
        """Cancel the pending timer and drop buffered clicks."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                logger.debug("Click timer cancelled with %d pending click(s)", len(self._events))
            self._timer = None
            self._events = []

    def __enter__(self) -> "ClickBuffer":
        return self

    def __exit__(self, *args: Any) -> None:
        self.cancel()
