"""Shared fixtures for cronpick tests.

Click handling depends on wall-clock time and background timers. The
fixtures below replace both with manual versions so tests decide exactly
when time passes and when a timer fires.
"""

from __future__ import annotations

from typing import Any, Callable

import pytest


class FakeClock:
    """Monotonic clock advanced by hand."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeTimer:
    """Stand-in for threading.Timer that only fires when told to."""

    def __init__(
        self,
        interval: float,
        function: Callable[..., Any],
        args: tuple[Any, ...] | None = None,
    ) -> None:
        self.interval = interval
        self.function = function
        self.args = tuple(args or ())
        self.daemon = False
        self.started = False
        self.cancelled = False

    def start(self) -> None:
        self.started = True

    def cancel(self) -> None:
        self.cancelled = True

    def run(self) -> None:
        """Invoke the callback as a timer thread already past its wait would."""
        self.function(*self.args)

    def fire(self) -> None:
        if self.started and not self.cancelled:
            self.run()


class TimerFactory:
    """Records every timer created so tests can fire them."""

    def __init__(self) -> None:
        self.timers: list[FakeTimer] = []

    def __call__(
        self,
        interval: float,
        function: Callable[..., Any],
        args: tuple[Any, ...] | None = None,
    ) -> FakeTimer:
        timer = FakeTimer(interval, function, args)
        self.timers.append(timer)
        return timer

    @property
    def last(self) -> FakeTimer:
        return self.timers[-1]

    def fire_last(self) -> None:
        self.last.fire()


class SelectionState:
    """Consumer-owned selection, exposed as getter and setter."""

    def __init__(self, value: tuple[int, ...] = ()) -> None:
        self.value = value
        self.history: list[tuple[int, ...]] = []

    def get(self) -> tuple[int, ...]:
        return self.value

    def set(self, value: tuple[int, ...]) -> None:
        self.value = value
        self.history.append(value)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def timers() -> TimerFactory:
    return TimerFactory()


@pytest.fixture
def state() -> SelectionState:
    return SelectionState()
