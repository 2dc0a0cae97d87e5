"""Syntactic segments of a field.

A field string is a comma separated list of segments. Each segment type
knows which values it covers, so a parsed sequence can always be expanded
back into a selection.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from cronpick.errors import MalformedSegments
from cronpick.units import UnitSpec


@dataclass(frozen=True)
class Wildcard:
    """Every value in the domain (``*``)."""

    @property
    def first(self) -> int | None:
        return None

    def covers(self, unit: UnitSpec) -> tuple[int, ...]:
        return tuple(unit.domain())


@dataclass(frozen=True)
class SingleValue:
    value: int

    @property
    def first(self) -> int:
        return self.value

    def covers(self, unit: UnitSpec) -> tuple[int, ...]:
        return (self.value,)


@dataclass(frozen=True)
class Range:
    """Inclusive run of consecutive values (``start-end``)."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start >= self.end:
            raise MalformedSegments(f"Range start must be below end: {self.start}-{self.end}")

    @property
    def first(self) -> int:
        return self.start

    def covers(self, unit: UnitSpec) -> tuple[int, ...]:
        return tuple(range(self.start, self.end + 1))


@dataclass(frozen=True)
class StepPattern:
    """Every ``divisor``-th value from ``offset`` to the end of the domain."""

    offset: int
    divisor: int

    def __post_init__(self) -> None:
        if self.divisor < 2:
            raise MalformedSegments(f"Step divisor must be at least 2, got {self.divisor}")

    @property
    def first(self) -> int:
        return self.offset

    def covers(self, unit: UnitSpec) -> tuple[int, ...]:
        return tuple(range(self.offset, unit.max + 1, self.divisor))


ParsedSegment = Union[Wildcard, SingleValue, Range, StepPattern]


def selection_of(segments: tuple[ParsedSegment, ...], unit: UnitSpec) -> tuple[int, ...]:
    """Expand segments into a sorted selection.

    A lone wildcard expands to the empty selection, which is how the full
    domain is represented.
    """
    if any(isinstance(s, Wildcard) for s in segments):
        return ()
    values: set[int] = set()
    for segment in segments:
        values.update(segment.covers(unit))
    if len(values) == unit.total:
        return ()
    return tuple(sorted(values))
