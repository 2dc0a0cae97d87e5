"""Grouping of a selection into field segments.

The parser turns an unordered collection of values into the shortest
ordered sequence of segments:

    1. Empty selection (or the whole domain): a single wildcard.
    2. A selection fully explained by a step pattern: that pattern alone.
    3. Otherwise runs of three or more consecutive values become ranges and
       everything else stays as single values.
"""

from __future__ import annotations

from typing import Iterable

from cronpick.segments import ParsedSegment, Range, SingleValue, StepPattern, Wildcard
from cronpick.units import UnitSpec

# Shortest run of consecutive values written as a range.
MIN_RANGE_LENGTH = 3
# Fewest values written as a step pattern.
MIN_STEP_LENGTH = 3


def normalize_selection(values: Iterable[int], unit: UnitSpec) -> tuple[int, ...]:
    """Validate, dedupe and sort a selection.

    The full domain normalizes to the empty selection.

    Raises:
        ValueOutOfRange: If any value is outside the unit's domain.
    """
    distinct = {unit.validate(int(v)) for v in values}
    if len(distinct) == unit.total:
        return ()
    return tuple(sorted(distinct))


def find_step(values: tuple[int, ...], unit: UnitSpec) -> StepPattern | None:
    """Return the step pattern that exactly covers values, if any.

    Values must already be normalized. Fewer than MIN_STEP_LENGTH values
    never form a step, so {0, 30} stays a list rather than */30.
    """
    if len(values) < MIN_STEP_LENGTH:
        return None

    divisor = values[1] - values[0]
    if divisor < 2:
        return None
    if values[0] - unit.min >= divisor:
        return None
    for previous, current in zip(values, values[1:]):
        if current - previous != divisor:
            return None
    if values[-1] + divisor <= unit.max:
        return None

    return StepPattern(values[0], divisor)


def _runs(values: tuple[int, ...]) -> list[tuple[int, int]]:
    runs: list[tuple[int, int]] = []
    start = previous = values[0]
    for value in values[1:]:
        if value != previous + 1:
            runs.append((start, previous))
            start = value
        previous = value
    runs.append((start, previous))
    return runs


def parse_selection(values: Iterable[int], unit: UnitSpec) -> tuple[ParsedSegment, ...]:
    """Group a selection into ordered, non-overlapping segments.

    Args:
        values: Selected values, in any order, duplicates allowed.
        unit: Unit the values belong to.

    Returns:
        Segments ascending by first covered value.

    Raises:
        ValueOutOfRange: If any value is outside the unit's domain.
    """
    selection = normalize_selection(values, unit)
    if not selection:
        return (Wildcard(),)

    step = find_step(selection, unit)
    if step is not None:
        return (step,)

    segments: list[ParsedSegment] = []
    for start, end in _runs(selection):
        if end - start + 1 >= MIN_RANGE_LENGTH:
            segments.append(Range(start, end))
        else:
            segments.extend(SingleValue(v) for v in range(start, end + 1))
    return tuple(segments)
