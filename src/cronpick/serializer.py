"""Rendering of parsed segments into field strings."""

from __future__ import annotations

from typing import Iterable, Sequence

from cronpick.errors import MalformedSegments
from cronpick.formatter import format_value
from cronpick.options import RenderOptions
from cronpick.parser import parse_selection
from cronpick.segments import ParsedSegment, Range, SingleValue, StepPattern, Wildcard
from cronpick.units import UnitSpec

_DEFAULT_OPTIONS = RenderOptions()


def check_segments(segments: Sequence[ParsedSegment], unit: UnitSpec) -> None:
    """Verify segments are in domain, ascending and non-overlapping.

    Raises:
        MalformedSegments: If the sequence could not come from parse_selection.
    """
    if not segments:
        raise MalformedSegments("Empty segment sequence")
    if any(isinstance(s, Wildcard) for s in segments):
        if len(segments) != 1:
            raise MalformedSegments("Wildcard cannot be combined with other segments")
        return

    last_covered: int | None = None
    for segment in segments:
        covered = segment.covers(unit)
        if not covered or not (unit.contains(covered[0]) and unit.contains(covered[-1])):
            raise MalformedSegments(f"{segment!r} lies outside {unit.type.value} domain")
        if last_covered is not None and covered[0] <= last_covered:
            raise MalformedSegments(f"{segment!r} overlaps or precedes the previous segment")
        last_covered = covered[-1]


def _segment_to_string(
    segment: ParsedSegment,
    unit: UnitSpec,
    options: RenderOptions,
) -> str:
    if isinstance(segment, Wildcard):
        return "*"
    if isinstance(segment, SingleValue):
        return format_value(segment.value, unit, options)
    if isinstance(segment, Range):
        # Names are never combined with range syntax.
        inner = options.with_overrides(humanize=False) if unit.alt_labels else options
        return f"{format_value(segment.start, unit, inner)}-{format_value(segment.end, unit, inner)}"
    if isinstance(segment, StepPattern):
        if segment.offset != unit.min:
            return f"{segment.offset}/{segment.divisor}"
        if options.humanize:
            return f"{options.every_text} {segment.divisor}"
        return f"*/{segment.divisor}"
    raise MalformedSegments(f"Unknown segment: {segment!r}")


def serialize_segments(
    segments: Sequence[ParsedSegment],
    unit: UnitSpec,
    options: RenderOptions | None = None,
) -> str:
    """Render segments as a field string.

    Args:
        segments: Output of parse_selection.
        unit: Unit the segments belong to.
        options: Rendering options (defaults to plain numbers).

    Returns:
        Field string such as "*", "*/5", "1-5,10" or "every 15".

    Raises:
        MalformedSegments: If segments overlap, are unordered or mix a wildcard.
    """
    options = options or _DEFAULT_OPTIONS
    check_segments(segments, unit)
    return ",".join(_segment_to_string(s, unit, options) for s in segments)


def render_field(
    values: Iterable[int],
    unit: UnitSpec,
    options: RenderOptions | None = None,
) -> str:
    """Parse a selection and render it in one step."""
    return serialize_segments(parse_selection(values, unit), unit, options)
