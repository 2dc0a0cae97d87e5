"""Decoding of field strings back into selections.

Syntax Reference:
    *           Any value (decodes to the empty selection)
    ,           List separator (1,3,5)
    -           Range (1-5, FRI-MON wraps around)
    /           Step (*/15, 5/15, 10-40/10)
    every N     Humanized step, same as */N
    JAN, MON    Month and weekday names (or the unit's alt labels)
    3PM, 12AM   Hours in 12-hour notation
    7           Sunday in the weekday field
"""

from __future__ import annotations

import re

from cronpick.errors import FieldParseError, ValueOutOfRange
from cronpick.options import RenderOptions
from cronpick.parser import normalize_selection
from cronpick.units import BUILTIN_NAMES, UnitSpec, UnitType

_CLOCK_RE = re.compile(r"^(\d{1,2})\s*(AM|PM)$")


class FieldParser:
    """Parser for a single cron field.

    Example:
        >>> FieldParser(MINUTES).parse("*/15")
        (0, 15, 30, 45)
        >>> FieldParser(MONTHS).parse("JAN-MAR,DEC")
        (1, 2, 3, 12)
    """

    def __init__(self, unit: UnitSpec, options: RenderOptions | None = None) -> None:
        """Initialize parser.

        Args:
            unit: Unit the field belongs to.
            options: Options the text was rendered with; only every_text is
                used, to recognise humanized steps.
        """
        self._unit = unit
        self._every_text = (options or RenderOptions()).every_text.strip().lower()
        self._names = dict(BUILTIN_NAMES.get(unit.type, {}))
        if unit.alt_labels:
            for value in unit.domain():
                self._names[unit.alt_labels[unit.label_index(value)].strip().upper()] = value
        self._text = ""

    def parse(self, text: str) -> tuple[int, ...]:
        """Decode field text into a normalized selection.

        Raises:
            FieldParseError: If the text is malformed.
            ValueOutOfRange: If a value is outside the unit's domain.
        """
        self._text = text
        part = text.strip()
        if not part:
            raise FieldParseError("Empty field", text)

        if part == "*":
            return ()

        humanized = self._resolve_humanized(part)
        if humanized is not None:
            part = humanized

        values: set[int] = set()
        position = 0
        for segment in part.split(","):
            stripped = segment.strip()
            if not stripped:
                raise FieldParseError(f"Empty list item in {text!r}", text, position)
            if "/" in stripped:
                values.update(self._parse_step(stripped, position))
            elif stripped == "*":
                values.update(self._unit.domain())
            elif "-" in stripped:
                values.update(self._parse_range(stripped, position))
            else:
                values.add(self._resolve_value(stripped, position))
            position += len(segment) + 1

        return normalize_selection(values, self._unit)

    def _resolve_humanized(self, part: str) -> str | None:
        """Translate "every N" into "*/N"."""
        lower = part.lower()
        prefix = f"{self._every_text} "
        if lower.startswith(prefix):
            return f"*/{part[len(prefix):].strip()}"
        return None

    def _parse_step(self, segment: str, position: int) -> set[int]:
        """Parse step expression (*/n, a/n or a-b/n)."""
        parts = segment.split("/")
        if len(parts) != 2:
            raise FieldParseError(f"Invalid step: {segment}", self._text, position)

        try:
            step = int(parts[1])
        except ValueError:
            raise FieldParseError(f"Invalid step: {segment}", self._text, position)
        if step <= 0:
            raise FieldParseError(f"Step must be positive: {step}", self._text, position)

        base = parts[0].strip()
        if base == "*":
            start, end = self._unit.min, self._unit.max
        elif "-" in base:
            bounds = base.split("-")
            if len(bounds) != 2:
                raise FieldParseError(f"Invalid range: {base}", self._text, position)
            start = self._resolve_value(bounds[0], position)
            end = self._resolve_value(bounds[1], position)
            if start > end:
                raise FieldParseError(
                    f"Stepped range must be ascending: {segment}", self._text, position
                )
        else:
            start = self._resolve_value(base, position)
            end = self._unit.max

        values = set(range(start, end + 1, step))
        if not values:
            raise FieldParseError(f"Step selects no values: {segment}", self._text, position)
        return values

    def _parse_range(self, segment: str, position: int) -> set[int]:
        """Parse range expression (a-b)."""
        parts = segment.split("-")
        if len(parts) != 2:
            raise FieldParseError(f"Invalid range: {segment}", self._text, position)

        start = self._resolve_value(parts[0], position)
        end = self._resolve_value(parts[1], position)

        if start > end:
            # Wraparound (e.g., FRI-MON)
            values = set(range(start, self._unit.max + 1))
            values.update(range(self._unit.min, end + 1))
            return values

        return set(range(start, end + 1))

    def _resolve_value(self, token: str, position: int) -> int:
        """Resolve a value (number, name or clock label) to an integer."""
        value = token.strip().upper()
        if not value:
            raise FieldParseError(f"Missing value in {self._text!r}", self._text, position)

        if value in self._names:
            return self._names[value]

        match = _CLOCK_RE.match(value)
        if match and self._unit.type == UnitType.HOUR:
            hour = int(match.group(1))
            if not 1 <= hour <= 12:
                raise ValueOutOfRange(hour, 1, 12, "12-hour clock")
            hour %= 12
            if match.group(2) == "PM":
                hour += 12
            return self._unit.validate(hour)

        try:
            num = int(value)
        except ValueError:
            raise FieldParseError(f"Invalid value: {token.strip()}", self._text, position)

        if self._unit.type == UnitType.WEEKDAY and num == 7 and not self._unit.contains(7):
            num = 0
        return self._unit.validate(num)


def parse_field(
    text: str,
    unit: UnitSpec,
    options: RenderOptions | None = None,
) -> tuple[int, ...]:
    """Decode field text into a normalized selection.

    Args:
        text: Field string such as "*/5" or "JAN,MAR".
        unit: Unit the field belongs to.
        options: Options the text was rendered with.

    Returns:
        Sorted selection; the empty tuple stands for the whole domain.
    """
    return FieldParser(unit, options).parse(text)


def is_valid_field(text: str, unit: UnitSpec) -> bool:
    """Check if field text decodes for unit."""
    try:
        parse_field(text, unit)
        return True
    except (FieldParseError, ValueOutOfRange):
        return False
