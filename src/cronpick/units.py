"""Numeric domains of the cron fields.

A UnitSpec describes the values one field can take. The five standard cron
fields are predefined::

    Field         Values
    ──────────────────────────────
    Minute        0-59
    Hour          0-23
    Day of Month  1-31
    Month         1-12 or JAN-DEC
    Day of Week   0-6 or SUN-SAT
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Sequence

from cronpick.errors import InvalidUnitSpec, ValueOutOfRange


class UnitType(str, Enum):
    """Types of cron fields, in expression order."""

    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    MONTH = "month"
    WEEKDAY = "weekday"


@dataclass(frozen=True)
class UnitSpec:
    """Domain of one cron field.

    Attributes:
        type: Which field this unit describes.
        min: Smallest valid value.
        total: Number of valid values, so the domain is [min, min+total-1].
        alt_labels: Optional names, one per value, used for humanized output.
    """

    type: UnitType
    min: int
    total: int
    alt_labels: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        if self.total <= 0:
            raise InvalidUnitSpec(
                f"{self.type.value} unit must have a positive total, got {self.total}"
            )
        if self.alt_labels is not None:
            if not isinstance(self.alt_labels, tuple):
                object.__setattr__(self, "alt_labels", tuple(self.alt_labels))
            if len(self.alt_labels) != self.total:
                raise InvalidUnitSpec(
                    f"{self.type.value} unit has {len(self.alt_labels)} labels "
                    f"for {self.total} values"
                )

    @property
    def max(self) -> int:
        return self.min + self.total - 1

    def domain(self) -> range:
        """All valid values in ascending order."""
        return range(self.min, self.min + self.total)

    def contains(self, value: int) -> bool:
        return self.min <= value <= self.max

    def validate(self, value: int) -> int:
        """Return value unchanged, or raise ValueOutOfRange."""
        if not self.contains(value):
            raise ValueOutOfRange(value, self.min, self.max, self.type.value)
        return value

    def label_index(self, value: int) -> int:
        """Position of value in alt_labels."""
        return value if self.min == 0 else value - 1

    def with_labels(self, labels: Sequence[str] | None) -> "UnitSpec":
        """Copy of this unit with different alt labels."""
        return replace(self, alt_labels=tuple(labels) if labels is not None else None)


MONTH_NAMES: tuple[str, ...] = (
    "JAN", "FEB", "MAR", "APR", "MAY", "JUN",
    "JUL", "AUG", "SEP", "OCT", "NOV", "DEC",
)
WEEKDAY_NAMES: tuple[str, ...] = ("SUN", "MON", "TUE", "WED", "THU", "FRI", "SAT")

MINUTES = UnitSpec(UnitType.MINUTE, 0, 60)
HOURS = UnitSpec(UnitType.HOUR, 0, 24)
DAYS = UnitSpec(UnitType.DAY, 1, 31)
MONTHS = UnitSpec(UnitType.MONTH, 1, 12, MONTH_NAMES)
WEEKDAYS = UnitSpec(UnitType.WEEKDAY, 0, 7, WEEKDAY_NAMES)

UNITS: dict[UnitType, UnitSpec] = {
    UnitType.MINUTE: MINUTES,
    UnitType.HOUR: HOURS,
    UnitType.DAY: DAYS,
    UnitType.MONTH: MONTHS,
    UnitType.WEEKDAY: WEEKDAYS,
}

# Built-in names accepted when decoding text, regardless of alt labels.
BUILTIN_NAMES: dict[UnitType, dict[str, int]] = {
    UnitType.MONTH: {name: i + 1 for i, name in enumerate(MONTH_NAMES)},
    UnitType.WEEKDAY: {name: i for i, name in enumerate(WEEKDAY_NAMES)},
}


def get_unit(name: str | UnitType) -> UnitSpec:
    """Look up a built-in unit by type or name.

    Accepts the enum, its value, or a plural form ("minutes", "weekdays").

    Raises:
        InvalidUnitSpec: If no built-in unit matches.
    """
    if isinstance(name, UnitType):
        return UNITS[name]
    key = name.strip().lower()
    if key.endswith("s") and key[:-1] in UnitType._value2member_map_:
        key = key[:-1]
    try:
        return UNITS[UnitType(key)]
    except ValueError:
        choices = ", ".join(t.value for t in UnitType)
        raise InvalidUnitSpec(f"Unknown unit: {name!r}. Expected one of: {choices}")
