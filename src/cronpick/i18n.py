"""Locale strings used when rendering fields.

Only the phrases needed by the codec live here: the step-pattern phrase,
the placeholder shown for an empty selection, and month/weekday names.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from cronpick.errors import ConfigError
from cronpick.units import MONTH_NAMES, WEEKDAY_NAMES, UnitSpec, UnitType


@dataclass(frozen=True)
class Locale:
    """Phrases and labels for one language.

    Attributes:
        every_text: Phrase placed before the divisor of a humanized step.
        placeholder: Text shown when nothing is selected.
        months: Twelve month labels, January first.
        weekdays: Seven weekday labels, Sunday first.
    """

    every_text: str = "every"
    placeholder: str = ""
    months: tuple[str, ...] = field(default=MONTH_NAMES)
    weekdays: tuple[str, ...] = field(default=WEEKDAY_NAMES)

    def __post_init__(self) -> None:
        object.__setattr__(self, "months", tuple(self.months))
        object.__setattr__(self, "weekdays", tuple(self.weekdays))
        if len(self.months) != 12:
            raise ConfigError(f"Locale needs 12 month labels, got {len(self.months)}")
        if len(self.weekdays) != 7:
            raise ConfigError(f"Locale needs 7 weekday labels, got {len(self.weekdays)}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "every_text": self.every_text,
            "placeholder": self.placeholder,
            "months": list(self.months),
            "weekdays": list(self.weekdays),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Locale":
        """Create from dictionary; missing keys fall back to English."""
        return cls(
            every_text=data.get("every_text", DEFAULT_LOCALE_EN.every_text),
            placeholder=data.get("placeholder", DEFAULT_LOCALE_EN.placeholder),
            months=tuple(data.get("months", DEFAULT_LOCALE_EN.months)),
            weekdays=tuple(data.get("weekdays", DEFAULT_LOCALE_EN.weekdays)),
        )


DEFAULT_LOCALE_EN = Locale()


def unit_with_locale(unit: UnitSpec, locale: Locale) -> UnitSpec:
    """Attach the locale's month or weekday names to a unit.

    Other units are returned unchanged.
    """
    if unit.type == UnitType.MONTH and unit.total == 12:
        return unit.with_labels(locale.months)
    if unit.type == UnitType.WEEKDAY and unit.total == 7:
        return unit.with_labels(locale.weekdays)
    return unit
