"""Rendering options for field labels and strings."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

from cronpick.errors import ConfigError


class ClockFormat(str, Enum):
    """Convention for hour labels."""

    TWELVE_HOUR = "12h"
    TWENTY_FOUR_HOUR = "24h"
    NONE = "none"

    @classmethod
    def from_string(cls, value: str | None) -> "ClockFormat":
        """Convert string to ClockFormat, accepting a few spellings."""
        if value is None:
            return cls.NONE
        mapping = {
            "12h": cls.TWELVE_HOUR,
            "12": cls.TWELVE_HOUR,
            "12-hour-clock": cls.TWELVE_HOUR,
            "24h": cls.TWENTY_FOUR_HOUR,
            "24": cls.TWENTY_FOUR_HOUR,
            "24-hour-clock": cls.TWENTY_FOUR_HOUR,
            "none": cls.NONE,
            "": cls.NONE,
        }
        try:
            return mapping[value.strip().lower()]
        except KeyError:
            raise ConfigError(f"Unknown clock format: {value!r}")


@dataclass(frozen=True)
class RenderOptions:
    """Pure formatting inputs.

    Attributes:
        humanize: Use alt labels for single values and the every_text phrase
            for step patterns.
        leading_zero: Zero-pad numbers to the width of the unit's maximum.
        clock_format: 12h adds AM/PM to hours, 24h pads hours and minutes.
        every_text: Phrase used for humanized step patterns.
    """

    humanize: bool = False
    leading_zero: bool = False
    clock_format: ClockFormat = ClockFormat.NONE
    every_text: str = "every"

    def __post_init__(self) -> None:
        if isinstance(self.clock_format, str) and not isinstance(self.clock_format, ClockFormat):
            object.__setattr__(self, "clock_format", ClockFormat.from_string(self.clock_format))
        if not self.every_text.strip():
            raise ConfigError("every_text must not be blank")

    def with_overrides(self, **kwargs: Any) -> "RenderOptions":
        return replace(self, **kwargs)

    def to_dict(self) -> dict[str, Any]:
        return {
            "humanize": self.humanize,
            "leading_zero": self.leading_zero,
            "clock_format": self.clock_format.value,
            "every_text": self.every_text,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RenderOptions":
        return cls(
            humanize=bool(data.get("humanize", False)),
            leading_zero=bool(data.get("leading_zero", False)),
            clock_format=ClockFormat.from_string(data.get("clock_format")),
            every_text=data.get("every_text", "every"),
        )

    @classmethod
    def plain(cls) -> "RenderOptions":
        """Raw cron syntax."""
        return cls()

    @classmethod
    def human(cls, every_text: str = "every") -> "RenderOptions":
        """Names for months/weekdays and a phrase for steps."""
        return cls(humanize=True, every_text=every_text)
