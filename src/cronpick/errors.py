"""Exceptions raised by cronpick.

All errors derive from CronPickError, which is itself a ValueError so that
callers treating bad input generically keep working.
"""

from __future__ import annotations


class CronPickError(ValueError):
    """Base class for all cronpick errors."""


class InvalidUnitSpec(CronPickError):
    """Raised when a UnitSpec describes an empty or inconsistent domain."""


class ValueOutOfRange(CronPickError):
    """Raised when a value falls outside a unit's domain."""

    def __init__(self, value: int, minimum: int, maximum: int, unit: str = "") -> None:
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        self.unit = unit
        where = f" for {unit}" if unit else ""
        super().__init__(f"Value {value} out of range [{minimum}-{maximum}]{where}")


class FieldParseError(CronPickError):
    """Raised when field text cannot be decoded."""

    def __init__(self, message: str, text: str = "", position: int = -1) -> None:
        self.text = text
        self.position = position
        super().__init__(message)


class MalformedSegments(CronPickError):
    """Raised when a segment sequence overlaps, is out of order or mixes a wildcard."""


class ConfigError(CronPickError):
    """Raised when configuration values are invalid."""
