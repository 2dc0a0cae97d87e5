"""Label rendering for single field values."""

from __future__ import annotations

from cronpick.options import ClockFormat, RenderOptions
from cronpick.units import UnitSpec, UnitType

_DEFAULT_OPTIONS = RenderOptions()


def format_value(
    value: int,
    unit: UnitSpec,
    options: RenderOptions | None = None,
) -> str:
    """Render one value as a label.

    Args:
        value: Value inside the unit's domain.
        unit: Unit the value belongs to.
        options: Rendering options (defaults to plain numbers).

    Returns:
        The label, e.g. "5", "05", "3PM" or "JAN".

    Raises:
        ValueOutOfRange: If value is outside the unit's domain.
    """
    options = options or _DEFAULT_OPTIONS
    unit.validate(value)

    if options.humanize and unit.alt_labels:
        return unit.alt_labels[unit.label_index(value)]

    if unit.type == UnitType.HOUR and options.clock_format == ClockFormat.TWELVE_HOUR:
        suffix = "PM" if value >= 12 else "AM"
        hour = str(value % 12 or 12)
        if options.leading_zero:
            hour = hour.zfill(2)
        return f"{hour}{suffix}"

    text = str(value)
    if options.leading_zero:
        text = text.zfill(len(str(unit.max)))
    if options.clock_format == ClockFormat.TWENTY_FOUR_HOUR and unit.type in (
        UnitType.HOUR,
        UnitType.MINUTE,
    ):
        text = text.zfill(2)
    return text
