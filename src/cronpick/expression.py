"""Splitting and joining whole five-field cron expressions.

Each field is decoded and rendered independently; no check is made that
the fields make sense together.
"""

from __future__ import annotations

from typing import Mapping, Sequence

from cronpick.errors import ConfigError, FieldParseError
from cronpick.grammar import parse_field
from cronpick.options import RenderOptions
from cronpick.serializer import render_field
from cronpick.units import UNITS, UnitType

FIELD_ORDER: tuple[UnitType, ...] = (
    UnitType.MINUTE,
    UnitType.HOUR,
    UnitType.DAY,
    UnitType.MONTH,
    UnitType.WEEKDAY,
)

# Predefined expression aliases
ALIASES: dict[str, str] = {
    "@yearly": "0 0 1 1 *",
    "@annually": "0 0 1 1 *",
    "@monthly": "0 0 1 * *",
    "@weekly": "0 0 * * 0",
    "@daily": "0 0 * * *",
    "@midnight": "0 0 * * *",
    "@hourly": "0 * * * *",
}


def resolve_alias(expression: str) -> str:
    """Replace a predefined alias by its five-field form."""
    stripped = expression.strip()
    return ALIASES.get(stripped.lower(), stripped)


def split_expression(expression: str) -> dict[UnitType, tuple[int, ...]]:
    """Decode a cron expression into one selection per field.

    Raises:
        FieldParseError: If the expression does not have five fields or a
            field is malformed.
        ValueOutOfRange: If a value is outside its field's domain.
    """
    parts = resolve_alias(expression).split()
    if len(parts) != len(FIELD_ORDER):
        raise FieldParseError(
            f"Invalid number of fields: {len(parts)}. Expected {len(FIELD_ORDER)} fields.",
            expression,
        )
    return {
        unit_type: parse_field(part, UNITS[unit_type])
        for unit_type, part in zip(FIELD_ORDER, parts)
    }


def join_expression(
    selections: Mapping[UnitType, Sequence[int]],
    options: RenderOptions | None = None,
) -> str:
    """Render one selection per field as a cron expression.

    Missing fields render as "*". Humanized options are rejected since
    phrases such as "every 5" contain spaces.
    """
    options = options or RenderOptions()
    if options.humanize:
        raise ConfigError("Expressions cannot be rendered with humanized labels")
    return " ".join(
        render_field(selections.get(unit_type, ()), UNITS[unit_type], options)
        for unit_type in FIELD_ORDER
    )
