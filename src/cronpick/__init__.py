"""cronpick: selection codec and interaction model for cron expression fields.

Features:
    - Built-in units for minutes, hours, days of month, months and weekdays
    - Value labels: zero padding, 12/24-hour clock, month and weekday names
    - Selection -> field string: wildcards, lists, ranges, step patterns
    - Field string -> selection, so every rendered field decodes back
    - Click handling with double-click periodicity ("every 5th")

Usage:
    >>> from cronpick import MINUTES, render_field, parse_field
    >>>
    >>> render_field(range(0, 60, 5), MINUTES)
    '*/5'
    >>> render_field([3, 4, 5, 10], MINUTES)
    '3-5,10'
    >>> parse_field("*/20", MINUTES)
    (0, 20, 40)
"""

from cronpick.config import SelectConfig, load_config, load_locale, save_config
from cronpick.engine import (
    ClickBuffer,
    ClickClassification,
    ClickEvent,
    ClickKind,
    SelectionEngine,
    SelectMode,
    classify_clicks,
)
from cronpick.errors import (
    ConfigError,
    CronPickError,
    FieldParseError,
    InvalidUnitSpec,
    MalformedSegments,
    ValueOutOfRange,
)
from cronpick.expression import join_expression, split_expression
from cronpick.formatter import format_value
from cronpick.grammar import FieldParser, is_valid_field, parse_field
from cronpick.i18n import DEFAULT_LOCALE_EN, Locale, unit_with_locale
from cronpick.options import ClockFormat, RenderOptions
from cronpick.parser import normalize_selection, parse_selection
from cronpick.segments import (
    ParsedSegment,
    Range,
    SingleValue,
    StepPattern,
    Wildcard,
    selection_of,
)
from cronpick.select import (
    FieldSelect,
    MultiFieldSelect,
    SelectOption,
    SingleFieldSelect,
    create_select,
)
from cronpick.serializer import render_field, serialize_segments
from cronpick.units import (
    DAYS,
    HOURS,
    MINUTES,
    MONTHS,
    WEEKDAYS,
    UnitSpec,
    UnitType,
    get_unit,
)

__version__ = "0.1.0"

__all__ = [
    # Units
    "UnitSpec",
    "UnitType",
    "MINUTES",
    "HOURS",
    "DAYS",
    "MONTHS",
    "WEEKDAYS",
    "get_unit",
    # Rendering
    "ClockFormat",
    "RenderOptions",
    "Locale",
    "DEFAULT_LOCALE_EN",
    "unit_with_locale",
    "format_value",
    # Codec
    "ParsedSegment",
    "Wildcard",
    "SingleValue",
    "Range",
    "StepPattern",
    "selection_of",
    "normalize_selection",
    "parse_selection",
    "serialize_segments",
    "render_field",
    "FieldParser",
    "parse_field",
    "is_valid_field",
    "split_expression",
    "join_expression",
    # Interaction
    "SelectMode",
    "ClickKind",
    "ClickEvent",
    "ClickClassification",
    "classify_clicks",
    "ClickBuffer",
    "SelectionEngine",
    "SelectOption",
    "FieldSelect",
    "SingleFieldSelect",
    "MultiFieldSelect",
    "create_select",
    # Configuration
    "SelectConfig",
    "load_config",
    "load_locale",
    "save_config",
    # Errors
    "CronPickError",
    "InvalidUnitSpec",
    "ValueOutOfRange",
    "FieldParseError",
    "MalformedSegments",
    "ConfigError",
]
