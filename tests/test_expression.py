"""Tests for splitting and joining whole cron expressions."""

import pytest

from cronpick import (
    ClockFormat,
    ConfigError,
    FieldParseError,
    RenderOptions,
    UnitType,
    ValueOutOfRange,
    join_expression,
    split_expression,
)
from cronpick.expression import ALIASES, resolve_alias


class TestSplitExpression:
    """Tests for decoding expressions field by field."""

    def test_standard_expression(self):
        fields = split_expression("*/15 0 1,15 * MON-FRI")
        assert fields[UnitType.MINUTE] == (0, 15, 30, 45)
        assert fields[UnitType.HOUR] == (0,)
        assert fields[UnitType.DAY] == (1, 15)
        assert fields[UnitType.MONTH] == ()
        assert fields[UnitType.WEEKDAY] == (1, 2, 3, 4, 5)

    def test_alias(self):
        fields = split_expression("@daily")
        assert fields[UnitType.MINUTE] == (0,)
        assert fields[UnitType.HOUR] == (0,)
        assert fields[UnitType.DAY] == ()

    def test_aliases_are_five_fields(self):
        for alias in ALIASES:
            assert len(resolve_alias(alias).split()) == 5

    @pytest.mark.parametrize("text", ["* * * *", "0 0 * * * *", ""])
    def test_wrong_field_count(self, text):
        with pytest.raises(FieldParseError, match="Invalid number of fields"):
            split_expression(text)

    def test_out_of_range_field(self):
        with pytest.raises(ValueOutOfRange):
            split_expression("0 24 * * *")


class TestJoinExpression:
    """Tests for rendering expressions."""

    def test_round_trip(self):
        assert join_expression(split_expression("*/15 0 1,15 * MON-FRI")) == "*/15 0 1,15 * 1-5"

    def test_missing_fields_are_wildcards(self):
        assert join_expression({UnitType.MINUTE: [30]}) == "30 * * * *"

    def test_twelve_hour_clock(self):
        options = RenderOptions(clock_format=ClockFormat.TWELVE_HOUR)
        text = join_expression({UnitType.HOUR: [9, 17]}, options)
        assert text == "* 9AM,5PM * * *"
        assert split_expression(text)[UnitType.HOUR] == (9, 17)

    def test_humanized_rejected(self):
        with pytest.raises(ConfigError):
            join_expression({}, RenderOptions(humanize=True))
