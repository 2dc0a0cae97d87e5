"""Tests for unit domains, locale labels and render options."""

import pytest

from cronpick import (
    DAYS,
    DEFAULT_LOCALE_EN,
    HOURS,
    MINUTES,
    MONTHS,
    WEEKDAYS,
    ClockFormat,
    ConfigError,
    InvalidUnitSpec,
    Locale,
    RenderOptions,
    UnitSpec,
    UnitType,
    ValueOutOfRange,
    get_unit,
    unit_with_locale,
)


# =============================================================================
# UnitSpec Tests
# =============================================================================


class TestUnitSpec:
    """Tests for UnitSpec construction and domain helpers."""

    def test_builtin_domains(self):
        """Test the five standard field domains."""
        assert (MINUTES.min, MINUTES.max) == (0, 59)
        assert (HOURS.min, HOURS.max) == (0, 23)
        assert (DAYS.min, DAYS.max) == (1, 31)
        assert (MONTHS.min, MONTHS.max) == (1, 12)
        assert (WEEKDAYS.min, WEEKDAYS.max) == (0, 6)

    def test_domain_is_ascending(self):
        assert list(MONTHS.domain()) == list(range(1, 13))

    @pytest.mark.parametrize("total", [0, -1, -60])
    def test_non_positive_total_rejected(self, total):
        """Test that empty domains fail at construction."""
        with pytest.raises(InvalidUnitSpec):
            UnitSpec(UnitType.MINUTE, 0, total)

    def test_label_count_must_match_total(self):
        with pytest.raises(InvalidUnitSpec):
            UnitSpec(UnitType.MONTH, 1, 12, ("JAN", "FEB"))

    def test_labels_converted_to_tuple(self):
        unit = UnitSpec(UnitType.WEEKDAY, 0, 7, ["S", "M", "T", "W", "T", "F", "S"])
        assert isinstance(unit.alt_labels, tuple)

    @pytest.mark.parametrize("value", [0, 13])
    def test_month_boundaries(self, value):
        """Test that values outside 1-12 fail for months."""
        with pytest.raises(ValueOutOfRange) as exc_info:
            MONTHS.validate(value)
        assert exc_info.value.value == value
        assert exc_info.value.minimum == 1
        assert exc_info.value.maximum == 12

    def test_validate_returns_value(self):
        assert MONTHS.validate(12) == 12

    def test_label_index(self):
        """Test label positions for zero- and one-based domains."""
        assert WEEKDAYS.label_index(0) == 0
        assert MONTHS.label_index(1) == 0
        assert MONTHS.label_index(12) == 11

    def test_with_labels(self):
        unit = MINUTES.with_labels([str(i) for i in range(60)])
        assert unit.alt_labels[59] == "59"
        assert MINUTES.alt_labels is None


class TestGetUnit:
    """Tests for built-in unit lookup."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("minute", MINUTES),
            ("minutes", MINUTES),
            ("Hour", HOURS),
            ("days", DAYS),
            ("month", MONTHS),
            ("weekdays", WEEKDAYS),
            (UnitType.HOUR, HOURS),
        ],
    )
    def test_lookup(self, name, expected):
        assert get_unit(name) == expected

    def test_unknown_unit(self):
        with pytest.raises(InvalidUnitSpec, match="Unknown unit"):
            get_unit("fortnight")


# =============================================================================
# Locale Tests
# =============================================================================


class TestLocale:
    """Tests for locale phrases and labels."""

    def test_default_locale(self):
        assert DEFAULT_LOCALE_EN.every_text == "every"
        assert DEFAULT_LOCALE_EN.months[0] == "JAN"
        assert DEFAULT_LOCALE_EN.weekdays[0] == "SUN"

    def test_from_dict_falls_back_to_english(self):
        locale = Locale.from_dict({"every_text": "cada"})
        assert locale.every_text == "cada"
        assert locale.months == DEFAULT_LOCALE_EN.months

    def test_wrong_label_count(self):
        with pytest.raises(ConfigError):
            Locale(months=("Jan",))
        with pytest.raises(ConfigError):
            Locale(weekdays=("Sun", "Mon"))

    def test_to_dict_round_trip(self):
        locale = Locale(every_text="alle", placeholder="-")
        assert Locale.from_dict(locale.to_dict()) == locale

    def test_unit_with_locale(self):
        """Test that only month and weekday units take locale names."""
        names = ("Ene", "Feb", "Mar", "Abr", "May", "Jun",
                 "Jul", "Ago", "Sep", "Oct", "Nov", "Dic")
        locale = Locale(months=names)
        assert unit_with_locale(MONTHS, locale).alt_labels == names
        assert unit_with_locale(MINUTES, locale) is MINUTES


# =============================================================================
# RenderOptions Tests
# =============================================================================


class TestRenderOptions:
    """Tests for render options."""

    def test_defaults(self):
        options = RenderOptions()
        assert not options.humanize
        assert not options.leading_zero
        assert options.clock_format == ClockFormat.NONE
        assert options.every_text == "every"

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("12h", ClockFormat.TWELVE_HOUR),
            ("12-hour-clock", ClockFormat.TWELVE_HOUR),
            ("24H", ClockFormat.TWENTY_FOUR_HOUR),
            ("none", ClockFormat.NONE),
            (None, ClockFormat.NONE),
        ],
    )
    def test_clock_format_from_string(self, text, expected):
        assert ClockFormat.from_string(text) == expected

    def test_unknown_clock_format(self):
        with pytest.raises(ConfigError):
            ClockFormat.from_string("13h")

    def test_string_clock_format_coerced(self):
        assert RenderOptions(clock_format="12h").clock_format == ClockFormat.TWELVE_HOUR

    def test_blank_every_text_rejected(self):
        with pytest.raises(ConfigError):
            RenderOptions(every_text="  ")

    def test_dict_round_trip(self):
        options = RenderOptions(humanize=True, leading_zero=True, clock_format=ClockFormat.TWELVE_HOUR)
        assert RenderOptions.from_dict(options.to_dict()) == options

    def test_presets(self):
        assert RenderOptions.plain() == RenderOptions()
        assert RenderOptions.human("cada").humanize
        assert RenderOptions.human("cada").every_text == "cada"
