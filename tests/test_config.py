"""Tests for select configuration loading."""

import json

import pytest

from cronpick import (
    ClockFormat,
    ConfigError,
    RenderOptions,
    SelectConfig,
    SelectMode,
    load_config,
    load_locale,
    save_config,
)
from cronpick.config import PRESETS


class TestSelectConfig:
    """Tests for SelectConfig construction."""

    def test_defaults(self):
        config = SelectConfig()
        assert config.mode == SelectMode.MULTIPLE
        assert config.periodicity_on_double_click
        assert not config.read_only
        assert config.allow_clear is None
        assert config.double_click_timeout == 0.3
        assert config.render == RenderOptions()

    def test_mode_from_string(self):
        assert SelectConfig(mode="single").mode == SelectMode.SINGLE

    def test_unknown_mode(self):
        with pytest.raises(ConfigError, match="Unknown select mode"):
            SelectConfig(mode="several")

    @pytest.mark.parametrize("timeout", [0, -0.1])
    def test_timeout_must_be_positive(self, timeout):
        with pytest.raises(ConfigError):
            SelectConfig(double_click_timeout=timeout)

    def test_from_dict(self):
        config = SelectConfig.from_dict(
            {
                "mode": "single",
                "read_only": True,
                "double_click_timeout": 0.5,
                "render": {"humanize": True, "clock_format": "12h"},
            }
        )
        assert config.mode == SelectMode.SINGLE
        assert config.read_only
        assert config.double_click_timeout == 0.5
        assert config.render.humanize
        assert config.render.clock_format == ClockFormat.TWELVE_HOUR

    def test_dict_round_trip(self):
        config = SelectConfig(mode=SelectMode.SINGLE, allow_clear=False)
        assert SelectConfig.from_dict(config.to_dict()) == config

    def test_presets(self):
        assert SelectConfig.from_preset("readonly").read_only
        assert SelectConfig.from_preset("SINGLE").mode == SelectMode.SINGLE
        assert set(PRESETS) >= {"default", "single", "readonly", "human", "clock12"}

    def test_unknown_preset(self):
        with pytest.raises(ConfigError, match="Unknown preset"):
            SelectConfig.from_preset("fancy")


class TestFromEnv:
    """Tests for environment configuration."""

    def test_reads_prefixed_variables(self, monkeypatch):
        monkeypatch.setenv("CRONPICK_MODE", "SINGLE")
        monkeypatch.setenv("CRONPICK_PERIODICITY", "off")
        monkeypatch.setenv("CRONPICK_DOUBLE_CLICK_TIMEOUT", "0.25")
        monkeypatch.setenv("CRONPICK_HUMANIZE", "yes")
        monkeypatch.setenv("CRONPICK_CLOCK_FORMAT", "24h")
        monkeypatch.setenv("CRONPICK_EVERY_TEXT", "alle")

        config = SelectConfig.from_env()

        assert config.mode == SelectMode.SINGLE
        assert not config.periodicity_on_double_click
        assert config.double_click_timeout == 0.25
        assert config.render.humanize
        assert config.render.clock_format == ClockFormat.TWENTY_FOUR_HOUR
        assert config.render.every_text == "alle"

    def test_no_variables(self, monkeypatch):
        for name in ("MODE", "PERIODICITY", "READ_ONLY", "HUMANIZE", "EVERY_TEXT"):
            monkeypatch.delenv(f"TEST_{name}", raising=False)
        assert SelectConfig.from_env(prefix="TEST_") == SelectConfig()

    def test_bad_timeout(self, monkeypatch):
        monkeypatch.setenv("CRONPICK_DOUBLE_CLICK_TIMEOUT", "soon")
        with pytest.raises(ConfigError):
            SelectConfig.from_env()


class TestLoadConfig:
    """Tests for configuration files."""

    def test_yaml(self, tmp_path):
        path = tmp_path / "cronpick.yaml"
        path.write_text(
            "mode: single\n"
            "periodicity_on_double_click: false\n"
            "render:\n"
            "  leading_zero: true\n"
        )
        config = load_config(path)
        assert config.mode == SelectMode.SINGLE
        assert not config.periodicity_on_double_click
        assert config.render.leading_zero

    def test_json(self, tmp_path):
        path = tmp_path / "cronpick.json"
        path.write_text(json.dumps({"read_only": True}))
        assert load_config(path).read_only

    def test_empty_yaml_is_default(self, tmp_path):
        path = tmp_path / "empty.yml"
        path.write_text("")
        assert load_config(path) == SelectConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{")
        with pytest.raises(ConfigError):
            load_config(path)

    @pytest.mark.parametrize("name", ["saved.yaml", "saved.json"])
    def test_save_and_load(self, tmp_path, name):
        config = SelectConfig(
            mode=SelectMode.SINGLE,
            render=RenderOptions(clock_format=ClockFormat.TWELVE_HOUR),
        )
        path = tmp_path / name
        save_config(config, path)
        assert load_config(path) == config

    def test_load_locale(self, tmp_path):
        path = tmp_path / "locale.yaml"
        path.write_text("locale:\n  every_text: cada\n  placeholder: todos\n")
        locale = load_locale(path)
        assert locale.every_text == "cada"
        assert locale.placeholder == "todos"
        assert locale.months[0] == "JAN"
