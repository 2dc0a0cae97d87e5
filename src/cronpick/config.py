"""Configuration for field selects.

Configuration can be built directly, from a preset, from a dictionary,
from environment variables, or loaded from a YAML or JSON file.

Example:
    >>> config = load_config("cronpick.yaml")
    >>> config = SelectConfig.from_preset("readonly")
    >>> config = SelectConfig.from_env()
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

import yaml

from cronpick.engine import DOUBLE_CLICK_TIMEOUT, SelectMode
from cronpick.errors import ConfigError
from cronpick.i18n import Locale
from cronpick.options import ClockFormat, RenderOptions

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class SelectConfig:
    """Behaviour of one field select.

    Attributes:
        mode: Single or multiple selection.
        periodicity_on_double_click: Double clicking a value selects every
            value divisible by it. When off, every click toggles at once.
        read_only: Ignore picks and clears.
        disabled: Ignore all input.
        allow_clear: Offer a clear action; defaults to not read_only.
        double_click_timeout: Double-click window in seconds.
        render: Label and field rendering options.
    """

    mode: SelectMode = SelectMode.MULTIPLE
    periodicity_on_double_click: bool = True
    read_only: bool = False
    disabled: bool = False
    allow_clear: bool | None = None
    double_click_timeout: float = DOUBLE_CLICK_TIMEOUT
    render: RenderOptions = field(default_factory=RenderOptions)

    def __post_init__(self) -> None:
        """Validate configuration."""
        try:
            object.__setattr__(self, "mode", SelectMode(self.mode))
        except ValueError:
            raise ConfigError(f"Unknown select mode: {self.mode!r}")
        if self.double_click_timeout <= 0:
            raise ConfigError("double_click_timeout must be positive")

    def with_overrides(self, **kwargs: Any) -> "SelectConfig":
        return replace(self, **kwargs)

    def to_dict(self) -> dict[str, Any]:
        return {
            "mode": self.mode.value,
            "periodicity_on_double_click": self.periodicity_on_double_click,
            "read_only": self.read_only,
            "disabled": self.disabled,
            "allow_clear": self.allow_clear,
            "double_click_timeout": self.double_click_timeout,
            "render": self.render.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SelectConfig":
        """Create from dictionary."""
        return cls(
            mode=data.get("mode", SelectMode.MULTIPLE.value),
            periodicity_on_double_click=bool(data.get("periodicity_on_double_click", True)),
            read_only=bool(data.get("read_only", False)),
            disabled=bool(data.get("disabled", False)),
            allow_clear=data.get("allow_clear"),
            double_click_timeout=float(data.get("double_click_timeout", DOUBLE_CLICK_TIMEOUT)),
            render=RenderOptions.from_dict(data.get("render", {})),
        )

    @classmethod
    def from_preset(cls, preset: str) -> "SelectConfig":
        """Create configuration from a named preset.

        Raises:
            ConfigError: If the preset does not exist.
        """
        try:
            return PRESETS[preset.lower()]
        except KeyError:
            choices = ", ".join(sorted(PRESETS))
            raise ConfigError(f"Unknown preset: {preset!r}. Expected one of: {choices}")

    @classmethod
    def from_env(cls, prefix: str = "CRONPICK_") -> "SelectConfig":
        """Create configuration from environment variables.

        Environment variables:
            {prefix}MODE: single or multiple
            {prefix}PERIODICITY: Enable double-click periodicity
            {prefix}READ_ONLY: Ignore input
            {prefix}DOUBLE_CLICK_TIMEOUT: Window in seconds
            {prefix}HUMANIZE: Humanized labels
            {prefix}LEADING_ZERO: Zero-padded labels
            {prefix}CLOCK_FORMAT: 12h, 24h or none
            {prefix}EVERY_TEXT: Step phrase
        """
        config = cls()
        render = config.render

        if val := os.environ.get(f"{prefix}MODE"):
            config = config.with_overrides(mode=val.lower())
        if val := os.environ.get(f"{prefix}PERIODICITY"):
            config = config.with_overrides(periodicity_on_double_click=val.lower() in _TRUE_VALUES)
        if val := os.environ.get(f"{prefix}READ_ONLY"):
            config = config.with_overrides(read_only=val.lower() in _TRUE_VALUES)
        if val := os.environ.get(f"{prefix}DOUBLE_CLICK_TIMEOUT"):
            try:
                config = config.with_overrides(double_click_timeout=float(val))
            except ValueError:
                raise ConfigError(f"{prefix}DOUBLE_CLICK_TIMEOUT must be a number, got {val!r}")

        if val := os.environ.get(f"{prefix}HUMANIZE"):
            render = render.with_overrides(humanize=val.lower() in _TRUE_VALUES)
        if val := os.environ.get(f"{prefix}LEADING_ZERO"):
            render = render.with_overrides(leading_zero=val.lower() in _TRUE_VALUES)
        if val := os.environ.get(f"{prefix}CLOCK_FORMAT"):
            render = render.with_overrides(clock_format=ClockFormat.from_string(val))
        if val := os.environ.get(f"{prefix}EVERY_TEXT"):
            render = render.with_overrides(every_text=val)

        return config.with_overrides(render=render)


PRESETS: dict[str, SelectConfig] = {
    "default": SelectConfig(),
    "single": SelectConfig(mode=SelectMode.SINGLE, periodicity_on_double_click=False),
    "readonly": SelectConfig(read_only=True),
    "human": SelectConfig(render=RenderOptions(humanize=True)),
    "clock12": SelectConfig(render=RenderOptions(clock_format=ClockFormat.TWELVE_HOUR)),
}


def _read_mapping(path: str | Path) -> dict[str, Any]:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        content = f.read()

    try:
        if path.suffix in {".yaml", ".yml"}:
            data = yaml.safe_load(content) or {}
        else:
            data = json.loads(content)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigError(f"Cannot read configuration {path}: {e}")

    if not isinstance(data, dict):
        raise ConfigError(f"Configuration {path} must contain a mapping")
    logger.debug("Loaded configuration from %s", path)
    return data


def load_config(path: str | Path) -> SelectConfig:
    """Load a select configuration from a YAML or JSON file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigError: If the content is invalid.
    """
    return SelectConfig.from_dict(_read_mapping(path))


def load_locale(path: str | Path) -> Locale:
    """Load locale phrases from a YAML or JSON file.

    The file may hold the locale at the top level or under a "locale" key.
    """
    data = _read_mapping(path)
    return Locale.from_dict(data.get("locale", data))


def save_config(config: SelectConfig, path: str | Path) -> None:
    """Write a configuration as YAML or JSON, by file suffix."""
    path = Path(path)
    data = config.to_dict()
    with open(path, "w", encoding="utf-8") as f:
        if path.suffix in {".yaml", ".yml"}:
            yaml.safe_dump(data, f, sort_keys=False)
        else:
            json.dump(data, f, indent=2)
