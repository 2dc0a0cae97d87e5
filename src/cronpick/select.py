"""Widget models binding the codec and the selection engine.

A FieldSelect is the non-visual half of a dropdown for one cron field. It
builds the option list, renders the selected tag text and turns widget
callbacks into selection updates. The selection itself lives with the
consumer and is read and written through the supplied getter and setter.

Two implementations share the same core:

    SingleFieldSelect   plain dropdown, one value, immediate updates
    MultiFieldSelect    multi-select list with double-click periodicity

Example:
    >>> state = {"value": ()}
    >>> with create_select(
    ...     MINUTES,
    ...     lambda: state["value"],
    ...     lambda v: state.update(value=v),
    ... ) as select:
    ...     select.on_select_value("5")
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Sequence

from cronpick.config import SelectConfig
from cronpick.engine import (
    ClickBuffer,
    ClickClassification,
    ClickKind,
    SelectionEngine,
    SelectMode,
)
from cronpick.formatter import format_value
from cronpick.i18n import DEFAULT_LOCALE_EN, Locale, unit_with_locale
from cronpick.serializer import render_field
from cronpick.units import UnitSpec

logger = logging.getLogger(__name__)

ValueGetter = Callable[[], Sequence[int]]
ValueSetter = Callable[[tuple[int, ...]], None]


@dataclass(frozen=True)
class SelectOption:
    value: str
    label: str


class FieldSelect(ABC):
    """Base class for field selection models."""

    def __init__(
        self,
        unit: UnitSpec,
        get_value: ValueGetter,
        set_value: ValueSetter,
        config: SelectConfig | None = None,
        locale: Locale | None = None,
        options_list: Sequence[str] | None = None,
        filter_option: Callable[[SelectOption], bool] | None = None,
        timer_factory: Callable[..., Any] | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        """Initialize the select.

        Args:
            unit: Unit of the field.
            get_value: Returns the consumer's current selection.
            set_value: Stores a new selection.
            config: Behaviour and rendering options.
            locale: Phrases and month/weekday names.
            options_list: Custom labels, one per value, replacing formatted ones.
            filter_option: Predicate hiding options from the list.
            timer_factory: Timer used by the click buffer.
            clock: Time source used by the click buffer.
        """
        self._config = config or SelectConfig()
        self._locale = locale or DEFAULT_LOCALE_EN
        self._unit = unit_with_locale(unit, locale) if locale is not None else unit
        self._get_value = get_value
        self._set_value = set_value
        self._options_list = tuple(options_list) if options_list is not None else None
        self._filter_option = filter_option
        self._options = self._build_options()
        self._engine = SelectionEngine(
            self._unit,
            mode=self._config.mode,
            option_count=len(self._options),
        )
        buffer_kwargs: dict[str, Any] = {"timeout": self._config.double_click_timeout}
        if timer_factory is not None:
            buffer_kwargs["timer_factory"] = timer_factory
        if clock is not None:
            buffer_kwargs["clock"] = clock
        self._clicks = ClickBuffer(self._dispatch, **buffer_kwargs)

    @property
    def unit(self) -> UnitSpec:
        return self._unit

    @property
    def config(self) -> SelectConfig:
        return self._config

    @property
    def engine(self) -> SelectionEngine:
        return self._engine

    @property
    def locked(self) -> bool:
        """True when input is ignored (read-only or disabled)."""
        return self._config.read_only or self._config.disabled

    @property
    def allow_clear(self) -> bool:
        if self._config.allow_clear is not None:
            return self._config.allow_clear
        return not self._config.read_only

    @property
    def value(self) -> tuple[int, ...]:
        return tuple(self._get_value() or ())

    def _build_options(self) -> tuple[SelectOption, ...]:
        render = self._config.render
        options = []
        for index, number in enumerate(self._unit.domain()):
            if self._options_list is not None:
                if index >= len(self._options_list):
                    break
                label = self._options_list[index]
            else:
                label = format_value(number, self._unit, render)
            options.append(SelectOption(str(number), label))
        if self._filter_option is not None and self._options_list is None:
            options = [o for o in options if self._filter_option(o)]
        return tuple(options)

    def options(self) -> tuple[SelectOption, ...]:
        """Options offered by the widget, in domain order."""
        return self._options

    def display_text(self) -> str:
        """Text shown for the current selection."""
        value = self.value
        if not value:
            return self._locale.placeholder
        render = self._config.render.with_overrides(every_text=self._locale.every_text)
        text = render_field(value, self._unit, render)
        if not render.humanize and text.startswith("*/"):
            return f"{self._locale.every_text} {text[2:]}"
        return text

    def clear(self) -> None:
        """Empty the selection unless locked."""
        if self.locked:
            return
        self._clicks.cancel()
        self._set_value(())

    def on_select_value(self, raw: str | int | None) -> None:
        """Handle one pick reported by the widget.

        Raises:
            ValueOutOfRange: If the picked value is outside the unit's domain.
        """
        if raw is None or raw == "":
            self.clear()
            return
        if self.locked:
            logger.debug("Ignoring pick %r on locked %s field", raw, self._unit.type.value)
            return

        value = self._unit.validate(int(raw))
        if not self._config.periodicity_on_double_click:
            self._set_value(self._engine.simple_click(self.value, value))
            return
        self._clicks.push(value)

    def _dispatch(self, classification: ClickClassification) -> None:
        if classification.kind == ClickKind.PAIR:
            logger.debug("Two quick picks %s treated as a pair toggle", classification.values)
        self._set_value(self._engine.apply(self.value, classification))

    @abstractmethod
    def on_widget_change(self, payload: Any) -> None:
        """Entry point for the widget's change event."""

    def close(self) -> None:
        """Release the pending click timer."""
        self._clicks.cancel()

    def __enter__(self) -> "FieldSelect":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


class SingleFieldSelect(FieldSelect):
    """Dropdown holding at most one value."""

    def selected_option(self) -> str | None:
        value = self.value
        return str(value[0]) if value else None

    def on_change(self, raw: str | None) -> None:
        self.on_select_value(raw)

    def on_widget_change(self, payload: Any) -> None:
        self.on_change(payload)


class MultiFieldSelect(FieldSelect):
    """Multi-select list; rapid repeat picks select periodicities."""

    def selected_options(self) -> list[str]:
        return [str(v) for v in self.value]

    def on_option_click(self, selected: Sequence[str]) -> None:
        """Translate the widget's new selected list into a single pick.

        The widget reports the whole list after each change; only the value
        that was added or removed is fed to on_select_value, so that double
        click detection sees every gesture the same way.
        """
        current = self.value
        if not current:
            self.on_select_value(selected[0] if selected else None)
            return

        changed = SelectionEngine.changed_value(current, [int(s) for s in selected])
        if changed is None:
            logger.debug("Widget reported no change for %s field", self._unit.type.value)
            return
        self.on_select_value(changed)

    def on_widget_change(self, payload: Any) -> None:
        self.on_option_click(payload or [])


def create_select(
    unit: UnitSpec,
    get_value: ValueGetter,
    set_value: ValueSetter,
    config: SelectConfig | None = None,
    **kwargs: Any,
) -> FieldSelect:
    """Build the select model suited to config.

    Single mode without periodicity uses a plain dropdown; everything else
    uses the multi-select list.
    """
    config = config or SelectConfig()
    if config.mode == SelectMode.SINGLE and not config.periodicity_on_double_click:
        return SingleFieldSelect(unit, get_value, set_value, config, **kwargs)
    return MultiFieldSelect(unit, get_value, set_value, config, **kwargs)
