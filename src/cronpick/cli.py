"""Command-line interface for cronpick.

Commands:
    cronpick render UNIT VALUES...   Render selected values as a field string
    cronpick parse UNIT TEXT         Decode a field string into values
    cronpick options UNIT            List the options a field offers
    cronpick expression TEXT         Decode a whole cron expression
"""

from __future__ import annotations

import functools
import logging
from pathlib import Path
from typing import Annotated, Any, Callable, Optional, TypeVar

import typer
from rich.console import Console
from rich.table import Table

from cronpick.config import SelectConfig, load_config
from cronpick.errors import CronPickError
from cronpick.expression import FIELD_ORDER, join_expression, split_expression
from cronpick.formatter import format_value
from cronpick.grammar import parse_field
from cronpick.options import ClockFormat, RenderOptions
from cronpick.serializer import render_field
from cronpick.units import UNITS, get_unit

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="cronpick",
    help="Edit and render the value sets of cron expression fields",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()

F = TypeVar("F", bound=Callable[..., Any])


# =============================================================================
# Type Aliases
# =============================================================================

HumanizeOpt = Annotated[
    bool,
    typer.Option("--humanize", "-H", help="Use month/weekday names and 'every N' steps"),
]

LeadingZeroOpt = Annotated[
    bool,
    typer.Option("--leading-zero", "-z", help="Zero-pad numeric labels"),
]

ClockOpt = Annotated[
    Optional[str],
    typer.Option("--clock", "-c", help="Clock format for hours (12h, 24h, none)"),
]

EveryTextOpt = Annotated[
    Optional[str],
    typer.Option("--every-text", help="Phrase used for humanized steps"),
]

ConfigOpt = Annotated[
    Optional[Path],
    typer.Option("--config", help="YAML or JSON select configuration"),
]


# =============================================================================
# Helper Functions
# =============================================================================


def error_boundary(func: F) -> F:
    """Turn library errors into a message on stderr and exit code 1."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except typer.Exit:
            raise
        except (CronPickError, FileNotFoundError) as e:
            logger.debug("Command %s failed", func.__name__, exc_info=True)
            typer.echo(typer.style(f"Error: {e}", fg="red"), err=True)
            raise typer.Exit(1)

    return wrapper  # type: ignore


def build_render_options(
    config_file: Path | None,
    humanize: bool,
    leading_zero: bool,
    clock: str | None,
    every_text: str | None,
) -> RenderOptions:
    """Merge the config file's render options with command-line flags."""
    base = load_config(config_file).render if config_file else SelectConfig().render
    overrides: dict[str, Any] = {}
    if humanize:
        overrides["humanize"] = True
    if leading_zero:
        overrides["leading_zero"] = True
    if clock is not None:
        overrides["clock_format"] = ClockFormat.from_string(clock)
    if every_text is not None:
        overrides["every_text"] = every_text
    return base.with_overrides(**overrides) if overrides else base


def _format_values(values: tuple[int, ...]) -> str:
    return ",".join(str(v) for v in values) if values else "*"


# =============================================================================
# Commands
# =============================================================================


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Edit and render the value sets of cron expression fields."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command(name="render")
@error_boundary
def render_cmd(
    unit: Annotated[str, typer.Argument(help="Field unit (minute, hour, day, month, weekday)")],
    values: Annotated[
        Optional[list[int]],
        typer.Argument(help="Selected values; none means every value"),
    ] = None,
    humanize: HumanizeOpt = False,
    leading_zero: LeadingZeroOpt = False,
    clock: ClockOpt = None,
    every_text: EveryTextOpt = None,
    config_file: ConfigOpt = None,
) -> None:
    """Render selected values as a field string."""
    spec = get_unit(unit)
    options = build_render_options(config_file, humanize, leading_zero, clock, every_text)
    typer.echo(render_field(values or (), spec, options))


@app.command(name="parse")
@error_boundary
def parse_cmd(
    unit: Annotated[str, typer.Argument(help="Field unit (minute, hour, day, month, weekday)")],
    text: Annotated[str, typer.Argument(help="Field string, e.g. '*/5' or 'JAN-MAR'")],
    every_text: EveryTextOpt = None,
) -> None:
    """Decode a field string into the selected values."""
    spec = get_unit(unit)
    options = RenderOptions(every_text=every_text) if every_text else None
    typer.echo(_format_values(parse_field(text, spec, options)))


@app.command(name="options")
@error_boundary
def options_cmd(
    unit: Annotated[str, typer.Argument(help="Field unit (minute, hour, day, month, weekday)")],
    humanize: HumanizeOpt = False,
    leading_zero: LeadingZeroOpt = False,
    clock: ClockOpt = None,
    config_file: ConfigOpt = None,
) -> None:
    """List the options a field offers."""
    spec = get_unit(unit)
    options = build_render_options(config_file, humanize, leading_zero, clock, None)

    table = Table(title=f"{spec.type.value} options", show_header=True, header_style="bold magenta")
    table.add_column("Value", style="cyan", justify="right")
    table.add_column("Label")
    for value in spec.domain():
        table.add_row(str(value), format_value(value, spec, options))
    console.print(table)


@app.command(name="expression")
@error_boundary
def expression_cmd(
    text: Annotated[str, typer.Argument(help="Five-field cron expression or alias")],
    leading_zero: LeadingZeroOpt = False,
) -> None:
    """Decode a cron expression field by field."""
    selections = split_expression(text)
    options = RenderOptions(leading_zero=leading_zero)

    table = Table(title=text, show_header=True, header_style="bold magenta")
    table.add_column("Field", style="cyan")
    table.add_column("Text")
    table.add_column("Values")
    for unit_type in FIELD_ORDER:
        values = selections[unit_type]
        table.add_row(
            unit_type.value,
            render_field(values, UNITS[unit_type], options),
            _format_values(values),
        )
    console.print(table)
    typer.echo(join_expression(selections, options))


if __name__ == "__main__":
    app()
