"""Entry point — prints a month grid to the terminal for previewing."""

from __future__ import annotations

from datetime import date, datetime

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from calendar_logic import (
    DAY_ABBR,
    Day,
    WeekConvention,
    generate_days_in_month,
    month_title,
    weekday_labels,
)
from settings import convention_from_settings, load_settings, save_settings

console = Console()

_WEEKDAY_CHOICES = [abbr.lower() for abbr in DAY_ABBR]


def _parse_month(value: str | None) -> date:
    if value is None:
        return date.today().replace(day=1)
    try:
        return datetime.strptime(value, "%Y-%m").date()
    except ValueError:
        raise click.BadParameter(f"expected YYYY-MM, got {value!r}", param_hint="--month")


def _parse_day(value: str | None, default: date) -> date:
    if value is None:
        return default
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise click.BadParameter(f"expected YYYY-MM-DD, got {value!r}", param_hint="--selected")


def _cell_text(day: Day) -> Text:
    if day.is_selected:
        return Text(day.label, style="bold reverse")
    if not day.is_within_displayed_month:
        return Text(day.label, style="dim")
    return Text(day.label)


def build_table(days: list[Day], title: str, convention: WeekConvention) -> Table:
    """Lay out *days* as a 7-column rich table."""
    table = Table(title=title, show_lines=False)
    for abbr in weekday_labels(convention):
        table.add_column(abbr, justify="right")
    for start in range(0, len(days), 7):
        table.add_row(*(_cell_text(d) for d in days[start:start + 7]))
    return table


@click.group()
@click.option("--settings-file", type=click.Path(dir_okay=False), default=None,
              help="Settings JSON file (default: ~/.calendar-picker-settings.json).")
@click.pass_context
def cli(ctx: click.Context, settings_file: str | None) -> None:
    """Calendar picker month-grid tools."""
    ctx.ensure_object(dict)
    ctx.obj["settings_file"] = settings_file


@cli.command()
@click.option("--month", "month", default=None, help="Month to display, YYYY-MM (default: this month).")
@click.option("--selected", default=None, help="Date to highlight, YYYY-MM-DD (default: today).")
@click.option("--first-weekday", type=click.Choice(_WEEKDAY_CHOICES, case_sensitive=False),
              default=None, help="Week start (default: from settings).")
@click.pass_context
def show(ctx: click.Context, month: str | None, selected: str | None, first_weekday: str | None) -> None:
    """Print the grid for a month."""
    base = _parse_month(month)
    chosen = _parse_day(selected, date.today())
    if first_weekday is None:
        convention = convention_from_settings(load_settings(ctx.obj["settings_file"]))
    else:
        convention = WeekConvention(_WEEKDAY_CHOICES.index(first_weekday.lower()))

    days = generate_days_in_month(base, chosen, convention)
    if not days:
        raise click.ClickException(f"cannot build a grid for {base:%Y-%m}")
    console.print(build_table(days, month_title(base), convention))


@cli.command()
@click.option("--first-weekday", type=click.Choice(_WEEKDAY_CHOICES, case_sensitive=False),
              default=None, help="Store a new week start.")
@click.pass_context
def config(ctx: click.Context, first_weekday: str | None) -> None:
    """Show or change the stored week start."""
    path = ctx.obj["settings_file"]
    settings = load_settings(path)
    if first_weekday is not None:
        settings["first_weekday"] = _WEEKDAY_CHOICES.index(first_weekday.lower())
        save_settings(settings, path)
    console.print(f"first_weekday: {DAY_ABBR[settings['first_weekday']]}")


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
