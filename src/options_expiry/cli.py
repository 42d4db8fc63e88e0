"""Command-line interface for the option expiration calendar.

Usage:
    options-expiry expirations --start-year 2022 --end-year 2026
    options-expiry holidays --start-year 2024 --end-year 2024 --names
    options-expiry between 2024-03-01 2024-06-30
    options-expiry check 2021-06-18
    options-expiry export --config config/default.yaml
"""

import logging
from pathlib import Path
from typing import Optional

import typer
import yaml

from .schedule import (
    CalendarError,
    build_expiry_table,
    build_holiday_table,
    generate_holidays,
    get_monthly_option_expiration_dates,
    get_option_expiration_dates_between,
    holiday_occurrences,
    is_expiration_day,
    is_market_holiday,
)
from .utils.tables import save_table

LOGGER = logging.getLogger(__name__)

DEFAULT_CONFIG = "config/default.yaml"

app = typer.Typer(
    name="options-expiry",
    help="Monthly option expiration dates with US market holiday handling",
    add_completion=False,
)


def load_config(config_path: str) -> dict:
    """Load configuration from YAML file."""
    with open(config_path) as f:
        return yaml.safe_load(f) or {}


def validate_config(cfg: dict) -> None:
    """Validate export configuration.

    Checks that the ``years`` and ``paths`` sections are present.  Raises
    ``typer.BadParameter`` with a clear message on failure.
    """
    years = cfg.get("years")
    if not years:
        raise typer.BadParameter("Config missing required 'years' section")
    for key in ("start", "end"):
        if key not in years:
            raise typer.BadParameter(f"Config 'years' section missing required key '{key}'")

    paths = cfg.get("paths")
    if not paths or "output" not in paths:
        raise typer.BadParameter("Config missing required 'paths.output' key")

    fmt = (cfg.get("export") or {}).get("format", "csv")
    if fmt not in ("csv", "parquet"):
        raise typer.BadParameter(f"Unknown export format '{fmt}'. Use 'csv' or 'parquet'.")


def group_by_year(dates: list[str]) -> dict[str, list[str]]:
    """Group ISO dates by their year prefix, preserving order."""
    grouped: dict[str, list[str]] = {}
    for d in dates:
        grouped.setdefault(d[:4], []).append(d)
    return grouped


@app.callback()
def main_options(
    log_level: str = typer.Option("WARNING", "--log-level", help="DEBUG, INFO, WARNING or ERROR"),
):
    """Configure logging for all commands."""
    logging.basicConfig(level=getattr(logging, log_level.upper(), logging.WARNING), format="%(levelname)s %(message)s")


@app.command()
def holidays(
    start_year: int = typer.Option(..., "--start-year", "-s", help="Start year"),
    end_year: int = typer.Option(..., "--end-year", "-e", help="End year"),
    names: bool = typer.Option(False, "--names", help="Show holiday names"),
):
    """List market holidays between two years."""
    try:
        if names:
            for occ in holiday_occurrences(start_year, end_year):
                typer.echo(f"{occ.iso}  {occ.name}")
        else:
            for d in generate_holidays(start_year, end_year):
                typer.echo(d)
    except CalendarError as e:
        raise typer.BadParameter(str(e))


@app.command()
def expirations(
    start_year: int = typer.Option(..., "--start-year", "-s", help="Start year"),
    end_year: int = typer.Option(..., "--end-year", "-e", help="End year"),
):
    """List monthly option expiration dates grouped by year."""
    try:
        dates = get_monthly_option_expiration_dates(start_year, end_year)
    except CalendarError as e:
        raise typer.BadParameter(str(e))

    for year, year_dates in group_by_year(dates).items():
        typer.echo(f"\n{year}:")
        for d in year_dates:
            typer.echo(d)


@app.command()
def between(
    start_date: str = typer.Argument(..., help="Window start (YYYY-MM-DD)"),
    end_date: str = typer.Argument(..., help="Window end (YYYY-MM-DD)"),
):
    """List expirations whose third Friday falls inside a date window."""
    try:
        dates = get_option_expiration_dates_between(start_date, end_date)
    except CalendarError as e:
        raise typer.BadParameter(str(e))

    for d in dates:
        typer.echo(d)


@app.command()
def check(
    check_date: str = typer.Argument(..., help="Date to check (YYYY-MM-DD)"),
):
    """Show whether a date is a market holiday and/or an expiration day."""
    try:
        holiday = is_market_holiday(check_date)
        expiration = is_expiration_day(check_date)
    except CalendarError as e:
        raise typer.BadParameter(str(e))

    typer.echo(f"{check_date}:")
    typer.echo(f"  Market holiday: {'yes' if holiday else 'no'}")
    typer.echo(f"  Expiration day: {'yes' if expiration else 'no'}")


@app.command()
def export(
    config: str = typer.Option(DEFAULT_CONFIG, "--config", "-c", help="Path to configuration file"),
    output_dir: Optional[str] = typer.Option(None, "--output", "-o", help="Output directory"),
    fmt: Optional[str] = typer.Option(None, "--format", "-f", help="csv or parquet"),
    start_year: Optional[int] = typer.Option(None, "--start-year", "-s", help="Start year"),
    end_year: Optional[int] = typer.Option(None, "--end-year", "-e", help="End year"),
):
    """Write holiday and expiry tables."""
    cfg = load_config(config)
    LOGGER.debug("Loaded config %s", config)

    # Command-line options override config values
    if start_year is not None:
        cfg.setdefault("years", {})["start"] = start_year
    if end_year is not None:
        cfg.setdefault("years", {})["end"] = end_year
    if output_dir is not None:
        cfg.setdefault("paths", {})["output"] = output_dir
    if fmt is not None:
        cfg["export"] = {**(cfg.get("export") or {}), "format": fmt}

    validate_config(cfg)

    start = cfg["years"]["start"]
    end = cfg["years"]["end"]
    suffix = (cfg.get("export") or {}).get("format", "csv")
    output_path = Path(cfg["paths"]["output"])

    try:
        holiday_df = build_holiday_table(start, end)
        expiry_df = build_expiry_table(start, end)
    except CalendarError as e:
        raise typer.BadParameter(str(e))

    typer.echo(f"Exporting {start}-{end} to {output_path}")
    save_table(holiday_df, output_path / f"holidays_{start}_{end}.{suffix}")
    save_table(expiry_df, output_path / f"expirations_{start}_{end}.{suffix}")
    typer.echo(f"  Holidays: {len(holiday_df)}")
    typer.echo(f"  Expirations: {len(expiry_df)}")
    typer.echo("Done!")


def main() -> None:
    """Entrypoint for the console script."""
    app()


if __name__ == "__main__":
    main()
