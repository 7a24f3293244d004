"""Command-line interface for Gaps N' Laps."""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from pathlib import Path
from typing import Optional

import typer

from .config import ReportSettings
from .paths import get_default_feed_path

app = typer.Typer(help="Gap, overlap and total-time summaries for time reports.")


@app.callback(no_args_is_help=True)
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logs.")) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


@app.command()
def report(
    feed_path: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        help="Text feed with day headers and interval rows.",
    ),
    date_value: Optional[str] = typer.Option(
        None,
        "--date",
        help="Date (YYYY-MM-DD) the clock times belong to. Defaults to today.",
    ),
    colorize: bool = typer.Option(
        True,
        "--color/--no-color",
        help="Assign a color to each activity.",
    ),
    total_minutes: float = typer.Option(
        450.0,
        "--total-threshold",
        min=0.0,
        help="Minutes of work below which a day is flagged.",
    ),
    gap_minutes: float = typer.Option(
        30.0,
        "--gap-threshold",
        min=0.0,
        help="Minutes of idle time above which a day is flagged.",
    ),
) -> None:
    """Print a summary of every day in a feed file."""
    from .feed import read_feed
    from .report import build_report
    from .reporting import ReportPrinter

    today = _parse_date(date_value)
    settings = ReportSettings.from_minutes(total_minutes=total_minutes, gap_minutes=gap_minutes)
    rows = read_feed(feed_path)
    result = build_report(rows, today=today, colorize=colorize, settings=settings)
    ReportPrinter().print_report(result)


@app.command()
def watch(
    feed_path: Optional[Path] = typer.Argument(
        None,
        dir_okay=False,
        help="Feed file to watch. Defaults to the application data directory.",
    ),
    poll_seconds: float = typer.Option(
        2.0,
        "--interval",
        min=0.1,
        help="Polling interval in seconds.",
    ),
    total_minutes: float = typer.Option(
        450.0,
        "--total-threshold",
        min=0.0,
        help="Minutes of work below which a day is flagged.",
    ),
    gap_minutes: float = typer.Option(
        30.0,
        "--gap-threshold",
        min=0.0,
        help="Minutes of idle time above which a day is flagged.",
    ),
) -> None:
    """Print a fresh summary each time the feed file appears or changes."""
    from .report import build_report
    from .reporting import ReportPrinter
    from .watcher import FeedWatcher

    settings = ReportSettings.from_minutes(total_minutes=total_minutes, gap_minutes=gap_minutes)
    printer = ReportPrinter()
    watcher = FeedWatcher(
        feed_path or get_default_feed_path(),
        on_feed=lambda rows: printer.print_report(build_report(rows, settings=settings)),
        poll_interval=timedelta(seconds=poll_seconds),
    )
    watcher.run_forever()


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Interface to bind the API."),
    port: int = typer.Option(
        8765, "--port", min=1, max=65535, help="TCP port for the API."
    ),
    total_minutes: float = typer.Option(450.0, "--total-threshold", min=0.0),
    gap_minutes: float = typer.Option(30.0, "--gap-threshold", min=0.0),
) -> None:
    """Serve the report API over HTTP."""
    from .server_runner import run_server

    settings = ReportSettings.from_minutes(total_minutes=total_minutes, gap_minutes=gap_minutes)
    run_server(host=host, port=port, settings=settings)


def _parse_date(value: Optional[str]) -> date:
    if not value:
        return date.today()
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError as exc:
        raise typer.BadParameter("Expected a date in YYYY-MM-DD format.", param_hint="--date") from exc
