from __future__ import annotations

import datetime as dt
from pathlib import Path

import pytest
import pytest_mock
from typer import testing

from gaps_n_laps import cli, report, server_runner, watcher


@pytest.fixture
def runner() -> testing.CliRunner:
    return testing.CliRunner()


def test_report_command(runner: testing.CliRunner, feed_file: Path):
    result = runner.invoke(cli.app, ["report", str(feed_file), "--date", "2024-01-01"])

    assert result.exit_code == 0
    assert "Monday" in result.output
    assert "Tuesday" in result.output
    assert "09:00-17:00" in result.output


def test_report_command_thresholds(
    runner: testing.CliRunner, feed_file: Path, mocker: pytest_mock.MockerFixture
):
    build = mocker.patch.object(report, "build_report", wraps=report.build_report)

    result = runner.invoke(
        cli.app,
        [
            "report",
            str(feed_file),
            "--date",
            "2024-01-01",
            "--no-color",
            "--total-threshold",
            "420",
            "--gap-threshold",
            "90",
        ],
    )

    assert result.exit_code == 0
    kwargs = build.call_args.kwargs
    assert kwargs["today"] == dt.date(2024, 1, 1)
    assert kwargs["colorize"] is False
    assert kwargs["settings"].total.limit == dt.timedelta(hours=7)
    assert kwargs["settings"].gap.limit == dt.timedelta(minutes=90)


def test_report_command_rejects_bad_date(runner: testing.CliRunner, feed_file: Path):
    result = runner.invoke(cli.app, ["report", str(feed_file), "--date", "01/01/2024"])

    assert result.exit_code != 0


def test_report_command_requires_existing_file(runner: testing.CliRunner, tmp_path: Path):
    result = runner.invoke(cli.app, ["report", str(tmp_path / "missing.txt")])

    assert result.exit_code != 0


def test_watch_command(runner: testing.CliRunner, feed_file: Path, mocker: pytest_mock.MockerFixture):
    run_forever = mocker.patch.object(watcher.FeedWatcher, "run_forever")

    result = runner.invoke(cli.app, ["watch", str(feed_file), "--interval", "0.5"])

    assert result.exit_code == 0
    run_forever.assert_called_once_with()


def test_serve_command(runner: testing.CliRunner, mocker: pytest_mock.MockerFixture):
    run_server = mocker.patch.object(server_runner, "run_server")

    result = runner.invoke(cli.app, ["serve", "--port", "9000", "--gap-threshold", "15"])

    assert result.exit_code == 0
    kwargs = run_server.call_args.kwargs
    assert kwargs["host"] == "127.0.0.1"
    assert kwargs["port"] == 9000
    assert kwargs["settings"].gap.limit == dt.timedelta(minutes=15)


def test_watch_command_passes_thresholds(
    runner: testing.CliRunner, feed_file: Path, mocker: pytest_mock.MockerFixture
):
    mocker.patch.object(
        watcher.FeedWatcher, "run_forever", autospec=True, side_effect=lambda self: self.check_once()
    )
    build = mocker.patch.object(report, "build_report", wraps=report.build_report)

    result = runner.invoke(
        cli.app,
        ["watch", str(feed_file), "--total-threshold", "420", "--gap-threshold", "90"],
    )

    assert result.exit_code == 0
    assert "Monday" in result.output
    settings = build.call_args.kwargs["settings"]
    assert settings.total.limit == dt.timedelta(hours=7)
    assert settings.gap.limit == dt.timedelta(minutes=90)
