from __future__ import annotations

import datetime as dt
import itertools
import logging

import pytest

from gaps_n_laps.config import ReportSettings
from gaps_n_laps.models import BoundaryRow, ContentRow
from gaps_n_laps.report import build_report


def test_report_contains_metrics_and_timelines(week_rows, today: dt.date):
    report = build_report(week_rows, today=today)

    assert report.has_timeline
    assert report.scale == dt.timedelta(hours=8)
    assert len(report.timelines) == len(report.groups) == 2
    for group, slots in report.rows():
        assert len(slots) == len(group.intervals)


def test_running_twice_is_idempotent(week_rows, today: dt.date):
    first = build_report(week_rows, today=today)
    second = build_report(week_rows, today=today)

    assert first.groups == second.groups
    assert first.scale == second.scale
    assert first.timelines == second.timelines


def test_order_of_content_rows_does_not_change_result(today: dt.date):
    content = [
        ContentRow("(13:00 - 17:00)", "Meetings"),
        ContentRow("(09:00 - 12:30)", "Development"),
        ContentRow("(12:00 - 13:00)", "Development"),
    ]
    results = []
    for permutation in itertools.permutations(content):
        report = build_report([BoundaryRow("g1"), *permutation], today=today, colorize=False)
        (group,) = report.groups
        results.append(
            (
                [(i.start, i.stop) for i in group.intervals],
                group.total_duration,
                group.total_gap_duration,
                group.total_overlap_duration,
            )
        )

    assert all(result == results[0] for result in results)
    assert results[0][3] == dt.timedelta(minutes=30)


def test_report_without_intervals_skips_timeline(today: dt.date, caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.INFO):
        report = build_report([BoundaryRow("g1"), ContentRow("no times here")], today=today)

    assert not report.has_timeline
    assert report.scale is None
    assert report.rows() == [(report.groups[0], [])]
    assert "skipping timeline" in caplog.text


def test_empty_feed_gives_empty_report(today: dt.date):
    report = build_report([], today=today)

    assert report.groups == []
    assert not report.has_timeline


def test_flags_use_report_settings(today: dt.date):
    rows = [BoundaryRow("g1"), ContentRow("(08:00 - 12:00) (13:00 - 16:00) (15:30 - 16:30)")]

    default = build_report(rows, today=today)
    relaxed = build_report(rows, today=today, settings=ReportSettings.from_minutes(420, 90, 60))

    flags = default.flags(default.groups[0])
    assert (flags.total, flags.gap, flags.overlap) == (False, True, True)
    flags = relaxed.flags(relaxed.groups[0])
    assert (flags.total, flags.gap, flags.overlap) == (False, False, False)
    assert default.groups == relaxed.groups


def test_report_with_only_zero_length_intervals_skips_timeline(today: dt.date):
    report = build_report([BoundaryRow("g1"), ContentRow("(09:00 - 09:00) (12:00 - 12:00)")], today=today)

    (group,) = report.groups
    assert len(group.intervals) == 2
    assert report.scale is None
    assert report.timelines == []
    assert report.rows() == [(group, [])]
