"""FastAPI application that exposes the report pipeline over HTTP."""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, ConfigDict

from .config import ReportSettings
from .exceptions import FeedFormatError
from .feed import FeedPayload, parse_feed_text
from .models import Group, RawRow, TimelineSlot
from .report import Report, build_report

logger = logging.getLogger(__name__)


class ReportRequest(FeedPayload):
    today: Optional[date] = None
    colorize: bool = True


class TextReportRequest(BaseModel):
    text: str
    today: Optional[date] = None
    colorize: bool = True

    model_config = ConfigDict(extra="forbid")


def create_app(*, settings: Optional[ReportSettings] = None) -> FastAPI:
    """Instantiate the FastAPI application."""
    resolved_settings = settings or ReportSettings()

    app = FastAPI(title="Gaps N' Laps", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.settings = resolved_settings

    @app.get("/api/settings")
    def report_settings() -> Dict[str, Any]:
        return {
            "total_threshold_minutes": _minutes(resolved_settings.total.limit),
            "gap_threshold_minutes": _minutes(resolved_settings.gap.limit),
            "overlap_threshold_minutes": _minutes(resolved_settings.overlap.limit),
        }

    @app.post("/api/report")
    def report(payload: ReportRequest) -> Dict[str, Any]:
        return _run(payload.to_rows(), payload.today, payload.colorize, resolved_settings)

    @app.post("/api/report/text")
    def report_from_text(payload: TextReportRequest) -> Dict[str, Any]:
        try:
            rows = parse_feed_text(payload.text)
        except FeedFormatError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return _run(rows, payload.today, payload.colorize, resolved_settings)

    return app


def _run(
    rows: list[RawRow],
    today: Optional[date],
    colorize: bool,
    settings: ReportSettings,
) -> Dict[str, Any]:
    result = build_report(rows, today=today, colorize=colorize, settings=settings)
    logger.debug("Built report with %d groups.", len(result.groups))
    return _report_to_payload(result)


def _minutes(value: timedelta) -> float:
    return value.total_seconds() / 60.0


def _report_to_payload(report: Report) -> Dict[str, Any]:
    return {
        "scale_seconds": report.scale.total_seconds() if report.scale is not None else None,
        "groups": [
            _group_to_payload(report, group, slots if report.has_timeline else None)
            for group, slots in report.rows()
        ],
    }


def _group_to_payload(
    report: Report, group: Group, slots: Optional[list[TimelineSlot]]
) -> Dict[str, Any]:
    flags = report.flags(group)
    return {
        "id": group.id,
        "label": group.label,
        "start_time": group.start.isoformat() if group.start else None,
        "stop_time": group.stop.isoformat() if group.stop else None,
        "total_seconds": group.total_duration.total_seconds(),
        "gap_seconds": group.total_gap_duration.total_seconds(),
        "overlap_seconds": group.total_overlap_duration.total_seconds(),
        "flags": {"total": flags.total, "gap": flags.gap, "overlap": flags.overlap},
        "intervals": [
            {
                "start_time": interval.start.isoformat(),
                "stop_time": interval.stop.isoformat(),
                "activity": interval.activity,
                "color": interval.color,
                "duration_seconds": interval.duration.total_seconds(),
            }
            for interval in group.intervals
        ],
        "timeline": (
            [{"offset": slot.offset, "width": slot.width} for slot in slots]
            if slots is not None
            else None
        ),
    }
