"""Exceptions raised by gaps_n_laps."""

from __future__ import annotations

from typing import Optional


class GapsNLapsError(Exception):
    """Base class for errors raised by this package."""


class EmptyInputError(GapsNLapsError, ValueError):
    """No group holds any interval, so there is nothing to scale a timeline against."""


class FeedFormatError(GapsNLapsError, ValueError):
    """A row feed document could not be turned into rows."""

    def __init__(self, message: str, line_number: Optional[int] = None) -> None:
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
