"""Utilities to normalize activity names and day labels."""

from __future__ import annotations

import re
from typing import Optional

_WHITESPACE_PATTERN = re.compile(r"\s+")


def normalize_activity(value: Optional[str]) -> Optional[str]:
    """Collapse internal whitespace so the same activity always maps to one label."""
    if not value:
        return None
    normalized = _WHITESPACE_PATTERN.sub(" ", value.strip())
    return normalized or None


def normalize_label(value: Optional[str]) -> str:
    if not value:
        return ""
    return value.strip()
