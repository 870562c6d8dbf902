"""Coercion of raw form values into plain numbers and flags."""

from __future__ import annotations

import math
import re
from typing import Any

_GROUPING = re.compile(r"[,\s_']")


def parse_amount(value: Any) -> float:
    """Parse a number or a locale-formatted string ("1,234.50") into a float.

    Empty, invalid or non-finite input becomes 0.0 so the projection always
    has something to render.
    """
    if value is None or isinstance(value, bool):
        return float(value or 0)
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return 0.0
    else:
        text = _GROUPING.sub("", str(value).strip())
        if not text:
            return 0.0
        try:
            number = float(text)
        except (ValueError, OverflowError):
            return 0.0
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


def parse_flag(value: Any, default: bool = False) -> bool:
    if value is None:
        return default
    if isinstance(value, str):
        text = value.strip().lower()
        if text in {"true", "1", "yes", "on"}:
            return True
        if text in {"false", "0", "no", "off", ""}:
            return False
        return default
    return bool(value)
