# backend/app/planner/parsers.py
from __future__ import annotations

import re
from typing import Any, Optional


_CLEAN_RE = re.compile(r"[,\s_]")
_DOLLAR_RE = re.compile(r"\$|usd", re.IGNORECASE)


def parse_usd(value: Any) -> Optional[float]:
    """
    Lenient dollar parser for form and document input.
    Handles:
      - 80000, "80000", "80,000"
      - "$80,000", "USD 80000", "-$500"
      - "12k", "1.5m", "2 million"
    Returns float dollars or None.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)

    s = str(value).strip()
    if not s:
        return None

    s = _DOLLAR_RE.sub("", s).strip().lower()
    s = _CLEAN_RE.sub("", s)
    s = s.replace("million", "m").replace("thousand", "k")

    m = re.match(r"^(-?[0-9]*\.?[0-9]+)(k|m)$", s)
    if m:
        num = float(m.group(1))
        if m.group(2) == "k":
            return num * 1000.0
        return num * 1000000.0

    try:
        return float(s)
    except ValueError:
        return None


def safe_amount(value: Any) -> float:
    parsed = parse_usd(value)
    return 0.0 if parsed is None else parsed


def safe_int(value: Any, default: int = 0) -> int:
    parsed = parse_usd(value)
    if parsed is None:
        return default
    return int(parsed)


def clean_code(value: Any) -> str:
    # Jurisdiction codes are matched case-sensitively ("USA", "GA"); only trim.
    if value is None:
        return ""
    return str(value).strip()
