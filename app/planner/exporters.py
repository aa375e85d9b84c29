# backend/app/planner/exporters.py
from __future__ import annotations

import csv
import io
from datetime import date
from typing import Any, Dict, Optional, Tuple

CSV_HEADERS = ["Asset Class", "Percentage", "Amount", "Suggestions"]


def _format_pct(pct: Any) -> str:
    if isinstance(pct, float) and pct.is_integer():
        pct = int(pct)
    return f"{pct}%"


def _allocation_row(a: Dict[str, Any]) -> list:
    pct = a.get("percentage", 0)
    amount = float(a.get("amount") or 0.0)
    return [
        str(a.get("assetClass", "")),
        _format_pct(pct),
        f"${amount:.2f}",
        "; ".join(str(s) for s in a.get("suggestedInstruments") or []),
    ]


def export_plan_csv(plan: Dict[str, Any], on: Optional[date] = None) -> Tuple[str, bytes]:
    """
    Flatten a wire-shaped plan into one CSV row per allocation.
    Header row unquoted, data cells always quoted.
    """
    day = on or date.today()
    buf = io.StringIO()
    buf.write(",".join(CSV_HEADERS) + "\n")
    writer = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\n")
    for a in plan.get("allocations") or []:
        writer.writerow(_allocation_row(a))
    return f"finplanner_plan_{day.isoformat()}.csv", buf.getvalue().encode("utf-8")
