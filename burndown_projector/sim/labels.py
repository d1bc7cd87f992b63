# burndown_projector/sim/labels.py
from __future__ import annotations
from datetime import date, datetime, timedelta
from typing import List, Optional, Union

from dateutil.parser import parse as dtparse


def coerce_start_date(value: Optional[Union[str, date]]) -> Optional[date]:
    """Accepts a date/datetime or a string; anything unparseable counts as no start date."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    s = str(value).strip()
    if not s:
        return None
    try:
        return dtparse(s).date()
    except (ValueError, OverflowError):
        return None


def day_labels(start: Optional[Union[str, date]], days: int) -> List[str]:
    d0 = coerce_start_date(start)
    if d0 is None:
        return [f"Day {i+1}" for i in range(days)]
    out = []
    for i in range(days):
        d = d0 + timedelta(days=i)
        out.append(f"D{i+1} ({d.month:02d}/{d.day:02d})")
    return out
