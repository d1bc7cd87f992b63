# burndown_projector/analysis/burndown.py
from __future__ import annotations
from typing import Optional, Sequence

import pandas as pd

from ..config import DEFAULT_CONFIG
from ..sim.simulator import DaySeries
from .status import STATUSES, classify_series


def format_number(v: float) -> str:
    """Shortest form of a number: 10, 2.5, -5."""
    f = float(v)
    if f.is_integer():
        return str(int(f))
    return repr(f)


def _signed(v: float) -> str:
    return ("+" if v >= 0 else "") + format_number(v)


def _delta_cell(v: float) -> str:
    if v == 0:
        return ""
    return ("+" if v > 0 else "") + format_number(v)


def build_table(series: DaySeries, tolerance: float = DEFAULT_CONFIG.at_risk_tolerance) -> pd.DataFrame:
    if len(series) == 0:
        return pd.DataFrame()
    out = series.to_frame()
    out["Status"] = classify_series(series.actual, series.ideal, tolerance)
    out["Ideal"] = out["Ideal"].map(lambda v: f"{v:.2f}")
    out["Actual"] = out["Actual"].map(lambda v: f"{v:.2f}")
    out["Scope_Delta"] = out["Scope_Delta"].map(_delta_cell)
    return out[["Day", "Label", "Ideal", "Actual", "Scope_Delta", "Status"]]


def completion_day(actual: Sequence[float]) -> Optional[int]:
    # only reported when the projection ends at zero
    if not len(actual) or actual[-1] != 0:
        return None
    return next(i for i, v in enumerate(actual) if v == 0) + 1


def total_scope_change(series: DaySeries) -> float:
    return float(sum(series.scope_delta_by_day))


def summarize(series: DaySeries, tolerance: float = DEFAULT_CONFIG.at_risk_tolerance) -> dict:
    day = completion_day(series.actual)
    scope = total_scope_change(series)
    if day:
        msg = f"Projected completion: reached zero on Day {day}."
    else:
        msg = "Projected completion: not reached within the selected duration."
    statuses = pd.Series(classify_series(series.actual, series.ideal, tolerance))
    counts = statuses.value_counts().reindex(list(STATUSES), fill_value=0)
    return {
        "days": len(series),
        "completion_day": day,
        "completion_message": msg,
        "total_scope_change": scope,
        "total_scope_change_display": _signed(scope),
        "final_remaining": float(series.actual[-1]) if len(series) else 0.0,
        "status_counts": {k: int(v) for k, v in counts.items()},
    }
