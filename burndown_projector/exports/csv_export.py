# burndown_projector/exports/csv_export.py
from __future__ import annotations
import csv
import os

import pandas as pd

from ..analysis.burndown import format_number
from ..sim.simulator import DaySeries

HEADER = ["day", "label", "ideal_remaining", "actual_remaining", "scope_delta"]


def to_frame(series: DaySeries) -> pd.DataFrame:
    return pd.DataFrame({
        "day": [str(i + 1) for i in range(len(series))],
        "label": series.labels,
        "ideal_remaining": [f"{v:.2f}" for v in series.ideal],
        "actual_remaining": [f"{v:.2f}" for v in series.actual],
        "scope_delta": [format_number(v) for v in series.scope_delta_by_day],
    }, columns=HEADER)


def to_csv(series: DaySeries) -> str:
    """Every field quoted, embedded quotes doubled, rows joined by newline."""
    text = to_frame(series).to_csv(index=False, quoting=csv.QUOTE_ALL, lineterminator="\n")
    return text.rstrip("\n")


def write_csv(series: DaySeries, path: str) -> str:
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(to_csv(series))
    return path
