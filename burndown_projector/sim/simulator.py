# burndown_projector/sim/simulator.py
from __future__ import annotations
from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, List, Optional

import numpy as np
import pandas as pd

from ..ingest.scope_changes import ScopeChange, parse_scope_changes
from .burn_models import make_burn_model
from .labels import day_labels
from .params import SimulationParams

_CENT = Decimal("0.01")


def round2(x: float) -> float:
    # half away from zero on the exact binary value (same digits as toFixed(2))
    return float(Decimal(x).quantize(_CENT, rounding=ROUND_HALF_UP))


@dataclass
class DaySeries:
    labels: List[str]
    ideal: List[float]
    actual: List[float]
    scope_delta_by_day: List[float]
    baseline: List[float] = field(default_factory=list)  # ideal line before any scope change

    def __len__(self) -> int:
        return len(self.labels)

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame({
            "Day": np.arange(1, len(self.labels) + 1),
            "Label": self.labels,
            "Ideal": self.ideal,
            "Actual": self.actual,
            "Scope_Delta": self.scope_delta_by_day,
        })


def scope_deltas(changes: Iterable[ScopeChange], days: int) -> List[float]:
    out = [0.0] * days
    for c in changes:
        idx = c.day - 1
        # non-integer days never address a slot
        if float(idx).is_integer() and 0 <= idx < days:
            out[int(idx)] += c.amount
    return out


def adjusted_ideal(total: float, deltas: List[float]) -> List[float]:
    days = len(deltas)
    out = []
    total_so_far = total
    for i in range(days):
        total_so_far += deltas[i]
        out.append(round2(total_so_far - total_so_far * (i / (days - 1))))
    return out


def baseline_ideal(total: float, days: int) -> List[float]:
    return [round2(total - total * (i / (days - 1))) for i in range(days)]


def simulate(params: SimulationParams,
             changes: Optional[Iterable[ScopeChange]] = None,
             rng: Optional[np.random.Generator] = None) -> DaySeries:
    """
    Day-by-day burndown projection.
    - changes: pre-parsed scope changes; parsed from params.scope_changes_text when omitted
    - rng: overrides the generator seeded from params.seed (realistic model only)
    """
    days = params.days
    total = params.total
    if changes is None:
        changes = parse_scope_changes(params.scope_changes_text)

    labels = day_labels(params.start_date, days)
    deltas = scope_deltas(changes, days)
    model = make_burn_model(params, rng)

    baseline_burn = total / (days - 1)
    remaining = total
    actual: List[float] = []
    for i in range(days):
        delta = deltas[i]
        if delta != 0:
            remaining = max(0.0, remaining + delta)

        if i == 0:
            actual.append(round2(remaining))
            continue

        burn = model.burn(i, baseline_burn, remaining)
        remaining = max(0.0, remaining - burn)
        actual.append(round2(remaining))

    return DaySeries(labels=labels,
                     ideal=adjusted_ideal(total, deltas),
                     actual=actual,
                     scope_delta_by_day=deltas,
                     baseline=baseline_ideal(total, days))
