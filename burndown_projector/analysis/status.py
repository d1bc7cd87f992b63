# burndown_projector/analysis/status.py
from __future__ import annotations
from typing import List, Sequence

from ..config import DEFAULT_CONFIG

ON_TRACK, AT_RISK, OFF_TRACK = "On track", "At risk", "Off track"
STATUSES = (ON_TRACK, AT_RISK, OFF_TRACK)

def classify(actual: float, ideal: float, tolerance: float = DEFAULT_CONFIG.at_risk_tolerance) -> str:
    if actual <= ideal:
        return ON_TRACK
    if actual <= ideal * tolerance:
        return AT_RISK
    return OFF_TRACK

def classify_series(actual: Sequence[float], ideal: Sequence[float],
                    tolerance: float = DEFAULT_CONFIG.at_risk_tolerance) -> List[str]:
    return [classify(a, i, tolerance) for a, i in zip(actual, ideal)]
