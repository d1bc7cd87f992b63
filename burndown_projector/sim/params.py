# burndown_projector/sim/params.py
from __future__ import annotations
import math
from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional, Union

from ..config import DEFAULT_CONFIG

MODELS = ("linear", "realistic", "custom")

# custom_burn(day_index, baseline_burn, remaining) -> burn for that day
CustomBurn = Callable[[int, float, float], float]


class InvalidParamsError(ValueError):
    """Raised when duration or total work cannot produce a projection."""


def clamp(n: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, n))


@dataclass
class SimulationParams:
    start_date: Optional[Union[str, date]] = None
    duration_days: int = DEFAULT_CONFIG.default_days
    total_work: float = DEFAULT_CONFIG.default_total
    model: str = DEFAULT_CONFIG.default_model
    variability: float = DEFAULT_CONFIG.default_variability
    scope_changes_text: str = ""
    seed: Optional[int] = DEFAULT_CONFIG.random_state
    custom_burn: Optional[CustomBurn] = None

    @property
    def days(self) -> int:
        return int(clamp(int(self.duration_days), DEFAULT_CONFIG.min_days, DEFAULT_CONFIG.max_days))

    @property
    def total(self) -> float:
        return max(1.0, float(self.total_work))

    @property
    def variability_fraction(self) -> float:
        return clamp(float(self.variability), 0.0, DEFAULT_CONFIG.max_variability) / 100.0


def _finite(x) -> bool:
    try:
        return math.isfinite(float(x))
    except (TypeError, ValueError):
        return False


def validate_params(params: SimulationParams) -> SimulationParams:
    """
    Caller-side checks done before simulating. Nothing is produced when they fail.
    """
    if not _finite(params.duration_days) or float(params.duration_days) < DEFAULT_CONFIG.min_days:
        raise InvalidParamsError("Duration must be at least 2 days.")
    if not _finite(params.total_work) or float(params.total_work) <= 0:
        raise InvalidParamsError("Total work must be greater than 0.")
    if params.model not in MODELS:
        raise ValueError(f"Unknown burn model: {params.model!r} (expected one of {', '.join(MODELS)})")
    return params
