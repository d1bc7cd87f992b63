# burndown_projector/sim/burn_models.py
from __future__ import annotations
from typing import Optional

import numpy as np

from .params import CustomBurn, SimulationParams


class BurnModel:
    name = "base"

    def burn(self, day_index: int, baseline: float, remaining: float) -> float:
        return baseline


class LinearBurn(BurnModel):
    name = "linear"


class RealisticBurn(BurnModel):
    """Baseline burn scaled by (1 + r*v), r ~ U[-1, 1] drawn fresh per day."""
    name = "realistic"

    def __init__(self, variability: float, rng: Optional[np.random.Generator] = None):
        self.v = float(variability)
        self.rng = rng if rng is not None else np.random.default_rng()

    def burn(self, day_index: int, baseline: float, remaining: float) -> float:
        r = float(self.rng.uniform(-1.0, 1.0))
        return max(0.0, baseline * (1 + r * self.v))


class CustomBurnModel(BurnModel):
    """User-supplied strategy; without one it behaves like the baseline."""
    name = "custom"

    def __init__(self, fn: Optional[CustomBurn] = None):
        self.fn = fn

    def burn(self, day_index: int, baseline: float, remaining: float) -> float:
        if self.fn is None:
            return baseline
        return max(0.0, float(self.fn(day_index, baseline, remaining)))


def make_burn_model(params: SimulationParams, rng: Optional[np.random.Generator] = None) -> BurnModel:
    if params.model == "linear":
        return LinearBurn()
    if params.model == "realistic":
        if rng is None:
            rng = np.random.default_rng(params.seed)
        return RealisticBurn(params.variability_fraction, rng)
    if params.model == "custom":
        return CustomBurnModel(params.custom_burn)
    raise ValueError(f"Unknown burn model: {params.model!r}")
