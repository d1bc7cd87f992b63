from dataclasses import dataclass
from typing import Optional

@dataclass
class Config:
    min_days: int = 2
    max_days: int = 120
    max_variability: float = 60.0   # percent
    at_risk_tolerance: float = 1.15  # actual may exceed ideal by 15% before "Off track"
    random_state: Optional[int] = None
    report_title: str = "Burndown Projection Report"
    # CLI defaults
    default_days: int = 10
    default_total: float = 100.0
    default_model: str = "realistic"
    default_variability: float = 20.0
    default_scope: str = "3:+10, 6:+5"

DEFAULT_CONFIG = Config()
