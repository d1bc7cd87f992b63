# burndown_projector/ingest/scope_changes.py
from __future__ import annotations
import math
from dataclasses import dataclass, field
from typing import List, Optional

from ..utils.logging_utils import get_logger

log = get_logger()


@dataclass(frozen=True)
class ScopeChange:
    day: float      # 1-based; fractional days parse but never land on a day index
    amount: float


@dataclass
class ScopeParseResult:
    accepted: List[ScopeChange] = field(default_factory=list)
    rejected: List[str] = field(default_factory=list)


def _to_number(s: str) -> Optional[float]:
    s = (s or "").strip()
    if not s or "_" in s:
        return None
    try:
        v = float(s)
    except ValueError:
        return None
    return v if math.isfinite(v) else None


def parse_scope_changes_detailed(text: Optional[str]) -> ScopeParseResult:
    """
    Parse "day:amount, day:amount" (e.g. "3:+10, 6:-5").
    Malformed tokens and days < 1 are collected in `rejected` rather than raised.
    """
    res = ScopeParseResult()
    if not text or not text.strip():
        return res

    for tok in (t.strip() for t in text.split(",")):
        if not tok:
            continue
        parts = [p.strip() for p in tok.split(":")]
        day = _to_number(parts[0])
        amount = _to_number(parts[1]) if len(parts) > 1 else None
        if day is None or amount is None or day < 1:
            res.rejected.append(tok)
            continue
        res.accepted.append(ScopeChange(day=day, amount=amount))

    if res.rejected:
        log.warning(f"Ignored {len(res.rejected)} scope change token(s): {res.rejected}")
    return res


def parse_scope_changes(text: Optional[str]) -> List[ScopeChange]:
    return parse_scope_changes_detailed(text).accepted
