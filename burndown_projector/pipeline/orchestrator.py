# burndown_projector/pipeline/orchestrator.py
from __future__ import annotations
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import pandas as pd

from ..analysis.burndown import build_table, summarize
from ..config import Config, DEFAULT_CONFIG
from ..exports.csv_export import to_csv, write_csv
from ..ingest.scope_changes import ScopeParseResult, parse_scope_changes_detailed
from ..sim.params import SimulationParams, validate_params
from ..sim.simulator import DaySeries, simulate
from ..utils.logging_utils import ensure_dirs, get_logger

log = get_logger()


@dataclass
class BurndownResult:
    params: SimulationParams
    series: DaySeries
    scope: ScopeParseResult
    table: pd.DataFrame
    summary: Dict[str, Any]
    csv_text: str
    paths: Dict[str, str] = field(default_factory=dict)


def _ensure_dirs(outdir: str) -> Tuple[str, str, str]:
    outdir = outdir or "reports"
    figdir = os.path.join(outdir, "fig")
    expdir = os.path.join(outdir, "exports")
    ensure_dirs(outdir, figdir, expdir)
    return outdir, figdir, expdir


def project(params: SimulationParams,
            rng: Optional[np.random.Generator] = None,
            config: Config = DEFAULT_CONFIG) -> BurndownResult:
    """Validate, parse and simulate. No files are written."""
    validate_params(params)
    scope = parse_scope_changes_detailed(params.scope_changes_text)
    series = simulate(params, scope.accepted, rng=rng)
    table = build_table(series, config.at_risk_tolerance)
    summary = summarize(series, config.at_risk_tolerance)
    log.info(f"Simulated {len(series)} days (model={params.model}, total={params.total:g}, "
             f"scope changes={len(scope.accepted)})")
    return BurndownResult(params=params, series=series, scope=scope, table=table,
                          summary=summary, csv_text=to_csv(series))


def run_burndown(params: SimulationParams,
                 outdir: str = "reports",
                 chart: bool = True,
                 pdf: bool = False,
                 rng: Optional[np.random.Generator] = None,
                 config: Config = DEFAULT_CONFIG) -> BurndownResult:
    res = project(params, rng=rng, config=config)
    outdir, figdir, expdir = _ensure_dirs(outdir)

    res.paths["csv"] = write_csv(res.series, os.path.join(expdir, "burndown.csv"))
    log.info(f"CSV saved: {res.paths['csv']}")

    fig_paths: List[str] = []
    if chart:
        try:
            from ..viz.charts import save_burndown_chart
            p = save_burndown_chart(res.series, os.path.join(figdir, "burndown.png"))
            if p:
                res.paths["chart"] = p
                fig_paths.append(p)
        except Exception as e:
            log.warning(f"Chart failed: {e}")

    if pdf:
        try:
            from ..viz.pdf_report import build_pdf
            res.paths["pdf"] = build_pdf(config.report_title, res.summary, fig_paths,
                                         {"Daily projection": res.table},
                                         os.path.join(outdir, "Burndown_Report.pdf"))
            log.info(f"Report saved: {res.paths['pdf']}")
        except Exception as e:
            log.warning(f"PDF report failed: {e}")

    return res
