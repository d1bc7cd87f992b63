import argparse
import sys
from datetime import date

from ..config import DEFAULT_CONFIG
from ..pipeline.orchestrator import run_burndown
from ..sim.params import MODELS, InvalidParamsError, SimulationParams
from ..utils.logging_utils import get_logger

log = get_logger()


def _build_parser() -> argparse.ArgumentParser:
    cfg = DEFAULT_CONFIG
    ap = argparse.ArgumentParser(
        description="Burndown Projector - simulate ideal vs actual remaining work per day"
    )
    ap.add_argument("--start", type=str, default=date.today().isoformat(),
                    help="Start date (YYYY-MM-DD); use '' for plain 'Day N' labels")
    ap.add_argument("--days", type=float, default=cfg.default_days,
                    help=f"Duration in days ({cfg.min_days}-{cfg.max_days})")
    ap.add_argument("--total", type=float, default=cfg.default_total, help="Total work")
    ap.add_argument("--model", choices=MODELS, default=cfg.default_model, help="Burn model")
    ap.add_argument("--variability", type=float, default=cfg.default_variability,
                    help="Realistic model variability in percent (0-60)")
    ap.add_argument("--scope", type=str, default=cfg.default_scope,
                    help="Scope changes as 'day:amount, ...' (e.g. '3:+10, 6:-5')")
    ap.add_argument("--seed", type=int, default=cfg.random_state,
                    help="Seed for the realistic model (omit for a fresh run each time)")

    ap.add_argument("--out", type=str, default="reports", help="Output folder")
    ap.add_argument("--no-chart", action="store_true", help="Skip the PNG chart")
    ap.add_argument("--pdf", action="store_true", help="Also build a PDF report")
    ap.add_argument("--csv-stdout", action="store_true", help="Print the CSV to STDOUT")
    return ap


def _params_from_args(args: argparse.Namespace) -> SimulationParams:
    return SimulationParams(
        start_date=args.start or None,
        duration_days=args.days,
        total_work=args.total,
        model=args.model,
        variability=args.variability,
        scope_changes_text=args.scope,
        seed=args.seed,
    )


def main(argv=None):
    args = _build_parser().parse_args(argv)
    try:
        params = _params_from_args(args)
        res = run_burndown(params, outdir=args.out, chart=not args.no_chart, pdf=args.pdf)
    except InvalidParamsError as e:
        raise SystemExit(str(e))

    if res.scope.rejected:
        log.info(f"Scope tokens ignored: {', '.join(res.scope.rejected)}")
    log.info("=== DAILY PROJECTION ===")
    for line in res.table.to_string(index=False).splitlines():
        log.info(line)
    log.info("=== SUMMARY ===")
    log.info(res.summary["completion_message"])
    log.info(f"Total scope change: {res.summary['total_scope_change_display']}")
    for k, v in res.paths.items():
        log.info(f"{k}: {v}")

    if args.csv_stdout:
        sys.stdout.write(res.csv_text + "\n")
    return res


if __name__ == "__main__":
    main()
