# burndown_projector/viz/charts.py
from __future__ import annotations
import os
import numpy as np
import matplotlib.pyplot as plt

from ..sim.simulator import DaySeries

# ====== THEME (Executive Dark) ======
PALETTE = {
    "bg":      "#0B1021",
    "panel":   "#12172B",
    "grid":    "#2B3150",
    "text":    "#EAF0FF",
    "muted":   "#A7B0C8",
    "primary": "#5B8FF9",
    "accent":  "#5AD8A6",
    "danger":  "#F4664A",
}

def _apply_theme():
    plt.rcParams.update({
        "figure.facecolor": PALETTE["bg"],
        "axes.facecolor":   PALETTE["panel"],
        "savefig.facecolor":PALETTE["bg"],
        "axes.edgecolor":   PALETTE["grid"],
        "axes.labelcolor":  PALETTE["text"],
        "axes.titlecolor":  PALETTE["text"],
        "xtick.color":      PALETTE["muted"],
        "ytick.color":      PALETTE["muted"],
        "grid.color":       PALETTE["grid"],
        "text.color":       PALETTE["text"],
        "font.size":        11,
        "axes.titleweight": "bold",
        "axes.grid":        True,
        "grid.linestyle":   "--",
        "grid.linewidth":   0.6,
        "legend.frameon":   False,
    })

def _save(fig, figpath: str):
    os.makedirs(os.path.dirname(figpath) or ".", exist_ok=True)
    fig.tight_layout()
    fig.savefig(figpath, dpi=160, bbox_inches="tight")
    plt.close(fig)
    return figpath

def _annotate_last(ax, x, y, color):
    if len(x) == 0:
        return
    ax.scatter([x[-1]], [y[-1]], s=40, color=color, zorder=5)
    ax.annotate(f"{y[-1]:.1f}", (x[-1], y[-1]), textcoords="offset points",
                xytext=(8, 6), color=color)

def save_burndown_chart(series: DaySeries, out_path: str, title: str = "Burndown: Remaining Work by Day"):
    if series is None or len(series) == 0:
        return None
    _apply_theme()
    fig, ax = plt.subplots(figsize=(9.5, 5.2))
    x = np.arange(len(series))
    ideal = np.asarray(series.ideal, dtype=float)
    actual = np.asarray(series.actual, dtype=float)

    # original plan only differs once scope moved
    if series.baseline and any(series.scope_delta_by_day):
        ax.plot(x, series.baseline, linestyle=":", linewidth=1.4, color=PALETTE["muted"], label="Ideal (original)")
    ax.plot(x, ideal, marker="o", markersize=3, linewidth=2.0, color=PALETTE["primary"], label="Ideal (adjusted)")
    ax.plot(x, actual, marker="o", markersize=3, linewidth=2.2, color=PALETTE["accent"], label="Actual")
    _annotate_last(ax, x, actual, PALETTE["accent"])

    for i, d in enumerate(series.scope_delta_by_day):
        if d:
            ax.axvline(i, color=PALETTE["danger"], alpha=0.35, linewidth=1)

    step = max(1, len(x) // 15)
    ax.set_xticks(x[::step])
    ax.set_xticklabels([series.labels[i] for i in x[::step]], rotation=45, ha="right")
    ax.set_ylim(bottom=min(0.0, float(ideal.min())))
    ax.legend()
    ax.set_title(title)
    ax.set_xlabel("Day"); ax.set_ylabel("Remaining Work")
    return _save(fig, out_path)
