"""
Presentation Chart Generator
=============================
Generates charts comparing the mode-isolating sort with a standard sort.
Run:  python generate_presentation_charts.py --trials 3
Output: presentation_charts/ folder with 3 PNG files.
"""

import sys
import os
import argparse
import numpy as np
from typing import Dict, Any, List

# Ensure project root is on the path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend for file output
import matplotlib.pyplot as plt

from benchmark_sorts import run_benchmark

# Suppress sorter debug output
import modesort.sorters.mode_isolating_sort as mis_mod
mis_mod.DEBUG_MODE = False

# ----------------------------------------------------------------------
# Color Palette & Styling
# ----------------------------------------------------------------------
COLORS = {
    "mode_iso": "#339AF0",   # Sky Blue
    "standard": "#51CF66",   # Emerald Green
    "mode":     "#FF6B6B",   # Coral Red
    "sort":     "#E0AF68",   # Gold
    "rebuild":  "#9775FA",   # Violet
}
BG_COLOR = "#1A1B26"
CARD_COLOR = "#24283B"
TEXT_COLOR = "#C0CAF5"
GRID_COLOR = "#414868"


def setup_style():
    """Apply a dark, presentation-friendly matplotlib style."""
    plt.rcParams.update({
        "figure.facecolor": BG_COLOR,
        "axes.facecolor": CARD_COLOR,
        "axes.edgecolor": GRID_COLOR,
        "axes.labelcolor": TEXT_COLOR,
        "axes.titleweight": "bold",
        "text.color": TEXT_COLOR,
        "xtick.color": TEXT_COLOR,
        "ytick.color": TEXT_COLOR,
        "grid.color": GRID_COLOR,
        "grid.alpha": 0.3,
        "font.size": 13,
        "axes.titlesize": 16,
        "legend.facecolor": CARD_COLOR,
        "legend.edgecolor": GRID_COLOR,
        "figure.dpi": 150,
        "savefig.dpi": 150,
        "savefig.bbox": "tight",
        "savefig.facecolor": BG_COLOR,
    })


def _mean_by(results: List[Dict[str, Any]], group_key: str, value_key: str,
              groups: List[Any], **filters) -> np.ndarray:
    """Mean of value_key per group, over rows matching all filters."""
    means = []
    for g in groups:
        vals = [r[value_key] for r in results
                if r[group_key] == g and all(r[k] == v for k, v in filters.items())]
        means.append(np.mean(vals) if vals else 0.0)
    return np.array(means)


# ----------------------------------------------------------------------
# Chart Generators
# ----------------------------------------------------------------------
def chart_1_runtime_vs_size(results, sizes, dominance, out_dir):
    """Line chart: mode-isolating vs standard runtime as n grows."""
    fig, ax = plt.subplots(figsize=(10, 6))
    iso = _mean_by(results, "size", "total_time_ms", sizes, dominance=dominance)
    std = _mean_by(results, "size", "standard_time_ms", sizes, dominance=dominance)

    ax.plot(sizes, iso, marker="o", color=COLORS["mode_iso"], label="Mode-isolating sort")
    ax.plot(sizes, std, marker="s", color=COLORS["standard"], label="Standard sort")
    ax.set_xlabel("Input size (n)")
    ax.set_ylabel("Time (ms)")
    ax.set_yscale("log")
    ax.set_title(f"Runtime vs Input Size (dominance {dominance:.0%})", pad=15)
    ax.legend(loc="upper left")
    ax.grid(zorder=0)

    path = os.path.join(out_dir, "1_runtime_vs_size.png")
    fig.savefig(path)
    plt.close(fig)
    print(f"  Saved {path}")


def chart_2_phase_breakdown(results, sizes, dominance, out_dir):
    """Stacked bars: time spent per phase for each input size."""
    fig, ax = plt.subplots(figsize=(10, 6))
    x = np.arange(len(sizes))
    bottom = np.zeros(len(sizes))

    for key, label, color in [("mode_time_ms", "Mode scan", COLORS["mode"]),
                              ("sort_time_ms", "Non-mode sort", COLORS["sort"]),
                              ("rebuild_time_ms", "Reconstruction", COLORS["rebuild"])]:
        vals = _mean_by(results, "size", key, sizes, dominance=dominance)
        ax.bar(x, vals, 0.6, bottom=bottom, label=label, color=color, edgecolor="none", zorder=3)
        bottom += vals

    ax.set_xticks(x)
    ax.set_xticklabels([str(s) for s in sizes])
    ax.set_xlabel("Input size (n)")
    ax.set_ylabel("Time (ms)")
    ax.set_title("Where the Time Goes", pad=15)
    ax.legend(loc="upper left")
    ax.grid(axis="y", zorder=0)

    path = os.path.join(out_dir, "2_phase_breakdown.png")
    fig.savefig(path)
    plt.close(fig)
    print(f"  Saved {path}")


def chart_3_mode_share(results, dominances, sizes, out_dir):
    """Mode-scan share of total runtime vs dominance, one line per size."""
    fig, ax = plt.subplots(figsize=(10, 6))
    cmap = plt.get_cmap("cool")

    for i, size in enumerate(sizes):
        share = _mean_by(results, "dominance", "mode_share", dominances, size=size)
        ax.plot(dominances, share * 100, marker="o", label=f"n={size}",
                color=cmap(i / max(1, len(sizes) - 1)))

    ax.set_xlabel("Dominant value share")
    ax.set_ylabel("Mode scan share of runtime (%)")
    ax.set_ylim(0, 105)
    ax.set_title("Mode-Finding Overhead", pad=15)
    ax.legend(loc="lower left")
    ax.grid(zorder=0)

    path = os.path.join(out_dir, "3_mode_share.png")
    fig.savefig(path)
    plt.close(fig)
    print(f"  Saved {path}")


# ----------------------------------------------------------------------
# Main
# ----------------------------------------------------------------------
def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate Presentation Charts")
    parser.add_argument("--trials", type=int, default=3,
                        help="Trials per configuration (default: 3)")
    parser.add_argument("--seed", type=int, default=7, help="Base RNG seed (default: 7)")
    parser.add_argument("--quick", action="store_true",
                        help="Quick mode: fewer configs for faster testing")
    parser.add_argument("--out-dir", type=str,
                        default=os.path.join(os.path.dirname(os.path.abspath(__file__)), "presentation_charts"),
                        help="Output folder")
    args = parser.parse_args(argv)

    os.makedirs(args.out_dir, exist_ok=True)
    setup_style()

    if args.quick:
        sizes = [50, 200]
        dominances = [0.2, 0.8]
    else:
        sizes = [100, 250, 500, 1000, 2000]
        dominances = [0.1, 0.3, 0.5, 0.7, 0.9]
    focus_dominance = dominances[len(dominances) // 2]

    print("=" * 56)
    print("   Mode-Isolating Sort Benchmark -- Presentation Edition")
    print("=" * 56)
    print(f"  Trials per config : {args.trials}")
    print(f"  Sizes             : {sizes}")
    print(f"  Dominance         : {dominances}")
    print(f"  Output folder     : {args.out_dir}")
    print()

    print("Phase 1/2: Running Benchmarks...")
    results = run_benchmark(sizes, dominances, args.trials, seed=args.seed)

    print("\nPhase 2/2: Generating Charts...")
    chart_1_runtime_vs_size(results, sizes, focus_dominance, args.out_dir)
    chart_2_phase_breakdown(results, sizes, focus_dominance, args.out_dir)
    chart_3_mode_share(results, dominances, sizes, args.out_dir)

    invalid = sum(1 for r in results if not r["valid"])
    print(f"\nAll 3 charts saved to: {args.out_dir}")
    if invalid:
        print(f"WARNING: {invalid} trial(s) violated sort invariants")
    return 0 if not invalid else 1


if __name__ == "__main__":
    sys.exit(main())
