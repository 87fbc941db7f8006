import sys
import os
import time
import csv
import argparse
from typing import Dict, Any, List, Optional, Sequence

# Add project root to path
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

import modesort.sorters.mode_isolating_sort as mis_mod
from modesort.generators.dataset_generator import DatasetGenerator
from modesort.sort_analysis import analyze_sort, check_invariants
from modesort.sorters.sort_errors import SORT_BACKENDS

CSV_FIELDS = [
    "trial", "size", "dominance", "backend", "workers",
    "mode", "mode_count", "non_mode_count",
    "mode_time_ms", "sort_time_ms", "rebuild_time_ms", "total_time_ms",
    "standard_time_ms", "mode_share", "valid",
]


def run_single_trial(values: Sequence[int], backend: Optional[str] = None,
                     workers: Optional[int] = None) -> Dict[str, Any]:
    """
    Runs the mode-isolating sort and the standard sort on the same input.
    """
    result, metrics = analyze_sort(values, backend=backend, workers=workers)

    start = time.perf_counter()
    sorted(values)
    standard_ms = (time.perf_counter() - start) * 1000.0

    violations = check_invariants(values, result)
    for v in violations:
        print(f"  Invariant violated (n={len(values)}): {v}")

    return {
        "size": metrics.length,
        "backend": metrics.backend,
        "workers": metrics.workers,
        "mode": metrics.mode,
        "mode_count": metrics.mode_count,
        "non_mode_count": metrics.non_mode_count,
        "mode_time_ms": metrics.mode_time_ms,
        "sort_time_ms": metrics.sort_time_ms,
        "rebuild_time_ms": metrics.rebuild_time_ms,
        "total_time_ms": metrics.total_time_ms,
        "standard_time_ms": standard_ms,
        "mode_share": metrics.mode_share,
        "valid": not violations,
    }


def run_benchmark(sizes: Sequence[int], dominances: Sequence[float], trials: int,
                  backend: Optional[str] = None, seed: Optional[int] = None,
                  verbose: bool = True, workers: Optional[int] = None) -> List[Dict[str, Any]]:
    """
    Run every (size, dominance) config `trials` times.
    Trial t of a config uses seed + t so reruns with the same seed match.
    """
    results = []
    total = len(sizes) * len(dominances) * trials
    done = 0

    for size in sizes:
        for dominance in dominances:
            for t in range(trials):
                done += 1
                if verbose:
                    print(f"  [{done}/{total}] n={size} dominance={dominance} trial {t+1}/{trials} ...", end="\r")

                trial_seed = None if seed is None else seed + t
                values = DatasetGenerator(size, dominance, seed=trial_seed).generate()
                row = run_single_trial(values, backend, workers)
                row["trial"] = t + 1
                row["dominance"] = dominance
                results.append(row)

    if verbose:
        print()
    return results


def summarize(results: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Average the timings per (size, dominance), in first-seen order."""
    groups: Dict[tuple, List[Dict[str, Any]]] = {}
    for r in results:
        groups.setdefault((r["size"], r["dominance"]), []).append(r)

    summary = []
    for (size, dominance), rows in groups.items():
        count = len(rows)
        summary.append({
            "size": size,
            "dominance": dominance,
            "trials": count,
            "avg_total_ms": sum(r["total_time_ms"] for r in rows) / count,
            "avg_standard_ms": sum(r["standard_time_ms"] for r in rows) / count,
            "avg_mode_share": sum(r["mode_share"] for r in rows) / count,
            "all_valid": all(r["valid"] for r in rows),
        })
    return summary


def write_csv(results: List[Dict[str, Any]], path: str) -> None:
    with open(path, "w", newline="") as f:
        dict_writer = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        dict_writer.writeheader()
        dict_writer.writerows(results)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Benchmark the mode-isolating sort against a standard sort")
    parser.add_argument("--sizes", type=int, nargs="+", default=[100, 500, 1000], help="Input sizes")
    parser.add_argument("--dominance", type=float, nargs="+", default=[0.1, 0.5, 0.9],
                        help="Fractions of positions holding the dominant value")
    parser.add_argument("--trials", type=int, default=3, help="Trials per configuration")
    parser.add_argument("--backend", type=str, default=None, choices=SORT_BACKENDS,
                        help="Non-mode sort backend (default: MODESORT_BACKEND or builtin)")
    parser.add_argument("--workers", type=int, default=None,
                        help="Mode finder workers (default: MODESORT_WORKERS or 1)")
    parser.add_argument("--seed", type=int, default=None, help="Base RNG seed")
    parser.add_argument("--output", type=str, default="benchmark_results.csv", help="Output CSV file")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    # Debug output would drown the timings
    mis_mod.DEBUG_MODE = False

    print(f"Starting Benchmark: sizes={args.sizes}, dominance={args.dominance}, {args.trials} trials")
    results = run_benchmark(args.sizes, args.dominance, args.trials, args.backend, args.seed,
                            workers=args.workers)
    print("Benchmark Complete!")

    write_csv(results, args.output)
    print(f"Results saved to {args.output}")

    print("\nSummary Statistics:")
    print(f"{'Size':>6} | {'Dominance':>9} | {'Mode-Iso (ms)':>13} | {'Standard (ms)':>13} | {'Mode Share':>10} | {'Valid':<5}")
    print("-" * 73)
    summary = summarize(results)
    for s in summary:
        print(f"{s['size']:>6} | {s['dominance']:>9.2f} | {s['avg_total_ms']:>13.4f} | "
              f"{s['avg_standard_ms']:>13.4f} | {s['avg_mode_share'] * 100:>9.1f}% | {str(s['all_valid']):<5}")

    return 0 if all(s["all_valid"] for s in summary) else 1


if __name__ == "__main__":
    sys.exit(main())
