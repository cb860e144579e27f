"""Baseline experiment runner: infection curves for several fanouts."""

from __future__ import annotations

import argparse
from pathlib import Path
import sys

import matplotlib.pyplot as plt

ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(ROOT))

from gossipsim.config import GossipConfig
from gossipsim.metrics import infection_curve
from gossipsim.runner import format_aggregate, run_experiments


def plot_curve(history, label: str) -> None:
    fractions = infection_curve(history)
    if not fractions:
        return
    xs = [summary.cycle for summary in history]
    plt.plot(xs, fractions, marker="o", label=label)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run baseline experiments and plot infection curves")
    parser.add_argument("--nodes", type=int, default=200)
    parser.add_argument("--cycles", type=int, default=15)
    parser.add_argument("--max-neighbors", type=int, default=20)
    parser.add_argument("--min-neighbors", type=int, default=1)
    parser.add_argument(
        "--fanouts",
        type=int,
        nargs="+",
        default=[1, 2, 4, 8],
        help="Fanout values to compare",
    )
    parser.add_argument("--runs", type=int, default=10)
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("outputs/baseline_infection.png"),
        help="Path to save the infection curve plot",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()

    plt.figure(figsize=(7, 4))
    for fanout in args.fanouts:
        config = GossipConfig(
            fanout=fanout,
            max_neighbors=args.max_neighbors,
            min_neighbors=args.min_neighbors,
        )
        aggregate = run_experiments(
            config, args.nodes, args.runs, args.seed, max_cycles=args.cycles
        )
        print(f"Fanout {fanout}")
        print(format_aggregate(aggregate))
        plot_curve(aggregate.runs[0].history, f"fanout={fanout}")

    plt.xlabel("Cycle")
    plt.ylabel("Infected fraction")
    plt.title("Infected nodes per cycle (single run)")
    plt.grid(True, linestyle="--", alpha=0.4)
    plt.legend()

    args.output.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(args.output)


if __name__ == "__main__":
    main()
