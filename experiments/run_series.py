"""Sweep fanout and neighbourhood size and export CSV summaries."""

from __future__ import annotations

import argparse
import csv
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(ROOT))

from gossipsim.config import GossipConfig
from gossipsim.runner import run_experiments


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run fanout/neighborhood sweep experiments")
    parser.add_argument("--nodes", type=int, default=200)
    parser.add_argument("--cycles", type=int, default=30)
    parser.add_argument("--runs", type=int, default=5)
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("outputs/series_summary.csv"),
        help="CSV output path",
    )
    return parser.parse_args()


def scenario_rows() -> list[dict]:
    rows = []
    for fanout in (1, 2, 4, 8):
        for max_neighbors in (10, 20, 40):
            if max_neighbors <= fanout:
                continue
            rows.append(
                {
                    "name": f"f{fanout}_n{max_neighbors}",
                    "config": GossipConfig(fanout=fanout, max_neighbors=max_neighbors),
                }
            )
    return rows


def main() -> None:
    args = parse_args()
    rows = []
    for scenario in scenario_rows():
        aggregate = run_experiments(
            scenario["config"],
            args.nodes,
            args.runs,
            args.seed,
            max_cycles=args.cycles,
            until_all_infected=True,
        )
        summary = aggregate.summary
        rows.append(
            {
                "scenario": scenario["name"],
                "fanout": scenario["config"].fanout,
                "max_neighbors": scenario["config"].max_neighbors,
                "infected_mean": summary["infected"]["mean"],
                "cycles_to_half_mean": summary["cycles_to_half"]["mean"],
                "cycles_to_all_mean": summary["cycles_to_all"]["mean"],
                "messages_mean": summary["messages"]["mean"],
            }
        )

    args.output.parent.mkdir(parents=True, exist_ok=True)
    with args.output.open("w", newline="") as handle:
        writer = csv.DictWriter(handle, fieldnames=rows[0].keys())
        writer.writeheader()
        writer.writerows(rows)


if __name__ == "__main__":
    main()
