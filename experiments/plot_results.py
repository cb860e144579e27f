"""Plot CSV summaries produced by run_series.py."""

from __future__ import annotations

import argparse
import csv
from pathlib import Path

import matplotlib.pyplot as plt


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Plot scenario summaries")
    parser.add_argument(
        "--input",
        type=Path,
        default=Path("outputs/series_summary.csv"),
        help="Input CSV file",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("outputs/summary_plot.png"),
        help="Output image path",
    )
    return parser.parse_args()


def read_rows(path: Path):
    with path.open("r", newline="") as handle:
        reader = csv.DictReader(handle)
        return list(reader)


def main() -> None:
    args = parse_args()
    rows = read_rows(args.input)
    if not rows:
        raise SystemExit("No rows found in input CSV.")

    parsed = []
    for row in rows:
        parsed.append(
            {
                "label": row["scenario"],
                "half": float(row["cycles_to_half_mean"]),
                "all": float(row["cycles_to_all_mean"]),
                "messages": float(row["messages_mean"]),
            }
        )

    parsed.sort(key=lambda item: item["all"])
    labels = [row["label"] for row in parsed]
    half = [row["half"] for row in parsed]
    full = [row["all"] for row in parsed]
    messages = [row["messages"] for row in parsed]

    fig, (ax1, ax2) = plt.subplots(nrows=2, figsize=(10, 6), sharex=True)

    x = range(len(labels))
    ax1.plot(x, half, marker="o", label="Cycles to 50%")
    ax1.plot(x, full, marker="o", label="Cycles to 100%")
    ax1.set_ylabel("Cycles")
    ax1.legend()
    ax1.set_title("Scenario Comparison (sorted by cycles to 100%)")

    ax2.bar(x, messages, color="#ff7f0e")
    ax2.set_ylabel("Messages")
    ax2.set_xticks(list(x), labels, rotation=45, fontsize=8)

    fig.tight_layout()

    args.output.parent.mkdir(parents=True, exist_ok=True)
    plt.savefig(args.output)


if __name__ == "__main__":
    main()
