from __future__ import annotations

import math
import random
import statistics
from typing import Dict, List

from .config import GossipConfig
from .metrics import cycles_to_fraction
from .network import overlay_stats
from .random_source import RandomSource
from .results import AggregateResult, CycleSummary, RunResult
from .simulator import GossipSimulator


def simulate_dissemination(
    config: GossipConfig,
    num_nodes: int,
    rng: random.Random,
    initial_infected: int = 1,
    max_cycles: int = 10,
    until_all_infected: bool = False,
    include_overlay_stats: bool = False,
    message: str = "msg",
) -> RunResult:
    if num_nodes < 0:
        raise ValueError("num_nodes must not be negative")
    if initial_infected < 0:
        raise ValueError("initial_infected must not be negative")

    simulator = GossipSimulator(config, RandomSource.from_rng(rng))
    simulator.create_nodes(num_nodes)
    simulator.infect_random_nodes(initial_infected, message)
    history = simulator.run(max_cycles, until_all_infected=until_all_infected)

    return RunResult(
        config=simulator.config,
        num_nodes=num_nodes,
        history=history,
        overlay=overlay_stats(simulator) if include_overlay_stats else None,
    )


def summarize_runs(runs: List[RunResult]) -> AggregateResult:
    def metric_values(selector) -> List[float]:
        return [selector(run) for run in runs]

    summary: Dict[str, Dict[str, float]] = {}
    for name, selector in (
        ("infected", lambda r: r.final_fraction),
        ("messages", lambda r: r.total_messages),
        ("cycles_to_all", lambda r: r.cycles_to_all),
        ("cycles_to_half", lambda r: cycles_to_fraction(r.history, 0.5)),
    ):
        values = metric_values(selector)
        # runs that never reach the threshold are reported through min/max only
        finite = [value for value in values if math.isfinite(value)]
        summary[name] = {
            "mean": statistics.mean(finite) if finite else math.inf,
            "min": min(values),
            "max": max(values),
        }

    return AggregateResult(runs=runs, summary=summary)


def run_experiments(
    config: GossipConfig,
    num_nodes: int,
    runs: int,
    seed: int | None,
    initial_infected: int = 1,
    max_cycles: int = 10,
    until_all_infected: bool = False,
    include_overlay_stats: bool = False,
) -> AggregateResult:
    if runs <= 0:
        raise ValueError("runs must be positive")
    rng = random.Random(seed)
    results: List[RunResult] = []

    for _ in range(runs):
        result = simulate_dissemination(
            config,
            num_nodes,
            rng,
            initial_infected=initial_infected,
            max_cycles=max_cycles,
            until_all_infected=until_all_infected,
            include_overlay_stats=include_overlay_stats,
        )
        results.append(result)

    return summarize_runs(results)


def format_cycle(summary: CycleSummary) -> str:
    if summary.sent == 0:
        return f"Cycle {summary.cycle}: no message sent because {summary.reason}"
    return (
        f"Cycle {summary.cycle}: sent={summary.sent} "
        f"infected={summary.infected}/{summary.total} "
        f"({summary.infected_fraction:.1%})"
    )


def format_run_result(result: RunResult, show_cycles: bool = False) -> str:
    parts = [
        f"Nodes: {result.num_nodes}",
        f"Fanout: {result.config.fanout}, "
        f"Neighbors: {result.config.min_neighbors}-{result.config.max_neighbors}",
        f"Cycles: {result.cycles}",
        f"Infected: {result.final_infected}/{result.num_nodes}",
        f"Messages: {result.total_messages}",
        f"CyclesToAll: {result.cycles_to_all}",
    ]
    if result.overlay:
        parts.append(
            "Overlay: "
            f"edges={result.overlay.edges}, "
            f"mean_degree={result.overlay.mean_degree:.2f}, "
            f"reciprocity={result.overlay.reciprocity:.3f}, "
            f"connected={result.overlay.weakly_connected}"
        )
    text = " | ".join(parts)
    if show_cycles:
        text += "\n" + "\n".join(f"  {format_cycle(s)}" for s in result.history)
    return text


def format_aggregate(aggregate: AggregateResult) -> str:
    lines = [f"Runs: {len(aggregate.runs)}"]
    for metric in ("infected", "messages", "cycles_to_all", "cycles_to_half"):
        stats = aggregate.summary[metric]
        lines.append(
            f"  INFECTED: mean={stats['mean']:.1%} min={stats['min']:.1%} max={stats['max']:.1%}"
            if metric == "infected"
            else f"  {metric.upper()}: mean={stats['mean']:.2f} min={stats['min']:.0f} max={stats['max']:.0f}"
        )
    return "\n".join(lines)
