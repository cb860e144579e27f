from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, List

from .config import GossipConfig


@dataclass(frozen=True)
class OverlayStats:
    nodes: int
    edges: int
    mean_degree: float
    min_degree: int
    max_degree: int
    reciprocity: float
    weakly_connected: bool


@dataclass(frozen=True)
class CycleSummary:
    """What happened in one simulation cycle."""

    cycle: int
    sent: int
    infected: int
    total: int
    reason: str = ""

    @property
    def infected_fraction(self) -> float:
        if self.total == 0:
            return 0.0
        return self.infected / self.total


@dataclass
class RunResult:
    """Stores the per-cycle history of a single simulation run."""

    config: GossipConfig
    num_nodes: int
    history: List[CycleSummary] = field(default_factory=list)
    overlay: OverlayStats | None = None

    @property
    def cycles(self) -> int:
        return len(self.history)

    @property
    def final_infected(self) -> int:
        return self.history[-1].infected if self.history else 0

    @property
    def final_fraction(self) -> float:
        return self.history[-1].infected_fraction if self.history else 0.0

    @property
    def total_messages(self) -> int:
        return sum(summary.sent for summary in self.history)

    @property
    def cycles_to_all(self) -> float:
        for summary in self.history:
            if summary.total and summary.infected == summary.total:
                return summary.cycle
        return math.inf


@dataclass
class AggregateResult:
    """Aggregated metrics over multiple runs."""

    runs: List[RunResult]
    summary: Dict[str, Dict[str, float]]
