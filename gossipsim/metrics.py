from __future__ import annotations

import math
from typing import TYPE_CHECKING, List, Sequence

from .results import CycleSummary

if TYPE_CHECKING:
    from .simulator import GossipSimulator

NO_INFECTED_REASON = "no infected node exists"
EMPTY_NEIGHBORHOOD_REASON = "infected nodes' neighborhoods are empty"


class InfectionTracker:
    """Sends the messages of one cycle and counts what happened.

    A tracker is created for a single cycle and thrown away afterwards.
    """

    def __init__(self, simulator: GossipSimulator) -> None:
        if simulator is None:
            raise ValueError("A simulator is required")
        self._simulator = simulator
        self.sent_count = 0
        self.infected_count = 0
        self.nodes_with_neighbors_count = 0

    def send_messages(self) -> bool:
        """Make every infected node send its message, in registry order.

        Infection status is read when each node's turn comes, so nodes
        infected earlier in the same cycle also send.
        """

        for node in self._simulator.nodes:
            if not node.is_infected():
                continue
            self.infected_count += 1
            if node.has_neighbors():
                self.nodes_with_neighbors_count += 1
            if node.send_message():
                self.sent_count += 1
        return self.sent_count > 0

    def no_message_reason(self) -> str:
        if self.sent_count > 0:
            return ""
        reasons = []
        if self.infected_count == 0:
            reasons.append(NO_INFECTED_REASON)
        if self.nodes_with_neighbors_count == 0:
            reasons.append(EMPTY_NEIGHBORHOOD_REASON)
        return " and ".join(reasons)


def infection_curve(history: Sequence[CycleSummary]) -> List[float]:
    """Fraction of infected nodes after each cycle."""

    return [summary.infected_fraction for summary in history]


def cycles_to_fraction(history: Sequence[CycleSummary], fraction: float) -> float:
    """Return the first cycle at which the given fraction of nodes is infected."""

    if not 0 <= fraction <= 1:
        raise ValueError("fraction must be between 0 and 1")
    for summary in history:
        if summary.total and summary.infected >= math.ceil(fraction * summary.total):
            return summary.cycle
    return math.inf
