"""Cycle-based simulation of gossip dissemination.

A simulation owns a registry of nodes. The first cycle links every node to a
random set of other nodes; each cycle then makes every infected node push its
message to up to fanout neighbours. Receivers learn the sender as a
neighbour, so the overlay only gains edges over time.
"""

from __future__ import annotations

import logging
from typing import Collection, List, Tuple

from .config import ConfigurationError, GossipConfig
from .enums import InsufficientNodesPolicy
from .metrics import InfectionTracker
from .node import GossipNode
from .random_source import RandomSource
from .results import CycleSummary
from .sampling import accept_all, random_nodes
from .types import NodeId, NodePredicate, Payload

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "gossipsim"


def set_logger_level(level: int | str) -> None:
    """Set the level of every gossipsim logger, e.g. "INFO" or logging.DEBUG."""

    if isinstance(level, str):
        level = level.upper()
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)


class GossipSimulator:
    def __init__(self, config: GossipConfig, random_source: RandomSource) -> None:
        if config is None:
            raise ValueError("A config is required")
        if random_source is None:
            raise ValueError("A random source is required")
        self._config = config
        self._random_source = random_source
        self._nodes: List[GossipNode] = []
        self._cycles = 0
        self._last_node_id = 0

    @property
    def config(self) -> GossipConfig:
        return self._config

    @property
    def random_source(self) -> RandomSource:
        return self._random_source

    @property
    def nodes(self) -> Tuple[GossipNode, ...]:
        """Registered nodes in insertion order.

        Uniqueness is not checked: creating two nodes with the same id is
        left to the caller to avoid.
        """

        return tuple(self._nodes)

    @property
    def nodes_count(self) -> int:
        return len(self._nodes)

    @property
    def cycles(self) -> int:
        return self._cycles

    def is_started(self) -> bool:
        return self._cycles > 0

    def next_node_id(self) -> NodeId:
        node_id = self._last_node_id
        self._last_node_id += 1
        return node_id

    def add_node(self, node: GossipNode) -> None:
        if node is None:
            raise ValueError("A node is required")
        self._nodes.append(node)

    def create_nodes(self, count: int) -> List[GossipNode]:
        return [GossipNode(self) for _ in range(count)]

    @property
    def infected_nodes_count(self) -> int:
        return sum(1 for node in self._nodes if node.is_infected())

    def all_nodes_infected(self) -> bool:
        return self.infected_nodes_count == len(self._nodes)

    def rand(self) -> float:
        return self._random_source.sample_float()

    def rand_int(self, max_value: int) -> int:
        return self._random_source.sample_int(max_value)

    def random_nodes(
        self, count: int, predicate: NodePredicate = accept_all
    ) -> Collection[GossipNode]:
        """Randomly select up to count nodes from the whole registry."""

        return self.random_nodes_from(self._nodes, count, predicate)

    def random_nodes_from(
        self,
        source: Collection[GossipNode],
        count: int,
        predicate: NodePredicate = accept_all,
    ) -> Collection[GossipNode]:
        if predicate is None:
            raise ValueError("A predicate to filter nodes is required")
        return random_nodes(source, count, self._random_source, predicate)

    def infect_random_nodes(self, count: int, message: Payload) -> List[GossipNode]:
        """Seed up to count random susceptible nodes with message."""

        selected = list(
            self.random_nodes(count, lambda node: not node.is_infected())
        )
        for node in selected:
            node.set_message(message)
        return selected

    def _build_overlay(self) -> None:
        if len(self._nodes) <= self._config.max_neighbors:
            if self._config.policy is InsufficientNodesPolicy.FAIL:
                raise ConfigurationError(
                    f"The number of nodes ({len(self._nodes)}) must be greater than "
                    f"max_neighbors ({self._config.max_neighbors})"
                )
            logger.warning(
                "The number of nodes (%d) is not greater than the max number of "
                "neighbors by node (%d). Using the number of nodes as max "
                "neighborhood size.",
                len(self._nodes),
                self._config.max_neighbors,
            )
            self._config = self._config.clamped(len(self._nodes))

        for node in self._nodes:
            node.add_random_neighbors()

    def run_cycle(self) -> CycleSummary:
        """Run one cycle, making every infected node send its message.

        Call it in a loop with whatever stop condition fits, for instance a
        fixed number of cycles or until all_nodes_infected().
        """

        if self._cycles == 0:
            self._build_overlay()

        self._cycles += 1
        logger.info("Running simulation cycle %d", self._cycles)
        tracker = InfectionTracker(self)
        if tracker.send_messages():
            summary = CycleSummary(
                cycle=self._cycles,
                sent=tracker.sent_count,
                infected=self.infected_nodes_count,
                total=len(self._nodes),
            )
            logger.info(
                "Number of infected nodes after %d node(s) sent messages: %d of %d (cycle %d)",
                summary.sent,
                summary.infected,
                summary.total,
                summary.cycle,
            )
            return summary

        summary = CycleSummary(
            cycle=self._cycles,
            sent=0,
            infected=self.infected_nodes_count,
            total=len(self._nodes),
            reason=tracker.no_message_reason(),
        )
        logger.warning(
            "Cycle %d: no message was sent by any of the %d nodes, because %s.",
            summary.cycle,
            summary.total,
            summary.reason,
        )
        return summary

    def run(self, max_cycles: int, until_all_infected: bool = False) -> List[CycleSummary]:
        if max_cycles < 0:
            raise ValueError("max_cycles must not be negative")
        history: List[CycleSummary] = []
        for _ in range(max_cycles):
            history.append(self.run_cycle())
            if until_all_infected and self.all_nodes_infected():
                break
        return history
