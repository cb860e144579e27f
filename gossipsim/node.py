from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Collection, FrozenSet, Iterable, List, Set

from .types import AcceptPredicate, NodeId, Payload

if TYPE_CHECKING:
    from .config import GossipConfig
    from .simulator import GossipSimulator

logger = logging.getLogger(__name__)


def accept_always(_source: GossipNode, _payload: Payload) -> bool:
    return True


class GossipNode:
    """A node that stores at most one message and pushes it to its neighbours.

    A node is susceptible until it holds a message and infected afterwards.
    Infection is permanent: the accept predicate may refuse an incoming
    message but nothing clears a stored one.
    """

    def __init__(
        self,
        simulator: GossipSimulator,
        node_id: NodeId | None = None,
        accept: AcceptPredicate = accept_always,
    ) -> None:
        if simulator is None:
            raise ValueError("A simulator is required")
        if accept is None:
            raise ValueError("An accept predicate is required")

        self._simulator = simulator
        self._id = simulator.next_node_id() if node_id is None else node_id
        self._accept = accept
        self._neighbors: Set[GossipNode] = set()
        self._message: Payload = None
        self.last_recipients: List[GossipNode] = []
        simulator.add_node(self)

    @property
    def id(self) -> NodeId:
        return self._id

    @property
    def simulator(self) -> GossipSimulator:
        return self._simulator

    @property
    def message(self) -> Payload:
        return self._message

    @property
    def neighbors(self) -> FrozenSet[GossipNode]:
        return frozenset(self._neighbors)

    @property
    def neighborhood_size(self) -> int:
        return len(self._neighbors)

    def has_neighbors(self) -> bool:
        return bool(self._neighbors)

    def is_infected(self) -> bool:
        return self._message is not None

    def _config(self) -> GossipConfig:
        return self._simulator.config

    def set_message(self, payload: Payload) -> None:
        """Seed the node with a message to disseminate."""

        if payload is None:
            raise ValueError("payload must not be None")
        self._message = payload

    def send_message(self) -> bool:
        """Push the stored message to up to fanout random neighbours.

        Returns False when there is no message or no neighbour to send to.
        """

        if not self.is_infected():
            logger.warning("%r has no stored message to send", self)
            return False
        if not self._neighbors:
            logger.warning("%r has no neighbors to send messages to", self)
            return False

        fanout = self._config().fanout
        send_to_all = len(self._neighbors) < fanout
        if send_to_all:
            recipients = list(self._neighbors)
        else:
            recipients = list(self._simulator.random_nodes_from(self._neighbors, fanout))

        logger.info(
            "%r is going to send a message to %d %s neighbor(s)%s",
            self,
            len(recipients),
            "existing" if send_to_all else "randomly selected",
            "" if send_to_all else f" from a total of {len(self._neighbors)}",
        )
        self.last_recipients = recipients
        for node in recipients:
            node.receive_message(self, self._message)
        return True

    def receive_message(self, source: GossipNode, payload: Payload) -> bool:
        """Learn source as a neighbour and store payload if accepted.

        Returns whether the payload was stored.
        """

        if source is None:
            raise ValueError("A source node is required")
        if payload is None:
            raise ValueError("payload must not be None")

        self.add_neighbor(source)
        if not self._accept(source, payload):
            logger.debug("%r refused message from %r", self, source)
            return False
        self._message = payload
        logger.debug("%r received message from %r", self, source)
        return True

    def add_neighbor(self, node: GossipNode) -> bool:
        if node is None:
            raise ValueError("A neighbor node is required")
        if node == self:
            return False
        if node in self._neighbors:
            return False
        self._neighbors.add(node)
        return True

    def add_neighbors(self, nodes: Iterable[GossipNode]) -> bool:
        """Add every node except this one; True if the neighbourhood grew."""

        if nodes is None:
            raise ValueError("A collection of neighbors is required")
        before = len(self._neighbors)
        self._neighbors.update(node for node in nodes if node != self)
        return len(self._neighbors) > before

    def add_random_neighbors(self) -> bool:
        """Link to a random number of nodes drawn from the whole registry."""

        min_neighbors, max_neighbors = self._config().neighborhood_range()
        size = self._simulator.rand_int(max_neighbors - min_neighbors + 1) + min_neighbors
        selected: Collection[GossipNode] = self._simulator.random_nodes(size)
        grew = self.add_neighbors(selected)
        logger.debug("%r linked to %d random neighbor(s)", self, self.neighborhood_size)
        return grew

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, GossipNode):
            return NotImplemented
        return self._id == other.id and self._simulator is other.simulator

    def __hash__(self) -> int:
        # set iteration order then depends on ids only, not on memory addresses
        return hash(self._id)

    def __lt__(self, other: GossipNode) -> bool:
        return self._id < other.id

    def __repr__(self) -> str:
        state = "infected" if self.is_infected() else "susceptible"
        return f"GossipNode {self._id} ({state})"
