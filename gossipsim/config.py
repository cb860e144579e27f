from __future__ import annotations

import copy
from dataclasses import dataclass

from .enums import InsufficientNodesPolicy


class ConfigurationError(ValueError):
    """Raised when gossip parameters cannot produce a well-formed overlay."""


@dataclass(frozen=True)
class GossipConfig:
    """Parameters shared by every node of a simulation.

    fanout is the number of neighbours a node pushes its message to per cycle.
    Each node starts with a random neighbourhood whose size lies in
    [min_neighbors, max_neighbors].
    """

    fanout: int = 4
    max_neighbors: int = 20
    min_neighbors: int = 1
    insufficient_nodes_policy: str = "clamp"

    def __post_init__(self) -> None:
        if self.fanout <= 0:
            raise ConfigurationError("fanout must be greater than 0")
        if self.max_neighbors <= 0:
            raise ConfigurationError("max_neighbors must be greater than 0")
        if self.max_neighbors <= self.fanout:
            raise ConfigurationError(
                f"max_neighbors ({self.max_neighbors}) must be greater than "
                f"the fanout ({self.fanout})"
            )
        if self.min_neighbors < 0:
            raise ConfigurationError("min_neighbors must not be negative")
        if self.min_neighbors > self.max_neighbors:
            raise ConfigurationError(
                "min_neighbors must not be greater than max_neighbors"
            )
        valid = {policy.value for policy in InsufficientNodesPolicy}
        if self.insufficient_nodes_policy not in valid:
            raise ConfigurationError(
                f"Unknown insufficient_nodes_policy: {self.insufficient_nodes_policy}"
            )

    @property
    def policy(self) -> InsufficientNodesPolicy:
        return InsufficientNodesPolicy(self.insufficient_nodes_policy)

    def neighborhood_range(self) -> tuple[int, int]:
        return self.min_neighbors, self.max_neighbors

    def clamped(self, limit: int) -> GossipConfig:
        """Copy with max_neighbors lowered to limit.

        Only the simulator calls this, once, before building the overlay.
        The fanout check is skipped: a population smaller than the fanout
        is still simulated, every node just sends to all its neighbours.
        """

        limit = max(0, limit)
        clone = copy.copy(self)
        object.__setattr__(clone, "max_neighbors", min(self.max_neighbors, limit))
        object.__setattr__(clone, "min_neighbors", min(self.min_neighbors, clone.max_neighbors))
        return clone
