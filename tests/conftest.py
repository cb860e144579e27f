import pytest
from gossipsim.config import GossipConfig
from gossipsim.random_source import RandomSource
from gossipsim.simulator import GossipSimulator


@pytest.fixture
def simulator():
    config = GossipConfig(fanout=2, max_neighbors=4)
    return GossipSimulator(config, RandomSource.from_seed(42))


@pytest.fixture
def empty_overlay_simulator():
    """Simulator whose first cycle links nobody: every draw is 0 and min_neighbors is 0."""

    config = GossipConfig(fanout=2, max_neighbors=3, min_neighbors=0)
    return GossipSimulator(config, RandomSource(lambda: 0.0))
