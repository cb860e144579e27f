import pytest
from gossipsim.config import ConfigurationError, GossipConfig
from gossipsim.enums import InsufficientNodesPolicy


class TestGossipConfig:
    def test_default_config_valid(self):
        config = GossipConfig()
        assert config.fanout == 4
        assert config.max_neighbors == 20
        assert config.min_neighbors == 1
        assert config.policy is InsufficientNodesPolicy.CLAMP

    def test_fanout_smaller_than_max_neighbors(self):
        config = GossipConfig(fanout=3, max_neighbors=4)
        assert config.neighborhood_range() == (1, 4)

    def test_zero_fanout(self):
        with pytest.raises(ConfigurationError, match="fanout must be greater than 0"):
            GossipConfig(fanout=0, max_neighbors=4)

    def test_max_neighbors_equal_to_fanout(self):
        with pytest.raises(ConfigurationError, match="must be greater than the fanout"):
            GossipConfig(fanout=3, max_neighbors=3)

    def test_max_neighbors_lower_than_fanout(self):
        with pytest.raises(ConfigurationError, match="must be greater than the fanout"):
            GossipConfig(fanout=3, max_neighbors=2)

    def test_non_positive_max_neighbors(self):
        with pytest.raises(ConfigurationError, match="max_neighbors must be greater than 0"):
            GossipConfig(fanout=1, max_neighbors=0)

    def test_negative_min_neighbors(self):
        with pytest.raises(ConfigurationError, match="min_neighbors must not be negative"):
            GossipConfig(fanout=1, max_neighbors=4, min_neighbors=-1)

    def test_min_neighbors_greater_than_max(self):
        with pytest.raises(ConfigurationError, match="min_neighbors must not be greater"):
            GossipConfig(fanout=1, max_neighbors=4, min_neighbors=5)

    def test_unknown_policy(self):
        with pytest.raises(ConfigurationError, match="Unknown insufficient_nodes_policy"):
            GossipConfig(insufficient_nodes_policy="ignore")

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            GossipConfig(fanout=-1)

    def test_config_is_immutable(self):
        config = GossipConfig()
        with pytest.raises(AttributeError):
            config.fanout = 10


class TestClampedConfig:
    def test_clamped_lowers_max_neighbors(self):
        config = GossipConfig(fanout=3, max_neighbors=10, min_neighbors=2)
        clamped = config.clamped(5)
        assert clamped.max_neighbors == 5
        assert clamped.min_neighbors == 2
        assert clamped.fanout == 3

    def test_clamped_leaves_original_untouched(self):
        config = GossipConfig(fanout=3, max_neighbors=10)
        config.clamped(2)
        assert config.max_neighbors == 10

    def test_clamped_below_fanout_is_allowed(self):
        config = GossipConfig(fanout=3, max_neighbors=10, min_neighbors=4)
        clamped = config.clamped(2)
        assert clamped.max_neighbors == 2
        assert clamped.min_neighbors == 2

    def test_clamped_never_raises_max_neighbors(self):
        config = GossipConfig(fanout=3, max_neighbors=10)
        assert config.clamped(50).max_neighbors == 10
