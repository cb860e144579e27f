import math
import random

import pytest
from gossipsim.config import ConfigurationError, GossipConfig
from gossipsim.results import CycleSummary
from gossipsim.runner import (
    format_aggregate,
    format_cycle,
    format_run_result,
    run_experiments,
    simulate_dissemination,
)


class TestSimulateDissemination:
    def test_history_length(self):
        config = GossipConfig(fanout=2, max_neighbors=4)
        result = simulate_dissemination(config, 20, random.Random(42), max_cycles=6)
        assert result.cycles == 6
        assert result.num_nodes == 20
        assert result.overlay is None

    def test_same_seed_same_result(self):
        config = GossipConfig(fanout=2, max_neighbors=4)
        first = simulate_dissemination(config, 30, random.Random(42), max_cycles=8)
        second = simulate_dissemination(config, 30, random.Random(42), max_cycles=8)
        assert first.history == second.history

    def test_messages_are_counted(self):
        config = GossipConfig(fanout=2, max_neighbors=4)
        result = simulate_dissemination(config, 20, random.Random(42), max_cycles=5)
        assert result.total_messages == sum(s.sent for s in result.history)
        assert result.final_infected >= 1

    def test_no_initial_infection(self):
        config = GossipConfig(fanout=2, max_neighbors=4)
        result = simulate_dissemination(
            config, 10, random.Random(42), initial_infected=0, max_cycles=3
        )
        assert result.total_messages == 0
        assert result.final_infected == 0
        assert result.cycles_to_all == math.inf

    def test_clamped_config_is_reported(self):
        config = GossipConfig(fanout=2, max_neighbors=10)
        result = simulate_dissemination(config, 5, random.Random(1), max_cycles=2)
        assert result.config.max_neighbors == 5

    def test_fail_policy_propagates(self):
        config = GossipConfig(fanout=2, max_neighbors=10, insufficient_nodes_policy="fail")
        with pytest.raises(ConfigurationError):
            simulate_dissemination(config, 5, random.Random(1))

    def test_overlay_stats(self):
        config = GossipConfig(fanout=2, max_neighbors=4)
        result = simulate_dissemination(
            config, 20, random.Random(42), max_cycles=3, include_overlay_stats=True
        )
        assert result.overlay is not None
        assert result.overlay.nodes == 20
        assert result.overlay.edges > 0

    def test_invalid_num_nodes(self):
        with pytest.raises(ValueError, match="num_nodes must not be negative"):
            simulate_dissemination(GossipConfig(), -1, random.Random(1))


class TestRunExperiments:
    def test_summary_metrics(self):
        config = GossipConfig(fanout=3, max_neighbors=6)
        aggregate = run_experiments(config, 30, runs=4, seed=42, max_cycles=10)
        assert len(aggregate.runs) == 4
        for metric in ("infected", "messages", "cycles_to_all", "cycles_to_half"):
            stats = aggregate.summary[metric]
            assert stats["min"] <= stats["max"]
        assert 0 < aggregate.summary["infected"]["mean"] <= 1.0

    def test_invalid_runs(self):
        with pytest.raises(ValueError, match="runs must be positive"):
            run_experiments(GossipConfig(), 30, runs=0, seed=1)

    def test_until_all_infected_stops_early(self):
        config = GossipConfig(fanout=4, max_neighbors=8)
        aggregate = run_experiments(
            config, 20, runs=3, seed=5, max_cycles=100, until_all_infected=True
        )
        for run in aggregate.runs:
            if run.cycles < 100:
                assert run.final_infected == 20


class TestFormatting:
    def test_format_cycle(self):
        summary = CycleSummary(cycle=2, sent=3, infected=5, total=10)
        assert format_cycle(summary) == "Cycle 2: sent=3 infected=5/10 (50.0%)"

    def test_format_idle_cycle(self):
        summary = CycleSummary(cycle=1, sent=0, infected=0, total=10, reason="no infected node exists")
        assert "no infected node exists" in format_cycle(summary)

    def test_format_run_result(self):
        config = GossipConfig(fanout=2, max_neighbors=4)
        result = simulate_dissemination(
            config, 10, random.Random(42), max_cycles=3, include_overlay_stats=True
        )
        text = format_run_result(result, show_cycles=True)
        assert text.startswith("Nodes: 10")
        assert "Overlay:" in text
        assert "Cycle 3" in text

    def test_format_aggregate(self):
        config = GossipConfig(fanout=2, max_neighbors=4)
        aggregate = run_experiments(config, 10, runs=2, seed=42, max_cycles=3)
        text = format_aggregate(aggregate)
        assert text.startswith("Runs: 2")
        assert "MESSAGES" in text
