"""Cycle-based simulation of gossip dissemination over a random overlay.

Every infected node pushes its message to up to fanout random neighbours per
cycle. Each node starts with a random neighbourhood whose size lies between
--min-neighbors and --max-neighbors, and learns every node that sends it a
message. Use the CLI to see how fast a message reaches the whole population
for a given fanout and neighbourhood size.
"""

from __future__ import annotations

import argparse
import logging
import sys

from gossipsim.config import ConfigurationError, GossipConfig
from gossipsim.enums import InsufficientNodesPolicy, LogLevel
from gossipsim.runner import format_aggregate, format_run_result, run_experiments
from gossipsim.simulator import set_logger_level


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Gossip dissemination simulator")
    parser.add_argument("--nodes", type=int, default=40)
    parser.add_argument("--cycles", type=int, default=10, help="Max number of cycles per run")
    parser.add_argument("--runs", type=int, default=1, help="Number of repetitions")
    parser.add_argument("--fanout", type=int, default=4)
    parser.add_argument("--max-neighbors", type=int, default=20)
    parser.add_argument("--min-neighbors", type=int, default=1)
    parser.add_argument(
        "--initial-infected",
        type=int,
        default=1,
        help="Number of random nodes seeded with the message",
    )
    parser.add_argument(
        "--until-all-infected",
        action="store_true",
        help="Stop a run as soon as every node is infected",
    )
    parser.add_argument(
        "--insufficient-nodes",
        choices=[policy.value for policy in InsufficientNodesPolicy],
        default=InsufficientNodesPolicy.CLAMP.value,
        help="What to do when there are not more nodes than --max-neighbors",
    )
    parser.add_argument(
        "--overlay-stats",
        action="store_true",
        help="Print statistics about the final overlay graph",
    )
    parser.add_argument(
        "--show-cycles",
        action="store_true",
        help="Print a line per cycle (single run only)",
    )
    parser.add_argument(
        "--log-level",
        choices=[level.value for level in LogLevel],
        default=LogLevel.WARNING.value,
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )
    set_logger_level(args.log_level)

    try:
        config = GossipConfig(
            fanout=args.fanout,
            max_neighbors=args.max_neighbors,
            min_neighbors=args.min_neighbors,
            insufficient_nodes_policy=args.insufficient_nodes,
        )
        aggregate = run_experiments(
            config,
            args.nodes,
            args.runs,
            args.seed,
            initial_infected=args.initial_infected,
            max_cycles=args.cycles,
            until_all_infected=args.until_all_infected,
            include_overlay_stats=args.overlay_stats,
        )
    except ConfigurationError as exc:
        raise SystemExit(f"Invalid configuration: {exc}") from exc

    if args.runs == 1:
        print(format_run_result(aggregate.runs[0], show_cycles=args.show_cycles))
    else:
        print(format_aggregate(aggregate))


if __name__ == "__main__":
    main()
