from __future__ import annotations

from typing import List

import networkx as nx

from .results import OverlayStats
from .simulator import GossipSimulator
from .types import Edge


def overlay_graph(simulator: GossipSimulator) -> nx.DiGraph:
    """Directed graph with an edge u -> v for every neighbour v known by u."""

    graph = nx.DiGraph()
    for node in simulator.nodes:
        graph.add_node(node.id, infected=node.is_infected())
    graph.add_edges_from(overlay_edges(simulator))
    return graph


def overlay_edges(simulator: GossipSimulator) -> List[Edge]:
    return [
        (node.id, neighbor.id)
        for node in simulator.nodes
        for neighbor in sorted(node.neighbors)
    ]


def overlay_stats(simulator: GossipSimulator) -> OverlayStats:
    graph = overlay_graph(simulator)
    degrees = [degree for _, degree in graph.out_degree()]
    if not degrees:
        return OverlayStats(0, 0, 0.0, 0, 0, 0.0, False)

    edges = graph.number_of_edges()
    return OverlayStats(
        nodes=graph.number_of_nodes(),
        edges=edges,
        mean_degree=sum(degrees) / len(degrees),
        min_degree=min(degrees),
        max_degree=max(degrees),
        reciprocity=nx.overall_reciprocity(graph) if edges else 0.0,
        weakly_connected=nx.is_weakly_connected(graph),
    )
