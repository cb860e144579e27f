"""Random selection of nodes from a neighbourhood or from the whole registry.

Two container shapes are sampled. Sequences (the simulator registry) allow
direct index lookup, so indices are drawn and looked up. Sets (a node's
neighbourhood) only allow forward iteration, so sorted indices are drawn and
matched while walking the set once.
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Sequence
from typing import List, Set

from .random_source import RandomSource
from .types import NodePredicate

logger = logging.getLogger(__name__)


def accept_all(_node) -> bool:
    return True


def random_nodes(
    source: Collection,
    count: int,
    random_source: RandomSource,
    predicate: NodePredicate = accept_all,
) -> Collection:
    """Select up to count distinct elements of source matching predicate.

    When count covers the whole source there is nothing to draw and every
    matching element is returned in source order.
    """

    if count <= 0 or not source:
        return []

    if count >= len(source):
        selected = [node for node in source if predicate(node)]
        logger.debug(
            "Requested %d random nodes but only %d are available and %d match the predicate",
            count,
            len(source),
            len(selected),
        )
        return selected

    if isinstance(source, Sequence):
        return _random_nodes_from_sequence(source, count, random_source, predicate)
    return _random_nodes_from_collection(source, count, random_source, predicate)


def _random_nodes_from_sequence(
    source: Sequence,
    count: int,
    random_source: RandomSource,
    predicate: NodePredicate,
) -> Set:
    # Draws are independent, so repeated indices shrink the result below count.
    size = len(source)
    return {
        node
        for node in (source[random_source.sample_int(size)] for _ in range(count))
        if predicate(node)
    }


def _random_nodes_from_collection(
    source: Collection,
    count: int,
    random_source: RandomSource,
    predicate: NodePredicate,
) -> List:
    size = len(source)
    indexes = sorted({random_source.sample_int(size) for _ in range(count)})

    selected: List = []
    position = 0
    iterator = iter(source)
    for index in indexes:
        for node in iterator:
            if not predicate(node):
                continue
            position += 1
            if position - 1 == index:
                selected.append(node)
                break
        else:
            # source exhausted before reaching this index
            break
    return selected
