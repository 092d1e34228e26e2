"""Deterministic synthetic typed graphs for tests and benchmarks."""
from __future__ import annotations

from typing import List, Tuple

from hetgraphlets.graph.view import GraphView

_LCG_MULTIPLIER = 1103515245
_LCG_INCREMENT = 12345
_WORD = 2**64


def random_typed_graph(
    random_state: int,
    number_of_nodes: int,
    maximal_node_degree: int,
    number_of_node_types: int,
    *,
    number_of_edge_types: int = 1,
    directed: bool = False,
) -> GraphView:
    """
    Implicit random graph fully determined by its parameters.

    Each node draws *maximal_node_degree* destinations from a 64-bit linear
    congruential stream seeded with ``random_state + node``; draws that hit
    the node itself are skipped. Node types are
    ``node * random_state % number_of_node_types``; edge types are
    ``(src + dst) % number_of_edge_types``.

    Undirected graphs get each drawn pair once; directed graphs keep the
    drawn orientation.
    """
    if number_of_nodes <= 0:
        raise ValueError("number_of_nodes must be positive.")
    if number_of_node_types <= 0 or number_of_edge_types <= 0:
        raise ValueError("number_of_node_types and number_of_edge_types must be positive.")

    edges: List[Tuple[int, int, int]] = []
    for node in range(number_of_nodes):
        counter = (random_state + node) % _WORD
        for _ in range(maximal_node_degree):
            counter = (counter * _LCG_MULTIPLIER + _LCG_INCREMENT) % _WORD
            # Low LCG bits cycle quickly; use the high half of the word.
            dst = (counter >> 32) % number_of_nodes
            if dst == node:
                continue
            edges.append((node, dst, (node + dst) % number_of_edge_types))

    node_types = [(node * random_state) % number_of_node_types for node in range(number_of_nodes)]
    return GraphView(node_types, edges, directed=directed)
