from __future__ import annotations

from typing import Iterable, List, Set

from hetgraphlets.graph.view import GraphView


def is_connected_subset(view: GraphView, nodes: Iterable[int]) -> bool:
    """Check whether *nodes* induce a weakly connected subgraph of *view*.

    Semantics for degenerate cases:
      - empty set      -> True  (vacuously connected)
      - single vertex  -> True
    """
    verts = set(nodes)
    if len(verts) <= 1:
        return True

    start = next(iter(verts))
    visited: Set[int] = set()
    stack = [start]
    while stack:
        node = stack.pop()
        if node in visited:
            continue
        visited.add(node)
        for nbr in view.connectivity_neighbors(node):
            if nbr in verts and nbr not in visited:
                stack.append(nbr)
    return len(visited) == len(verts)


def connected_components(view: GraphView) -> List[Set[int]]:
    """Weakly connected components, ordered by their smallest node."""
    remaining = set(range(view.number_of_nodes))
    components: List[Set[int]] = []

    for start in range(view.number_of_nodes):
        if start not in remaining:
            continue
        comp: Set[int] = set()
        stack = [start]
        while stack:
            node = stack.pop()
            if node in comp:
                continue
            comp.add(node)
            for nbr in view.connectivity_neighbors(node):
                if nbr not in comp:
                    stack.append(nbr)
        components.append(comp)
        remaining -= comp

    return components
