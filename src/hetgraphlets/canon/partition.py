"""Type-aware WL-1 colour refinement (equitable partition) on small cell matrices.

A cell matrix ``cells[u][v]`` holds the sorted edge types of edges u -> v
(an empty tuple when there is none). Refinement starts from the node types and
only ever splits classes, so the resulting colours are invariant under every
type-preserving isomorphism and can be used to prune canonical-form searches.
"""
from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

Cells = Sequence[Sequence[Tuple[int, ...]]]


def _compress(sigs: Sequence[object]) -> Tuple[int, ...]:
    uniq = {sig: i for i, sig in enumerate(sorted(set(sigs)))}
    return tuple(uniq[s] for s in sigs)


def _refine_colors(cells: Cells, colors: Tuple[int, ...]) -> Tuple[int, ...]:
    """One round of typed refinement."""
    n = len(colors)
    sigs = []
    for u in range(n):
        neigh = []
        for v in range(n):
            if v == u:
                continue
            out_types, in_types = cells[u][v], cells[v][u]
            if out_types or in_types:
                neigh.append((out_types, in_types, colors[v]))
        neigh.sort()
        sigs.append((colors[u], tuple(neigh)))
    return _compress(sigs)


def typed_equitable_partition(cells: Cells, node_types: Sequence[int]) -> Tuple[int, ...]:
    """Iterate typed refinement to a fixed point.

    Parameters
    ----------
    cells : k x k matrix of edge-type tuples.
    node_types : initial colouring, one node type per position.

    Returns
    -------
    tuple[int, ...]
        Stable colouring. Colours are ordered by node type first, so sorting
        positions by colour also sorts them by node type.
    """
    colors = _compress(list(node_types))
    while True:
        newc = _refine_colors(cells, colors)
        if len(set(newc)) == len(set(colors)):
            return newc
        colors = newc


def color_classes(colors: Tuple[int, ...]) -> List[List[int]]:
    """Group positions by colour, classes in ascending colour order."""
    groups: Dict[int, List[int]] = {}
    for v, c in enumerate(colors):
        groups.setdefault(c, []).append(v)
    return [groups[c] for c in sorted(groups)]
