from __future__ import annotations

from itertools import permutations, product
from typing import List, Sequence, Tuple

from hetgraphlets.canon.partition import color_classes, typed_equitable_partition
from hetgraphlets.config import check_graphlet_size
from hetgraphlets.graph.view import Edge, SubgraphInstance

Cell = Tuple[int, ...]
CanonicalSignature = Tuple[Tuple[int, ...], Tuple[Cell, ...]]


def cell_matrix(
    size: int,
    edges: Sequence[Edge],
    directed: bool,
) -> List[List[Cell]]:
    """k x k matrix of sorted edge types on edges i -> j.

    Undirected edges fill both (i, j) and (j, i).
    """
    raw: List[List[List[int]]] = [[[] for _ in range(size)] for _ in range(size)]
    for i, j, t in edges:
        raw[i][j].append(t)
        if not directed:
            raw[j][i].append(t)
    return [[tuple(sorted(set(c))) for c in row] for row in raw]


def _encode(cells: Sequence[Sequence[Cell]], order: Sequence[int]) -> Tuple[Cell, ...]:
    k = len(order)
    return tuple(
        cells[order[i]][order[j]]
        for i in range(k)
        for j in range(k)
        if i != j
    )


def canonical_form(
    node_types: Sequence[int],
    edges: Sequence[Edge],
    directed: bool,
) -> Tuple[CanonicalSignature, Tuple[int, ...]]:
    """Canonical signature of a small typed graph and the ordering attaining it.

    Only orderings that list the typed equitable-partition classes in colour
    order are tried, with every permutation inside each class. The partition
    is invariant under type-preserving isomorphisms, so the minimum over this
    restricted set is still a complete invariant.

    Returns (signature, order) where order[i] is the input position placed at
    canonical position i.
    """
    k = check_graphlet_size(len(node_types))
    cells = cell_matrix(k, edges, directed)
    colors = typed_equitable_partition(cells, node_types)
    classes = color_classes(colors)

    best: Tuple[Cell, ...] | None = None
    best_order: Tuple[int, ...] = ()
    for choice in product(*(permutations(cls) for cls in classes)):
        order = tuple(v for block in choice for v in block)
        enc = _encode(cells, order)
        if best is None or enc < best:
            best = enc
            best_order = order

    types = tuple(node_types[v] for v in best_order)
    return (types, best), best_order  # type: ignore[return-value]


def canonical_signature(instance: SubgraphInstance) -> CanonicalSignature:
    """Canonical signature of an induced subgraph.

    Two instances get the same signature iff some type-preserving
    permutation maps one onto the other, edge types and orientation included.
    Raises InvalidGraphletSize for instances with fewer than 2 nodes.
    """
    signature, _ = canonical_form(instance.node_types, instance.edges, instance.directed)
    return signature


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------

def signature_size(signature: CanonicalSignature) -> int:
    return len(signature[0])


def signature_node_types(signature: CanonicalSignature) -> Tuple[int, ...]:
    return signature[0]


def signature_cells(signature: CanonicalSignature) -> List[List[Cell]]:
    """Rebuild the k x k cell matrix of the canonical representative."""
    types, flat = signature
    k = len(types)
    cells: List[List[Cell]] = [[() for _ in range(k)] for _ in range(k)]
    it = iter(flat)
    for i in range(k):
        for j in range(k):
            if i != j:
                cells[i][j] = next(it)
    return cells


def signature_edges(signature: CanonicalSignature, directed: bool) -> List[Edge]:
    """Edges (i, j, edge_type) of the canonical representative.

    Undirected signatures report each edge once with i < j.
    """
    cells = signature_cells(signature)
    k = len(cells)
    edges: List[Edge] = []
    for i in range(k):
        for j in range(k):
            if i == j or (not directed and j < i):
                continue
            edges.extend((i, j, t) for t in cells[i][j])
    return edges
