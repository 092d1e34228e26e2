"""Exhaustive enumeration of connected induced subgraphs (ESU expansion).

Every connected node subset of size 2..K is produced exactly once. A subset is
reached only from its smallest node (the anchor): frontiers never admit nodes
below the anchor, and a node joins a frontier only through the first subset
member that makes it adjacent, so no seen-set is needed.

The traversal keeps an explicit stack of immutable frames
``(subset, frontier, closed_neighborhood)`` instead of recursing, so every
anchor's subtree is self-contained and anchors can be processed by different
workers.
"""
from __future__ import annotations

from typing import FrozenSet, Iterable, Iterator, List, Optional, Tuple

from hetgraphlets.config import check_graphlet_size
from hetgraphlets.graph.view import GraphView, SubgraphInstance
from hetgraphlets.utils.connectivity import is_connected_subset

Frame = Tuple[Tuple[int, ...], Tuple[int, ...], FrozenSet[int]]


def _resolve_directed(view: GraphView, directed: Optional[bool]) -> bool:
    if directed is None:
        return view.directed
    if directed and not view.directed:
        raise ValueError("A directed enumeration needs a directed graph view.")
    return directed


def _expand(
    view: GraphView,
    root: Frame,
    max_size: int,
    lower_bound: int,
    directed: bool,
) -> Iterator[SubgraphInstance]:
    """Depth-first expansion from *root*, yielding every subset of size >= 2."""
    stack: List[Frame] = [root]
    while stack:
        subset, frontier, closed = stack.pop()
        if len(subset) >= 2:
            yield view.induced(subset, directed=directed)
        if len(subset) == max_size:
            continue

        children: List[Frame] = []
        for i, w in enumerate(frontier):
            w_nbrs = view.connectivity_neighbors(w)
            exclusive = tuple(u for u in w_nbrs if u > lower_bound and u not in closed)
            children.append((
                subset + (w,),
                frontier[i + 1:] + exclusive,
                closed.union(w_nbrs),
            ))
        # Reversed so frontier order is also visiting order.
        stack.extend(reversed(children))


def enumerate_anchor(
    view: GraphView,
    anchor: int,
    max_size: int,
    *,
    directed: Optional[bool] = None,
) -> Iterator[SubgraphInstance]:
    """Connected subsets of size 2..max_size whose smallest node is *anchor*."""
    check_graphlet_size(max_size)
    directed = _resolve_directed(view, directed)
    nbrs = view.connectivity_neighbors(anchor)
    frontier = tuple(u for u in nbrs if u > anchor)
    if not frontier:
        return
    root: Frame = ((anchor,), frontier, frozenset(nbrs).union((anchor,)))
    yield from _expand(view, root, max_size, anchor, directed)


def enumerate_subgraphs(
    view: GraphView,
    max_size: int,
    *,
    anchors: Optional[Iterable[int]] = None,
    directed: Optional[bool] = None,
) -> Iterator[SubgraphInstance]:
    """Every connected induced subgraph with 2..max_size nodes, exactly once.

    anchors: restrict to subsets whose smallest node is in this collection
             (processed in ascending order). Defaults to every node.
    directed: keep edge orientation in the instances; defaults to the view's.
    """
    check_graphlet_size(max_size)
    directed = _resolve_directed(view, directed)
    if anchors is None:
        todo: Iterable[int] = range(view.number_of_nodes)
    else:
        todo = sorted(set(anchors))
    for v in todo:
        yield from enumerate_anchor(view, v, max_size, directed=directed)


def enumerate_containing(
    view: GraphView,
    seed_nodes: Iterable[int],
    max_size: int,
    *,
    directed: Optional[bool] = None,
) -> Iterator[SubgraphInstance]:
    """Every connected subset of size <= max_size that contains *seed_nodes*.

    The seed must itself be connected. Each superset is produced once; the
    seed itself is produced too when it has at least 2 nodes.
    """
    check_graphlet_size(max_size)
    directed = _resolve_directed(view, directed)
    seed = tuple(sorted(set(seed_nodes)))
    if not seed:
        raise ValueError("seed_nodes must not be empty.")
    if len(seed) > max_size:
        return
    for v in seed:
        view.node_type(v)
    if not is_connected_subset(view, seed):
        raise ValueError(f"Seed nodes {seed} are not connected.")

    closed = set(seed)
    for v in seed:
        closed.update(view.connectivity_neighbors(v))
    frontier = tuple(sorted(closed.difference(seed)))
    root: Frame = (seed, frontier, frozenset(closed))
    yield from _expand(view, root, max_size, -1, directed)
