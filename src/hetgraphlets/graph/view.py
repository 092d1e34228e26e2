"""Immutable typed adjacency structure consumed by the enumerator.

Nodes are dense ids ``0..n-1``, each with one integer node type. Edges carry an
integer edge type and, in a directed view, an orientation. Self-loops are
dropped and repeated ``(src, dst, type)`` edges collapse to one, so the view is
always a simple typed graph whatever the loader hands over.
"""
from __future__ import annotations

import operator
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, NamedTuple, Optional, Sequence, Tuple

from hetgraphlets.errors import InvalidNode

Edge = Tuple[int, int, int]

OUT = "out"
IN = "in"
BOTH = "both"
ANY = "any"


class Neighbor(NamedTuple):
    node: int
    edge_type: int
    direction: str


@dataclass(frozen=True)
class SubgraphInstance:
    """
    Induced subgraph on a set of nodes of the view.

    nodes:      sorted global node ids.
    node_types: node type of nodes[i].
    edges:      (i, j, edge_type) over local indices into ``nodes``.
                Directed instances store i -> j; undirected ones store i < j.
    directed:   whether edge orientation is meaningful.
    """

    nodes: Tuple[int, ...]
    node_types: Tuple[int, ...]
    edges: Tuple[Edge, ...]
    directed: bool

    @property
    def size(self) -> int:
        return len(self.nodes)

    @property
    def anchor(self) -> int:
        return self.nodes[0]


def _normalize_edges(
    raw_edges: Iterable[Sequence[int]],
    number_of_nodes: int,
    directed: bool,
) -> Tuple[Edge, ...]:
    seen = set()
    for e in raw_edges:
        if len(e) == 2:
            u, v = e
            t = 0
        elif len(e) == 3:
            u, v, t = e
        else:
            raise ValueError(f"Edges are (src, dst) or (src, dst, edge_type), got {e!r}.")
        u, v, t = int(u), int(v), int(t)
        for x in (u, v):
            if not 0 <= x < number_of_nodes:
                raise InvalidNode(x, number_of_nodes)
        if t < 0:
            raise ValueError(f"Edge types must be non-negative, got {t}.")
        if u == v:
            continue
        if not directed and u > v:
            u, v = v, u
        seen.add((u, v, t))
    return tuple(sorted(seen))


class GraphView:
    """Read-only typed graph; safe to share between worker threads."""

    def __init__(
        self,
        node_types: Sequence[int],
        edges: Iterable[Sequence[int]] = (),
        *,
        directed: bool = False,
    ) -> None:
        types = tuple(int(t) for t in node_types)
        if any(t < 0 for t in types):
            raise ValueError("Node types must be non-negative integers.")
        n = len(types)

        self._node_types = types
        self._directed = bool(directed)
        self._edges = _normalize_edges(edges, n, self._directed)

        out_lists: List[List[Neighbor]] = [[] for _ in range(n)]
        in_lists: List[List[Neighbor]] = [[] for _ in range(n)]
        weak: List[set] = [set() for _ in range(n)]
        pair_types: Dict[Tuple[int, int], List[int]] = defaultdict(list)

        for u, v, t in self._edges:
            weak[u].add(v)
            weak[v].add(u)
            if self._directed:
                out_lists[u].append(Neighbor(v, t, OUT))
                in_lists[v].append(Neighbor(u, t, IN))
                pair_types[(u, v)].append(t)
            else:
                out_lists[u].append(Neighbor(v, t, BOTH))
                out_lists[v].append(Neighbor(u, t, BOTH))
                pair_types[(u, v)].append(t)
                pair_types[(v, u)].append(t)

        self._out = tuple(tuple(sorted(L)) for L in out_lists)
        self._in = tuple(tuple(sorted(L)) for L in in_lists) if self._directed else self._out
        self._weak = tuple(tuple(sorted(s)) for s in weak)
        self._pair_types = {p: tuple(sorted(ts)) for p, ts in pair_types.items()}

    # ------------------------------------------------------------------
    # Size and type accessors
    # ------------------------------------------------------------------

    @property
    def number_of_nodes(self) -> int:
        return len(self._node_types)

    @property
    def number_of_edges(self) -> int:
        return len(self._edges)

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def number_of_node_types(self) -> int:
        return max(self._node_types) + 1 if self._node_types else 0

    @property
    def node_types(self) -> Tuple[int, ...]:
        return self._node_types

    def _check(self, node: int) -> int:
        try:
            idx = operator.index(node)
        except TypeError:
            raise InvalidNode(node, len(self._node_types)) from None
        if not 0 <= idx < len(self._node_types):
            raise InvalidNode(node, len(self._node_types))
        return idx

    def node_type(self, node: int) -> int:
        return self._node_types[self._check(node)]

    # ------------------------------------------------------------------
    # Adjacency
    # ------------------------------------------------------------------

    def neighbors(
        self,
        node: int,
        *,
        direction: str = ANY,
        edge_type: Optional[int] = None,
    ) -> Tuple[Neighbor, ...]:
        """Typed neighbors of *node*, sorted by (node, edge_type).

        direction: "out", "in" or "any". Undirected views ignore it and report
        every entry with direction "both".
        """
        self._check(node)
        if direction not in (ANY, OUT, IN):
            raise ValueError(f"direction must be 'any', 'out' or 'in', got {direction!r}.")

        if not self._directed or direction == OUT:
            found: Tuple[Neighbor, ...] = self._out[node]
        elif direction == IN:
            found = self._in[node]
        else:
            found = tuple(sorted(self._out[node] + self._in[node]))

        if edge_type is not None:
            found = tuple(nb for nb in found if nb.edge_type == edge_type)
        return found

    def connectivity_neighbors(self, node: int) -> Tuple[int, ...]:
        """Distinct neighbor ids ignoring direction and type."""
        return self._weak[self._check(node)]

    def degree(self, node: int) -> int:
        return len(self._weak[self._check(node)])

    def edge_types_between(self, u: int, v: int) -> Tuple[int, ...]:
        """Sorted edge types of edges u -> v (any orientation if undirected)."""
        self._check(u)
        self._check(v)
        return self._pair_types.get((u, v), ())

    def iter_edges(self) -> Iterator[Edge]:
        return iter(self._edges)

    # ------------------------------------------------------------------
    # Induced subgraphs
    # ------------------------------------------------------------------

    def induced(self, nodes: Iterable[int], *, directed: Optional[bool] = None) -> SubgraphInstance:
        """Build the induced typed subgraph on *nodes*.

        directed=None keeps the view's orientation; directed=False on a
        directed view merges both orientations into undirected edges.
        """
        if directed is None:
            directed = self._directed
        if directed and not self._directed:
            raise ValueError("Cannot induce a directed subgraph from an undirected view.")

        verts = tuple(sorted({self._check(v) for v in nodes}))
        k = len(verts)
        edges: List[Edge] = []
        for i in range(k):
            for j in range(k):
                if i == j:
                    continue
                ts = self._pair_types.get((verts[i], verts[j]), ())
                if directed:
                    edges.extend((i, j, t) for t in ts)
                elif i < j:
                    if self._directed:
                        back = self._pair_types.get((verts[j], verts[i]), ())
                        ts = tuple(sorted(set(ts) | set(back)))
                    edges.extend((i, j, t) for t in ts)

        return SubgraphInstance(
            nodes=verts,
            node_types=tuple(self._node_types[v] for v in verts),
            edges=tuple(edges),
            directed=directed,
        )

    def __repr__(self) -> str:
        kind = "directed" if self._directed else "undirected"
        return (
            f"GraphView({kind}, nodes={self.number_of_nodes}, "
            f"edges={self.number_of_edges}, node_types={self.number_of_node_types})"
        )
