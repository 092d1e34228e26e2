from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Hashable, List, Tuple

import networkx as nx

from hetgraphlets.graph.view import GraphView
from hetgraphlets.orbits.registry import Orbit


@dataclass(frozen=True)
class NxConversion:
    """
    Result of converting a NetworkX graph to a GraphView.

    view:       the typed graph view.
    nodes:      nodes[i] is the original NetworkX node behind id i.
    node_types: node_types[t] is the original node-type label behind type t.
    edge_types: edge_types[t] is the original edge-type label behind type t.
    """

    view: GraphView
    nodes: Tuple[Hashable, ...]
    node_types: Tuple[Hashable, ...]
    edge_types: Tuple[Hashable, ...]


def _vocabulary(labels: List[Hashable]) -> Tuple[Hashable, ...]:
    uniq = set(labels)
    try:
        return tuple(sorted(uniq))
    except TypeError:
        return tuple(sorted(uniq, key=repr))


def graph_view_from_nx(
    G: nx.Graph,
    *,
    node_type: str = "type",
    edge_type: str = "type",
    default_type: Hashable = 0,
) -> NxConversion:
    """
    Build a GraphView from a NetworkX graph.

    Nodes are relabelled 0..n-1 in sorted order; node and edge type labels
    (read from the *node_type* / *edge_type* attributes, *default_type* when
    missing) are interned as integers in sorted label order. DiGraphs give a
    directed view. Parallel edges of multigraphs with the same type collapse.
    """
    nodes = _vocabulary(list(G.nodes()))
    index: Dict[Hashable, int] = {v: i for i, v in enumerate(nodes)}

    node_labels = [G.nodes[v].get(node_type, default_type) for v in nodes]
    nt_vocab = _vocabulary(node_labels)
    nt_index = {t: i for i, t in enumerate(nt_vocab)}

    raw_edges = [(u, v, d.get(edge_type, default_type)) for u, v, d in G.edges(data=True)]
    et_vocab = _vocabulary([t for _, _, t in raw_edges])
    et_index = {t: i for i, t in enumerate(et_vocab)}

    view = GraphView(
        [nt_index[t] for t in node_labels],
        [(index[u], index[v], et_index[t]) for u, v, t in raw_edges],
        directed=G.is_directed(),
    )
    return NxConversion(view=view, nodes=nodes, node_types=nt_vocab, edge_types=et_vocab)


def orbit_to_nx(orbit: Orbit) -> nx.Graph:
    """Typed NetworkX graph of an orbit's canonical representative.

    Nodes are 0..k-1 with a ``type`` attribute; edges carry ``type``.
    """
    G = nx.DiGraph() if orbit.directed else nx.Graph()
    for i, t in enumerate(orbit.node_types):
        G.add_node(i, type=t)
    for u, v, t in orbit.edges:
        G.add_edge(u, v, type=t)
    return G
