from typing import Optional

import networkx as nx

from hetgraphlets import GraphletConfig, count_graphlets, edge_graphlet_counts, graph_view_from_nx
from hetgraphlets.viz import draw_orbits


def bibliographic_graph() -> nx.Graph:
    G = nx.Graph()
    for a in ("ann", "bo", "cy"):
        G.add_node(a, type="author")
    for p in ("p1", "p2", "p3"):
        G.add_node(p, type="paper")
    G.add_node("kdd", type="venue")
    G.add_edges_from(
        [("ann", "p1"), ("bo", "p1"), ("bo", "p2"), ("cy", "p2"), ("cy", "p3")],
        type="writes",
    )
    G.add_edges_from([("p1", "kdd"), ("p2", "kdd")], type="published_in")
    G.add_edge("p3", "p1", type="cites")
    return G


def main(save_path: Optional[str] = None) -> None:
    conv = graph_view_from_nx(bibliographic_graph())
    print("node types:", conv.node_types)
    print("edge types:", conv.edge_types)

    counts = count_graphlets(conv.view, GraphletConfig(max_graphlet_size=4))
    print(counts.report(), end="")

    # Graphlets through one authorship edge.
    src, dst = conv.nodes.index("bo"), conv.nodes.index("p2")
    per_edge = edge_graphlet_counts(conv.view, src, dst, GraphletConfig(max_graphlet_size=4))
    print("bo-p2:", per_edge.counts_by_size())

    draw_orbits(counts.feature_orbits(), columns=5, save_path=save_path)


if __name__ == "__main__":
    main(save_path="bibliographic_orbits.png")
