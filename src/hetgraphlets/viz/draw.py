from __future__ import annotations

import math
from typing import Sequence

import matplotlib.pyplot as plt
import networkx as nx

from hetgraphlets.io.nx import orbit_to_nx
from hetgraphlets.orbits.registry import Orbit


def draw_orbits(
    orbits: Sequence[Orbit],
    *,
    columns: int = 4,
    seed: int = 7,
    node_size: int = 260,
    edge_width: float = 1.4,
    cmap: str = "tab10",
    save_path: str | None = None,
):
    """
    Draw one panel per orbit, nodes coloured by node type and edges
    labelled with their edge type when there is more than one.

    If save_path is set, the figure is written there and closed;
    otherwise it is shown. Returns the figure.
    """
    n = max(len(orbits), 1)
    cols = max(1, min(columns, n))
    rows = math.ceil(n / cols)
    fig, axes = plt.subplots(rows, cols, figsize=(3 * cols, 3 * rows), squeeze=False)
    palette = plt.get_cmap(cmap)

    for ax in axes.flat:
        ax.set_axis_off()

    for ax, orbit in zip(axes.flat, orbits):
        G = orbit_to_nx(orbit)
        pos = nx.spring_layout(G, seed=seed)
        colors = [palette(G.nodes[v]["type"] % palette.N) for v in G.nodes()]

        ax.set_title(f"#{orbit.orbit_id} {orbit.name}", fontsize=9)
        nx.draw_networkx(
            G,
            pos=pos,
            ax=ax,
            node_color=colors,
            node_size=node_size,
            width=edge_width,
            labels={v: str(G.nodes[v]["type"]) for v in G.nodes()},
            font_size=8,
        )
        edge_types = nx.get_edge_attributes(G, "type")
        if len(set(edge_types.values())) > 1:
            nx.draw_networkx_edge_labels(G, pos=pos, ax=ax, edge_labels=edge_types, font_size=7)

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=200)
        plt.close(fig)
    else:
        plt.show()
    return fig
