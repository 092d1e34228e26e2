from __future__ import annotations

from hetgraphlets.canon.canonical import CanonicalSignature, signature_cells

_FOUR_NODE_NAMES = {
    (3, 3): "four-star",
    (3, 2): "four-path",
    (4, 2): "four-cycle",
    (4, 3): "tailed-triangle",
    (5, 3): "chordal-cycle",
    (6, 3): "four-clique",
}


def describe_signature(signature: CanonicalSignature) -> str:
    """Human-readable shape name of an orbit, ignoring types and direction.

    Returns the usual graphlet names up to four nodes (edge, triad, triangle,
    four-path, four-star, four-cycle, tailed-triangle, chordal-cycle,
    four-clique), recognizable names for paths, stars, cycles and cliques
    on more nodes, and a generic descriptor with vertex/edge counts and
    degree sequence for everything else.
    """
    cells = signature_cells(signature)
    n = len(cells)
    deg = [0] * n
    m = 0
    for i in range(n):
        for j in range(i + 1, n):
            if cells[i][j] or cells[j][i]:
                deg[i] += 1
                deg[j] += 1
                m += 1
    deg_seq = sorted(deg, reverse=True)

    if n == 2:
        return "edge"
    if n == 3:
        return "triangle" if m == 3 else "triad"
    if n == 4 and (m, deg_seq[0]) in _FOUR_NODE_NAMES:
        return _FOUR_NODE_NAMES[(m, deg_seq[0])]

    ds_str = "".join(str(d) for d in deg_seq)
    if m == n - 1:
        # Tree
        if all(d <= 2 for d in deg_seq):
            return f"P{n}"
        if deg_seq.count(1) == n - 1:
            return f"K1,{n - 1}"
        return f"Tree({n}v,{ds_str})"

    if m == n and all(d == 2 for d in deg_seq):
        return f"C{n}"

    if m == n * (n - 1) // 2:
        return f"K{n}"

    return f"Graph({n}v,{m}e,{ds_str})"
