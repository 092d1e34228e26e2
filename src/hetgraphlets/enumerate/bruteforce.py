from __future__ import annotations

from itertools import combinations
from typing import Dict, List, Optional, Tuple

from hetgraphlets.canon.canonical import CanonicalSignature, canonical_signature
from hetgraphlets.config import check_graphlet_size
from hetgraphlets.graph.view import GraphView
from hetgraphlets.utils.connectivity import connected_components, is_connected_subset


def connected_subsets_bruteforce(view: GraphView, size: int) -> List[Tuple[int, ...]]:
    """All connected node subsets of exactly *size* nodes, sorted.

    Tries every combination inside each weakly connected component. Only
    practical for small graphs; used as an independent check of ESU.
    """
    check_graphlet_size(size)
    found: List[Tuple[int, ...]] = []
    for comp in connected_components(view):
        if len(comp) < size:
            continue
        for subset in combinations(sorted(comp), size):
            if is_connected_subset(view, subset):
                found.append(subset)
    found.sort()
    return found


def classify_bruteforce(
    view: GraphView,
    max_size: int,
    *,
    directed: Optional[bool] = None,
) -> Dict[CanonicalSignature, Tuple[int, Tuple[int, ...]]]:
    """Group connected subsets of size 2..max_size by canonical signature.

    For each class returns:
      signature -> (count, representative_nodes)
    """
    counts: Dict[CanonicalSignature, list] = {}

    for size in range(2, max_size + 1):
        for subset in connected_subsets_bruteforce(view, size):
            instance = view.induced(subset, directed=directed)
            canon = canonical_signature(instance)
            if canon not in counts:
                counts[canon] = [0, subset]
            counts[canon][0] += 1

    return {k: (v[0], v[1]) for k, v in counts.items()}
