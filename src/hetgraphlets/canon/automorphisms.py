from __future__ import annotations

from itertools import permutations

from hetgraphlets.canon.canonical import CanonicalSignature, signature_cells
from hetgraphlets.canon.partition import color_classes, typed_equitable_partition


def typed_automorphism_count(signature: CanonicalSignature) -> int:
    """Count type-preserving automorphisms of an orbit's representative.

    Uses the typed equitable partition to restrict which positions can map
    to which, then backtracks class by class, rejecting a partial map as soon
    as an already-mapped pair disagrees on its edge cell.
    """
    types = signature[0]
    n = len(types)
    cells = signature_cells(signature)
    colors = typed_equitable_partition(cells, types)
    classes = color_classes(colors)
    classes_perms = [list(permutations(cls)) for cls in classes]

    count = 0
    p = [-1] * n
    mapped: list[int] = []

    def consistent(new: list[int]) -> bool:
        for u in new:
            for v in mapped:
                if u == v:
                    continue
                if cells[u][v] != cells[p[u]][p[v]] or cells[v][u] != cells[p[v]][p[u]]:
                    return False
        return True

    def backtrack(i: int) -> None:
        nonlocal count
        if i == len(classes):
            count += 1
            return

        cls = classes[i]
        for perm in classes_perms[i]:
            for a, b in zip(cls, perm):
                p[a] = b
            mapped.extend(cls)
            if consistent(cls):
                backtrack(i + 1)
            del mapped[-len(cls):]
            for a in cls:
                p[a] = -1

    backtrack(0)
    return count
