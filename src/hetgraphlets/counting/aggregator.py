from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

import numpy as np

from hetgraphlets.canon.canonical import CanonicalSignature
from hetgraphlets.config import DEFAULT_COUNT_CEILING
from hetgraphlets.errors import CountOverflow
from hetgraphlets.orbits.registry import Orbit, OrbitRegistry


class CountTable:
    """
    Mutable per-orbit and per-node-per-orbit occurrence counts.

    Each worker fills its own table; tables are merged once a worker is done.
    Counts never decrease. A count that would pass *ceiling* is left at the
    ceiling and CountOverflow is raised.
    """

    def __init__(self, ceiling: int = DEFAULT_COUNT_CEILING) -> None:
        self.ceiling = ceiling
        self._orbit_counts: Dict[int, int] = defaultdict(int)
        self._node_counts: Dict[int, Dict[int, int]] = defaultdict(lambda: defaultdict(int))

    def _bump(self, table: Dict[int, int], orbit_id: int, amount: int, node: Optional[int]) -> None:
        value = table[orbit_id] + amount
        if value > self.ceiling:
            table[orbit_id] = self.ceiling
            raise CountOverflow(orbit_id, self.ceiling, node)
        table[orbit_id] = value

    def increment(self, nodes: Iterable[int], orbit_id: int, amount: int = 1) -> None:
        """Credit one occurrence of *orbit_id* globally and to each of *nodes*."""
        self._bump(self._orbit_counts, orbit_id, amount, None)
        for v in nodes:
            self._bump(self._node_counts[v], orbit_id, amount, v)

    def merge(self, other: "CountTable") -> "CountTable":
        for orbit_id, c in other._orbit_counts.items():
            self._bump(self._orbit_counts, orbit_id, c, None)
        for v, row in other._node_counts.items():
            mine = self._node_counts[v]
            for orbit_id, c in row.items():
                self._bump(mine, orbit_id, c, v)
        return self

    def orbit_count(self, orbit_id: int) -> int:
        return self._orbit_counts.get(orbit_id, 0)

    def node_count(self, node: int, orbit_id: int) -> int:
        row = self._node_counts.get(node)
        return row.get(orbit_id, 0) if row else 0

    def instances(self) -> int:
        return sum(self._orbit_counts.values())

    def freeze(self, registry: OrbitRegistry) -> "GraphletCounts":
        """Immutable snapshot of the counts together with the orbit table."""
        orbit_counts = {k: v for k, v in self._orbit_counts.items() if v}
        node_counts = {
            node: MappingProxyType({k: v for k, v in row.items() if v})
            for node, row in self._node_counts.items()
            if any(row.values())
        }
        return GraphletCounts(
            orbits=registry.snapshot(),
            orbit_counts=MappingProxyType(orbit_counts),
            node_counts=MappingProxyType(node_counts),
            directed=registry.directed,
        )


@dataclass(frozen=True)
class GraphletCounts:
    """
    Read-only result of a counting run.

    orbits:       every orbit known to the registry, indexed by orbit_id.
    orbit_counts: orbit_id -> number of occurrences in the graph.
    node_counts:  node -> orbit_id -> number of occurrences the node is part of.
    directed:     whether orbits encode edge orientation.
    """

    orbits: Tuple[Orbit, ...]
    orbit_counts: Mapping[int, int]
    node_counts: Mapping[int, Mapping[int, int]]
    directed: bool = False

    def orbit(self, orbit_id: int) -> Orbit:
        return self.orbits[orbit_id]

    def orbit_count(self, orbit_id: int) -> int:
        return self.orbit_counts.get(orbit_id, 0)

    def node_count(self, node: int, orbit_id: int) -> int:
        row = self.node_counts.get(node)
        return row.get(orbit_id, 0) if row else 0

    def total(self) -> int:
        return sum(self.orbit_counts.values())

    def counts_by_size(self) -> Dict[int, int]:
        out: Dict[int, int] = defaultdict(int)
        for orbit_id, c in self.orbit_counts.items():
            out[self.orbits[orbit_id].size] += c
        return dict(sorted(out.items()))

    def counts_by_signature(self) -> Dict[CanonicalSignature, int]:
        """Counts keyed by signature; comparable across runs and registries."""
        return {self.orbits[k].signature: v for k, v in self.orbit_counts.items()}

    def node_counts_by_signature(self) -> Dict[int, Dict[CanonicalSignature, int]]:
        return {
            node: {self.orbits[k].signature: v for k, v in row.items()}
            for node, row in self.node_counts.items()
        }

    def feature_orbits(self) -> List[Orbit]:
        """Orbits with a non-zero count, in feature-column order (size, signature)."""
        seen = [self.orbits[k] for k in self.orbit_counts]
        return sorted(seen, key=lambda o: (o.size, o.signature))

    def node_feature_matrix(self, number_of_nodes: int) -> np.ndarray:
        """Node x orbit participation counts, columns as in feature_orbits().

        Uses an unsigned 64-bit matrix; counts above its range are an error.
        """
        columns = {o.orbit_id: j for j, o in enumerate(self.feature_orbits())}
        X = np.zeros((number_of_nodes, len(columns)), dtype=np.uint64)
        for node, row in self.node_counts.items():
            for orbit_id, c in row.items():
                X[node, columns[orbit_id]] = c
        return X

    def report(self) -> str:
        """One line per counted orbit: id, shape name, node types and count."""
        lines = []
        for orbit_id in sorted(self.orbit_counts):
            o = self.orbits[orbit_id]
            types = ",".join(str(t) for t in o.node_types)
            lines.append(f"orbit {orbit_id} {o.name} [{types}]: {self.orbit_counts[orbit_id]}")
        return "\n".join(lines) + ("\n" if lines else "")
