"""Append-only, thread-safe mapping from canonical signatures to orbit ids."""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

from hetgraphlets.canon.automorphisms import typed_automorphism_count
from hetgraphlets.canon.canonical import (
    CanonicalSignature,
    signature_edges,
    signature_node_types,
    signature_size,
)
from hetgraphlets.config import check_graphlet_size
from hetgraphlets.graph.view import Edge
from hetgraphlets.utils.naming import describe_signature

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Orbit:
    """
    One typed isomorphism class of graphlets.

    orbit_id:  sequential id, in first-seen order within a registry.
    signature: canonical signature; unique within a registry.
    size:      number of nodes.
    directed:  whether the signature encodes edge orientation.
    """

    orbit_id: int
    signature: CanonicalSignature
    size: int
    directed: bool = False

    @property
    def node_types(self) -> Tuple[int, ...]:
        return signature_node_types(self.signature)

    @property
    def edges(self) -> List[Edge]:
        return signature_edges(self.signature, self.directed)

    @property
    def name(self) -> str:
        return describe_signature(self.signature)

    def automorphisms(self) -> int:
        """Number of type-preserving automorphisms of the representative."""
        return typed_automorphism_count(self.signature)


class OrbitRegistry:
    """
    Signature -> Orbit table shared by all workers of a run.

    Lookups of known signatures are plain dict reads. Registering an unseen
    signature takes a single lock and re-checks under it, so two workers
    finding the same new orbit concurrently always get the same id.
    """

    def __init__(self, *, directed: bool = False) -> None:
        self._directed = directed
        self._by_signature: Dict[CanonicalSignature, Orbit] = {}
        self._orbits: List[Orbit] = []
        self._lock = threading.Lock()

    @property
    def directed(self) -> bool:
        return self._directed

    def get_or_register(self, signature: CanonicalSignature) -> Orbit:
        orbit = self._by_signature.get(signature)
        if orbit is not None:
            return orbit

        with self._lock:
            orbit = self._by_signature.get(signature)
            if orbit is None:
                size = check_graphlet_size(signature_size(signature))
                orbit = Orbit(len(self._orbits), signature, size, self._directed)
                # Publish to the list first: readers only find it via the dict.
                self._orbits.append(orbit)
                self._by_signature[signature] = orbit
                logger.debug("Registered orbit %d (%s, size %d).", orbit.orbit_id, orbit.name, size)
        return orbit

    def lookup(self, signature: CanonicalSignature) -> Optional[Orbit]:
        return self._by_signature.get(signature)

    def __getitem__(self, orbit_id: int) -> Orbit:
        return self._orbits[orbit_id]

    def __len__(self) -> int:
        return len(self._orbits)

    def __iter__(self) -> Iterator[Orbit]:
        return iter(self.snapshot())

    def snapshot(self) -> Tuple[Orbit, ...]:
        with self._lock:
            return tuple(self._orbits)

    def relabeled_by_signature(self) -> Dict[int, int]:
        """Map each orbit id to its rank when sorted by (size, signature).

        Registries built from the same graph with different worker counts
        may assign ids in different orders; this relabeling agrees across them.
        """
        ordered = sorted(self.snapshot(), key=lambda o: (o.size, o.signature))
        return {o.orbit_id: rank for rank, o in enumerate(ordered)}
