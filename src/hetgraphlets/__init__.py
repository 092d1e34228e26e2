"""
hetgraphlets: exhaustive enumeration and counting of connected induced
subgraphs (graphlets) in graphs with typed nodes and typed edges.
"""

from .config import GraphletConfig, MAX_GRAPHLET_SIZE, MIN_GRAPHLET_SIZE
from .errors import (
    HetGraphletsError,
    InvalidNode,
    InvalidGraphletSize,
    CountOverflow,
    RunCancelled,
    RegistryContention,
)

# Graph view
from .graph import GraphView, Neighbor, SubgraphInstance, random_typed_graph

# Enumeration and canonical forms
from .enumerate import enumerate_subgraphs, enumerate_anchor, enumerate_containing
from .canon import canonical_signature, canonical_form, typed_automorphism_count

# Orbits and counting
from .orbits import Orbit, OrbitRegistry
from .counting import (
    CountTable,
    GraphletCounts,
    count_graphlets,
    count_subsets,
    edge_graphlet_counts,
)

# NetworkX interop
from .io import graph_view_from_nx, orbit_to_nx

__all__ = [
    # Config
    "GraphletConfig",
    "MAX_GRAPHLET_SIZE",
    "MIN_GRAPHLET_SIZE",
    # Errors
    "HetGraphletsError",
    "InvalidNode",
    "InvalidGraphletSize",
    "CountOverflow",
    "RunCancelled",
    "RegistryContention",
    # Graph
    "GraphView",
    "Neighbor",
    "SubgraphInstance",
    "random_typed_graph",
    # Enumeration
    "enumerate_subgraphs",
    "enumerate_anchor",
    "enumerate_containing",
    # Canonical forms
    "canonical_signature",
    "canonical_form",
    "typed_automorphism_count",
    # Orbits
    "Orbit",
    "OrbitRegistry",
    # Counting
    "CountTable",
    "GraphletCounts",
    "count_graphlets",
    "count_subsets",
    "edge_graphlet_counts",
    # IO
    "graph_view_from_nx",
    "orbit_to_nx",
]
