from .nx import NxConversion, graph_view_from_nx, orbit_to_nx

__all__ = [
    "NxConversion",
    "graph_view_from_nx",
    "orbit_to_nx",
]
