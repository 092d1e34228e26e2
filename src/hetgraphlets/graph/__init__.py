from .view import GraphView, Neighbor, SubgraphInstance
from .random import random_typed_graph

__all__ = [
    "GraphView",
    "Neighbor",
    "SubgraphInstance",
    "random_typed_graph",
]
