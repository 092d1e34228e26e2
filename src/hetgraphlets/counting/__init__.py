from .aggregator import CountTable, GraphletCounts
from .run import count_graphlets, count_subsets, edge_graphlet_counts

__all__ = [
    "CountTable",
    "GraphletCounts",
    "count_graphlets",
    "count_subsets",
    "edge_graphlet_counts",
]
