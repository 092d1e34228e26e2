from .esu import enumerate_anchor, enumerate_containing, enumerate_subgraphs
from .bruteforce import classify_bruteforce, connected_subsets_bruteforce

__all__ = [
    "enumerate_anchor",
    "enumerate_containing",
    "enumerate_subgraphs",
    "classify_bruteforce",
    "connected_subsets_bruteforce",
]
