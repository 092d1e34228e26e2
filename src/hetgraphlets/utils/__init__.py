from .connectivity import is_connected_subset, connected_components
from .naming import describe_signature

__all__ = [
    "is_connected_subset",
    "connected_components",
    "describe_signature",
]
