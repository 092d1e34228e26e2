from .registry import Orbit, OrbitRegistry

__all__ = [
    "Orbit",
    "OrbitRegistry",
]
