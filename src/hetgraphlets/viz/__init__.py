from .draw import draw_orbits

__all__ = ["draw_orbits"]
