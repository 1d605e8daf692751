"""Micromouse maze-solving mice for a line-protocol maze simulator."""

__version__ = "0.1.0"
__all__ = ["api", "floodfill", "wall_follower"]