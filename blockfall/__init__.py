"""Falling-block puzzle logic: block shapes, a board grid and a terminal game loop."""

__version__ = "0.1.0"
__all__ = ["block", "board", "game"]