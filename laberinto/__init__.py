"""Random maze generation, manual exploration and a backtracking solver for the terminal."""

__version__ = "0.1.0"
__all__ = ["board", "display", "cli"]