"""Conway's Game of Life on a toroidal universe."""

__version__ = "0.1.0"

from .core.cell import Cell
from .core.universe import Universe

__all__ = ["Cell", "Universe"]
