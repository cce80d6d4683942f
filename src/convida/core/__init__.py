"""Core Game of Life logic."""

from .cell import Cell
from .seeds import GENERATORS, create_cells
from .universe import Universe

__all__ = ["Cell", "GENERATORS", "create_cells", "Universe"]
