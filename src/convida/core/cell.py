"""Cell states for the Game of Life universe."""

from enum import Enum


class Cell(Enum):
    """State of a single cell.

    The numeric values double as the raw buffer encoding and as the
    per-neighbor contribution when counting live neighbors.
    """

    DEAD = 0
    ALIVE = 1

    def toggled(self) -> "Cell":
        """Return the opposite state."""
        return Cell.ALIVE if self is Cell.DEAD else Cell.DEAD

    @property
    def is_alive(self) -> bool:
        return self is Cell.ALIVE
