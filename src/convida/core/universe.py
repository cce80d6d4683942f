"""The Game of Life universe: a toroidal grid of cells."""

from contextlib import nullcontext
from typing import ContextManager, Iterable, List, Tuple
import logging
import time

import numpy as np
import torch
import torch.nn.functional as F

from .cell import Cell
from .patterns import glider_indices, pulsar_indices
from .seeds import create_cells

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 128
DEFAULT_HEIGHT = 128

DEAD_SYMBOL = "◻"
ALIVE_SYMBOL = "◼"

_NEIGHBOR_KERNEL = (
    torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
)


class Timer:
    """Logs the wall time spent inside a ``with`` block at DEBUG level."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._start = 0.0

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, *exc_info) -> None:
        elapsed = (time.perf_counter() - self._start) * 1000
        logger.debug("%s: %.3fms", self.name, elapsed)


def _check_dimension(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return value


class Universe:
    """A fixed-size toroidal grid running Conway's Game of Life.

    Cells are stored in a flat row-major buffer, so the cell at (row, col)
    lives at ``row * width + col``. Neighbor counting wraps each axis
    independently, while the pattern stampers wrap on the flat buffer.
    """

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        generator: str = "random",
    ) -> None:
        """Initialize a new universe.

        Args:
            width: Number of columns
            height: Number of rows
            generator: Seeding generator name ('default', 'glider' or 'random')

        Raises:
            ValueError: If a dimension is negative or the generator is unknown
        """
        self._width = _check_dimension("Width", width)
        self._height = _check_dimension("Height", height)
        self._cells = create_cells(generator, width * height, width)
        self._generation = 0

        # Single-threaded to avoid conflicts with multiprocessing hosts
        torch.set_num_threads(1)

    @property
    def width(self) -> int:
        """Number of columns."""
        return self._width

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._height

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the raw row-major cell buffer (0 dead, 1 alive)."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    @property
    def generation(self) -> int:
        """Ticks since the universe was last seeded or cleared."""
        return self._generation

    @property
    def population(self) -> int:
        """Number of living cells."""
        return int(np.count_nonzero(self._cells))

    def get_cells(self) -> List[Cell]:
        """Get the state of every cell in row-major order."""
        return [Cell(int(value)) for value in self._cells]

    def get_cell(self, row: int, col: int) -> Cell:
        """Get the state of one cell.

        Raises:
            IndexError: If the coordinates are outside the universe
        """
        return Cell(int(self._cells[self._get_index(row, col)]))

    def _get_index(self, row: int, col: int) -> int:
        if not (0 <= row < self._height and 0 <= col < self._width):
            raise IndexError(
                f"Cell ({row}, {col}) out of bounds for {self._width}x{self._height} universe"
            )
        return row * self._width + col

    # Sizing and seeding

    def set_size(self, width: int, height: int) -> "Universe":
        """Create a randomly seeded universe of a new size.

        The receiver adopts the new dimensions and a copy of the new cells,
        but callers are expected to switch to the returned universe.

        Args:
            width: Number of columns
            height: Number of rows

        Returns:
            New randomly seeded universe
        """
        universe = Universe(width, height)
        self._width = width
        self._height = height
        self._cells = universe._cells.copy()
        self._generation = 0
        return universe

    def set_width(self, width: int) -> None:
        """Set the width of the universe.

        Resets all cells to the dead state.
        """
        self._width = _check_dimension("Width", width)
        self.clear()

    def set_height(self, height: int) -> None:
        """Set the height of the universe.

        Resets all cells to the dead state.
        """
        self._height = _check_dimension("Height", height)
        self.clear()

    def reset(self) -> None:
        """Reseed every cell randomly at the current size."""
        self._cells = create_cells("random", self._width * self._height, self._width)
        self._generation = 0

    def clear(self) -> None:
        """Set every cell to dead."""
        self._cells = np.full(self._width * self._height, Cell.DEAD.value, dtype=np.uint8)
        self._generation = 0

    # Cell mutation

    def toggle_cell(self, row: int, col: int) -> None:
        """Flip a cell between dead and alive.

        Raises:
            IndexError: If the coordinates are outside the universe
        """
        idx = self._get_index(row, col)
        self._cells[idx] = Cell(int(self._cells[idx])).toggled().value

    def set_cells(self, cells: Iterable[Tuple[int, int]]) -> None:
        """Set cells to be alive by passing the row and column of each cell.

        Every coordinate is checked before any cell changes.

        Raises:
            IndexError: If any coordinate is outside the universe
        """
        indices = [self._get_index(row, col) for row, col in cells]
        if indices:
            self._cells[indices] = Cell.ALIVE.value

    def glider(self, row: int, col: int) -> None:
        """Stamp a glider anchored at (row, col), wrapping on the flat buffer."""
        self._cells[glider_indices(row, col, self._width, self._height)] = Cell.ALIVE.value

    def pulsar(self, row: int, col: int) -> None:
        """Stamp a pulsar anchored at (row, col), wrapping on the flat buffer.

        Pattern (O alive, . dead)::

            ..OOO...OOO..
            .............
            O....O.O....O
            O....O.O....O
            O....O.O....O
            ..OOO...OOO..
            .............
            ..OOO...OOO..
            O....O.O....O
            O....O.O....O
            O....O.O....O
            .............
            ..OOO...OOO..
        """
        self._cells[pulsar_indices(row, col, self._width, self._height)] = Cell.ALIVE.value

    # Stepping

    def live_neighbor_count(self, row: int, col: int) -> int:
        """Count living neighbors of a cell, wrapping each axis.

        Args:
            row: Row coordinate
            col: Column coordinate

        Returns:
            Number of living neighbors (0-8)

        Raises:
            IndexError: If the coordinates are outside the universe
        """
        self._get_index(row, col)

        north = self._height - 1 if row == 0 else row - 1
        south = 0 if row == self._height - 1 else row + 1
        west = self._width - 1 if col == 0 else col - 1
        east = 0 if col == self._width - 1 else col + 1

        count = 0
        for r, c in (
            (north, west),
            (north, col),
            (north, east),
            (row, west),
            (row, east),
            (south, west),
            (south, col),
            (south, east),
        ):
            count += Cell(int(self._cells[r * self._width + c])).value

        return count

    def _count_all_neighbors(self) -> np.ndarray:
        """Count neighbors for all cells with a circularly padded convolution.

        Returns:
            Flat row-major array of neighbor counts
        """
        grid = torch.from_numpy(self._cells.astype(np.float32)).view(1, 1, self._height, self._width)
        padded = F.pad(grid, (1, 1, 1, 1), mode="circular")
        neighbors = F.conv2d(padded, _NEIGHBOR_KERNEL)
        return neighbors[0, 0].numpy().astype(np.uint8).reshape(-1)

    def _timer(self, name: str, enabled: bool) -> ContextManager:
        return Timer(name) if enabled else nullcontext()

    def tick(self) -> None:
        """Advance the universe by one generation.

        The next generation is built in a separate buffer from the current
        one and swapped in afterwards, so every cell sees the same
        generation of neighbors.
        """
        debug = logger.isEnabledFor(logging.DEBUG)

        with self._timer("Universe::tick", debug):
            if self._width == 0 or self._height == 0:
                self._generation += 1
                return

            with self._timer("allocate next cells", debug):
                next_cells = self._cells.copy()

            with self._timer("new generation", debug):
                neighbor_counts = self._count_all_neighbors()
                alive = self._cells == Cell.ALIVE.value

                # Underpopulation and overpopulation
                death_mask = alive & ((neighbor_counts < 2) | (neighbor_counts > 3))
                # Reproduction
                birth_mask = ~alive & (neighbor_counts == 3)

                next_cells[death_mask] = Cell.DEAD.value
                next_cells[birth_mask] = Cell.ALIVE.value

            if debug:
                for idx in np.flatnonzero(next_cells != self._cells):
                    row, col = divmod(int(idx), self._width)
                    logger.debug(
                        "trans cell: row: %d, col: %d, now %s", row, col, Cell(int(next_cells[idx])).name
                    )

            with self._timer("free old cells", debug):
                self._cells = next_cells

        self._generation += 1

    # Rendering

    def render(self) -> str:
        """Render the universe as text, one line per row."""
        if self._width == 0:
            return ""

        lines = []
        for start in range(0, len(self._cells), self._width):
            line = self._cells[start : start + self._width]
            lines.append("".join(ALIVE_SYMBOL if value else DEAD_SYMBOL for value in line))
            lines.append("\n")
        return "".join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Universe(width={self._width}, height={self._height}, population={self.population})"

    def __eq__(self, other: object) -> bool:
        """Check if two universes have the same size and cells."""
        if not isinstance(other, Universe):
            return False
        return (
            self._width == other._width
            and self._height == other._height
            and np.array_equal(self._cells, other._cells)
        )
