"""Named generators producing initial cell buffers."""

from typing import Callable, Dict, List
import numpy as np

from .cell import Cell


def default(size: int) -> np.ndarray:
    """Striped buffer: cells at even indices and multiples of 7 are alive.

    Args:
        size: Number of cells

    Returns:
        Flat uint8 buffer of length ``size``
    """
    indices = np.arange(size)
    alive = (indices % 2 == 0) | (indices % 7 == 0)
    return alive.astype(np.uint8)


def glider(size: int, width: int) -> np.ndarray:
    """Empty buffer holding a single glider at the origin.

    Uses plain row-major indexing, so the glider does not wrap.

    Args:
        size: Number of cells
        width: Row length used to place the glider's lower rows

    Returns:
        Flat uint8 buffer of length ``size``

    Raises:
        IndexError: If the buffer is too small to hold the glider
    """
    cells = np.full(size, Cell.DEAD.value, dtype=np.uint8)

    indices = [1, 2 + width] + [i + width * 2 for i in range(3)]
    if max(indices) >= size:
        raise IndexError(f"Glider does not fit in {size} cells with width {width}")

    cells[indices] = Cell.ALIVE.value
    return cells


def random(size: int, probability: float = 0.5) -> np.ndarray:
    """Buffer where each cell is independently alive.

    Args:
        size: Number of cells
        probability: Chance each cell will be alive (0.0 to 1.0)

    Returns:
        Flat uint8 buffer of length ``size``
    """
    return (np.random.random(size) < probability).astype(np.uint8)


_GENERATORS: Dict[str, Callable[[int, int], np.ndarray]] = {
    "default": lambda size, width: default(size),
    "glider": glider,
    "random": lambda size, width: random(size),
}

GENERATORS: List[str] = list(_GENERATORS)


def create_cells(generator: str, size: int, width: int) -> np.ndarray:
    """Create a cell buffer using a named generator.

    Args:
        generator: One of ``GENERATORS``
        size: Number of cells
        width: Row length of the target grid

    Returns:
        Flat uint8 buffer of length ``size``

    Raises:
        ValueError: If the generator name is unknown
    """
    try:
        func = _GENERATORS[generator]
    except KeyError:
        raise ValueError(
            f"Unknown cell generator '{generator}'. Available: {', '.join(GENERATORS)}"
        ) from None

    return func(size, width)
