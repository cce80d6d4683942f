"""Glider and pulsar shapes and their stamping arithmetic.

Stamped patterns wrap on the flattened row-major buffer: an index that runs
past the last cell continues at cell 0. This is not the same as per-axis
toroidal wrapping used for neighbor counting, where a pattern falling off
the right edge would reappear on the left of the same row.
"""

from typing import List, Sequence, Tuple

# (row offset, column offset) of each live glider cell
GLIDER: List[Tuple[int, int]] = [(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)]

PULSAR_WIDTH = 13
PULSAR_HEIGHT = 13

# Column offsets of live cells for each kind of pulsar row
PULSAR_TOP = (2, 3, 4, 8, 9, 10)
PULSAR_SIDE = (0, 5, 7, 12)
PULSAR_EMPTY: Tuple[int, ...] = ()


def pulsar_row_offsets(row: int) -> Tuple[int, ...]:
    """Get the live column offsets of one pulsar row.

    Args:
        row: Pattern row, 0 to 12

    Returns:
        Column offsets of the live cells in that row

    Raises:
        ValueError: If the row is outside the pattern
    """
    if row in (0, 5, 7, 12):
        return PULSAR_TOP
    if row in (1, 6, 11):
        return PULSAR_EMPTY
    if row in (2, 3, 4, 8, 9, 10):
        return PULSAR_SIDE
    raise ValueError(f"Invalid pulsar row number: {row}")


def _check_limit(width: int, height: int) -> int:
    limit = width * height
    if limit == 0:
        raise ValueError(f"Cannot stamp a pattern on a {width}x{height} universe")
    return limit


def glider_indices(row: int, col: int, width: int, height: int) -> List[int]:
    """Flat buffer indices of a glider anchored at (row, col).

    Args:
        row: Anchor row
        col: Anchor column
        width: Universe width
        height: Universe height

    Returns:
        Indices of the five live cells, wrapped modulo ``width * height``

    Raises:
        ValueError: If the universe has no cells
    """
    limit = _check_limit(width, height)
    return [(dc + col + width * (dr + row)) % limit for dr, dc in GLIDER]


def segment_indices(
    offsets: Sequence[int], start: int, end: int, translate: int, limit: int
) -> List[int]:
    """Indices of the live cells of one pattern row segment.

    The segment covers pattern cells ``start`` to ``end - 1`` of a pattern
    flattened at its own width; ``translate`` moves that segment onto the
    universe buffer.
    """
    return [(i + translate) % limit for i in range(start, end) if i - start in offsets]


def pulsar_indices(row: int, col: int, width: int, height: int) -> List[int]:
    """Flat buffer indices of a pulsar anchored at (row, col).

    Args:
        row: Anchor row
        col: Anchor column
        width: Universe width
        height: Universe height

    Returns:
        Indices of the 48 live cells, wrapped modulo ``width * height``

    Raises:
        ValueError: If the universe has no cells
    """
    limit = _check_limit(width, height)
    row_translate = row * width

    indices = []
    for idx in range(PULSAR_HEIGHT):
        start = idx * PULSAR_WIDTH
        end = start + PULSAR_WIDTH
        # shifts pattern row idx from its own width onto universe row row + idx
        col_translate = col + idx * (width - PULSAR_WIDTH)
        indices.extend(
            segment_indices(
                pulsar_row_offsets(idx), start, end, row_translate + col_translate, limit
            )
        )

    return indices
