"""Grid layout optimizer.

Chooses how many rows and columns to use for ``count`` swatches. For every
candidate row count ``a`` in ``1..ceil(count / 2)`` the column count is
``b = ceil(count / a)`` and the pair is scored with::

    cost(a, b) = 5 * (a * b - count) + 1 * (a - b) ** 2

The lowest cost wins; ties go to the smallest ``a``. Empty cells are cheap
compared to a lopsided grid, so the result leans towards square.
"""

from typing import Iterator, Tuple

from swatch_grid.request import GridShape, check_count

EXCESS_CELL_PENALTY = 5
ASPECT_RATIO_2_PENALTY = 1


def _ceil_div(n: int, d: int) -> int:
    return -(-n // d)


def layout_cost(rows: int, cols: int, count: int) -> int:
    """Score a ``rows x cols`` grid for ``count`` swatches (lower is better)."""
    excess_cells = rows * cols - count
    aspect_ratio = abs(rows - cols)
    return (
        EXCESS_CELL_PENALTY * excess_cells + ASPECT_RATIO_2_PENALTY * aspect_ratio**2
    )


def compute_grid_shape(count: int) -> GridShape:
    """Return the cost-minimizing grid shape for ``count`` swatches.

    Raises:
        InvalidCount: If ``count`` is not a positive integer.
    """
    check_count(count)
    best_rows, best_cols = 1, count
    best_cost = layout_cost(best_rows, best_cols, count)
    for rows in range(2, _ceil_div(count, 2) + 1):
        cols = _ceil_div(count, rows)
        cost = layout_cost(rows, cols, count)
        # strict comparison keeps the first (smallest) row count on ties
        if cost < best_cost:
            best_rows, best_cols, best_cost = rows, cols, cost
    return GridShape(rows=best_rows, cols=best_cols)


def grid_cells(shape: GridShape, count: int) -> Iterator[Tuple[int, int, int]]:
    """Yield ``(row, col, index)`` for the filled cells of ``shape``.

    Cells are visited row-major and ``index = col + row * shape.cols``; cells
    whose index is ``count`` or more stay empty and are skipped.
    """
    for row in range(shape.rows):
        for col in range(shape.cols):
            index = col + row * shape.cols
            if index < count:
                yield row, col, index
