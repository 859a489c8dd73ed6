# -*- coding: utf-8 -*-
"""Grid helpers shared by the generator, the judge and the game session."""
from typing import List, Tuple

from sudoku_csp.common.constants import BOX_SIZE, EMPTY, GRID_SIZE

Grid = List[List[int]]


def empty_grid() -> Grid:
    return [[EMPTY for _ in range(GRID_SIZE)] for _ in range(GRID_SIZE)]


def copy_grid(grid: Grid) -> Grid:
    """Deep copy of a grid; the copy shares no rows with `grid`."""
    return [row[:] for row in grid]


def box_origin(row: int, col: int) -> Tuple[int, int]:
    return row - row % BOX_SIZE, col - col % BOX_SIZE


def box_cells(row: int, col: int) -> List[Tuple[int, int]]:
    """All cells of the box containing `(row, col)`, row-major."""
    start_row, start_col = box_origin(row, col)
    return [
        (start_row + i, start_col + j) for i in range(BOX_SIZE) for j in range(BOX_SIZE)
    ]


def check_shape(grid: Grid) -> None:
    if len(grid) != GRID_SIZE or any(len(row) != GRID_SIZE for row in grid):
        raise ValueError(f"The grid must be {GRID_SIZE}x{GRID_SIZE}.")


def check_cell(row: int, col: int) -> None:
    if not (0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE):
        raise ValueError(f"Cell ({row}, {col}) is outside the grid.")


def count_empty(grid: Grid) -> int:
    return sum(1 for row in grid for v in row if v == EMPTY)


def format_grid(grid: Grid, empty: str = ".") -> str:
    """Render a grid as text, with separators between boxes.

    Example::

        5 3 . | . 7 . | . . .
        6 . . | 1 9 5 | . . .
        ...
        ------+-------+------
    """
    lines = []
    for r, row in enumerate(grid):
        cells = []
        for c, v in enumerate(row):
            cells.append(empty if v == EMPTY else str(v))
            if c % BOX_SIZE == BOX_SIZE - 1 and c != GRID_SIZE - 1:
                cells.append("|")
        lines.append(" ".join(cells))
        if r % BOX_SIZE == BOX_SIZE - 1 and r != GRID_SIZE - 1:
            lines.append("------+-------+------")
    return "\n".join(lines)
