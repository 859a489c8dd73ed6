# -*- coding: utf-8 -*-
"""Sudoku puzzle generator."""
from dataclasses import dataclass
from typing import Dict, Optional

from sudoku_csp.common.config import GeneratorConfig
from sudoku_csp.common.constants import (
    BOX_SIZE,
    CELL_COUNT,
    DIAGONAL_BOX_ORIGINS,
    EMPTY,
    GRID_SIZE,
    Difficulty,
)
from sudoku_csp.common.grid import Grid, box_origin, copy_grid, count_empty, empty_grid
from sudoku_csp.common.random_provider import RandomProvider, get_random_provider
from sudoku_csp.utils.log import get_logger

logger = get_logger(__name__)


@dataclass
class GeneratedGame:
    """A puzzle and the solution it was carved from."""

    initial: Grid
    solution: Grid
    difficulty: Difficulty = Difficulty.MEDIUM
    removed: int = 0

    def to_dict(self) -> Dict[str, Grid]:
        return {"initial": self.initial, "solution": self.solution}


class PuzzleGenerator:
    """
    Sudoku puzzle generator based on constrained random fill and backtracking.

    - Seeds the three diagonal 3x3 boxes with random digits
    - Completes the board with an exhaustive backtracking search
    - Removes cells based on difficulty (number of empty cells)

    Puzzles are not checked for a unique solution; the returned solution is
    only guaranteed to be one of them.
    """

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        random_provider: Optional[RandomProvider] = None,
    ):
        self.config = config or GeneratorConfig()
        if random_provider is None:
            random_provider = get_random_provider(self.config.random_provider, seed=self.config.seed)
        self.random = random_provider
        self.board: Grid = empty_grid()
        self.solution: Optional[Grid] = None

    def generate_new_game(self, difficulty=None) -> GeneratedGame:
        """Generate a new puzzle together with its solution.

        Args:
            difficulty: `Difficulty` or one of "easy", "medium", "hard"
                (case-insensitive). Unknown values behave as medium. Defaults
                to the configured difficulty.

        Returns:
            GeneratedGame: Independent copies of the puzzle and the solution.
        """
        if difficulty is None:
            difficulty = self.config.difficulty
        difficulty = Difficulty.parse(difficulty)

        self.board = empty_grid()
        self.fill_diagonal()
        if not self.solve_board(self.board):
            raise RuntimeError("Backtracking failed to complete a diagonally seeded board.")
        self.solution = copy_grid(self.board)

        removed = self.remove_digits(self.config.removal_count(difficulty))
        logger.debug(f"Generated a {difficulty.value} puzzle with {removed} empty cells.")
        return GeneratedGame(
            initial=copy_grid(self.board),
            solution=copy_grid(self.solution),
            difficulty=difficulty,
            removed=removed,
        )

    def fill_diagonal(self) -> None:
        for row, col in DIAGONAL_BOX_ORIGINS:
            self.fill_box(row, col)

    def fill_box(self, row: int, col: int) -> None:
        """Fill the box at origin `(row, col)` with distinct random digits.

        Only the box itself is checked, so this keeps the board valid only
        for boxes whose rows and columns are still empty.
        """
        for i in range(BOX_SIZE):
            for j in range(BOX_SIZE):
                num = self.random.randrange(GRID_SIZE) + 1
                while not self.is_safe_in_box(row, col, num):
                    num = self.random.randrange(GRID_SIZE) + 1
                self.board[row + i][col + j] = num

    def is_safe_in_box(self, row_start: int, col_start: int, num: int) -> bool:
        for i in range(BOX_SIZE):
            for j in range(BOX_SIZE):
                if self.board[row_start + i][col_start + j] == num:
                    return False
        return True

    @staticmethod
    def is_valid(board: Grid, row: int, col: int, num: int) -> bool:
        """Whether `num` can be placed at `(row, col)`.

        The current value of `(row, col)` takes part in the check.
        """
        if not 1 <= num <= GRID_SIZE:
            raise ValueError(f"Digit must be in [1, {GRID_SIZE}], got {num}")

        for x in range(GRID_SIZE):
            if board[row][x] == num:
                return False

        for x in range(GRID_SIZE):
            if board[x][col] == num:
                return False

        start_row, start_col = box_origin(row, col)
        for i in range(BOX_SIZE):
            for j in range(BOX_SIZE):
                if board[start_row + i][start_col + j] == num:
                    return False

        return True

    def solve_board(self, board: Grid) -> bool:
        """Complete `board` in place by backtracking.

        Cells are visited in row-major order and digits tried in ascending
        order, so a given board always yields the same completion.

        Returns:
            bool: True if the board was completed. On False, every cell
                visited by the search is empty again.
        """
        empty = self._find_empty(board)
        if not empty:
            return True

        r, c = empty
        for num in range(1, GRID_SIZE + 1):
            if self.is_valid(board, r, c, num):
                board[r][c] = num
                if self.solve_board(board):
                    return True
                board[r][c] = EMPTY

        return False

    def _find_empty(self, board: Grid):
        for i in range(GRID_SIZE):
            for j in range(GRID_SIZE):
                if board[i][j] == EMPTY:
                    return i, j
        return None

    def remove_digits(self, count: int) -> int:
        """Clear `count` distinct filled cells picked uniformly at random.

        Counts above the number of filled cells are clamped.

        Returns:
            int: The number of cells actually cleared.
        """
        if count < 0:
            raise ValueError(f"Removal count must be non-negative, got {count}")
        filled = CELL_COUNT - count_empty(self.board)
        if count > filled:
            logger.warning(f"Cannot remove {count} cells from {filled} filled ones, clamping.")
            count = filled

        removed = 0
        while removed < count:
            cell_id = self.random.randrange(CELL_COUNT)
            i, j = divmod(cell_id, GRID_SIZE)
            if self.board[i][j] != EMPTY:
                self.board[i][j] = EMPTY
                removed += 1
        return removed
