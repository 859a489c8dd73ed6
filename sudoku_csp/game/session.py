# -*- coding: utf-8 -*-
"""Single-player game state."""
from typing import List, Optional, Tuple

from sudoku_csp.common.constants import EMPTY, GRID_SIZE, Direction
from sudoku_csp.common.grid import Grid, box_cells, check_cell, copy_grid
from sudoku_csp.game.generator import PuzzleGenerator
from sudoku_csp.game.judge import CheckResult, SudokuJudge
from sudoku_csp.utils.log import get_logger

logger = get_logger(__name__)


class SudokuGame:
    """
    Game state behind a Sudoku board view.

    - `initial` holds the puzzle; its non-empty cells are prefilled and
      reject edits
    - `current` tracks the player's progress
    - `solution` is the ground truth for `check_solution`

    Rendering and the clock driving `tick` belong to the caller.
    """

    def __init__(self, generator: Optional[PuzzleGenerator] = None):
        self.generator = generator or PuzzleGenerator()
        self.judge = SudokuJudge()
        self.initial: Grid = []
        self.current: Grid = []
        self.solution: Grid = []
        self.selected: Optional[Tuple[int, int]] = None
        self.time_elapsed = 0
        self.is_active = False
        self.is_won = False

    def start_new_game(self, difficulty=None) -> None:
        game = self.generator.generate_new_game(difficulty)
        self.initial = copy_grid(game.initial)
        self.solution = game.solution
        self.current = copy_grid(self.initial)
        self.time_elapsed = 0
        self.is_active = True
        self.is_won = False
        self.selected = None
        logger.info(f"Started a new {game.difficulty.value} game.")

    def is_prefilled(self, row: int, col: int) -> bool:
        return self.initial[row][col] != EMPTY

    def select_cell(self, row: int, col: int) -> bool:
        if not self.is_active:
            return False
        check_cell(row, col)
        self.selected = (row, col)
        return True

    def move_selection(self, direction) -> Optional[Tuple[int, int]]:
        """Move the selection one cell, staying on the board.

        Keys other than the four directions leave the selection unchanged.
        """
        if not self.is_active or self.selected is None:
            return self.selected
        if isinstance(direction, str):
            # accept arrow key names such as "ArrowUp"
            name = direction[len("Arrow"):] if direction.startswith("Arrow") else direction
            try:
                direction = Direction[name]
            except KeyError:
                return self.selected
        row, col = self.selected
        if direction == Direction.UP:
            row = max(0, row - 1)
        elif direction == Direction.DOWN:
            row = min(GRID_SIZE - 1, row + 1)
        elif direction == Direction.LEFT:
            col = max(0, col - 1)
        elif direction == Direction.RIGHT:
            col = min(GRID_SIZE - 1, col + 1)
        self.selected = (row, col)
        return self.selected

    @staticmethod
    def related_cells(row: int, col: int) -> List[Tuple[int, int]]:
        """Cells sharing a row, column or box with `(row, col)`, excluding itself."""
        related = {(row, c) for c in range(GRID_SIZE)}
        related.update((r, col) for r in range(GRID_SIZE))
        related.update(box_cells(row, col))
        related.discard((row, col))
        return sorted(related)

    def fill_cell(self, num: int) -> bool:
        """Write `num` into the selected cell, 0 clears it.

        Returns:
            bool: Whether the board was changed.
        """
        if not self.is_active or self.selected is None:
            return False
        if not 0 <= num <= GRID_SIZE:
            raise ValueError(f"Digit must be in [0, {GRID_SIZE}], got {num}")
        row, col = self.selected
        if self.is_prefilled(row, col):
            return False
        self.current[row][col] = num
        return True

    def check_solution(self) -> CheckResult:
        result = self.judge.check(self.current, self.solution, self.initial)
        if result.solved:
            self.game_won()
        return result

    def game_won(self) -> None:
        self.is_active = False
        self.is_won = True
        logger.info(f"Puzzle solved in {self.format_time(self.time_elapsed)}")

    def tick(self) -> int:
        if self.is_active:
            self.time_elapsed += 1
        return self.time_elapsed

    @staticmethod
    def format_time(seconds: int) -> str:
        m, s = divmod(seconds, 60)
        return f"{m:02d}:{s:02d}"
