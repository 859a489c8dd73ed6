# -*- coding: utf-8 -*-
"""Sudoku board checks."""
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from sudoku_csp.common.constants import BOX_SIZE, EMPTY, GRID_SIZE
from sudoku_csp.common.grid import Grid, check_shape, count_empty


@dataclass
class CheckResult:
    is_complete: bool
    is_correct: bool
    # user-entered cells that differ from the solution
    wrong_cells: List[Tuple[int, int]] = field(default_factory=list)

    @property
    def solved(self) -> bool:
        return self.is_complete and self.is_correct


class SudokuJudge:
    """
    Judge Sudoku board state.
    - Checks row validity
    - Checks column validity
    - Checks 3x3 block validity
    - Compares a board against its solution
    """

    @staticmethod
    def _has_duplicates(values) -> bool:
        nums = [v for v in values if v != EMPTY]
        return len(nums) != len(set(nums))

    @staticmethod
    def is_valid(board: Grid) -> bool:
        """No digit repeats in any row, column or box. Empty cells are ignored."""
        for row in board:
            if SudokuJudge._has_duplicates(row):
                return False

        for col in range(GRID_SIZE):
            if SudokuJudge._has_duplicates(board[row][col] for row in range(GRID_SIZE)):
                return False

        for br in range(0, GRID_SIZE, BOX_SIZE):
            for bc in range(0, GRID_SIZE, BOX_SIZE):
                box = (
                    board[r][c]
                    for r in range(br, br + BOX_SIZE)
                    for c in range(bc, bc + BOX_SIZE)
                )
                if SudokuJudge._has_duplicates(box):
                    return False

        return True

    @staticmethod
    def is_complete(board: Grid) -> bool:
        return count_empty(board) == 0

    @staticmethod
    def is_solved(board: Grid, solution: Grid) -> bool:
        return board == solution

    @staticmethod
    def is_solution(board: Grid) -> bool:
        """A full board where every row, column and box holds 1-9 once."""
        return SudokuJudge.is_complete(board) and SudokuJudge.is_valid(board)

    @staticmethod
    def check(board: Grid, solution: Grid, initial: Optional[Grid] = None) -> CheckResult:
        """Compare `board` against `solution` cell by cell.

        Only cells that are empty in `initial` are reported in `wrong_cells`;
        prefilled cells cannot be wrong.
        """
        check_shape(board)
        check_shape(solution)
        is_complete = True
        is_correct = True
        wrong_cells = []
        for i in range(GRID_SIZE):
            for j in range(GRID_SIZE):
                val = board[i][j]
                if val == EMPTY:
                    is_complete = False
                elif val != solution[i][j]:
                    is_correct = False
                    if initial is None or initial[i][j] == EMPTY:
                        wrong_cells.append((i, j))
        return CheckResult(is_complete=is_complete, is_correct=is_correct, wrong_cells=wrong_cells)
