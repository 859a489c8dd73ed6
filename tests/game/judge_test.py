# -*- coding: utf-8 -*-
"""Test for the board judge"""
import unittest

from sudoku_csp.common.grid import copy_grid, empty_grid
from sudoku_csp.game.judge import SudokuJudge

SOLUTION = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]


class SudokuJudgeTest(unittest.TestCase):
    def test_valid_solution(self):
        self.assertTrue(SudokuJudge.is_valid(SOLUTION))
        self.assertTrue(SudokuJudge.is_complete(SOLUTION))
        self.assertTrue(SudokuJudge.is_solution(SOLUTION))

    def test_empty_board_is_valid_but_incomplete(self):
        board = empty_grid()
        self.assertTrue(SudokuJudge.is_valid(board))
        self.assertFalse(SudokuJudge.is_complete(board))
        self.assertFalse(SudokuJudge.is_solution(board))

    def test_duplicates(self):
        row_dup = empty_grid()
        row_dup[0][0] = row_dup[0][8] = 4
        col_dup = empty_grid()
        col_dup[0][0] = col_dup[8][0] = 4
        box_dup = empty_grid()
        box_dup[0][0] = box_dup[2][2] = 4
        for name, board in [("row", row_dup), ("column", col_dup), ("box", box_dup)]:
            with self.subTest(scope=name):
                self.assertFalse(SudokuJudge.is_valid(board))

    def test_swapped_cells_break_validity(self):
        board = copy_grid(SOLUTION)
        board[0][0], board[0][1] = board[0][1], board[0][0]
        self.assertTrue(SudokuJudge.is_complete(board))
        self.assertFalse(SudokuJudge.is_valid(board))
        self.assertFalse(SudokuJudge.is_solved(board, SOLUTION))

    def test_check(self):
        initial = copy_grid(SOLUTION)
        initial[0][2] = 0
        initial[4][4] = 0

        board = copy_grid(initial)
        result = SudokuJudge.check(board, SOLUTION, initial)
        self.assertFalse(result.is_complete)
        self.assertTrue(result.is_correct)
        self.assertFalse(result.solved)

        board[0][2] = 1
        result = SudokuJudge.check(board, SOLUTION, initial)
        self.assertFalse(result.is_complete)
        self.assertFalse(result.is_correct)
        self.assertEqual(result.wrong_cells, [(0, 2)])

        board[0][2] = 4
        board[4][4] = 5
        result = SudokuJudge.check(board, SOLUTION, initial)
        self.assertTrue(result.solved)
        self.assertEqual(result.wrong_cells, [])

    def test_check_does_not_blame_prefilled_cells(self):
        initial = copy_grid(SOLUTION)
        board = copy_grid(SOLUTION)
        board[8][8] = 1
        result = SudokuJudge.check(board, SOLUTION, initial)
        self.assertFalse(result.is_correct)
        self.assertEqual(result.wrong_cells, [])

        result = SudokuJudge.check(board, SOLUTION)
        self.assertEqual(result.wrong_cells, [(8, 8)])

    def test_check_rejects_bad_shape(self):
        with self.assertRaises(ValueError):
            SudokuJudge.check([row[:8] for row in SOLUTION], SOLUTION)
