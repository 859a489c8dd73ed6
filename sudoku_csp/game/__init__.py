# -*- coding: utf-8 -*-
"""Sudoku game module"""
from .generator import GeneratedGame, PuzzleGenerator
from .judge import CheckResult, SudokuJudge
from .session import SudokuGame

__all__ = [
    "GeneratedGame",
    "PuzzleGenerator",
    "CheckResult",
    "SudokuJudge",
    "SudokuGame",
]
