# -*- coding: utf-8 -*-
"""Sudoku puzzle generation and validation."""

__version__ = "0.1.0"
