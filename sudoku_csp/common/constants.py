# -*- coding: utf-8 -*-
"""Constants."""
from enum import Enum, EnumMeta

GRID_SIZE = 9
BOX_SIZE = 3
CELL_COUNT = GRID_SIZE * GRID_SIZE
EMPTY = 0

# box origins filled before backtracking; they share no row, column or box
DIAGONAL_BOX_ORIGINS = [(0, 0), (3, 3), (6, 6)]


class CaseInsensitiveEnumMeta(EnumMeta):
    def __getitem__(cls, name):
        return super().__getitem__(name.upper())


class CaseInsensitiveEnum(Enum, metaclass=CaseInsensitiveEnumMeta):
    pass


class Difficulty(CaseInsensitiveEnum):
    """Difficulty levels of a generated puzzle."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, value) -> "Difficulty":
        """Parse a difficulty label. Unknown labels fall back to `MEDIUM`."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip()]
            except KeyError:
                pass
        return cls.MEDIUM


# number of cells cleared from the solution, not cells kept
DEFAULT_REMOVAL_COUNTS = {
    Difficulty.EASY.value: 30,
    Difficulty.MEDIUM.value: 40,
    Difficulty.HARD.value: 50,
}


class Direction(CaseInsensitiveEnum):
    """Selection movement directions."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
