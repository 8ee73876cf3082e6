"""
Game configuration: board geometry, difficulty and play mode.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .game import CLASSIC_SIZE, O, X


class Difficulty(Enum):
    """Computer opponent strength."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    UNBEATABLE = "unbeatable"

    @classmethod
    def parse(cls, value: Union[str, "Difficulty"]) -> "Difficulty":
        """Accept a Difficulty or its (case-insensitive) name."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            names = ", ".join(d.value for d in cls)
            raise ValueError(f"unknown difficulty {value!r} (expected one of: {names})") from None


class Mode(Enum):
    """Who sits at the board."""
    PVP = "pvp"  # two humans
    PVA = "pva"  # human vs computer


@dataclass(frozen=True)
class GameConfig:
    """Settings for one game. Immutable once the game starts."""

    # Board geometry
    grid_size: int = CLASSIC_SIZE
    win_length: int = CLASSIC_SIZE

    # Computer opponent
    difficulty: Difficulty = Difficulty.EASY
    computer: int = O

    def __post_init__(self):
        if self.grid_size < 2:
            raise ValueError(f"grid_size must be at least 2, got {self.grid_size}")
        if self.win_length < 1:
            raise ValueError(f"win_length must be at least 1, got {self.win_length}")
        if self.computer not in (X, O):
            raise ValueError(f"computer must be X (+1) or O (-1), got {self.computer!r}")
        # frozen: bypass __setattr__ to normalize string difficulties
        object.__setattr__(self, "difficulty", Difficulty.parse(self.difficulty))

    @property
    def cells(self) -> int:
        return self.grid_size * self.grid_size

    @property
    def is_classic(self) -> bool:
        """3x3 board with three in a row."""
        return self.grid_size == CLASSIC_SIZE and self.win_length == CLASSIC_SIZE
