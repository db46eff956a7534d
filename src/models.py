"""Data models for the word search generator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """Unit step vector ``(dx, dy)``; y grows downwards."""

    RIGHT = (1, 0)
    DOWN = (0, 1)
    DOWN_RIGHT = (1, 1)
    UP_RIGHT = (1, -1)
    LEFT = (-1, 0)
    UP = (0, -1)
    UP_LEFT = (-1, -1)
    DOWN_LEFT = (-1, 1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    def reversed(self) -> Direction:
        return Direction((-self.dx, -self.dy))


@dataclass(frozen=True)
class GeneratorConfig:
    """A validated generator configuration. Build it with ``validate_config``."""

    width: int
    height: int
    words: tuple[str, ...]  # cleaned, de-duplicated
    allow_backwards: bool = True
    allow_diagonals: bool = True
    difficulty: int = 5


@dataclass(frozen=True)
class WordLocation:
    """A word placed on the grid as a straight segment from start to end."""

    word: str
    start_x: int
    start_y: int
    end_x: int
    end_y: int

    @property
    def length(self) -> int:
        return max(abs(self.end_x - self.start_x), abs(self.end_y - self.start_y)) + 1

    @property
    def direction(self) -> Direction:
        steps = self.length - 1
        if steps == 0:
            return Direction.RIGHT
        return Direction(((self.end_x - self.start_x) // steps,
                          (self.end_y - self.start_y) // steps))

    def cells(self) -> list[tuple[int, int]]:
        """Grid coordinates ``(x, y)`` from the first letter to the last."""
        d = self.direction
        return [(self.start_x + i * d.dx, self.start_y + i * d.dy)
                for i in range(self.length)]


@dataclass(frozen=True)
class GeneratedPuzzle:
    """The outcome of one ``generate`` call."""

    grid: tuple[tuple[str, ...], ...]
    placed_words: tuple[WordLocation, ...] = ()
    distractors: tuple[WordLocation, ...] = ()

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    def rows(self) -> list[str]:
        return ["".join(row) for row in self.grid]


@dataclass(frozen=True)
class ValidationIssue:
    """One violated configuration constraint."""

    field: str
    message: str


class WordSearchError(Exception):
    """Fatal error during word search generation."""


class ValidationError(WordSearchError):
    """Configuration rejected; ``issues`` lists every violated constraint."""

    def __init__(self, issues: list[ValidationIssue]):
        self.issues = list(issues)
        super().__init__(
            "Invalid configuration: "
            + "; ".join(f"{i.field}: {i.message}" for i in self.issues)
        )

    @property
    def fields(self) -> list[str]:
        return [i.field for i in self.issues]
