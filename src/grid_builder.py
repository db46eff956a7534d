"""Working grid buffer, final letter fill, solution mask and cell index."""

from __future__ import annotations

import random
import string

from models import GeneratedPuzzle, WordLocation

EMPTY = 0


class WorkingGrid:
    """Mutable flat grid used during placement.

    Cells hold 0 when empty or the ASCII code of an uppercase letter.
    Index of ``(x, y)`` is ``y * width + x``.
    """

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.cells = bytearray(width * height)

    def index(self, x: int, y: int) -> int:
        return y * self.width + x

    def letter_at(self, x: int, y: int) -> str | None:
        code = self.cells[self.index(x, y)]
        return chr(code) if code != EMPTY else None

    def set_letter(self, x: int, y: int, letter: str) -> None:
        self.cells[self.index(x, y)] = ord(letter)

    def is_empty(self, x: int, y: int) -> bool:
        return self.cells[self.index(x, y)] == EMPTY

    def empty_count(self) -> int:
        return self.cells.count(EMPTY)


def fill_grid(grid: WorkingGrid, rng: random.Random) -> tuple[tuple[str, ...], ...]:
    """Fill every empty cell with a random A-Z letter, return immutable rows.

    Must run after all placement: placement relies on empty cells.
    """
    letters = string.ascii_uppercase
    cells = grid.cells
    for i in range(len(cells)):
        if cells[i] == EMPTY:
            cells[i] = ord(rng.choice(letters))

    w = grid.width
    return tuple(
        tuple(chr(c) for c in cells[r * w:(r + 1) * w])
        for r in range(grid.height)
    )


def solution_mask(puzzle: GeneratedPuzzle) -> list[list[bool]]:
    """``mask[y][x]`` is True where a placed (real) word sits."""
    mask = [[False] * puzzle.width for _ in range(puzzle.height)]
    for loc in puzzle.placed_words:
        for x, y in loc.cells():
            mask[y][x] = True
    return mask


def build_cell_index(
    locations: list[WordLocation] | tuple[WordLocation, ...],
) -> dict[tuple[int, int], list[str]]:
    """Map ``(x, y)`` to the words passing through that cell, in placement order."""
    index: dict[tuple[int, int], list[str]] = {}
    for loc in locations:
        for xy in loc.cells():
            index.setdefault(xy, []).append(loc.word)
    return index
