"""Word placement: direction enumeration, start-range pre-computation, random fitting."""

from __future__ import annotations

import random
from collections import namedtuple

from grid_builder import EMPTY, WorkingGrid
from models import Direction, WordLocation

MAX_ATTEMPTS = 100

# Closed range of valid start coordinates for one direction and word length.
Candidate = namedtuple("Candidate", ["direction", "x_min", "x_max", "y_min", "y_max"])

_BASE_DIRECTIONS = (Direction.RIGHT, Direction.DOWN)
_DIAGONAL_DIRECTIONS = (Direction.DOWN_RIGHT, Direction.UP_RIGHT)


def enumerate_directions(allow_diagonals: bool, allow_backwards: bool) -> list[Direction]:
    """Usable step vectors, in a stable order.

    RIGHT, DOWN, then DOWN_RIGHT, UP_RIGHT with diagonals; backwards appends
    the negation of every vector collected so far.
    """
    directions = list(_BASE_DIRECTIONS)
    if allow_diagonals:
        directions.extend(_DIAGONAL_DIRECTIONS)
    if allow_backwards:
        directions.extend([d.reversed() for d in directions])
    return directions


def compute_candidates(
    length: int, directions: list[Direction], width: int, height: int,
) -> list[Candidate]:
    """Start ranges keeping a *length*-letter word inside the grid, per direction.

    Directions with an empty range are left out.
    """
    candidates: list[Candidate] = []
    span = length - 1
    for d in directions:
        x_min, x_max = _axis_range(d.dx, span, width)
        y_min, y_max = _axis_range(d.dy, span, height)
        if x_min > x_max or y_min > y_max:
            continue
        candidates.append(Candidate(d, x_min, x_max, y_min, y_max))
    return candidates


def _axis_range(step: int, span: int, size: int) -> tuple[int, int]:
    if step > 0:
        return 0, size - 1 - span
    if step < 0:
        return span, size - 1
    return 0, size - 1


class CandidateCache:
    """Per-call cache of candidates keyed by word length."""

    def __init__(self, directions: list[Direction], width: int, height: int):
        self.directions = directions
        self.width = width
        self.height = height
        self._by_length: dict[int, list[Candidate]] = {}

    def get(self, length: int) -> list[Candidate]:
        if length not in self._by_length:
            self._by_length[length] = compute_candidates(
                length, self.directions, self.width, self.height)
        return self._by_length[length]


def place_word(
    word: str,
    grid: WorkingGrid,
    candidates: list[Candidate],
    rng: random.Random,
    max_attempts: int = MAX_ATTEMPTS,
) -> WordLocation | None:
    """Try to fit *word* (cleaned) onto *grid*.

    Returns the new location, or None when no direction fits or every
    attempt collides. The grid is only written on success.
    """
    if not word or not candidates:
        return None

    codes = word.encode("ascii")
    for _ in range(max_attempts):
        cand = rng.choice(candidates)
        x = rng.randint(cand.x_min, cand.x_max)
        y = rng.randint(cand.y_min, cand.y_max)
        if _fits(codes, grid, x, y, cand.direction):
            _write(codes, grid, x, y, cand.direction)
            span = len(word) - 1
            return WordLocation(
                word=word,
                start_x=x,
                start_y=y,
                end_x=x + span * cand.direction.dx,
                end_y=y + span * cand.direction.dy,
            )
    return None


def _fits(codes: bytes, grid: WorkingGrid, x: int, y: int, direction: Direction) -> bool:
    """Each cell must be empty or already hold the same letter."""
    cells = grid.cells
    idx = grid.index(x, y)
    stride = direction.dy * grid.width + direction.dx
    for code in codes:
        existing = cells[idx]
        if existing != EMPTY and existing != code:
            return False
        idx += stride
    return True


def _write(codes: bytes, grid: WorkingGrid, x: int, y: int, direction: Direction) -> None:
    cells = grid.cells
    idx = grid.index(x, y)
    stride = direction.dy * grid.width + direction.dx
    for code in codes:
        cells[idx] = code
        idx += stride


def place_words(
    words: tuple[str, ...] | list[str],
    grid: WorkingGrid,
    cache: CandidateCache,
    rng: random.Random,
) -> list[WordLocation]:
    """Place cleaned words longest first; words that do not fit are skipped."""
    placed: list[WordLocation] = []
    for word in sorted(words, key=len, reverse=True):
        loc = place_word(word, grid, cache.get(len(word)), rng)
        if loc is not None:
            placed.append(loc)
    return placed
