"""Decoy words: one-letter mutations of real words placed alongside them."""

from __future__ import annotations

import random
import string

from grid_builder import WorkingGrid
from models import WordLocation
from word_placer import CandidateCache, place_word

MIN_SOURCE_LEN = 3
MAX_REDRAWS = 25


def distractor_count(word_count: int, difficulty: int) -> int:
    """ceil(word_count * difficulty / 3)."""
    return -(-word_count * difficulty // 3)


def mutate_word(source: str, rng: random.Random) -> str:
    """Replace one random letter of *source* with a different random letter."""
    i = rng.randrange(len(source))
    original = source[i]
    replacement = rng.choice([c for c in string.ascii_uppercase if c != original])
    return source[:i] + replacement + source[i + 1:]


def place_distractors(
    words: tuple[str, ...] | list[str],
    difficulty: int,
    grid: WorkingGrid,
    cache: CandidateCache,
    rng: random.Random,
) -> list[WordLocation]:
    """Attempt ``distractor_count`` decoys; those that do not fit are dropped."""
    sources = [w for w in words if len(w) >= MIN_SOURCE_LEN]
    if not sources:
        return []

    placed: list[WordLocation] = []
    real = set(words)
    for _ in range(distractor_count(len(words), difficulty)):
        decoy = _draw_decoy(rng.choice(sources), real, rng)
        if decoy is None:
            continue
        loc = place_word(decoy, grid, cache.get(len(decoy)), rng)
        if loc is not None:
            placed.append(loc)
    return placed


def _draw_decoy(source: str, real: set[str], rng: random.Random) -> str | None:
    """Mutate *source* until the result is not itself a real word."""
    for _ in range(MAX_REDRAWS):
        decoy = mutate_word(source, rng)
        if decoy not in real:
            return decoy
    return None
