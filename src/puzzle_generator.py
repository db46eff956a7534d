"""Generate a word search puzzle from a configuration."""

from __future__ import annotations

import random
from collections.abc import Mapping

from config_validator import validate_config
from distractors import place_distractors
from grid_builder import WorkingGrid, fill_grid
from models import GeneratedPuzzle, GeneratorConfig
from word_placer import CandidateCache, enumerate_directions, place_words


def generate(
    config: Mapping | GeneratorConfig,
    rng: random.Random | None = None,
) -> GeneratedPuzzle:
    """Validate *config*, place words then distractors, fill the rest.

    *rng* supplies every random draw; pass ``random.Random(seed)`` for
    reproducible output. Defaults to ``random.SystemRandom()``.
    Raises ValidationError; words that do not fit are simply left out.
    """
    cfg = validate_config(config)
    if rng is None:
        rng = random.SystemRandom()

    grid = WorkingGrid(cfg.width, cfg.height)
    directions = enumerate_directions(cfg.allow_diagonals, cfg.allow_backwards)
    cache = CandidateCache(directions, cfg.width, cfg.height)

    placed = place_words(cfg.words, grid, cache, rng)
    decoys = place_distractors(cfg.words, cfg.difficulty, grid, cache, rng)
    letters = fill_grid(grid, rng)

    return GeneratedPuzzle(
        grid=letters,
        placed_words=tuple(placed),
        distractors=tuple(decoys),
    )


def unplaced_words(config: GeneratorConfig, puzzle: GeneratedPuzzle) -> list[str]:
    """Words of a validated *config* missing from ``puzzle.placed_words``."""
    placed = {loc.word for loc in puzzle.placed_words}
    return [w for w in config.words if w not in placed]
