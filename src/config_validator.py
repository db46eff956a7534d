"""Validate and normalize generator configurations."""

from __future__ import annotations

import re
from collections.abc import Mapping

from models import GeneratorConfig, ValidationError, ValidationIssue

MIN_GRID = 5
MAX_GRID = 50
MAX_WORD_LEN = 20
MAX_WORDS = 100
MIN_DIFFICULTY = 0
MAX_DIFFICULTY = 10

_NON_LETTERS = re.compile(r"[^A-Z]")

# Alternate spellings accepted for keys, as sent by the web form.
_KEY_ALIASES = {
    "allowBackwards": "allow_backwards",
    "allowDiagonals": "allow_diagonals",
}


def clean_word(word: str) -> str:
    """Uppercase, strip everything except A-Z."""
    return _NON_LETTERS.sub("", word.upper())


def validate_config(raw: Mapping | GeneratorConfig) -> GeneratorConfig:
    """Check every constraint, return a normalized config or raise ValidationError.

    All violations are collected so the caller can report a complete list.
    Words are cleaned and de-duplicated (first occurrence wins).
    """
    if isinstance(raw, GeneratorConfig):
        raw = {
            "width": raw.width,
            "height": raw.height,
            "words": list(raw.words),
            "allow_backwards": raw.allow_backwards,
            "allow_diagonals": raw.allow_diagonals,
            "difficulty": raw.difficulty,
        }
    if not isinstance(raw, Mapping):
        raise ValidationError([ValidationIssue("config", "must be a mapping")])

    values = {_KEY_ALIASES.get(k, k): v for k, v in raw.items()}
    issues: list[ValidationIssue] = []

    width = _check_int(values, "width", MIN_GRID, MAX_GRID, issues)
    height = _check_int(values, "height", MIN_GRID, MAX_GRID, issues)
    words = _check_words(values, issues)
    allow_backwards = _check_bool(values, "allow_backwards", issues)
    allow_diagonals = _check_bool(values, "allow_diagonals", issues)
    difficulty = _check_int(values, "difficulty", MIN_DIFFICULTY, MAX_DIFFICULTY, issues)

    if issues:
        raise ValidationError(issues)

    return GeneratorConfig(
        width=width,
        height=height,
        words=words,
        allow_backwards=allow_backwards,
        allow_diagonals=allow_diagonals,
        difficulty=difficulty,
    )


def find_oversized_words(words, width: int, height: int) -> list[str]:
    """Cleaned words that cannot fit in any direction of a width x height grid."""
    max_len = max(width, height)
    return [w for w in (clean_word(w) for w in words) if len(w) > max_len]


def _check_int(values: dict, name: str, lo: int, hi: int,
               issues: list[ValidationIssue]) -> int:
    if name not in values:
        issues.append(ValidationIssue(name, "is required"))
        return 0
    value = values[name]
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        issues.append(ValidationIssue(name, "must be an integer"))
        return 0
    if not lo <= value <= hi:
        issues.append(ValidationIssue(name, f"must be between {lo} and {hi}"))
    return value


def _check_bool(values: dict, name: str, issues: list[ValidationIssue]) -> bool:
    if name not in values:
        issues.append(ValidationIssue(name, "is required"))
        return False
    value = values[name]
    if not isinstance(value, bool):
        issues.append(ValidationIssue(name, "must be a boolean"))
        return False
    return value


def _check_words(values: dict, issues: list[ValidationIssue]) -> tuple[str, ...]:
    if "words" not in values:
        issues.append(ValidationIssue("words", "is required"))
        return ()
    words = values["words"]
    if isinstance(words, str) or not isinstance(words, (list, tuple)):
        issues.append(ValidationIssue("words", "must be a list of strings"))
        return ()
    if not 1 <= len(words) <= MAX_WORDS:
        issues.append(ValidationIssue("words", f"must contain between 1 and {MAX_WORDS} words"))

    cleaned: list[str] = []
    seen: set[str] = set()
    for i, word in enumerate(words):
        field_name = f"words[{i}]"
        if not isinstance(word, str):
            issues.append(ValidationIssue(field_name, "must be a string"))
            continue
        clean = clean_word(word)
        if not clean:
            issues.append(ValidationIssue(field_name, "must contain at least one letter"))
            continue
        if len(clean) > MAX_WORD_LEN:
            issues.append(ValidationIssue(
                field_name, f"must be at most {MAX_WORD_LEN} letters long"))
            continue
        if clean in seen:
            continue
        seen.add(clean)
        cleaned.append(clean)
    return tuple(cleaned)
