"""Read word lists from free text, text files or an XLSX workbook."""

from __future__ import annotations

import re
import sys
import zipfile
from pathlib import Path

import openpyxl
from openpyxl.utils.exceptions import InvalidFileException

from models import WordSearchError

MAX_INPUT_CHARS = 2500

_SEPARATORS = re.compile(r"[\n,]+")
_HEADER_NAMES = {"word", "words"}


def parse_word_list(text: str) -> list[str]:
    """Split on commas and newlines, trim, drop empty entries.

    Input beyond MAX_INPUT_CHARS is ignored.
    """
    if len(text) > MAX_INPUT_CHARS:
        print(
            f"Warning: word list truncated to {MAX_INPUT_CHARS} characters",
            file=sys.stderr,
        )
        text = text[:MAX_INPUT_CHARS]
    return [w.strip() for w in _SEPARATORS.split(text) if w.strip()]


def read_words(path: str | Path) -> list[str]:
    """Load words from *path*: ``.xlsx`` via openpyxl, anything else as text."""
    path = Path(path)
    if not path.exists():
        raise WordSearchError(f"File not found: {path}")

    try:
        if path.suffix.lower() == ".xlsx":
            words = _read_xlsx(path)
        else:
            words = parse_word_list(path.read_text(encoding="utf-8"))
    except (UnicodeDecodeError, InvalidFileException, zipfile.BadZipFile) as e:
        raise WordSearchError(f"Cannot read {path}: {e}") from e

    if not words:
        raise WordSearchError(f"No words found in {path}")
    return words


def _read_xlsx(path: Path) -> list[str]:
    """First column of the active sheet; a leading 'Word' header is skipped."""
    wb = openpyxl.load_workbook(path, read_only=True, data_only=True)
    ws = wb.active

    words: list[str] = []
    for i, row in enumerate(ws.iter_rows(min_col=1, max_col=1, values_only=True)):
        value = row[0]
        if value is None:
            continue
        text = str(value).strip()
        if i == 0 and text.lower() in _HEADER_NAMES:
            continue
        if text:
            words.append(text)

    wb.close()
    return words
