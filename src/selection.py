"""Geometry of a dragged selection line and matching it against placed words."""

from __future__ import annotations

from models import WordLocation

Point = tuple[int, int]


def selection_cells(start: Point, end: Point) -> list[Point]:
    """Cells covered by a straight line from *start* to *end*.

    Empty when the line is neither horizontal, vertical nor 45-degree diagonal.
    """
    dx = end[0] - start[0]
    dy = end[1] - start[1]
    if dx != 0 and dy != 0 and abs(dx) != abs(dy):
        return []
    steps = max(abs(dx), abs(dy))
    if steps == 0:
        return [start]
    sx, sy = dx // steps, dy // steps
    return [(start[0] + i * sx, start[1] + i * sy) for i in range(steps + 1)]


def match_selection(
    placed_words,
    start: Point,
    end: Point,
    found=(),
) -> WordLocation | None:
    """First placed word, not yet in *found*, whose endpoints match the line either way."""
    for loc in placed_words:
        if loc.word in found:
            continue
        first = (loc.start_x, loc.start_y)
        last = (loc.end_x, loc.end_y)
        if (first, last) == (start, end) or (first, last) == (end, start):
            return loc
    return None
