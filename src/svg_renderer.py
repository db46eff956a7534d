"""Render a word search grid as standalone SVG."""

from __future__ import annotations

from grid_builder import solution_mask
from models import GeneratedPuzzle


def render_svg(
    puzzle: GeneratedPuzzle,
    output_path: str,
    show_answers: bool = False,
    cell_size: float | None = None,
) -> None:
    """Write the letter grid to an SVG file.

    With *show_answers* the cells of placed words are shaded and every
    other letter is drawn in light grey.
    """
    width, height = puzzle.width, puzzle.height
    if cell_size is None:
        cell_size = _default_cell_size(max(width, height))

    letter_font = cell_size * 0.6
    grid_w = cell_size * width
    grid_h = cell_size * height
    mask = solution_mask(puzzle) if show_answers else None

    parts: list[str] = []
    parts.append(
        f'<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{grid_w}" height="{grid_h}" '
        f'viewBox="0 0 {grid_w} {grid_h}">\n'
    )

    for r in range(height):
        for c in range(width):
            x = c * cell_size
            y = r * cell_size
            in_answer = mask is not None and mask[r][c]
            fill = "#d1d5db" if in_answer else "white"

            parts.append(
                f'  <rect x="{x}" y="{y}" width="{cell_size}" '
                f'height="{cell_size}" fill="{fill}" '
                f'stroke="#9ca3af" stroke-width="0.5"/>\n'
            )

            text_fill = "#d1d5db" if mask is not None and not in_answer else "black"
            weight = ' font-weight="bold"' if in_answer else ""
            cx = x + cell_size / 2
            cy = y + cell_size / 2
            parts.append(
                f'  <text x="{cx}" y="{cy}" '
                f'text-anchor="middle" dominant-baseline="central" '
                f'font-family="Helvetica, Arial, sans-serif"{weight} '
                f'font-size="{letter_font}" '
                f'fill="{text_fill}">{puzzle.grid[r][c]}</text>\n'
            )

    # Outer border
    parts.append(
        f'  <rect x="0" y="0" width="{grid_w}" height="{grid_h}" '
        f'fill="none" stroke="black" stroke-width="1.5"/>\n'
    )
    parts.append('</svg>\n')

    with open(output_path, 'w', encoding='utf-8') as f:
        f.writelines(parts)


def render_puzzle_svg(puzzle: GeneratedPuzzle, output_path: str) -> None:
    """Render the puzzle grid (no highlighting) to SVG."""
    render_svg(puzzle, output_path, show_answers=False)


def render_answer_svg(puzzle: GeneratedPuzzle, output_path: str) -> None:
    """Render the answer key (placed words shaded) to SVG."""
    render_svg(puzzle, output_path, show_answers=True)


def _default_cell_size(grid_size: int) -> float:
    if grid_size <= 15:
        return 28.0
    elif grid_size <= 25:
        return 22.0
    else:
        return 16.0
