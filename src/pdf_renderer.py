"""Render a word search puzzle to a printable PDF using ReportLab.

Layout: title banner at top, grid centered below it, the word list in
columns under the grid. Page 2 carries the answer key.
"""

from __future__ import annotations

from dataclasses import dataclass

from reportlab.lib.pagesizes import letter
from reportlab.pdfbase.pdfmetrics import stringWidth

from grid_builder import solution_mask
from models import GeneratedPuzzle

PAGE_W, PAGE_H = letter  # 612 x 792
MARGIN = 36
MAX_CELL = 28.0
MIN_CELL = 9.0


@dataclass
class LayoutParams:
    """All computed layout measurements."""

    page_w: float = PAGE_W
    page_h: float = PAGE_H
    margin: float = MARGIN
    usable_w: float = PAGE_W - 2 * MARGIN
    usable_h: float = PAGE_H - 2 * MARGIN

    # Grid
    grid_w: int = 15
    grid_h: int = 15
    cell_size: float = 24.0
    grid_x: float = 0.0
    grid_y: float = 0.0  # top of grid in page coords

    # Title banner
    banner_h: float = 28.0
    banner_y: float = 0.0

    # Word list
    word_font_size: float = 11.0
    word_leading: float = 14.0
    word_cols: int = 4
    word_gutter: float = 12.0
    word_col_w: float = 0.0
    word_zone_y: float = 0.0  # top of word list

    title: str = "WORD SEARCH"


def render_pdf(
    puzzle: GeneratedPuzzle,
    title: str,
    output_path: str,
) -> None:
    """Compute layout, fit the word list, draw page 1 (puzzle) + page 2 (answer key)."""
    from reportlab.pdfgen.canvas import Canvas

    words = sorted(loc.word for loc in puzzle.placed_words)
    layout = _compute_layout(puzzle.width, puzzle.height, words, title)
    layout = _adaptive_fit(words, layout)

    c = Canvas(output_path, pagesize=letter)

    # --- Page 1: Puzzle ---
    _draw_title_banner(c, layout)
    _draw_grid(c, puzzle, layout, mask=None)
    _draw_word_list(c, words, layout)
    c.showPage()

    # --- Page 2: Answer Key ---
    _draw_answer_key_page(c, puzzle, layout)
    c.showPage()

    c.save()


def _compute_layout(
    grid_w: int,
    grid_h: int,
    words: list[str],
    title: str,
) -> LayoutParams:
    """Calculate all positions and sizes."""
    lp = LayoutParams(grid_w=grid_w, grid_h=grid_h, title=title)

    # Grid takes the usable width, and at most two thirds of the usable height
    lp.cell_size = min(
        MAX_CELL,
        lp.usable_w / grid_w,
        (lp.usable_h - lp.banner_h) * 2 / 3 / grid_h,
    )
    lp.cell_size = max(MIN_CELL, lp.cell_size)

    if len(words) > 40:
        lp.word_cols = 5

    _recompute_positions(lp)
    return lp


def _recompute_positions(lp: LayoutParams) -> None:
    """(Re)calculate derived positions from current params."""
    lp.banner_y = lp.page_h - lp.margin - lp.banner_h

    grid_top_y = lp.banner_y - 12
    lp.grid_x = (lp.page_w - lp.cell_size * lp.grid_w) / 2
    lp.grid_y = grid_top_y

    grid_bottom_y = grid_top_y - lp.cell_size * lp.grid_h
    lp.word_zone_y = grid_bottom_y - 18

    lp.word_col_w = _col_width(lp, lp.word_cols)


def _adaptive_fit(words: list[str], layout: LayoutParams) -> LayoutParams:
    """Step through adjustments until the word list fits on page 1."""
    for _ in range(24):
        if _content_fits(words, layout):
            return layout

        # Step 1: reduce font
        if layout.word_font_size > 7.0:
            layout.word_font_size -= 0.5
            layout.word_leading = layout.word_font_size + 3
            continue

        # Step 2: too wide, drop a column
        if not _width_fits(words, layout) and layout.word_cols > 1:
            layout.word_cols -= 1
            _recompute_positions(layout)
            continue

        # Step 3: too tall, add a column if the words still fit across
        if (not _height_fits(words, layout) and layout.word_cols < 6
                and _widest_word(words, layout) <= _col_width(layout, layout.word_cols + 1)):
            layout.word_cols += 1
            _recompute_positions(layout)
            continue

        # Step 4: reduce cell size
        if layout.cell_size > MIN_CELL:
            layout.cell_size = max(MIN_CELL, layout.cell_size - 1)
            _recompute_positions(layout)
            continue

        break

    return layout


def _content_fits(words: list[str], layout: LayoutParams) -> bool:
    """Check the longest column and the widest word against the word zone."""
    return _height_fits(words, layout) and _width_fits(words, layout)


def _height_fits(words: list[str], layout: LayoutParams) -> bool:
    rows = -(-len(words) // layout.word_cols)
    return rows * layout.word_leading <= layout.word_zone_y - layout.margin


def _width_fits(words: list[str], layout: LayoutParams) -> bool:
    return _widest_word(words, layout) <= layout.word_col_w


def _widest_word(words: list[str], layout: LayoutParams) -> float:
    return max(
        (stringWidth(w, "Helvetica", layout.word_font_size) for w in words),
        default=0.0,
    )


def _col_width(layout: LayoutParams, cols: int) -> float:
    return (layout.usable_w - layout.word_gutter * (cols - 1)) / cols


# ─── Drawing functions ──────────────────────────────────────────────────────


def _draw_title_banner(c, layout: LayoutParams) -> None:
    """Black rect + white centered bold text."""
    x = layout.margin
    y = layout.banner_y
    w = layout.usable_w
    h = layout.banner_h

    c.setFillColorRGB(0, 0, 0)
    c.rect(x, y, w, h, fill=1, stroke=0)

    c.setFillColorRGB(1, 1, 1)
    c.setFont("Helvetica-Bold", 16)
    text_w = stringWidth(layout.title, "Helvetica-Bold", 16)
    tx = x + (w - text_w) / 2
    ty = y + (h - 16) / 2 + 2
    c.drawString(tx, ty, layout.title)


def _draw_grid(c, puzzle: GeneratedPuzzle, layout: LayoutParams,
               mask: list[list[bool]] | None) -> None:
    """Draw the letter grid; with *mask*, shade answer cells and grey the rest."""
    x0 = layout.grid_x
    y0 = layout.grid_y
    cs = layout.cell_size
    font_size = cs * 0.6

    for r in range(layout.grid_h):
        for col in range(layout.grid_w):
            cx = x0 + col * cs
            cy = y0 - (r + 1) * cs
            in_answer = mask is not None and mask[r][col]

            if in_answer:
                c.setFillColorRGB(0.82, 0.84, 0.86)
                c.rect(cx, cy, cs, cs, fill=1, stroke=0)

            if mask is not None and not in_answer:
                c.setFillColorRGB(0.8, 0.8, 0.8)
                font = "Helvetica"
            else:
                c.setFillColorRGB(0, 0, 0)
                font = "Helvetica-Bold" if in_answer else "Helvetica"

            letter_ch = puzzle.grid[r][col]
            c.setFont(font, font_size)
            lw = stringWidth(letter_ch, font, font_size)
            c.drawString(cx + (cs - lw) / 2, cy + cs * 0.5 - font_size * 0.35, letter_ch)

    # Outer border
    c.setStrokeColorRGB(0, 0, 0)
    c.setLineWidth(1.5)
    c.rect(x0, y0 - layout.grid_h * cs, layout.grid_w * cs, layout.grid_h * cs,
           fill=0, stroke=1)


def _draw_word_list(c, words: list[str], layout: LayoutParams) -> None:
    """Fill columns top to bottom, left to right."""
    if not words:
        return
    rows = -(-len(words) // layout.word_cols)
    c.setFillColorRGB(0, 0, 0)
    c.setFont("Helvetica", layout.word_font_size)
    for i, word in enumerate(words):
        col, row = divmod(i, rows)
        x = layout.margin + col * (layout.word_col_w + layout.word_gutter)
        y = layout.word_zone_y - (row + 1) * layout.word_leading
        c.drawString(x, y, word)


def _draw_answer_key_page(c, puzzle: GeneratedPuzzle, layout: LayoutParams) -> None:
    """Draw the answer key page: banner + shaded grid centered on page."""
    ak_layout = LayoutParams(
        grid_w=layout.grid_w,
        grid_h=layout.grid_h,
        cell_size=layout.cell_size,
        title="ANSWER KEY",
    )
    _recompute_positions(ak_layout)

    _draw_title_banner(c, ak_layout)
    _draw_grid(c, puzzle, ak_layout, mask=solution_mask(puzzle))
