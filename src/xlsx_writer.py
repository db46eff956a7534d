"""Write a generated puzzle's answers to an XLSX file."""

from __future__ import annotations

import openpyxl
from openpyxl.styles import Font, PatternFill

from grid_builder import solution_mask
from models import GeneratedPuzzle


def write_answers_xlsx(
    puzzle: GeneratedPuzzle,
    output_path: str,
    unplaced: list[str] | None = None,
) -> None:
    """Write placed words and the letter grid to an Excel workbook.

    Sheet "Words" lists each word with its start, end and direction.
    Sheet "Grid" holds one letter per cell, answer cells shaded.
    If *unplaced* is provided, a third sheet lists words that didn't fit.
    """
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Words"

    header_font = Font(bold=True, size=12)
    for col, label in enumerate(("Word", "Start", "End", "Direction"), start=1):
        ws.cell(row=1, column=col, value=label).font = header_font

    for row, loc in enumerate(puzzle.placed_words, start=2):
        ws.cell(row=row, column=1, value=loc.word)
        ws.cell(row=row, column=2, value=f"({loc.start_x}, {loc.start_y})")
        ws.cell(row=row, column=3, value=f"({loc.end_x}, {loc.end_y})")
        ws.cell(row=row, column=4, value=loc.direction.name)

    ws.column_dimensions["A"].width = 24
    ws.column_dimensions["B"].width = 12
    ws.column_dimensions["C"].width = 12
    ws.column_dimensions["D"].width = 14

    # Letter grid
    grid_ws = wb.create_sheet(title="Grid")
    shade = PatternFill(start_color="D1D5DB", end_color="D1D5DB", fill_type="solid")
    mask = solution_mask(puzzle)
    for r, letters in enumerate(puzzle.grid):
        for c, letter in enumerate(letters):
            cell = grid_ws.cell(row=r + 1, column=c + 1, value=letter)
            if mask[r][c]:
                cell.fill = shade
                cell.font = Font(bold=True)

    # Unplaced words sheet
    if unplaced:
        ws2 = wb.create_sheet(title="Not placed")
        ws2.cell(row=1, column=1, value="Word").font = header_font
        for i, word in enumerate(unplaced, start=2):
            ws2.cell(row=i, column=1, value=word)
        ws2.column_dimensions["A"].width = 24

    wb.save(output_path)
