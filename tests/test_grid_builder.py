"""Tests for grid_builder.py."""

import random

from grid_builder import WorkingGrid, build_cell_index, fill_grid, solution_mask
from models import GeneratedPuzzle, WordLocation


class TestWorkingGrid:
    def test_starts_empty(self):
        grid = WorkingGrid(6, 4)
        assert len(grid.cells) == 24
        assert grid.empty_count() == 24
        assert grid.letter_at(5, 3) is None

    def test_row_major_index(self):
        grid = WorkingGrid(6, 4)
        assert grid.index(0, 0) == 0
        assert grid.index(5, 0) == 5
        assert grid.index(0, 1) == 6
        assert grid.index(5, 3) == 23

    def test_set_letter(self):
        grid = WorkingGrid(5, 5)
        grid.set_letter(2, 3, "Q")
        assert grid.letter_at(2, 3) == "Q"
        assert not grid.is_empty(2, 3)
        assert grid.is_empty(3, 2)


class TestFillGrid:
    def test_shape_and_letters(self):
        grid = WorkingGrid(7, 5)
        rows = fill_grid(grid, random.Random(1))
        assert len(rows) == 5
        assert all(len(row) == 7 for row in rows)
        assert all("A" <= ch <= "Z" for row in rows for ch in row)
        assert grid.empty_count() == 0

    def test_keeps_placed_letters(self):
        grid = WorkingGrid(5, 5)
        for x, ch in enumerate("HELLO"):
            grid.set_letter(x, 2, ch)
        rows = fill_grid(grid, random.Random(1))
        assert "".join(rows[2]) == "HELLO"

    def test_immutable_rows(self):
        rows = fill_grid(WorkingGrid(5, 5), random.Random(1))
        assert isinstance(rows, tuple)
        assert isinstance(rows[0], tuple)


def _puzzle():
    grid = tuple(tuple("ABCDE") for _ in range(5))
    placed = (WordLocation("ABC", 0, 0, 2, 0), WordLocation("AAA", 0, 0, 0, 2))
    decoys = (WordLocation("EEE", 4, 0, 4, 2),)
    return GeneratedPuzzle(grid=grid, placed_words=placed, distractors=decoys)


class TestSolutionMask:
    def test_marks_placed_words_only(self):
        mask = solution_mask(_puzzle())
        assert mask[0][:3] == [True, True, True]
        assert mask[1][0] and mask[2][0]
        assert not mask[0][4]  # distractor cell
        assert sum(sum(row) for row in mask) == 5


class TestBuildCellIndex:
    def test_shared_cell(self):
        index = build_cell_index(_puzzle().placed_words)
        assert index[(0, 0)] == ["ABC", "AAA"]
        assert index[(2, 0)] == ["ABC"]
        assert (4, 4) not in index
