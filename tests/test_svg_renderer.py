"""Tests for svg_renderer.py."""

import os
import tempfile
import xml.etree.ElementTree as ET

import pytest

from models import GeneratedPuzzle, WordLocation
from svg_renderer import render_svg, render_puzzle_svg, render_answer_svg

NS = {"svg": "http://www.w3.org/2000/svg"}


def _make_simple_puzzle():
    """A 5x5 puzzle with CAT across the top row and CAR down the first column."""
    rows = ["CATXQ", "AZZZZ", "RZZZZ", "ZZZZZ", "ZZZZZ"]
    return GeneratedPuzzle(
        grid=tuple(tuple(r) for r in rows),
        placed_words=(
            WordLocation("CAT", 0, 0, 2, 0),
            WordLocation("CAR", 0, 0, 0, 2),
        ),
    )


@pytest.fixture
def svg_path():
    with tempfile.NamedTemporaryFile(suffix=".svg", delete=False) as f:
        path = f.name
    yield path
    os.unlink(path)


class TestRenderSvg:
    def test_creates_valid_svg(self, svg_path):
        render_svg(_make_simple_puzzle(), svg_path)
        root = ET.parse(svg_path).getroot()
        assert root.tag == "{http://www.w3.org/2000/svg}svg"

    def test_correct_dimensions(self, svg_path):
        render_svg(_make_simple_puzzle(), svg_path, cell_size=24.0)
        root = ET.parse(svg_path).getroot()
        assert root.get("width") == str(24.0 * 5)
        assert root.get("height") == str(24.0 * 5)

    def test_one_letter_per_cell(self, svg_path):
        render_svg(_make_simple_puzzle(), svg_path)
        texts = ET.parse(svg_path).findall(".//svg:text", NS)
        assert len(texts) == 25
        assert "".join(t.text for t in texts[:5]) == "CATXQ"

    def test_puzzle_has_no_shading(self, svg_path):
        render_puzzle_svg(_make_simple_puzzle(), svg_path)
        with open(svg_path, 'r') as f:
            content = f.read()
        assert 'fill="#d1d5db"' not in content

    def test_answer_shades_solution_cells(self, svg_path):
        render_answer_svg(_make_simple_puzzle(), svg_path)
        rects = ET.parse(svg_path).findall(".//svg:rect", NS)
        shaded = [r for r in rects if r.get("fill") == "#d1d5db"]
        assert len(shaded) == 5  # C, A, T, A, R

    def test_answer_bolds_solution_letters(self, svg_path):
        render_answer_svg(_make_simple_puzzle(), svg_path)
        texts = ET.parse(svg_path).findall(".//svg:text", NS)
        bold = [t.text for t in texts if t.get("font-weight") == "bold"]
        assert sorted(bold) == ["A", "A", "C", "R", "T"]

    def test_has_outer_border(self, svg_path):
        render_svg(_make_simple_puzzle(), svg_path)
        with open(svg_path, 'r') as f:
            content = f.read()
        assert 'stroke-width="1.5"' in content

    def test_non_square_grid(self, svg_path):
        puzzle = GeneratedPuzzle(grid=tuple(tuple("ABCDEFG") for _ in range(5)))
        render_svg(puzzle, svg_path, cell_size=10.0)
        root = ET.parse(svg_path).getroot()
        assert root.get("width") == "70.0"
        assert root.get("height") == "50.0"
