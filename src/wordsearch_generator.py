#!/usr/bin/env python3
"""CLI entry point for word search generation.

Words come from the command line or a word-list file (.txt, .csv, .xlsx).
The grid is printed to stdout; with --output a PDF, puzzle/answer SVGs and
an answer XLSX are written as well.
"""

from __future__ import annotations

import argparse
import random
import sys
import time
from pathlib import Path

from models import GeneratedPuzzle, WordSearchError


def _build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Generate a word search puzzle."
    )
    p.add_argument("words", nargs="*",
                   help="Words to hide (commas also separate words)")
    p.add_argument("--words-file", default=None,
                   help="Read words from a .txt/.csv/.xlsx file instead")
    p.add_argument("--width", type=int, default=15,
                   help="Grid width (default: 15)")
    p.add_argument("--height", type=int, default=15,
                   help="Grid height (default: 15)")
    p.add_argument("--no-backwards", action="store_true",
                   help="Only place words left-to-right / top-to-bottom")
    p.add_argument("--no-diagonals", action="store_true",
                   help="Only place words horizontally and vertically")
    p.add_argument("--difficulty", type=int, default=5,
                   help="0-10, controls how many decoy words are added (default: 5)")
    p.add_argument("--seed", type=int, default=None,
                   help="Random seed (default: random)")
    p.add_argument("--title", default="WORD SEARCH",
                   help='Title text (default: "WORD SEARCH")')
    p.add_argument("--output", default=None,
                   help="Output PDF path; SVG and XLSX files go next to it")
    p.add_argument("--show-distractors", action="store_true",
                   help="List the decoy words that were placed")
    return p


def main(argv: list[str] | None = None) -> None:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    t0 = time.time()

    try:
        _run(args, parser, t0)
    except WordSearchError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def _run(args, parser: argparse.ArgumentParser, t0: float) -> None:
    from config_validator import find_oversized_words, validate_config
    from puzzle_generator import generate, unplaced_words
    from wordlist_reader import parse_word_list, read_words

    if args.words_file:
        words = read_words(args.words_file)
    else:
        words = parse_word_list("\n".join(args.words))
    if not words:
        parser.error("no words given (pass words or --words-file)")

    config = validate_config({
        "width": args.width,
        "height": args.height,
        "words": words,
        "allow_backwards": not args.no_backwards,
        "allow_diagonals": not args.no_diagonals,
        "difficulty": args.difficulty,
    })

    oversized = find_oversized_words(config.words, config.width, config.height)
    if oversized:
        print(
            f"Warning: {len(oversized)} word(s) too long for the "
            f"{config.width}x{config.height} grid: {', '.join(oversized)}",
            file=sys.stderr,
        )

    if args.seed is not None:
        rng = random.Random(args.seed)
        print(f"Generating {config.width}x{config.height} word search (seed={args.seed})...",
              file=sys.stderr)
    else:
        rng = random.SystemRandom()
        print(f"Generating {config.width}x{config.height} word search...", file=sys.stderr)

    puzzle = generate(config, rng)
    unplaced = unplaced_words(config, puzzle)

    print(_format_grid(puzzle))
    print()
    print("Words: " + ", ".join(sorted(loc.word for loc in puzzle.placed_words)))
    if args.show_distractors:
        print("Distractors: " + ", ".join(loc.word for loc in puzzle.distractors))

    if args.output:
        _output_all(puzzle, args.title, args.output, unplaced=unplaced)

    if unplaced:
        print(
            f"Warning: {len(unplaced)} word(s) could not be placed "
            f"({', '.join(unplaced)}); try enlarging the grid",
            file=sys.stderr,
        )

    elapsed = time.time() - t0
    print(
        f"Placed {len(puzzle.placed_words)}/{len(config.words)} words, "
        f"{len(puzzle.distractors)} distractors, "
        f"time {elapsed:.2f}s",
        file=sys.stderr,
    )


def _format_grid(puzzle: GeneratedPuzzle) -> str:
    return "\n".join(" ".join(row) for row in puzzle.grid)


def _output_all(
    puzzle: GeneratedPuzzle,
    title: str,
    output_path: str,
    unplaced: list[str] | None = None,
) -> None:
    """Generate all output files in an 'output' folder: PDF, XLSX, puzzle SVG, answer SVG."""
    from pdf_renderer import render_pdf
    from xlsx_writer import write_answers_xlsx
    from svg_renderer import render_puzzle_svg, render_answer_svg

    stem = Path(output_path).stem
    out_dir = Path(output_path).parent / "output"
    out_dir.mkdir(exist_ok=True)

    pdf_path = str(out_dir / f"{stem}.pdf")
    xlsx_path = str(out_dir / f"{stem}_answers.xlsx")
    puzzle_svg_path = str(out_dir / f"{stem}_puzzle.svg")
    answer_svg_path = str(out_dir / f"{stem}_answer.svg")

    render_pdf(puzzle, title, pdf_path)
    write_answers_xlsx(puzzle, xlsx_path, unplaced=unplaced)
    render_puzzle_svg(puzzle, puzzle_svg_path)
    render_answer_svg(puzzle, answer_svg_path)

    print(f"Output: {pdf_path}", file=sys.stderr)
    print(f"Output: {xlsx_path}", file=sys.stderr)
    print(f"Output: {puzzle_svg_path}", file=sys.stderr)
    print(f"Output: {answer_svg_path}", file=sys.stderr)


if __name__ == "__main__":
    main()
