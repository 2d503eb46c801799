#!/usr/bin/env python3
"""CLI entry point for crossword generation.

Reads words from an XLSX workbook (or the built-in word bank), places them,
and writes PDF, XLSX, SVG, HTML and JSON versions of the puzzle. With
--answers, the solver's entries are checked and drawn as a coloured SVG.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from pathlib import Path

from grid_placer import DEFAULT_GRID_SIZE
from models import CrosswordError, Puzzle

DEFAULT_TITLE = "CRUZADINHA"


def configure_logging(level: int = logging.WARNING) -> None:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    ))
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def _build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Generate a crossword puzzle from word/clue pairs."
    )
    p.add_argument("input", nargs="?", default=None,
                   help="XLSX file with number/clue/answer columns (default: built-in word bank)")
    p.add_argument(
        "output",
        nargs="?",
        default=None,
        help="Output path whose stem names the files (default: input stem or 'crossword')",
    )
    p.add_argument("--grid-size", type=int, default=DEFAULT_GRID_SIZE,
                   help=f"Grid size NxN (default: {DEFAULT_GRID_SIZE})")
    p.add_argument("--title", default=DEFAULT_TITLE,
                   help=f'Title text (default: "{DEFAULT_TITLE}")')
    p.add_argument("--answers", type=Path, default=None,
                   help="JSON list of [row, col, letter] entries to check")
    p.add_argument("--log-level", default="WARNING",
                   help="Logging level (DEBUG, INFO, WARNING, ERROR)")
    return p


def main(argv: list[str] | None = None) -> None:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)
    configure_logging(getattr(logging, args.log_level.upper(), logging.WARNING))

    if args.grid_size < 1:
        parser.error("--grid-size must be positive")

    t0 = time.time()
    try:
        _run(args, t0)
    except CrosswordError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def _run(args, t0: float) -> None:
    from grid_placer import generate_crossword
    from word_bank import get_word_bank
    from xlsx_reader import read_clues

    if args.input is not None:
        entries = read_clues(args.input, args.grid_size)
        print(f"Read {len(entries)} valid clue entries", file=sys.stderr)
    else:
        entries = get_word_bank()
        print(f"Using built-in word bank ({len(entries)} words)", file=sys.stderr)

    if args.output:
        output_path = Path(args.output)
    elif args.input:
        output_path = Path(args.input).with_suffix(".pdf")
    else:
        output_path = Path("crossword.pdf")

    puzzle = generate_crossword(entries, grid_size=args.grid_size)
    out_dir = _output_all(puzzle, args.title, output_path)

    if args.answers is not None:
        _check_answers(puzzle, args.answers, out_dir / f"{output_path.stem}_checked.svg")

    placed = len(puzzle.placed_words)
    print(
        f"Placed {placed}/{len(entries)} words, time {time.time() - t0:.1f}s",
        file=sys.stderr,
    )
    for entry in puzzle.unplaced:
        print(f"Not placed: {entry.text}", file=sys.stderr)


def _output_all(puzzle: Puzzle, title: str, output_path: Path) -> Path:
    """Write every output format into an 'output' folder next to *output_path*."""
    from grid_builder import build_clue_lists
    from html_renderer import render_html
    from pdf_renderer import render_pdf
    from svg_renderer import render_answer_svg, render_puzzle_svg
    from xlsx_writer import write_clues_xlsx

    stem = output_path.stem
    out_dir = output_path.parent / "output"
    out_dir.mkdir(parents=True, exist_ok=True)

    across, down = build_clue_lists(puzzle)
    paths = {
        "pdf": out_dir / f"{stem}.pdf",
        "xlsx": out_dir / f"{stem}_clues.xlsx",
        "puzzle_svg": out_dir / f"{stem}_puzzle.svg",
        "answer_svg": out_dir / f"{stem}_answer.svg",
        "html": out_dir / f"{stem}.html",
        "json": out_dir / f"{stem}.json",
    }

    render_pdf(puzzle, title, str(paths["pdf"]))
    write_clues_xlsx(across, down, str(paths["xlsx"]), unplaced=puzzle.unplaced)
    render_puzzle_svg(puzzle, str(paths["puzzle_svg"]))
    render_answer_svg(puzzle, str(paths["answer_svg"]))
    render_html(puzzle, str(paths["html"]), title=title)
    paths["json"].write_text(
        json.dumps(puzzle.to_jsonable(), ensure_ascii=False, indent=2),
        encoding="utf-8",
    )

    for path in paths.values():
        print(f"Output: {path}", file=sys.stderr)
    return out_dir


def _check_answers(puzzle: Puzzle, answers_path: Path, svg_path: Path) -> None:
    from answer_checker import check_answers, load_answers
    from svg_renderer import render_checked_svg

    checks = check_answers(puzzle, load_answers(answers_path))
    render_checked_svg(puzzle, checks, str(svg_path))
    print(f"Output: {svg_path}", file=sys.stderr)


if __name__ == "__main__":
    main()
