"""Compare a solver's entries with the solved grid, one cell at a time."""

from __future__ import annotations

import json
from pathlib import Path

from models import CellCheck, CrosswordError, Puzzle


def check_cell(puzzle: Puzzle, row: int, col: int, entered: str) -> CellCheck:
    """Case-insensitive comparison of *entered* with the letter at (row, col)."""
    expected = puzzle.expected_letter(row, col)
    if expected is None:
        raise CrosswordError(f"No letter expected at ({row},{col})")
    entered = entered or ""
    return CellCheck(
        row=row,
        col=col,
        entered=entered,
        expected=expected,
        correct=entered.upper() == expected,
    )


def check_answers(
    puzzle: Puzzle, answers: dict[tuple[int, int], str]
) -> list[CellCheck]:
    """Check every occupied cell in row-major order.

    Cells missing from *answers* count as blank, and blank is never correct.
    """
    results: list[CellCheck] = []
    for r in range(puzzle.size):
        for c in range(puzzle.size):
            if puzzle.expected_letter(r, c) is None:
                continue
            results.append(check_cell(puzzle, r, c, answers.get((r, c), "")))
    return results


def load_answers(path: str | Path) -> dict[tuple[int, int], str]:
    """Read solver entries from a JSON list of ``[row, col, value]`` triples."""
    path = Path(path)
    if not path.exists():
        raise CrosswordError(f"File not found: {path}")
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise CrosswordError(f"Invalid answers file {path}: {e}") from e

    if not isinstance(raw, list):
        raise CrosswordError(f"Invalid answers file {path}: expected a list")

    answers: dict[tuple[int, int], str] = {}
    for item in raw:
        if (not isinstance(item, list) or len(item) != 3
                or not isinstance(item[0], int) or not isinstance(item[1], int)
                or not isinstance(item[2], str)):
            raise CrosswordError(
                f"Invalid answers file {path}: bad entry {item!r}, expected [row, col, value]"
            )
        answers[(item[0], item[1])] = item[2]
    return answers
