"""Read and validate crossword clues from an XLSX workbook."""

from __future__ import annotations

import sys
import unicodedata
from pathlib import Path

import openpyxl

from models import CrosswordError, WordEntry


def read_clues(path: str | Path, grid_size: int = 20) -> list[WordEntry]:
    """Open *path*, detect header, parse rows, validate and return word entries.

    Column A is an ordering number, B the clue, C the answer.
    """
    path = Path(path)
    if not path.exists():
        raise CrosswordError(f"File not found: {path}")

    wb = openpyxl.load_workbook(path, read_only=True, data_only=True)
    ws = wb.active

    header_row = _detect_header_row(ws)
    rows: list[tuple[int, WordEntry]] = []

    for row in ws.iter_rows(min_row=header_row + 1, max_col=3, values_only=True):
        if len(row) < 3 or row[0] is None:
            continue
        try:
            number = int(row[0])
        except (ValueError, TypeError):
            continue
        clue = str(row[1]).strip() if row[1] else ""
        answer = _normalize_answer(str(row[2]) if row[2] else "")
        if not answer:
            continue
        rows.append((number, WordEntry(text=answer, clue=clue)))

    wb.close()
    rows.sort(key=lambda item: item[0])
    return _validate_and_filter([entry for _, entry in rows], grid_size)


def _detect_header_row(sheet) -> int:
    """Return the row just above the first integer in column A (0 if there is no header).

    Falls back to row 1.
    """
    for row in sheet.iter_rows(min_row=1, max_row=20, max_col=1, values_only=False):
        cell = row[0]
        try:
            int(cell.value)
            return cell.row - 1
        except (ValueError, TypeError):
            continue
    return 1


def _normalize_answer(raw: str) -> str:
    """Uppercase, drop accents (AÇÚCAR -> ACUCAR), strip everything except A-Z."""
    decomposed = unicodedata.normalize("NFKD", raw.upper())
    return "".join(c for c in decomposed if "A" <= c <= "Z")


def _validate_and_filter(
    entries: list[WordEntry], grid_size: int
) -> list[WordEntry]:
    """Drop answers that cannot fit the grid; error if none remain.

    Repeated answers are kept: each one is placed independently.
    """
    result: list[WordEntry] = []

    for entry in entries:
        if len(entry.text) > grid_size:
            print(
                f"Warning: skipping '{entry.text}' (too long for {grid_size}x{grid_size} grid)",
                file=sys.stderr,
            )
            continue
        result.append(entry)

    if not result:
        raise CrosswordError("No valid clue entries after filtering")

    return result
