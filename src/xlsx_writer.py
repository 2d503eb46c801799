"""Write placed crossword clues to an XLSX file."""

from __future__ import annotations

import openpyxl
from openpyxl.styles import Font

from models import NumberedClue, WordEntry


def write_clues_xlsx(
    across: list[NumberedClue],
    down: list[NumberedClue],
    output_path: str,
    unplaced: list[WordEntry] | None = None,
) -> None:
    """Write across and down clues to an Excel workbook.

    Numbering is embedded in the clue cell: '1. Clue text'.
    Answers are in column B.
    If *unplaced* is provided, a second sheet lists words that didn't fit.
    """
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Clues"

    header_font = Font(bold=True, size=12)
    row = 1

    for heading, clues in (("ACROSS", across), ("DOWN", down)):
        ws.cell(row=row, column=1, value=heading).font = header_font
        row += 1
        for clue in clues:
            ws.cell(row=row, column=1, value=f"{clue.number}. {clue.clue_text}")
            ws.cell(row=row, column=2, value=clue.answer)
            row += 1
        row += 1

    ws.column_dimensions["A"].width = 60
    ws.column_dimensions["B"].width = 15

    if unplaced:
        ws2 = wb.create_sheet(title="Not placed")
        ws2.cell(row=1, column=1, value="Clue").font = header_font
        ws2.cell(row=1, column=2, value="Answer").font = header_font
        for i, entry in enumerate(unplaced, start=2):
            ws2.cell(row=i, column=1, value=entry.clue)
            ws2.cell(row=i, column=2, value=entry.text)
        ws2.column_dimensions["A"].width = 60
        ws2.column_dimensions["B"].width = 15

    wb.save(output_path)
