"""Render crossword puzzle to a printable PDF using ReportLab.

Layout: title banner, grid centered below it, then two clue columns
(across on the left, down on the right). Page 2 is the answer key.
"""

from __future__ import annotations

from dataclasses import dataclass
from xml.sax.saxutils import escape

from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.platypus import Paragraph

from grid_builder import build_clue_lists, build_render_grid
from models import Cell, CellType, NumberedClue, Puzzle

PAGE_W, PAGE_H = A4  # 595.27 x 841.89
MARGIN = 36
SECTION_HEADER_H = 14.0


@dataclass
class LayoutParams:
    """All computed layout measurements."""

    page_w: float = PAGE_W
    page_h: float = PAGE_H
    margin: float = MARGIN
    usable_w: float = PAGE_W - 2 * MARGIN

    grid_size: int = 20
    cell_size: float = 17.0
    grid_dim: float = 0.0
    grid_x: float = 0.0
    grid_y: float = 0.0  # top of grid in page coords

    banner_h: float = 28.0
    banner_y: float = 0.0

    clue_font_size: float = 10.0
    clue_leading: float = 12.0
    space_after: float = 2.0
    number_font_size: float = 6.0

    clue_zone_y: float = 0.0  # top of clue area
    clue_gutter: float = 18.0
    clue_col_w: float = 0.0

    title: str = "CROSSWORD"


def render_pdf(puzzle: Puzzle, title: str, output_path: str) -> None:
    """Draw page 1 (blank grid + clues) and page 2 (answer key)."""
    from reportlab.pdfgen.canvas import Canvas

    across, down = build_clue_lists(puzzle)
    cells = build_render_grid(puzzle)

    layout = _compute_layout(puzzle.size, title)
    layout = _adaptive_fit(across, down, layout)

    c = Canvas(output_path, pagesize=A4)

    _draw_title_banner(c, layout)
    _draw_grid(c, cells, layout, show_answers=False)
    _draw_clue_column(c, "HORIZONTAIS", across, layout, column=0)
    _draw_clue_column(c, "VERTICAIS", down, layout, column=1)
    c.showPage()

    _draw_answer_key_page(c, cells, layout)
    c.showPage()

    c.save()


def _compute_layout(grid_size: int, title: str) -> LayoutParams:
    """Calculate all positions and sizes."""
    lp = LayoutParams(grid_size=grid_size, title=title)

    if grid_size <= 13:
        lp.cell_size = 24.0
        lp.number_font_size = 8.5
    elif grid_size <= 15:
        lp.cell_size = 24.0
        lp.number_font_size = 8.0
    elif grid_size <= 17:
        lp.cell_size = 21.0
        lp.number_font_size = 7.0
    else:
        lp.cell_size = min(17.0, lp.usable_w / grid_size)
        lp.number_font_size = 6.0

    _recompute_positions(lp)
    return lp


def _recompute_positions(lp: LayoutParams) -> None:
    """(Re)calculate derived positions from current params."""
    lp.grid_dim = lp.cell_size * lp.grid_size
    lp.banner_y = lp.page_h - lp.margin - lp.banner_h
    lp.grid_x = (lp.page_w - lp.grid_dim) / 2
    lp.grid_y = lp.banner_y - 8
    lp.clue_zone_y = lp.grid_y - lp.grid_dim - 12
    lp.clue_col_w = (lp.usable_w - lp.clue_gutter) / 2


def _adaptive_fit(
    across: list[NumberedClue],
    down: list[NumberedClue],
    layout: LayoutParams,
) -> LayoutParams:
    """Shrink clue text, then cells, until both clue columns fit on page 1."""
    for _ in range(16):
        if _content_fits(across, down, layout):
            return layout

        if layout.clue_font_size > 6.0:
            layout.clue_font_size -= 0.5
            layout.clue_leading = layout.clue_font_size + 2.0
            continue

        if layout.space_after > 0.5:
            layout.space_after = 0.5
            continue

        if layout.cell_size > 12:
            layout.cell_size -= 1
            _recompute_positions(layout)
            continue

        break

    return layout


def _content_fits(
    across: list[NumberedClue],
    down: list[NumberedClue],
    layout: LayoutParams,
) -> bool:
    available = layout.clue_zone_y - layout.margin
    return max(_column_height(across, layout), _column_height(down, layout)) <= available


def _column_height(clues: list[NumberedClue], layout: LayoutParams) -> float:
    style = _clue_style(layout)
    total = SECTION_HEADER_H + 4
    for clue in clues:
        p = Paragraph(_clue_markup(clue), style)
        _, h = p.wrap(layout.clue_col_w, 10000)
        total += h + style.spaceAfter
    return total


def _clue_style(layout: LayoutParams) -> ParagraphStyle:
    return ParagraphStyle(
        "ClueStyle",
        fontName="Helvetica",
        fontSize=layout.clue_font_size,
        leading=layout.clue_leading,
        spaceAfter=layout.space_after,
    )


def _clue_markup(clue: NumberedClue) -> str:
    """Format clue as ``<b>N.</b> text`` with XML escaping."""
    return f"<b>{clue.number}.</b> {escape(clue.clue_text)}"


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
    c.drawString(x + (w - text_w) / 2, y + (h - 16) / 2 + 2, layout.title)


def _draw_grid(
    c, cells: list[list[Cell]], layout: LayoutParams, show_answers: bool
) -> None:
    """Draw black/white cells, clue numbers and, optionally, the letters."""
    x0 = layout.grid_x
    y0 = layout.grid_y
    cs = layout.cell_size
    size = layout.grid_size

    for r in range(size):
        for col in range(size):
            cell = cells[r][col]
            cx = x0 + col * cs
            cy = y0 - (r + 1) * cs

            if cell.cell_type == CellType.BLACK:
                c.setFillColorRGB(0, 0, 0)
                c.rect(cx, cy, cs, cs, fill=1, stroke=0)
                continue

            c.setFillColorRGB(1, 1, 1)
            c.setStrokeColorRGB(0, 0, 0)
            c.setLineWidth(0.5)
            c.rect(cx, cy, cs, cs, fill=1, stroke=1)

            if cell.number is not None:
                c.setFillColorRGB(0, 0, 0)
                c.setFont("Helvetica-Bold", layout.number_font_size)
                c.drawString(
                    cx + 1.5,
                    cy + cs - layout.number_font_size - 1,
                    str(cell.number),
                )

            if show_answers and cell.letter:
                c.setFillColorRGB(0, 0, 0)
                font_size = cs * 0.45
                c.setFont("Helvetica", font_size)
                lw = stringWidth(cell.letter, "Helvetica", font_size)
                c.drawString(cx + cs * 0.55 - lw / 2, cy + cs * 0.42 - font_size / 2, cell.letter)

    c.setStrokeColorRGB(0, 0, 0)
    c.setLineWidth(1.5)
    c.rect(x0, y0 - size * cs, size * cs, size * cs, fill=0, stroke=1)


def _draw_clue_column(
    c,
    heading: str,
    clues: list[NumberedClue],
    layout: LayoutParams,
    column: int,
) -> None:
    style = _clue_style(layout)
    x = layout.margin + column * (layout.clue_col_w + layout.clue_gutter)
    y = _draw_section_header(c, heading, x, layout.clue_zone_y, layout.clue_col_w) - 4

    for clue in clues:
        p = Paragraph(_clue_markup(clue), style)
        _, h = p.wrap(layout.clue_col_w, 10000)
        p.drawOn(c, x, y - h)
        y -= h + style.spaceAfter


def _draw_section_header(c, text: str, x: float, y: float, width: float) -> float:
    """Black rect + white bold text. Returns y at bottom of header."""
    h = SECTION_HEADER_H
    c.setFillColorRGB(0, 0, 0)
    c.rect(x, y - h, width, h, fill=1, stroke=0)

    c.setFillColorRGB(1, 1, 1)
    c.setFont("Helvetica-Bold", 9)
    c.drawString(x + 4, y - h + 3.5, text)

    return y - h


def _draw_answer_key_page(c, cells: list[list[Cell]], layout: LayoutParams) -> None:
    """Banner + filled grid on its own page."""
    ak_layout = LayoutParams(
        grid_size=layout.grid_size,
        cell_size=layout.cell_size,
        number_font_size=layout.number_font_size,
        title="GABARITO",
    )
    _recompute_positions(ak_layout)
    ak_layout.grid_y = ak_layout.banner_y - 20

    _draw_title_banner(c, ak_layout)
    _draw_grid(c, cells, ak_layout, show_answers=True)
