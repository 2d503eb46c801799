"""Render an interactive HTML crossword: input boxes, clue lists, check button."""

from __future__ import annotations

from html import escape

from grid_builder import build_clue_lists, build_render_grid
from models import CellType, NumberedClue, Puzzle

_STYLE = """
body { font-family: Helvetica, Arial, sans-serif; margin: 24px; }
h1 { letter-spacing: 2px; }
.layout { display: flex; gap: 32px; flex-wrap: wrap; }
.crossword { display: grid; gap: 0; border: 2px solid black; width: max-content; }
.cell { position: relative; width: 28px; height: 28px; border: 1px solid #999; background: white; }
.cell.empty { background: #222; border-color: #222; }
.cell input { width: 100%; height: 100%; border: 0; padding: 0; text-align: center;
              text-transform: uppercase; font-size: 16px; background: transparent; }
.cell .number { position: absolute; top: 1px; left: 2px; font-size: 8px; font-weight: bold; }
.clues ol { list-style: none; padding-left: 0; }
"""

_CHECK_SCRIPT = """
document.getElementById('check-puzzle').addEventListener('click', () => {
    document.querySelectorAll('#crossword input').forEach(input => {
        const ok = input.value.toUpperCase() === input.dataset.answer;
        input.parentElement.style.backgroundColor = ok ? '%s' : '%s';
    });
});
"""


def render_html(
    puzzle: Puzzle, output_path: str, title: str = "CROSSWORD"
) -> None:
    """Write a self-contained page the solver can fill in and check."""
    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(build_html(puzzle, title))


def build_html(puzzle: Puzzle, title: str = "CROSSWORD") -> str:
    across, down = build_clue_lists(puzzle)
    parts = [
        '<!DOCTYPE html>\n<html lang="pt-BR">\n<head>\n<meta charset="utf-8">\n',
        f'<title>{escape(title)}</title>\n<style>{_STYLE}</style>\n</head>\n<body>\n',
        f'<h1>{escape(title)}</h1>\n<div class="layout">\n',
        _grid_html(puzzle),
        '<div class="clues">\n',
        _clue_list_html("Horizontais", "across-clues-list", across),
        _clue_list_html("Verticais", "down-clues-list", down),
        '<button id="check-puzzle" type="button">Verificar</button>\n',
        '</div>\n</div>\n',
        '<script>', _CHECK_SCRIPT % ("lightgreen", "lightcoral"), '</script>\n',
        '</body>\n</html>\n',
    ]
    return "".join(parts)


def _grid_html(puzzle: Puzzle) -> str:
    cells = build_render_grid(puzzle)
    out = [
        f'<div id="crossword" class="crossword" '
        f'style="grid-template-columns: repeat({puzzle.size}, 28px);">\n'
    ]
    for r, row in enumerate(cells):
        for c, cell in enumerate(row):
            if cell.cell_type == CellType.BLACK:
                out.append('<div class="cell empty"></div>\n')
                continue
            number = ""
            if cell.number is not None:
                number = f'<span class="number">{cell.number}</span>'
            out.append(
                f'<div class="cell">{number}'
                f'<input type="text" maxlength="1" data-row="{r}" data-col="{c}" '
                f'data-answer="{escape(cell.letter)}"></div>\n'
            )
    out.append('</div>\n')
    return "".join(out)


def _clue_list_html(heading: str, list_id: str, clues: list[NumberedClue]) -> str:
    items = "".join(
        f'<li>{clue.number}. {escape(clue.clue_text)}</li>\n' for clue in clues
    )
    return f'<h2>{heading}</h2>\n<ol id="{list_id}">\n{items}</ol>\n'
