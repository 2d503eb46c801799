"""Build the display grid and clue lists from a generated Puzzle."""

from __future__ import annotations

from models import Cell, CellType, Direction, NumberedClue, Puzzle


def cell_numbers(puzzle: Puzzle) -> dict[tuple[int, int], int]:
    """Map each word's start cell to its clue number.

    Two words may start on the same cell; the lower number is shown there.
    """
    numbers: dict[tuple[int, int], int] = {}
    for word in puzzle.placed_words:
        p = word.placement
        numbers.setdefault((p.row, p.col), p.number)
    return numbers


def build_render_grid(puzzle: Puzzle) -> list[list[Cell]]:
    """Occupied cells become WHITE with their letter; the rest stay BLACK."""
    numbers = cell_numbers(puzzle)
    cells = [[Cell() for _ in range(puzzle.size)] for _ in range(puzzle.size)]

    for r in range(puzzle.size):
        for c in range(puzzle.size):
            letter = puzzle.grid.letter_at(r, c)
            if letter is None:
                continue
            cell = cells[r][c]
            cell.cell_type = CellType.WHITE
            cell.letter = letter
            cell.number = numbers.get((r, c))

    return cells


def build_clue_lists(
    puzzle: Puzzle,
) -> tuple[list[NumberedClue], list[NumberedClue]]:
    """Return (across, down) clues for placed words, each sorted by number."""
    across: list[NumberedClue] = []
    down: list[NumberedClue] = []

    for word in puzzle.placed_words:
        clue = NumberedClue(
            number=word.placement.number,
            clue_text=word.entry.clue,
            answer=word.entry.text,
            direction=word.placement.direction,
        )
        if clue.direction == Direction.ACROSS:
            across.append(clue)
        else:
            down.append(clue)

    across.sort(key=lambda c: c.number)
    down.sort(key=lambda c: c.number)
    return across, down
