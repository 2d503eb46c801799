"""Data models for the crossword generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Direction(Enum):
    ACROSS = "ACROSS"
    DOWN = "DOWN"

    @property
    def step(self) -> tuple[int, int]:
        """(dr, dc) offset between consecutive letters."""
        return (0, 1) if self is Direction.ACROSS else (1, 0)

    def perpendicular(self) -> Direction:
        return Direction.DOWN if self is Direction.ACROSS else Direction.ACROSS


class CellType(Enum):
    BLACK = "BLACK"
    WHITE = "WHITE"


@dataclass(frozen=True)
class WordEntry:
    """A word/clue pair. ``text`` is uppercase, letters only."""

    text: str
    clue: str


@dataclass(frozen=True)
class Placement:
    """Where a word landed on the grid and the clue number it received."""

    row: int
    col: int
    direction: Direction
    number: int

    def cells(self, length: int) -> list[tuple[int, int]]:
        dr, dc = self.direction.step
        return [(self.row + dr * i, self.col + dc * i) for i in range(length)]


@dataclass(frozen=True)
class PlacedWord:
    """Generation outcome for one entry: placed with a Placement, or not at all."""

    entry: WordEntry
    placement: Placement | None = None

    @property
    def placed(self) -> bool:
        return self.placement is not None

    def cells(self) -> list[tuple[int, int]]:
        if self.placement is None:
            return []
        return self.placement.cells(len(self.entry.text))


@dataclass(frozen=True)
class GridCell:
    """An occupied cell. ``owner`` is the entry that first wrote it."""

    letter: str
    owner: WordEntry


@dataclass
class Grid:
    """An NxN crossword grid; ``None`` marks an empty cell."""

    size: int
    cells: list[list[GridCell | None]] = field(default_factory=list)

    @classmethod
    def create(cls, size: int) -> Grid:
        """Create an empty grid."""
        cells: list[list[GridCell | None]] = [[None] * size for _ in range(size)]
        return cls(size=size, cells=cells)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def is_occupied(self, row: int, col: int) -> bool:
        return self.cells[row][col] is not None

    def letter_at(self, row: int, col: int) -> str | None:
        cell = self.cells[row][col]
        return cell.letter if cell is not None else None

    def write_word(self, entry: WordEntry, placement: Placement) -> None:
        """Write *entry* at *placement*, all-or-nothing.

        Every target cell is checked before the first one is written; a cell
        outside the grid or holding a different letter raises PlacementError.
        Cells already holding the same letter keep their original owner.
        """
        targets = placement.cells(len(entry.text))
        for (r, c), letter in zip(targets, entry.text):
            if not self.in_bounds(r, c):
                raise PlacementError(
                    f"'{entry.text}' leaves the {self.size}x{self.size} grid at ({r},{c})"
                )
            existing = self.letter_at(r, c)
            if existing is not None and existing != letter:
                raise PlacementError(
                    f"Letter conflict at ({r},{c}): existing '{existing}' vs '{letter}'"
                )
        for (r, c), letter in zip(targets, entry.text):
            if self.cells[r][c] is None:
                self.cells[r][c] = GridCell(letter=letter, owner=entry)


@dataclass(frozen=True)
class Puzzle:
    """A finished crossword: the grid plus every entry's placement outcome.

    ``words`` keeps generation order (longest first), which is also the
    order in which clue numbers were handed out.
    """

    size: int
    words: tuple[PlacedWord, ...]
    grid: Grid

    @property
    def placed_words(self) -> list[PlacedWord]:
        """Placed words ordered by clue number."""
        placed = [w for w in self.words if w.placed]
        return sorted(placed, key=lambda w: w.placement.number)

    @property
    def unplaced(self) -> list[WordEntry]:
        return [w.entry for w in self.words if not w.placed]

    def expected_letter(self, row: int, col: int) -> str | None:
        """Solution letter at (row, col), or None for an empty cell."""
        if not self.grid.in_bounds(row, col):
            return None
        return self.grid.letter_at(row, col)

    def to_jsonable(self) -> dict:
        return {
            "size": self.size,
            "grid": [
                [self.grid.letter_at(r, c) for c in range(self.size)]
                for r in range(self.size)
            ],
            "words": [
                {
                    "number": w.placement.number,
                    "text": w.entry.text,
                    "clue": w.entry.clue,
                    "row": w.placement.row,
                    "col": w.placement.col,
                    "direction": w.placement.direction.value,
                }
                for w in self.placed_words
            ],
            "unplaced": [{"text": e.text, "clue": e.clue} for e in self.unplaced],
        }


@dataclass
class Cell:
    """A display cell handed to the renderers."""

    cell_type: CellType = CellType.BLACK
    letter: str | None = None
    number: int | None = None


@dataclass(frozen=True)
class NumberedClue:
    """A clue with its display number."""

    number: int
    clue_text: str
    answer: str
    direction: Direction


@dataclass(frozen=True)
class CellCheck:
    """Result of comparing one solver entry with the solution letter."""

    row: int
    col: int
    entered: str
    expected: str
    correct: bool


class CrosswordError(Exception):
    """Fatal error during crossword generation."""


class PlacementError(CrosswordError):
    """A grid write that the placement checks should have prevented."""
