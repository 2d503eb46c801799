"""Crossword word placement: longest-first seed, then first-fit intersection search."""

from __future__ import annotations

import logging
from collections import namedtuple

from models import (
    CrosswordError,
    Direction,
    Grid,
    Placement,
    PlacedWord,
    Puzzle,
    WordEntry,
)

logger = logging.getLogger(__name__)

DEFAULT_GRID_SIZE = 20

Intersection = namedtuple("Intersection", ["new_index", "placed_index"])


def generate_crossword(
    entries: list[WordEntry],
    grid_size: int = DEFAULT_GRID_SIZE,
) -> Puzzle:
    """Place as many of *entries* as possible on a *grid_size* square grid.

    The longest word is centred across and numbered 1. Every other word, in
    descending length order, is crossed with the first already-placed word
    that admits a conflict-free placement; words that fit nowhere are left
    unplaced. The result depends only on the input order and grid size.

    Raises CrosswordError when the input cannot seed a puzzle at all.
    """
    _validate_input(entries, grid_size)

    ordered = sorted(entries, key=lambda e: len(e.text), reverse=True)
    grid = Grid.create(grid_size)
    results: list[PlacedWord] = []

    seed = ordered[0]
    seed_placement = Placement(
        row=grid_size // 2,
        col=(grid_size - len(seed.text)) // 2,
        direction=Direction.ACROSS,
        number=1,
    )
    logger.debug("Placing first word '%s' at [%d, %d]",
                 seed.text, seed_placement.row, seed_placement.col)
    grid.write_word(seed, seed_placement)
    results.append(PlacedWord(seed, seed_placement))

    next_number = 2
    for entry in ordered[1:]:
        placement = _find_placement(entry, results, grid, next_number)
        if placement is None:
            logger.debug("Could not place '%s'", entry.text)
            results.append(PlacedWord(entry))
            continue
        grid.write_word(entry, placement)
        results.append(PlacedWord(entry, placement))
        next_number += 1

    logger.info("Placed %d/%d words on a %dx%d grid",
                next_number - 1, len(entries), grid_size, grid_size)
    return Puzzle(size=grid_size, words=tuple(results), grid=grid)


def _validate_input(entries: list[WordEntry], grid_size: int) -> None:
    if grid_size < 1:
        raise CrosswordError(f"Grid size must be positive, got {grid_size}")
    if not entries:
        raise CrosswordError("No words to place")
    for entry in entries:
        if not entry.text or not entry.text.isalpha() or entry.text != entry.text.upper():
            raise CrosswordError(f"Invalid word '{entry.text}': expected uppercase letters")
    longest = max(len(e.text) for e in entries)
    if longest > grid_size:
        raise CrosswordError(
            f"Longest word has {longest} letters, too long for a {grid_size}x{grid_size} grid"
        )


# ── Intersection search ──────────────────────────────────────────────

def _find_placement(
    entry: WordEntry,
    placed_so_far: list[PlacedWord],
    grid: Grid,
    number: int,
) -> Placement | None:
    """Try each placed word in placement order; the first valid crossing wins."""
    for other in placed_so_far:
        if not other.placed:
            continue
        hit = _find_intersection(entry.text, other.entry.text)
        if hit is None:
            continue
        row, col, direction = _anchor(hit, other.placement)
        logger.debug("Trying to place '%s' at [%d, %d] %s intersecting with '%s'",
                     entry.text, row, col, direction.value, other.entry.text)
        if _can_place(entry.text, row, col, direction, grid):
            logger.debug("Successfully placed '%s'", entry.text)
            return Placement(row=row, col=col, direction=direction, number=number)
    return None


def _find_intersection(new_word: str, placed_word: str) -> Intersection | None:
    """Earliest letter of *new_word*, then earliest matching letter of *placed_word*."""
    for i, ch in enumerate(new_word):
        j = placed_word.find(ch)
        if j != -1:
            return Intersection(i, j)
    return None


def _anchor(hit: Intersection, crossed: Placement) -> tuple[int, int, Direction]:
    """Start cell and direction that put new_index exactly on placed_index."""
    direction = crossed.direction.perpendicular()
    if crossed.direction == Direction.ACROSS:
        return crossed.row - hit.new_index, crossed.col + hit.placed_index, direction
    return crossed.row + hit.placed_index, crossed.col - hit.new_index, direction


# ── Validation ────────────────────────────────────────────────────────

def _can_place(
    word: str, row: int, col: int, direction: Direction, grid: Grid,
) -> bool:
    """In bounds, no letter conflicts, and at least one shared letter."""
    dr, dc = direction.step
    end_r = row + dr * (len(word) - 1)
    end_c = col + dc * (len(word) - 1)
    if not (grid.in_bounds(row, col) and grid.in_bounds(end_r, end_c)):
        return False

    intersects = False
    for i, letter in enumerate(word):
        existing = grid.letter_at(row + dr * i, col + dc * i)
        if existing is None:
            continue
        if existing != letter:
            return False
        intersects = True
    return intersects
