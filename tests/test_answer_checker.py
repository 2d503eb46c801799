"""Tests for answer_checker.py."""

import json

import pytest

from models import CrosswordError, WordEntry
from answer_checker import check_answers, check_cell, load_answers
from grid_placer import generate_crossword


def _make_puzzle():
    entries = [WordEntry("CAT", "Feline"), WordEntry("CAR", "Vehicle"), WordEntry("ART", "Craft")]
    return generate_crossword(entries, 10)


def _solution(puzzle):
    return {
        (r, c): puzzle.expected_letter(r, c)
        for r in range(puzzle.size)
        for c in range(puzzle.size)
        if puzzle.expected_letter(r, c) is not None
    }


class TestCheckCell:
    def test_case_insensitive(self):
        puzzle = _make_puzzle()
        assert check_cell(puzzle, 5, 3, "c").correct
        assert check_cell(puzzle, 5, 3, "C").correct

    def test_wrong_letter(self):
        check = check_cell(_make_puzzle(), 5, 3, "x")
        assert not check.correct
        assert check.expected == "C"
        assert check.entered == "x"

    def test_blank_is_incorrect(self):
        assert not check_cell(_make_puzzle(), 5, 3, "").correct

    def test_empty_cell_raises(self):
        with pytest.raises(CrosswordError, match="No letter expected"):
            check_cell(_make_puzzle(), 0, 0, "A")

    def test_out_of_bounds_raises(self):
        with pytest.raises(CrosswordError):
            check_cell(_make_puzzle(), 10, 10, "A")


class TestCheckAnswers:
    def test_all_correct_lowercase(self):
        puzzle = _make_puzzle()
        answers = {cell: letter.lower() for cell, letter in _solution(puzzle).items()}
        checks = check_answers(puzzle, answers)
        assert len(checks) == 7
        assert all(ch.correct for ch in checks)

    def test_one_cell_per_occupied_cell_row_major(self):
        puzzle = _make_puzzle()
        checks = check_answers(puzzle, {})
        cells = [(ch.row, ch.col) for ch in checks]
        assert cells == sorted(_solution(puzzle))
        assert not any(ch.correct for ch in checks)

    def test_correct_iff_letters_match(self):
        puzzle = _make_puzzle()
        answers = {(5, 3): "c", (5, 4): "Q", (6, 3): "a", (7, 4): "t"}
        for ch in check_answers(puzzle, answers):
            entered = answers.get((ch.row, ch.col), "")
            assert ch.correct == (entered.upper() == puzzle.expected_letter(ch.row, ch.col))

    def test_entries_on_empty_cells_ignored(self):
        puzzle = _make_puzzle()
        checks = check_answers(puzzle, {(0, 0): "A"})
        assert (0, 0) not in {(ch.row, ch.col) for ch in checks}


class TestLoadAnswers:
    def test_valid_file(self, tmp_path):
        path = tmp_path / "answers.json"
        path.write_text(json.dumps([[5, 3, "c"], [6, 3, "A"]]), encoding="utf-8")
        assert load_answers(path) == {(5, 3): "c", (6, 3): "A"}

    def test_file_not_found(self, tmp_path):
        with pytest.raises(CrosswordError, match="File not found"):
            load_answers(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "answers.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(CrosswordError, match="Invalid answers file"):
            load_answers(path)

    def test_not_a_list(self, tmp_path):
        path = tmp_path / "answers.json"
        path.write_text('{"5,3": "C"}', encoding="utf-8")
        with pytest.raises(CrosswordError, match="expected a list"):
            load_answers(path)

    def test_bad_entry(self, tmp_path):
        path = tmp_path / "answers.json"
        path.write_text('[[5, "3", "C"]]', encoding="utf-8")
        with pytest.raises(CrosswordError, match="bad entry"):
            load_answers(path)
