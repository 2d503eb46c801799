"""Tests for pdf_renderer.py."""

import re

import pytest

from models import Direction, NumberedClue, WordEntry
from grid_placer import generate_crossword
from pdf_renderer import _adaptive_fit, _compute_layout, _content_fits, render_pdf
from word_bank import get_word_bank


def _make_simple_puzzle():
    entries = [
        WordEntry("HELLO", "Greeting"),
        WordEntry("HAPPY", "Glad"),
        WordEntry("OCEAN", "Big water"),
    ]
    return generate_crossword(entries, 11)


@pytest.fixture
def pdf_path(tmp_path):
    return str(tmp_path / "puzzle.pdf")


class TestRenderPdf:
    def test_creates_valid_pdf(self, pdf_path):
        render_pdf(_make_simple_puzzle(), "TEST", pdf_path)
        with open(pdf_path, "rb") as f:
            assert f.read(5) == b"%PDF-"

    def test_two_pages(self, pdf_path):
        render_pdf(_make_simple_puzzle(), "TEST", pdf_path)
        with open(pdf_path, "rb") as f:
            content = f.read()
        pages = len(re.findall(rb'/Type\s*/Page[^s]', content))
        assert pages == 2

    def test_word_bank_20x20(self, pdf_path):
        render_pdf(generate_crossword(get_word_bank(), 20), "CRUZADINHA", pdf_path)
        with open(pdf_path, "rb") as f:
            assert f.read(5) == b"%PDF-"


class TestComputeLayout:
    def test_default_20x20(self):
        layout = _compute_layout(20, "CROSSWORD")
        assert layout.cell_size == 17.0
        assert layout.grid_size == 20
        assert layout.grid_dim == 340.0

    def test_cell_size_scaling(self):
        assert _compute_layout(13, "T").cell_size == 24.0
        assert _compute_layout(17, "T").cell_size == 21.0
        assert _compute_layout(21, "T").cell_size == 17.0

    def test_large_grid_fits_page_width(self):
        layout = _compute_layout(40, "T")
        assert layout.grid_dim <= layout.usable_w + 1e-6

    def test_clue_zone_below_grid(self):
        layout = _compute_layout(20, "T")
        assert layout.clue_zone_y < layout.grid_y - layout.grid_dim


class TestAdaptiveFit:
    def test_no_change_when_fits(self):
        across = [NumberedClue(1, "Short clue", "TEST", Direction.ACROSS)]
        down = [NumberedClue(2, "Short clue", "TEST", Direction.DOWN)]
        layout = _compute_layout(20, "TEST")
        original_font = layout.clue_font_size
        layout = _adaptive_fit(across, down, layout)
        assert layout.clue_font_size == original_font

    def test_shrinks_for_many_clues(self):
        across = [
            NumberedClue(i, "A fairly long clue that wraps across the column width " * 2,
                         "WORD", Direction.ACROSS)
            for i in range(1, 40)
        ]
        layout = _compute_layout(20, "TEST")
        original_font = layout.clue_font_size
        layout = _adaptive_fit(across, [], layout)
        assert layout.clue_font_size < original_font

    def test_fits_after_adjustment(self):
        across = [NumberedClue(i, "Clue text", "WORD", Direction.ACROSS) for i in range(1, 30)]
        layout = _adaptive_fit(across, [], _compute_layout(20, "TEST"))
        assert _content_fits(across, [], layout)
