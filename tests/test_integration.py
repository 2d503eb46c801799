"""Integration tests: end-to-end word list → every output format."""

import json

import openpyxl
import pytest

from crossword_generator import main

_OUTPUT_SUFFIXES = [".pdf", "_clues.xlsx", "_puzzle.svg", "_answer.svg", ".html", ".json"]


def _write_words(path, rows):
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.append(["#", "Clue", "Answer"])
    for row in rows:
        ws.append(list(row))
    wb.save(path)
    return path


@pytest.mark.slow
class TestEndToEnd:
    def test_built_in_word_bank(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        main([])
        out_dir = tmp_path / "output"
        for suffix in _OUTPUT_SUFFIXES:
            assert (out_dir / f"crossword{suffix}").exists()
        with open(out_dir / "crossword.pdf", "rb") as f:
            assert f.read(5) == b"%PDF-"

        data = json.loads((out_dir / "crossword.json").read_text(encoding="utf-8"))
        assert data["size"] == 20
        assert data["words"][0]["text"] == "HIPERGLICEMIA"
        assert data["words"][0]["number"] == 1

    def test_xlsx_input_with_answers(self, tmp_path, capsys):
        words = _write_words(tmp_path / "animals.xlsx", [
            (1, "Feline", "CAT"),
            (2, "Vehicle", "CAR"),
            (3, "Craft", "ART"),
            (4, "Never fits", "XYZ"),
        ])
        answers = tmp_path / "answers.json"
        answers.write_text(json.dumps([[5, 3, "c"], [5, 4, "q"]]), encoding="utf-8")

        main([str(words), "--grid-size", "10", "--answers", str(answers)])

        out_dir = tmp_path / "output"
        for suffix in _OUTPUT_SUFFIXES + ["_checked.svg"]:
            assert (out_dir / f"animals{suffix}").exists()
        checked = (out_dir / "animals_checked.svg").read_text(encoding="utf-8")
        assert 'fill="lightgreen"' in checked
        assert 'fill="lightcoral"' in checked

        err = capsys.readouterr().err
        assert "Placed 3/4 words" in err
        assert "Not placed: XYZ" in err

        wb = openpyxl.load_workbook(out_dir / "animals_clues.xlsx")
        assert wb["Not placed"].cell(row=2, column=2).value == "XYZ"

    def test_explicit_output_stem(self, tmp_path):
        words = _write_words(tmp_path / "words.xlsx", [(1, "Feline", "CAT")])
        main([str(words), str(tmp_path / "sub" / "result.pdf"), "--grid-size", "5",
              "--title", "TESTE"])
        out_dir = tmp_path / "sub" / "output"
        for suffix in _OUTPUT_SUFFIXES:
            assert (out_dir / f"result{suffix}").exists()
        assert "<title>TESTE</title>" in (out_dir / "result.html").read_text(encoding="utf-8")

    def test_grid_too_small_exits(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(SystemExit) as exc:
            main(["--grid-size", "10"])
        assert exc.value.code == 1
        assert "Error:" in capsys.readouterr().err

    def test_non_positive_grid_size_rejected(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(SystemExit) as exc:
            main(["--grid-size", "0"])
        assert exc.value.code == 2

    def test_missing_input_file(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main([str(tmp_path / "missing.xlsx")])
        assert exc.value.code == 1
        assert "File not found" in capsys.readouterr().err
