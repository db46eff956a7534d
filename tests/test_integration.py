"""Integration tests: end-to-end CLI runs."""

import pytest

from wordsearch_generator import main


class TestCli:
    def test_prints_grid(self, capsys):
        main(["APPLE", "BANANA", "CHERRY", "--seed", "42"])
        out = capsys.readouterr().out
        grid_lines = out.splitlines()[:15]
        assert all(len(line.split()) == 15 for line in grid_lines)
        assert "Words: APPLE, BANANA, CHERRY" in out

    def test_comma_separated_words(self, capsys):
        main(["apple,banana", "--seed", "1", "--width", "10", "--height", "8"])
        captured = capsys.readouterr()
        assert "Words: APPLE, BANANA" in captured.out
        assert "Placed 2/2 words" in captured.err

    def test_show_distractors(self, capsys):
        main(["APPLE", "--seed", "3", "--difficulty", "0", "--show-distractors"])
        assert "Distractors: \n" in capsys.readouterr().out

    def test_shortfall_warning(self, capsys):
        main(["ELEPHANT", "CAT", "--width", "5", "--height", "5", "--seed", "1"])
        err = capsys.readouterr().err
        assert "too long" in err
        assert "could not be placed" in err

    def test_invalid_config_exits(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["APPLE", "--width", "3"])
        assert exc.value.code == 1
        assert "width" in capsys.readouterr().err

    def test_missing_words_file_exits(self):
        with pytest.raises(SystemExit):
            main(["--words-file", "nonexistent.txt"])

    def test_unreadable_words_file_exits(self, tmp_path, capsys):
        path = tmp_path / "words.txt"
        path.write_bytes("caf\xe9,lion,tiger".encode("latin-1"))
        with pytest.raises(SystemExit) as exc:
            main(["--words-file", str(path)])
        assert exc.value.code == 1
        assert "Error: Cannot read" in capsys.readouterr().err

    def test_no_words(self):
        with pytest.raises(SystemExit):
            main([])

    def test_words_file(self, tmp_path, capsys):
        path = tmp_path / "words.txt"
        path.write_text("lion\ntiger\nbear\n", encoding="utf-8")
        main(["--words-file", str(path), "--seed", "5"])
        assert "Words: BEAR, LION, TIGER" in capsys.readouterr().out


@pytest.mark.slow
class TestEndToEnd:
    def test_writes_all_outputs(self, tmp_path):
        output = tmp_path / "puzzle.pdf"
        main(["APPLE", "BANANA", "CHERRY", "--seed", "42", "--output", str(output)])
        out_dir = tmp_path / "output"
        with open(out_dir / "puzzle.pdf", "rb") as f:
            assert f.read(5) == b"%PDF-"
        assert (out_dir / "puzzle_answers.xlsx").exists()
        assert (out_dir / "puzzle_puzzle.svg").exists()
        assert (out_dir / "puzzle_answer.svg").exists()
