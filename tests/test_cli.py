import io

from data_designer_writegood.cli import main
from data_designer_writegood.commands import DUPLICATES_DONE_NOTICE


DRAFT = "This was very clearly written.\nthe the end\n"


def _write(tmp_path, text, name="draft.txt"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


class TestMain:
    def test_reports_all_checks(self, tmp_path, capsys):
        path = _write(tmp_path, DRAFT)
        assert main([str(path)]) == 1
        out = capsys.readouterr().out.splitlines()
        assert out == [
            f"{path}:1: very: This was very clearly written.",
            f"{path}:1: clearly: This was very clearly written.",
            f"{path}:2: the",
            DUPLICATES_DONE_NOTICE,
        ]

    def test_single_check(self, tmp_path, capsys):
        path = _write(tmp_path, DRAFT)
        assert main(["--check", "duplicates", str(path)]) == 1
        assert capsys.readouterr().out.splitlines() == [f"{path}:2: the", DUPLICATES_DONE_NOTICE]

    def test_clean_file(self, tmp_path, capsys):
        path = _write(tmp_path, "Short plain words.\n")
        assert main([str(path)]) == 0
        assert capsys.readouterr().out.splitlines() == [DUPLICATES_DONE_NOTICE]

    def test_match_case(self, tmp_path, capsys):
        path = _write(tmp_path, "VERY loud.\n")
        assert main(["--check", "weasel", "--match-case", str(path)]) == 0
        assert main(["--check", "weasel", str(path)]) == 1

    def test_extra_weasel_word(self, tmp_path, capsys):
        path = _write(tmp_path, "It is arguably fine.\n")
        assert main(["--check", "weasel", "--weasel-word", "arguably", str(path)]) == 1
        assert capsys.readouterr().out.splitlines() == [f"{path}:1: arguably: It is arguably fine."]

    def test_invalid_weasel_word(self, tmp_path, capsys):
        path = _write(tmp_path, DRAFT)
        assert main(["--weasel-word", "(", str(path)]) == 2
        assert "invalid word pattern" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.txt")]) == 2
        assert "cannot read" in capsys.readouterr().err

    def test_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("It was broken.\n"))
        assert main(["--check", "passive"]) == 1
        assert capsys.readouterr().out.splitlines() == ["<stdin>:1: was broken: It was broken."]

    def test_regular_participles(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("It was kicked.\n"))
        assert main(["--check", "passive", "--regular-participles", "-"]) == 1

    def test_readability(self, tmp_path, capsys):
        path = _write(tmp_path, "The cat sat.\n")
        main(["--check", "weasel", "--readability", str(path)])
        assert capsys.readouterr().out.splitlines() == [f"{path}: reading ease 119.19, grade level -2.62"]
