import io

from textjustify.__main__ import main


def test_cli_file(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("This is an example\n  of text justification\n")

    assert main(["16", str(path)]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == ["This    is    an", "example  of text", "justification   "]


def test_cli_show_width(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("Onewordtest")

    assert main(["16", "--show-width", str(path)]) == 0
    assert capsys.readouterr().out == "16:  Onewordtest     \n"


def test_cli_flags_before_positionals(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("Onewordtest")

    assert main(["--show-width", "16", str(path)]) == 0
    assert capsys.readouterr().out == "16:  Onewordtest     \n"


def test_cli_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("This is also good example\nof text justification"))

    assert main(["16"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "This   is   also",
        "good     example",
        "of          text",
        "justification   ",
    ]


def test_cli_empty_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("   \n"))

    assert main(["16"]) == 0
    assert capsys.readouterr().out == ""


def test_cli_word_too_long(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("a seventeen(17-chr) word")

    assert main(["16", str(path)]) == 2
    assert "width 16" in capsys.readouterr().err
