import pytest

from cubmap.cli import check_arguments, main

MAP_TEXT = "NO ./north.xpm\nC 220,100,0\n\n1111\n10N1\n1111\n"


def test_check_arguments_accepts_cub():
    assert check_arguments(["level.cub"]) is None


@pytest.mark.parametrize("argv", [[], ["a.cub", "b.cub"]])
def test_check_arguments_wrong_count(argv):
    assert check_arguments(argv) == "Error : Wrong number of arguments"


def test_check_arguments_wrong_suffix():
    assert check_arguments(["level.txt"]) == "Error : File map is not .cub"


def test_main_prints_grid(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "level.cub").write_text(MAP_TEXT, encoding="utf-8")
    assert main(["level.cub"]) == 0
    assert capsys.readouterr().out.splitlines() == ["1111", "10N1", "1111"]


def test_main_no_arguments(capsys):
    assert main([]) == 1
    assert "Wrong number of arguments" in capsys.readouterr().out


def test_main_bad_suffix(capsys):
    assert main(["level.txt"]) == 1
    out = capsys.readouterr().out
    assert "File map is not .cub" in out
    assert "Map file is not a .cub" in out


def test_main_missing_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["absent.cub"]) == 1
    assert capsys.readouterr().out.startswith("Error\n")


def test_main_invalid_map(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "open.cub").write_text("111\n101\n111\n", encoding="utf-8")
    assert main(["open.cub"]) == 1
    assert "Incorrect number of player starting point" in capsys.readouterr().out