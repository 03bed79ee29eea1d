import pytest

from aoc2015.day01 import final_floor, first_basement, main


def test_balanced_text_returns_to_start():
    assert final_floor("(())") == final_floor("()()") == final_floor("")


def test_floor_counts_each_paren():
    assert final_floor("(" * 7) == 7
    assert final_floor(")" * 4) == -4


def test_floor_is_additive():
    left, right = "(()(()(", "))((()))))"
    assert final_floor(left + right) == final_floor(left) + final_floor(right)


def test_other_characters_ignored_for_floor():
    assert final_floor("(a(b)\n") == final_floor("(()")


def test_first_basement_examples():
    assert first_basement(")") == 1
    assert first_basement("()())") == 5


def test_never_in_basement():
    assert first_basement("(((") == 0


def test_position_counts_every_character():
    assert first_basement("xy)") == first_basement(")") + 2


def test_main_prints_results(tmp_path, capsys):
    text = "()())("
    path = tmp_path / "input.txt"
    path.write_text(text)
    assert main([str(path)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        f"final floor = {final_floor(text)}",
        f"first basement = {first_basement(text)}",
    ]


def test_main_missing_file(tmp_path):
    with pytest.raises(SystemExit, match="cannot find file"):
        main([str(tmp_path / "missing.txt")])