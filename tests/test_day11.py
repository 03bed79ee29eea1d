import pytest

from aoc2015.day11 import (
    double_double,
    has_straight,
    increment_password,
    is_valid,
    main,
    next_password,
    no_iol,
)


def test_increment_simple_and_carry():
    assert increment_password("xx")[1] == "y"
    assert increment_password("xz") == "y" + "a"
    assert increment_password("a" + "zzz") == "b" + "aaa"


def test_increment_is_strictly_greater_and_same_length():
    for word in ("abcdefgh", "azzzzzzz", "qwerty"):
        result = increment_password(word)
        assert result > word
        assert len(result) == len(word)


def test_increment_overflow_raises():
    with pytest.raises(ValueError):
        increment_password("zzzz")


def test_increment_rejects_non_letters():
    with pytest.raises(ValueError):
        increment_password("abc1")


def test_rules_from_examples():
    assert has_straight("hijklmmn") is True
    assert no_iol("hijklmmn") is False
    assert double_double("abbceffg") is True
    assert has_straight("abbceffg") is False
    assert double_double("abbcegjk") is False


def test_pairs_must_not_overlap():
    assert double_double("aaa") is False
    assert double_double("aaaa") is True


def test_next_password_examples():
    assert next_password("abcdefgh") == "abcdffaa"
    assert next_password("ghijklmn") == "ghjaabcc"


def test_next_password_is_valid_and_later():
    result = next_password("abcdffaa")
    assert result > "abcdffaa"
    assert is_valid(result)


def test_main_prints(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("abcdefgh\n")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    first = next_password("abcdefgh")
    assert f"first password is: {first}" in out
    assert f"second password is: {next_password(first)}" in out