import itertools

import pytest

from aoc2015.day02 import main, paper, parse_boxes, ribbon, total_paper, total_ribbon

TEXT = "2x3x4\n1x1x10\n"


def test_parse_boxes():
    assert parse_boxes(TEXT) == [(2, 3, 4), (1, 1, 10)]


def test_parse_skips_blank_lines():
    assert parse_boxes("\n5x6x7\n\n") == [(5, 6, 7)]


def test_example_box():
    assert paper((2, 3, 4)) == 58
    assert ribbon((2, 3, 4)) == 34


@pytest.mark.parametrize("dims", [(2, 3, 4), (1, 1, 10), (7, 2, 9)])
def test_order_of_sides_does_not_matter(dims):
    for perm in itertools.permutations(dims):
        assert paper(perm) == paper(dims)
        assert ribbon(perm) == ribbon(dims)


def test_totals_are_sums():
    boxes = parse_boxes(TEXT)
    assert total_paper(TEXT) == sum(paper(box) for box in boxes)
    assert total_ribbon(TEXT) == sum(ribbon(box) for box in boxes)


def test_malformed_line_raises():
    with pytest.raises(ValueError):
        parse_boxes("2x3\n")
    with pytest.raises(ValueError):
        parse_boxes("2xbx4\n")


def test_main_prints_totals(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(TEXT)
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.splitlines() == [
        f"paper: {total_paper(TEXT)}",
        f"ribbon: {total_ribbon(TEXT)}",
    ]