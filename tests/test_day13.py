import pytest

from aoc2015.day13 import main, parse_happiness, part1, part2

EXAMPLE = """Alice would gain 54 happiness units by sitting next to Bob.
Alice would lose 79 happiness units by sitting next to Carol.
Alice would lose 2 happiness units by sitting next to David.
Bob would gain 83 happiness units by sitting next to Alice.
Bob would lose 7 happiness units by sitting next to Carol.
Bob would lose 63 happiness units by sitting next to David.
Carol would lose 62 happiness units by sitting next to Alice.
Carol would gain 60 happiness units by sitting next to Bob.
Carol would gain 55 happiness units by sitting next to David.
David would gain 46 happiness units by sitting next to Alice.
David would lose 7 happiness units by sitting next to Bob.
David would gain 41 happiness units by sitting next to Carol.
"""


def test_parse_signs_and_order():
    matrix = parse_happiness(EXAMPLE)
    assert len(matrix) == 4
    assert matrix[0][1] == 54
    assert matrix[0][2] == -79
    assert matrix[3][2] == 41
    assert all(matrix[k][k] == 0 for k in range(4))


def test_example_best_circle():
    assert part1(parse_happiness(EXAMPLE)) == 330


def test_part2_matches_circle_with_neutral_guest():
    matrix = parse_happiness(EXAMPLE)
    extended = [row + [0] for row in matrix] + [[0] * (len(matrix) + 1)]
    assert part2(matrix) == part1(extended)


def test_result_independent_of_line_order():
    reordered = "\n".join(reversed(EXAMPLE.splitlines()))
    assert part1(parse_happiness(reordered)) == part1(parse_happiness(EXAMPLE))
    assert part2(parse_happiness(reordered)) == part2(parse_happiness(EXAMPLE))


def test_self_seating_raises():
    with pytest.raises(ValueError):
        parse_happiness("Alice would gain 1 happiness unit by sitting next to Alice.")


def test_bad_line_raises():
    with pytest.raises(ValueError):
        parse_happiness("Alice likes Bob.")


def test_no_guests_raises():
    with pytest.raises(ValueError):
        part1([])
    with pytest.raises(ValueError):
        part2([])


def test_main_prints(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    assert main([str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    matrix = parse_happiness(EXAMPLE)
    assert lines == [f"SCORE = {part1(matrix)}", f"SCORE = {part2(matrix)}"]