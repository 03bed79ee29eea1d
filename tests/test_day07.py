import pytest

from aoc2015.day07 import evaluate, main, parse_circuit, part1, part2

SAMPLE = """\
123 -> x
456 -> y
x AND y -> d
x OR y -> e
x LSHIFT 2 -> f
y RSHIFT 2 -> g
NOT x -> h
NOT y -> i
"""


@pytest.fixture
def circuit():
    return parse_circuit(SAMPLE)


@pytest.mark.parametrize(
    "wire, expected",
    [
        ("x", 123),
        ("y", 456),
        ("d", 123 & 456),
        ("e", 123 | 456),
        ("f", 123 << 2),
        ("g", 456 >> 2),
        ("h", 0xFFFF ^ 123),
        ("i", 0xFFFF ^ 456),
    ],
)
def test_sample_wires(circuit, wire, expected):
    assert evaluate(circuit, wire) == expected


def test_override_replaces_wire(circuit):
    assert evaluate(circuit, "d", {"x": 1}) == 1 & 456


def test_order_of_lines_does_not_matter():
    assert part1("x -> a\n5 -> x\n") == 5


def test_numeric_left_operand():
    assert part1("1 AND b -> a\n7 -> b\n") == 1 & 7


def test_shift_is_truncated_to_16_bits():
    assert part1("65535 LSHIFT 1 -> a\n") == 0xFFFF ^ 1


def test_part2_defaults_to_part1_result():
    text = "123 -> b\nb LSHIFT 1 -> a\n"
    assert part1(text) == 123 << 1
    assert part2(text) == (123 << 1) << 1


def test_part2_explicit_value():
    text = "123 -> b\nb OR c -> a\n8 -> c\n"
    assert part2(text, 1) == 1 | 8


def test_cycle_is_rejected():
    with pytest.raises(ValueError):
        part1("b -> a\na -> b\n")


def test_unknown_wire_is_rejected():
    with pytest.raises(ValueError):
        part1("zz -> a\n")


@pytest.mark.parametrize("line", ["x XOR y -> z", "123 => a", "NOT -> a", "1 AND 2 -> A"])
def test_bad_lines_are_rejected(line):
    with pytest.raises(ValueError):
        parse_circuit(line)


def test_main_prints_both_parts(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("123 -> b\nb LSHIFT 1 -> a\n")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert out == f"part 1 wire a: {123 << 1}\npart 2 wire a: {(123 << 1) << 1}\n"