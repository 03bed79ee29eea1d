"""Day 13: seating guests around a table for the most happiness."""

from __future__ import annotations

import argparse
import itertools
import re
from collections.abc import Sequence
from pathlib import Path

_LINE = re.compile(
    r"^(\w+) would (gain|lose) (\d+) happiness units? by sitting next to (\w+)\.$"
)

Matrix = list[list[int]]


def parse_happiness(text: str) -> Matrix:
    """Square matrix where ``m[a][b]`` is how much ``a`` likes sitting by ``b``.

    Guests are numbered in the order they first appear.
    """
    entries: list[tuple[str, str, int]] = []
    names: dict[str, int] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        match = _LINE.match(line)
        if match is None:
            raise ValueError(f"bad line: {line!r}")
        who, sign, amount, neighbour = match.groups()
        if who == neighbour:
            raise ValueError(f"guest sits next to themself: {line!r}")
        value = int(amount) if sign == "gain" else -int(amount)
        for name in (who, neighbour):
            names.setdefault(name, len(names))
        entries.append((who, neighbour, value))
    matrix = [[0] * len(names) for _ in names]
    for who, neighbour, value in entries:
        matrix[names[who]][names[neighbour]] = value
    return matrix


def _pair(matrix: Sequence[Sequence[int]], a: int, b: int) -> int:
    return matrix[a][b] + matrix[b][a]


def part1(matrix: Sequence[Sequence[int]]) -> int:
    """Best total happiness with everyone round a circular table."""
    size = len(matrix)
    if size == 0:
        raise ValueError("no guests")
    best = None
    for rest in itertools.permutations(range(1, size)):
        order = (0, *rest)
        score = sum(_pair(matrix, order[k], order[(k + 1) % size]) for k in range(size))
        best = score if best is None else max(best, score)
    return best


def part2(matrix: Sequence[Sequence[int]]) -> int:
    """Best total when a neutral extra guest joins: the circle opens into a line."""
    size = len(matrix)
    if size == 0:
        raise ValueError("no guests")
    return max(
        sum(_pair(matrix, a, b) for a, b in zip(order, order[1:]))
        for order in itertools.permutations(range(size))
    )


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="day13", description="Seating happiness.")
    parser.add_argument("input", type=Path)
    args = parser.parse_args(argv)
    try:
        text = args.input.read_text()
    except OSError:
        raise SystemExit(f"cannot find file: {args.input}") from None
    matrix = parse_happiness(text)
    print(f"SCORE = {part1(matrix)}")
    print(f"SCORE = {part2(matrix)}")
    return 0