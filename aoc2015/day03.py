"""Day 3: houses visited while delivering presents."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from pathlib import Path

_MOVES = {"<": (-1, 0), ">": (1, 0), "^": (0, 1), "v": (0, -1)}


def _directions(text: str) -> str:
    directions = text.strip()
    for ch in directions:
        if ch not in _MOVES:
            raise ValueError(f"unexpected direction {ch!r}")
    return directions


def _positions(directions: str) -> Iterator[tuple[int, int]]:
    x = y = 0
    yield x, y
    for ch in directions:
        dx, dy = _MOVES[ch]
        x += dx
        y += dy
        yield x, y


def part1(text: str) -> int:
    """Number of houses that receive at least one present."""
    return len(set(_positions(_directions(text))))


def part2(text: str) -> int:
    """Houses visited when Santa and a robot take turns moving."""
    directions = _directions(text)
    if len(directions) % 2:
        raise ValueError("directions must come in pairs")
    visited = set(_positions(directions[0::2])) | set(_positions(directions[1::2]))
    return len(visited)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="day03", description="Houses visited.")
    parser.add_argument("input", type=Path)
    args = parser.parse_args(argv)
    try:
        text = args.input.read_text()
    except OSError:
        raise SystemExit(f"cannot find file: {args.input}") from None
    print(f"part 1 lucky houses: {part1(text)}")
    print(f"part 2 lucky houses: {part2(text)}")
    return 0