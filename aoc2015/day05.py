"""Day 5: naughty or nice strings."""

from __future__ import annotations

import argparse
import re
from pathlib import Path

_VOWELS = frozenset("aeiou")
_FORBIDDEN = ("ab", "cd", "pq", "xy")
_REPEATED_PAIR = re.compile(r"(..).*\1")
_SANDWICH = re.compile(r"(.).\1")


def is_nice(line: str) -> bool:
    """Three vowels, a doubled letter, and none of the forbidden pairs."""
    enough_vowels = sum(ch in _VOWELS for ch in line) >= 3
    has_double = any(a == b for a, b in zip(line, line[1:]))
    clean = not any(pair in line for pair in _FORBIDDEN)
    return enough_vowels and has_double and clean


def is_nice_v2(line: str) -> bool:
    """A pair appearing twice without overlap, and a letter repeated with one between."""
    return bool(_REPEATED_PAIR.search(line)) and bool(_SANDWICH.search(line))


def part1(text: str) -> int:
    return sum(is_nice(line) for line in text.splitlines())


def part2(text: str) -> int:
    return sum(is_nice_v2(line) for line in text.splitlines())


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="day05", description="Count nice strings.")
    parser.add_argument("input", type=Path)
    args = parser.parse_args(argv)
    try:
        text = args.input.read_text()
    except OSError:
        raise SystemExit(f"cannot find file: {args.input}") from None
    print(f"part 1 num nice: {part1(text)}")
    print(f"part 2 num nice: {part2(text)}")
    return 0