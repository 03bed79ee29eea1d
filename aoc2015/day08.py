"""Day 8: size of string literals in code versus in memory."""

from __future__ import annotations

import argparse
from pathlib import Path


def part1(text: str) -> int:
    """Characters of code minus characters in memory, over all literals."""
    diff = 0
    chars = iter(text)
    for ch in chars:
        if ch == "\\":
            diff += 3 if next(chars, "") == "x" else 1
        elif ch == '"':
            diff += 1
    return diff


def part2(text: str) -> int:
    """Characters needed to re-encode each literal minus its code length."""
    return sum(
        2 + line.count("\\") + line.count('"') for line in text.splitlines() if line
    )


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="day08", description="String literal sizes.")
    parser.add_argument("input", type=Path)
    args = parser.parse_args(argv)
    try:
        text = args.input.read_text()
    except OSError:
        raise SystemExit(f"cannot find file: {args.input}") from None
    print(f"code - chars = {part1(text)}")
    print(f"chars - code = {part2(text)}")
    return 0