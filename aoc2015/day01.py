"""Day 1: follow parentheses up and down the floors."""

from __future__ import annotations

import argparse
from pathlib import Path


def final_floor(text: str) -> int:
    """Floor reached after following every instruction."""
    return text.count("(") - text.count(")")


def first_basement(text: str) -> int:
    """1-based position of the character that first reaches floor -1, or 0."""
    floor = 0
    for position, ch in enumerate(text, start=1):
        if ch == "(":
            floor += 1
        elif ch == ")":
            floor -= 1
            if floor == -1:
                return position
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="day01", description="Floor instructions.")
    parser.add_argument("input", type=Path)
    args = parser.parse_args(argv)
    try:
        text = args.input.read_text()
    except OSError:
        raise SystemExit(f"cannot find file: {args.input}") from None
    print(f"final floor = {final_floor(text)}")
    print(f"first basement = {first_basement(text)}")
    return 0