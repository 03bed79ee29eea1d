"""Day 10: the look-and-say sequence."""

from __future__ import annotations

import argparse
import re
from pathlib import Path

_RUN = re.compile(r"([0-9])\1*")
_DIGITS = frozenset("0123456789")


def look_and_say(digits: str) -> str:
    """Describe ``digits`` as runs: ``"1211"`` becomes ``"111221"``."""
    if not digits or not _DIGITS.issuperset(digits):
        raise ValueError(f"expected a non-empty string of digits, got {digits!r}")
    parts = []
    for match in _RUN.finditer(digits):
        run = match.group()
        if len(run) > 9:
            raise ValueError("run of more than nine equal digits")
        parts.append(f"{len(run)}{run[0]}")
    return "".join(parts)


def sequence_lengths(seed: str, iterations: int) -> list[int]:
    """Length of the sequence after each of ``iterations`` rounds."""
    if iterations < 0:
        raise ValueError("iterations must not be negative")
    lengths = []
    current = seed
    for _ in range(iterations):
        current = look_and_say(current)
        lengths.append(len(current))
    return lengths


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="day10", description="Look-and-say lengths.")
    parser.add_argument("input", type=Path)
    args = parser.parse_args(argv)
    try:
        text = args.input.read_text()
    except OSError:
        raise SystemExit(f"cannot find file: {args.input}") from None
    lines = text.splitlines()
    seed = lines[0].strip() if lines else ""
    lengths = sequence_lengths(seed, 50)
    print(f"buf len @ 40: {lengths[39]}")
    print(f"buf len @ 50: {lengths[49]}")
    return 0