"""Day 12: summing the numbers in a JSON document."""

from __future__ import annotations

import argparse
import json
import re
from pathlib import Path

_NUMBER = re.compile(r"-?\d+")


def sum_numbers(text: str) -> int:
    """Sum of every integer written anywhere in ``text``."""
    return sum(int(match) for match in _NUMBER.findall(text))


def _score(value) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, list):
        return sum(_score(item) for item in value)
    if isinstance(value, dict):
        if "red" in value or "red" in value.values():
            return 0
        return sum(_score(item) for item in value.values())
    return 0


def sum_non_red(text: str) -> int:
    """Sum of the numbers, ignoring any object that holds the string ``red``."""
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON: {exc}") from None
    return _score(document)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="day12", description="Sum JSON numbers.")
    parser.add_argument("input", type=Path)
    args = parser.parse_args(argv)
    try:
        text = args.input.read_text()
    except OSError:
        raise SystemExit(f"cannot find file: {args.input}") from None
    print(f"sum = {sum_numbers(text)}")
    print(f"sum = {sum_non_red(text)}")
    return 0