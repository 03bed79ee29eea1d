"""Day 11: Santa's next password."""

from __future__ import annotations

import argparse
import re
from pathlib import Path

_FORBIDDEN = frozenset("iol")
_LOWER = re.compile(r"^[a-z]+$")
_TWO_PAIRS = re.compile(r"(.)\1.*(.)\2")


def _check(password: str) -> None:
    if not _LOWER.match(password):
        raise ValueError(f"password must be lower-case letters, got {password!r}")


def increment_password(password: str) -> str:
    """Next string in order, counting with letters: ``xz`` becomes ``ya``."""
    _check(password)
    stem = password.rstrip("z")
    if not stem:
        raise ValueError(f"password {password!r} cannot be incremented")
    wrapped = len(password) - len(stem)
    return stem[:-1] + chr(ord(stem[-1]) + 1) + "a" * wrapped


def has_straight(password: str) -> bool:
    """True if three consecutive letters run upward, like ``abc``."""
    return any(
        ord(b) - ord(a) == 1 and ord(c) - ord(b) == 1
        for a, b, c in zip(password, password[1:], password[2:])
    )


def no_iol(password: str) -> bool:
    """True if none of the confusing letters i, o, l appear."""
    return _FORBIDDEN.isdisjoint(password)


def double_double(password: str) -> bool:
    """True if two non-overlapping pairs of equal letters appear."""
    return _TWO_PAIRS.search(password) is not None


def is_valid(password: str) -> bool:
    return has_straight(password) and no_iol(password) and double_double(password)


def next_password(password: str) -> str:
    """First valid password strictly after ``password``."""
    candidate = increment_password(password)
    while True:
        bad = next((pos for pos, ch in enumerate(candidate) if ch in _FORBIDDEN), None)
        if bad is not None:
            # Every string until this letter changes keeps the forbidden letter.
            tail = len(candidate) - bad - 1
            candidate = candidate[:bad] + chr(ord(candidate[bad]) + 1) + "a" * tail
            continue
        if is_valid(candidate):
            return candidate
        candidate = increment_password(candidate)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="day11", description="Next passwords.")
    parser.add_argument("input", type=Path)
    args = parser.parse_args(argv)
    try:
        text = args.input.read_text()
    except OSError:
        raise SystemExit(f"cannot find file: {args.input}") from None
    lines = text.splitlines()
    current = lines[0].strip() if lines else ""
    first = next_password(current)
    print(f"first password is: {first}")
    print(f"second password is: {next_password(first)}")
    return 0