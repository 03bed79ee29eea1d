"""Day 4: mine AdventCoins by finding MD5 hashes with leading zeros."""

from __future__ import annotations

import argparse
import hashlib
import itertools
from pathlib import Path

KEY_LENGTH = 16


def read_key(text: str) -> str:
    """Extract the secret key: the lower-case letters of the input."""
    key = "".join(ch for ch in text if "a" <= ch <= "z")
    if len(key) > KEY_LENGTH:
        raise ValueError(f"key longer than {KEY_LENGTH} characters")
    return key


def find_suffix(key: str, zeros: int) -> int:
    """Smallest positive number whose hash with ``key`` starts with ``zeros`` hex zeros."""
    if not 0 <= zeros <= 32:
        raise ValueError("zeros must be between 0 and 32")
    prefix = "0" * zeros
    for number in itertools.count(1):
        if hashlib.md5(f"{key}{number}".encode()).hexdigest().startswith(prefix):
            return number
    raise AssertionError("unreachable")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="day04", description="AdventCoin mining.")
    parser.add_argument("input", type=Path)
    args = parser.parse_args(argv)
    try:
        text = args.input.read_text()
    except OSError:
        raise SystemExit(f"cannot find file: {args.input}") from None
    key = read_key(text)
    print(f"first with 5 zeros: {find_suffix(key, 5)}")
    print(f"first with 6 zeros: {find_suffix(key, 6)}")
    return 0