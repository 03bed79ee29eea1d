"""Day 6: a million lights switched by instructions."""

from __future__ import annotations

import argparse
import enum
import re
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

GRID_SIZE = 1000

_INSTRUCTION = re.compile(
    r"^(toggle|turn on|turn off) (\d+),(\d+) through (\d+),(\d+)$"
)


class Op(enum.Enum):
    TOGGLE = 0
    OFF = 1
    ON = 2


_OPS = {"toggle": Op.TOGGLE, "turn off": Op.OFF, "turn on": Op.ON}


@dataclass(frozen=True)
class Instruction:
    """One rectangle of lights and what to do to them (corners inclusive)."""

    op: Op
    start_row: int
    start_col: int
    end_row: int
    end_col: int


def parse_instruction(line: str) -> Instruction:
    """Parse a line such as ``turn on 0,0 through 999,999``."""
    match = _INSTRUCTION.match(line.strip())
    if match is None:
        raise ValueError(f"unprocessable line: {line!r}")
    op_name, *coords = match.groups()
    start_row, start_col, end_row, end_col = (int(value) for value in coords)
    for value in (start_row, start_col, end_row, end_col):
        if value >= GRID_SIZE:
            raise ValueError(f"coordinate {value} outside the {GRID_SIZE}x{GRID_SIZE} grid")
    return Instruction(_OPS[op_name], start_row, start_col, end_row, end_col)


def _instructions(text: str) -> Iterator[Instruction]:
    for line in text.splitlines():
        if line.strip():
            yield parse_instruction(line)


def part1(text: str) -> int:
    """Number of lights lit after on/off/toggle instructions."""
    rows = [0] * GRID_SIZE
    for ins in _instructions(text):
        width = ins.end_col - ins.start_col + 1
        if width <= 0:
            continue
        mask = ((1 << width) - 1) << ins.start_col
        for row in range(ins.start_row, ins.end_row + 1):
            if ins.op is Op.ON:
                rows[row] |= mask
            elif ins.op is Op.OFF:
                rows[row] &= ~mask
            else:
                rows[row] ^= mask
    return sum(row.bit_count() for row in rows)


def part2(text: str) -> int:
    """Total brightness when instructions raise and lower brightness."""
    grid = [[0] * GRID_SIZE for _ in range(GRID_SIZE)]
    for ins in _instructions(text):
        start, stop = ins.start_col, ins.end_col + 1
        if stop <= start:
            continue
        for row in grid[ins.start_row : ins.end_row + 1]:
            segment = row[start:stop]
            if ins.op is Op.ON:
                row[start:stop] = [value + 1 for value in segment]
            elif ins.op is Op.TOGGLE:
                row[start:stop] = [value + 2 for value in segment]
            else:
                row[start:stop] = [value - 1 if value else 0 for value in segment]
    return sum(sum(row) for row in grid)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="day06", description="Light grid.")
    parser.add_argument("input", type=Path)
    args = parser.parse_args(argv)
    try:
        text = args.input.read_text()
    except OSError:
        raise SystemExit(f"cannot find file: {args.input}") from None
    print(f"num lights on: {part1(text)}")
    print(f"brightness: {part2(text)}")
    return 0