"""Day 14: reindeer racing."""

from __future__ import annotations

import argparse
import re
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

RACE_SECONDS = 2503

_LINE = re.compile(
    r"^(\w+) can fly (\d+) km/s for (\d+) seconds?, "
    r"but then must rest for (\d+) seconds?\.$"
)


@dataclass(frozen=True)
class Reindeer:
    """A reindeer that alternates flying at ``speed`` with resting."""

    speed: int
    exert_seconds: int
    rest_seconds: int
    name: str = ""

    def __post_init__(self) -> None:
        if self.exert_seconds + self.rest_seconds <= 0:
            raise ValueError("a reindeer's cycle must last at least one second")

    def distance(self, seconds: int) -> int:
        """Kilometres flown after ``seconds`` seconds."""
        cycle = self.exert_seconds + self.rest_seconds
        cycles, leftover = divmod(seconds, cycle)
        flying = cycles * self.exert_seconds + min(leftover, self.exert_seconds)
        return self.speed * flying


def parse_reindeer(text: str) -> list[Reindeer]:
    """Parse lines such as ``Comet can fly 13 km/s for 7 seconds, ...``."""
    herd = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        match = _LINE.match(line)
        if match is None:
            raise ValueError(f"bad line: {line!r}")
        name, speed, exert, rest = match.groups()
        herd.append(Reindeer(int(speed), int(exert), int(rest), name))
    return herd


def part1(reindeer: Sequence[Reindeer], seconds: int = RACE_SECONDS) -> int:
    """Distance covered by the winning reindeer."""
    if not reindeer:
        raise ValueError("no reindeer")
    return max(deer.distance(seconds) for deer in reindeer)


def part2(reindeer: Sequence[Reindeer], seconds: int = RACE_SECONDS) -> int:
    """Points of the winner when every leader scores a point each second."""
    if not reindeer:
        raise ValueError("no reindeer")
    scores = [0] * len(reindeer)
    for t in range(1, seconds + 1):
        distances = [deer.distance(t) for deer in reindeer]
        lead = max(distances)
        for index, dist in enumerate(distances):
            if dist == lead:
                scores[index] += 1
    return max(scores)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="day14", description="Reindeer race.")
    parser.add_argument("input", type=Path)
    args = parser.parse_args(argv)
    try:
        text = args.input.read_text()
    except OSError:
        raise SystemExit(f"cannot find file: {args.input}") from None
    herd = parse_reindeer(text)
    print(f"max distance: {part1(herd)}")
    print(f"max score: {part2(herd)}")
    return 0