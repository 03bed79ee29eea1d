"""Day 16: finding the aunt Sue who sent the gift."""

from __future__ import annotations

import argparse
import re
from dataclasses import dataclass, fields
from pathlib import Path

_LINE = re.compile(r"^Sue (\d+): (.*)$")
_PROPERTY = re.compile(r"^(\w+): (\d+)$")

CORRECT = {
    "children": 3,
    "cats": 7,
    "samoyeds": 2,
    "pomeranians": 3,
    "akitas": 0,
    "vizslas": 0,
    "goldfish": 5,
    "trees": 3,
    "cars": 2,
    "perfumes": 1,
}

_MORE_THAN = frozenset({"cats", "trees"})
_FEWER_THAN = frozenset({"pomeranians", "goldfish"})


@dataclass(frozen=True)
class Sue:
    """What is remembered about one aunt; ``None`` marks an unknown property."""

    number: int
    children: int | None = None
    cats: int | None = None
    samoyeds: int | None = None
    pomeranians: int | None = None
    akitas: int | None = None
    vizslas: int | None = None
    goldfish: int | None = None
    trees: int | None = None
    cars: int | None = None
    perfumes: int | None = None

    def known(self) -> dict[str, int]:
        """The properties whose value is remembered."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name != "number" and getattr(self, f.name) is not None
        }


def parse_sue(line: str) -> Sue:
    """Parse a line such as ``Sue 2: akitas: 9, children: 3, samoyeds: 9``."""
    match = _LINE.match(line.strip())
    if match is None:
        raise ValueError(f"bad line: {line!r}")
    number, rest = match.groups()
    values: dict[str, int] = {}
    for item in rest.split(", "):
        prop = _PROPERTY.match(item.strip())
        if prop is None:
            raise ValueError(f"bad property {item!r}")
        name, value = prop.groups()
        if name not in CORRECT:
            raise ValueError(f"unknown property {name!r}")
        values[name] = int(value)
    return Sue(int(number), **values)


def matches(sue: Sue) -> bool:
    """Every remembered property equals the reading."""
    return all(CORRECT[name] == value for name, value in sue.known().items())


def matches_ranges(sue: Sue) -> bool:
    """Cats and trees read as lower bounds, pomeranians and goldfish as upper bounds."""
    for name, value in sue.known().items():
        target = CORRECT[name]
        if name in _MORE_THAN:
            ok = value > target
        elif name in _FEWER_THAN:
            ok = value < target
        else:
            ok = value == target
        if not ok:
            return False
    return True


def find_sues(text: str) -> tuple[list[int], list[int]]:
    """Numbers of the Sues matching exactly, and matching with ranges."""
    sues = [parse_sue(line) for line in text.splitlines() if line.strip()]
    return (
        [sue.number for sue in sues if matches(sue)],
        [sue.number for sue in sues if matches_ranges(sue)],
    )


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="day16", description="Find aunt Sue.")
    parser.add_argument("input", type=Path)
    args = parser.parse_args(argv)
    try:
        text = args.input.read_text()
    except OSError:
        raise SystemExit(f"cannot open file: {args.input}") from None
    exact, ranged = find_sues(text)
    if not exact or not ranged:
        raise SystemExit("no matching Sue found")
    for number in exact:
        print(f"Sue #{number} matches part 1")
    for number in ranged:
        print(f"Sue #{number} matches part 2")
    return 0