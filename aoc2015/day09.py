"""Day 9: shortest and longest routes visiting every place once."""

from __future__ import annotations

import argparse
import itertools
import re
from collections.abc import Iterator, Mapping
from pathlib import Path

_LINE = re.compile(r"^(\w+) to (\w+) = (\d+)$")

Distances = dict[str, dict[str, int]]


def parse_distances(text: str) -> Distances:
    """Parse lines such as ``London to Dublin = 464`` into a symmetric table."""
    distances: Distances = {}
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        match = _LINE.match(line)
        if match is None:
            raise ValueError(f"bad line: {line!r}")
        source, dest, value = match.groups()
        if source == dest:
            raise ValueError(f"route from a place to itself: {line!r}")
        dist = int(value)
        distances.setdefault(source, {})[dest] = dist
        distances.setdefault(dest, {})[source] = dist
    return distances


def _leg(distances: Mapping[str, Mapping[str, int]], source: str, dest: str) -> int:
    try:
        return distances[source][dest]
    except KeyError:
        raise ValueError(f"no distance known from {source!r} to {dest!r}") from None


def route_lengths(distances: Mapping[str, Mapping[str, int]]) -> Iterator[int]:
    """Length of every route through all places; a route and its reverse count once."""
    places = sorted(distances)
    for route in itertools.permutations(places):
        if route[0] > route[-1]:
            continue
        yield sum(_leg(distances, a, b) for a, b in zip(route, route[1:]))


def shortest_and_longest(text: str) -> tuple[int, int]:
    """Shortest and longest route lengths for the distances in ``text``."""
    lengths = list(route_lengths(parse_distances(text)))
    if not lengths:
        raise ValueError("no places given")
    return min(lengths), max(lengths)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="day09", description="Route lengths.")
    parser.add_argument("input", type=Path)
    args = parser.parse_args(argv)
    try:
        text = args.input.read_text()
    except OSError:
        raise SystemExit(f"cannot find file: {args.input}") from None
    shortest, longest = shortest_and_longest(text)
    print(f"min distance: {shortest}")
    print(f"max distance: {longest}")
    return 0