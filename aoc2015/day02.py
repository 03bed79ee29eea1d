"""Day 2: wrapping paper and ribbon for presents."""

from __future__ import annotations

import argparse
from pathlib import Path

Box = tuple[int, int, int]


def parse_boxes(text: str) -> list[Box]:
    """Parse lines of the form ``LxWxH``."""
    boxes = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        parts = line.split("x")
        if len(parts) != 3:
            raise ValueError(f"expected LxWxH, got {line!r}")
        length, width, height = (int(part) for part in parts)
        boxes.append((length, width, height))
    return boxes


def paper(dims: Box) -> int:
    """Surface area plus the area of the smallest side."""
    length, width, height = dims
    areas = (length * width, length * height, width * height)
    return 2 * sum(areas) + min(areas)


def ribbon(dims: Box) -> int:
    """Smallest perimeter plus the volume."""
    length, width, height = dims
    smallest_perimeter = 2 * (length + width + height - max(dims))
    return smallest_perimeter + length * width * height


def total_paper(text: str) -> int:
    return sum(paper(box) for box in parse_boxes(text))


def total_ribbon(text: str) -> int:
    return sum(ribbon(box) for box in parse_boxes(text))


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="day02", description="Paper and ribbon totals.")
    parser.add_argument("input", type=Path)
    args = parser.parse_args(argv)
    try:
        text = args.input.read_text()
    except OSError:
        raise SystemExit(f"cannot find file: {args.input}") from None
    print(f"paper: {total_paper(text)}")
    print(f"ribbon: {total_ribbon(text)}")
    return 0