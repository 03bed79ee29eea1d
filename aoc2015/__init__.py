"""Solutions to days 1 to 16 of the 2015 Advent of Code puzzles, with MD5 and FNV-1a helpers."""

__version__ = "0.1.0"