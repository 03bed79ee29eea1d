"""Day 15: the best-scoring cookie recipe for a fixed set of ingredients."""

from __future__ import annotations

import argparse

TEASPOONS = 100
CALORIE_TARGET = 500


def _check(amounts: tuple[int, ...]) -> None:
    if any(amount < 0 for amount in amounts):
        raise ValueError("ingredient amounts must not be negative")
    if sum(amounts) != TEASPOONS:
        raise ValueError(f"a recipe must use exactly {TEASPOONS} teaspoons")


def cookie_score(sprinkles: int, butterscotch: int, chocolate: int, candy: int) -> int:
    """Product of the non-negative capacity, durability, flavor and texture."""
    _check((sprinkles, butterscotch, chocolate, candy))
    capacity = 2 * sprinkles
    durability = 5 * butterscotch - candy
    flavor = -2 * sprinkles - 3 * butterscotch + 5 * chocolate
    texture = -chocolate + 5 * candy
    score = 1
    for prop in (capacity, durability, flavor, texture):
        score *= max(prop, 0)
    return score


def _calories(sprinkles: int, butterscotch: int, chocolate: int, candy: int) -> int:
    return 3 * sprinkles + 3 * butterscotch + 8 * chocolate + 8 * candy


def _recipes():
    for chocolate in range(TEASPOONS + 1):
        for candy in range(TEASPOONS + 1 - chocolate):
            for butterscotch in range(TEASPOONS + 1 - chocolate - candy):
                sprinkles = TEASPOONS - chocolate - candy - butterscotch
                yield sprinkles, butterscotch, chocolate, candy


def best_scores() -> tuple[int, int]:
    """Best score overall, and best score among recipes of exactly 500 calories."""
    best = best_at_target = 0
    for recipe in _recipes():
        score = cookie_score(*recipe)
        best = max(best, score)
        if _calories(*recipe) == CALORIE_TARGET:
            best_at_target = max(best_at_target, score)
    return best, best_at_target


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="day15", description="Cookie recipes.")
    parser.parse_args(argv)
    best, best_at_target = best_scores()
    print(f"best overall score: {best}")
    print(f"best with {CALORIE_TARGET} calories: {best_at_target}")
    return 0