"""Day 7: a circuit of 16-bit logic gates."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path

_MASK = 0xFFFF

_BINARY: dict[str, Callable[[int, int], int]] = {
    "AND": lambda left, right: left & right,
    "OR": lambda left, right: left | right,
    "LSHIFT": lambda left, right: (left << right) & _MASK,
    "RSHIFT": lambda left, right: left >> right,
}

Operand = int | str


@dataclass(frozen=True)
class _Gate:
    op: str
    inputs: tuple[Operand, ...]

    def wires(self) -> list[str]:
        return [arg for arg in self.inputs if isinstance(arg, str)]

    def compute(self, values: Mapping[str, int]) -> int:
        args = [values[arg] if isinstance(arg, str) else arg for arg in self.inputs]
        if self.op == "SET":
            return args[0] & _MASK
        if self.op == "NOT":
            return ~args[0] & _MASK
        return _BINARY[self.op](*args) & _MASK


def _operand(token: str) -> Operand:
    if token.isdigit():
        value = int(token)
        if value > _MASK:
            raise ValueError(f"signal {value} does not fit in 16 bits")
        return value
    if token.isalpha() and token.islower():
        return token
    raise ValueError(f"bad operand {token!r}")


def parse_circuit(text: str) -> dict[str, _Gate]:
    """Map each output wire to the gate that drives it."""
    circuit: dict[str, _Gate] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        expression, sep, target = line.partition(" -> ")
        target = target.strip()
        if not sep or not (target.isalpha() and target.islower()):
            raise ValueError(f"bad instruction: {line!r}")
        tokens = expression.split()
        if len(tokens) == 1:
            gate = _Gate("SET", (_operand(tokens[0]),))
        elif len(tokens) == 2 and tokens[0] == "NOT":
            gate = _Gate("NOT", (_operand(tokens[1]),))
        elif len(tokens) == 3 and tokens[1] in _BINARY:
            gate = _Gate(tokens[1], (_operand(tokens[0]), _operand(tokens[2])))
        else:
            raise ValueError(f"bad instruction: {line!r}")
        circuit[target] = gate
    return circuit


def evaluate(circuit: Mapping[str, _Gate], wire: str, overrides: Mapping[str, int] | None = None) -> int:
    """Signal on ``wire``; ``overrides`` fixes the signal of chosen wires."""
    values: dict[str, int] = dict(overrides or {})
    in_progress: set[str] = set()
    stack = [wire]
    while stack:
        name = stack[-1]
        if name in values:
            stack.pop()
            continue
        gate = circuit.get(name)
        if gate is None:
            raise ValueError(f"unknown wire {name!r}")
        pending = [arg for arg in gate.wires() if arg not in values]
        if pending:
            if name in in_progress:
                raise ValueError(f"wire {name!r} depends on itself")
            in_progress.add(name)
            stack.extend(pending)
            continue
        values[name] = gate.compute(values)
        in_progress.discard(name)
        stack.pop()
    return values[wire]


def part1(text: str) -> int:
    """Signal on wire ``a``."""
    return evaluate(parse_circuit(text), "a")


def part2(text: str, b_value: int | None = None) -> int:
    """Signal on ``a`` after wire ``b`` is forced to ``b_value`` (default: part 1's answer)."""
    circuit = parse_circuit(text)
    if b_value is None:
        b_value = evaluate(circuit, "a")
    return evaluate(circuit, "a", {"b": b_value})


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="day07", description="Logic gate circuit.")
    parser.add_argument("input", type=Path)
    args = parser.parse_args(argv)
    try:
        text = args.input.read_text()
    except OSError:
        raise SystemExit(f"cannot find file: {args.input}") from None
    first = part1(text)
    print(f"part 1 wire a: {first}")
    print(f"part 2 wire a: {part2(text, first)}")
    return 0