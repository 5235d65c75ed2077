"""Integer ranges, element-wise products and factorial moments of count distributions."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from os import PathLike
from pathlib import Path


def integer_range(start: int, stop: int) -> list[float]:
    """Return the values ``start, start + 1, ..., stop`` (both ends included)."""
    if stop < start - 1:
        raise ValueError(f"empty range is the lowest allowed: start={start}, stop={stop}")
    return [float(value) for value in range(start, stop + 1)]


def elementwise_product(*args: Sequence[float]) -> list[float]:
    """Multiply equally long sequences element by element."""
    if not args:
        raise ValueError("at least one sequence is required")
    length = len(args[0])
    if any(len(seq) != length for seq in args):
        raise ValueError("all sequences must have the same length")
    return [math.prod(values) for values in zip(*args)]


def factorial_moment(weights: Sequence[float], order: int) -> float:
    """Return ``sum(w[k] * k * (k - 1) * ... * (k - order + 1))`` over the index ``k``.

    Order 0 is the plain sum of the weights.
    """
    if order < 0:
        raise ValueError(f"order must not be negative, got {order}")
    size = len(weights)
    factors = [integer_range(-shift, size - 1 - shift) for shift in range(order)]
    return math.fsum(elementwise_product(weights, *factors))


def _parse_lines(lines: Iterable[str]) -> list[float]:
    values = []
    for number, line in enumerate(lines, start=1):
        fields = line.split()
        if not fields:
            continue
        try:
            values.append(float(fields[0]))
        except ValueError:
            raise ValueError(f"line {number}: not a number: {fields[0]!r}") from None
    return values


def read_values(path: str | PathLike[str]) -> list[float]:
    """Read the first number of every non-blank line of a text file."""
    with Path(path).open(encoding="utf-8") as stream:
        return _parse_lines(stream)