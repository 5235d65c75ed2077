"""Neutron multiplicity analysis of simulated detection time lists."""

from __future__ import annotations

import argparse
import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from os import PathLike

from .moments import factorial_moment, read_values

# Spontaneous fission multiplicity distribution.
SPONTANEOUS = (0.0631852, 0.2319644, 0.3333230, 0.2528207, 0.0986461, 0.0180199, 0.0020407)
# Induced fission multiplicity distribution.
INDUCED = (
    0.0062555, 0.0611921, 0.2265608, 0.3260637, 0.2588354,
    0.0956070, 0.0224705, 0.0025946, 0.0005205,
)
GATE_WIDTH = 100.0
HISTOGRAM_SIZE = 25
BACKGROUND_SAMPLES = 10_000_000
CROSS_TALK = 0.013044318
FISSIONS_PER_GRAM = 473.0
EMISSION_SCALE = 4308000.0
ROOT_INTERVAL = (-10000.0, 10000.0)
ROOT_TOLERANCE = 1e-6


@dataclass(frozen=True)
class MultiplicityResult:
    """Quantities obtained from solving the multiplicity equations."""

    fission_rate: float
    multiplication: float
    alpha: float
    efficiency: float
    singles: float
    doubles: float
    triples: float
    quadruples: float
    mass: float


def bisect(
    func: Callable[[float], float], low: float, high: float, tolerance: float
) -> tuple[float, float]:
    """Bracket a root of ``func`` in ``[low, high]`` to within ``tolerance``.

    Returns the final bracket; both ends are equal when a root is hit exactly.
    """
    if low >= high:
        raise ValueError(f"interval is empty or reversed: [{low}, {high}]")
    f_low = func(low)
    if f_low == 0:
        return low, low
    f_high = func(high)
    if f_high == 0:
        return high, high
    if (f_low < 0) == (f_high < 0):
        raise ValueError("function does not change sign over the interval")
    while abs(high - low) > tolerance:
        mid = (low + high) / 2
        if mid in (low, high):
            break
        f_mid = func(mid)
        if f_mid == 0:
            return mid, mid
        if (f_mid < 0) != (f_low < 0):
            high = mid
        else:
            low, f_low = mid, f_mid
    return low, high


def _window(times: Sequence[float]) -> tuple[int, int]:
    if not times:
        raise ValueError("no detection times")
    last = times[-1]
    return math.floor(last * 0.05), math.floor(last * 0.95)


def _first_index_at_or_after(times: Sequence[float], threshold: float) -> int:
    return next((i for i, t in enumerate(times) if t >= threshold), len(times))


def foreground_distribution(times: Sequence[float], gate: float, size: int) -> list[int]:
    """Histogram of the number of later events inside a gate opened at each event.

    Gates are opened at events between 5 % and 95 % of the last time.
    """
    start, stop = _window(times)
    counts = [0] * size
    i = _first_index_at_or_after(times, start)
    while i < len(times) and times[i] < stop:
        closes = times[i] + gate
        m = 0
        j = i + 1
        while j < len(times) and times[j] < closes:
            m += 1
            j += 1
        if m >= size:
            raise ValueError(f"{m} events in one gate exceed histogram size {size}")
        counts[m] += 1
        i += 1
    return counts


def background_distribution(
    times: Sequence[float], gate: float, size: int, samples: int
) -> list[int]:
    """Histogram of gate multiplicities counted over ``samples - 1`` background gates.

    The gate is fixed at the start of the window; once the events inside it
    are consumed, every further gate contributes a multiplicity of one.
    """
    start, _ = _window(times)
    counts = [0] * size
    draws = max(samples - 1, 0)
    if draws == 0:
        return counts
    if size < 2:
        raise ValueError(f"histogram size {size} is too small")
    i = _first_index_at_or_after(times, start)
    closes = start + gate
    m = 1
    while i < len(times) and times[i] < closes:
        m += 1
        i += 1
    if m >= size:
        raise ValueError(f"{m} events in one gate exceed histogram size {size}")
    counts[m] += 1
    counts[1] += draws - 1
    return counts


def _moments(weights: Sequence[float], norm: float) -> tuple[float, float, float, float]:
    return tuple(factorial_moment(weights, order) / norm for order in range(1, 5))  # type: ignore[return-value]


def analyze(times: Sequence[float], emitted: Sequence[float]) -> MultiplicityResult:
    """Solve the multiplicity equations for sorted detection times (ns)."""
    if not emitted:
        raise ValueError("no emitted neutron count")
    pu1, pu2, pu3, _ = (factorial_moment(SPONTANEOUS, k) for k in range(1, 5))
    pi1, pi2, pi3, _ = (factorial_moment(INDUCED, k) for k in range(1, 5))

    counts = foreground_distribution(times, GATE_WIDTH, HISTOGRAM_SIZE)
    total = sum(counts)
    measure_time = math.floor(times[-1] * 0.90) / 1e9
    if total == 0 or measure_time <= 0:
        raise ValueError("no gates fall inside the analysis window")
    singles = total / measure_time
    f1, f2, f3, _ = _moments(counts, total)

    background = background_distribution(times, GATE_WIDTH, HISTOGRAM_SIZE, BACKGROUND_SAMPLES)
    b1, b2, b3, _ = _moments(background, BACKGROUND_SAMPLES)

    doubles = singles * (f1 - b1)
    triples = singles * (f2 - b2 - 2 * b1 * (f1 - b1)) / 2
    quadruples = singles * (
        f3 - b3 - 3 * b1 * (f2 - b2) - 3 * b2 * (f1 - b1) + 6 * b1 * (f1 - b1) * (f1 - b1)
    ) / 6

    c = CROSS_TALK
    efficiency = len(times) / emitted[-1] / (1 + c)
    denominator = pu2 * pi3 - pu3 * pi2
    p_a = (
        -6 * (triples - 2 * c / (1 + c) * doubles + 2 * c**2 / (1 + c) ** 2 * singles)
        * pu2 * (pi1 - 1)
    ) / (efficiency**2 * (1 + c) ** 2 * singles * denominator)
    p_c = (
        6 * (doubles - c / (1 + c) * singles) * pu2 * pi2
        / (efficiency * (1 + c) * singles * denominator)
        - 1
    )

    def cubic(x: float) -> float:
        return x**3 + p_a * x**2 + p_c * x + 1.0

    multiplication, _ = bisect(cubic, *ROOT_INTERVAL, ROOT_TOLERANCE)
    fission_rate = 2 * (
        doubles / (efficiency * (1 + c))
        - c / (efficiency * (1 + c) ** 2 * singles)
        - multiplication * (multiplication - 1) * pi2 * singles / (pi1 - 1)
    ) / (efficiency * (1 + c) * multiplication**2 * pu2)
    alpha = singles / (fission_rate * efficiency * (1 + c) * pu1 * multiplication) - 1
    return MultiplicityResult(
        fission_rate=fission_rate,
        multiplication=multiplication,
        alpha=alpha,
        efficiency=efficiency,
        singles=singles,
        doubles=doubles,
        triples=triples,
        quadruples=quadruples,
        mass=fission_rate / FISSIONS_PER_GRAM,
    )


def analyze_files(
    list_path: str | PathLike[str], emit_path: str | PathLike[str]
) -> MultiplicityResult:
    """Analyse a detection time list file against an emitted-count file."""
    return analyze(read_values(list_path), read_values(emit_path))


def main(argv: Sequence[str] | None = None) -> int:
    """Print the multiplicity analysis of two data files."""
    parser = argparse.ArgumentParser(description="Neutron multiplicity analysis.")
    parser.add_argument("list_path", nargs="?", default="LIST.dat", help="detection times")
    parser.add_argument("emit_path", nargs="?", default="LIST_emit.dat", help="emitted counts")
    args = parser.parse_args(argv)
    emitted = read_values(args.emit_path)
    result = analyze(read_values(args.list_path), emitted)
    fields = [
        result.fission_rate, result.multiplication, result.alpha, result.efficiency,
        result.singles, result.doubles, result.triples, result.quadruples, result.mass,
        emitted[-1] / EMISSION_SCALE,
    ]
    print(" ".join(f"{value:g}" for value in fields))
    return 0