"""Energy deposit bookkeeping and the end-of-run dose summary."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

# Dose units in gray, largest first.
DOSE_UNITS: tuple[tuple[str, float], ...] = (
    ("Gy", 1.0),
    ("milliGy", 1e-3),
    ("microGy", 1e-6),
    ("nanoGy", 1e-9),
    ("picoGy", 1e-12),
)

_GLOBAL_BANNER = "--------------------End of Global Run-----------------------"
_LOCAL_BANNER = "--------------------End of Local Run------------------------"
_RULE = "------------------------------------------------------------"


def _best_dose(value: float) -> str:
    """Format a dose in gray using the largest unit not above its magnitude."""
    magnitude = abs(value)
    if magnitude == 0:
        symbol, scale = DOSE_UNITS[0]
    else:
        symbol, scale = next(
            ((s, u) for s, u in DOSE_UNITS if u <= magnitude), DOSE_UNITS[-1]
        )
    return f"{value / scale:g} {symbol}"


@dataclass
class EnergyAccumulator:
    """Running sums of the energy deposit and of its square over events."""

    edep: float = 0.0
    edep2: float = 0.0

    def add(self, edep: float) -> None:
        """Add one event's deposit."""
        self.edep += edep
        self.edep2 += edep * edep

    def reset(self) -> None:
        """Return both sums to zero."""
        self.edep = 0.0
        self.edep2 = 0.0

    def merge(self, other: EnergyAccumulator) -> None:
        """Fold the sums of another accumulator into this one."""
        self.edep += other.edep
        self.edep2 += other.edep2

    def rms(self, events: int) -> float:
        """Spread of the total deposit over ``events`` events; never negative."""
        if events <= 0:
            raise ValueError(f"number of events must be positive, got {events}")
        spread = self.edep2 - self.edep * self.edep / events
        return math.sqrt(spread) if spread > 0 else 0.0


@dataclass
class EventDeposit:
    """Energy deposited during one event, handed to an accumulator at its end."""

    accumulator: EnergyAccumulator
    total: float = field(default=0.0)

    def begin(self) -> None:
        """Start a new event."""
        self.total = 0.0

    def add(self, edep: float) -> None:
        """Add the deposit of one step."""
        self.total += edep

    def end(self) -> None:
        """Pass the event's total to the accumulator."""
        self.accumulator.add(self.total)


def run_summary(
    events: int,
    accumulator: EnergyAccumulator,
    mass: float,
    condition: str = "",
    master: bool = True,
) -> str | None:
    """Return the end-of-run dose report, or None when the run had no events.

    Energies are in joules and ``mass`` in kilograms, so doses come out in gray.
    """
    if events == 0:
        return None
    if events < 0:
        raise ValueError(f"number of events must not be negative, got {events}")
    if mass <= 0:
        raise ValueError(f"scoring mass must be positive, got {mass}")
    dose = accumulator.edep / mass
    rms_dose = accumulator.rms(events) / mass
    banner = _GLOBAL_BANNER if master else _LOCAL_BANNER
    return (
        f"\n{banner}\n"
        f" The run consists of {events} {condition}\n"
        f" Cumulated dose per run, in scoring volume : "
        f"{_best_dose(dose)} rms = {_best_dose(rms_dose)}\n"
        f"{_RULE}\n\n"
    )