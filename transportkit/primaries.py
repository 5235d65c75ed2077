"""Envelope geometry and the primary particle gun that fires into it."""

from __future__ import annotations

import random
import warnings
from dataclasses import dataclass, field

# Lengths are in millimetres, energies in MeV.
CENTIMETRE = 10.0
WORLD_MARGIN = 1.2


class EnvelopeWarning(UserWarning):
    """Issued when no envelope box is known and the gun is placed at the centre."""


@dataclass(frozen=True)
class Envelope:
    """Box-shaped envelope volume, centred at the origin."""

    size_xy: float
    size_z: float
    material: str = "G4_WATER"

    def __post_init__(self) -> None:
        if self.size_xy <= 0 or self.size_z <= 0:
            raise ValueError(
                f"envelope sizes must be positive, got {self.size_xy} x {self.size_z}"
            )

    @property
    def half_lengths(self) -> tuple[float, float, float]:
        """Half lengths of the box along x, y and z."""
        return self.size_xy / 2, self.size_xy / 2, self.size_z / 2

    @property
    def world_size(self) -> tuple[float, float]:
        """Transverse and longitudinal size of the surrounding world box."""
        return WORLD_MARGIN * self.size_xy, WORLD_MARGIN * self.size_z


def default_envelope() -> Envelope:
    """The standard water envelope of 20 cm x 20 cm x 30 cm."""
    return Envelope(size_xy=20 * CENTIMETRE, size_z=30 * CENTIMETRE)


@dataclass(frozen=True)
class Vertex:
    """One primary particle ready to be tracked."""

    particle: str
    energy: float
    position: tuple[float, float, float]
    direction: tuple[float, float, float]


@dataclass
class PrimaryGenerator:
    """Particle gun firing along +z from the upstream face of the envelope.

    The transverse start point is uniform over ``spread`` of the envelope's
    x-y extent.
    """

    envelope: Envelope | None = field(default_factory=default_envelope)
    particle: str = "gamma"
    energy: float = 6.0
    direction: tuple[float, float, float] = (0.0, 0.0, 1.0)
    spread: float = 0.8

    def generate(self, rng: random.Random | None = None) -> Vertex:
        """Draw the start point of one primary and return its vertex."""
        rng = rng if rng is not None else random.Random()
        if self.envelope is None:
            warnings.warn(
                "Envelope volume of box shape not found. "
                "Perhaps you have changed geometry. "
                "The gun will be place at the center.",
                EnvelopeWarning,
                stacklevel=2,
            )
            size_xy = size_z = 0.0
        else:
            size_xy, size_z = self.envelope.size_xy, self.envelope.size_z
        x0 = self.spread * size_xy * (rng.random() - 0.5)
        y0 = self.spread * size_xy * (rng.random() - 0.5)
        z0 = -0.5 * size_z
        return Vertex(
            particle=self.particle,
            energy=self.energy,
            position=(x0, y0, z0),
            direction=self.direction,
        )