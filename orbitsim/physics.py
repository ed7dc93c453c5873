"""Planet state and Newtonian gravity between pairs of planets."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

GRAVITATIONAL_CONSTANT = 6.67430 * 3.6 * 3.6 * 1e-5
"""G expressed in gigametres, mass units and hours."""


@dataclass(slots=True)
class PlanetState:
    """Mass, position, velocity and radius of one planet.

    Two states are equal when their numeric fields are equal; the texture
    name and the loaded texture take no part in the comparison.
    """

    m: float = 0.0
    x: float = 0.0
    y: float = 0.0
    v_x: float = 0.0
    v_y: float = 0.0
    r: float = 0.0
    texture_name: str = field(default="", compare=False)
    texture: Any = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class Newton:
    """Newtonian gravity with a configurable gravitational constant."""

    gravitational_constant: float = GRAVITATIONAL_CONSTANT

    def force(self, a: PlanetState, b: PlanetState) -> tuple[float, float]:
        """Return the force that ``b`` exerts on ``a`` as ``(f_x, f_y)``.

        Coincident planets exert no force on each other.
        """
        distance_squared = self.distance_squared(a, b)
        if distance_squared == 0:
            return 0.0, 0.0
        magnitude = self.gravitational_constant * a.m * b.m / distance_squared
        distance = math.sqrt(distance_squared)
        return (
            magnitude * (b.x - a.x) / distance,
            magnitude * (b.y - a.y) / distance,
        )

    def distance_squared(self, a: PlanetState, b: PlanetState) -> float:
        """Squared distance between the centres of two planets."""
        return (a.x - b.x) * (a.x - b.x) + (a.y - b.y) * (a.y - b.y)

    def min_distance_squared(self, a: PlanetState, b: PlanetState) -> float:
        """Squared distance at which two planets touch."""
        return (a.r + b.r) * (a.r + b.r)