"""A collection of planets evolving under mutual gravity."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Iterator

from orbitsim.physics import Newton, PlanetState

logger = logging.getLogger(__name__)


def _divide(numerator: float, denominator: float) -> float:
    """Divide like IEEE arithmetic: a zero denominator gives infinity or NaN."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def _accurate_sum(values: Iterable[float]) -> float:
    values = list(values)
    try:
        return math.fsum(values)
    except (ValueError, OverflowError):
        return sum(values)


def _merge(a: PlanetState, b: PlanetState) -> PlanetState:
    """Perfectly inelastic merge of two colliding planets."""
    mass = a.m + b.m
    heavier = a if a.m > b.m else b
    return PlanetState(
        mass,
        _divide(a.m * a.x + b.m * b.x, mass),
        _divide(a.m * a.y + b.m * b.y, mass),
        _divide(a.m * a.v_x + b.m * b.v_x, mass),
        _divide(a.m * a.v_y + b.m * b.v_y, mass),
        math.hypot(a.r, b.r),
        heavier.texture_name,
        heavier.texture,
    )


class Universe:
    """Planets that attract each other and merge when they touch."""

    def __init__(self, newton: Newton) -> None:
        self.newton = newton
        self._planets: list[PlanetState] = []
        self.initial_energy = 0.0
        self.kinetic_energy = 0.0
        self.potential_energy = 0.0
        self.mechanical_energy = 0.0
        self.lost_energy = 0.0
        self.total_energy = 0.0

    def add(self, planet: PlanetState) -> None:
        """Append a planet."""
        self._planets.append(planet)

    def remove(self, planet: PlanetState) -> None:
        """Remove the first planet equal to ``planet``; do nothing if absent."""
        if planet in self._planets:
            self._planets.remove(planet)

    def clear(self) -> None:
        self._planets.clear()

    def __len__(self) -> int:
        return len(self._planets)

    def __getitem__(self, index: int) -> PlanetState:
        return self._planets[index]

    def __iter__(self) -> Iterator[PlanetState]:
        return iter(self._planets)

    def state(self) -> list[PlanetState]:
        """The planets in order, as a new list."""
        return list(self._planets)

    def evolve(self, delta_t: float) -> None:
        """Merge colliding planets, then advance every planet by ``delta_t``."""
        if not self._planets:
            raise ValueError("cannot evolve an empty universe")
        snapshot = list(self._planets)
        self._merge_collisions(snapshot)
        self._planets = [
            self._advance(planet, *self._net_force(planet, snapshot), delta_t)
            for planet in snapshot
        ]

    def find_nearest_planet(self, point: tuple[float, float]) -> int | None:
        """Index of the planet whose centre is closest to ``point``.

        Returns ``None`` when the universe is empty.
        """
        if not self._planets:
            return None
        px, py = point
        index, _ = min(
            enumerate(self._planets),
            key=lambda item: math.hypot(item[1].x - px, item[1].y - py),
        )
        return index

    def calculate_energy(self) -> None:
        """Recompute the kinetic, potential, mechanical and total energies."""
        kinetic_terms = [
            0.5 * p.m * (p.v_x * p.v_x + p.v_y * p.v_y) for p in self._planets
        ]
        g = self.newton.gravitational_constant
        potential_terms = [
            _divide(g * a.m * b.m, math.hypot(a.x - b.x, a.y - b.y))
            for a in self._planets
            for b in self._planets
            if a != b
        ]
        self.kinetic_energy = _accurate_sum(kinetic_terms) * 1e3
        self.potential_energy = _accurate_sum(potential_terms) / 2 * -1e3
        self.mechanical_energy = self.kinetic_energy + self.potential_energy
        self.total_energy = self.mechanical_energy + self.lost_energy

    def set_initial_energy(self) -> None:
        """Take the current total energy as reference and reset the losses."""
        self.initial_energy = self.total_energy
        self.lost_energy = 0.0

    def _net_force(
        self, planet: PlanetState, others: Iterable[PlanetState]
    ) -> tuple[float, float]:
        f_x = f_y = 0.0
        for other in others:
            dx, dy = self.newton.force(planet, other)
            f_x += dx
            f_y += dy
        return f_x, f_y

    @staticmethod
    def _advance(
        planet: PlanetState, f_x: float, f_y: float, delta_t: float
    ) -> PlanetState:
        a_x = _divide(f_x, planet.m)
        a_y = _divide(f_y, planet.m)
        return PlanetState(
            planet.m,
            planet.x + planet.v_x * delta_t + 0.5 * a_x * delta_t * delta_t,
            planet.y + planet.v_y * delta_t + 0.5 * a_y * delta_t * delta_t,
            planet.v_x + a_x * delta_t,
            planet.v_y + a_y * delta_t,
            planet.r,
            planet.texture_name,
            planet.texture,
        )

    def _merge_collisions(self, planets: list[PlanetState]) -> None:
        """Merge touching pairs in ``planets`` in place, tracking lost energy."""
        i = 0
        while i < len(planets) - 1:
            j = i + 1
            while j < len(planets):
                a, b = planets[i], planets[j]
                if self.newton.distance_squared(a, b) <= self.newton.min_distance_squared(a, b):
                    merged = _merge(a, b)
                    self.calculate_energy()
                    before = self.total_energy
                    del planets[j]
                    del planets[i]
                    planets.append(merged)
                    self._planets = list(planets)
                    self.calculate_energy()
                    after = self.total_energy
                    logger.debug("collision: energy %s -> %s", before, after)
                    self.lost_energy += before - after
                j += 1
            i += 1