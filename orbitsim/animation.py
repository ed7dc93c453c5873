"""The animation screen: evolving the universe and following planets."""

from __future__ import annotations

import datetime
from collections.abc import Callable

import pygame

from orbitsim.drawing import draw_planet
from orbitsim.physics import PlanetState
from orbitsim.universe import Universe

DAYS_PER_MONTH = 730
MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

STEPS_PER_FRAME = 100
TIME_STEP = 0.01
CAMERA_STEP = 5
CENTER = (400, 400)

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
TRAJECTORY_COLORS = (
    (255, 255, 0),
    (255, 0, 255),
    (0, 255, 255),
    (255, 100, 0),
    (100, 0, 255),
    (100, 255, 0),
    (100, 255, 0),
    (255, 0, 100),
)

GUIDE_POSITION = (10, 0)
INFO_POSITION = (10, 10)
INFO_POSITION_WITH_GUIDE = (10, 40)


def ordinal_suffix(index: int) -> str:
    """English ordinal suffix for the zero-based position ``index``."""
    return {0: "st", 1: "nd", 2: "rd"}.get(index, "th")


class Calendar:
    """A simulated calendar: a month passes every few hundred frames."""

    def __init__(self, year: int, month: int) -> None:
        if not 0 <= month < len(MONTHS):
            raise ValueError(f"month must be between 0 and 11, got {month}")
        self.year = year
        self.month = month
        self.day = 1

    @classmethod
    def today(cls) -> Calendar:
        now = datetime.date.today()
        return cls(now.year, now.month - 1)

    def tick(self) -> None:
        """Advance one simulated day, rolling over months and years."""
        if self.day == DAYS_PER_MONTH:
            self.day = 0
            if self.month < len(MONTHS) - 1:
                self.month += 1
            else:
                self.month = 0
                self.year += 1
        self.day += 1

    def label(self) -> str:
        return f"{MONTHS[self.month]} {self.year}"


def _details(planet: PlanetState) -> str:
    return (
        f"\nm={planet.m:.3e}\nvx={planet.v_x:.3e}\nvy={planet.v_y:.3e}"
        f"\nx={planet.x:.3e}\ny={planet.y:.3e}\n{planet.texture_name}"
    )


class Animation:
    """State and behaviour of the animation window.

    The camera can stay free, follow one planet, or follow the centroid of
    a set of planets that the user builds one position at a time.
    """

    def __init__(self, universe: Universe, camera) -> None:
        self.universe = universe
        self.camera = pygame.Vector2(camera)
        self.center = pygame.Vector2(CENTER)
        self.playing = True
        self.follow_one = False
        self.follow_set = False
        self.creating_set = False
        self.following: list[int] = []
        self.cursor = 0
        self.planet_index = 0
        self.calendar = Calendar.today()
        self.trajectory: list[tuple[tuple[float, float], tuple[int, int, int]]] = []
        self.fps = 0
        self.font: pygame.font.Font | None = None
        self._actions: dict[int, Callable[[], None]] = {
            pygame.K_SPACE: self._toggle_play,
            pygame.K_o: self._start_set,
            pygame.K_RETURN: self._finish_set,
            pygame.K_LEFT: self._cursor_left,
            pygame.K_RIGHT: self._cursor_right,
            pygame.K_UP: lambda: self._move_index(1),
            pygame.K_DOWN: lambda: self._move_index(-1),
            pygame.K_x: self._remove_from_set,
            pygame.K_c: self._follow_centroid,
            pygame.K_p: self._follow_planet,
            pygame.K_a: lambda: self._move_camera(CAMERA_STEP, 0),
            pygame.K_d: lambda: self._move_camera(-CAMERA_STEP, 0),
            pygame.K_w: lambda: self._move_camera(0, CAMERA_STEP),
            pygame.K_s: lambda: self._move_camera(0, -CAMERA_STEP),
        }

    def handle_key(self, key: int) -> None:
        """React to one pygame key code; unknown keys are ignored."""
        action = self._actions.get(key)
        if action is not None:
            action()

    def _toggle_play(self) -> None:
        self.playing = not self.playing

    def _start_set(self) -> None:
        if self.creating_set or len(self.universe) == 0:
            return
        self.follow_one = False
        self.follow_set = False
        self.creating_set = True
        self.following = [self.planet_index]
        self.cursor = 0

    def _finish_set(self) -> None:
        self.creating_set = False
        self.follow_set = True

    def _cursor_left(self) -> None:
        if self.creating_set and self.cursor > 0:
            self.cursor -= 1

    def _cursor_right(self) -> None:
        if not self.creating_set:
            return
        if self.cursor == len(self.following) - 1:
            self.following.append(self.planet_index)
        self.cursor += 1

    def _move_index(self, delta: int) -> None:
        count = len(self.universe)
        if count == 0:
            return
        self.planet_index = (self.planet_index + delta) % count
        if self.creating_set:
            self.following[self.cursor] = self.planet_index

    def _remove_from_set(self) -> None:
        if len(self.following) > 1:
            del self.following[self.cursor]
            if self.cursor == len(self.following):
                self.cursor -= 1

    def _follow_centroid(self) -> None:
        self.follow_set = True
        self.follow_one = False

    def _follow_planet(self) -> None:
        self.follow_set = False
        self.follow_one = True

    def _move_camera(self, dx: float, dy: float) -> None:
        self.camera.x += dx
        self.camera.y += dy
        self.follow_set = False
        self.follow_one = False

    def step(self) -> None:
        """Update the energies and, while playing, advance one frame."""
        self.universe.calculate_energy()
        if not self.playing:
            return
        self.calendar.tick()
        for _ in range(STEPS_PER_FRAME):
            before = len(self.universe)
            self.universe.evolve(TIME_STEP)
            if len(self.universe) < before:
                self.follow_set = False
                self._forget_merged()
        for i, planet in enumerate(self.universe):
            color = TRAJECTORY_COLORS[i % len(TRAJECTORY_COLORS)]
            self.trajectory.append(((planet.x, planet.y), color))

    def _forget_merged(self) -> None:
        count = len(self.universe)
        self.planet_index = max(0, min(self.planet_index, count - 1))
        self.following = [index for index in self.following if index < count]
        if self.creating_set and not self.following:
            self.following = [self.planet_index]
        self.cursor = max(0, min(self.cursor, len(self.following) - 1))

    def update_camera(self) -> None:
        """Point the camera at whatever is being followed."""
        if self.follow_one:
            planet = self.universe[self.planet_index]
            target = pygame.Vector2(planet.x, planet.y)
        elif self.follow_set and self.following:
            planets = [self.universe[index] for index in self.following]
            target = pygame.Vector2(
                sum(p.x for p in planets) / len(planets),
                sum(p.y for p in planets) / len(planets),
            )
        elif self.creating_set and self.following:
            planet = self.universe[self.following[self.cursor]]
            target = pygame.Vector2(planet.x, planet.y)
        else:
            return
        self.camera = self.center - target

    def guide_text(self) -> str:
        """Instructions shown while building the set of followed planets."""
        return (
            f"You are following {len(self.following)} planet(s)\n"
            f"and you are choosing the {self.cursor + 1}"
            f"{ordinal_suffix(self.cursor)} planet"
        )

    def info_text(self, fps: int) -> str:
        """Date, frame rate and either planet data or the energies."""
        text = f"{self.calendar.label()}\nFPS: {fps}"
        if self.follow_one:
            return text + _details(self.universe[self.planet_index])
        if self.creating_set and self.following:
            return text + _details(self.universe[self.following[self.cursor]])
        u = self.universe
        return text + (
            f"\ninitial energy={u.initial_energy:.3e}"
            f"\ntotal energy={u.total_energy:.3e}"
            f"\nmechanic energy={u.mechanical_energy:.3e}"
            f"\nkinetic energy={u.kinetic_energy:.3e}"
            f"\npotential energy={u.potential_energy:.3e}"
            f"\nlost energy={u.lost_energy:.3e}"
        )

    def _get_font(self) -> pygame.font.Font:
        if self.font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self.font = pygame.font.Font(None, 15)
        return self.font

    def _blit_lines(self, surface: pygame.Surface, text: str, position) -> None:
        font = self._get_font()
        x, y = position
        for line in text.split("\n"):
            surface.blit(font.render(line, True, WHITE), (x, y))
            y += font.get_linesize()

    def draw(self, surface: pygame.Surface) -> None:
        """Draw trajectories, planets and the text overlay."""
        surface.fill(BLACK)
        bounds = surface.get_rect()
        cx, cy = self.camera.x, self.camera.y
        for (x, y), color in self.trajectory:
            point = (round(x + cx), round(y + cy))
            if bounds.collidepoint(point):
                surface.set_at(point, color)
        visible_area = (0, 0, bounds.width, bounds.height)
        for planet in self.universe:
            draw_planet(surface, planet, (cx, cy), None, visible_area, False)
        if self.creating_set and not self.follow_one and not self.follow_set:
            self._blit_lines(surface, self.guide_text(), GUIDE_POSITION)
        position = INFO_POSITION_WITH_GUIDE if self.creating_set else INFO_POSITION
        self._blit_lines(surface, self.info_text(self.fps), position)