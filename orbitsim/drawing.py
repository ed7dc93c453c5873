"""Drawing planets and their velocity arrows on a pygame surface."""

from __future__ import annotations

import math

import pygame

from orbitsim.physics import PlanetState

Point = tuple[float, float]
Rect = tuple[float, float, float, float]
Color = tuple[int, ...] | pygame.Color

ARROW_SCALE = 500.0
"""Factor from velocity to arrow length in pixels."""
HEAD_FRACTION = 0.1
HEAD_ANGLES = (160.0, 200.0)
OUTLINE_WIDTH = 3.0
WHITE = (255, 255, 255)


def _rotate(vector: Point, degrees: float) -> Point:
    angle = math.radians(degrees)
    cos, sin = math.cos(angle), math.sin(angle)
    x, y = vector
    return x * cos - y * sin, x * sin + y * cos


def arrow_head_points(tip: Point, direction: Point) -> tuple[Point, Point]:
    """End points of the two strokes that form the arrow head at ``tip``."""
    scaled = (direction[0] * HEAD_FRACTION, direction[1] * HEAD_FRACTION)
    first, second = (_rotate(scaled, angle) for angle in HEAD_ANGLES)
    return (
        (tip[0] + first[0], tip[1] + first[1]),
        (tip[0] + second[0], tip[1] + second[1]),
    )


def draw_arrow(
    surface: pygame.Surface, start: Point, tip: Point, direction: Point, color: Color
) -> None:
    """Draw a line from ``start`` to ``tip`` with a head pointing along ``direction``."""
    pygame.draw.line(surface, color, start, tip)
    for point in arrow_head_points(tip, direction):
        pygame.draw.line(surface, color, tip, point)


def planet_bounds(planet: PlanetState, translate: Point) -> Rect:
    """Bounding box ``(left, top, width, height)`` of a planet on screen."""
    r = planet.r
    return (planet.x + translate[0] - r, planet.y + translate[1] - r, 2 * r, 2 * r)


def _intersects(a: Rect, b: Rect) -> bool:
    left = max(a[0], b[0])
    right = min(a[0] + a[2], b[0] + b[2])
    top = max(a[1], b[1])
    bottom = min(a[1] + a[3], b[1] + b[3])
    return left < right and top < bottom


def _draw_textured_disc(
    surface: pygame.Surface, texture: pygame.Surface, center: Point, radius: float
) -> None:
    size = max(1, round(2 * radius))
    disc = pygame.Surface((size, size), pygame.SRCALPHA)
    pygame.draw.circle(disc, (255, 255, 255, 255), (size / 2, size / 2), size / 2)
    disc.blit(
        pygame.transform.scale(texture, (size, size)),
        (0, 0),
        special_flags=pygame.BLEND_RGBA_MULT,
    )
    surface.blit(disc, (round(center[0] - size / 2), round(center[1] - size / 2)))


def draw_planet(
    surface: pygame.Surface,
    planet: PlanetState,
    translate: Point,
    color: Color | None,
    visible_area: Rect,
    show_arrow: bool,
) -> bool:
    """Draw a planet, an optional coloured outline and its velocity arrow.

    Nothing is drawn when the planet lies outside ``visible_area``.
    Returns whether the planet was drawn.
    """
    if not _intersects(planet_bounds(planet, translate), visible_area):
        return False
    center = (planet.x + translate[0], planet.y + translate[1])
    if color is not None:
        pygame.draw.circle(surface, color, center, planet.r + OUTLINE_WIDTH)
    if planet.texture is not None:
        _draw_textured_disc(surface, planet.texture, center, planet.r)
    else:
        pygame.draw.circle(surface, WHITE, center, planet.r)
    if show_arrow:
        direction = (ARROW_SCALE * planet.v_x, ARROW_SCALE * planet.v_y)
        tip = (center[0] + direction[0], center[1] + direction[1])
        draw_arrow(surface, center, tip, direction, color if color is not None else WHITE)
    return True