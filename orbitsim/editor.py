"""The editing screen: placing, selecting and changing planets."""

from __future__ import annotations

import math
from collections.abc import Callable, Collection
from enum import IntEnum

import pygame

from orbitsim.button import Button
from orbitsim.drawing import ARROW_SCALE, draw_planet
from orbitsim.fileuniverse import FileUniverse
from orbitsim.physics import PlanetState
from orbitsim.textures import TextureManager

CAMERA_STEP = 5
DEFAULT_MASS = 1e3
DEFAULT_RADIUS = 100.0
DEFAULT_TEXTURE = "default"

YELLOW = (255, 255, 0)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
RED = (255, 0, 0)
TRANSPARENT = (0, 0, 0, 0)

TEXT_POSITION = (5, 90)


class Field(IntEnum):
    """The property of the selected planet that is being edited."""

    MASS = 0
    POSITION = 1
    VELOCITY = 2
    RADIUS = 3
    TEXTURE = 4
    DELETE = 5


CHOICES = {
    Field.MASS: "Set mass (M)",
    Field.POSITION: "Set pos (P)",
    Field.VELOCITY: "Set velocity (V)",
    Field.RADIUS: "Set radius (R)",
    Field.TEXTURE: "Set texture (T)",
    Field.DELETE: "Delete (X)",
}

# key -> (field chosen, whether the key starts entering a value)
_SHORTCUTS = {
    pygame.K_m: (Field.MASS, True),
    pygame.K_p: (Field.POSITION, True),
    pygame.K_v: (Field.VELOCITY, True),
    pygame.K_r: (Field.RADIUS, False),
    pygame.K_t: (Field.TEXTURE, True),
    pygame.K_x: (Field.DELETE, False),
}

_CAMERA_KEYS = {
    pygame.K_a: (CAMERA_STEP, 0),
    pygame.K_d: (-CAMERA_STEP, 0),
    pygame.K_w: (0, CAMERA_STEP),
    pygame.K_s: (0, -CAMERA_STEP),
}


def _read_positive(text: str, message: str) -> float:
    tokens = text.split()
    if not tokens:
        raise ValueError(message)
    try:
        value = float(tokens[0])
    except ValueError as exc:
        raise ValueError(message) from exc
    if not math.isfinite(value) or value <= 0:
        raise ValueError(message)
    return value


class Editor:
    """State and behaviour of the editing window.

    ``selecting`` marks a planet with a white outline, ``selected`` with a
    yellow one and ``choosing_value`` with a red one while a value is being
    entered.
    """

    def __init__(
        self,
        universe: FileUniverse,
        textures: TextureManager | None,
        font: pygame.font.Font,
        window_size: tuple[int, int] = (800, 800),
    ) -> None:
        self.universe = universe
        self.textures = textures
        self.font = font
        self.window_size = window_size
        width, height = window_size
        self.center = pygame.Vector2(width / 2, height / 2)
        self.camera = pygame.Vector2(self.center)
        if len(universe) > 0:
            self.center_on(0)

        self.selecting = False
        self.selected = False
        self.choosing_value = False
        self.planet_index = 0
        self.choice = Field.MASS

        size = (150, 90)
        self.save_button = Button((0, 0), size, "Save", YELLOW, BLACK, font, True)
        self.add_button = Button((160, 0), size, "Add planet", YELLOW, BLACK, font, True)
        self.select_button = Button(
            (320, 0), size, "Select planet", YELLOW, BLACK, font, True
        )
        self.next_button = Button((480, 0), size, "Next planet", YELLOW, BLACK, font, False)
        self.data_button = Button(
            (640, 0), size, CHOICES[Field.MASS], YELLOW, BLACK, font, False
        )
        self.evolve_button = Button((480, 0), size, "Animation", YELLOW, BLACK, font, True)
        self.error_button = Button(
            (width / 2 - 100, height / 2 - 50),
            (200, 100),
            "Add a planet",
            TRANSPARENT,
            RED,
            font,
            False,
        )

    @property
    def buttons(self) -> tuple[Button, ...]:
        return (
            self.save_button,
            self.add_button,
            self.select_button,
            self.next_button,
            self.data_button,
            self.evolve_button,
            self.error_button,
        )

    def center_on(self, index: int) -> None:
        """Move the camera so that planet ``index`` is in the middle."""
        planet = self.universe[index]
        self.camera.x = self.center.x - planet.x
        self.camera.y = self.center.y - planet.y

    def _clicked(self, button: Button, pos) -> bool:
        return button.is_clicked(pos) and button.visible

    def _sync_data_button(self) -> None:
        self.data_button.visible = self.selected

    def _reassign_textures(self) -> None:
        if self.textures is not None:
            self.textures.assign(self.textures.folder, self.universe)

    def handle_left_click(self, pos) -> bool:
        """React to a left click; return True when the animation should start."""
        start_animation = False
        if self._clicked(self.evolve_button, pos):
            if len(self.universe) == 0:
                self.error_button.show()
            else:
                self.universe.calculate_energy()
                self.universe.set_initial_energy()
                self.next_button.hide()
                self.data_button.hide()
                self.selecting = self.selected = self.choosing_value = False
                start_animation = True
        self.evolve_button.hide()

        if self._clicked(self.save_button, pos):
            self.selected = self.selecting = self.choosing_value = False
            self.next_button.hide()
            self.universe.save()
            self.select_button.set_text("Select planet")
            self.evolve_button.show()
        elif self._clicked(self.add_button, pos):
            self._add_planet()
        elif self._clicked(self.select_button, pos):
            self._toggle_selecting()
        elif self._clicked(self.next_button, pos) and len(self.universe) > 0:
            self.selected = self.choosing_value = False
            self.planet_index = (self.planet_index + 1) % len(self.universe)
            self.center_on(self.planet_index)
        elif self._clicked(self.data_button, pos):
            self.choosing_value = not self.choosing_value
        elif self._clicked(self.error_button, pos):
            self.error_button.hide()
        elif self.choosing_value:
            self._place_with_mouse(pos)
        elif self.selecting:
            self._pick_planet(pos)
        self._sync_data_button()
        return start_animation

    def _add_planet(self) -> None:
        if len(self.universe) == 0:
            mass, radius = DEFAULT_MASS, DEFAULT_RADIUS
        else:
            current = self.universe[self.planet_index]
            mass, radius = current.m, current.r
        self.universe.add(
            PlanetState(
                mass,
                self.center.x - self.camera.x,
                self.center.y - self.camera.y,
                0.0,
                0.0,
                radius,
                DEFAULT_TEXTURE,
            )
        )
        self.universe.save()
        self._reassign_textures()

    def _toggle_selecting(self) -> None:
        self.selecting = not self.selecting
        if len(self.universe) == 0:
            self.selecting = False
            self.error_button.show()
        self.selected = False
        self.choosing_value = False
        if self.selecting:
            self.planet_index = 0
            self.select_button.set_text("Unselect planet")
            self.next_button.show()
        else:
            self.select_button.set_text("Select planet")
            self.next_button.hide()
            self.data_button.hide()

    def _place_with_mouse(self, pos) -> None:
        planet = self.universe[self.planet_index]
        mx, my = pos
        if self.choice is Field.POSITION:
            planet.x = mx - self.camera.x
            planet.y = my - self.camera.y
        elif self.choice is Field.VELOCITY:
            planet.v_x = (mx - self.camera.x - planet.x) / ARROW_SCALE
            planet.v_y = (my - self.camera.y - planet.y) / ARROW_SCALE

    def _pick_planet(self, pos) -> None:
        mx, my = pos
        index = self.universe.find_nearest_planet(
            (int(mx - self.camera.x), int(my - self.camera.y))
        )
        if index is None:
            return
        planet = self.universe[index]
        distance = math.hypot(mx - (planet.x + self.camera.x), my - (planet.y + self.camera.y))
        if distance < planet.r:
            if index == self.planet_index:
                self.selected = not self.selected
            else:
                self.selected = False
                self.planet_index = index

    def handle_right_click(self, pos) -> None:
        """Cycle the editable field when the data button is right-clicked."""
        if self.choosing_value:
            return
        if self._clicked(self.data_button, pos):
            self.choice = Field((self.choice + 1) % len(Field))
            self.data_button.set_text(CHOICES[self.choice])

    def handle_keys(self, pressed: Collection[int]) -> None:
        """Apply camera moves and shortcuts for the pygame key codes held down."""
        for key, (dx, dy) in _CAMERA_KEYS.items():
            if key in pressed:
                self.camera.x += dx
                self.camera.y += dy
        if pygame.K_SPACE in pressed:
            self.selected = True

        if self.selecting or self.selected:
            for key, (field, enters_value) in _SHORTCUTS.items():
                if key not in pressed:
                    continue
                self.data_button.show()
                self.next_button.show()
                self.selecting = True
                self.selected = True
                if enters_value:
                    self.choosing_value = True
                self.choice = field
                self.data_button.set_text(CHOICES[field])
        self._sync_data_button()

    def apply_choice(self, input_func: Callable[[str], str]) -> None:
        """Carry out the pending edit, asking ``input_func`` for typed values.

        Raises ValueError when a typed mass, radius or texture is not valid.
        """
        if not self.choosing_value:
            return
        if self.choice is Field.MASS:
            value = _read_positive(input_func("Choose mass: "), "Mass not valid")
            self.universe[self.planet_index].m = value
            self.choosing_value = False
        elif self.choice is Field.RADIUS:
            value = _read_positive(input_func("Choose rad: "), "Radius not valid")
            self.universe[self.planet_index].r = value
            self.choosing_value = False
        elif self.choice is Field.TEXTURE:
            names = self.textures.names if self.textures is not None else ()
            prompt = "".join(f"{name}\n" for name in names) + "Choose texture: "
            tokens = input_func(prompt).split()
            if not tokens:
                raise ValueError("Texture not valid")
            self.universe[self.planet_index].texture_name = tokens[0]
            self._reassign_textures()
            self.choosing_value = False
        elif self.choice is Field.DELETE:
            self._delete_current()
        self.universe.save()
        self._sync_data_button()

    def _delete_current(self) -> None:
        if len(self.universe) > 0:
            self.universe.remove(self.universe[self.planet_index])
        if len(self.universe) == 0:
            self.selecting = False
            self.select_button.set_text("Select")
            self.next_button.hide()
        self.choosing_value = False
        self.selected = False
        self.planet_index = 0

    def info_text(self) -> str:
        """Camera coordinates and, while selecting, the current planet's data."""
        width, height = self.window_size
        text = f"camera_x={width - self.camera.x:f}\ncamera_y={height - self.camera.y:f}"
        if self.selecting and self.planet_index < len(self.universe):
            p = self.universe[self.planet_index]
            text += (
                f"\nm={p.m:.2e}\nx={p.x:.2e}\ny={p.y:.2e}"
                f"\nv_x={p.v_x:.2e}\nv_y={p.v_y:.2e}\nr={p.r:.2e}\n{p.texture_name}"
            )
        return text

    def _highlight_color(self):
        if self.choosing_value:
            return RED
        if self.selected:
            return YELLOW
        return WHITE

    def draw(self, surface: pygame.Surface) -> None:
        """Draw planets, the selection outline, the info text and the buttons."""
        surface.fill(BLACK)
        width, height = surface.get_size()
        visible_area = (0, 0, width, height)
        translate = (self.camera.x, self.camera.y)
        for planet in self.universe:
            draw_planet(surface, planet, translate, None, visible_area, self.selecting)
        if self.selecting and self.planet_index < len(self.universe):
            draw_planet(
                surface,
                self.universe[self.planet_index],
                translate,
                self._highlight_color(),
                visible_area,
                self.selecting,
            )
        x, y = TEXT_POSITION
        for line in self.info_text().split("\n"):
            surface.blit(self.font.render(line, True, WHITE), (x, y))
            y += self.font.get_linesize()
        for button in self.buttons:
            button.draw(surface)