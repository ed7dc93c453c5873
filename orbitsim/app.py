"""Command-line entry point: open or create a universe and run the windows."""

from __future__ import annotations

import argparse
import sys

import pygame

from orbitsim.animation import Animation
from orbitsim.editor import Editor, Field
from orbitsim.fileuniverse import FileUniverse
from orbitsim.physics import Newton
from orbitsim.textures import TextureManager

WINDOW_SIZE = (800, 800)
FRAMERATE = 48
FONT_SIZE = 15
OPEN_CHOICES = ("o", "open")
CREATE_CHOICES = ("c", "create")

EDITOR_KEYS = (
    pygame.K_a,
    pygame.K_d,
    pygame.K_w,
    pygame.K_s,
    pygame.K_SPACE,
    pygame.K_m,
    pygame.K_p,
    pygame.K_v,
    pygame.K_r,
    pygame.K_t,
    pygame.K_x,
)
HELD_ANIMATION_KEYS = (pygame.K_a, pygame.K_d, pygame.K_w, pygame.K_s)


def open_universe(choice: str, name: str, newton: Newton) -> FileUniverse:
    """Open ``<name>.sss`` ("o"/"open") or start a new one ("c"/"create")."""
    if choice in OPEN_CHOICES:
        return FileUniverse(newton, name, True)
    if choice in CREATE_CHOICES:
        return FileUniverse(newton, name, False)
    raise ValueError("Invalid input. Restart.")


def _parse_args(argv):
    parser = argparse.ArgumentParser(
        prog="orbitsim", description="Edit and animate a planetary system."
    )
    parser.add_argument("choice", nargs="?", help="o/open or c/create")
    parser.add_argument("name", nargs="?", help="file name without '.sss'")
    parser.add_argument("--font", default="Arial.ttf", help="font file")
    parser.add_argument("--textures", default="Texture", help="texture folder")
    return parser.parse_args(argv)


def _held(keys) -> set[int]:
    pressed = pygame.key.get_pressed()
    return {key for key in keys if pressed[key]}


def _fps(milliseconds: int) -> int:
    return int(1000 / milliseconds) if milliseconds else 0


def _run(
    universe: FileUniverse,
    textures: TextureManager,
    font: pygame.font.Font,
    name: str,
    newton: Newton,
) -> int:
    pygame.display.init()
    screen = pygame.display.set_mode(WINDOW_SIZE)
    editor = Editor(universe, textures, font, WINDOW_SIZE)
    animation: Animation | None = None
    clock = pygame.time.Clock()

    while True:
        if animation is None:
            pygame.display.set_caption(f"{name}.sss")
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.MOUSEBUTTONDOWN:
                    if event.button == 1 and editor.handle_left_click(event.pos):
                        animation = Animation(editor.universe, editor.camera)
                        animation.font = font
                        break
                    if event.button == 3:
                        editor.handle_right_click(event.pos)
                editor.handle_keys(_held(EDITOR_KEYS))
            if animation is None:
                if editor.choosing_value:
                    try:
                        editor.apply_choice(input)
                    except (ValueError, RuntimeError) as exc:
                        print(f"Error: {exc}", file=sys.stderr)
                        return 1
                editor.draw(screen)
            clock.tick(FRAMERATE)
        else:
            pygame.display.set_caption(f"animation of {name}.sss")
            closed = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    closed = True
                elif event.type == pygame.KEYDOWN and event.key not in HELD_ANIMATION_KEYS:
                    animation.handle_key(event.key)
            if closed:
                try:
                    universe = FileUniverse(newton, name, True)
                    universe.save()
                    textures.assign(textures.folder, universe)
                except RuntimeError as exc:
                    print(f"Error: {exc}", file=sys.stderr)
                    return 1
                editor.universe = universe
                editor.choice = Field.MASS
                if len(universe) > 0:
                    editor.center_on(0)
                animation = None
                continue
            for key in _held(HELD_ANIMATION_KEYS):
                animation.handle_key(key)
            animation.fps = _fps(clock.tick(FRAMERATE))
            animation.step()
            animation.update_camera()
            animation.draw(screen)
        pygame.display.flip()


def main(argv=None) -> int:
    """Ask which universe to open, then run the editor and animation windows."""
    args = _parse_args(argv)
    newton = Newton()
    pygame.font.init()
    try:
        try:
            font = pygame.font.Font(args.font, FONT_SIZE)
        except (OSError, pygame.error) as exc:
            raise RuntimeError("font is not loaded") from exc
        choice = args.choice or input(
            "Do you want to open an existing file (o) or do you want to "
            "create a new one (c)?"
        ).strip()
        if choice in OPEN_CHOICES:
            prompt = "\nChoose the file you want to open (WITHOUT '.sss')\n"
        elif choice in CREATE_CHOICES:
            prompt = "\nChoose the name of the new file(WITHOUT '.sss')\n"
        else:
            raise ValueError("Invalid input. Restart.")
        name = args.name or input(prompt).strip()
        universe = open_universe(choice, name, newton)
        textures = TextureManager(args.textures, universe)
    except (RuntimeError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        pygame.quit()
        return 1
    try:
        return _run(universe, textures, font, name, newton)
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())