"""Loading planet textures from a folder and attaching them to planets."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

import pygame

from orbitsim.physics import PlanetState

TEXTURE_SUFFIX = ".png"
STANDARD_TEXTURE = "standard.png"


class TextureError(RuntimeError):
    """Raised when textures cannot be found, loaded or assigned."""


class TextureManager:
    """Holds the textures of one folder and assigns them to planets by name.

    The folder is read once, the first time textures are needed; later
    calls to :meth:`assign` reuse what was loaded.
    """

    def __init__(self, folder: str | os.PathLike, universe: Iterable[PlanetState]) -> None:
        self.folder = os.fspath(folder)
        self.universe = universe
        self._names: list[str] = []
        self._textures: list[pygame.Surface] = []
        self.assign(self.folder, universe)

    @property
    def names(self) -> tuple[str, ...]:
        """File names of the loaded textures."""
        return tuple(self._names)

    def assign(self, folder: str | os.PathLike, universe: Iterable[PlanetState]) -> None:
        """Attach a texture to every planet, falling back to the standard one.

        A planet whose texture name is unknown is renamed to the standard
        texture.
        """
        if not self._names:
            self._load(os.fspath(folder))
        if len(self._textures) != len(self._names):
            raise TextureError("Not all textures are loaded")
        if not self._textures:
            raise TextureError("No textures were found in the folder")
        by_name = dict(zip(self._names, self._textures))
        for planet in universe:
            texture = by_name.get(planet.texture_name)
            if texture is None:
                if STANDARD_TEXTURE not in by_name:
                    raise TextureError(
                        f"Texture {planet.texture_name!r} is unknown and "
                        f"{STANDARD_TEXTURE} is missing"
                    )
                planet.texture_name = STANDARD_TEXTURE
                texture = by_name[STANDARD_TEXTURE]
            planet.texture = texture

    def describe(self) -> str:
        """The texture names, one per line, followed by their count."""
        lines = "".join(f"{name}\n" for name in self._names)
        return f"{lines}textures loaded: {len(self._textures)}\n"

    def _load(self, folder: str) -> None:
        directory = Path(folder)
        if not directory.is_dir():
            raise TextureError(f"Folder not found: {folder}")
        names = sorted(
            entry.name
            for entry in directory.iterdir()
            if entry.is_file() and entry.suffix == TEXTURE_SUFFIX
        )
        textures = []
        for name in names:
            try:
                textures.append(pygame.image.load(str(directory / name)))
            except (pygame.error, OSError) as exc:
                raise TextureError(
                    f"Failed to load a texture from the folder {folder}"
                ) from exc
        self._names = names
        self._textures = textures