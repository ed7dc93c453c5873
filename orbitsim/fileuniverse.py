"""A universe stored in a plain-text ``.sss`` file."""

from __future__ import annotations

import math
import os
import re

from orbitsim.physics import Newton, PlanetState
from orbitsim.universe import Universe

SUFFIX = ".sss"

_WHITESPACE = " \t\n\v\f\r"
_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class UniverseFileError(RuntimeError):
    """Raised when a universe file is missing, unreadable or malformed."""


def _is_blank(line: str) -> bool:
    return line.strip(" ") == ""


def _skip_whitespace(line: str, pos: int) -> int:
    while pos < len(line) and line[pos] in _WHITESPACE:
        pos += 1
    return pos


def _parse_line(line: str) -> PlanetState | None:
    """Read six numbers and a texture name; ``None`` if the line is malformed.

    Nothing may follow the texture name, not even whitespace.
    """
    pos = 0
    values = []
    for _ in range(6):
        pos = _skip_whitespace(line, pos)
        match = _NUMBER.match(line, pos)
        if match is None:
            return None
        value = float(match.group())
        if math.isinf(value):
            return None
        values.append(value)
        pos = match.end()
    pos = _skip_whitespace(line, pos)
    end = pos
    while end < len(line) and line[end] not in _WHITESPACE:
        end += 1
    if end == pos or end != len(line):
        return None
    return PlanetState(*values, texture_name=line[pos:end])


def is_valid_line(line: str) -> bool:
    """True for a blank line or a well-formed planet line."""
    return _is_blank(line) or _parse_line(line) is not None


def _read_lines(path: str, message: str) -> list[str]:
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise UniverseFileError(message) from exc
    return text.split("\n")


def _format_planet(planet: PlanetState) -> str:
    numbers = (planet.m, planet.x, planet.y, planet.v_x, planet.v_y, planet.r)
    return " ".join(f"{value:g}" for value in numbers) + " " + planet.texture_name


class FileUniverse(Universe):
    """A universe kept in sync with ``<name>.sss``."""

    def __init__(self, newton: Newton, name: str | os.PathLike, exists: bool) -> None:
        super().__init__(newton)
        self.path = os.fspath(name) + SUFFIX
        present = os.access(self.path, os.R_OK)
        if exists:
            if not present:
                raise UniverseFileError("The file doesn't exist")
            self.load()
        elif present:
            raise UniverseFileError("The file already exists")

    def add(self, planet: PlanetState) -> None:
        """Append a planet and write it at the end of the file."""
        super().add(planet)
        try:
            with open(self.path, "a", encoding="utf-8") as handle:
                handle.write("\n" + _format_planet(planet))
        except OSError as exc:
            raise UniverseFileError(
                "Impossible to open the file and insert the planet"
            ) from exc

    def remove(self, planet: PlanetState) -> None:
        """Remove a planet and rewrite the file."""
        super().remove(planet)
        self.save()

    def save(self) -> None:
        """Rewrite the file from the current planets."""
        planets = self.state()
        self.clear()
        try:
            with open(self.path, "w", encoding="utf-8"):
                pass
        except OSError as exc:
            raise UniverseFileError(f"Impossible to open {self.path}") from exc
        for planet in planets:
            self.add(planet)

    def load(self) -> None:
        """Append the planets stored in the file."""
        self.validate_file(self.path)
        lines = _read_lines(self.path, "Impossible to open the file during download")
        for line in lines:
            if not _is_blank(line):
                super().add(_parse_line(line))
        if self.count_planets(self.path) != len(self):
            raise UniverseFileError(
                "The number of the planets configured is different from the "
                "number of the planets in the file"
            )

    def validate_file(self, filename: str) -> bool:
        """Return True if every line of ``filename`` is valid, else raise."""
        lines = _read_lines(
            filename,
            "Impossible to open the file and verify if it is written correctly",
        )
        if not all(is_valid_line(line) for line in lines):
            raise UniverseFileError("The file contains line(s) not valid")
        return True

    def count_planets(self, filename: str) -> int:
        """Number of non-blank lines in ``filename``."""
        lines = _read_lines(
            filename,
            f"impossible to open the file {self.path} during the count of the planet",
        )
        return sum(1 for line in lines if not _is_blank(line))