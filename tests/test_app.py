import os

import pygame
import pytest

from orbitsim.app import main, open_universe
from orbitsim.fileuniverse import FileUniverse, UniverseFileError
from orbitsim.physics import Newton


def _default_font_path():
    return os.path.join(os.path.dirname(pygame.__file__), pygame.font.get_default_font())


def test_open_universe_reads_file(tmp_path):
    (tmp_path / "test.sss").write_text(
        "500 100 200 0.01 0.02 10 a.png\n"
        "20 -300 0 0.01 0.02 2 b.png\n"
        "5 500 -200 0.01 0.02 8 c.png\n"
        "87 700 80 0.01 0.02 20 d.png\n"
    )
    universe = open_universe("o", str(tmp_path / "test"), Newton())
    assert [p.m for p in universe] == [500, 20, 5, 87]
    assert [p.x for p in universe] == [100, -300, 500, 700]
    assert [p.y for p in universe] == [200, 0, -200, 80]
    assert all(p.v_x == pytest.approx(0.01) for p in universe)
    assert all(p.v_y == pytest.approx(0.02) for p in universe)
    assert [p.r for p in universe] == [10, 2, 8, 20]


def test_open_universe_create_starts_empty(tmp_path):
    universe = open_universe("create", str(tmp_path / "fresh"), Newton())
    assert isinstance(universe, FileUniverse)
    assert len(universe) == 0


def test_open_universe_missing_file(tmp_path):
    with pytest.raises(UniverseFileError):
        open_universe("open", str(tmp_path / "missing"), Newton())


def test_open_universe_create_existing_file(tmp_path):
    (tmp_path / "taken.sss").write_text("")
    with pytest.raises(UniverseFileError):
        open_universe("c", str(tmp_path / "taken"), Newton())


@pytest.mark.parametrize("choice", ["x", "", "O"])
def test_open_universe_invalid_choice(tmp_path, choice):
    with pytest.raises(ValueError, match="Invalid input"):
        open_universe(choice, str(tmp_path / "any"), Newton())


def test_main_reports_missing_font(tmp_path, capsys):
    code = main(["--font", str(tmp_path / "missing.ttf"), "c", str(tmp_path / "u")])
    assert code == 1
    assert "font is not loaded" in capsys.readouterr().err


def test_main_reports_invalid_choice(tmp_path, capsys):
    code = main(["--font", _default_font_path(), "z", str(tmp_path / "u")])
    assert code == 1
    assert "Invalid input. Restart." in capsys.readouterr().err


def test_main_reports_missing_file(tmp_path, capsys):
    code = main(["--font", _default_font_path(), "o", str(tmp_path / "absent")])
    assert code == 1
    assert "doesn't exist" in capsys.readouterr().err


def test_main_reports_missing_texture_folder(tmp_path, capsys):
    code = main(
        [
            "--font",
            _default_font_path(),
            "--textures",
            str(tmp_path / "no_textures"),
            "c",
            str(tmp_path / "u"),
        ]
    )
    assert code == 1
    assert capsys.readouterr().err.startswith("Error:")