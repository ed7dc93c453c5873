import pytest

from orbitsim.fileuniverse import FileUniverse, UniverseFileError, is_valid_line
from orbitsim.physics import Newton, PlanetState

CONTENT = (
    "500 100 200 0.01 0.02 10 earth.png\n"
    "20 -300 0 0.01 0.02 2 mars.png\n"
    "5 500 -200 0.01 0.02 8 moon.png\n"
    "87 700 80 0.01 0.02 20 sun.png"
)


def approx(value):
    return pytest.approx(value, rel=1.2e-5, abs=1.2e-5)


@pytest.fixture
def sample(tmp_path):
    (tmp_path / "test.sss").write_text(CONTENT)
    return str(tmp_path / "test")


def test_load_sample_file(sample):
    universe = FileUniverse(Newton(), sample, True)
    state = universe.state()
    assert [p.m for p in state] == [approx(500), approx(20), approx(5), approx(87)]
    assert [p.x for p in state] == [approx(100), approx(-300), approx(500), approx(700)]
    assert [p.y for p in state] == [approx(200), approx(0), approx(-200), approx(80)]
    assert [p.v_x for p in state] == [approx(0.01)] * 4
    assert [p.v_y for p in state] == [approx(0.02)] * 4
    assert [p.r for p in state] == [approx(10), approx(2), approx(8), approx(20)]
    assert [p.texture_name for p in state] == [
        "earth.png",
        "mars.png",
        "moon.png",
        "sun.png",
    ]


def test_missing_file_raises(tmp_path):
    with pytest.raises(UniverseFileError, match="doesn't exist"):
        FileUniverse(Newton(), str(tmp_path / "absent"), True)


def test_existing_file_refused_when_creating(sample):
    with pytest.raises(UniverseFileError, match="already exists"):
        FileUniverse(Newton(), sample, False)


def test_invalid_file_raises(tmp_path):
    (tmp_path / "bad.sss").write_text("1 2 3\n")
    with pytest.raises(UniverseFileError, match="not valid"):
        FileUniverse(Newton(), str(tmp_path / "bad"), True)


@pytest.mark.parametrize(
    ("line", "valid"),
    [
        ("", True),
        ("    ", True),
        ("1 2 3 4 5 6 tex", True),
        ("1e3 -2.5 .5 0 0 1 x.png", True),
        ("  1 2 3 4 5 6 tex", True),
        ("1 2 3 4 5 6", False),
        ("1 2 3 4 5 6 tex extra", False),
        ("1 2 3 4 5 6 tex ", False),
        ("1 2 3 4 5 6 tex\r", False),
        ("a 2 3 4 5 6 tex", False),
        ("\t", False),
    ],
)
def test_is_valid_line(line, valid):
    assert is_valid_line(line) is valid


def test_new_universe_writes_and_reloads(tmp_path):
    name = str(tmp_path / "fresh")
    universe = FileUniverse(Newton(), name, False)
    assert len(universe) == 0
    universe.add(PlanetState(1e3, 400, 400, 0, 0, 100, "default"))
    assert (tmp_path / "fresh.sss").read_text() == "\n1000 400 400 0 0 100 default"
    reopened = FileUniverse(Newton(), name, True)
    assert reopened.state() == [PlanetState(1e3, 400, 400, 0, 0, 100)]
    assert reopened[0].texture_name == "default"


def test_numbers_written_with_six_significant_digits(tmp_path):
    universe = FileUniverse(Newton(), str(tmp_path / "digits"), False)
    universe.add(PlanetState(1e10, 123.4567, -0.5, 0.01, 2.5e-7, 3, "rock"))
    assert (tmp_path / "digits.sss").read_text() == (
        "\n1e+10 123.457 -0.5 0.01 2.5e-07 3 rock"
    )


def test_remove_rewrites_file(sample, tmp_path):
    universe = FileUniverse(Newton(), sample, True)
    universe.remove(universe[1])
    assert len(universe) == 3
    assert (tmp_path / "test.sss").read_text() == (
        "\n500 100 200 0.01 0.02 10 earth.png"
        "\n5 500 -200 0.01 0.02 8 moon.png"
        "\n87 700 80 0.01 0.02 20 sun.png"
    )
    assert universe.count_planets(universe.path) == 3


def test_save_writes_changes(sample, tmp_path):
    universe = FileUniverse(Newton(), sample, True)
    universe[0].m = 42
    universe.save()
    text = (tmp_path / "test.sss").read_text()
    assert text.startswith("\n42 100 200 0.01 0.02 10 earth.png")
    assert FileUniverse(Newton(), sample, True)[0].m == 42


def test_loading_twice_detects_mismatch(sample):
    universe = FileUniverse(Newton(), sample, True)
    with pytest.raises(UniverseFileError, match="number of the planets"):
        universe.load()


def test_count_planets_skips_blank_lines(tmp_path, sample):
    universe = FileUniverse(Newton(), sample, True)
    other = tmp_path / "other.sss"
    other.write_text("\n   \n1 2 3 4 5 6 a\n\n7 8 9 1 2 3 b\n")
    assert universe.count_planets(str(other)) == 2


def test_validate_file(sample, tmp_path):
    universe = FileUniverse(Newton(), sample, True)
    assert universe.validate_file(universe.path) is True
    with pytest.raises(UniverseFileError, match="verify"):
        universe.validate_file(str(tmp_path / "nowhere.sss"))


def test_count_planets_missing_file(sample, tmp_path):
    universe = FileUniverse(Newton(), sample, True)
    with pytest.raises(UniverseFileError):
        universe.count_planets(str(tmp_path / "nowhere.sss"))