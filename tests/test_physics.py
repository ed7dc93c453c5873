import pytest

from orbitsim.physics import Newton, PlanetState


def approx(value):
    return pytest.approx(value, rel=1.2e-5, abs=1.2e-5)


@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [
        ((0, 0), (3, 4), 25),
        ((36, -12), (-22, 38), 5864),
        ((-4, -84), (-6, -2), 6728),
        ((37, 0), (0, 0), 1369),
    ],
)
def test_distance_squared(a, b, expected):
    p1 = PlanetState(x=a[0], y=a[1])
    p2 = PlanetState(x=b[0], y=b[1])
    assert Newton().distance_squared(p1, p2) == approx(expected)


@pytest.mark.parametrize(
    ("r1", "r2", "expected"),
    [
        (10, 0, 100),
        (27, 8, 1225),
        (36, 100, 18496),
        (17, 41, 3364),
    ],
)
def test_min_distance_squared(r1, r2, expected):
    p1 = PlanetState(r=r1)
    p2 = PlanetState(r=r2)
    assert Newton().min_distance_squared(p1, p2) == approx(expected)


@pytest.mark.parametrize(
    ("a", "b", "fx", "fy"),
    [
        ((1e10, 0, 0), (1e12, 200, 100), 1.54734e14, 7.736699e13),
        ((1e12, 100, 200), (1e10, 0, 0), -7.736699e13, -1.54734e14),
        ((1e10, 0, 0), (1e12, -200, 100), -1.54734e14, 7.736699e13),
        ((1e10, 0, 0), (1e12, -100, 200), -7.736699e13, 1.54734e14),
        ((1e10, 0, 0), (1e12, 200, -100), 1.54734e14, -7.736699e13),
        ((1e10, 0, 0), (1e12, 100, -200), 7.736699e13, -1.54734e14),
        ((1e10, 0, 0), (1e12, -200, -100), -1.54734e14, -7.736699e13),
        ((1e10, 0, 0), (1e12, -100, -200), -7.736699e13, -1.54734e14),
    ],
)
def test_newton_force(a, b, fx, fy):
    f_x, f_y = Newton().force(PlanetState(*a), PlanetState(*b))
    assert f_x == approx(fx)
    assert f_y == approx(fy)


def test_force_between_heavy_planets():
    p1 = PlanetState(6e25, 100, 100, 0, -100)
    p2 = PlanetState(6e26, 50, 50, 0, 0)
    f_x, f_y = Newton().force(p1, p2)
    assert f_x == approx(-4.40381e45)
    assert f_y == approx(-4.40381e45)


def test_force_along_axis():
    p1 = PlanetState(1e10, 0, 0, 0, 0, 50)
    p2 = PlanetState(1, 100, 0, 0, 0, 1)
    f_x, f_y = Newton().force(p1, p2)
    assert f_x == approx(864.989)
    assert f_y == approx(0)


def test_coincident_planets_exert_no_force():
    p1 = PlanetState(5, 10, 10)
    p2 = PlanetState(7, 10, 10)
    assert Newton().force(p1, p2) == (0.0, 0.0)


def test_force_is_antisymmetric():
    p1 = PlanetState(3, 1, 2)
    p2 = PlanetState(8, -4, 7)
    newton = Newton()
    f12 = newton.force(p1, p2)
    f21 = newton.force(p2, p1)
    assert f12[0] == pytest.approx(-f21[0])
    assert f12[1] == pytest.approx(-f21[1])


def test_custom_constant_scales_force():
    p1 = PlanetState(1, 0, 0)
    p2 = PlanetState(1, 2, 0)
    assert Newton(gravitational_constant=4.0).force(p1, p2) == (1.0, 0.0)


def test_equality_ignores_texture():
    a = PlanetState(1, 2, 3, 4, 5, 6, "earth.png", object())
    b = PlanetState(1, 2, 3, 4, 5, 6, "mars.png")
    assert a == b
    assert a != PlanetState(1, 2, 3, 4, 5, 7, "earth.png")