import pygame
import pytest

from orbitsim.button import Button

YELLOW = (255, 255, 0)
BLACK = (0, 0, 0)


@pytest.fixture(scope="module")
def font():
    pygame.font.init()
    return pygame.font.Font(None, 15)


@pytest.fixture
def button(font):
    return Button((160, 0), (150, 90), "Add planet", YELLOW, BLACK, font, True)


@pytest.mark.parametrize(
    "point, expected",
    [((160, 0), True), ((309, 89), True), ((235, 45), True),
     ((310, 45), False), ((159, 45), False), ((200, 90), False)],
)
def test_is_clicked_uses_button_rectangle(button, point, expected):
    assert button.is_clicked(point) is expected


def test_hidden_button_is_still_clickable(button):
    button.hide()
    assert button.visible is False
    assert button.is_clicked((200, 40)) is True


def test_show_and_hide_toggle_visibility(font):
    button = Button((0, 0), (10, 10), "x", YELLOW, BLACK, font, False)
    button.show()
    assert button.visible is True
    button.hide()
    assert button.visible is False


def test_label_is_centred(button):
    width, height = button.label_size
    x, y = button.text_position
    assert x + width / 2 == pytest.approx(160 + 150 / 2)
    assert y + height / 2 == pytest.approx(0 + 90 / 2)


def test_set_text_changes_label_and_recentres(button):
    before = button.text_position[0]
    button.set_text("Unselect planet with a longer label")
    assert button.text == "Unselect planet with a longer label"
    assert button.text_position[0] < before
    width, _ = button.label_size
    assert button.text_position[0] + width / 2 == pytest.approx(235)


def test_draw_fills_button_color(button):
    surface = pygame.Surface((400, 100))
    button.draw(surface)
    assert tuple(surface.get_at((161, 1)))[:3] == YELLOW
    assert tuple(surface.get_at((100, 50)))[:3] == BLACK


def test_hidden_button_draws_nothing(button):
    surface = pygame.Surface((400, 100))
    button.hide()
    button.draw(surface)
    assert tuple(surface.get_at((161, 1)))[:3] == BLACK


def test_transparent_button_leaves_background(font):
    surface = pygame.Surface((300, 200))
    surface.fill((0, 0, 255))
    button = Button((300 / 2 - 100, 200 / 2 - 50), (200, 100), "Add a planet",
                    (0, 0, 0, 0), (255, 0, 0), font, True)
    button.draw(surface)
    assert tuple(surface.get_at((51, 51)))[:3] == (0, 0, 255)