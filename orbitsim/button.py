"""A rectangular button with a centred label."""

from __future__ import annotations

import pygame

Point = tuple[float, float]


class Button:
    """A clickable rectangle with a text label that can be shown or hidden."""

    def __init__(
        self,
        position: Point,
        size: Point,
        text: str,
        button_color,
        text_color,
        font: pygame.font.Font,
        visible: bool,
    ) -> None:
        self.position = pygame.Vector2(position)
        self.size = pygame.Vector2(size)
        self.button_color = pygame.Color(button_color)
        self.text_color = pygame.Color(text_color)
        self.font = font
        self.visible = visible
        self.set_text(text)

    @property
    def label_size(self) -> tuple[int, int]:
        """Width and height of the rendered label."""
        return self._label.get_size()

    def set_text(self, text: str) -> None:
        """Change the label and centre it on the button."""
        self.text = text
        self._label = self.font.render(text, True, self.text_color)
        width, height = self._label.get_size()
        self.text_position = (
            self.position.x + self.size.x / 2 - width / 2,
            self.position.y + self.size.y / 2 - height / 2,
        )

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the button if it is visible."""
        if not self.visible:
            return
        body = pygame.Surface((round(self.size.x), round(self.size.y)), pygame.SRCALPHA)
        body.fill(self.button_color)
        surface.blit(body, (round(self.position.x), round(self.position.y)))
        surface.blit(self._label, (round(self.text_position[0]), round(self.text_position[1])))

    def is_clicked(self, mouse_position: Point) -> bool:
        """Whether ``mouse_position`` lies on the button, visible or not."""
        mx, my = mouse_position
        return (
            self.position.x <= mx < self.position.x + self.size.x
            and self.position.y <= my < self.position.y + self.size.y
        )

    def show(self) -> None:
        self.visible = True

    def hide(self) -> None:
        self.visible = False