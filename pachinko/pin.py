"""Static pins that balls bounce off."""

from dataclasses import dataclass

import pygame
from pygame.math import Vector2

_OUTLINE = (0, 0, 0)
_BODY = (130, 130, 130)
_HIGHLIGHT = (200, 200, 200)


@dataclass
class Pin:
    """A round pin fixed on the board."""

    position: Vector2
    radius: float

    def __post_init__(self) -> None:
        self.position = Vector2(self.position)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the pin with an outline and a small highlight."""
        pygame.draw.circle(surface, _OUTLINE, self.position, self.radius + 1)
        pygame.draw.circle(surface, _BODY, self.position, self.radius)
        highlight = self.position - Vector2(self.radius * 0.2, self.radius * 0.2)
        pygame.draw.circle(surface, _HIGHLIGHT, highlight, self.radius * 0.3)