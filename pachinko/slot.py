"""The prize slot at the bottom of the board."""

from dataclasses import dataclass

import pygame

_FILL = (255, 203, 0)
_BORDER = (127, 106, 79)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


@dataclass
class Slot:
    """A rectangular target given as (x, y, width, height)."""

    rect: tuple

    def __post_init__(self) -> None:
        self.rect = tuple(float(v) for v in self.rect)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the slot with a border."""
        x, y, width, height = self.rect
        area = pygame.Rect(int(x), int(y), int(width), int(height))
        pygame.draw.rect(surface, _FILL, area)
        pygame.draw.rect(surface, _BORDER, area, 2)

    def check_hit(self, ball_position, ball_radius: float) -> bool:
        """Return whether a circle touches or overlaps the slot."""
        x, y, width, height = self.rect
        bx, by = ball_position
        dx = bx - _clamp(bx, x, x + width)
        dy = by - _clamp(by, y, y + height)
        return dx * dx + dy * dy <= ball_radius * ball_radius