"""Ring of flashing lights shown after a ball lands in the slot."""

import math
from dataclasses import dataclass
from typing import Any, Optional

import pygame

_PALETTE = (
    (230, 41, 55),
    (255, 161, 0),
    (253, 249, 0),
    (0, 228, 48),
    (0, 121, 241),
    (200, 122, 255),
)
_FALLBACK = (255, 255, 255)
_NUM_LIGHTS = 12
_RING_RADIUS = 100.0
_LIGHT_RADIUS = 12


@dataclass
class RewardEffect:
    """A timed celebration effect with an optional sound."""

    sound: Optional[Any] = None
    duration: float = 2.0
    timer: float = 0.0
    active: bool = False

    def trigger(self) -> None:
        """Start the effect and play the win sound."""
        self.timer = self.duration
        self.active = True
        if self.sound is not None:
            self.sound.play()

    def update(self, dt: float) -> None:
        """Count down and switch off when time runs out."""
        if self.active:
            self.timer -= dt
            if self.timer <= 0.0:
                self.active = False

    def lights(self, center) -> list:
        """Return ((x, y), colour) for each light in the ring around center."""
        cx, cy = center
        step = int(self.timer * 10)
        result = []
        for i in range(_NUM_LIGHTS):
            angle = (2 * math.pi / _NUM_LIGHTS) * i
            x = cx + _RING_RADIUS * math.cos(angle)
            y = cy + _RING_RADIUS * math.sin(angle)
            phase = math.fmod(i + step, len(_PALETTE))
            colour = _PALETTE[int(phase)] if phase >= 0 else _FALLBACK
            result.append(((int(x), int(y)), colour))
        return result

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the ring centred on the surface while active."""
        if not self.active:
            return
        center = (surface.get_width() / 2.0, surface.get_height() / 2.0)
        for position, colour in self.lights(center):
            pygame.draw.circle(surface, colour, position, _LIGHT_RADIUS)