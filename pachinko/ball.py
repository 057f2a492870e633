"""The falling ball and its physics."""

import random
from dataclasses import dataclass, field

import pygame
from pygame.math import Vector2

_BODY = (80, 80, 80)
_GLOSS = (255, 255, 255)
_GLOSS_ALPHA = 0.5
_FRICTION = 0.9
_RANDOM_PUSH = 30


def _blend_circle(surface, color, alpha, center, radius):
    size = int(radius * 2) + 2
    layer = pygame.Surface((size, size), pygame.SRCALPHA)
    pygame.draw.circle(layer, (*color, int(alpha * 255)), (size / 2, size / 2), radius)
    surface.blit(layer, (round(center[0] - size / 2), round(center[1] - size / 2)))


@dataclass
class Ball:
    """A ball pulled down by gravity that bounces off pins."""

    position: Vector2
    radius: float
    velocity: Vector2 = field(default_factory=Vector2)
    gravity: float = 600.0
    active: bool = True

    def __post_init__(self) -> None:
        self.position = Vector2(self.position)
        self.velocity = Vector2(self.velocity)

    def update(self, dt: float) -> None:
        """Apply gravity, then move by the new velocity."""
        if not self.active:
            return
        self.velocity.y += self.gravity * dt
        self.position += self.velocity * dt

    def draw(self, surface: pygame.Surface) -> None:
        """Draw a glossy steel ball."""
        if not self.active:
            return
        pygame.draw.circle(surface, _BODY, self.position, self.radius)
        gloss = self.position - Vector2(self.radius * 0.4, self.radius * 0.4)
        _blend_circle(surface, _GLOSS, _GLOSS_ALPHA, gloss, self.radius * 0.4)

    def reset(self, position) -> None:
        """Move to a new position, stop, and reactivate."""
        self.position = Vector2(position)
        self.velocity = Vector2()
        self.active = True

    def collide_with_pin(self, pin_position, pin_radius: float, rng=None) -> bool:
        """Resolve an overlap with a pin; return whether they collided.

        On contact the ball is pushed out along the normal, its velocity is
        reflected and damped, and a random sideways push is added.
        """
        if not self.active:
            return False
        offset = self.position - Vector2(pin_position)
        distance = offset.length()
        overlap = (self.radius + pin_radius) - distance
        if overlap <= 0.0:
            return False

        normal = offset / distance if distance > 0 else Vector2()
        self.position += normal * overlap
        reflected = self.velocity - 2.0 * self.velocity.dot(normal) * normal
        self.velocity = reflected * _FRICTION
        source = rng if rng is not None else random
        self.velocity.x += source.randint(-_RANDOM_PUSH, _RANDOM_PUSH)
        return True