import pygame
from pygame.math import Vector2

from pachinko.pin import Pin


def _white_surface():
    surface = pygame.Surface((100, 100))
    surface.fill((255, 255, 255))
    return surface


def test_position_is_converted_to_vector():
    pin = Pin((1, 2), 3)
    assert pin.position == Vector2(1, 2)
    assert pin.radius == 3


def test_position_is_copied():
    source = Vector2(4, 5)
    pin = Pin(source, 2)
    source.x = 40
    assert pin.position.x == 4


def test_draw_paints_body():
    surface = _white_surface()
    Pin((50, 50), 10).draw(surface)
    assert tuple(surface.get_at((54, 54)))[:3] == (130, 130, 130)


def test_draw_paints_highlight():
    surface = _white_surface()
    Pin((50, 50), 10).draw(surface)
    assert tuple(surface.get_at((48, 48)))[:3] == (200, 200, 200)


def test_draw_leaves_far_pixels_untouched():
    surface = _white_surface()
    Pin((50, 50), 10).draw(surface)
    assert tuple(surface.get_at((0, 0)))[:3] == (255, 255, 255)
    assert tuple(surface.get_at((99, 99)))[:3] == (255, 255, 255)