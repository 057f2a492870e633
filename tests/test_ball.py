import random

import pygame
import pytest
from pygame.math import Vector2

from pachinko.ball import Ball


class _ZeroRng:
    def randint(self, low, high):
        return 0


def test_defaults():
    ball = Ball((5, 6), 6.0)
    assert ball.position == Vector2(5, 6)
    assert ball.velocity == Vector2(0, 0)
    assert ball.gravity == 600.0
    assert ball.active is True


def test_update_applies_gravity_before_moving():
    ball = Ball((0, 0), 6.0)
    ball.update(1.0)
    assert ball.velocity == Vector2(0, 600)
    assert ball.position == Vector2(0, 600)


def test_update_moves_horizontally_with_velocity():
    ball = Ball((0, 0), 6.0, velocity=(10, 0), gravity=0.0)
    ball.update(2.0)
    assert ball.position == Vector2(20, 0)


def test_inactive_ball_does_not_move():
    ball = Ball((3, 4), 6.0, velocity=(10, 10), active=False)
    ball.update(1.0)
    assert ball.position == Vector2(3, 4)
    assert ball.velocity == Vector2(10, 10)


def test_reset_restores_state():
    ball = Ball((0, 0), 6.0, velocity=(5, 5), active=False)
    ball.reset((7, 8))
    assert ball.position == Vector2(7, 8)
    assert ball.velocity == Vector2(0, 0)
    assert ball.active is True


def test_collision_pushes_ball_out_of_pin():
    ball = Ball((10, 0), 6.0)
    assert ball.collide_with_pin((0, 0), 6.0, random.Random(1)) is True
    assert ball.position.x == pytest.approx(12.0)
    assert ball.position.y == pytest.approx(0.0)


def test_collision_random_push_matches_rng():
    ball = Ball((10, 0), 6.0)
    ball.collide_with_pin((0, 0), 6.0, random.Random(42))
    expected = random.Random(42).randint(-30, 30)
    assert ball.velocity.x == pytest.approx(expected)
    assert ball.velocity.y == pytest.approx(0.0)


def test_collision_push_stays_in_range():
    rng = random.Random(7)
    for _ in range(200):
        ball = Ball((10, 0), 6.0)
        ball.collide_with_pin((0, 0), 6.0, rng)
        assert -30 <= ball.velocity.x <= 30


def test_collision_reflects_and_damps_velocity():
    ball = Ball((10, 0), 6.0, velocity=(-100, 0))
    ball.collide_with_pin((0, 0), 6.0, _ZeroRng())
    assert ball.velocity.x == pytest.approx(90.0)
    assert ball.velocity.y == pytest.approx(0.0)


def test_collision_keeps_tangential_direction():
    ball = Ball((10, 0), 6.0, velocity=(0, 50))
    ball.collide_with_pin((0, 0), 6.0, _ZeroRng())
    assert ball.velocity.x == pytest.approx(0.0)
    assert ball.velocity.y == pytest.approx(50 * 0.9)


def test_no_collision_when_apart():
    ball = Ball((100, 100), 6.0, velocity=(1, 2))
    assert ball.collide_with_pin((0, 0), 6.0, _ZeroRng()) is False
    assert ball.position == Vector2(100, 100)
    assert ball.velocity == Vector2(1, 2)


def test_touching_exactly_is_not_a_collision():
    ball = Ball((12, 0), 6.0)
    assert ball.collide_with_pin((0, 0), 6.0, _ZeroRng()) is False


def test_inactive_ball_never_collides():
    ball = Ball((1, 0), 6.0, active=False)
    assert ball.collide_with_pin((0, 0), 6.0, _ZeroRng()) is False
    assert ball.position == Vector2(1, 0)


def test_coincident_centres_do_not_move_ball():
    ball = Ball((5, 5), 6.0, velocity=(3, 4))
    assert ball.collide_with_pin((5, 5), 6.0, _ZeroRng()) is True
    assert ball.position == Vector2(5, 5)
    assert ball.velocity.x == pytest.approx(3 * 0.9)
    assert ball.velocity.y == pytest.approx(4 * 0.9)


def test_draw_paints_body_and_gloss():
    surface = pygame.Surface((100, 100))
    surface.fill((255, 255, 255))
    Ball((50, 50), 10.0).draw(surface)
    assert tuple(surface.get_at((55, 55)))[:3] == (80, 80, 80)
    gloss = surface.get_at((46, 46))
    assert 80 < gloss.r < 255


def test_inactive_ball_is_not_drawn():
    surface = pygame.Surface((100, 100))
    surface.fill((255, 255, 255))
    Ball((50, 50), 10.0, active=False).draw(surface)
    assert tuple(surface.get_at((50, 50)))[:3] == (255, 255, 255)