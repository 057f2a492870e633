"""Drawing helpers for buttons, text and the in-game HUD."""

from dataclasses import dataclass
from functools import lru_cache

import pygame

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
GRAY = (130, 130, 130)
LIGHTGRAY = (200, 200, 200)
DARKGRAY = (80, 80, 80)
DARKBLUE = (0, 82, 172)
MAROON = (190, 33, 55)
RED = (230, 41, 55)
RAYWHITE = (245, 245, 245)

_HUD_FONT_SIZE = 20
_BUTTON_FONT_SIZE = 20


@dataclass(frozen=True)
class FrameInput:
    """Input gathered for one frame: mouse state, pressed keys and typed text."""

    mouse_position: tuple = (0.0, 0.0)
    mouse_pressed: bool = False
    mouse_released: bool = False
    keys_pressed: frozenset = frozenset()
    text: str = ""


@lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


def _contains(bounds, point) -> bool:
    x, y, width, height = bounds
    px, py = point
    return x <= px < x + width and y <= py < y + height


def _rect(bounds) -> pygame.Rect:
    x, y, width, height = bounds
    return pygame.Rect(int(x), int(y), int(width), int(height))


def _blit_text(surface, text, x, y, font_size, color) -> None:
    if not text:
        return
    rendered = _font(font_size).render(text, True, color)
    surface.blit(rendered, (int(x), int(y)))


def measure_text(text: str, font_size: int) -> int:
    """Width in pixels of text rendered at the given size."""
    if not text:
        return 0
    return _font(font_size).size(text)[0]


def draw_button(surface, bounds, text: str, hovered: bool = False) -> None:
    """Draw a bordered button whose fill depends on hover."""
    area = _rect(bounds)
    pygame.draw.rect(surface, GRAY if hovered else LIGHTGRAY, area)
    pygame.draw.rect(surface, DARKGRAY, area, 2)

    x, y, width, height = bounds
    text_width = measure_text(text, _BUTTON_FONT_SIZE)
    text_x = x + (width - text_width) / 2
    text_y = y + (height - _BUTTON_FONT_SIZE) / 2
    _blit_text(surface, text, int(text_x), int(text_y), _BUTTON_FONT_SIZE, BLACK)


def draw_text_centered(surface, text: str, center, font_size: int, color) -> None:
    """Draw text so that its middle sits on center."""
    cx, cy = center
    text_width = measure_text(text, font_size)
    text_x = int(cx - text_width // 2)
    text_y = int(cy - font_size // 2)
    _blit_text(surface, text, text_x, text_y, font_size, color)


def draw_label(surface, text: str, position, font_size: int = 20, color=DARKGRAY) -> None:
    """Draw text with its top-left corner at position."""
    x, y = position
    _blit_text(surface, text, int(x), int(y), font_size, color)


def draw_hud(surface, balls_remaining: int, score: int, show_congrats: bool, screen_width: int) -> None:
    """Draw the help line, ball count, score and the congratulation banner."""
    draw_label(surface, "Press R to Reset | F11 to Toggle Fullscreen", (10, 10), _HUD_FONT_SIZE, BLACK)
    draw_label(surface, f"Balls Remaining: {balls_remaining}", (10, 40), _HUD_FONT_SIZE, BLACK)

    score_text = f"Score: {score}"
    score_width = measure_text(score_text, _HUD_FONT_SIZE)
    draw_label(surface, score_text, (screen_width - score_width - 10, 10), _HUD_FONT_SIZE, DARKBLUE)

    if show_congrats:
        draw_text_centered(surface, "CONGRATULATIONS!", (screen_width / 2.0, 100.0), 30, MAROON)


def is_button_clicked(surface, bounds, text: str, frame_input: FrameInput) -> bool:
    """Draw a button and report a left click released over it."""
    hovered = _contains(bounds, frame_input.mouse_position)
    area = _rect(bounds)
    pygame.draw.rect(surface, LIGHTGRAY if hovered else GRAY, area)
    pygame.draw.rect(surface, BLACK, area, 2)

    x, y, width, height = bounds
    text_width = measure_text(text, _BUTTON_FONT_SIZE)
    text_x = int(x + (width - text_width) / 2)
    text_y = int(y + (height - _BUTTON_FONT_SIZE) / 2)
    _blit_text(surface, text, text_x, text_y, _BUTTON_FONT_SIZE, BLACK)

    return hovered and frame_input.mouse_released


def is_mouse_over(bounds, frame_input: FrameInput) -> bool:
    """Whether the mouse lies inside bounds (right and bottom edges excluded)."""
    return _contains(bounds, frame_input.mouse_position)