"""The title menu with start, settings, exit and admin buttons."""

import pygame

from pachinko.ui import (
    BLACK,
    DARKBLUE,
    DARKGRAY,
    GRAY,
    RAYWHITE,
    WHITE,
    FrameInput,
    is_mouse_over,
    measure_text,
)

_BUTTON_WIDTH = 200.0
_BUTTON_HEIGHT = 50.0
_SPACING = 20.0
_ADMIN_WIDTH = 120.0
_ADMIN_HEIGHT = 30.0
_TITLE = "Pachinko Game"


def _fill_faded(surface, bounds, color, alpha) -> None:
    x, y, width, height = bounds
    layer = pygame.Surface((int(width), int(height)), pygame.SRCALPHA)
    layer.fill((*color, int(alpha * 255)))
    surface.blit(layer, (int(x), int(y)))


def _blit_text(surface, text, x, y, size, color) -> None:
    if not text:
        return
    if not pygame.font.get_init():
        pygame.font.init()
    rendered = pygame.font.Font(None, size).render(text, True, color)
    surface.blit(rendered, (int(x), int(y)))


class Menu:
    """Title screen; after update, the flags say which button was chosen."""

    def __init__(self, screen_width: int, screen_height: int):
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.start_game = False
        self.exit_game = False
        self.go_to_admin = False

        center_x = screen_width / 2.0 - _BUTTON_WIDTH / 2.0
        start_y = screen_height / 2.0 - (_BUTTON_HEIGHT + _SPACING) * 1.5
        step = _BUTTON_HEIGHT + _SPACING
        self.start_button = (center_x, start_y, _BUTTON_WIDTH, _BUTTON_HEIGHT)
        self.settings_button = (center_x, start_y + step, _BUTTON_WIDTH, _BUTTON_HEIGHT)
        self.exit_button = (center_x, start_y + 2 * step, _BUTTON_WIDTH, _BUTTON_HEIGHT)
        self.admin_button = (
            screen_width - _ADMIN_WIDTH - 20,
            screen_height - _ADMIN_HEIGHT - 20,
            _ADMIN_WIDTH,
            _ADMIN_HEIGHT,
        )

    def update(self, frame_input: FrameInput) -> None:
        """Clear the choice flags, then set the one for a button pressed this frame."""
        self.start_game = self.exit_game = self.go_to_admin = False
        if not frame_input.mouse_pressed:
            return
        if is_mouse_over(self.start_button, frame_input):
            self.start_game = True
        elif is_mouse_over(self.exit_button, frame_input):
            self.exit_game = True
        elif is_mouse_over(self.admin_button, frame_input):
            self.go_to_admin = True

    def _draw_button(self, surface, bounds, text, hovered) -> None:
        x, y, width, height = bounds
        area = pygame.Rect(int(x), int(y), int(width), int(height))
        pygame.draw.rect(surface, DARKGRAY if hovered else GRAY, area)
        text_x = x + width / 2 - measure_text(text, 20) // 2
        _blit_text(surface, text, text_x, y + 12, 20, WHITE)

    def draw(self, surface: pygame.Surface, frame_input: FrameInput) -> None:
        """Draw the title and buttons, highlighting the one under the mouse."""
        surface.fill(RAYWHITE)
        title_x = self.screen_width // 2 - measure_text(_TITLE, 40) // 2
        _blit_text(surface, _TITLE, title_x, 100, 40, DARKBLUE)

        for bounds, label in (
            (self.start_button, "Start"),
            (self.settings_button, "Settings"),
            (self.exit_button, "Exit"),
        ):
            self._draw_button(surface, bounds, label, is_mouse_over(bounds, frame_input))

        if is_mouse_over(self.admin_button, frame_input):
            _fill_faded(surface, self.admin_button, DARKGRAY, 0.4)
        else:
            _fill_faded(surface, self.admin_button, GRAY, 0.3)
        x, y, _, _ = self.admin_button
        _blit_text(surface, "Admin", x + 10, y + 5, 20, BLACK)