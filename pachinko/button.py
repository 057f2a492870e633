"""A clickable on-screen button."""

from dataclasses import dataclass

from pachinko.ui import FrameInput, is_mouse_over


@dataclass
class Button:
    """A labelled rectangle given as (x, y, width, height) that tracks hover and clicks."""

    bounds: tuple
    text: str
    clicked: bool = False
    hovered: bool = False

    def update(self, frame_input: FrameInput) -> None:
        """Refresh hover state and whether the left button was pressed over it."""
        self.hovered = is_mouse_over(self.bounds, frame_input)
        self.clicked = self.hovered and frame_input.mouse_pressed