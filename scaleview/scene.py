"""The scene: a scalable rectangle with an overlay button, and its renderer."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from PIL import Image, ImageDraw

from scaleview.overlay_button import OverlayButton

RECT_X = 100
RECT_Y = 150
RECT_WIDTH = 200
RECT_HEIGHT = 150


def _rgba(red: float, green: float, blue: float) -> tuple[int, int, int, int]:
    return tuple(int(c * 255 + 0.5) for c in (red, green, blue)) + (255,)


CLEAR_COLOR = _rgba(0.9, 0.9, 0.9)
RECT_COLOR = _rgba(0.0, 0.7, 1.0)
HOVER_COLOR = _rgba(1.0, 0.5, 0.2)


@dataclass
class Scene:
    """Interaction state of the rectangle and the overlay button."""

    button: OverlayButton = field(default_factory=OverlayButton)
    on_overlay_button_clicked: Callable[[], None] | None = None
    scale: float = 1.0
    wireframe: bool = False
    hovering: bool = False
    mouse_pos: tuple[int, int] = (0, 0)

    def rectangle_bounds(self) -> tuple[int, int, int, int]:
        """The rectangle as (x, y, width, height) at the current scale."""
        return (
            RECT_X,
            RECT_Y,
            int(RECT_WIDTH * self.scale),
            int(RECT_HEIGHT * self.scale),
        )

    def is_mouse_over_rectangle(self, x: int, y: int) -> bool:
        rx, ry, width, height = self.rectangle_bounds()
        return rx <= x <= rx + width and ry <= y <= ry + height

    def mouse_move(self, x: int, y: int) -> bool:
        """Track the pointer; return True if a hover state changed."""
        self.mouse_pos = (x, y)
        was_hovering = self.hovering
        self.hovering = self.is_mouse_over_rectangle(x, y)
        button_was_hovering = self.button.hovering
        self.button.hovering = self.button.hit_test(x, y)
        return (
            self.hovering != was_hovering
            or self.button.hovering != button_was_hovering
        )

    def left_down(self, x: int, y: int) -> bool:
        """Handle a click; return True if it hit the overlay button."""
        if not self.button.hit_test(x, y):
            return False
        if self.on_overlay_button_clicked is not None:
            self.on_overlay_button_clicked()
        self.button.toggle_texture()
        return True


@dataclass
class SceneCanvas:
    """Renders a scene into an image of the given size."""

    scene: Scene = field(default_factory=Scene)
    size: tuple[int, int] = (640, 480)
    on_refresh: Callable[[], None] | None = None

    def _request_refresh(self) -> None:
        if self.on_refresh is not None:
            self.on_refresh()

    def set_scene_scale(self, scale: float) -> None:
        self.scene.scale = scale
        self._request_refresh()

    def set_wireframe_mode(self, enabled: bool) -> None:
        self.scene.wireframe = enabled
        self._request_refresh()

    def render(self) -> Image.Image:
        """Draw the scene and return it as an RGBA image."""
        image = Image.new("RGBA", self.size, CLEAR_COLOR)
        draw = ImageDraw.Draw(image)
        x, y, width, height = self.scene.rectangle_bounds()
        left, right = sorted((x, x + width))
        top, bottom = sorted((y, y + height))
        color = HOVER_COLOR if self.scene.hovering else RECT_COLOR
        if self.scene.wireframe:
            draw.rectangle((left, top, right, bottom), outline=color)
        elif right > left and bottom > top:
            draw.rectangle((left, top, right - 1, bottom - 1), fill=color)
        self.scene.button.draw(image)
        return image