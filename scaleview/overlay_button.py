"""Textured overlay button drawn on top of the scene."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from PIL import Image

logger = logging.getLogger(__name__)

BUTTON_SIZE = 50
TEXTURE_FILES = ("left_arrow.png", "right_arrow.png")


class TextureError(Exception):
    """Raised when an image cannot be turned into a texture."""


@dataclass(frozen=True)
class Texture:
    """An RGBA pixel block, four bytes per pixel, rows top to bottom."""

    width: int
    height: int
    data: bytes

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("texture dimensions must not be negative")
        if len(self.data) != self.width * self.height * 4:
            raise ValueError(
                f"expected {self.width * self.height * 4} bytes of RGBA data, "
                f"got {len(self.data)}"
            )


def to_rgba(image: Image.Image) -> Texture:
    """Convert any image to an RGBA texture; missing alpha becomes fully opaque."""
    rgba = image.convert("RGBA")
    return Texture(rgba.width, rgba.height, rgba.tobytes())


def load_texture(path: str | PathLike[str]) -> Texture:
    """Load a PNG file as a texture."""
    try:
        with Image.open(path, formats=["PNG"]) as image:
            image.load()
            return to_rgba(image)
    except OSError as exc:
        raise TextureError(f"failed to load PNG image {path}") from exc


def _texture_image(texture: Texture) -> Image.Image:
    return Image.frombytes("RGBA", (texture.width, texture.height), texture.data)


def _shade(sprite: Image.Image) -> Image.Image:
    """Tint a sprite black at half its opacity, as drawn while hovered."""
    alpha = sprite.getchannel("A").point(lambda value: (value + 1) // 2)
    black = Image.new("L", sprite.size, 0)
    return Image.merge("RGBA", (black, black, black, alpha))


class OverlayButton:
    """A square button with two textures that it switches between on click."""

    def __init__(
        self,
        x: int = 0,
        y: int = 0,
        *,
        textures: tuple[Texture | None, Texture | None] | None = None,
        resource_dir: str | PathLike[str] = "resources",
    ) -> None:
        self.x = x
        self.y = y
        self.width = BUTTON_SIZE
        self.height = BUTTON_SIZE
        self.hovering = False
        self.texture_index = 1
        if textures is None:
            textures = tuple(
                self._try_load(Path(resource_dir) / name) for name in TEXTURE_FILES
            )
        if len(textures) != 2:
            raise ValueError("an overlay button needs exactly two textures")
        self.textures: tuple[Texture | None, Texture | None] = tuple(textures)

    @staticmethod
    def _try_load(path: Path) -> Texture | None:
        try:
            return load_texture(path)
        except TextureError as exc:
            logger.error("%s", exc)
            return None

    def hit_test(self, x: int, y: int) -> bool:
        """Whether a point lies inside the button, edges included."""
        return (
            self.x <= x <= self.x + self.width and self.y <= y <= self.y + self.height
        )

    def toggle_texture(self) -> None:
        """Switch to the other texture."""
        self.texture_index = (self.texture_index + 1) % 2

    def current_texture(self) -> Texture | None:
        """The texture shown now, or None if it failed to load."""
        return self.textures[self.texture_index]

    def draw(self, canvas: Image.Image) -> None:
        """Blend the button onto an RGBA canvas in place."""
        if canvas.mode != "RGBA":
            raise ValueError("the canvas must be an RGBA image")
        size = (self.width, self.height)
        texture = self.current_texture()
        if texture is None:
            color = (0, 0, 0, 128) if self.hovering else (255, 255, 255, 255)
            sprite = Image.new("RGBA", size, color)
        else:
            sprite = _texture_image(texture).resize(size, Image.Resampling.BILINEAR)
            if self.hovering:
                sprite = _shade(sprite)
        layer = Image.new("RGBA", canvas.size, (0, 0, 0, 0))
        layer.paste(sprite, (self.x, self.y))
        canvas.alpha_composite(layer)