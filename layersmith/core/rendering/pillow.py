"""Pillow-backed drawable surface."""

import io
import logging
from pathlib import Path
from typing import Any

from PIL import Image

from .base import DrawableSurface


logger = logging.getLogger(__name__)

_FORMATS = {
    "png": "PNG",
    "jpg": "JPEG",
    "jpeg": "JPEG",
}


def load_image(path: Path) -> Image.Image:
    """Load an image file as RGBA, fully decoded."""
    with Image.open(path) as img:
        return img.convert("RGBA")


class PillowSurface(DrawableSurface):
    """RGBA canvas composited with ``Image.alpha_composite``.

    Drawables are ``PIL.Image.Image`` instances; they are resized to the
    requested box before compositing.
    """

    def __init__(self, width: int, height: int) -> None:
        super().__init__(width, height)
        self._canvas = self._blank()

    def _blank(self) -> Image.Image:
        return Image.new("RGBA", (self.width, self.height), (0, 0, 0, 0))

    @property
    def image(self) -> Image.Image:
        return self._canvas

    def clear(self) -> None:
        self._canvas = self._blank()

    def draw_image(self, drawable: Any, x: int, y: int, w: int, h: int) -> None:
        layer = drawable if drawable.mode == "RGBA" else drawable.convert("RGBA")
        if layer.size != (w, h):
            layer = layer.resize((w, h))
        self._canvas.alpha_composite(layer, dest=(x, y))

    def encode(self, fmt: str = "png") -> bytes:
        try:
            pil_format = _FORMATS[fmt.lower()]
        except KeyError:
            raise ValueError(f"Unsupported image format: {fmt}") from None

        image = self._canvas
        if pil_format == "JPEG":
            # JPEG has no alpha channel; flatten onto black.
            background = Image.new("RGB", image.size, (0, 0, 0))
            background.paste(image, mask=image.getchannel("A"))
            image = background

        buffer = io.BytesIO()
        image.save(buffer, format=pil_format)
        return buffer.getvalue()
