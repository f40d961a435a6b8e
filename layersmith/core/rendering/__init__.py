"""Rendering adapters: the abstract surface and its Pillow implementation."""

from .base import DrawableSurface
from .pillow import PillowSurface, load_image
from .gif import assemble_gif, DEFAULT_GIF_SIZE, DEFAULT_FRAME_DELAY_MS

__all__ = [
    "DrawableSurface",
    "PillowSurface",
    "load_image",
    "assemble_gif",
    "DEFAULT_GIF_SIZE",
    "DEFAULT_FRAME_DELAY_MS",
]
