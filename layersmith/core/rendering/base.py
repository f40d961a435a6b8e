"""Abstract base class for drawable surfaces."""

from abc import ABC, abstractmethod
from typing import Any


class DrawableSurface(ABC):
    """Abstract canvas that the composition engine paints onto.

    The engine only issues ``clear``/``draw_image`` calls in paint order and
    asks for encoded bytes once an item is final. Implementations must
    paint later calls over earlier ones.

    Args:
        width: Canvas width in pixels.
        height: Canvas height in pixels.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    @abstractmethod
    def clear(self) -> None:
        """Reset the canvas to fully transparent."""
        ...

    @abstractmethod
    def draw_image(self, drawable: Any, x: int, y: int, w: int, h: int) -> None:
        """Paint ``drawable`` scaled to ``w`` x ``h`` at ``(x, y)``."""
        ...

    @abstractmethod
    def encode(self, fmt: str = "png") -> bytes:
        """Encode the current canvas as ``png`` or ``jpg`` bytes."""
        ...

    def fill(self, drawable: Any) -> None:
        """Paint ``drawable`` over the whole canvas."""
        self.draw_image(drawable, 0, 0, self.width, self.height)
