from __future__ import annotations

import math
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import TypeVar

from pygame.rect import FRect

from pysplat.common import Coordinate, DrawingContext

T = TypeVar("T")


class Camera:
    """
    Controls which portion of the drawing surface is visible.

    If the camera is at 50,50 and a rectangle is drawn at 200,200, it
    appears on screen at 150,150. Width and height are kept for entities
    that need the camera's extent; they do not clip anything.
    """

    def __init__(
        self,
        x: Coordinate = 0,
        y: Coordinate = 0,
        width: Coordinate = 0,
        height: Coordinate = 0,
    ) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height

    @property
    def rect(self) -> FRect:
        return FRect(self.x, self.y, self.width, self.height)

    @property
    def offset(self) -> tuple[int, int]:
        """Whole-pixel position used when translating a context."""
        return math.floor(self.x), math.floor(self.y)

    def draw(self, context: DrawingContext) -> None:
        """Offset all following draw operations on the context."""
        ox, oy = self.offset
        context.translate(-ox, -oy)

    def draw_absolute(self, context: DrawingContext, draw_func: Callable[[], T]) -> T:
        """
        Call ``draw_func`` with the camera offset undone.

        The context state is restored even if ``draw_func`` raises.
        """
        with self.absolute(context):
            return draw_func()

    @contextmanager
    def absolute(self, context: DrawingContext) -> Iterator[DrawingContext]:
        context.save()
        try:
            ox, oy = self.offset
            context.translate(ox, oy)
            yield context
        finally:
            context.restore()

    def __repr__(self) -> str:
        return f"Camera(x={self.x}, y={self.y}, width={self.width}, height={self.height})"
