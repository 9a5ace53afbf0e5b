from __future__ import annotations

import logging
import math

import pygame
from pygame.surface import Surface

from pysplat.common import Coordinate, DrawingContext, ImageTransformer, Renderer

log = logging.getLogger(__file__)

__all__ = ("PygameTransformer", "SurfaceContext")


class PygameTransformer(ImageTransformer):
    """Image transforms backed by pygame.transform."""

    def flip_horizontally(self, image: Surface) -> Surface:
        return pygame.transform.flip(image, True, False)

    def flip_vertically(self, image: Surface) -> Surface:
        return pygame.transform.flip(image, False, True)

    def rotate_clockwise(self, image: Surface) -> Surface:
        # pygame rotates counterclockwise for positive angles
        return pygame.transform.rotate(image, -90)

    def rotate_counterclockwise(self, image: Surface) -> Surface:
        return pygame.transform.rotate(image, 90)


class SurfaceContext(Renderer, DrawingContext):
    """
    Wraps a pygame Surface with canvas-like translate/save/restore state.

    Images drawn through draw_image are offset by the accumulated
    translation and snapped down to whole pixels. restore() with nothing
    saved does nothing.
    """

    def __init__(self, surface: Surface) -> None:
        self.surface = surface
        self._offset: tuple[float, float] = (0, 0)
        self._saved: list[tuple[float, float]] = []

    @property
    def offset(self) -> tuple[float, float]:
        """Current translation applied to draw calls."""
        return self._offset

    def translate(self, dx: Coordinate, dy: Coordinate) -> None:
        ox, oy = self._offset
        self._offset = (ox + dx, oy + dy)

    def save(self) -> None:
        self._saved.append(self._offset)

    def restore(self) -> None:
        if not self._saved:
            log.debug("restore() called on %r with no saved state", self)
            return
        self._offset = self._saved.pop()

    def draw_image(self, image: Surface, x: Coordinate, y: Coordinate) -> None:
        ox, oy = self._offset
        self.surface.blit(image, (math.floor(x + ox), math.floor(y + oy)))

    def __repr__(self) -> str:
        return f"SurfaceContext(offset={self._offset}, saved={len(self._saved)})"
