from __future__ import annotations

from typing import Protocol, Union

from pygame.surface import Surface

TimeLike = Union[float, int]
Coordinate = Union[float, int]


class Renderer(Protocol):
    def draw_image(self, image: Surface, x: Coordinate, y: Coordinate) -> None: ...


class DrawingContext(Protocol):
    """
    Stateful drawing target with a translation and a save/restore stack.
    """

    def translate(self, dx: Coordinate, dy: Coordinate) -> None: ...

    def save(self) -> None: ...

    def restore(self) -> None: ...


class ImageTransformer(Protocol):
    """
    Pure image transforms. Each returns a new image and leaves the input as is.
    """

    def flip_horizontally(self, image: Surface) -> Surface: ...

    def flip_vertically(self, image: Surface) -> Surface: ...

    def rotate_clockwise(self, image: Surface) -> Surface: ...

    def rotate_counterclockwise(self, image: Surface) -> Surface: ...
