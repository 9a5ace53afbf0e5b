from __future__ import annotations

import logging
import math
import operator
from dataclasses import dataclass, replace
from typing import Optional

from pygame.rect import Rect
from pygame.surface import Surface

from pysplat.buffer import PygameTransformer
from pysplat.common import Coordinate, ImageTransformer, Renderer, TimeLike

log = logging.getLogger(__file__)

__all__ = (
    "AnimationFrame",
    "Animation",
    "EmptyAnimationError",
    "animation_from_strip",
)


class EmptyAnimationError(IndexError):
    """Raised when an animation is stepped, moved or drawn before any frame exists."""


@dataclass(frozen=True)
class AnimationFrame:
    """
    Represents a single frame in an animation.

    Attributes:
        image: The image surface to display.
        duration: How long this frame is shown, in milliseconds.
    """

    image: Surface
    duration: float


class Animation:
    """
    An animated picture made of multiple images.

    Frames play in the order they were added. After the last frame the
    animation resumes at ``repeat_at``; it defaults to 0, so animations loop.
    Set it to a middle frame to play non-repeating introductory frames, or to
    the last frame to keep replaying that frame.

    Animations made with copy() share one frame list. Flipping or rotating
    any of them changes the images every copy draws, while each keeps its own
    playback position and size.

    Attributes:
        frames: List of AnimationFrame, shared between copies.
        frame: Index of the currently displayed frame.
        elapsed_millis: How long the current frame has been displayed.
        width: Width of the first frame added.
        height: Height of the first frame added.
        transformer: Provider used by the flip and rotate methods.
    """

    __slots__ = (
        "frames",
        "frame",
        "elapsed_millis",
        "_repeat_at",
        "width",
        "height",
        "transformer",
    )

    def __init__(self, transformer: Optional[ImageTransformer] = None) -> None:
        self.frames: list[AnimationFrame] = []
        self.frame = 0
        self.elapsed_millis: TimeLike = 0
        self._repeat_at = 0
        self.width = 0
        self.height = 0
        self.transformer = (
            PygameTransformer() if transformer is None else transformer
        )

    @property
    def repeat_at(self) -> int:
        """The frame to restart at after the last frame plays."""
        return self._repeat_at

    @repeat_at.setter
    def repeat_at(self, value: int) -> None:
        value = operator.index(value)
        limit = max(len(self.frames), 1)
        if not 0 <= value < limit:
            raise ValueError(f"repeat_at must be within [0, {limit}), got {value}")
        self._repeat_at = value

    @property
    def image(self) -> Surface:
        """The image of the currently displayed frame."""
        self._require_frames("read the image of")
        return self.frames[self.frame].image

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def copy(self) -> Animation:
        """
        Make a copy that plays independently but shares the frame list.
        """
        anim = Animation(self.transformer)
        anim.frames = self.frames
        anim.frame = self.frame
        anim.elapsed_millis = self.elapsed_millis
        anim._repeat_at = self._repeat_at
        anim.width = self.width
        anim.height = self.height
        return anim

    def add(self, image: Surface, duration: TimeLike) -> None:
        """
        Add a frame shown for ``duration`` milliseconds.

        The first frame added sets the width and height of the animation.
        """
        if not (duration > 0 and math.isfinite(duration)):
            raise ValueError(
                f"Frame duration must be a finite number above zero, got {duration}"
            )

        self.frames.append(AnimationFrame(image=image, duration=duration))
        if len(self.frames) == 1:
            self.width, self.height = image.get_size()
            log.debug("animation size set to %dx%d", self.width, self.height)

    def step(self) -> None:
        """Advance by a single frame."""
        self._require_frames("step")
        self.frame += 1
        if self.frame >= len(self.frames):
            self.frame = self._repeat_at

    def move(self, elapsed_millis: TimeLike) -> None:
        """
        Advance by a number of milliseconds.

        A frame is left only once its duration is exceeded, so several frames
        (or loops) may pass in one call.
        """
        self._require_frames("move")
        if not math.isfinite(elapsed_millis):
            raise ValueError(f"Cannot move by {elapsed_millis} ms")
        if elapsed_millis < 0:
            raise ValueError(f"Cannot move backwards by {elapsed_millis} ms")

        self.elapsed_millis += elapsed_millis

        steps = 0
        while self.elapsed_millis > self.frames[self.frame].duration:
            self.elapsed_millis -= self.frames[self.frame].duration
            self.step()
            steps += 1

        if steps > 1:
            log.debug("caught up %d frames in one move of %s ms", steps, elapsed_millis)

    def draw(self, renderer: Renderer, x: Coordinate, y: Coordinate) -> None:
        """Draw the current frame with its top-left corner at (x, y)."""
        self._require_frames("draw")
        renderer.draw_image(self.frames[self.frame].image, x, y)

    def reset(self) -> None:
        """
        Return to the first frame, regardless of repeat_at.

        Useful when one piece of code calls move() every tick but the
        animation should appear stopped.
        """
        self.frame = 0
        self.elapsed_millis = 0

    def flip_horizontally(self) -> Animation:
        """
        Flip all frames horizontally, e.g. to reuse right-facing art for left.
        """
        return self._transform("flip_horizontally")

    def flip_vertically(self) -> Animation:
        return self._transform("flip_vertically")

    def rotate_clockwise(self) -> Animation:
        """Rotate all frames clockwise by 90 degrees."""
        self.width, self.height = self.height, self.width
        return self._transform("rotate_clockwise")

    def rotate_counterclockwise(self) -> Animation:
        """Rotate all frames counterclockwise by 90 degrees."""
        self.width, self.height = self.height, self.width
        return self._transform("rotate_counterclockwise")

    def _transform(self, name: str) -> Animation:
        func = getattr(self.transformer, name)
        # in place: copies sharing this list see the new images
        for i, frame in enumerate(self.frames):
            self.frames[i] = replace(frame, image=func(frame.image))
        log.debug("applied %s to %d frames", name, len(self.frames))
        return self

    def _require_frames(self, operation: str) -> None:
        if not self.frames:
            raise EmptyAnimationError(f"Cannot {operation} an animation with no frames")

    def __len__(self) -> int:
        return len(self.frames)

    def __repr__(self) -> str:
        return (
            f"Animation(frames={len(self.frames)}, frame={self.frame}, "
            f"elapsed_millis={self.elapsed_millis}, repeat_at={self._repeat_at})"
        )


def animation_from_strip(
    sheet: Surface,
    frame_count: int,
    duration: TimeLike,
    transformer: Optional[ImageTransformer] = None,
) -> Animation:
    """
    Build an animation from a horizontal strip of equally sized frames.

    Each frame is a subsurface of ``sheet`` and is shown for ``duration``
    milliseconds.
    """
    if frame_count < 1:
        raise ValueError(f"Frame count must be at least 1, got {frame_count}")

    sheet_width, sheet_height = sheet.get_size()
    if sheet_width % frame_count:
        raise ValueError(
            f"Strip width {sheet_width} is not divisible into {frame_count} frames"
        )

    frame_width = sheet_width // frame_count
    anim = Animation(transformer)
    for i in range(frame_count):
        rect = Rect(i * frame_width, 0, frame_width, sheet_height)
        anim.add(sheet.subsurface(rect), duration)

    log.debug(
        "sliced %d frames of %dx%d from strip", frame_count, frame_width, sheet_height
    )
    return anim
