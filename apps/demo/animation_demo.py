"""
Simple Pygame demo of pysplat's Animation and Camera

A procedurally drawn strip is sliced into frames and played back with
Animation.move. A copy of the animation shares the same frames but keeps
its own playback position, so flipping one flips both.

Controls:
- Arrow keys: move the camera
- H / V: flip all frames horizontally / vertically
- R: rotate all frames clockwise
- S: single step the first animation
- Space: reset the first animation
"""

import logging

import pygame
from pygame.locals import K_DOWN, K_LEFT, K_RIGHT, K_UP, KEYDOWN, QUIT

from pysplat.animation import animation_from_strip
from pysplat.buffer import SurfaceContext
from pysplat.camera import Camera

FRAME_SIZE = 48
FRAME_COLORS = [(230, 60, 60), (230, 200, 60), (60, 200, 90), (60, 120, 230)]
CAMERA_SPEED = 0.2  # pixels per millisecond


def make_strip() -> pygame.Surface:
    strip = pygame.Surface((FRAME_SIZE * len(FRAME_COLORS), FRAME_SIZE))
    for i, color in enumerate(FRAME_COLORS):
        rect = pygame.Rect(i * FRAME_SIZE, 0, FRAME_SIZE, FRAME_SIZE)
        strip.fill(color, rect)
        # marker so flips and rotations are visible
        pygame.draw.rect(strip, (20, 20, 20), (rect.x + 4, rect.y + 4, 12, 6))
    return strip


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)
    pygame.init()
    screen = pygame.display.set_mode((640, 480))
    pygame.display.set_caption("Animation Demo")

    clock = pygame.time.Clock()
    font = pygame.font.Font(None, 22)
    context = SurfaceContext(screen)
    camera = Camera(0, 0, *screen.get_size())

    anim = animation_from_strip(make_strip(), len(FRAME_COLORS), 250)
    intro_anim = anim.copy()
    intro_anim.repeat_at = 2

    running = True
    while running:
        elapsed = clock.tick(60)  # milliseconds

        for event in pygame.event.get():
            if event.type == QUIT:
                running = False
            elif event.type == KEYDOWN:
                if event.key == pygame.K_h:
                    anim.flip_horizontally()
                elif event.key == pygame.K_v:
                    anim.flip_vertically()
                elif event.key == pygame.K_r:
                    anim.rotate_clockwise()
                elif event.key == pygame.K_s:
                    anim.step()
                elif event.key == pygame.K_SPACE:
                    anim.reset()

        keys = pygame.key.get_pressed()
        camera.x += (keys[K_RIGHT] - keys[K_LEFT]) * CAMERA_SPEED * elapsed
        camera.y += (keys[K_DOWN] - keys[K_UP]) * CAMERA_SPEED * elapsed

        anim.move(elapsed)
        intro_anim.move(elapsed)

        screen.fill((30, 30, 30))
        context.save()
        camera.draw(context)
        anim.draw(context, 200, 200)
        intro_anim.draw(context, 320, 200)

        def draw_hud() -> None:
            text = f"frame {anim.frame}  intro frame {intro_anim.frame}  size {anim.size}"
            context.draw_image(font.render(text, True, (220, 220, 220)), 10, 10)

        camera.draw_absolute(context, draw_hud)
        context.restore()

        pygame.display.flip()

    pygame.quit()


if __name__ == "__main__":
    main()
