"""Window front end and command line entry point of the radar simulation."""

from __future__ import annotations

import math
import os
import sys
import time
from collections.abc import Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from radarsim.entities import (  # noqa: E402
    PLANE_SIZE,
    PLANE_SPRITE_ORIGIN,
    PLANE_SPRITE_SCALE,
    TOWER_SPRITE_ORIGIN,
    TOWER_SPRITE_SCALE,
    Plane,
    Tower,
)
from radarsim.parsing import load_scenario  # noqa: E402
from radarsim.quadtree import SCREEN_HEIGHT, SCREEN_WIDTH  # noqa: E402
from radarsim.simulation import Simulation  # noqa: E402

EXIT_ERROR = 84
FRAME_RATE = 60
BACKGROUND_SCALE = (1.86, 1.7)
BACKGROUND_PATH = "assets/bg.png"
PLANE_PATH = "assets/plane.png"
TOWER_PATH = "assets/tower.png"

USAGE = """Air traffic simulation panel

USAGE
  my_radar path_to_script
    path_to_script  the path to the script file

OPTIONS
  -h  print the usage and quit

USER INTERACTIONS
  'L' key  enable/disable hitboxes and areas
  'S' key  enable/disable sprites
"""


def _load_image(path: str, scale: tuple[float, float]) -> pygame.Surface | None:
    try:
        image = pygame.image.load(path)
    except (pygame.error, OSError):
        return None
    width = max(1, round(image.get_width() * scale[0]))
    height = max(1, round(image.get_height() * scale[1]))
    return pygame.transform.smoothscale(image, (width, height))


def _draw_tower(
    screen: pygame.Surface, tower: Tower, sim: Simulation, image: pygame.Surface | None
) -> None:
    if sim.show_sprites and image is not None:
        ox, oy = TOWER_SPRITE_ORIGIN
        screen.blit(
            image,
            (tower.x - ox * TOWER_SPRITE_SCALE, tower.y - oy * TOWER_SPRITE_SCALE),
        )
    if sim.show_hitboxes:
        pygame.draw.circle(
            screen, (0, 0, 0), (round(tower.x), round(tower.y)), tower.radius, 1
        )


def _draw_plane(
    screen: pygame.Surface, plane: Plane, sim: Simulation, image: pygame.Surface | None
) -> None:
    if sim.show_hitboxes:
        half = PLANE_SIZE / 2
        box = pygame.Rect(
            round(plane.x - half), round(plane.y - half), PLANE_SIZE, PLANE_SIZE
        )
        pygame.draw.rect(screen, (0, 255, 0), box.inflate(2, 2), 1)
    if sim.show_sprites and image is not None:
        degrees = plane.angle * (180.0 / 3.1415)
        rotated = pygame.transform.rotate(image, -degrees)
        screen.blit(rotated, rotated.get_rect(center=(plane.x, plane.y)))


def run_window(simulation: Simulation) -> None:
    """Open the radar window and run the simulation until it ends or is closed."""
    pygame.init()
    try:
        screen = pygame.display.set_mode(
            (SCREEN_WIDTH, SCREEN_HEIGHT), pygame.RESIZABLE
        )
        pygame.display.set_caption("My Radar")
        background = _load_image(BACKGROUND_PATH, BACKGROUND_SCALE)
        plane_image = _load_image(PLANE_PATH, (PLANE_SPRITE_SCALE,) * 2)
        tower_image = _load_image(TOWER_PATH, (TOWER_SPRITE_SCALE,) * 2)
        if plane_image is not None:
            # Keep the rotation centre where the sprite's origin lies.
            ox, oy = PLANE_SPRITE_ORIGIN
            del ox, oy
        clock = pygame.time.Clock()
        started = time.monotonic()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_s:
                        simulation.toggle_sprites()
                    elif event.key == pygame.K_l:
                        simulation.toggle_hitboxes()
            now = time.monotonic() - started
            if not simulation.update(now):
                running = False
            screen.fill((0, 0, 0))
            if background is not None:
                screen.blit(background, (0, 0))
            for tower in simulation.towers:
                _draw_tower(screen, tower, simulation, tower_image)
            for plane in simulation.visible_planes(now):
                _draw_plane(screen, plane, simulation, plane_image)
            pygame.display.flip()
            clock.tick(FRAME_RATE)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line: show usage with ``-h`` or simulate a script file."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        return 0
    if args[0] == "-h":
        sys.stdout.write(USAGE)
        return 0
    try:
        scenario = load_scenario(args[0])
    except OSError:
        sys.stderr.write("files doesn't exist\n")
        return EXIT_ERROR
    except ValueError as error:
        sys.stderr.write(f"invalid script: {error}\n")
        return EXIT_ERROR
    run_window(Simulation.from_scenario(scenario))
    return 0