"""The interactive game window."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Sequence

from mazecaster.framebuffer import Color, Framebuffer
from mazecaster.player import Player
from mazecaster.render import SCREEN_HEIGHT, SCREEN_WIDTH, render_2d, render_3d
from mazecaster.textures import TextureManager

TITLE = "Raycaster Game"
START_POSITION = (150.0, 150.0)


def default_maze() -> list[str]:
    """Return the small built-in maze; row ``y`` holds the cells of that row."""
    return [
        "#####",
        "#   #",
        "# # #",
        "#   #",
        "#####",
    ]


def _run_window(textures: TextureManager, maze: Sequence[Sequence[str]]) -> None:
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(TITLE)

        player = Player(START_POSITION, math.pi / 3.0, math.pi / 3.0)
        framebuffer = Framebuffer(SCREEN_WIDTH, SCREEN_HEIGHT, Color.BLACK)
        key_names = {pygame.K_w: "w", pygame.K_s: "s", pygame.K_a: "a", pygame.K_d: "d"}

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            if not running:
                break

            keys = pygame.key.get_pressed()
            player.update_keyboard({name for code, name in key_names.items() if keys[code]})

            framebuffer.clear()
            if keys[pygame.K_m]:
                render_2d(framebuffer, player, maze)
            else:
                render_3d(framebuffer, player, maze)

            image = framebuffer.to_image()
            surface = pygame.image.frombuffer(image.tobytes(), image.size, "RGBA")
            screen.blit(surface, (0, 0))
            pygame.display.flip()
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="mazecaster", description="Walk through a raycast maze.")
    parser.add_argument(
        "--assets",
        default=".",
        help="directory that holds the assets/ folder of wall textures",
    )
    args = parser.parse_args(argv)

    try:
        textures = TextureManager.load(args.assets)
    except (FileNotFoundError, OSError) as exc:
        print(f"mazecaster: {exc}", file=sys.stderr)
        return 1

    _run_window(textures, default_maze())
    return 0


if __name__ == "__main__":
    sys.exit(main())