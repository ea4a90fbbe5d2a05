"""Top-down map view and first-person view of the maze."""

from __future__ import annotations

import math
from collections.abc import Sequence

from mazecaster.framebuffer import Color, Framebuffer
from mazecaster.player import Player
from mazecaster.raycasting import WALL_COLORS, cast_ray, render_wall_slice

MAP_BLOCK_SIZE = 20
PLAYER_MARKER_SIZE = 5
DIRECTION_LENGTH = 20.0

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
FOV = math.pi / 3.0
NUM_RAYS = SCREEN_WIDTH
WORLD_BLOCK_SIZE = 50.0


def render_2d(fb: Framebuffer, player: Player, maze: Sequence[Sequence[str]]) -> None:
    """Draw the maze as coloured blocks with the player and its heading."""
    for row_index, row in enumerate(maze):
        for col_index, tile in enumerate(row):
            color = WALL_COLORS.get(tile, Color.BLACK)
            left = col_index * MAP_BLOCK_SIZE
            top = row_index * MAP_BLOCK_SIZE
            for py in range(top, top + MAP_BLOCK_SIZE):
                for px in range(left, left + MAP_BLOCK_SIZE):
                    fb.set_pixel(px, py, color)

    player_x = max(0, int(player.pos[0]))
    player_y = max(0, int(player.pos[1]))
    for dy in range(PLAYER_MARKER_SIZE):
        for dx in range(PLAYER_MARKER_SIZE):
            fb.set_pixel(player_x + dx, player_y + dy, Color.WHITE)

    end_x = player.pos[0] + math.cos(player.a) * DIRECTION_LENGTH
    end_y = player.pos[1] + math.sin(player.a) * DIRECTION_LENGTH
    if 0.0 <= end_x < fb.width and 0.0 <= end_y < fb.height:
        fb.set_pixel(int(end_x), int(end_y), Color.YELLOW)


def render_3d(fb: Framebuffer, player: Player, maze: Sequence[Sequence[str]]) -> None:
    """Cast one ray per screen column and draw the resulting wall slices."""
    start_angle = player.a - FOV / 2.0
    for column in range(NUM_RAYS):
        angle = start_angle + FOV * column / NUM_RAYS
        result = cast_ray(player, angle, maze, WORLD_BLOCK_SIZE)
        render_wall_slice(fb, result, column, SCREEN_HEIGHT)