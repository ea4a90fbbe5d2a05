"""Ray marching through the maze and drawing one screen column per ray."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from mazecaster.framebuffer import Color, Framebuffer
from mazecaster.player import Player

STEP_SIZE = 0.1
MAX_DISTANCE = 1000.0
WALL_SCALE = 50.0

WALL_COLORS: dict[str, Color] = {
    "#": Color.RED,
    "+": Color.GREEN,
    "-": Color.BLUE,
    "|": Color.YELLOW,
}


@dataclass(frozen=True)
class RaycastResult:
    """How far a ray travelled and which wall character stopped it."""

    distance: float
    hit_wall: str


def _cell_index(coordinate: float, block_size: float) -> int:
    # Negative world coordinates collapse onto the first cell.
    return max(0, int(coordinate / block_size))


def cast_ray(
    player: Player,
    angle: float,
    maze: Sequence[Sequence[str]],
    block_size: float,
) -> RaycastResult:
    """March a ray from the player along ``angle`` until it meets a wall.

    Leaving the maze counts as hitting a ``#`` wall. A ray that travels
    further than the maximum distance stops with ``hit_wall`` set to a space.
    """
    px, py = player.pos
    cos_angle = math.cos(angle)
    sin_angle = math.sin(angle)
    rows = len(maze)
    columns = len(maze[0]) if rows else 0

    distance = 0.0
    while True:
        distance += STEP_SIZE
        maze_x = _cell_index(px + distance * cos_angle, block_size)
        maze_y = _cell_index(py + distance * sin_angle, block_size)

        if maze_y >= rows or maze_x >= columns:
            return RaycastResult(distance, "#")

        cell = maze[maze_y][maze_x]
        if cell != " ":
            return RaycastResult(distance, cell)

        if distance > MAX_DISTANCE:
            return RaycastResult(distance, " ")


def render_wall_slice(
    fb: Framebuffer,
    ray_result: RaycastResult,
    x_pos: int,
    screen_height: int,
) -> None:
    """Draw ceiling, wall and floor for screen column ``x_pos``."""
    if ray_result.distance == 0.0:
        return

    wall_height = min(screen_height / ray_result.distance * WALL_SCALE, float(screen_height))
    wall_height = max(0, int(wall_height))

    middle = screen_height // 2
    wall_start = max(0, middle - wall_height // 2)
    wall_end = middle + wall_height // 2

    wall_color = WALL_COLORS.get(ray_result.hit_wall, Color.WHITE)

    if not 0 <= x_pos < fb.width:
        return

    for y in range(min(wall_start, screen_height)):
        fb.set_pixel(x_pos, y, Color.SKYBLUE)
    for y in range(wall_start, min(wall_end, screen_height)):
        fb.set_pixel(x_pos, y, wall_color)
    for y in range(wall_end, screen_height):
        fb.set_pixel(x_pos, y, Color.DARKGREEN)