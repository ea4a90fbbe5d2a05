"""The player: position, view direction and movement controls."""

from __future__ import annotations

import math
from collections.abc import Collection
from dataclasses import dataclass

MOVE_SPEED = 5.0
ROTATION_SPEED = math.pi / 32.0
TAU = math.pi * 2.0


@dataclass
class Player:
    """A player at ``pos`` looking along angle ``a`` with field of view ``fov``."""

    pos: tuple[float, float]
    a: float
    fov: float

    def __post_init__(self) -> None:
        self.pos = (float(self.pos[0]), float(self.pos[1]))

    def move_forward(self, speed: float) -> None:
        """Step ``speed`` units along the view direction."""
        x, y = self.pos
        self.pos = (x + speed * math.cos(self.a), y + speed * math.sin(self.a))

    def move_backward(self, speed: float) -> None:
        """Step ``speed`` units against the view direction."""
        x, y = self.pos
        self.pos = (x - speed * math.cos(self.a), y - speed * math.sin(self.a))

    def turn_left(self, speed: float) -> None:
        """Decrease the view angle, wrapping below zero."""
        self.a -= speed
        if self.a < 0.0:
            self.a += TAU

    def turn_right(self, speed: float) -> None:
        """Increase the view angle, wrapping above a full turn."""
        self.a += speed
        if self.a > TAU:
            self.a -= TAU

    def update_keyboard(self, pressed: Collection[str]) -> None:
        """Apply held keys: ``w``/``s`` move, ``a``/``d`` turn."""
        keys = {key.lower() for key in pressed}
        if "w" in keys:
            self.move_forward(MOVE_SPEED)
        if "s" in keys:
            self.move_backward(MOVE_SPEED)
        if "a" in keys:
            self.turn_left(ROTATION_SPEED)
        if "d" in keys:
            self.turn_right(ROTATION_SPEED)

    def update_gamepad(
        self,
        axis_x: float,
        axis_y: float,
        left_pressed: bool,
        right_pressed: bool,
    ) -> None:
        """Move by the left stick's axes and turn with the thumb buttons."""
        x, y = self.pos
        self.pos = (x + axis_x * MOVE_SPEED, y + axis_y * MOVE_SPEED)
        if left_pressed:
            self.turn_left(ROTATION_SPEED)
        if right_pressed:
            self.turn_right(ROTATION_SPEED)