"""Walls: the individual blocks that fly at the player."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

TAU = math.tau
PI = math.pi

# Radius of the central polygon, in unscaled units.
SCALE_HEX_LENGTH = 22.0


class Movement(Enum):
    """Result of checking the cursor against a wall."""

    CAN_MOVE = "can_move"
    CANNOT_MOVE_LEFT = "cannot_move_left"
    CANNOT_MOVE_RIGHT = "cannot_move_right"
    DEAD = "dead"


@dataclass(frozen=True)
class Point:
    """A 2D point on screen."""

    x: float
    y: float


@dataclass
class Wall:
    """A wall on one side of the level, at a distance from the centre."""

    distance: float
    height: float
    side: int

    # Overflow so there are no glitched lines between neighbouring walls.
    WALL_OVERFLOW = TAU / 1200.0

    def advance(self, speed: float) -> None:
        """Move the wall towards the centre by ``speed``."""
        self.distance -= speed

    def collision(
        self, cursor_height: float, cursor_pos: float, cursor_step: float, sides: int
    ) -> Movement:
        """Check the cursor against this wall."""
        if cursor_height < self.distance or cursor_height > self.distance + self.height:
            return Movement.CAN_MOVE

        left_step = cursor_pos + cursor_step
        right_step = cursor_pos - cursor_step

        left_rads = (self.side + 1.0) * TAU / sides
        right_rads = self.side * TAU / sides
        ranges = [
            (right_rads + shift, left_rads + shift) for shift in (0.0, TAU, -TAU)
        ]

        if right_rads <= cursor_pos <= left_rads:
            return Movement.DEAD

        if any(low < left_step < high for low, high in ranges):
            return Movement.CANNOT_MOVE_LEFT

        if any(low < right_step < high for low, high in ranges):
            return Movement.CANNOT_MOVE_RIGHT

        return Movement.CAN_MOVE

    def calc_points(
        self, focus: Point, rotation: float, sides: float, offset: float, scale: float
    ) -> list[Point]:
        """Return the four corners of the wall's quad, clockwise."""
        height = self.height
        distance = self.distance + offset
        if distance < SCALE_HEX_LENGTH:
            height -= SCALE_HEX_LENGTH - distance
            distance = SCALE_HEX_LENGTH

        distance *= scale
        height *= scale
        overflow = self.WALL_OVERFLOW
        return [
            self.calc_point(focus, rotation, -overflow, distance, sides, self.side),
            self.calc_point(focus, rotation, -overflow, distance + height, sides, self.side),
            self.calc_point(focus, rotation, overflow, distance + height, sides, self.side + 1),
            self.calc_point(focus, rotation, overflow, distance, sides, self.side + 1),
        ]

    @staticmethod
    def calc_point(
        focus: Point, rotation: float, overflow: float, distance: float, sides: float, side: int
    ) -> Point:
        """Return the point at ``distance`` along the edge of ``side``."""
        width = side * TAU / sides + overflow
        width = min(width, TAU + Wall.WALL_OVERFLOW)
        return Point(
            distance * math.cos(rotation + width) + focus.x,
            distance * math.sin(rotation + width + PI) + focus.y,
        )