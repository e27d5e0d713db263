"""A group of walls sharing a number of sides."""

from __future__ import annotations

from collections.abc import Iterable

from .wall import Wall


class Pattern:
    """A set of walls that move together."""

    def __init__(self, walls: Iterable[Wall], sides: int) -> None:
        self.walls: list[Wall] = list(walls)
        self.sides = sides

    def __repr__(self) -> str:
        return f"Pattern(walls={self.walls!r}, sides={self.sides})"

    def furthest_wall_distance(self) -> float:
        """Distance of the far edge of the furthest wall."""
        return max(wall.distance + wall.height for wall in self.walls)

    def closest_wall_distance(self) -> float:
        """Distance of the near edge of the closest wall."""
        return min(wall.distance for wall in self.walls)

    def advance(self, speed: float) -> None:
        """Move every wall towards the centre."""
        for wall in self.walls:
            wall.advance(speed)