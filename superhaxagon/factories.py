"""Blueprints of walls, patterns and levels as read from level files."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, BinaryIO, ClassVar

from .binary import FormatError, read_compare, read_float, read_i32, read_string, read_u16
from .color import Color, LocColor, read_color
from .pattern import Pattern
from .rng import Twist
from .wall import Wall

if TYPE_CHECKING:
    from .level import Level


class Location(Enum):
    """Where a file was loaded from."""

    ROM = "rom"
    USER = "user"


@dataclass(frozen=True)
class WallFactory:
    """A wall as stored in a pattern."""

    distance: int
    height: int
    side: int

    MIN_WALL_HEIGHT: ClassVar[int] = 4

    @classmethod
    def from_stream(cls, stream: BinaryIO, max_sides: int) -> WallFactory:
        """Read a wall, clamping its height and side."""
        distance = read_u16(stream)
        height = max(read_u16(stream), cls.MIN_WALL_HEIGHT)
        side = read_u16(stream)
        if side >= max_sides:
            side = max_sides - 1
        return cls(distance, height, side)

    def instantiate(self, offset_distance: float, offset_side: int, sides: int) -> Wall:
        """Create a live wall, shifted in distance and rotated by side."""
        side = self.side + offset_side
        if side >= sides:
            side -= sides
        return Wall(float(self.distance) + offset_distance, float(self.height), side)


@dataclass
class PatternFactory:
    """A named pattern of walls."""

    name: str
    sides: int
    walls: list[WallFactory]

    HEADER: ClassVar[str] = "PTN1.1"
    FOOTER: ClassVar[str] = "ENDPTN"
    MIN_PATTERN_SIDES: ClassVar[int] = 3

    @classmethod
    def from_stream(cls, stream: BinaryIO) -> PatternFactory:
        """Read a pattern; raises FormatError when it is malformed."""
        name = read_string(stream, "pattern name")
        if not read_compare(stream, cls.HEADER):
            raise FormatError(f"{name} pattern header invalid")

        sides = max(read_i32(stream, 0, 256, f"{name} pattern sides"), cls.MIN_PATTERN_SIDES)
        count = read_i32(stream, 1, 1000, f"{name} pattern walls")
        walls = [WallFactory.from_stream(stream, sides) for _ in range(count)]

        if not read_compare(stream, cls.FOOTER):
            raise FormatError(f"{name} pattern footer invalid")
        return cls(name, sides, walls)

    def instantiate(self, rng: Twist, distance: float) -> Pattern:
        """Create a live pattern at ``distance`` with a random rotation."""
        offset = rng.rand(self.sides - 1)
        return Pattern(
            (wall.instantiate(distance, offset, self.sides) for wall in self.walls), self.sides
        )


@dataclass(eq=False)
class LevelFactory:
    """A level's definition and its best score."""

    name: str
    difficulty: str
    mode: str
    creator: str
    music: str
    colors: dict[LocColor, list[Color]]
    speed_wall: float
    speed_rotation: float
    speed_cursor: float
    speed_pulse: int
    next_index: int
    next_time: float
    patterns: list[PatternFactory]
    location: Location = Location.ROM
    high_score: int = 0

    HEADER: ClassVar[str] = "LEV3.0"
    FOOTER: ClassVar[str] = "ENDLEV"

    @classmethod
    def from_stream(
        cls,
        stream: BinaryIO,
        shared: list[PatternFactory],
        location: Location,
        level_index_offset: int,
    ) -> LevelFactory:
        """Read a level, linking its patterns by name from ``shared``."""
        if not read_compare(stream, cls.HEADER):
            raise FormatError("level header invalid")

        name = read_string(stream, "level name")
        difficulty = read_string(stream, f"{name} level difficulty")
        mode = read_string(stream, f"{name} level mode")
        creator = read_string(stream, f"{name} level creator")
        music = "/" + read_string(stream, f"{name} level music")

        colors: dict[LocColor, list[Color]] = {}
        for loc, label in (
            (LocColor.BG1, "level background 1"),
            (LocColor.BG2, "level background 2"),
            (LocColor.FG, "level foreground"),
        ):
            count = read_i32(stream, 1, 512, label)
            colors[loc] = [read_color(stream) for _ in range(count)]

        speed_wall = read_float(stream)
        speed_rotation = read_float(stream)
        speed_cursor = read_float(stream)
        speed_pulse = read_i32(stream, 4, 8192, "level pulse")
        next_index = read_i32(stream, -1, 8192, "next index")
        next_time = read_float(stream)

        # Negative indices mean no follow-up level and stay untouched.
        if next_index >= 0:
            next_index += level_index_offset

        by_name: dict[str, PatternFactory] = {}
        for pattern in shared:
            by_name.setdefault(pattern.name, pattern)

        patterns = []
        for _ in range(read_i32(stream, 1, 512, "level pattern count")):
            search = read_string(stream, "level pattern name match")
            try:
                patterns.append(by_name[search])
            except KeyError:
                raise FormatError(f"could not find pattern {search} for {name}") from None

        if not read_compare(stream, cls.FOOTER):
            raise FormatError("level footer invalid")

        return cls(
            name=name,
            difficulty=difficulty,
            mode=mode,
            creator=creator,
            music=music,
            colors=colors,
            speed_wall=speed_wall,
            speed_rotation=speed_rotation,
            speed_cursor=speed_cursor,
            speed_pulse=speed_pulse,
            next_index=next_index,
            next_time=next_time,
            patterns=patterns,
            location=location,
        )

    @property
    def is_credits_level(self) -> bool:
        """Whether this is the hidden credits level."""
        return (
            self.creator == "REDHAT"
            and self.name == "CREDITS"
            and self.difficulty == "SPOILERS"
            and self.mode == "(DUH)"
        )

    def instantiate(self, rng: Twist, render_distance: float) -> Level:
        """Create a playable level."""
        from .level import Level

        return Level(self, rng, render_distance)

    def set_high_score(self, score: int) -> bool:
        """Record ``score`` if it beats the best; return whether it did."""
        if score > self.high_score:
            self.high_score = score
            return True
        return False