"""A level being played: its patterns, rotation, colours and effects."""

from __future__ import annotations

import math
from collections import deque
from typing import TYPE_CHECKING

from .color import Color, LocColor, rotate_color
from .pattern import Pattern
from .rng import Twist
from .wall import PI, TAU, Movement

if TYPE_CHECKING:
    from .factories import LevelFactory, PatternFactory


def _linear(start: float, end: float, percent: float) -> float:
    return (end - start) * percent + start


class Level:
    """A running level built from a LevelFactory."""

    DIFFICULTY_SCALAR_WALLS = 0.0375
    DIFFICULTY_SCALAR_ROT = 0.08
    FLIP_FRAMES_MIN = 120
    FLIP_FRAMES_MAX = 600
    FRAMES_PER_CHANGE_SIDE = 50.0
    FRAMES_PER_SPIN = 90.0
    FRAMES_PER_PULSE = 10.0
    SPIN_SPEED = TAU / 130.0
    ROTATE_ZERO_SPEED = TAU / 200.0
    PULSE_DISTANCE = 5.0
    MIN_SAME_SIDES = 3
    MAX_SAME_SIDES = 5

    def __init__(self, factory: LevelFactory, rng: Twist, pattern_dist_create: float) -> None:
        self.factory = factory
        self.patterns: deque[Pattern] = deque()

        self.auto_pattern_create = False
        self.show_cursor = True
        self.rotate_to_zero = False

        self.multiplier_rot = 0.9
        self.multiplier_walls = 0.85
        self.cursor_pos = 0.0
        self.rotation = 0.0
        self.sides_tween = 0.0

        self.sides_last = 0
        self.sides_current = 0

        self.frame = 0.0
        self.delay_frame = 0.0
        self.delay_max = 0.0
        self.tween_frame = 0.0
        self.flip_frame = float(self.FLIP_FRAMES_MAX)

        self.color: dict[LocColor, Color] = {}
        self.color_next: dict[LocColor, Color] = {}
        self.color_next_index: dict[LocColor, int] = {}

        self._same_count = 0
        self._same_sides = 0
        self.bg_inverted = False
        self.pulse_offset = 0.0
        self.spin_amount = 0.0
        self._front_gap = 0.0

        for location in LocColor:
            colors = factory.colors[location]
            self.color[location] = colors[0]
            self.color_next_index[location] = 1 if len(colors) > 1 else 0
            self.color_next[location] = colors[self.color_next_index[location]]

        self.patterns.append(self._random_pattern(rng).instantiate(rng, pattern_dist_create))

        self.sides_last = self.patterns[0].sides
        self.sides_current = self.patterns[0].sides
        self.cursor_pos = TAU / 4.0 + factory.speed_cursor / 2.0

    def update(
        self, rng: Twist, pattern_dist_delete: float, pattern_dist_create: float, dilation: float
    ) -> None:
        """Advance the level by ``dilation`` frames."""
        self.frame += dilation

        self.tween_frame += dilation
        if self.tween_frame >= float(self.factory.speed_pulse):
            self.tween_frame = 0.0
            for location in LocColor:
                available = self.factory.colors[location]
                self.color[location] = self.color_next[location]
                index = self.color_next_index[location] + 1
                self.color_next_index[location] = index if index < len(available) else 0
                self.color_next[location] = available[self.color_next_index[location]]
                if self.frame > 60.0 * 60.0:
                    self.color_next[location] = rotate_color(self.color_next[location], 90)

        if self.delay_frame <= 0:
            self.sides_tween = float(self.sides_current)
            for pattern in self.patterns:
                pattern.advance(self.factory.speed_wall * dilation * self.multiplier_walls)
        else:
            percent = self.delay_frame / self.delay_max
            self.sides_tween = _linear(
                float(self.sides_current), float(self.sides_last), percent
            )
            self.delay_frame -= dilation

        if self.multiplier_walls > 0:
            self._advance_walls(rng, pattern_dist_delete, pattern_dist_create)
        else:
            self._reverse_walls(rng, pattern_dist_delete, pattern_dist_create)

        if self.rotate_to_zero:
            self.rotation += self.ROTATE_ZERO_SPEED * (-1.0 if self.rotation < PI else 1.0)
            if self.rotation <= 0 or self.rotation >= TAU:
                self.rotation = 0.0
                self.rotate_to_zero = False
        else:
            self.rotation += (
                (self.factory.speed_rotation + self.spin_amount) * self.multiplier_rot * dilation
            )
            if self.rotation >= TAU:
                self.rotation -= TAU
            if self.rotation < 0:
                self.rotation += TAU

        self.flip_frame -= dilation
        self.spin_amount -= self.SPIN_SPEED / self.FRAMES_PER_SPIN * dilation
        self.pulse_offset -= self.PULSE_DISTANCE / self.FRAMES_PER_PULSE * dilation
        self.spin_amount = max(self.spin_amount, 0.0)
        self.pulse_offset = max(self.pulse_offset, 0.0)

        # A flip cannot happen while a spin is in progress.
        if int(self.spin_amount) == 0 and self.flip_frame <= 0:
            self.multiplier_rot *= -1.0
            self.flip_frame = float(rng.rand(self.FLIP_FRAMES_MIN, self.FLIP_FRAMES_MAX))

    def collision(self, cursor_distance: float, dilation: float) -> Movement:
        """Check the cursor against every wall of every pattern."""
        result = Movement.CAN_MOVE
        step = self.factory.speed_cursor * dilation
        for pattern in self.patterns:
            for wall in pattern.walls:
                check = wall.collision(cursor_distance, self.cursor_pos, step, pattern.sides)
                if result is Movement.CAN_MOVE:
                    result = check
                if check is Movement.DEAD:
                    return Movement.DEAD
        return result

    def increase_multiplier(self) -> None:
        """Make rotation and walls faster."""
        direction = 1.0 if self.multiplier_rot > 0 else -1.0
        self.multiplier_rot += direction * self.DIFFICULTY_SCALAR_ROT
        self.multiplier_walls += self.DIFFICULTY_SCALAR_WALLS

    def clear_patterns(self) -> None:
        """Remove every pattern."""
        self.patterns.clear()

    def rotate(self, distance: float, dilation: float) -> None:
        """Rotate the level by ``distance`` per frame."""
        self.rotation += distance * dilation

    def left(self, dilation: float) -> None:
        """Move the cursor counter-clockwise."""
        self.cursor_pos += self.factory.speed_cursor * dilation

    def right(self, dilation: float) -> None:
        """Move the cursor clockwise."""
        self.cursor_pos -= self.factory.speed_cursor * dilation

    def clamp(self) -> None:
        """Wrap the cursor back into [0, TAU)."""
        if self.cursor_pos >= TAU:
            self.cursor_pos -= TAU
        if self.cursor_pos < 0:
            self.cursor_pos += TAU

    def spin(self) -> None:
        """Start a spin effect."""
        self.spin_amount = self.SPIN_SPEED

    def invert_bg(self) -> None:
        """Swap the two background colours."""
        self.bg_inverted = not self.bg_inverted

    def pulse(self, scale: float) -> None:
        """Start a pulse effect of the given strength."""
        self.pulse_offset = self.PULSE_DISTANCE * scale

    def set_win_factory(self, factory: LevelFactory) -> None:
        """Switch the level definition used for speeds, colours and patterns."""
        self.factory = factory

    def set_win_sides(self, sides: int) -> None:
        """Start a transition to ``sides`` sides."""
        self.sides_last = self.sides_current
        self.sides_current = sides
        if self.sides_last != self.sides_current:
            self.delay_max = self.FRAMES_PER_CHANGE_SIDE
            self.delay_frame = self.delay_max

    def reset_colors(self) -> None:
        """Restart each colour cycle from its first colour."""
        for location in self.color_next_index:
            self.color_next_index[location] = 0

    def _advance_walls(
        self, rng: Twist, pattern_dist_delete: float, pattern_dist_create: float
    ) -> None:
        if self.patterns[0].furthest_wall_distance() < pattern_dist_delete:
            self.sides_last = self.patterns[0].sides
            self.patterns.popleft()
            self.sides_current = self.patterns[0].sides
            if self.sides_last != self.sides_current:
                self.delay_max = (
                    self.FRAMES_PER_CHANGE_SIDE
                    / self.factory.speed_wall
                    * abs(self.sides_current - self.sides_last)
                )
                self.delay_frame = self.delay_max

        if len(self.patterns) < 2 or self.patterns[-1].furthest_wall_distance() < pattern_dist_create:
            start = self.patterns[-1].furthest_wall_distance()
            self.patterns.append(self._random_pattern(rng).instantiate(rng, start))

    def _reverse_walls(
        self, rng: Twist, pattern_dist_delete: float, pattern_dist_create: float
    ) -> None:
        if self.patterns[-1].closest_wall_distance() > pattern_dist_delete and len(self.patterns) > 1:
            self.patterns.pop()

        # New patterns enter at the front, advanced so their last wall is at the create distance.
        if (
            self.patterns[0].closest_wall_distance() > pattern_dist_create + self._front_gap
            and self.auto_pattern_create
        ):
            pattern = self._random_pattern(rng).instantiate(rng, pattern_dist_create)
            self._front_gap = pattern.closest_wall_distance() * 1.5
            pattern.advance(pattern.furthest_wall_distance())
            self.patterns.appendleft(pattern)
            if pattern.sides != self.sides_current:
                self.set_win_sides(pattern.sides)

    def _random_pattern(self, rng: Twist) -> PatternFactory:
        patterns = self.factory.patterns
        if self._same_count <= 0:
            pattern = patterns[rng.rand(len(patterns) - 1)]
            if pattern.sides != self._same_sides:
                self._same_sides = pattern.sides
                self._same_count = rng.rand(self.MIN_SAME_SIDES, self.MAX_SAME_SIDES)
            return pattern

        self._same_count -= 1
        selectable = [p for p in patterns if p.sides == self._same_sides]

        # The factory may have been swapped for one without patterns of these sides.
        if not selectable:
            self._same_count = 0
            self._same_sides = 0
            return patterns[rng.rand(len(patterns) - 1)]

        return selectable[rng.rand(len(selectable) - 1)]


__all__ = ["Level", "math"] if False else ["Level"]