# superhaxagon

The game core of a hexagon arcade game. It reads level packs, builds
patterns of walls from them, and simulates a running level frame by frame.
It also reads and writes the high-score record. A front end drives this
logic. The package does not draw anything itself.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `superhaxagon.binary`: the little-endian primitives of the file format.
  - Readers: `read_u16`, `read_i32` (with a range check), `read_float`,
    `read_string` (length-prefixed UTF-8) and `read_compare`.
  - Matching writers: `write_u16`, `write_i32`, `write_float` and
    `write_string`.
  - Malformed or short data raises `FormatError`, which is a subclass of
    `ValueError`.
- `superhaxagon.color`: `Color` holds RGBA values in 8-bit channels, and
  `LocColor` is one of `BG1`, `BG2` or `FG`.
  - `read_color` reads a colour.
  - `interpolate_color` blends two colours.
  - `rotate_color` rotates a colour's hue by a number of degrees.
- `superhaxagon.rng`: `Twist(seed=None)` is a seedable random source.
  - `rand(high)` returns an integer in `[0, high]`.
  - `rand(low, high)` returns an integer in `[low, high]`.
- `superhaxagon.wall`: contains `Wall`, `Point` and `Movement`.
  - `Wall.collision` checks the cursor against one wall.
  - `Wall.calc_points` gives the four screen corners of a wall.
- `superhaxagon.pattern`: `Pattern` is a group of walls that share a number of
  sides.
- `superhaxagon.factories`: the blueprints read from a level pack.
  - `WallFactory`, `PatternFactory` and `LevelFactory` each have a
    `from_stream` class method and an `instantiate` method.
  - `Location` records whether a pack came from `ROM` or `USER`.
- `superhaxagon.level`: `Level` is a level being played.
- `superhaxagon.loader`: contains `load_levels`, `load_scores` and
  `dump_scores`.

## Level packs

A level pack is a little-endian binary file. It is laid out as follows:

- It starts with `HAX1.1`.
- It holds a list of patterns, each from `PTN1.1` to `ENDPTN`.
- It then holds a list of levels, each from `LEV3.0` to `ENDLEV`.
- It ends with `ENDHAX`.

Each level names the patterns it uses, which are matched by name against the
pack's patterns. Each level also gives:

- its colour cycles;
- its wall, rotation and cursor speeds;
- its pulse length;
- the index and time of the level that follows it.

```python
from superhaxagon.factories import Location
from superhaxagon.loader import load_levels

with open("levels.haxagon", "rb") as stream:
    levels = load_levels(stream, Location.ROM, 0)
```

When you load several packs, pass the number of levels already loaded as
the third argument. This makes each level's `next_index` point at the right
entry in the combined list. A negative `next_index` means that no level
follows, and it is left unchanged. Malformed data raises
`superhaxagon.binary.FormatError`.

## Running a level

```python
from superhaxagon.rng import Twist

rng = Twist()
level = levels[0].instantiate(rng, 400.0)

for _ in range(60):
    level.update(rng, 20.0, 400.0, 1.0)
    level.left(1.0)
    level.clamp()
    movement = level.collision(32.0, 1.0)
```

### What `Level.update` does

`Level.update` advances the level by a number of frames. In one call it:

- moves the walls;
- drops patterns that have passed the delete distance;
- adds new patterns from the level's pattern list;
- eases between side counts when the number of sides changes;
- cycles the colours;
- rotates the level;
- flips the direction of rotation at random intervals.

### Cursor and collisions

- `left`, `right` and `clamp` move the cursor and keep it within one turn.
- `collision` returns a `superhaxagon.wall.Movement`. It tells you whether the
  cursor may move, is blocked on one side, or has hit a wall (`DEAD`).

### Effects and speed

- `spin`, `pulse` and `invert_bg` start their effects.
- `increase_multiplier` speeds up both the rotation and the walls.

### State for drawing

A front end draws from the level's attributes:

- `patterns`
- `rotation`
- `sides_tween`
- `cursor_pos`
- `color` and `color_next`
- `tween_frame`
- `pulse_offset`
- `bg_inverted`
- `show_cursor`

### Ending sequences

These methods let an ending sequence reshape a running level:

- `set_win_factory`
- `set_win_sides`
- `reset_colors`
- `clear_patterns`
- `rotate`

## High scores

`LevelFactory.set_high_score` keeps a new score only if it beats the current
one, and returns whether it did.

`dump_scores(levels)` writes the best score of every level into a record from
`SCDB1.0` to `ENDSCDB`. The record is padded with zeros to 500 bytes. If the
record does not fit in 500 bytes, `dump_scores` raises `ValueError`.

`load_scores(data, levels)` reads such a record back:

- It applies each score to the levels with the same name, difficulty, mode and
  creator.
- It returns the number of records it read.
- Empty data, or data without the header, leaves the levels unchanged and
  returns 0.
- Records that are cut short raise `FormatError`.

```python
from superhaxagon.loader import dump_scores, load_scores

image = dump_scores(levels)
load_scores(image, levels)
```

## What this package does not do

There is no screen and no game loop. The package does not:

- draw anything, play music or sound effects, or read controller input;
- provide menus or state screens;
- ship a command to run.

Storage is left to the caller:

- Open level pack files yourself and pass the open stream to `load_levels`.
- Keep the bytes from `dump_scores` wherever scores should live, and pass them
  back to `load_scores`.