import io

import pytest

from superhaxagon.binary import FormatError, write_float, write_i32, write_string, write_u16
from superhaxagon.color import Color, LocColor
from superhaxagon.factories import Location, LevelFactory, PatternFactory, WallFactory
from superhaxagon.rng import Twist


def wall_bytes(distance, height, side):
    return write_u16(distance) + write_u16(height) + write_u16(side)


def pattern_bytes(name, sides, walls, header=b"PTN1.1", footer=b"ENDPTN"):
    body = b"".join(wall_bytes(*w) for w in walls)
    return write_string(name) + header + write_i32(sides) + write_i32(len(walls)) + body + footer


def level_bytes(pattern_names, next_index=-1, footer=b"ENDLEV", creator="ME"):
    data = b"LEV3.0"
    for text in ("HEXAGON", "HARD", "NORMAL", creator, "werq"):
        data += write_string(text)
    for color in ((1, 2, 3, 255), (4, 5, 6, 255), (7, 8, 9, 255)):
        data += write_i32(1) + bytes(color)
    data += write_float(2.0) + write_float(0.5) + write_float(0.25)
    data += write_i32(64) + write_i32(next_index) + write_float(30.0)
    data += write_i32(len(pattern_names))
    data += b"".join(write_string(n) for n in pattern_names)
    return data + footer


def test_wall_factory_clamps():
    wall = WallFactory.from_stream(io.BytesIO(wall_bytes(100, 1, 9)), 6)
    assert wall.height == WallFactory.MIN_WALL_HEIGHT
    assert wall.side == 5
    assert wall.distance == 100


def test_wall_factory_instantiate_wraps():
    wall = WallFactory(10, 8, 4).instantiate(50.0, 3, 6)
    assert wall.side == 1
    assert wall.distance == pytest.approx(60.0)
    assert wall.height == pytest.approx(8.0)


def test_pattern_factory_reads():
    stream = io.BytesIO(pattern_bytes("SPIRAL", 6, [(0, 10, 0), (20, 10, 3)]))
    pattern = PatternFactory.from_stream(stream)
    assert pattern.name == "SPIRAL"
    assert pattern.sides == 6
    assert pattern.walls == [WallFactory(0, 10, 0), WallFactory(20, 10, 3)]


def test_pattern_factory_min_sides():
    pattern = PatternFactory.from_stream(io.BytesIO(pattern_bytes("P", 1, [(0, 10, 0)])))
    assert pattern.sides == PatternFactory.MIN_PATTERN_SIDES


def test_pattern_factory_bad_header():
    with pytest.raises(FormatError):
        PatternFactory.from_stream(io.BytesIO(pattern_bytes("P", 6, [(0, 10, 0)], header=b"PTN0.0")))


def test_pattern_factory_bad_footer():
    with pytest.raises(FormatError):
        PatternFactory.from_stream(io.BytesIO(pattern_bytes("P", 6, [(0, 10, 0)], footer=b"XXXXXX")))


def test_pattern_instantiate_invariants():
    factory = PatternFactory("P", 6, [WallFactory(0, 10, 0), WallFactory(20, 10, 5)])
    pattern = factory.instantiate(Twist(5), 100.0)
    assert pattern.sides == 6
    assert [w.distance for w in pattern.walls] == pytest.approx([100.0, 120.0])
    assert all(0 <= w.side < 6 for w in pattern.walls)
    assert (pattern.walls[1].side - pattern.walls[0].side) % 6 == 5


@pytest.fixture
def shared():
    return [PatternFactory("A", 6, [WallFactory(0, 10, 0)]), PatternFactory("B", 4, [WallFactory(0, 10, 1)])]


def test_level_factory_reads(shared):
    level = LevelFactory.from_stream(io.BytesIO(level_bytes(["B", "A"])), shared, Location.USER, 0)
    assert level.name == "HEXAGON"
    assert level.music == "/werq"
    assert level.location is Location.USER
    assert level.patterns == [shared[1], shared[0]]
    assert level.colors[LocColor.FG] == [Color(7, 8, 9, 255)]
    assert level.speed_pulse == 64
    assert level.next_index == -1
    assert level.is_credits_level is False


def test_level_factory_offsets_next_index(shared):
    level = LevelFactory.from_stream(io.BytesIO(level_bytes(["A"], next_index=2)), shared, Location.ROM, 5)
    assert level.next_index == 7


def test_level_factory_missing_pattern(shared):
    with pytest.raises(FormatError):
        LevelFactory.from_stream(io.BytesIO(level_bytes(["Z"])), shared, Location.ROM, 0)


def test_level_factory_bad_footer(shared):
    with pytest.raises(FormatError):
        LevelFactory.from_stream(io.BytesIO(level_bytes(["A"], footer=b"NOPE!!")), shared, Location.ROM, 0)


def test_level_factory_bad_header(shared):
    with pytest.raises(FormatError):
        LevelFactory.from_stream(io.BytesIO(b"LEV1.0" + level_bytes(["A"])[6:]), shared, Location.ROM, 0)


def test_set_high_score(shared):
    level = LevelFactory.from_stream(io.BytesIO(level_bytes(["A"])), shared, Location.ROM, 0)
    assert level.set_high_score(100) is True
    assert level.set_high_score(50) is False
    assert level.set_high_score(100) is False
    assert level.high_score == 100