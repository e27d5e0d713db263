import math

import pytest

from superhaxagon.wall import SCALE_HEX_LENGTH, TAU, Movement, Point, Wall


@pytest.fixture
def wall():
    return Wall(distance=10.0, height=10.0, side=0)


def test_advance_moves_closer(wall):
    wall.advance(3.0)
    assert wall.distance == pytest.approx(7.0)


def test_collision_outside_height(wall):
    assert wall.collision(5.0, 0.1, 0.1, 6) is Movement.CAN_MOVE
    assert wall.collision(25.0, 0.1, 0.1, 6) is Movement.CAN_MOVE


def test_collision_inside_is_dead(wall):
    assert wall.collision(15.0, TAU / 12, 0.01, 6) is Movement.DEAD


def test_collision_blocks_right(wall):
    assert wall.collision(15.0, TAU / 6 + 0.05, 0.1, 6) is Movement.CANNOT_MOVE_RIGHT


def test_collision_blocks_left_across_seam(wall):
    assert wall.collision(15.0, TAU - 0.05, 0.1, 6) is Movement.CANNOT_MOVE_LEFT


def test_collision_free_far_away(wall):
    assert wall.collision(15.0, TAU / 2, 0.1, 6) is Movement.CAN_MOVE


def test_calc_points_distance_from_focus():
    wall = Wall(distance=40.0, height=8.0, side=2)
    focus = Point(100.0, 50.0)
    points = wall.calc_points(focus, 0.3, 6.0, 0.0, 2.0)
    assert len(points) == 4
    assert math.hypot(points[0].x - focus.x, points[0].y - focus.y) == pytest.approx(80.0)
    assert math.hypot(points[1].x - focus.x, points[1].y - focus.y) == pytest.approx(96.0)


def test_calc_points_clamped_to_hexagon():
    wall = Wall(distance=0.0, height=30.0, side=0)
    focus = Point(0.0, 0.0)
    points = wall.calc_points(focus, 0.0, 6.0, 0.0, 1.0)
    assert math.hypot(points[0].x, points[0].y) == pytest.approx(SCALE_HEX_LENGTH)
    assert math.hypot(points[1].x, points[1].y) == pytest.approx(30.0)


def test_calc_point_on_axis():
    point = Wall.calc_point(Point(1.0, 2.0), 0.0, 0.0, 5.0, 6.0, 0)
    assert point.x == pytest.approx(6.0)
    assert point.y == pytest.approx(2.0)