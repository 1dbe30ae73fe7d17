import pytest

from bilogis.jumper import (
    Direction,
    Jumper,
    LatchingJumper,
    Sense,
    SimpleJumper,
    trace_direction,
)
from bilogis.scene import Item, Line, Point


def horizontal_first(origin, cursor):
    corner = Point(cursor.x, origin.y)
    return Line(origin, corner), Line(corner, cursor)


def vertical_first(origin, cursor):
    corner = Point(origin.x, cursor.y)
    return Line(origin, corner), Line(corner, cursor)


def shapes(jumper):
    return jumper.line1.shape, jumper.line2.shape


# SimpleJumper


def test_snap_horizontal_first_time():
    j = SimpleJumper()
    assert j.snap_to_axis(Point(30, 5)) == Point(30, 0)


def test_snap_vertical_first_time():
    j = SimpleJumper()
    assert j.snap_to_axis(Point(5, 30)) == Point(0, 30)


def test_snap_flips_after_axis_change():
    j = SimpleJumper()
    j.snap_to_axis(Point(5, 30))
    # now nearer the horizontal axis, but the vertical one was used before
    assert j.snap_to_axis(Point(30, 5)) == Point(0, 5)


def test_snap_is_stable_for_repeated_point():
    j = SimpleJumper()
    j.snap_to_axis(Point(5, 30))
    first = j.snap_to_axis(Point(30, 5))
    assert j.snap_to_axis(Point(30, 5)) == first


@pytest.mark.parametrize(
    "point, expected",
    [(Point(10, 0), Sense.RIGHT), (Point(-10, 0), Sense.LEFT), (Point(0, 0), Sense.LEFT)],
)
def test_horizontal_sense(point, expected):
    assert SimpleJumper().horizontal_sense(point) is expected


@pytest.mark.parametrize(
    "point, expected",
    [(Point(0, 10), Sense.DOWN), (Point(0, -10), Sense.UP), (Point(0, 0), Sense.UP)],
)
def test_vertical_sense(point, expected):
    assert SimpleJumper().vertical_sense(point) is expected


def test_set_lines_adopts_items_and_places_them():
    j = SimpleJumper()
    a, b = Item(), Item()
    j.set_lines(a, b)
    assert j.line1 is a and j.line2 is b
    assert a.shape == Line(Point(0, 0), Point(100, 200))
    assert b.shape == Line(Point(0, 0), Point(70, 150))


def test_simple_draw_lines_horizontal():
    j = SimpleJumper()
    origin, cursor = Point(10, 10), Point(50, 20)
    j.draw_lines(origin, cursor)
    corner = Point(cursor.x, origin.y)
    assert j.line1.shape == Line(origin, corner)
    assert j.line2.shape == Line(corner, Point(corner.x, cursor.y))
    assert j.origin == origin


def test_simple_draw_lines_vertical():
    j = SimpleJumper()
    origin, cursor = Point(10, 10), Point(15, 60)
    j.draw_lines(origin, cursor)
    corner = Point(origin.x, cursor.y)
    assert j.line1.shape == Line(origin, corner)
    assert j.line2.shape == Line(corner, corner)


# trace_direction


def test_trace_vertical_down_sets_line():
    item = Item(shape=Line())
    origin, cursor = Point(1, 1), Point(9, 20)
    trace_direction(Direction.VERTICAL, Sense.DOWN, cursor, origin, item)
    assert item.shape == Line(origin, Point(origin.x, cursor.y))


def test_trace_vertical_down_ignores_cursor_above():
    item = Item(shape=Line())
    trace_direction(Direction.VERTICAL, Sense.DOWN, Point(9, -20), Point(1, 1), item)
    assert item.shape == Line()


def test_trace_horizontal_left():
    item = Item(shape=Line())
    origin, cursor = Point(5, 5), Point(-30, 8)
    trace_direction(Direction.HORIZONTAL, Sense.LEFT, cursor, origin, item)
    assert item.shape == Line(origin, Point(cursor.x, origin.y))


def test_trace_mismatched_sense_is_ignored():
    item = Item(shape=Line())
    trace_direction(Direction.VERTICAL, Sense.RIGHT, Point(9, 20), Point(1, 1), item)
    trace_direction(Direction.HORIZONTAL, Sense.UP, Point(9, -20), Point(1, 1), item)
    assert item.shape == Line()


def test_trace_centre_does_nothing():
    item = Item(shape=Line())
    trace_direction(Direction.HORIZONTAL, Sense.CENTRE, Point(9, 2), Point(1, 1), item)
    assert item.shape == Line()


# LatchingJumper


def test_latching_starts_horizontal():
    j = LatchingJumper()
    origin, cursor = Point(0, 0), Point(40, 10)
    j.draw_lines(origin, cursor)
    assert shapes(j) == horizontal_first(origin, cursor)


def test_latching_keeps_start_axis():
    j = LatchingJumper()
    origin = Point(0, 0)
    j.draw_lines(origin, Point(40, 10))
    cursor = Point(5, 80)
    j.draw_lines(origin, cursor)
    assert shapes(j) == horizontal_first(origin, cursor)


def test_latching_flips_after_crossing():
    j = LatchingJumper()
    origin = Point(0, 0)
    j.draw_lines(origin, Point(40, 10))
    cursor = Point(-40, 10)
    j.draw_lines(origin, cursor)
    assert shapes(j) == vertical_first(origin, cursor)


def test_latching_vertical_flip():
    j = LatchingJumper()
    origin = Point(0, 0)
    down = Point(5, 40)
    j.draw_lines(origin, down)
    assert shapes(j) == vertical_first(origin, down)
    up = Point(5, -40)
    j.draw_lines(origin, up)
    assert shapes(j) == horizontal_first(origin, up)


def test_latching_tie_draws_nothing():
    j = LatchingJumper()
    j.draw_lines(Point(0, 0), Point(10, 10))
    assert shapes(j) == (Line(), Line())


# Jumper


def test_jumper_starts_vertical():
    j = Jumper()
    origin, cursor = Point(2, 2), Point(4, 50)
    j.draw_lines(origin, cursor)
    assert shapes(j) == vertical_first(origin, cursor)


def test_jumper_crossing_hands_over_to_horizontal():
    j = Jumper()
    origin = Point(2, 2)
    j.draw_lines(origin, Point(4, 50))
    cursor = Point(4, -50)
    j.draw_lines(origin, cursor)
    assert shapes(j) == horizontal_first(origin, cursor)


def test_jumper_stays_flipped_after_crossing_back():
    j = Jumper()
    origin = Point(2, 2)
    j.draw_lines(origin, Point(4, 50))
    j.draw_lines(origin, Point(4, -50))
    cursor = Point(4, 50)
    j.draw_lines(origin, cursor)
    assert shapes(j) == horizontal_first(origin, cursor)


def test_jumper_horizontal_crossing():
    j = Jumper()
    origin = Point(0, 0)
    j.draw_lines(origin, Point(60, 3))
    cursor = Point(-60, 3)
    j.draw_lines(origin, cursor)
    assert shapes(j) == vertical_first(origin, cursor)


def test_jumper_draw_horizontal_with_reset_forgets_crossing():
    j = Jumper()
    origin = Point(0, 0)
    j.draw_horizontal(Point(10, 5), origin, False)
    cursor = Point(-10, 5)
    j.draw_horizontal(cursor, origin, True)
    assert shapes(j) == horizontal_first(origin, cursor)


def test_jumper_draw_vertical_direct():
    j = Jumper()
    origin, cursor = Point(0, 0), Point(7, -9)
    j.draw_vertical(cursor, origin, False)
    assert shapes(j) == vertical_first(origin, cursor)


def test_jumper_tie_draws_nothing():
    j = Jumper()
    j.draw_lines(Point(0, 0), Point(-5, 5))
    assert shapes(j) == (Line(), Line())