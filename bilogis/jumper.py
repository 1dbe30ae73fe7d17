"""Two-segment (L-shaped) jumpers that route a wire from an origin to the cursor."""

from __future__ import annotations

import enum

from bilogis.scene import Item, Line, Point


class Sense(enum.Enum):
    """Which way a segment points from its origin."""

    RIGHT = "right"
    LEFT = "left"
    DOWN = "down"
    UP = "up"
    CENTRE = "centre"


class Direction(enum.Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


_HORIZONTAL_SENSES = (Sense.RIGHT, Sense.LEFT)
_VERTICAL_SENSES = (Sense.UP, Sense.DOWN)


def trace_direction(
    direction: Direction, sense: Sense, cursor: Point, origin: Point, line: Item
) -> None:
    """Stretch ``line`` from ``origin`` towards ``cursor`` along one axis.

    The line is only changed when the cursor lies on the requested side of
    the origin; a sense that does not belong to the direction is ignored.
    """
    if direction is Direction.VERTICAL and sense in _HORIZONTAL_SENSES:
        return
    if direction is Direction.HORIZONTAL and sense in _VERTICAL_SENSES:
        return
    vertical = Line(origin, Point(origin.x, cursor.y))
    horizontal = Line(origin, Point(cursor.x, origin.y))
    if direction is Direction.VERTICAL and sense is Sense.DOWN:
        if cursor.y - origin.y > 0:
            line.shape = vertical
    elif direction is Direction.VERTICAL and sense is Sense.UP:
        if cursor.y - origin.y < 0:
            line.shape = vertical
    elif direction is Direction.HORIZONTAL and sense is Sense.RIGHT:
        if cursor.x - origin.x > 0:
            line.shape = horizontal
    elif direction is Direction.HORIZONTAL and sense is Sense.LEFT:
        if cursor.x - origin.x < 0:
            line.shape = horizontal


def _horizontal_first(origin: Point, cursor: Point) -> tuple[Line, Line]:
    corner = Point(cursor.x, origin.y)
    return Line(origin, corner), Line(corner, cursor)


def _vertical_first(origin: Point, cursor: Point) -> tuple[Line, Line]:
    corner = Point(origin.x, cursor.y)
    return Line(origin, corner), Line(corner, cursor)


class SimpleJumper:
    """Draws two segments: one snapped to an axis, the other finishing the path.

    The snap alternates axes: once the cursor has been nearer one axis and
    then nearer the other, the snapped point is taken on the opposite axis.
    """

    def __init__(self) -> None:
        self.line1 = Item(shape=Line())
        self.line2 = Item(shape=Line())
        self.origin = Point()
        self._changed_x = False
        self._changed_y = False

    def snap_to_axis(self, point: Point) -> Point:
        """Return ``point`` projected on an axis through the current origin."""
        dx = abs(self.origin.x - point.x)
        dy = abs(self.origin.y - point.y)
        if dx > dy:
            self._changed_x = True
            if self._changed_y:
                self._changed_x = False
                return Point(self.origin.x, point.y)
            return Point(point.x, self.origin.y)
        self._changed_y = True
        if self._changed_x:
            self._changed_y = False
            return Point(point.x, self.origin.y)
        return Point(self.origin.x, point.y)

    def horizontal_sense(self, point: Point) -> Sense:
        """RIGHT if ``point`` lies right of the origin, otherwise LEFT."""
        return Sense.RIGHT if self.origin.x - point.x < 0 else Sense.LEFT

    def vertical_sense(self, point: Point) -> Sense:
        """DOWN if ``point`` lies below the origin, otherwise UP."""
        return Sense.DOWN if self.origin.y - point.y < 0 else Sense.UP

    def set_lines(self, line1: Item, line2: Item) -> None:
        """Adopt two line items and give them their initial placement."""
        self.line1 = line1
        self.line2 = line2
        self.line1.shape = Line(Point(0, 0), Point(100, 200))
        self.line2.shape = Line(Point(0, 0), Point(70, 150))

    def draw_lines(self, origin: Point, cursor: Point) -> None:
        self.origin = origin
        corner = self.snap_to_axis(cursor)
        self.line1.shape = Line(self.origin, corner)
        self.line2.shape = Line(corner, Point(corner.x, cursor.y))


class LatchingJumper(SimpleJumper):
    """Routes an L whose first leg follows the axis the drag started along.

    Once the cursor has crossed to the other side of the origin, the L
    switches to start along the other axis.
    """

    def __init__(self) -> None:
        super().__init__()
        self._start: Direction | None = None
        self._down = False
        self._up = False
        self._right = False
        self._left = False

    def draw_lines(self, origin: Point, cursor: Point) -> None:
        self.origin = origin
        self._draw(cursor, origin)

    def _draw(self, cursor: Point, origin: Point) -> None:
        dx = abs(cursor.x - origin.x)
        dy = abs(cursor.y - origin.y)
        if self._start is None:
            if dx > dy:
                self._start = Direction.HORIZONTAL
            elif dx < dy:
                self._start = Direction.VERTICAL
        if self._start is Direction.HORIZONTAL:
            if cursor.x - origin.x > 0:
                self._right = True
                crossed = self._left
            else:
                self._left = True
                crossed = self._right
            first, second = (
                _vertical_first(origin, cursor)
                if crossed
                else _horizontal_first(origin, cursor)
            )
        elif self._start is Direction.VERTICAL:
            if cursor.y - origin.y > 0:
                self._down = True
                crossed = self._up
            else:
                self._up = True
                crossed = self._down
            first, second = (
                _horizontal_first(origin, cursor)
                if crossed
                else _vertical_first(origin, cursor)
            )
        else:
            return
        self.line1.shape = first
        self.line2.shape = second


class Jumper(SimpleJumper):
    """Routes an L like LatchingJumper, handing over between the two drawers.

    When the cursor crosses the origin, the current drawer restarts the other
    one with its memory cleared, so the L flips to start along the other axis.
    """

    def __init__(self) -> None:
        super().__init__()
        self._start: Direction | None = None
        self._down = False
        self._up = False
        self._right = False
        self._left = False

    def draw_lines(self, origin: Point, cursor: Point) -> None:
        self.origin = origin
        dx = abs(cursor.x - origin.x)
        dy = abs(cursor.y - origin.y)
        if self._start is None:
            if dx > dy:
                self._start = Direction.HORIZONTAL
            elif dx < dy:
                self._start = Direction.VERTICAL
        if self._start is Direction.HORIZONTAL:
            self.draw_horizontal(cursor, origin, False)
        elif self._start is Direction.VERTICAL:
            self.draw_vertical(cursor, origin, False)

    def draw_horizontal(self, cursor: Point, origin: Point, reset: bool) -> None:
        """Draw an L starting horizontally, or hand over after a crossing."""
        if reset:
            self._right = False
            self._left = False
        if cursor.x - origin.x > 0:
            self._right = True
            crossed = self._left
        else:
            self._left = True
            crossed = self._right
        if crossed:
            self.draw_vertical(cursor, origin, True)
            return
        self.line1.shape, self.line2.shape = _horizontal_first(origin, cursor)

    def draw_vertical(self, cursor: Point, origin: Point, reset: bool) -> None:
        """Draw an L starting vertically, or hand over after a crossing."""
        if reset:
            self._down = False
            self._up = False
        if cursor.y - origin.y > 0:
            self._down = True
            crossed = self._up
        else:
            self._up = True
            crossed = self._down
        if crossed:
            self.draw_horizontal(cursor, origin, True)
            return
        self.line1.shape, self.line2.shape = _vertical_first(origin, cursor)