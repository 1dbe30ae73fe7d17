"""Drawing wires that run along the horizontal and vertical axes."""

from __future__ import annotations

import enum

from bilogis.scene import Item, Line, MouseButton, MouseEvent, Point, Scene


class _Axis(enum.Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


def snap_to_axis(origin: Point, point: Point) -> Point:
    """Project ``point`` onto the axis through ``origin`` it is closest to.

    Ties go to the vertical axis.
    """
    dx = abs(point.x - origin.x)
    dy = abs(point.y - origin.y)
    if dx > dy:
        return Point(point.x, origin.y)
    return Point(origin.x, point.y)


class Fil:
    """One straight wire segment that follows the cursor along one axis.

    ``new_origin`` is the free end of the segment, where the next one starts.
    """

    def __init__(self, item: Item | None = None) -> None:
        self.item = item if item is not None else Item(shape=Line())
        self.origin = Point()
        self.cursor = Point()
        self.new_origin = Point()

    def move_line(self, origin: Point, cursor: Point, is_move: bool) -> None:
        self.origin = origin
        self.cursor = cursor
        if not is_move:
            return
        end = snap_to_axis(origin, cursor)
        self.item.shape = Line(origin, end)
        self.new_origin = end


class Wire:
    """A movable line snapped to the axis nearest the cursor."""

    def __init__(self) -> None:
        self.item = Item(shape=Line(), movable=True)
        self.origin = Point()

    def draw_lines(self, cursor: Point, origin: Point) -> None:
        self.origin = origin
        self.item.shape = Line(origin, snap_to_axis(origin, cursor))


class WireDrawer:
    """Draws an orthogonal polyline: a new segment is fixed at each turn.

    Left click starts drawing; right click stops and removes the preview.
    """

    def __init__(self, scene: Scene | None = None) -> None:
        self.scene = scene if scene is not None else Scene()
        self.current_point = Point()
        self.temp_line: Item | None = None
        self.is_drawing = False
        self._last_direction = _Axis.HORIZONTAL

    def press(self, event: MouseEvent) -> None:
        if event.button is MouseButton.LEFT:
            self.current_point = event.scene_pos
            self.is_drawing = True
            self._last_direction = _Axis.HORIZONTAL
        elif event.button is MouseButton.RIGHT and self.is_drawing:
            self.is_drawing = False
            if self.temp_line is not None:
                self.scene.items.remove(self.temp_line)
            self.temp_line = None

    def move(self, event: MouseEvent) -> None:
        if not self.is_drawing:
            return
        snapped = snap_to_axis(self.current_point, event.scene_pos)
        if self._direction_changed(snapped):
            self.scene.add_line(Line(self.current_point, snapped))
            self.current_point = snapped
            self._update_direction(snapped)
        preview = Line(self.current_point, snapped)
        if self.temp_line is None:
            self.temp_line = self.scene.add_line(preview)
            self.temp_line.style = "dash"
        else:
            self.temp_line.shape = preview

    def release(self, event: MouseEvent) -> None:
        """Releasing the button does not end a wire."""

    def _deltas(self, point: Point) -> tuple[float, float]:
        return abs(point.x - self.current_point.x), abs(point.y - self.current_point.y)

    def _direction_changed(self, point: Point) -> bool:
        dx, dy = self._deltas(point)
        return (dx > dy and self._last_direction is _Axis.VERTICAL) or (
            dy > dx and self._last_direction is _Axis.HORIZONTAL
        )

    def _update_direction(self, point: Point) -> None:
        dx, dy = self._deltas(point)
        self._last_direction = _Axis.HORIZONTAL if dx > dy else _Axis.VERTICAL


class SegmentDrawer:
    """Draws a green line from the press point.

    The line goes vertical once the cursor is more than 50 units above or
    below the start, and horizontal otherwise.
    """

    THRESHOLD = 50

    def __init__(self, scene: Scene | None = None) -> None:
        self.scene = scene if scene is not None else Scene()
        self.line_item: Item | None = None
        self.start_point = Point()
        self.lines: list[Line] = [Line()]

    def press(self, event: MouseEvent) -> None:
        self.start_point = event.scene_pos
        self.line_item = self.scene.add_line(Line(self.start_point, self.start_point))
        self.line_item.pen = "green"

    def move(self, event: MouseEvent) -> None:
        if self.line_item is None:
            return
        start, pos = self.start_point, event.scene_pos
        rise = start.y - pos.y
        if abs(rise) > self.THRESHOLD:
            self.line_item.shape = Line(start, Point(start.x, pos.y))
        else:
            self.lines.insert(0, Line(start, Point(pos.x, start.y)))
            self.line_item.shape = self.lines[0]

    def release(self, event: MouseEvent) -> None:
        self.line_item = None


class AxisSnapper:
    """Builds a first axis-aligned segment and a follow-up segment."""

    def __init__(self) -> None:
        self.origin = Point()
        self.corner = Point()
        self.first = Line()
        self.draw_first = True
        self.draw_second = True

    def first_segment(self, origin: Point, point: Point) -> Line:
        self.origin = origin
        self.corner = snap_to_axis(origin, point)
        if self.draw_first:
            self.first = Line(self.origin, self.corner)
            return self.first
        return Line(self.origin, Point(self.origin.x, self.corner.y))

    def second_segment(self) -> Line:
        self.draw_second = self.first.dy != 0
        if self.draw_second:
            return Line(Point(self.corner.x, 100), Point(500, 300))
        return Line(self.corner, self.corner)