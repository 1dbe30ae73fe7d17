"""Gate symbols: groups of shapes that draw a logic gate and can be dragged."""

from __future__ import annotations

from dataclasses import dataclass, field

from bilogis.scene import (
    CursorShape,
    Item,
    Line,
    MouseButton,
    MouseEvent,
    Point,
    Rect,
    Scene,
)

PathCommand = tuple[str, tuple[Point, ...]]


@dataclass(frozen=True)
class Shape:
    """A drawable outline that is not a plain line or rectangle.

    ``kind`` is one of "ellipse", "path", "text" or "picture".  An ellipse
    fills ``bounds``; a path is a sequence of ``commands`` ("move", "line",
    "quad", "cubic", "close") with their points; text carries ``text`` and a
    picture names the image file in ``source``.
    """

    kind: str
    bounds: Rect | None = None
    commands: tuple[PathCommand, ...] = ()
    text: str = ""
    source: str = ""


def _line(x1: float, y1: float, x2: float, y2: float, pen: str = "black") -> Item:
    return Item(shape=Line(Point(x1, y1), Point(x2, y2)), pen=pen)


def _label(name: str) -> Item:
    return Item(shape=Shape("text", text=name))


def _and_body(x: float, y: float) -> list[Item]:
    return [
        Item(shape=Rect(85 + x, 10 + y, 30, 30), brush="black"),
        Item(shape=Shape("ellipse", bounds=Rect(100 + x, 10 + y, 30, 30)), brush="black"),
        _line(50 + x, 15 + y, 100 + x, 15 + y),
        _line(50 + x, 35 + y, 100 + x, 35 + y),
        _line(100 + x, 25 + y, 150 + x, 25 + y),
    ]


@dataclass(eq=False)
class GateSymbol(Item):
    """A movable, selectable group of items that follows a left-button drag."""

    name: str = ""
    parts: list[Item] = field(default_factory=list)
    movable: bool = True
    selectable: bool = True
    is_moving: bool = False
    last_mouse_pos: Point = field(default_factory=Point)

    def press(self, event: MouseEvent) -> None:
        """Start dragging on a left-button press."""
        if event.button is not MouseButton.LEFT:
            return
        self.is_moving = True
        self.last_mouse_pos = event.scene_pos
        self.cursor = CursorShape.CLOSED_HAND

    def move(self, event: MouseEvent) -> None:
        """Follow the mouse by the distance it moved since the last event."""
        if not self.is_moving:
            return
        delta = event.scene_pos - self.last_mouse_pos
        self.move_by(delta.x, delta.y)
        self.last_mouse_pos = event.scene_pos

    def release(self, event: MouseEvent) -> None:
        """Stop dragging when the left button is released."""
        if event.button is not MouseButton.LEFT:
            return
        self.is_moving = False
        self.cursor = CursorShape.ARROW


class AndSymbol(GateSymbol):
    """An AND gate: square body, round front, two inputs and one output."""

    def __init__(self, x: float = 0, y: float = 0) -> None:
        super().__init__(name="AND", parts=[_label("AND"), *_and_body(x, y)])


class OrSymbol(GateSymbol):
    """An OR gate drawn with a curved back and a pointed front."""

    def __init__(self) -> None:
        body = Shape(
            "path",
            commands=(
                ("move", (Point(-20, -30),)),
                ("quad", (Point(-5, 0), Point(-20, 30))),
                ("move", (Point(-20, -30),)),
                ("cubic", (Point(20, -30), Point(30, 30), Point(-20, 30))),
            ),
        )
        super().__init__(
            name="OR",
            parts=[
                _label("OR"),
                _line(-50, -20, -15, -20),
                _line(-50, 20, -15, 20),
                Item(shape=body, brush="black", pen="none"),
                _line(13, 0, 50, 0),
            ],
        )


class NotSymbol(GateSymbol):
    """An inverter: input line, triangle, output bubble and red output line."""

    def __init__(self) -> None:
        triangle = Shape(
            "path",
            commands=(
                ("move", (Point(-20, -20),)),
                ("line", (Point(-20, 20),)),
                ("line", (Point(0, 0),)),
                ("close", ()),
            ),
        )
        super().__init__(
            name="NOT",
            parts=[
                _label("NOT"),
                _line(-40, 0, -20, 0, pen="black"),
                Item(shape=triangle, brush="black", pen="none"),
                Item(shape=Shape("ellipse", bounds=Rect(0, -5, 10, 10)), brush="black", pen="none"),
                _line(12, 0, 30, 0, pen="red"),
            ],
        )


class NandSymbol(GateSymbol):
    """A NAND gate shown as a picture that jumps to the cursor while dragged."""

    def __init__(self, picture: str = "AND.svg") -> None:
        super().__init__(name="NAND", parts=[Item(shape=Shape("picture", source=picture))])
        self.origin_point = Point()

    @property
    def picture(self) -> Item:
        return self.parts[0]

    def press(self, event: MouseEvent) -> None:
        if event.button is not MouseButton.LEFT:
            return
        self.origin_point = event.scene_pos
        if not any(part is self.picture for part in self.parts):
            self.parts.append(self.picture)
        self.cursor = CursorShape.OPEN_HAND
        self.is_moving = True

    def move(self, event: MouseEvent) -> None:
        if self.is_moving:
            self.picture.pos = event.scene_pos


class PictureSymbol(GateSymbol):
    """A gate drawn from an image file, placed by the editor rather than dragged."""

    def __init__(self, source: str) -> None:
        super().__init__(name=source)
        self.picture = Item(shape=Shape("picture", source=source))

    def add_picture(self) -> None:
        """Put the picture into the group; adding it again changes nothing."""
        if not any(part is self.picture for part in self.parts):
            self.parts.append(self.picture)

    def move_to(self, position: Point, is_move: bool) -> None:
        """Place the picture at ``position`` when ``is_move`` is set."""
        if is_move:
            self.picture.pos = position

    def press(self, event: MouseEvent) -> None:
        """Pressing on the picture does not start a drag."""


def draw_and_gate(scene: Scene, x: float, y: float) -> list[Item]:
    """Draw an AND gate's shapes straight into ``scene`` at offset (x, y)."""
    items = _and_body(x, y)
    for item in items:
        scene.add_item(item)
    return items