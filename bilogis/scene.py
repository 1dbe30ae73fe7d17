"""A small retained-mode scene: points, lines, rectangles and draggable items."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Point:
    """A position in scene coordinates."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class Line:
    """A straight segment from ``p1`` to ``p2``."""

    p1: Point = field(default_factory=Point)
    p2: Point = field(default_factory=Point)

    @property
    def dx(self) -> float:
        return self.p2.x - self.p1.x

    @property
    def dy(self) -> float:
        return self.p2.y - self.p1.y


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float
    y: float
    width: float
    height: float

    def contains(self, point: Point) -> bool:
        """Return True if ``point`` lies inside the rectangle or on its edge."""
        return (
            self.x <= point.x <= self.x + self.width
            and self.y <= point.y <= self.y + self.height
        )


class MouseButton(enum.Enum):
    NONE = "none"
    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"


class CursorShape(enum.Enum):
    ARROW = "arrow"
    OPEN_HAND = "open_hand"
    CLOSED_HAND = "closed_hand"


@dataclass(frozen=True)
class MouseEvent:
    """A mouse event delivered to a scene or an item."""

    scene_pos: Point
    button: MouseButton = MouseButton.NONE


@dataclass(eq=False)
class Item:
    """Something placed in a scene: a shape drawn at an offset position."""

    shape: Line | Rect | None = None
    pos: Point = field(default_factory=Point)
    pen: str = "black"
    style: str = "solid"
    brush: str | None = None
    movable: bool = False
    selectable: bool = False
    cursor: CursorShape = CursorShape.ARROW

    def move_by(self, dx: float, dy: float) -> None:
        """Shift the item by the given offsets."""
        self.pos = self.pos + Point(dx, dy)


@dataclass(eq=False)
class DraggableItem(Item):
    """An item that follows the mouse while the left button is held on it.

    If ``highlight`` is set, the brush switches to it when the item is pressed.
    """

    highlight: str | None = None
    movable: bool = True
    selectable: bool = True
    is_moving: bool = False
    last_mouse_pos: Point = field(default_factory=Point)

    def press(self, event: MouseEvent) -> None:
        if event.button is not MouseButton.LEFT:
            return
        if self.highlight is not None:
            self.brush = self.highlight
        self.is_moving = True
        self.last_mouse_pos = event.scene_pos
        self.cursor = CursorShape.CLOSED_HAND

    def move(self, event: MouseEvent) -> None:
        if not self.is_moving:
            return
        delta = event.scene_pos - self.last_mouse_pos
        self.move_by(delta.x, delta.y)
        self.last_mouse_pos = event.scene_pos

    def release(self, event: MouseEvent) -> None:
        if event.button is not MouseButton.LEFT:
            return
        self.is_moving = False
        self.cursor = CursorShape.ARROW


class Scene:
    """An ordered collection of items."""

    def __init__(self) -> None:
        self.items: list[Item] = []

    def add_item(self, item: Item) -> Item:
        """Place ``item`` in the scene and return it."""
        self.items.append(item)
        return item

    def add_line(self, line: Line) -> Item:
        """Place a new line item and return it."""
        return self.add_item(Item(shape=line))

    def add_rect(self, rect: Rect) -> Item:
        """Place a new rectangle item and return it."""
        return self.add_item(Item(shape=rect))


class LineConnection:
    """A segment that always runs from the scene origin to the cursor."""

    def __init__(self) -> None:
        self.segment = Line()

    def draw_line(self, cursor: Point) -> Line:
        """Stretch the segment to ``cursor`` and return it."""
        self.segment = Line(Point(0, 0), cursor)
        return self.segment