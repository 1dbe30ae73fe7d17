# bilogis

bilogis provides two-input logic gates. It also provides the parts of a schematic
editor that run without a display: a scene model, orthogonal wire routing,
L-shaped jumpers and gate symbols.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install .[test]
pytest
```

## Gates: `bilogis.gates`

`Gate` is a dataclass with two boolean inputs, `in1` and `in2`. Both default to
`False`. The base gate's `output()` always returns `False`. The concrete gates are:

| Class       | Name      | `output()`                              |
|-------------|-----------|-----------------------------------------|
| `AndGate`   | `"AND"`   | `in1 and in2`                           |
| `OrGate`    | `"OR"`    | `in1 or in2`                            |
| `NandGate`  | `"NAND"`  | `not (in1 and in2)`                     |
| `NorGate`   | `"NOR"`   | `not (in1 or in2)`                      |
| `XorGate`   | `"XOR"`   | true when exactly one input is high     |
| `XnorGate`  | `"XNOR"`  | true when the inputs are equal          |
| `XandGate`  | `"XAND"`  | true when the inputs are equal          |
| `XnandGate` | `"XNAND"` | true when the inputs differ             |
| `NotGate`   | `"NOT"`   | `(not in1) or (not in2)`                |

`make_gate(kind)` builds a fresh gate from its name. An unknown name raises
`ValueError`.

```python
from bilogis.gates import make_gate

g = make_gate("XNOR")
g.in1, g.in2 = True, False
print(g.output())   # False
```

## Scene model: `bilogis.scene`

- `Point`, `Line` and `Rect` are immutable geometry values. Points can be added
  and subtracted. `Rect.contains` counts the edges as inside.
- `MouseEvent` holds a scene position and a `MouseButton`.
- `Item` is a shape with a position, pen, brush and cursor. `move_by` shifts it.
- `DraggableItem` follows a drag made with the left button through `press`, `move`
  and `release`. It can switch to a highlight brush when it is pressed.
- `Scene` holds an ordered list of items. It has `add_item`, `add_line` and
  `add_rect`.
- `LineConnection.draw_line(cursor)` stretches a segment from the origin to the
  cursor.

## Wire routing: `bilogis.routing`

- `snap_to_axis(origin, point)` projects a point onto the nearer axis through the
  origin. On a tie it takes the vertical axis.
- `Fil` is one snapped segment. Its `new_origin` is where the next segment starts.
- `Wire` is a movable line that is snapped towards the cursor.
- `WireDrawer` draws an orthogonal polyline. A left click starts it. Each turn
  fixes a segment and a dashed preview follows the cursor. A right click stops the
  drawing and removes the preview.
- `SegmentDrawer` draws a green line from the point of the press. The line turns
  vertical once the cursor is more than 50 units above or below the start.
- `AxisSnapper` builds a first snapped segment and a follow-up segment.

## Jumpers: `bilogis.jumper`

These classes route a wire from an origin to the cursor as two segments in an L
shape.

- `SimpleJumper` snaps the corner to an axis and alternates between the axes.
- `LatchingJumper` keeps the axis along which the drag started. It flips once the
  cursor has crossed to the other side of the origin.
- `Jumper` routes the same way. It hands over between its horizontal and vertical
  drawers, and clears their memory on each handover.
- `trace_direction(direction, sense, cursor, origin, line)` stretches one line
  along a single `Direction` and `Sense`.

## Gate symbols: `bilogis.symbols`

`GateSymbol` is a draggable group of parts. The concrete symbols are:

- `AndSymbol`, `OrSymbol` and `NotSymbol`, built from lines, paths, ellipses and
  a text label.
- `NandSymbol`, drawn as a picture that jumps to the cursor while it is dragged.
- `PictureSymbol`, a picture that the caller places with `add_picture` and
  `move_to`.

`Shape` describes ellipses, paths, text and pictures. `draw_and_gate(scene, x, y)`
adds the shapes of an AND gate directly to a scene.

## What this package does not do

- It has no command-line program and no window. Nothing is rendered on screen.
  The scene and the symbols only record geometry and state.
- It does not connect gates into a circuit. Each gate is evaluated on its own, from
  inputs that you set.
- It does not store projects or keep a list of recent projects.