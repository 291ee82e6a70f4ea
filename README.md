# quadkit

Building blocks for an immediate-mode user interface. The package covers widget
layout, text-box editing, keyboard and mouse state, per-state styles, and the
conversion of draw commands into batched triangle meshes. It uses only the
standard library.

## What is inside

- `quadkit.geometry`: `Vec2`, `Rect` and `RectOffset`. These are frozen value
  types. `Rect` provides `contains`, `overlaps`, `intersect`, `combine_with`,
  `offset`, `point` and `size`.
- `quadkit.layout`: `Cursor`, `Scroll`, `Layout` (`VERTICAL`, `HORIZONTAL`)
  and `Free` for placing a widget at a fixed point. `Cursor.fit` reserves space
  for the next widget and returns its absolute position.
- `quadkit.text_editor`: `EditboxState`. It holds the state of a text box
  stored as a list of one-letter strings: the cursor, the selection, and undo
  and redo stacks. It also handles word and line navigation, and single,
  double and triple clicks through `click_down`, `click_move` and `click_up`.
- `quadkit.input`:
  - `Input` holds a frame's mouse and keyboard state. `is_mouse_pressed`,
    `is_click_down` and `is_click_up` return False while the cursor is grabbed
    or the window is inactive.
  - `InputCharacter` and `KeyCode` describe key events.
  - `KeyRepeat` emulates auto-repeat. A held key fires once, then fires again
    after it has been held for more than half a second.
  - `Clipboard` is an in-memory clipboard.
- `quadkit.keyboard`: `apply_keyboard_input`. It applies pending key events to
  a text buffer and an `EditboxState`, and empties the events list. It handles
  typing, Backspace and Delete, the arrow keys, Home and End, Ctrl+Z, Ctrl+Y,
  Ctrl+X, Ctrl+V and Ctrl+A. An optional filter decides which characters may
  be typed.
- `quadkit.draw_commands`:
  - `Color`, with `Color.from_rgba` for 0..255 components, and `ElementState`.
  - The draw commands `DrawCharacter`, `DrawRect`, `DrawSprite`,
    `DrawTriangle`, `DrawLine`, `DrawRawTexture` and `Clip`.
  - `offset_command` and `estimate_triangles_budget`.
  - `LabelParams` and `Alignment`.
- `quadkit.style`: `Style`. It picks the background colour (`color_for`), text
  colour (`text_color_for`) and background sprite key (`background_sprite`)
  for an `ElementState`. `border_margin` adds the background margin and the
  content margin.
- `quadkit.mesh`: `DrawList`, `Vertex` and `render_command`. `render_command`
  rasterizes a command into the last suitable draw list. It starts a new list
  when the clipping zone or texture changes, or when the list would grow past
  `MAX_VERTICES` or `MAX_INDICES`.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Editing text

```python
from quadkit.text_editor import EditboxState

state = EditboxState()
text = list("hello")
state.move_cursor(text, 5, False)
state.insert_string(text, list(" world"))
assert "".join(text) == "hello world"
state.undo(text)
assert "".join(text) == "hello"
```

Keyboard events can be applied in one call:

```python
from quadkit.input import Clipboard, InputCharacter, KeyCode
from quadkit.keyboard import apply_keyboard_input
from quadkit.text_editor import EditboxState

state = EditboxState()
text: list[str] = []
events = [
    InputCharacter("h"),
    InputCharacter("i"),
    InputCharacter(KeyCode.Z, modifier_ctrl=True),
]
apply_keyboard_input(events, Clipboard(), text, state, multiline=False)
assert "".join(text) == "h"
assert events == []
```

## Laying out widgets

```python
from quadkit.geometry import Rect, Vec2
from quadkit.layout import Cursor, Free, Layout

cursor = Cursor(Rect(0, 0, 200, 100), margin=2)
first = cursor.fit(Vec2(50, 20), Layout.VERTICAL)   # Vec2(2, 2)
second = cursor.fit(Vec2(50, 20), Layout.VERTICAL)  # Vec2(2, 24)
pinned = cursor.fit(Vec2(10, 10), Free(Vec2(100, 5)))
```

## Styles and meshes

```python
from quadkit.draw_commands import Color, DrawRect, ElementState
from quadkit.geometry import Rect
from quadkit.mesh import render_command
from quadkit.style import Style

style = Style(color_hovered=Color.from_rgba(170, 170, 170, 235))
fill = style.color_for(ElementState(focused=True, hovered=True))

draw_lists = []
render_command(draw_lists, DrawRect(Rect(0, 0, 40, 20), Rect(0, 0, 1, 1), fill=fill))
assert len(draw_lists[0].vertices) == 4
assert draw_lists[0].indices == [0, 1, 2, 0, 2, 3]
```

## What the package does not do

quadkit has no window, no graphics backend and no font handling. It does not
open a window, rasterize glyphs or upload meshes to a GPU. Texture objects in
`DrawRawTexture` and `DrawList.texture` are opaque values that the caller
supplies. Sprite keys in `Style` are plain hashable keys, not atlas entries.

There are no ready-made widgets such as buttons, checkboxes or windows. The
modules above provide the pieces that widgets would be built from. There is no
loader for tile maps or other level formats.