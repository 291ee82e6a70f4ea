"""GUI layout cursor: where the next widget is placed inside a window."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace

from quadkit.geometry import Rect, Vec2


@dataclass
class Scroll:
    """Scrolling state of a window's content."""

    rect: Rect
    inner_rect: Rect
    inner_rect_previous_frame: Rect
    scroll: Vec2 = field(default_factory=Vec2)
    dragging_x: bool = False
    dragging_y: bool = False
    initial_scroll: Vec2 = field(default_factory=Vec2)

    def _clamp(self, y: float) -> float:
        prev = self.inner_rect_previous_frame
        return min(max(y, prev.y), prev.h - self.rect.h + prev.y)

    def scroll_to(self, y: float) -> None:
        """Move the visible area to y, clamped to the previous frame's content."""
        self.rect = replace(self.rect, y=self._clamp(y))

    def update(self) -> None:
        """Re-clamp the visible area to the previous frame's content."""
        self.rect = replace(self.rect, y=self._clamp(self.rect.y))


class Layout(enum.Enum):
    """Automatic placement directions."""

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


@dataclass(frozen=True)
class Free:
    """Placement at an explicit point, bypassing the automatic layout."""

    point: Vec2


class Cursor:
    """Tracks where the next widget goes inside an area."""

    def __init__(self, area: Rect, margin: float) -> None:
        self.margin = margin
        self.x = margin
        self.y = margin
        self.start_x = margin
        self.start_y = margin
        self.ident = 0.0
        self.area = area
        self.next_same_line: float | None = None
        self.max_row_y = 0.0
        full = Rect(0.0, 0.0, area.w, area.h)
        self.scroll = Scroll(rect=full, inner_rect=full, inner_rect_previous_frame=full)

    def __repr__(self) -> str:
        return (
            f"Cursor(x={self.x!r}, y={self.y!r}, area={self.area!r}, "
            f"margin={self.margin!r})"
        )

    def _origin(self) -> Vec2:
        return Vec2(self.area.x, self.area.y) + self.scroll.scroll + Vec2(self.ident, 0.0)

    def reset(self) -> None:
        """Start a new frame: rewind the cursor and remember the content size."""
        self.x = self.start_x
        self.y = self.start_y
        self.max_row_y = 0.0
        self.ident = 0.0
        self.scroll.inner_rect_previous_frame = self.scroll.inner_rect
        self.scroll.inner_rect = Rect(0.0, 0.0, self.area.w, self.area.h)

    def current_position(self) -> Vec2:
        """Absolute position the cursor currently points at."""
        return Vec2(self.x, self.y) + self._origin()

    def fit(self, size: Vec2, layout: Layout | Free) -> Vec2:
        """Reserve space of the given size and return its absolute position."""
        if self.next_same_line is not None:
            x = self.next_same_line
            self.next_same_line = None
            if x != 0.0:
                self.x = x
            layout = Layout.HORIZONTAL

        if isinstance(layout, Free):
            res = layout.point
        elif layout is Layout.HORIZONTAL:
            self.max_row_y = max(self.max_row_y, size.y)
            if self.x + size.x >= self.area.w - self.margin * 2.0:
                # the extra 1 makes a following vertical element start a new row
                self.x = self.margin + 1.0
                self.y += self.max_row_y + self.margin
                self.max_row_y = 0.0
            res = Vec2(self.x, self.y)
            self.x += size.x + self.margin
        else:
            if self.x != self.margin:
                self.x = self.margin
                self.y += self.max_row_y
            res = Vec2(self.x, self.y)
            self.x += size.x + self.margin
            self.max_row_y = size.y + self.margin

        self.scroll.inner_rect = self.scroll.inner_rect.combine_with(
            Rect(res.x, res.y, size.x, size.y)
        )
        return res + self._origin()