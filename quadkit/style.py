"""Widget styles: colours, margins and background sprites per interaction state."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass, field

from quadkit.draw_commands import Color, ElementState
from quadkit.geometry import RectOffset

_INACTIVE_TEXT_FACTOR = 0.6
_INACTIVE_ALPHA_FACTOR = 0.8


def _black() -> Color:
    return Color.from_rgba(0, 0, 0, 255)


def _white() -> Color:
    return Color.from_rgba(255, 255, 255, 255)


def _to_byte(value: float) -> int:
    """Truncate to an integer and saturate to 0..255."""
    return min(max(int(value), 0), 255)


@dataclass
class Style:
    """Look of one kind of widget.

    ``background``, ``background_hovered`` and ``background_clicked`` are
    sprite keys in the texture atlas, or None to draw a plain rectangle.
    ``background_margin`` is the part of the background sprite kept
    unscaled at its borders; ``margin`` is extra space between the border
    and the content and does not affect textures.
    """

    background: Hashable | None = None
    background_hovered: Hashable | None = None
    background_clicked: Hashable | None = None
    color: Color = field(default_factory=_white)
    color_inactive: Color | None = None
    color_hovered: Color = field(default_factory=_white)
    color_clicked: Color = field(default_factory=_white)
    color_selected: Color = field(default_factory=_white)
    color_selected_hovered: Color = field(default_factory=_white)
    background_margin: RectOffset | None = None
    margin: RectOffset | None = None
    text_color: Color = field(default_factory=_black)
    text_color_hovered: Color = field(default_factory=_black)
    text_color_clicked: Color = field(default_factory=_black)
    font_size: int = 16
    reverse_background_z: bool = False

    def border_margin(self) -> RectOffset:
        """Background margin and content margin added side by side."""
        background = self.background_margin or RectOffset()
        margin = self.margin or RectOffset()
        return RectOffset(
            left=background.left + margin.left,
            right=background.right + margin.right,
            top=background.top + margin.top,
            bottom=background.bottom + margin.bottom,
        )

    def text_color_for(self, state: ElementState) -> Color:
        """Text colour for the given state; unfocused text is dimmed."""
        if state.clicked:
            return self.text_color_clicked
        if state.hovered:
            return self.text_color_hovered
        if state.focused:
            return self.text_color
        c = self.text_color
        f = _INACTIVE_TEXT_FACTOR
        return Color(c.r * f, c.g * f, c.b * f, c.a * f)

    def color_for(self, state: ElementState) -> Color:
        """Background colour for the given state."""
        if not state.focused:
            if self.color_inactive is not None:
                return self.color_inactive
            c = self.color
            return Color.from_rgba(
                _to_byte(c.r * 255.0),
                _to_byte(c.g * 255.0),
                _to_byte(c.b * 255.0),
                _to_byte(c.a * 255.0 * _INACTIVE_ALPHA_FACTOR),
            )
        if state.clicked:
            return self.color_clicked
        if state.selected and state.hovered:
            return self.color_selected_hovered
        if state.selected:
            return self.color_selected
        if state.hovered:
            return self.color_hovered
        return self.color

    def background_sprite(self, state: ElementState) -> Hashable | None:
        """Background sprite key for the given state, falling back to the plain one."""
        if state.clicked and self.background_clicked is not None:
            return self.background_clicked
        if state.hovered and self.background_hovered is not None:
            return self.background_hovered
        return self.background