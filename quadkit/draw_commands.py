"""Colours, element states and the drawing commands produced by the GUI painter."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from typing import Any, Union

from quadkit.geometry import Rect, RectOffset, Vec2


@dataclass(frozen=True)
class Color:
    """An RGBA colour with components in the range 0..1."""

    r: float
    g: float
    b: float
    a: float

    @classmethod
    def from_rgba(cls, r: int, g: int, b: int, a: int) -> Color:
        """Build a colour from 0..255 byte components."""
        return cls(r / 255.0, g / 255.0, b / 255.0, a / 255.0)


@dataclass(frozen=True)
class ElementState:
    """Interaction state of a widget, used to pick its colours and sprites."""

    focused: bool = False
    hovered: bool = False
    clicked: bool = False
    selected: bool = False


@dataclass(frozen=True)
class DrawCharacter:
    """A glyph copied from the font atlas."""

    dest: Rect
    source: Rect
    color: Color


@dataclass(frozen=True)
class DrawRect:
    """A rectangle with optional fill and optional one-pixel outline."""

    rect: Rect
    source: Rect
    fill: Color | None = None
    stroke: Color | None = None


@dataclass(frozen=True)
class DrawSprite:
    """A nine-patch sprite: margins are kept unscaled, the middle stretches."""

    rect: Rect
    source: Rect
    color: Color
    offsets: RectOffset | None = None
    offsets_uv: RectOffset | None = None


@dataclass(frozen=True)
class DrawTriangle:
    """A solid triangle."""

    p0: Vec2
    p1: Vec2
    p2: Vec2
    source: Rect
    color: Color


@dataclass(frozen=True)
class DrawLine:
    """A one-pixel line segment."""

    start: Vec2
    end: Vec2
    source: Rect
    color: Color


@dataclass(frozen=True)
class DrawRawTexture:
    """A whole texture stretched over a rectangle."""

    rect: Rect
    texture: Any


@dataclass(frozen=True)
class Clip:
    """Restrict following commands to a rectangle, or lift the restriction."""

    rect: Rect | None = None


DrawCommand = Union[
    DrawCharacter, DrawRect, DrawSprite, DrawTriangle, DrawLine, DrawRawTexture, Clip
]

_BUDGETED = (DrawCharacter, DrawRawTexture, DrawRect, DrawLine, DrawTriangle)


def offset_command(command: DrawCommand, offset: Vec2) -> DrawCommand:
    """The same command moved by the given vector."""
    if isinstance(command, DrawCharacter):
        return replace(command, dest=command.dest.offset(offset))
    if isinstance(command, (DrawRawTexture, DrawRect, DrawSprite)):
        return replace(command, rect=command.rect.offset(offset))
    if isinstance(command, DrawLine):
        return replace(command, start=command.start + offset, end=command.end + offset)
    if isinstance(command, DrawTriangle):
        return replace(
            command,
            p0=command.p0 + offset,
            p1=command.p1 + offset,
            p2=command.p2 + offset,
        )
    if isinstance(command, Clip):
        rect = None if command.rect is None else command.rect.offset(offset)
        return Clip(rect)
    raise TypeError(f"not a draw command: {command!r}")


def estimate_triangles_budget(command: DrawCommand) -> tuple[int, int]:
    """Upper estimate of (vertices, indices) the command adds to a mesh."""
    if isinstance(command, _BUDGETED):
        return (10, 10)
    return (0, 0)


class Alignment(enum.Enum):
    """Horizontal text alignment."""

    LEFT = "left"
    CENTER = "center"


@dataclass(frozen=True)
class LabelParams:
    """How a label is drawn."""

    color: Color = field(default_factory=lambda: Color(0.0, 0.0, 0.0, 1.0))
    alignment: Alignment = Alignment.LEFT