"""Turn draw commands into triangle meshes grouped by texture and clipping zone."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

from quadkit.draw_commands import (
    Clip,
    Color,
    DrawCharacter,
    DrawCommand,
    DrawLine,
    DrawRawTexture,
    DrawRect,
    DrawSprite,
    DrawTriangle,
    estimate_triangles_budget,
)
from quadkit.geometry import Rect, RectOffset, Vec2

MAX_VERTICES = 8000
MAX_INDICES = 4000

_FLOAT_EPSILON = 1.1920929e-07
_RECT_INDICES = (0, 1, 2, 0, 2, 3)
_LINE_INDICES = (0, 1, 2, 2, 1, 3)
_TRIANGLE_INDICES = (0, 1, 2)


def _sprite_indices() -> tuple[int, ...]:
    indices: list[int] = []
    for row in range(3):
        for column in range(3):
            indices += [
                row * 4 + column,
                row * 4 + column + 1,
                (row + 1) * 4 + column,
                row * 4 + column + 1,
                (row + 1) * 4 + column,
                (row + 1) * 4 + column + 1,
            ]
    return tuple(indices)


_SPRITE_INDICES = _sprite_indices()


@dataclass(frozen=True)
class Vertex:
    """A mesh vertex: position, texture coordinate and colour."""

    position: tuple[float, float, float]
    uv: tuple[float, float]
    color: Color


def _vertex(x: float, y: float, u: float, v: float, color: Color) -> Vertex:
    return Vertex((x, y, 0.0), (u, v), color)


@dataclass
class DrawList:
    """A batch of triangles sharing one texture and one clipping zone."""

    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    clipping_zone: Rect | None = None
    texture: Any = None

    def _append(self, vertices: list[Vertex], indices: tuple[int, ...]) -> None:
        base = len(self.vertices)
        self.vertices.extend(vertices)
        self.indices.extend(index + base for index in indices)

    def clear(self) -> None:
        """Drop all geometry and the clipping zone; the texture is kept."""
        self.vertices.clear()
        self.indices.clear()
        self.clipping_zone = None

    def draw_rectangle_lines(self, rect: Rect, source: Rect, color: Color) -> None:
        """A one-pixel outline along the inside of the rectangle."""
        x, y, w, h = rect.x, rect.y, rect.w, rect.h
        self.draw_rectangle(Rect(x, y, w, 1.0), source, color)
        self.draw_rectangle(Rect(x + w - 1.0, y + 1.0, 1.0, h - 2.0), source, color)
        self.draw_rectangle(Rect(x, y + h - 1.0, w, 1.0), source, color)
        self.draw_rectangle(Rect(x, y + 1.0, 1.0, h - 2.0), source, color)

    def draw_sprite(
        self,
        rect: Rect,
        src: Rect,
        offsets: RectOffset,
        uv_offsets: RectOffset,
        color: Color,
    ) -> None:
        """A nine-patch: a 4x4 vertex grid whose border cells keep their size."""
        x, y, w, h = rect.x, rect.y, rect.w, rect.h
        xs = (x, x + offsets.left, x + w - offsets.right, x + w)
        # the lower inner edge mirrors the top margin
        ys = (y, y + offsets.top, y + h - offsets.top, y + h)
        us = (
            src.x,
            src.x + uv_offsets.left,
            src.x + src.w - uv_offsets.right,
            src.x + src.w,
        )
        vs = (
            src.y,
            src.y + uv_offsets.top,
            src.y + src.h - uv_offsets.bottom,
            src.y + src.h,
        )
        vertices = [
            _vertex(px, py, u, v, color)
            for px, u in zip(xs, us)
            for py, v in zip(ys, vs)
        ]
        self._append(vertices, _SPRITE_INDICES)

    def draw_rectangle(self, rect: Rect, src: Rect, color: Color) -> None:
        """Two triangles covering the rectangle, mapped onto src."""
        x, y, w, h = rect.x, rect.y, rect.w, rect.h
        vertices = [
            _vertex(x, y, src.x, src.y, color),
            _vertex(x + w, y, src.x + src.w, src.y, color),
            _vertex(x + w, y + h, src.x + src.w, src.y + src.h, color),
            _vertex(x, y + h, src.x, src.y + src.h, color),
        ]
        self._append(vertices, _RECT_INDICES)

    def draw_triangle(
        self, p0: Vec2, p1: Vec2, p2: Vec2, source: Rect, color: Color
    ) -> None:
        """One triangle sampling a single texel of source."""
        vertices = [_vertex(p.x, p.y, source.x, source.y, color) for p in (p0, p1, p2)]
        self._append(vertices, _TRIANGLE_INDICES)

    def draw_line(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        thickness: float,
        source: Rect,
        color: Color,
    ) -> None:
        """A quad of the given thickness along the segment; degenerate lines are skipped."""
        nx = -(y2 - y1)
        ny = x2 - x1
        tlen = math.sqrt(nx * nx + ny * ny) / (thickness * 0.5)
        if tlen < _FLOAT_EPSILON:
            return
        tx = nx / tlen
        ty = ny / tlen
        vertices = [
            _vertex(x1 + tx, y1 + ty, source.x, source.y, color),
            _vertex(x1 - tx, y1 - ty, source.x, source.y, color),
            _vertex(x2 + tx, y2 + ty, source.x, source.y, color),
            _vertex(x2 - tx, y2 - ty, source.x, source.y, color),
        ]
        self._append(vertices, _LINE_INDICES)


def _active_draw_list(draw_lists: list[DrawList], command: DrawCommand) -> DrawList:
    if not draw_lists:
        draw_lists.append(DrawList())

    last = draw_lists[-1]
    if isinstance(command, Clip):
        if last.clipping_zone != command.rect:
            draw_lists.append(DrawList())
    elif isinstance(command, DrawRawTexture):
        if last.texture is None or last.texture != command.texture:
            draw_lists.append(
                DrawList(texture=command.texture, clipping_zone=last.clipping_zone)
            )
    else:
        vertices, indices = estimate_triangles_budget(command)
        if (
            last.texture is not None
            or len(last.vertices) + vertices >= MAX_VERTICES
            or len(last.indices) + indices >= MAX_INDICES
        ):
            draw_lists.append(DrawList(clipping_zone=last.clipping_zone))
    return draw_lists[-1]


def render_command(draw_lists: list[DrawList], command: DrawCommand) -> None:
    """Rasterize one command into the last suitable draw list, starting a new one when needed."""
    if not isinstance(
        command,
        (Clip, DrawRect, DrawSprite, DrawLine, DrawCharacter, DrawRawTexture, DrawTriangle),
    ):
        raise TypeError(f"not a draw command: {command!r}")

    target = _active_draw_list(draw_lists, command)

    match command:
        case Clip(rect=rect):
            target.clipping_zone = rect
        case DrawRect(rect=rect, source=source, fill=fill, stroke=stroke):
            if fill is not None:
                target.draw_rectangle(rect, source, fill)
            if stroke is not None:
                target.draw_rectangle_lines(rect, source, stroke)
        case DrawSprite(
            rect=rect, source=source, color=color, offsets=offsets, offsets_uv=offsets_uv
        ):
            target.draw_sprite(
                rect,
                source,
                offsets or RectOffset(),
                offsets_uv or RectOffset(),
                color,
            )
        case DrawLine(start=start, end=end, source=source, color=color):
            target.draw_line(start.x, start.y, end.x, end.y, 1.0, source, color)
        case DrawCharacter(dest=dest, source=source, color=color):
            target.draw_rectangle(dest, source, color)
        case DrawRawTexture(rect=rect):
            target.draw_rectangle(
                rect, Rect(0.0, 0.0, 1.0, 1.0), Color(1.0, 1.0, 1.0, 1.0)
            )
        case DrawTriangle(p0=p0, p1=p1, p2=p2, source=source, color=color):
            target.draw_triangle(p0, p1, p2, source, color)