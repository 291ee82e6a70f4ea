"""Input state seen by the GUI: mouse, keyboard events, key repeat and clipboard."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from quadkit.geometry import Vec2

REPEAT_DELAY = 0.5


class KeyCode(enum.Enum):
    """Non-character keys the GUI reacts to."""

    UP = enum.auto()
    DOWN = enum.auto()
    RIGHT = enum.auto()
    LEFT = enum.auto()
    BACKSPACE = enum.auto()
    DELETE = enum.auto()
    ENTER = enum.auto()
    TAB = enum.auto()
    HOME = enum.auto()
    END = enum.auto()
    CONTROL = enum.auto()
    ESCAPE = enum.auto()
    A = enum.auto()  # select all
    Z = enum.auto()  # undo
    Y = enum.auto()  # redo
    C = enum.auto()  # copy
    V = enum.auto()  # paste
    X = enum.auto()  # cut


@dataclass(frozen=True)
class InputCharacter:
    """One keyboard event: a typed character (a one-letter str) or a KeyCode."""

    key: str | KeyCode
    modifier_shift: bool = False
    modifier_ctrl: bool = False


@dataclass
class Input:
    """Per-frame input collected for the GUI."""

    mouse_position: Vec2 = field(default_factory=Vec2)
    is_mouse_down: bool = False
    click_down: bool = False
    click_up: bool = False
    mouse_wheel: Vec2 = field(default_factory=Vec2)
    input_buffer: list[InputCharacter] = field(default_factory=list)
    modifier_ctrl: bool = False
    escape: bool = False
    enter: bool = False
    cursor_grabbed: bool = False
    window_active: bool = False

    def _mouse_available(self) -> bool:
        return not self.cursor_grabbed and self.window_active

    def is_mouse_pressed(self) -> bool:
        """Mouse held down, unless the cursor is grabbed or the window inactive."""
        return self.is_mouse_down and self._mouse_available()

    def is_click_down(self) -> bool:
        """Mouse pressed this frame, unless grabbed or inactive."""
        return self.click_down and self._mouse_available()

    def is_click_up(self) -> bool:
        """Mouse released this frame, unless grabbed or inactive."""
        return self.click_up and self._mouse_available()

    def reset(self) -> None:
        """Forget everything that only lasts one frame."""
        self.modifier_ctrl = False
        self.escape = False
        self.enter = False
        self.click_down = False
        self.click_up = False
        self.mouse_wheel = Vec2()
        self.input_buffer = []
        self.window_active = False


@dataclass
class KeyRepeat:
    """Emulates key auto-repeat: a held key fires once, then again after a delay."""

    _character_this_frame: KeyCode | None = None
    _active_character: KeyCode | None = None
    _repeating_character: KeyCode | None = None
    _pressed_time: float = 0.0

    def add_repeat_gap(self, key: KeyCode, time: float) -> bool:
        """Register the key as held this frame; True if it should fire now."""
        self._character_this_frame = key
        return (
            self._active_character is None
            or self._active_character != key
            or self._repeating_character == key
        )

    def new_frame(self, time: float) -> None:
        """Close the current frame at the given time."""
        this_frame = self._character_this_frame
        self._character_this_frame = None

        if this_frame == self._active_character and time - self._pressed_time > REPEAT_DELAY:
            self._repeating_character = self._active_character

        if this_frame != self._active_character:
            self._active_character = this_frame
            self._pressed_time = time
            self._repeating_character = None


class Clipboard:
    """An in-memory clipboard holding one string."""

    def __init__(self, data: str | None = None) -> None:
        self._data = data

    def get(self) -> str | None:
        """The stored text, or None when empty."""
        return self._data

    def set(self, data: str) -> None:
        self._data = data