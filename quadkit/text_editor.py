"""Editing state of a text box: cursor, selection, clicks and undo history."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Protocol

DOUBLE_CLICK_TIME = 0.5

_DELIMITERS = frozenset(' ();"')


def is_word_delimiter(character: str) -> bool:
    """True for characters that separate words."""
    return character in _DELIMITERS


def _char_at(text: list[str], index: int, default: str) -> str:
    return text[index] if 0 <= index < len(text) else default


class _Command(Protocol):
    def apply(self, text: list[str]) -> int: ...

    def unapply(self, text: list[str]) -> int: ...


@dataclass(frozen=True)
class _InsertCharacter:
    character: str
    cursor: int

    def apply(self, text: list[str]) -> int:
        if self.cursor <= len(text):
            text.insert(self.cursor, self.character)
        return self.cursor + 1

    def unapply(self, text: list[str]) -> int:
        if self.cursor < len(text):
            del text[self.cursor]
        return self.cursor


@dataclass(frozen=True)
class _InsertString:
    data: tuple[str, ...]
    cursor: int

    def apply(self, text: list[str]) -> int:
        if self.cursor <= len(text):
            text[self.cursor:self.cursor] = self.data
        return self.cursor + len(self.data)

    def unapply(self, text: list[str]) -> int:
        if self.cursor < len(text):
            del text[self.cursor:self.cursor + len(self.data)]
        return self.cursor


@dataclass(frozen=True)
class _DeleteCharacter:
    character: str
    cursor: int

    def apply(self, text: list[str]) -> int:
        if self.cursor < len(text):
            del text[self.cursor]
        return self.cursor

    def unapply(self, text: list[str]) -> int:
        if self.cursor <= len(text):
            text.insert(self.cursor, self.character)
        return self.cursor + 1


@dataclass(frozen=True)
class _DeleteRange:
    start: int
    end: int
    data: tuple[str, ...]

    @classmethod
    def of(cls, text: list[str], selection: tuple[int, int]) -> _DeleteRange:
        lo, hi = sorted(selection)
        if hi > len(text):
            raise ValueError("selection extends past the end of the text")
        return cls(lo, hi, tuple(text[lo:hi]))

    def apply(self, text: list[str]) -> int:
        del text[self.start:self.end]
        return self.start

    def unapply(self, text: list[str]) -> int:
        text[self.start:self.start] = self.data
        return self.start


class ClickState(enum.Enum):
    """What a held mouse button is currently selecting."""

    NONE = "none"
    SELECTING_CHARS = "selecting_chars"
    SELECTING_WORDS = "selecting_words"
    SELECTING_LINES = "selecting_lines"
    SELECTED = "selected"


@dataclass
class EditboxState:
    """Cursor, selection and history of one edit box.

    ``click_span`` holds the anchor of the current mouse selection: the
    starting character for SELECTING_CHARS, or the initially selected
    word or line for SELECTING_WORDS and SELECTING_LINES.
    """

    cursor: int = 0
    click_state: ClickState = ClickState.NONE
    click_span: tuple[int, int] = (0, 0)
    clicks_counter: int = 0
    current_click: int = 0
    last_click_time: float = 0.0
    last_click: int = 0
    selection: tuple[int, int] | None = None
    _undo_stack: list[_Command] = field(default_factory=list, init=False, repr=False)
    _redo_stack: list[_Command] = field(default_factory=list, init=False, repr=False)

    def clamp_selection(self, text: list[str]) -> None:
        """Keep the selection within the text after outside changes."""
        if self.selection is not None:
            start, end = self.selection
            self.selection = (min(start, len(text)), min(end, len(text)))

    def selected_text(self, text: list[str]) -> list[str] | None:
        """Characters inside the selection, or None without one."""
        if self.selection is None:
            return None
        lo, hi = sorted(self.selection)
        if hi > len(text):
            raise ValueError("selection extends past the end of the text")
        return text[lo:hi]

    def in_selected_range(self, cursor: int) -> bool:
        if self.selection is None:
            return False
        lo, hi = sorted(self.selection)
        return lo <= cursor < hi

    def find_line_begin(self, text: list[str]) -> int:
        """Distance from the cursor back to the start of its line."""
        position = self.cursor
        while position > 0 and _char_at(text, position - 1, "x") != "\n":
            position -= 1
        return self.cursor - position

    def find_line_end(self, text: list[str]) -> int:
        """Distance from the cursor forward to the end of its line."""
        position = self.cursor
        while position < len(text) and _char_at(text, position, "x") != "\n":
            position += 1
        return max(position - self.cursor, 0)

    def find_word_begin(self, text: list[str], cursor: int) -> int:
        """Distance from cursor back to the start of its word."""
        position = cursor
        while position > 0:
            current = _char_at(text, position - 1, " ")
            if is_word_delimiter(current) or current == "\n":
                break
            position -= 1
        return cursor - position

    def find_word_end(self, text: list[str], cursor: int) -> int:
        """Distance from cursor forward past the word and following delimiters."""
        position = cursor
        skipping = False
        while position < len(text):
            current = text[position]
            if is_word_delimiter(current) or current == "\n":
                skipping = True
            if skipping and not is_word_delimiter(current):
                break
            position += 1
        return max(position - cursor, 0)

    def _run(self, command: _Command, text: list[str]) -> None:
        self.cursor = command.apply(text)
        self._undo_stack.append(command)

    def insert_character(self, text: list[str], character: str) -> None:
        self._redo_stack.clear()
        self.selection = None
        self._run(_InsertCharacter(character, self.cursor), text)

    def insert_string(self, text: list[str], string: list[str] | str) -> None:
        self._redo_stack.clear()
        self.selection = None
        self._run(_InsertString(tuple(string), self.cursor), text)

    def delete_selected(self, text: list[str]) -> None:
        self._redo_stack.clear()
        if self.selection is not None:
            self._run(_DeleteRange.of(text, self.selection), text)
        self.selection = None

    def delete_next_character(self, text: list[str]) -> None:
        self._redo_stack.clear()
        if 0 <= self.cursor < len(text):
            self._run(_DeleteCharacter(text[self.cursor], self.cursor), text)

    def delete_current_character(self, text: list[str]) -> None:
        if self.cursor > 0:
            self.cursor -= 1
            self.delete_next_character(text)

    def move_cursor_next_word(self, text: list[str], shift: bool) -> None:
        step = self.find_word_end(text, self.cursor + 1) + 1
        self.move_cursor(text, step, shift)

    def move_cursor_prev_word(self, text: list[str], shift: bool) -> None:
        if self.cursor > 1:
            step = self.find_word_begin(text, self.cursor - 1) + 1
            self.move_cursor(text, -step, shift)

    def move_cursor(self, text: list[str], dx: int, shift: bool) -> None:
        """Move by dx characters if the result stays inside the text."""
        start = self.cursor
        end = start
        if 0 <= self.cursor + dx <= len(text):
            end = self.cursor + dx
            self.cursor = end

        if not shift:
            self.selection = None
        elif self.selection is None:
            self.selection = (start, end)
        else:
            self.selection = (self.selection[0], end)

    def move_cursor_within_line(self, text: list[str], dx: int, shift: bool) -> None:
        """Move right by up to dx characters without leaving the line."""
        if dx < 0:
            raise ValueError("only forward movement within a line is supported")
        for _ in range(dx):
            if _char_at(text, self.cursor, "x") == "\n" or self.cursor == len(text):
                break
            self.move_cursor(text, 1, shift)

    def select_all(self, text: list[str]) -> None:
        self.selection = (0, len(text))
        self.click_state = ClickState.NONE

    def deselect(self) -> None:
        self.click_state = ClickState.NONE
        self.selection = None

    def select_word(self, text: list[str]) -> tuple[int, int]:
        begin = self.cursor - self.find_word_begin(text, self.cursor)
        end = self.cursor + self.find_word_end(text, self.cursor)
        self.selection = (begin, end)
        return self.selection

    def select_line(self, text: list[str]) -> tuple[int, int]:
        begin = self.cursor - self.find_line_begin(text)
        end = self.cursor + self.find_line_end(text)
        self.selection = (begin, end)
        return self.selection

    def click_down(self, time: float, text: list[str], cursor: int) -> None:
        """Mouse pressed over character position cursor at the given time."""
        self.current_click = cursor

        if self.last_click == cursor and time - self.last_click_time < DOUBLE_CLICK_TIME:
            self.clicks_counter += 1
            phase = self.clicks_counter % 3
            if phase == 0:
                self.deselect()
            elif phase == 1:
                self.click_span = self.select_word(text)
                self.click_state = ClickState.SELECTING_WORDS
            else:
                self.click_span = self.select_line(text)
                self.click_state = ClickState.SELECTING_LINES
        else:
            self.clicks_counter = 0
            if self.click_state in (ClickState.NONE, ClickState.SELECTED):
                self.click_state = ClickState.SELECTING_CHARS
                self.click_span = (cursor, cursor)
                self.selection = (cursor, cursor)
            else:
                self.click_state = ClickState.NONE
                self.selection = None
                self.cursor = cursor

        self.last_click_time = time

    def click_move(self, text: list[str], cursor: int) -> None:
        """Mouse held and moved over character position cursor."""
        self.cursor = cursor
        if cursor != self.last_click:
            self.clicks_counter = 0

        state = self.click_state
        low, high = self.click_span
        if state is ClickState.SELECTING_CHARS:
            self.selection = (low, cursor)
        elif state is ClickState.SELECTING_WORDS:
            if cursor < low:
                begin = cursor - self.find_word_begin(text, cursor)
                self.selection = (begin, high)
                self.cursor = begin
            elif cursor > high:
                end = cursor + self.find_word_end(text, cursor)
                self.selection = (low, end)
                self.cursor = end
            else:
                self.selection = (low, high)
                self.cursor = high
        elif state is ClickState.SELECTING_LINES:
            if cursor < low:
                begin = cursor - self.find_line_begin(text)
                end = cursor + self.find_line_end(text)
                self.selection = (begin, high)
                self.cursor = end
            elif cursor > high:
                end = cursor + self.find_line_end(text)
                self.selection = (low, end)
                self.cursor = end
            else:
                self.selection = (low, high)
                self.cursor = high

        self.last_click = cursor

    def click_up(self, text: list[str]) -> None:
        """Mouse released: keep a non-empty selection, drop an empty one."""
        self.click_state = ClickState.NONE
        if self.selection is not None:
            start, end = self.selection
            if start != end:
                self.click_state = ClickState.SELECTED
            else:
                self.selection = None

    def undo(self, text: list[str]) -> None:
        if self._undo_stack:
            command = self._undo_stack.pop()
            self.cursor = command.unapply(text)
            self._redo_stack.append(command)

    def redo(self, text: list[str]) -> None:
        if self._redo_stack:
            command = self._redo_stack.pop()
            self.cursor = command.apply(text)
            self._undo_stack.append(command)