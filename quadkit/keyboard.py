"""Apply keyboard events to an edit box's text and editing state."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from quadkit.input import InputCharacter, KeyCode
from quadkit.text_editor import EditboxState


class _ClipboardSource(Protocol):
    def get(self) -> str | None: ...


def _is_printable_ascii(character: str) -> bool:
    code = ord(character)
    return 32 <= code < 127


def _type_character(
    character: str,
    text: list[str],
    state: EditboxState,
    char_filter: Callable[[str], bool] | None,
) -> None:
    if not _is_printable_ascii(character):
        return
    if char_filter is not None and not char_filter(character):
        return
    if state.selection is not None:
        state.delete_selected(text)
    state.insert_character(text, character)


def _paste(
    clipboard: _ClipboardSource,
    text: list[str],
    state: EditboxState,
    char_filter: Callable[[str], bool] | None,
) -> None:
    data = clipboard.get()
    if not data:
        return
    if state.selection is not None:
        state.delete_selected(text)
    if char_filter is None:
        state.insert_string(text, list(data))
    else:
        for character in data:
            if char_filter(character):
                state.insert_character(text, character)


def _move_up(text: list[str], state: EditboxState, shift: bool) -> None:
    to_line_begin = state.find_line_begin(text)
    state.move_cursor(text, -to_line_begin, shift)
    if state.cursor != 0:
        state.move_cursor(text, -1, shift)
        new_to_line_begin = state.find_line_begin(text)
        state.move_cursor(text, min(to_line_begin, new_to_line_begin) - new_to_line_begin, shift)


def _move_down(text: list[str], state: EditboxState, shift: bool) -> None:
    to_line_begin = state.find_line_begin(text)
    to_line_end = state.find_line_end(text)
    state.move_cursor(text, to_line_end, shift)
    if text and state.cursor < len(text) - 1:
        state.move_cursor(text, 1, shift)
        state.move_cursor_within_line(text, to_line_begin, shift)


def apply_keyboard_input(
    events: list[InputCharacter],
    clipboard: _ClipboardSource,
    text: list[str],
    state: EditboxState,
    multiline: bool = True,
    char_filter: Callable[[str], bool] | None = None,
) -> None:
    """Apply every pending event to text and state, emptying the events list.

    Typed characters must be printable ASCII and pass char_filter; with
    Ctrl held they are ignored. Enter inserts a newline only when multiline.
    """
    pending = list(events)
    events.clear()

    for event in pending:
        key = event.key
        ctrl = event.modifier_ctrl
        shift = event.modifier_shift

        if isinstance(key, str):
            if not ctrl:
                _type_character(key, text, state, char_filter)
            continue

        match key:
            case KeyCode.Z if ctrl:
                state.undo(text)
            case KeyCode.Y if ctrl:
                state.redo(text)
            case KeyCode.X if ctrl:
                state.delete_selected(text)
            case KeyCode.V if ctrl:
                _paste(clipboard, text, state, char_filter)
            case KeyCode.A if ctrl:
                state.select_all(text)
            case KeyCode.ENTER:
                if multiline:
                    state.insert_character(text, "\n")
            case KeyCode.BACKSPACE:
                if state.selection is None:
                    state.delete_current_character(text)
                else:
                    state.delete_selected(text)
            case KeyCode.DELETE:
                if state.selection is None:
                    state.delete_next_character(text)
                else:
                    state.delete_selected(text)
            case KeyCode.RIGHT:
                if ctrl:
                    state.move_cursor_next_word(text, shift)
                else:
                    state.move_cursor(text, 1, shift)
            case KeyCode.LEFT:
                if ctrl:
                    state.move_cursor_prev_word(text, shift)
                else:
                    state.move_cursor(text, -1, shift)
            case KeyCode.HOME:
                distance = state.cursor if ctrl else state.find_line_begin(text)
                state.move_cursor(text, -distance, shift)
            case KeyCode.END:
                distance = len(text) - state.cursor if ctrl else state.find_line_end(text)
                state.move_cursor(text, distance, shift)
            case KeyCode.UP:
                _move_up(text, state, shift)
            case KeyCode.DOWN:
                _move_down(text, state, shift)
            case _:
                pass