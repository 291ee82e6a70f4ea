import pytest

from quadkit.text_editor import (
    DOUBLE_CLICK_TIME,
    ClickState,
    EditboxState,
    is_word_delimiter,
)


@pytest.mark.parametrize("ch", [" ", "(", ")", ";", '"'])
def test_delimiters(ch):
    assert is_word_delimiter(ch) is True


@pytest.mark.parametrize("ch", ["a", "\n", "_"])
def test_non_delimiters(ch):
    assert is_word_delimiter(ch) is False


def test_insert_character_undo_redo():
    original = list("bc")
    text = list(original)
    state = EditboxState()
    state.insert_character(text, "a")
    after = list(text)
    assert text == ["a"] + original
    assert state.cursor == 1
    state.undo(text)
    assert text == original
    state.redo(text)
    assert text == after


def test_insert_string_moves_cursor_by_length():
    text = list("xy")
    state = EditboxState(cursor=len(text))
    state.insert_string(text, "hello")
    assert "".join(text) == "xyhello"
    assert state.cursor == len(text)
    state.undo(text)
    assert text == list("xy")


def test_backspace_at_start_is_noop_and_at_end_removes_last():
    original = list("abc")
    text = list(original)
    state = EditboxState()
    state.delete_current_character(text)
    assert text == original
    state.cursor = len(text)
    state.delete_current_character(text)
    assert text == original[:-1]
    state.undo(text)
    assert text == original
    assert state.cursor == len(original)


def test_delete_next_character_at_end_does_nothing():
    text = list("ab")
    state = EditboxState(cursor=len(text))
    state.delete_next_character(text)
    assert text == list("ab")


def test_delete_selected_and_undo():
    original = list("abcdef")
    text = list(original)
    state = EditboxState(selection=(3, 1))
    state.delete_selected(text)
    assert text == original[:1] + original[3:]
    assert state.cursor == 1
    assert state.selection is None
    state.undo(text)
    assert text == original


def test_new_edit_clears_redo():
    text = list("ab")
    state = EditboxState(cursor=2)
    state.insert_character(text, "c")
    state.undo(text)
    state.insert_character(text, "d")
    snapshot = list(text)
    state.redo(text)
    assert text == snapshot


def test_line_boundaries():
    text = list("ab\ncdef\ngh")
    state = EditboxState(cursor=5)
    first_nl = text.index("\n")
    second_nl = first_nl + 1 + text[first_nl + 1:].index("\n")
    assert state.cursor - state.find_line_begin(text) == first_nl + 1
    assert state.cursor + state.find_line_end(text) == second_nl


def test_select_word_and_line():
    text = list("foo bar\nbaz")
    state = EditboxState(cursor=5)
    state.select_word(text)
    assert state.selected_text(text) == list("bar")
    state.select_line(text)
    assert state.selected_text(text) == list("foo bar")


def test_word_navigation():
    text = list("foo bar")
    state = EditboxState()
    state.move_cursor_next_word(text, False)
    assert state.cursor == text.index("b")
    state.cursor = len(text)
    state.move_cursor_prev_word(text, False)
    assert state.cursor == text.index("b")


def test_move_cursor_with_shift_builds_selection():
    text = list("hello")
    state = EditboxState(cursor=1)
    state.move_cursor(text, 2, True)
    assert state.selection == (1, 3)
    state.move_cursor(text, 1, True)
    assert state.selection == (1, 4)
    state.move_cursor(text, -1, False)
    assert state.selection is None


def test_move_cursor_out_of_range_stays():
    text = list("hi")
    state = EditboxState(cursor=1)
    state.move_cursor(text, 10, False)
    assert state.cursor == 1
    state.move_cursor(text, -10, False)
    assert state.cursor == 1


def test_move_within_line_stops_at_newline_and_rejects_negative():
    text = list("ab\ncd")
    state = EditboxState()
    state.move_cursor_within_line(text, 10, False)
    assert state.cursor == text.index("\n")
    with pytest.raises(ValueError):
        state.move_cursor_within_line(text, -1, False)


def test_in_selected_range_either_order():
    state = EditboxState(selection=(4, 2))
    assert state.in_selected_range(2)
    assert state.in_selected_range(3)
    assert not state.in_selected_range(4)
    state.selection = (2, 4)
    assert state.in_selected_range(2) and not state.in_selected_range(4)


def test_clamp_selection():
    text = list("abc")
    state = EditboxState(selection=(1, 99))
    state.clamp_selection(text)
    assert state.selection == (1, len(text))


def test_select_all_and_deselect():
    text = list("abc")
    state = EditboxState()
    state.select_all(text)
    assert state.selected_text(text) == text
    state.deselect()
    assert state.selected_text(text) is None
    assert state.click_state is ClickState.NONE


def test_drag_selection_then_click_up():
    text = list("hello world")
    state = EditboxState()
    state.click_down(0.0, text, 2)
    assert state.click_state is ClickState.SELECTING_CHARS
    state.click_move(text, 7)
    assert state.selection == (2, 7)
    state.click_up(text)
    assert state.click_state is ClickState.SELECTED
    assert state.selected_text(text) == text[2:7]


def test_click_without_move_clears_selection():
    text = list("hello")
    state = EditboxState()
    state.click_down(0.0, text, 3)
    state.click_up(text)
    assert state.selection is None
    assert state.click_state is ClickState.NONE


def test_multi_click_cycles_word_line_none():
    text = list("foo bar\nbaz")
    state = EditboxState()
    step = DOUBLE_CLICK_TIME / 4
    state.click_down(0.0, text, 5)
    state.click_move(text, 5)
    state.click_up(text)

    state.click_down(step, text, 5)
    assert state.click_state is ClickState.SELECTING_WORDS
    assert state.selected_text(text) == list("bar")

    state.click_down(2 * step, text, 5)
    assert state.click_state is ClickState.SELECTING_LINES
    assert state.selected_text(text) == list("foo bar")

    state.click_down(3 * step, text, 5)
    assert state.click_state is ClickState.NONE
    assert state.selection is None


def test_slow_second_click_is_not_double_click():
    text = list("foo bar")
    state = EditboxState()
    state.click_down(0.0, text, 5)
    state.click_move(text, 5)
    state.click_up(text)
    state.click_down(DOUBLE_CLICK_TIME * 2, text, 5)
    assert state.clicks_counter == 0
    assert state.click_state is ClickState.SELECTING_CHARS


def test_selected_text_past_end_raises():
    state = EditboxState(selection=(0, 10))
    with pytest.raises(ValueError):
        state.selected_text(list("ab"))