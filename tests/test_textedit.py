from animkit.textedit import Key, TextEditState
from animkit.textlayout import MonospaceText, locate_coord


def _state_at_end(text):
    state = TextEditState()
    state.key(text, Key.TEXTEND)
    return state


def test_typing_inserts_characters():
    text = MonospaceText()
    state = TextEditState()
    for ch in "hello":
        state.key(text, ch)
    assert str(text) == "hello"
    assert state.cursor == len("hello")


def test_undo_and_redo_typing():
    text = MonospaceText()
    state = TextEditState()
    state.key(text, "h")
    state.key(text, "i")
    state.key(text, Key.UNDO)
    state.key(text, Key.UNDO)
    assert str(text) == ""
    assert state.cursor == 0
    state.key(text, Key.REDO)
    state.key(text, Key.REDO)
    assert str(text) == "hi"
    assert state.cursor == len("hi")


def test_undo_with_empty_history_keeps_cursor():
    text = MonospaceText("abc")
    state = _state_at_end(text)
    state.key(text, Key.UNDO)
    assert state.cursor == len("abc")
    assert str(text) == "abc"


def test_backspace_deletes_before_cursor():
    text = MonospaceText("abc")
    state = _state_at_end(text)
    state.key(text, Key.BACKSPACE)
    assert str(text) == "ab"
    assert state.cursor == len("ab")


def test_delete_removes_char_under_cursor():
    text = MonospaceText("abc")
    state = TextEditState()
    state.key(text, Key.DELETE)
    assert str(text) == "bc"
    assert state.cursor == 0


def test_shift_left_selects_and_cut_removes():
    text = MonospaceText("hello")
    state = _state_at_end(text)
    state.key(text, Key.LEFT | Key.SHIFT)
    state.key(text, Key.LEFT | Key.SHIFT)
    assert state.has_selection()
    assert state.cut(text) is True
    assert str(text) == "hel"
    assert state.cursor == len("hel")
    assert state.cut(text) is False


def test_paste_replaces_selection_and_undoes():
    text = MonospaceText("hello world")
    state = TextEditState()
    state.key(text, Key.TEXTEND | Key.SHIFT)
    assert state.paste(text, "bye") is True
    assert str(text) == "bye"
    assert state.cursor == len("bye")
    state.key(text, Key.UNDO)
    state.key(text, Key.UNDO)
    assert str(text) == "hello world"


def test_select_all_then_delete():
    text = MonospaceText("abc")
    state = TextEditState()
    state.key(text, Key.TEXTEND | Key.SHIFT)
    state.key(text, Key.DELETE)
    assert str(text) == ""
    assert not state.has_selection()


def test_single_line_rejects_newline():
    text = MonospaceText("ab")
    state = TextEditState(single_line=True)
    state.key(text, "\n")
    assert str(text) == "ab"


def test_insert_mode_overwrites_and_undoes():
    text = MonospaceText("abc")
    state = TextEditState()
    state.key(text, Key.INSERT)
    assert state.insert_mode is True
    state.key(text, "x")
    assert str(text) == "xbc"
    state.key(text, Key.UNDO)
    assert str(text) == "abc"


def test_line_end_and_vertical_moves():
    source = "ab\ncd"
    text = MonospaceText(source)
    state = TextEditState()
    state.key(text, Key.LINEEND)
    assert state.cursor == source.index("\n")
    state.key(text, Key.DOWN)
    assert state.cursor == len(source)
    state.key(text, Key.UP)
    assert state.cursor == source.index("\n")
    state.key(text, Key.LINESTART)
    assert state.cursor == 0


def test_right_stops_at_end():
    text = MonospaceText("ab")
    state = _state_at_end(text)
    state.key(text, Key.RIGHT)
    assert state.cursor == len("ab")


def test_single_line_down_acts_as_right():
    text_a = MonospaceText("ab")
    text_b = MonospaceText("ab")
    moved_down = TextEditState(single_line=True)
    moved_right = TextEditState(single_line=True)
    moved_down.key(text_a, Key.DOWN)
    moved_right.key(text_b, Key.RIGHT)
    assert moved_down.cursor == moved_right.cursor
    assert moved_down.cursor > 0


def test_word_moves():
    source = "foo bar"
    text = MonospaceText(source)
    state = TextEditState()
    state.key(text, Key.WORDRIGHT)
    assert state.cursor == source.index("bar")
    state.key(text, Key.WORDLEFT)
    assert state.cursor == 0


def test_click_and_drag_select():
    text = MonospaceText("hello")
    state = TextEditState()
    state.click(text, 1.2, 0.5)
    assert state.cursor == locate_coord(text, 1.2, 0.5)
    assert not state.has_selection()
    state.drag(text, 4.1, 0.5)
    assert state.select_start == locate_coord(text, 1.2, 0.5)
    assert state.select_end == locate_coord(text, 4.1, 0.5)
    assert state.cursor == state.select_end


def test_clamp_limits_cursor():
    text = MonospaceText("ab")
    state = TextEditState()
    state.cursor = 10
    state.clamp(text)
    assert state.cursor == len("ab")


def test_reset_clears_state():
    text = MonospaceText("abc")
    state = _state_at_end(text)
    state.key(text, "d")
    state.reset(single_line=True)
    assert state.cursor == 0
    assert state.single_line is True
    assert state.undo_state.undo_point == 0
    state.key(text, Key.UNDO)
    assert str(text) == "abcd"