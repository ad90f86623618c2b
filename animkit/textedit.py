"""Cursor, selection and key handling for an editable text field."""

from __future__ import annotations

import enum
from typing import Union

from animkit.textlayout import (
    NEWLINE,
    NEWLINE_WIDTH,
    EditableText,
    find_charpos,
    locate_coord,
)
from animkit.textundo import UndoState


class Key(enum.IntEnum):
    """Editing keys; combine with ``Key.SHIFT`` to extend the selection."""

    LEFT = 1
    RIGHT = 2
    UP = 3
    DOWN = 4
    PGUP = 5
    PGDOWN = 6
    LINESTART = 7
    LINEEND = 8
    TEXTSTART = 9
    TEXTEND = 10
    DELETE = 11
    BACKSPACE = 12
    UNDO = 13
    REDO = 14
    INSERT = 15
    WORDLEFT = 16
    WORDRIGHT = 17
    SHIFT = 0x100


def _is_word_boundary(text: EditableText, index: int) -> bool:
    if index <= 0:
        return True
    return text.get_char(index - 1).isspace() and not text.get_char(index).isspace()


def _word_left(text: EditableText, cursor: int) -> int:
    cursor -= 1
    while cursor >= 0 and not _is_word_boundary(text, cursor):
        cursor -= 1
    return max(cursor, 0)


def _word_right(text: EditableText, cursor: int) -> int:
    length = len(text)
    cursor += 1
    while cursor < length and not _is_word_boundary(text, cursor):
        cursor += 1
    return min(cursor, length)


class TextEditState:
    """Cursor position, selection and undo history of one text field."""

    def __init__(self, single_line: bool = False) -> None:
        self.undo_state = UndoState()
        self.reset(single_line)

    def reset(self, single_line: bool = False) -> None:
        """Return to the initial state: cursor at 0, no selection, no history."""
        self.undo_state.clear()
        self.select_start = 0
        self.select_end = 0
        self.cursor = 0
        self.has_preferred_x = False
        self.preferred_x = 0.0
        self.cursor_at_end_of_line = False
        self.initialized = True
        self.single_line = bool(single_line)
        self.insert_mode = False
        self.row_count_per_page = 0

    def has_selection(self) -> bool:
        return self.select_start != self.select_end

    def clamp(self, text: EditableText) -> None:
        """Keep cursor and selection inside ``text`` after it changed."""
        n = len(text)
        if self.has_selection():
            self.select_start = min(self.select_start, n)
            self.select_end = min(self.select_end, n)
            if self.select_start == self.select_end:
                self.cursor = self.select_start
        self.cursor = min(self.cursor, n)

    # Mouse input

    def _row_y(self, text: EditableText, y: float) -> float:
        if self.single_line:
            return text.layout_row(0).ymin
        return y

    def click(self, text: EditableText, x: float, y: float) -> None:
        """Move the cursor to the clicked point and clear the selection."""
        y = self._row_y(text, y)
        self.cursor = locate_coord(text, x, y)
        self.select_start = self.cursor
        self.select_end = self.cursor
        self.has_preferred_x = False

    def drag(self, text: EditableText, x: float, y: float) -> None:
        """Move the cursor and the selection end to the dragged point."""
        y = self._row_y(text, y)
        if self.select_start == self.select_end:
            self.select_start = self.cursor
        self.cursor = self.select_end = locate_coord(text, x, y)

    # Editing helpers

    def _delete(self, text: EditableText, where: int, length: int) -> None:
        self.undo_state.make_delete(text, where, length)
        text.delete_chars(where, length)
        self.has_preferred_x = False

    def _delete_selection(self, text: EditableText) -> None:
        self.clamp(text)
        if not self.has_selection():
            return
        if self.select_start < self.select_end:
            self._delete(text, self.select_start, self.select_end - self.select_start)
            self.select_end = self.cursor = self.select_start
        else:
            self._delete(text, self.select_end, self.select_start - self.select_end)
            self.select_start = self.cursor = self.select_end
        self.has_preferred_x = False

    def _sort_selection(self) -> None:
        if self.select_end < self.select_start:
            self.select_start, self.select_end = self.select_end, self.select_start

    def _move_to_first(self) -> None:
        if self.has_selection():
            self._sort_selection()
            self.cursor = self.select_start
            self.select_end = self.select_start
            self.has_preferred_x = False

    def _move_to_last(self, text: EditableText) -> None:
        if self.has_selection():
            self._sort_selection()
            self.clamp(text)
            self.cursor = self.select_end
            self.select_start = self.select_end
            self.has_preferred_x = False

    def _prep_selection_at_cursor(self) -> None:
        if not self.has_selection():
            self.select_start = self.select_end = self.cursor
        else:
            self.cursor = self.select_end

    def cut(self, text: EditableText) -> bool:
        """Delete the selection; return True if there was one."""
        if self.has_selection():
            self._delete_selection(text)
            self.has_preferred_x = False
            return True
        return False

    def paste(self, text: EditableText, chars: str) -> bool:
        """Insert ``chars`` at the cursor, replacing any selection."""
        self.clamp(text)
        self._delete_selection(text)
        if text.insert_chars(self.cursor, chars):
            self.undo_state.make_insert(self.cursor, len(chars))
            self.cursor += len(chars)
            self.has_preferred_x = False
            return True
        return False

    def _type(self, text: EditableText, ch: str) -> None:
        if ch == NEWLINE and self.single_line:
            return
        if self.insert_mode and not self.has_selection() and self.cursor < len(text):
            self.undo_state.make_replace(text, self.cursor, 1, 1)
            text.delete_chars(self.cursor, 1)
            if text.insert_chars(self.cursor, ch):
                self.cursor += 1
                self.has_preferred_x = False
        else:
            self._delete_selection(text)
            if text.insert_chars(self.cursor, ch):
                self.undo_state.make_insert(self.cursor, 1)
                self.cursor += 1
                self.has_preferred_x = False

    # Keyboard input

    def key(self, text: EditableText, key: Union[str, int]) -> None:
        """Apply a typed character (a one-character string) or an editing key."""
        if isinstance(key, str):
            for ch in key:
                self._type(text, ch)
            return

        shift = bool(key & Key.SHIFT)
        base = key & ~Key.SHIFT

        if base in (Key.UP, Key.DOWN) and self.single_line:
            base = Key.LEFT if base == Key.UP else Key.RIGHT

        if base == Key.INSERT and not shift:
            self.insert_mode = not self.insert_mode
        elif base == Key.UNDO and not shift:
            cursor = self.undo_state.undo(text)
            if cursor is not None:
                self.cursor = cursor
            self.has_preferred_x = False
        elif base == Key.REDO and not shift:
            cursor = self.undo_state.redo(text)
            if cursor is not None:
                self.cursor = cursor
            self.has_preferred_x = False
        elif base == Key.LEFT:
            self._key_left(text, shift)
        elif base == Key.RIGHT:
            self._key_right(text, shift)
        elif base == Key.WORDLEFT:
            self._key_word(text, shift, _word_left, left=True)
        elif base == Key.WORDRIGHT:
            self._key_word(text, shift, _word_right, left=False)
        elif base in (Key.DOWN, Key.PGDOWN):
            self._key_down(text, shift, base == Key.PGDOWN)
        elif base in (Key.UP, Key.PGUP):
            self._key_up(text, shift, base == Key.PGUP)
        elif base == Key.DELETE:
            if self.has_selection():
                self._delete_selection(text)
            elif self.cursor < len(text):
                self._delete(text, self.cursor, 1)
            self.has_preferred_x = False
        elif base == Key.BACKSPACE:
            if self.has_selection():
                self._delete_selection(text)
            else:
                self.clamp(text)
                if self.cursor > 0:
                    self._delete(text, self.cursor - 1, 1)
                    self.cursor -= 1
            self.has_preferred_x = False
        elif base == Key.TEXTSTART:
            if shift:
                self._prep_selection_at_cursor()
                self.cursor = self.select_end = 0
            else:
                self.cursor = self.select_start = self.select_end = 0
            self.has_preferred_x = False
        elif base == Key.TEXTEND:
            if shift:
                self._prep_selection_at_cursor()
                self.cursor = self.select_end = len(text)
            else:
                self.cursor = len(text)
                self.select_start = self.select_end = 0
            self.has_preferred_x = False
        elif base == Key.LINESTART:
            self.clamp(text)
            if shift:
                self._prep_selection_at_cursor()
            else:
                self._move_to_first()
            if self.single_line:
                self.cursor = 0
            else:
                while self.cursor > 0 and text.get_char(self.cursor - 1) != NEWLINE:
                    self.cursor -= 1
            if shift:
                self.select_end = self.cursor
            self.has_preferred_x = False
        elif base == Key.LINEEND:
            n = len(text)
            self.clamp(text)
            if shift:
                self._prep_selection_at_cursor()
            else:
                self._move_to_first()
            if self.single_line:
                self.cursor = n
            else:
                while self.cursor < n and text.get_char(self.cursor) != NEWLINE:
                    self.cursor += 1
            if shift:
                self.select_end = self.cursor
            self.has_preferred_x = False

    def _key_left(self, text: EditableText, shift: bool) -> None:
        if shift:
            self.clamp(text)
            self._prep_selection_at_cursor()
            if self.select_end > 0:
                self.select_end -= 1
            self.cursor = self.select_end
        elif self.has_selection():
            self._move_to_first()
        elif self.cursor > 0:
            self.cursor -= 1
        self.has_preferred_x = False

    def _key_right(self, text: EditableText, shift: bool) -> None:
        if shift:
            self._prep_selection_at_cursor()
            self.select_end += 1
            self.clamp(text)
            self.cursor = self.select_end
        else:
            if self.has_selection():
                self._move_to_last(text)
            else:
                self.cursor += 1
            self.clamp(text)
        self.has_preferred_x = False

    def _key_word(self, text: EditableText, shift: bool, move, left: bool) -> None:
        if shift:
            if not self.has_selection():
                self._prep_selection_at_cursor()
            self.cursor = move(text, self.cursor)
            self.select_end = self.cursor
            self.clamp(text)
        elif self.has_selection():
            if left:
                self._move_to_first()
            else:
                self._move_to_last(text)
        else:
            self.cursor = move(text, self.cursor)
            self.clamp(text)

    def _seek_in_row(self, text: EditableText, row_start: int, goal_x: float) -> None:
        self.cursor = row_start
        row = text.layout_row(row_start)
        x = row.x0
        for i in range(row.num_chars):
            dx = text.char_width(row_start, i)
            if dx == NEWLINE_WIDTH:
                break
            x += dx
            if x > goal_x:
                break
            self.cursor += 1
        self.clamp(text)

    def _key_down(self, text: EditableText, shift: bool, is_page: bool) -> None:
        row_count = self.row_count_per_page if is_page else 1
        if shift:
            self._prep_selection_at_cursor()
        elif self.has_selection():
            self._move_to_last(text)

        self.clamp(text)
        find = find_charpos(text, self.cursor, self.single_line)

        for _ in range(row_count):
            goal_x = self.preferred_x if self.has_preferred_x else find.x
            start = find.first_char + find.length
            if find.length == 0:
                break
            if text.get_char(find.first_char + find.length - 1) != NEWLINE:
                break
            self._seek_in_row(text, start, goal_x)
            self.has_preferred_x = True
            self.preferred_x = goal_x
            if shift:
                self.select_end = self.cursor
            find.first_char = start
            find.length = text.layout_row(start).num_chars

    def _key_up(self, text: EditableText, shift: bool, is_page: bool) -> None:
        row_count = self.row_count_per_page if is_page else 1
        if shift:
            self._prep_selection_at_cursor()
        elif self.has_selection():
            self._move_to_first()

        self.clamp(text)
        find = find_charpos(text, self.cursor, self.single_line)

        for _ in range(row_count):
            goal_x = self.preferred_x if self.has_preferred_x else find.x
            if find.prev_first == find.first_char:
                break
            self._seek_in_row(text, find.prev_first, goal_x)
            self.has_preferred_x = True
            self.preferred_x = goal_x
            if shift:
                self.select_end = self.cursor
            prev_scan = find.prev_first - 1 if find.prev_first > 0 else 0
            while prev_scan > 0 and text.get_char(prev_scan - 1) != NEWLINE:
                prev_scan -= 1
            find.first_char = find.prev_first
            find.prev_first = prev_scan