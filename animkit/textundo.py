"""Bounded undo/redo history for the text editor.

Undo records and redo records share one fixed-size table: undo records grow
upwards from the start, redo records grow downwards from the end.  Their saved
characters share one fixed-size character buffer in the same way.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from animkit.textlayout import EditableText

DEFAULT_STATE_COUNT = 99
"""Default number of undo/redo records kept."""

DEFAULT_CHAR_COUNT = 999
"""Default number of characters the history can store."""


@dataclass
class UndoRecord:
    """One edit: at ``where``, re-insert ``insert_length`` saved characters
    after deleting ``delete_length`` characters."""

    where: int = 0
    insert_length: int = 0
    delete_length: int = 0
    char_storage: int = -1


class UndoState:
    """Undo and redo history with a fixed record and character budget."""

    def __init__(
        self,
        state_count: int = DEFAULT_STATE_COUNT,
        char_count: int = DEFAULT_CHAR_COUNT,
    ) -> None:
        if state_count < 1 or char_count < 1:
            raise ValueError("undo history needs room for records and characters")
        self.state_count = state_count
        self.char_count = char_count
        self.records: list[UndoRecord] = [UndoRecord() for _ in range(state_count)]
        self.chars: list[str] = [""] * char_count
        self.undo_point = 0
        self.redo_point = state_count
        self.undo_char_point = 0
        self.redo_char_point = char_count

    def clear(self) -> None:
        """Forget all undo and redo history."""
        self.undo_point = 0
        self.undo_char_point = 0
        self.redo_point = self.state_count
        self.redo_char_point = self.char_count

    def flush_redo(self) -> None:
        """Forget all redo history."""
        self.redo_point = self.state_count
        self.redo_char_point = self.char_count

    def _move_records(self, dst: int, src: int, count: int) -> None:
        if count <= 0:
            return
        moved = [replace(record) for record in self.records[src:src + count]]
        self.records[dst:dst + count] = moved

    def _move_chars(self, dst: int, src: int, count: int) -> None:
        if count <= 0:
            return
        self.chars[dst:dst + count] = self.chars[src:src + count]

    def discard_undo(self) -> None:
        """Drop the oldest undo record and the characters it holds."""
        if self.undo_point <= 0:
            return
        oldest = self.records[0]
        if oldest.char_storage >= 0:
            n = oldest.insert_length
            self.undo_char_point -= n
            self._move_chars(0, n, self.undo_char_point)
            for record in self.records[:self.undo_point]:
                if record.char_storage >= 0:
                    record.char_storage -= n
        self.undo_point -= 1
        self._move_records(0, 1, self.undo_point)

    def discard_redo(self) -> None:
        """Drop the oldest redo record and the characters it holds."""
        k = self.state_count - 1
        if self.redo_point > k:
            return
        oldest = self.records[k]
        if oldest.char_storage >= 0:
            n = oldest.insert_length
            self.redo_char_point += n
            self._move_chars(
                self.redo_char_point,
                self.redo_char_point - n,
                self.char_count - self.redo_char_point,
            )
            for record in self.records[self.redo_point:k]:
                if record.char_storage >= 0:
                    record.char_storage += n
        self._move_records(
            self.redo_point + 1,
            self.redo_point,
            self.state_count - self.redo_point - 1,
        )
        self.redo_point += 1

    def _create_record(self, numchars: int) -> Optional[UndoRecord]:
        self.flush_redo()
        if self.undo_point == self.state_count:
            self.discard_undo()
        if numchars > self.char_count:
            self.undo_point = 0
            self.undo_char_point = 0
            return None
        while self.undo_char_point + numchars > self.char_count:
            self.discard_undo()
        record = self.records[self.undo_point]
        self.undo_point += 1
        return record

    def create_undo(self, pos: int, insert_len: int, delete_len: int) -> Optional[int]:
        """Add an undo record; return the offset where its characters go, if any."""
        record = self._create_record(insert_len)
        if record is None:
            return None
        record.where = pos
        record.insert_length = insert_len
        record.delete_length = delete_len
        if insert_len == 0:
            record.char_storage = -1
            return None
        record.char_storage = self.undo_char_point
        self.undo_char_point += insert_len
        return record.char_storage

    def make_insert(self, where: int, length: int) -> None:
        """Record that ``length`` characters were inserted at ``where``."""
        self.create_undo(where, 0, length)

    def _save(self, text: EditableText, offset: Optional[int], where: int, length: int) -> None:
        if offset is None:
            return
        for i in range(length):
            self.chars[offset + i] = text.get_char(where + i)

    def make_delete(self, text: EditableText, where: int, length: int) -> None:
        """Record a deletion; call before the characters are removed from ``text``."""
        self._save(text, self.create_undo(where, length, 0), where, length)

    def make_replace(
        self, text: EditableText, where: int, old_length: int, new_length: int
    ) -> None:
        """Record a replacement; call before the old characters are removed."""
        self._save(text, self.create_undo(where, old_length, new_length), where, old_length)

    def undo(self, text: EditableText) -> Optional[int]:
        """Revert the latest edit in ``text``; return the new cursor, or None."""
        if self.undo_point == 0:
            return None
        u = replace(self.records[self.undo_point - 1])
        r = self.records[self.redo_point - 1]
        r.char_storage = -1
        r.insert_length = u.delete_length
        r.delete_length = u.insert_length
        r.where = u.where

        if u.delete_length:
            if self.undo_char_point + u.delete_length >= self.char_count:
                r.insert_length = 0
            else:
                while self.undo_char_point + u.delete_length > self.redo_char_point:
                    if self.redo_point == self.state_count:
                        return None
                    self.discard_redo()
                r = self.records[self.redo_point - 1]
                r.char_storage = self.redo_char_point - u.delete_length
                self.redo_char_point -= u.delete_length
                for i in range(u.delete_length):
                    self.chars[r.char_storage + i] = text.get_char(u.where + i)
            text.delete_chars(u.where, u.delete_length)

        if u.insert_length:
            saved = self.chars[u.char_storage:u.char_storage + u.insert_length]
            text.insert_chars(u.where, saved)
            self.undo_char_point -= u.insert_length

        self.undo_point -= 1
        self.redo_point -= 1
        return u.where + u.insert_length

    def redo(self, text: EditableText) -> Optional[int]:
        """Reapply the latest undone edit in ``text``; return the new cursor, or None."""
        if self.redo_point == self.state_count:
            return None
        u = self.records[self.undo_point]
        r = replace(self.records[self.redo_point])
        u.delete_length = r.insert_length
        u.insert_length = r.delete_length
        u.where = r.where
        u.char_storage = -1

        if r.delete_length:
            if self.undo_char_point + u.insert_length > self.redo_char_point:
                u.insert_length = 0
                u.delete_length = 0
            else:
                u.char_storage = self.undo_char_point
                self.undo_char_point += u.insert_length
                for i in range(u.insert_length):
                    self.chars[u.char_storage + i] = text.get_char(u.where + i)
            text.delete_chars(r.where, r.delete_length)

        if r.insert_length:
            saved = self.chars[r.char_storage:r.char_storage + r.insert_length]
            text.insert_chars(r.where, saved)
            self.redo_char_point += r.insert_length

        self.undo_point += 1
        self.redo_point += 1
        return r.where + r.insert_length