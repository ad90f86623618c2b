"""Text layout queries used by the text editor: rows, hit testing and caret positions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Protocol

NEWLINE = "\n"
"""The character that ends a row of text."""

NEWLINE_WIDTH = -1.0
"""Width reported for a newline character, so callers can tell it apart."""


@dataclass
class TextRow:
    """Layout of one displayed row of characters."""

    x0: float = 0.0
    x1: float = 0.0
    baseline_y_delta: float = 0.0
    ymin: float = 0.0
    ymax: float = 0.0
    num_chars: int = 0


@dataclass
class FindState:
    """Position of a character and the row that holds it."""

    x: float = 0.0
    y: float = 0.0
    height: float = 0.0
    first_char: int = 0
    length: int = 0
    prev_first: int = 0


class EditableText(Protocol):
    """What the editor needs from a piece of text being edited."""

    def __len__(self) -> int: ...

    def layout_row(self, start: int) -> TextRow: ...

    def char_width(self, row_start: int, index: int) -> float: ...

    def get_char(self, index: int) -> str: ...

    def delete_chars(self, index: int, count: int) -> None: ...

    def insert_chars(self, index: int, chars: Iterable[str]) -> bool: ...


class MonospaceText:
    """Editable text laid out with fixed-width characters, one row per line."""

    def __init__(self, text: str = "", char_width: float = 1.0, line_height: float = 1.0) -> None:
        if char_width <= 0 or line_height <= 0:
            raise ValueError("character width and line height must be positive")
        self._chars: list[str] = list(text)
        self._char_width = float(char_width)
        self._line_height = float(line_height)

    def __len__(self) -> int:
        return len(self._chars)

    def __str__(self) -> str:
        return "".join(self._chars)

    def layout_row(self, start: int) -> TextRow:
        """Lay out the row beginning at ``start``; a trailing newline belongs to the row."""
        count = 0
        visible = 0
        for ch in self._chars[start:]:
            count += 1
            if ch == NEWLINE:
                break
            visible += 1
        return TextRow(
            x0=0.0,
            x1=visible * self._char_width,
            baseline_y_delta=self._line_height,
            ymin=0.0,
            ymax=self._line_height,
            num_chars=count,
        )

    def char_width(self, row_start: int, index: int) -> float:
        """Width of the ``index``-th character of the row starting at ``row_start``."""
        if self.get_char(row_start + index) == NEWLINE:
            return NEWLINE_WIDTH
        return self._char_width

    def get_char(self, index: int) -> str:
        if not 0 <= index < len(self._chars):
            raise IndexError(f"character index {index} out of range")
        return self._chars[index]

    def delete_chars(self, index: int, count: int) -> None:
        if index < 0 or count < 0 or index + count > len(self._chars):
            raise IndexError("deletion range out of bounds")
        del self._chars[index:index + count]

    def insert_chars(self, index: int, chars: Iterable[str]) -> bool:
        """Insert ``chars`` before ``index``; returns True once inserted."""
        if not 0 <= index <= len(self._chars):
            raise IndexError(f"insertion index {index} out of range")
        self._chars[index:index] = list(chars)
        return True


def locate_coord(text: EditableText, x: float, y: float) -> int:
    """Index of the character position nearest to the point (x, y)."""
    n = len(text)
    base_y = 0.0
    i = 0
    row = TextRow()

    while i < n:
        row = text.layout_row(i)
        if row.num_chars <= 0:
            return n
        if i == 0 and y < base_y + row.ymin:
            return 0
        if y < base_y + row.ymax:
            break
        i += row.num_chars
        base_y += row.baseline_y_delta

    if i >= n:
        return n

    if x < row.x0:
        return i

    if x < row.x1:
        prev_x = row.x0
        for k in range(row.num_chars):
            w = text.char_width(i, k)
            if x < prev_x + w:
                return k + i if x < prev_x + w / 2 else k + i + 1
            prev_x += w

    last = i + row.num_chars - 1
    if text.get_char(last) == NEWLINE:
        return last
    return i + row.num_chars


def find_charpos(text: EditableText, n: int, single_line: bool) -> FindState:
    """Locate character ``n``: its x/y position and the row (and previous row) holding it."""
    z = len(text)

    if n == z and single_line:
        row = text.layout_row(0)
        return FindState(
            x=row.x1,
            y=0.0,
            height=row.ymax - row.ymin,
            first_char=0,
            length=z,
            prev_first=0,
        )

    find = FindState()
    prev_start = 0
    i = 0
    while True:
        row = text.layout_row(i)
        if n < i + row.num_chars:
            break
        if i + row.num_chars == z and z > 0 and text.get_char(z - 1) != NEWLINE:
            break
        if row.num_chars <= 0 and i < z:
            raise ValueError(f"layout produced an empty row at {i}")
        prev_start = i
        i += row.num_chars
        find.y += row.baseline_y_delta
        if i == z:
            row.num_chars = 0
            break

    find.first_char = i
    find.length = row.num_chars
    find.height = row.ymax - row.ymin
    find.prev_first = prev_start

    find.x = row.x0
    first = i
    k = 0
    while first + k < n:
        find.x += text.char_width(first, k)
        k += 1
    return find