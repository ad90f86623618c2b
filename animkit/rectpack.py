"""Skyline rectangle packing for building texture atlases."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, NamedTuple

MAXVAL = 0x7FFFFFFF
"""Largest supported coordinate; unpacked rectangles are placed here."""

_SENTINEL_Y = 1 << 30


class Heuristic(enum.IntEnum):
    """How the packer picks a position on the skyline."""

    SKYLINE_BL_SORT_HEIGHT = 0
    SKYLINE_DEFAULT = 0
    SKYLINE_BF_SORT_HEIGHT = 1


@dataclass
class Rect:
    """A rectangle to pack; ``x``, ``y`` and ``was_packed`` are filled in by packing."""

    id: int
    w: int
    h: int
    x: int = 0
    y: int = 0
    was_packed: bool = False


@dataclass
class _Node:
    x: int
    y: int


class _Placement(NamedTuple):
    index: int
    x: int
    y: int


class RectPacker:
    """Packs rectangles into a fixed area using the skyline bottom-left algorithm."""

    def __init__(self, width: int, height: int, num_nodes: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("target size cannot be negative")
        if num_nodes < 1:
            raise ValueError("at least one node is required")
        self.width = width
        self.height = height
        self.num_nodes = num_nodes
        self.heuristic = Heuristic.SKYLINE_DEFAULT
        self.align = 1
        # The last node is a sentinel marking the right edge of the target.
        self._skyline = [_Node(0, 0), _Node(width, _SENTINEL_Y)]
        self.allow_out_of_mem(False)

    def allow_out_of_mem(self, allow: bool) -> None:
        """Choose exact widths (may run out of nodes) or widths quantised to fit the node budget."""
        if allow:
            self.align = 1
        else:
            self.align = max(1, (self.width + self.num_nodes - 1) // self.num_nodes)

    def set_heuristic(self, heuristic: Heuristic) -> None:
        """Select the placement heuristic."""
        try:
            self.heuristic = Heuristic(heuristic)
        except ValueError:
            raise ValueError(f"unknown heuristic: {heuristic!r}") from None

    @property
    def _free_nodes(self) -> int:
        return self.num_nodes + 2 - len(self._skyline)

    def _find_min_y(self, first: int, x0: int, width: int) -> tuple[int, int]:
        nodes = self._skyline
        x1 = x0 + width
        min_y = 0
        waste = 0
        visited = 0
        i = first
        while nodes[i].x < x1:
            node, following = nodes[i], nodes[i + 1]
            if node.y > min_y:
                waste += visited * (node.y - min_y)
                min_y = node.y
                if node.x < x0:
                    visited += following.x - x0
                else:
                    visited += following.x - node.x
            else:
                under = following.x - node.x
                if under + visited > width:
                    under = width - visited
                waste += under * (min_y - node.y)
                visited += under
            i += 1
        return min_y, waste

    def _find_best_pos(self, width: int, height: int) -> _Placement | None:
        nodes = self._skyline
        width = width + self.align - 1
        width -= width % self.align
        if width > self.width or height > self.height:
            return None

        best: int | None = None
        best_y = _SENTINEL_Y
        best_waste = _SENTINEL_Y
        best_fit = self.heuristic is Heuristic.SKYLINE_BF_SORT_HEIGHT

        i = 0
        while nodes[i].x + width <= self.width:
            y, waste = self._find_min_y(i, nodes[i].x, width)
            if not best_fit:
                if y < best_y:
                    best_y, best = y, i
            elif y + height <= self.height and (
                y < best_y or (y == best_y and waste < best_waste)
            ):
                best_y, best_waste, best = y, waste, i
            i += 1

        best_x = 0 if best is None else nodes[best].x

        if best_fit:
            tail = 0
            node = 0
            while nodes[tail].x < width:
                tail += 1
            while tail < len(nodes):
                xpos = nodes[tail].x - width
                while nodes[node + 1].x <= xpos:
                    node += 1
                y, waste = self._find_min_y(node, xpos, width)
                if y + height <= self.height and y <= best_y:
                    if (
                        y < best_y
                        or waste < best_waste
                        or (waste == best_waste and xpos < best_x)
                    ):
                        best_x, best_y, best_waste, best = xpos, y, waste, node
                tail += 1

        if best is None:
            return None
        return _Placement(best, best_x, best_y)

    def _pack_rectangle(self, width: int, height: int) -> tuple[int, int] | None:
        placement = self._find_best_pos(width, height)
        if (
            placement is None
            or placement.y + height > self.height
            or self._free_nodes == 0
        ):
            return None

        nodes = self._skyline
        new_node = _Node(placement.x, placement.y + height)
        insert_at = placement.index
        if nodes[insert_at].x < placement.x:
            insert_at += 1

        right = placement.x + width
        keep = insert_at
        while keep + 1 < len(nodes) and nodes[keep + 1].x <= right:
            keep += 1
        if nodes[keep].x < right:
            nodes[keep].x = right

        self._skyline = nodes[:insert_at] + [new_node] + nodes[keep:]
        return placement.x, placement.y

    def pack(self, rects: Iterable[Rect]) -> bool:
        """Place the rectangles in order of decreasing height; return True if all fit.

        Each rectangle's ``x``, ``y`` and ``was_packed`` are updated; those that do
        not fit are left at (MAXVAL, MAXVAL) with ``was_packed`` false.
        """
        rects = list(rects)
        for rect in sorted(rects, key=lambda r: (-r.h, -r.w)):
            if rect.w == 0 or rect.h == 0:
                rect.x = rect.y = 0
                continue
            position = self._pack_rectangle(rect.w, rect.h)
            if position is None:
                rect.x = rect.y = MAXVAL
            else:
                rect.x, rect.y = position

        all_packed = True
        for rect in rects:
            rect.was_packed = not (rect.x == MAXVAL and rect.y == MAXVAL)
            all_packed = all_packed and rect.was_packed
        return all_packed