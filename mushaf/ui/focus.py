"""
Focus navigation over a responsive grid.

The focused cell is tracked as a plain integer offset into the visible
list. Nothing wraps: every move clamps to the ends of the list. The column
count is passed in at each move, so a resize between two vertical moves
changes the size of the next "row" jump without moving the focus itself.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Sequence, TypeVar

from mushaf.config.constants import PIXEL_BREAKPOINTS

T = TypeVar("T")


class Direction(str, Enum):
    """Directional input signals, independent of the physical keys."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


def column_count(width: int, breakpoints: tuple[int, int] = PIXEL_BREAKPOINTS) -> int:
    """Number of grid columns for a viewport *width*.

    ``breakpoints`` is ``(narrow_max, medium_max)``: narrower than the
    first gives one column, narrower than the second gives two, else three.
    """
    narrow_max, medium_max = breakpoints
    if width < narrow_max:
        return 1
    if width < medium_max:
        return 2
    return 3


class FocusNavigator:
    """Tracks the focused index for a list of ``length`` cells."""

    def __init__(self, length: int = 0):
        self.index = 0
        self.length = 0
        self.reclamp(length)

    @property
    def active(self) -> bool:
        """Focus only means something while there is a cell to focus."""
        return self.length > 0

    def reclamp(self, new_length: int) -> None:
        """Adopt a new list length, pulling the index back inside it."""
        self.length = max(new_length, 0)
        if self.length == 0:
            self.index = 0
        else:
            self.index = max(0, min(self.index, self.length - 1))

    def reset(self) -> None:
        self.index = 0

    def move_right(self) -> bool:
        return self._set(self.index + 1)

    def move_left(self) -> bool:
        return self._set(self.index - 1)

    def move_down(self, columns: int) -> bool:
        return self._set(self.index + _check_columns(columns))

    def move_up(self, columns: int) -> bool:
        return self._set(self.index - _check_columns(columns))

    def move(self, direction: Direction, columns: int) -> bool:
        """Apply one directional signal. Returns True if the focus changed."""
        if direction is Direction.RIGHT:
            return self.move_right()
        if direction is Direction.LEFT:
            return self.move_left()
        if direction is Direction.DOWN:
            return self.move_down(columns)
        return self.move_up(columns)

    def set_focus(self, index: int) -> bool:
        """Focus a cell directly (pointer hover), clamped to the list."""
        return self._set(index)

    def focused(self, items: Sequence[T]) -> Optional[T]:
        """The item under focus, or None when nothing can be focused."""
        if not self.active or self.index >= len(items):
            return None
        return items[self.index]

    def _set(self, index: int) -> bool:
        if not self.active:
            return False
        clamped = max(0, min(index, self.length - 1))
        changed = clamped != self.index
        self.index = clamped
        return changed


def _check_columns(columns: int) -> int:
    if columns < 1:
        raise ValueError(f"column count must be at least 1, got {columns}")
    return columns
