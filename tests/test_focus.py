"""Tests for focus navigation and the column breakpoints."""

import random

import pytest

from mushaf.config.constants import PIXEL_BREAKPOINTS, TERMINAL_BREAKPOINTS
from mushaf.ui.focus import Direction, FocusNavigator, column_count


class TestColumnCount:
    @pytest.mark.parametrize(
        "width,expected",
        [(0, 1), (639, 1), (640, 2), (1023, 2), (1024, 3), (4000, 3)],
    )
    def test_pixel_breakpoints(self, width, expected):
        assert column_count(width, PIXEL_BREAKPOINTS) == expected

    def test_default_breakpoints_are_pixels(self):
        assert column_count(800) == 2

    def test_terminal_breakpoints(self):
        narrow, medium = TERMINAL_BREAKPOINTS
        assert column_count(narrow - 1, TERMINAL_BREAKPOINTS) == 1
        assert column_count(narrow, TERMINAL_BREAKPOINTS) == 2
        assert column_count(medium, TERMINAL_BREAKPOINTS) == 3


class TestFocusNavigator:
    def test_starts_at_zero(self):
        nav = FocusNavigator(3)
        assert nav.index == 0
        assert nav.active

    def test_move_right_clamps_at_end(self):
        """Three entries, three columns: right, right, right stays on the last."""
        nav = FocusNavigator(3)
        assert nav.move(Direction.RIGHT, 3)
        assert nav.index == 1
        assert nav.move(Direction.RIGHT, 3)
        assert nav.index == 2
        assert not nav.move(Direction.RIGHT, 3)
        assert nav.index == 2

    def test_move_left_clamps_at_start(self):
        nav = FocusNavigator(3)
        assert not nav.move_left()
        assert nav.index == 0

    def test_move_down_by_columns(self):
        """Two columns, five entries: down, down reaches the last; again stays."""
        nav = FocusNavigator(5)
        nav.move(Direction.DOWN, 2)
        assert nav.index == 2
        nav.move(Direction.DOWN, 2)
        assert nav.index == 4
        assert not nav.move(Direction.DOWN, 2)
        assert nav.index == 4

    def test_move_down_clamps_partial_row(self):
        nav = FocusNavigator(5)
        nav.set_focus(3)
        nav.move_down(3)
        assert nav.index == 4

    def test_move_up_clamps_at_zero(self):
        nav = FocusNavigator(10)
        nav.set_focus(2)
        nav.move_up(3)
        assert nav.index == 0

    def test_column_change_applies_only_to_next_move(self):
        nav = FocusNavigator(12)
        nav.move_down(3)
        assert nav.index == 3
        # Resize to one column: focus stays, next jump is one cell
        nav.reclamp(12)
        assert nav.index == 3
        nav.move_down(1)
        assert nav.index == 4

    def test_empty_list_moves_are_noops(self):
        nav = FocusNavigator(0)
        for direction in Direction:
            assert not nav.move(direction, 2)
        assert nav.index == 0
        assert not nav.active

    def test_set_focus_clamps(self):
        nav = FocusNavigator(4)
        nav.set_focus(99)
        assert nav.index == 3
        nav.set_focus(-5)
        assert nav.index == 0

    def test_reclamp_shrinks_index(self):
        nav = FocusNavigator(3)
        nav.set_focus(2)
        nav.reclamp(1)
        assert nav.index == 0

    def test_reclamp_never_expands(self):
        nav = FocusNavigator(3)
        nav.set_focus(1)
        nav.reclamp(50)
        assert nav.index == 1

    def test_reclamp_to_empty_keeps_zero_and_inert(self):
        nav = FocusNavigator(3)
        nav.set_focus(2)
        nav.reclamp(0)
        assert nav.index == 0
        assert not nav.active

    def test_focused_item(self):
        nav = FocusNavigator(3)
        nav.move_right()
        assert nav.focused(["a", "b", "c"]) == "b"
        assert FocusNavigator(0).focused([]) is None

    def test_invalid_column_count_rejected(self):
        nav = FocusNavigator(3)
        with pytest.raises(ValueError):
            nav.move_down(0)

    def test_clamp_holds_for_random_moves_and_resizes(self):
        rng = random.Random(1234)
        nav = FocusNavigator(7)
        for _ in range(2000):
            action = rng.randrange(3)
            if action == 0:
                nav.move(rng.choice(list(Direction)), rng.randint(1, 3))
            elif action == 1:
                nav.reclamp(rng.randint(0, 12))
            else:
                nav.set_focus(rng.randint(-3, 15))
            if nav.length:
                assert 0 <= nav.index < nav.length
            else:
                assert nav.index == 0
