"""Tests for type definitions."""

from __future__ import annotations

import dataclasses

import pytest

from pixel_demos.types import DIRECTIONS, InvalidArgument, Position, SpriteCellGroup


class TestPosition:
    """Tests for Position type."""

    def test_position_defaults_to_origin(self):
        """Test position defaults to (0, 0)."""
        pos = Position()
        assert (pos.x, pos.y) == (0, 0)

    def test_position_copy_is_independent(self):
        """Test copying a position doesn't alias it."""
        pos = Position(3, 4)
        copy = pos.copy()
        copy.x = 10
        assert pos.x == 3

    def test_position_offset(self):
        """Test offset moves in place."""
        pos = Position(1, 1)
        pos.offset(-2, 3)
        assert pos == Position(-1, 4)

    def test_position_label(self):
        """Test position label format."""
        assert Position(176, -5).label() == "(176,-5)"


class TestDirections:
    """Tests for the direction table."""

    def test_eight_directions_in_order(self):
        """Test the table order."""
        assert DIRECTIONS == (
            (1, 0),
            (-1, 0),
            (0, 1),
            (0, -1),
            (1, 1),
            (-1, 1),
            (1, -1),
            (-1, -1),
        )

    def test_directions_are_unit_steps(self):
        """Test every direction moves at most one unit per axis."""
        for dx, dy in DIRECTIONS:
            assert dx in (-1, 0, 1)
            assert dy in (-1, 0, 1)
            assert (dx, dy) != (0, 0)


class TestSpriteCellGroup:
    """Tests for SpriteCellGroup type."""

    def test_group_stores_tuple(self):
        """Test list input is stored as a tuple."""
        group = SpriteCellGroup([0, 1, 6, 7], 2)
        assert group.cells == (0, 1, 6, 7)

    def test_group_height(self, shell_group):
        """Test row count of a full grid."""
        assert shell_group.height == 2
        assert len(shell_group) == 4

    def test_group_height_rounds_up(self):
        """Test a partial last row still counts."""
        assert SpriteCellGroup.of([1, 2, 3], 2).height == 2

    def test_group_is_frozen(self, shell_group):
        """Test groups can't be modified."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            shell_group.width = 4

    def test_zero_width_raises(self):
        """Test non-positive width is rejected."""
        with pytest.raises(InvalidArgument):
            SpriteCellGroup.of([0], 0)

    def test_empty_group_raises(self):
        """Test empty cell list is rejected."""
        with pytest.raises(InvalidArgument):
            SpriteCellGroup.of([], 2)
