"""Unit tests for configuration fallback resolution and door helpers."""

import logging

import pytest

from furniture.domain.column_rules import STAND_RULES
from furniture.domain.entities import ColumnConfiguration
from furniture.domain.services import (
    ConfigurationFallbackResolver,
    find_nearest_valid_type,
    hinge_positions,
    nearness_order,
    resolve_door_type,
    synchronize_drawer_counts,
)
from furniture.domain.value_objects import (
    ColumnDimensions,
    ConfigurationType,
    DoorOpeningSide,
    DoorSpec,
    DoorType,
)

T = ConfigurationType
L = DoorOpeningSide.LEFT
R = DoorOpeningSide.RIGHT

STAND_COLUMN = ColumnDimensions(width=50, height=68, depth=40)


@pytest.fixture
def resolver() -> ConfigurationFallbackResolver:
    """Fallback resolver over the stand validity table."""
    return ConfigurationFallbackResolver(STAND_RULES)


class TestNearness:
    """Tests for nearness ordering."""

    def test_nearness_order(self) -> None:
        """Types are ordered by distance, the lower index first on ties."""
        order = nearness_order(T.DRAWERS_3)

        assert order[:5] == [T.DRAWERS_3, T.DRAWERS_2, T.DRAWERS_4, T.DRAWERS_1, T.DRAWERS_5]
        assert len(order) == len(ConfigurationType)

    def test_find_nearest_valid_type(self) -> None:
        """The first valid type in nearness order is returned."""
        allowed = {T.DOOR_1_SHELF, T.DOOR_SPLIT_1_SHELF}

        assert find_nearest_valid_type(T.DRAWERS_5, lambda t: t in allowed) is T.DOOR_1_SHELF

    def test_find_nearest_none(self) -> None:
        """None is returned when nothing is valid."""
        assert find_nearest_valid_type(T.DRAWERS_1, lambda t: False) is None


class TestConfigurationFallbackResolver:
    """Tests for ConfigurationFallbackResolver."""

    def test_valid_configuration_kept(self, resolver: ConfigurationFallbackResolver) -> None:
        """A configuration that fits is returned as is."""
        config = ColumnConfiguration(T.DRAWERS_3)

        assert resolver.resolve(config, STAND_COLUMN) is config

    def test_replaced_by_nearest_valid(self, resolver: ConfigurationFallbackResolver) -> None:
        """Five drawers in a 68 cm column become three."""
        resolved = resolver.resolve(ColumnConfiguration(T.DRAWERS_5), STAND_COLUMN)

        assert resolved == ColumnConfiguration(T.DRAWERS_3)

    def test_door_side_carried_over(self, resolver: ConfigurationFallbackResolver) -> None:
        """A single-door replacement keeps the previous side."""
        resolved = resolver.resolve(ColumnConfiguration(T.DOOR_4_SHELVES, R), STAND_COLUMN)

        assert resolved == ColumnConfiguration(T.DOOR_2_SHELVES, R)

    def test_new_single_door_opens_left(self, resolver: ConfigurationFallbackResolver) -> None:
        """A drawer column replaced by a single door opens left."""
        low_column = ColumnDimensions(width=50, height=30, depth=40)

        resolved = resolver.resolve(ColumnConfiguration(T.DRAWERS_5), low_column)

        assert resolved == ColumnConfiguration(T.DOOR_1_SHELF, L)

    def test_nothing_fits_keeps_config(
        self, resolver: ConfigurationFallbackResolver, caplog: pytest.LogCaptureFixture
    ) -> None:
        """When no type fits, the configuration is kept with a warning."""
        config = ColumnConfiguration(T.DRAWERS_2)

        with caplog.at_level(logging.WARNING):
            resolved = resolver.resolve(config, ColumnDimensions(width=10, height=68, depth=40))

        assert resolved is config
        assert "No configuration type fits" in caplog.text

    def test_deterministic(self, resolver: ConfigurationFallbackResolver) -> None:
        """Identical inputs give identical replacements."""
        configs = [ColumnConfiguration(t) for t in (T.DRAWERS_5, T.DOOR_SPLIT_5_SHELVES)]

        first = resolver.repair(configs, 2, STAND_COLUMN)
        second = resolver.repair(configs, 2, STAND_COLUMN)

        assert first == second

    def test_repair_pads_with_drawer_count(self, resolver: ConfigurationFallbackResolver) -> None:
        """New columns copy the drawer count of the first drawer column."""
        repaired = resolver.repair([ColumnConfiguration(T.DRAWERS_3)], 3, STAND_COLUMN)

        assert repaired == [ColumnConfiguration(T.DRAWERS_3)] * 3

    def test_repair_truncates(self, resolver: ConfigurationFallbackResolver) -> None:
        """Extra configurations are dropped."""
        configs = [
            ColumnConfiguration(T.DOOR_2_SHELVES, R),
            ColumnConfiguration(T.DRAWERS_3),
            ColumnConfiguration(T.DRAWERS_3),
        ]

        assert resolver.repair(configs, 1, STAND_COLUMN) == configs[:1]

    def test_repair_empty_array(self, resolver: ConfigurationFallbackResolver) -> None:
        """Without configurations every column starts as three drawers."""
        assert resolver.repair([], 2, STAND_COLUMN) == [ColumnConfiguration(T.DRAWERS_3)] * 2

    def test_default_configuration_copies_drawer_count(
        self, resolver: ConfigurationFallbackResolver
    ) -> None:
        """The first drawer column sets the drawer count of a new column."""
        existing = [ColumnConfiguration(T.DOOR_1_SHELF, L), ColumnConfiguration(T.DRAWERS_2)]
        dims = ColumnDimensions(width=50, height=50, depth=40)

        assert resolver.default_configuration(existing, dims) == ColumnConfiguration(T.DRAWERS_2)

    def test_default_configuration_falls_back(
        self, resolver: ConfigurationFallbackResolver
    ) -> None:
        """A new column in a low stand gets the nearest valid drawer type."""
        dims = ColumnDimensions(width=50, height=30, depth=40)

        assert resolver.default_configuration([], dims) == ColumnConfiguration(T.DRAWERS_1)


class TestSynchronizeDrawerCounts:
    """Tests for synchronize_drawer_counts."""

    def test_other_drawer_columns_follow(self) -> None:
        """Every other drawer column takes the new drawer count."""
        configs = [
            ColumnConfiguration(T.DRAWERS_3),
            ColumnConfiguration(T.DOOR_1_SHELF, L),
            ColumnConfiguration(T.DRAWERS_3),
        ]

        result = synchronize_drawer_counts(configs, 0, 2, lambda index, t: True)

        assert result == [
            ColumnConfiguration(T.DRAWERS_3),
            ColumnConfiguration(T.DOOR_1_SHELF, L),
            ColumnConfiguration(T.DRAWERS_2),
        ]

    def test_columns_that_cannot_fit_keep_theirs(self) -> None:
        """Columns where the new count is invalid are left alone."""
        configs = [ColumnConfiguration(T.DRAWERS_3), ColumnConfiguration(T.DRAWERS_3)]

        result = synchronize_drawer_counts(configs, 0, 5, lambda index, t: False)

        assert result == configs

    def test_unknown_drawer_count(self) -> None:
        """A drawer count without a type changes nothing."""
        configs = [ColumnConfiguration(T.DRAWERS_3), ColumnConfiguration(T.DRAWERS_3)]

        assert synchronize_drawer_counts(configs, 0, 9, lambda index, t: True) == configs


class TestDoors:
    """Tests for hinge placement and door style."""

    def test_two_hinges(self) -> None:
        """Two hinges sit 10 cm from the top and bottom edges."""
        assert hinge_positions(68, T.DOOR_1_SHELF) == [10, 58]

    def test_even_middle_hinge(self) -> None:
        """An even rule puts the middle hinge at the centre."""
        assert hinge_positions(68, T.DOOR_2_SHELVES) == [10, 34, 58]

    def test_offset_middle_hinge(self) -> None:
        """The offset rule moves the middle hinge 5 cm down."""
        assert hinge_positions(68, T.DOOR_3_SHELVES) == [10, 39, 58]

    def test_drawers_have_no_hinges(self) -> None:
        """Drawer columns have no hinges."""
        assert hinge_positions(68, T.DRAWERS_3) == []

    def test_split_door_spec_always_split(self) -> None:
        """Split template doors stay split in narrow columns."""
        door = DoorSpec(zone_indices=(0,), type=DoorType.SPLIT)

        assert resolve_door_type(door, 40) is DoorType.SPLIT

    def test_single_door_splits_when_wide(self) -> None:
        """Single template doors split from 60 cm on."""
        door = DoorSpec(zone_indices=(0,), type=DoorType.SINGLE)

        assert resolve_door_type(door, 59) is DoorType.SINGLE
        assert resolve_door_type(door, 60) is DoorType.SPLIT
