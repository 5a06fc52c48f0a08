"""Unit tests for zone layout calculation."""

import math

import pytest

from furniture.domain.constraints import DEFAULT_REGISTRY
from furniture.domain.services import (
    ZoneLayoutCalculator,
    compute_drawer_layout,
    compute_shelf_layout,
    layout_columns,
    zone_positions,
)
from furniture.domain.services.zone_layout import (
    DRAWER_BOTTOM_MARGIN,
    DRAWER_GAP,
    DRAWER_TOP_OVERLAP,
    TOP_SHELF_THICKNESS,
)
from furniture.domain.templates import (
    RACK_CATALOG,
    RACK_ZONE_DEFAULTS,
    SHOE_RACK_CATALOG,
    get_template_catalog,
)
from furniture.domain.value_objects import FurnitureFamily, Template, ZoneType


@pytest.fixture
def rack_calculator() -> ZoneLayoutCalculator:
    """Zone calculator with rack defaults."""
    return ZoneLayoutCalculator(RACK_ZONE_DEFAULTS)


class TestComputeShelfLayout:
    """Tests for compute_shelf_layout."""

    def test_optimal_spacing(self) -> None:
        """150 cm at a 30 cm target gives four shelves, 30 cm apart."""
        layout = compute_shelf_layout(150, 28, 32, 30)

        assert layout.count == 4
        assert layout.spacing == 30

    def test_spacing_within_band_when_possible(self) -> None:
        """Whenever some section count fits the band, the spacing lands in it."""
        for height in range(30, 300):
            solvable = any(28 <= height / n <= 32 for n in range(1, 12))
            layout = compute_shelf_layout(height, 28, 32, 30)
            if solvable:
                assert 28 <= layout.spacing <= 32, height
            assert layout.spacing == pytest.approx(height / (layout.count + 1))

    def test_unsolvable_height_keeps_last_candidate(self) -> None:
        """With no spacing in band the most-sections candidate is kept."""
        layout = compute_shelf_layout(100, 28, 32, 30)

        assert layout.count == 2
        assert layout.spacing == pytest.approx(100 / 3)

    def test_explicit_window(self) -> None:
        """An explicit count window overrides the search."""
        layout = compute_shelf_layout(150, 28, 32, 30, min_count=1, max_count=1)

        assert layout.count == 1
        assert layout.spacing == 75

    def test_optimal_defaults_to_midpoint(self) -> None:
        """Without a target spacing the band midpoint is used."""
        assert compute_shelf_layout(86, 18, 25) == compute_shelf_layout(86, 18, 25, 21.5)

    def test_minimum(self) -> None:
        """The search never returns fewer shelves than the minimum."""
        assert compute_shelf_layout(20, 28, 32, 30, minimum=1).count == 1

    def test_zero_height(self) -> None:
        """An empty zone has no shelves."""
        layout = compute_shelf_layout(0, 28, 32, 30)

        assert layout.count == 0
        assert layout.spacing == 0


class TestComputeDrawerLayout:
    """Tests for compute_drawer_layout."""

    def test_falls_back_to_fewest_drawers(self) -> None:
        """Two 43 cm drawers are too tall, so three are used."""
        layout = compute_drawer_layout(90, 15, 30, 30)

        assert layout.count == 3
        assert layout.heights[:2] == (28.6, 28.6)
        assert layout.heights[2] == pytest.approx(29.3)

    def test_under_door_reserves_top_shelf(self) -> None:
        """A door-covered bank loses the top shelf thickness."""
        layout = compute_drawer_layout(90, 15, 30, 30, under_door=True)

        assert layout.count == 3
        assert layout.heights[:2] == (28.0, 28.0)
        assert layout.heights[2] == pytest.approx(28.5)

    @pytest.mark.parametrize("under_door", [False, True])
    def test_heights_account_for_zone(self, under_door: bool) -> None:
        """Drawers, gaps and margins add up to the zone height."""
        overhead = DRAWER_BOTTOM_MARGIN + (TOP_SHELF_THICKNESS if under_door else 0)
        for zone_height in range(30, 200):
            layout = compute_drawer_layout(zone_height, 15, 25, 20, under_door=under_door)
            total = (
                sum(layout.heights)
                + (layout.count - 1) * DRAWER_GAP
                + overhead
                - DRAWER_TOP_OVERLAP
            )
            assert total == pytest.approx(zone_height), zone_height

    def test_drawers_stay_below_maximum(self) -> None:
        """Every drawer but the remainder one is at most the maximum height."""
        for zone_height in range(40, 200):
            layout = compute_drawer_layout(zone_height, 15, 25, 20)
            assert all(h <= 25 for h in layout.heights[:-1]), zone_height

    def test_count_window(self) -> None:
        """An explicit window pins the drawer count."""
        layout = compute_drawer_layout(40, 28, 45, 40, min_count=1, max_count=1)

        assert layout.count == 1
        assert layout.heights == (38.5,)

    @pytest.mark.parametrize("zone_height", [0, 1, 2])
    def test_too_small_zone(self, zone_height: float) -> None:
        """A zone no taller than its margins still gets one drawer."""
        layout = compute_drawer_layout(zone_height, 15, 25, 20)

        assert layout.count == 1
        assert layout.heights == (DRAWER_TOP_OVERLAP,)

    def test_too_small_zone_under_door(self) -> None:
        """The top shelf counts towards the margins under a door."""
        layout = compute_drawer_layout(4, 15, 25, 20, under_door=True)

        assert layout.count == 1
        assert layout.heights == (DRAWER_TOP_OVERLAP,)


class TestZoneLayoutCalculator:
    """Tests for ZoneLayoutCalculator."""

    def test_remainder_goes_to_non_door_zone(
        self, rack_calculator: ZoneLayoutCalculator
    ) -> None:
        """Rounding surplus is taken from the zone without a door."""
        template = RACK_CATALOG.get("HALF_OPEN_HALF_CLOSED")

        assert rack_calculator.distribute_heights(template, 121) == [60, 61]

    def test_door_zone_raised_to_minimum(self, rack_calculator: ZoneLayoutCalculator) -> None:
        """A short door zone takes height from the open zone above it."""
        template = RACK_CATALOG.get("OPEN_AND_BOTTOM_CLOSED")

        assert rack_calculator.distribute_heights(template, 100) == [40, 60]

    def test_calculate_builds_zones(self, rack_calculator: ZoneLayoutCalculator) -> None:
        """Shelf zones get counts and spacing, drawer zones get drawers."""
        template = RACK_CATALOG.get("OPEN_SHELVES_AND_DRAWERS")
        zones = rack_calculator.calculate(template, 178)

        assert [z.type for z in zones] == [ZoneType.SHELVES, ZoneType.DRAWERS]
        assert zones[0].height == 89
        assert zones[0].shelf_count == 2
        assert 28 <= zones[0].shelf_spacing <= 32
        assert zones[1].drawer_count == 3
        assert not any(z.has_door for z in zones)

    def test_door_flag(self, rack_calculator: ZoneLayoutCalculator) -> None:
        """Zones covered by a door are flagged."""
        zones = rack_calculator.calculate(RACK_CATALOG.get("HALF_OPEN_HALF_CLOSED"), 178)

        assert [z.has_door for z in zones] == [False, True]

    def test_shoe_rack_shelf_window(self) -> None:
        """Two-row shoe racks always have exactly one shelf."""
        calculator = ZoneLayoutCalculator(SHOE_RACK_CATALOG.defaults)
        zones = calculator.calculate(SHOE_RACK_CATALOG.get("TWO_ROWS_SHELVES"), 80)

        assert zones[0].shelf_count == 1
        assert zones[0].shelf_spacing == 40


def _column_heights(family: FurnitureFamily, template: Template) -> range:
    """Every whole column height the family table and the template allow."""
    table = DEFAULT_REGISTRY.get(family)
    low = max(table.height.min - table.plinth_height.max, math.ceil(template.min_height))
    high = min(table.height.max - table.plinth_height.min, math.floor(template.max_height))
    return range(low, high + 1)


@pytest.mark.parametrize(
    "family", [FurnitureFamily.RACK, FurnitureFamily.BOOKCASE, FurnitureFamily.SHOE_RACK]
)
class TestHeightConservation:
    """Zone heights add up to the column height in every catalogue."""

    def test_distributed_heights(self, family: FurnitureFamily) -> None:
        """Raw zone heights sum to the column height and are never negative."""
        catalog = get_template_catalog(family)
        calculator = ZoneLayoutCalculator(catalog.defaults)
        for template in catalog:
            for height in _column_heights(family, template):
                heights = calculator.distribute_heights(template, height)
                assert sum(heights) == height, (template.id, height)
                assert all(h >= 0 for h in heights), (template.id, height)

    def test_aligned_heights(self, family: FurnitureFamily) -> None:
        """Grid alignment moves boundaries without losing or inventing height."""
        catalog = get_template_catalog(family)
        calculator = ZoneLayoutCalculator(catalog.defaults)
        for template in catalog:
            for height in _column_heights(family, template):
                layout = layout_columns([template], 60, height, calculator, align_to_grid=True)
                zones = layout.columns[0].zones
                assert sum(z.height for z in zones) == pytest.approx(height), (template.id, height)
                assert all(z.height >= 0 for z in zones), (template.id, height)


class TestZonePositions:
    """Tests for zone_positions."""

    def test_positions_from_bottom(self, rack_calculator: ZoneLayoutCalculator) -> None:
        """The bottom zone starts at 0 and the top zone ends at the column top."""
        zones = rack_calculator.calculate(RACK_CATALOG.get("HALF_OPEN_HALF_CLOSED"), 178)
        positions = zone_positions(zones)

        assert [p.zone_index for p in positions] == [0, 1]
        assert positions[1].start_y == 0
        assert positions[1].end_y == 89
        assert positions[0].start_y == 89
        assert positions[0].end_y == 178
