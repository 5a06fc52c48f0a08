"""Zone layout calculation for template-based columns.

Turns a template (zones as height proportions) into concrete zones for a
given column height: zone heights, shelf counts and spacing, drawer counts
and drawer heights.
"""

from __future__ import annotations

import logging
import math

from ..value_objects import (
    DrawerLayout,
    ShelfLayout,
    Template,
    Zone,
    ZoneDefaults,
    ZonePosition,
    ZoneType,
    round_half_up,
)

logger = logging.getLogger(__name__)

# Drawer bank margins, in cm.
DRAWER_GAP = 1.0
DRAWER_BOTTOM_MARGIN = 2.0
TOP_SHELF_THICKNESS = 2.0
DRAWER_TOP_OVERLAP = 0.5


def _clamp_count(count: int, low: int | None, high: int | None) -> int:
    if low is not None and count < low:
        count = low
    if high is not None and count > high:
        count = high
    return count


def _pick(value: float | None, default: float) -> float:
    return default if value is None else value


def compute_shelf_layout(
    height: float,
    min_spacing: float,
    max_spacing: float,
    optimal_spacing: float | None = None,
    *,
    min_count: int | None = None,
    max_count: int | None = None,
    minimum: int = 0,
) -> ShelfLayout:
    """Choose a shelf count and spacing for a zone.

    The zone is split into count + 1 equal sections. The section count
    nearest height / optimal_spacing is tried first, then the fewest
    sections whose spacing stays below max_spacing, then the most sections
    whose spacing stays above min_spacing. The first candidate whose spacing
    is inside [min_spacing, max_spacing] wins; if none is, the last one is
    kept. An explicit [min_count, max_count] window then clamps the count.

    Args:
        height: Zone height.
        min_spacing: Smallest allowed shelf spacing.
        max_spacing: Largest allowed shelf spacing.
        optimal_spacing: Preferred spacing, midpoint of the band if None.
        min_count: Lower bound of an explicit shelf count window.
        max_count: Upper bound of an explicit shelf count window.
        minimum: Smallest shelf count the search may return.

    Returns:
        The shelf count and the resulting spacing.
    """
    if height <= 0:
        return ShelfLayout(count=0, spacing=0.0)
    if optimal_spacing is None:
        optimal_spacing = (min_spacing + max_spacing) / 2

    candidates = (
        round_half_up(height / optimal_spacing),
        math.ceil(height / max_spacing),
        math.floor(height / min_spacing),
    )
    count = minimum
    for sections in candidates:
        count = max(sections - 1, minimum)
        if min_spacing <= height / (count + 1) <= max_spacing:
            break

    count = _clamp_count(count, min_count, max_count)
    return ShelfLayout(count=count, spacing=height / (count + 1))


def _fitting_drawer_count(available: float, drawer_height: float) -> int:
    """Largest n with n * drawer_height + (n - 1) * gap <= available, at least 1."""
    return max(1, math.floor((available + DRAWER_GAP) / (drawer_height + DRAWER_GAP)))


def compute_drawer_layout(
    zone_height: float,
    min_height: float,
    max_height: float,
    optimal_height: float,
    *,
    under_door: bool = False,
    min_count: int | None = None,
    max_count: int | None = None,
) -> DrawerLayout:
    """Choose a drawer count and per-drawer heights for a zone.

    The count is first sized against the optimal drawer height. If the
    resulting average falls outside [min_height, max_height], the fewest
    drawers that keep the average at or below max_height are used instead.
    Every drawer but the last gets the average floored to one decimal; the
    last drawer takes the remainder plus DRAWER_TOP_OVERLAP, so that

        sum(heights) + gaps + margins - DRAWER_TOP_OVERLAP == zone_height

    A zone no taller than its margins still holds one drawer, sized to
    the overlap alone.

    Args:
        zone_height: Height of the drawer zone.
        min_height: Smallest allowed drawer height.
        max_height: Largest allowed drawer height.
        optimal_height: Preferred drawer height.
        under_door: Reserve a top shelf when a door covers the zone.
        min_count: Lower bound of an explicit drawer count window.
        max_count: Upper bound of an explicit drawer count window.

    Returns:
        Drawer count and heights, bottom drawer first.
    """
    overhead = DRAWER_BOTTOM_MARGIN + (TOP_SHELF_THICKNESS if under_door else 0.0)
    available = zone_height - overhead
    if available <= 0:
        return DrawerLayout(count=1, heights=(DRAWER_TOP_OVERLAP,))

    def average(n: int) -> float:
        return (available - (n - 1) * DRAWER_GAP) / n

    count = _clamp_count(_fitting_drawer_count(available, optimal_height), min_count, max_count)
    if not min_height <= average(count) <= max_height:
        fewest = max(1, math.ceil((available + DRAWER_GAP) / (max_height + DRAWER_GAP)))
        count = _clamp_count(fewest, min_count, max_count)

    base = math.floor(round(average(count) * 10, 6)) / 10
    used = base * (count - 1) + (count - 1) * DRAWER_GAP
    last = available - used + DRAWER_TOP_OVERLAP
    return DrawerLayout(count=count, heights=(base,) * (count - 1) + (last,))


class ZoneLayoutCalculator:
    """Instantiates templates into concrete zones for one family.

    Args:
        defaults: Family zone defaults for fields a template leaves unset.
    """

    def __init__(self, defaults: ZoneDefaults) -> None:
        self.defaults = defaults

    def calculate(self, template: Template, available_height: float) -> list[Zone]:
        """Compute the zones of a column, top to bottom.

        The zone heights always sum to `available_height`.
        """
        heights = self.distribute_heights(template, available_height)
        return [self.build_zone(template, i, h) for i, h in enumerate(heights)]

    def distribute_heights(self, template: Template, available_height: float) -> list[float]:
        """Split the column height between the template's zones.

        Each zone starts at round(available * proportion / 100). Door zones
        below their minimum height are raised, taking height proportionally
        from non-door zones that can spare it. Any remaining difference goes
        to the tallest non-door zone (the tallest zone if every zone has a
        door), later zones winning ties.
        """
        zones = template.zones
        door_indices = template.door_zone_indices
        heights: list[float] = [
            round_half_up(available_height * zone.height_proportion / 100) for zone in zones
        ]

        needs = {
            i: max(0, _pick(zones[i].min_height, self.defaults.door_min_height) - heights[i])
            for i in sorted(door_indices)
        }
        deficit = sum(needs.values())
        if deficit > 0:
            spare = {
                i: max(
                    0,
                    heights[i]
                    - max(_pick(zones[i].min_height, 0), self.defaults.min_zone_height),
                )
                for i in range(len(zones))
                if i not in door_indices
            }
            total_spare = sum(spare.values())
            granted = min(deficit, total_spare)
            if granted > 0:
                remaining = granted
                for i, need in needs.items():
                    raise_by = min(need, remaining)
                    heights[i] += raise_by
                    remaining -= raise_by
                for i, can_give in spare.items():
                    heights[i] -= round_half_up(can_give / total_spare * granted)
            if granted < deficit:
                logger.debug(
                    f"Template {template.id}: door zones short by "
                    f"{deficit - granted}cm at height {available_height}"
                )

        difference = available_height - sum(heights)
        if difference:
            heights[self._remainder_target(template, heights)] += difference
        return heights

    @staticmethod
    def _remainder_target(template: Template, heights: list[float]) -> int:
        door_indices = template.door_zone_indices
        pool = [i for i in range(len(heights)) if i not in door_indices]
        if not pool:
            pool = list(range(len(heights)))
        target = pool[0]
        for i in pool[1:]:
            if heights[i] >= heights[target]:
                target = i
        return target

    def build_zone(self, template: Template, index: int, height: float) -> Zone:
        """Compute the contents of one zone at a given height."""
        zone_template = template.zones[index]
        covered = template.is_covered(index)
        defaults = self.defaults

        if zone_template.type.has_shelves:
            layout = compute_shelf_layout(
                height,
                _pick(zone_template.shelf_min_spacing, defaults.shelf_min_spacing),
                _pick(zone_template.shelf_max_spacing, defaults.shelf_max_spacing),
                zone_template.shelf_optimal_spacing
                if zone_template.shelf_optimal_spacing is not None
                else defaults.shelf_optimal_spacing,
                min_count=zone_template.min_shelf_count,
                max_count=zone_template.max_shelf_count,
            )
            return Zone(
                type=zone_template.type,
                height=height,
                shelf_count=layout.count,
                shelf_spacing=layout.spacing,
                has_door=covered,
            )

        if zone_template.type is ZoneType.DRAWERS:
            layout = compute_drawer_layout(
                height,
                _pick(zone_template.drawer_min_height, defaults.drawer_min_height),
                _pick(zone_template.drawer_max_height, defaults.drawer_max_height),
                _pick(zone_template.drawer_optimal_height, defaults.drawer_optimal_height),
                under_door=covered,
                min_count=zone_template.drawer_min_count,
                max_count=zone_template.drawer_max_count,
            )
            return Zone(
                type=ZoneType.DRAWERS,
                height=height,
                drawer_count=layout.count,
                drawer_heights=layout.heights,
                has_door=covered,
            )

        return Zone(type=zone_template.type, height=height, has_door=covered)


def zone_positions(zones: list[Zone] | tuple[Zone, ...]) -> list[ZonePosition]:
    """Vertical extents of zones listed top to bottom, measured from the bottom."""
    positions: list[ZonePosition] = []
    y = 0.0
    for index in range(len(zones) - 1, -1, -1):
        top = y + zones[index].height
        positions.append(ZonePosition(zone_index=index, start_y=y, end_y=top))
        y = top
    positions.reverse()
    return positions
