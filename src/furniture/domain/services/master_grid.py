"""Master grid alignment for rack and bookcase columns.

One shelf grid is computed per furniture instance from the total column
height. Zone boundaries that carry a door or sit on top of a drawer bank
are snapped to that grid so they line up across columns, even when the
columns use different templates.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..value_objects import DoorType, Template, Zone, ZoneType
from .doors import resolve_door_type
from .zone_layout import ZoneLayoutCalculator, compute_shelf_layout

logger = logging.getLogger(__name__)

GRID_OPTIMAL_SPACING = 30.0
GRID_MIN_SPACING = 28.0
GRID_MAX_SPACING = 32.0

MAX_DOOR_ZONE_HEIGHT = 130.0
MIN_ZONE_HEIGHT = 28.0
# Candidates closer than this to the best distance count as ties.
TIE_TOLERANCE = 2.0
# Snapping is skipped when the best grid line is farther than this many spacings.
SNAP_REACH = 1.5


@dataclass(frozen=True)
class MasterGrid:
    """Shelf Y-positions shared by every column, from the plinth top.

    Attributes:
        total_height: Usable column height the grid was derived from.
        spacing: Distance between grid lines.
        positions: Grid line offsets, bottom to top.
    """

    total_height: float
    spacing: float
    positions: tuple[float, ...]

    @property
    def shelf_count(self) -> int:
        return len(self.positions)


@dataclass(frozen=True)
class SnapDecision:
    """Outcome of aligning one zone boundary."""

    zone_index: int
    natural_position: float
    snapped_position: float | None = None
    distance: float | None = None

    @property
    def snapped(self) -> bool:
        return self.snapped_position is not None


@dataclass(frozen=True)
class AlignedColumn:
    """Zones of one column after grid alignment.

    Attributes:
        index: Column position, left to right.
        width: Column width.
        template_id: Template the zones were built from.
        zones: Zones, top to bottom.
        door_types: Resolved style of each template door, in template order.
        snaps: One decision per eligible boundary.
    """

    index: int
    width: float
    template_id: str
    zones: tuple[Zone, ...]
    door_types: tuple[DoorType, ...] = ()
    snaps: tuple[SnapDecision, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class FurnitureLayout:
    """Aligned layout of a whole furniture instance."""

    grid: MasterGrid | None
    columns: tuple[AlignedColumn, ...]


def compute_master_grid(total_height: float) -> MasterGrid:
    """Derive the shared grid from the total usable column height.

    Uses the shelf count search with a 30cm target and a 28-32cm band,
    keeping at least one grid line.
    """
    layout = compute_shelf_layout(
        total_height,
        GRID_MIN_SPACING,
        GRID_MAX_SPACING,
        GRID_OPTIMAL_SPACING,
        minimum=1,
    )
    positions = tuple(layout.spacing * i for i in range(1, layout.count + 1))
    return MasterGrid(total_height=total_height, spacing=layout.spacing, positions=positions)


def _choose_grid_line(candidates: list[float], natural: float) -> tuple[float, float]:
    best = min(abs(p - natural) for p in candidates)
    near = [p for p in candidates if abs(p - natural) - best < TIE_TOLERANCE]
    return max(near), best


class MasterGridAligner:
    """Snaps door and drawer zone boundaries of columns to a master grid.

    Args:
        calculator: Zone calculator used to rebuild zones whose height changes.
        grid: The furniture instance's master grid.
    """

    def __init__(self, calculator: ZoneLayoutCalculator, grid: MasterGrid) -> None:
        self.calculator = calculator
        self.grid = grid

    def align(self, template: Template, zones: list[Zone]) -> tuple[list[Zone], list[SnapDecision]]:
        """Align one column's zones to the grid.

        For every zone below the top one that is door-covered or holds
        drawers, its top boundary moves to the closest grid line that keeps
        the zone within [zone minimum, MAX_DOOR_ZONE_HEIGHT] and the zone
        above at least MIN_ZONE_HEIGHT. Near-ties prefer the higher line.
        Both zones touching a moved boundary are rebuilt at their new heights.

        Returns:
            The aligned zones (top to bottom) and the snap decisions.
        """
        zones = list(zones)
        decisions: list[SnapDecision] = []
        for i in range(1, len(zones)):
            if not (template.is_covered(i) or zones[i].type is ZoneType.DRAWERS):
                continue

            bottom = sum(zone.height for zone in zones[i + 1 :])
            top = bottom + zones[i].height
            above_top = top + zones[i - 1].height
            zone_min = template.zones[i].min_height
            if zone_min is None:
                zone_min = MIN_ZONE_HEIGHT

            candidates = [
                p
                for p in self.grid.positions
                if zone_min <= p - bottom <= MAX_DOOR_ZONE_HEIGHT
                and above_top - p >= MIN_ZONE_HEIGHT
            ]
            if not candidates:
                logger.debug(f"{template.id} zone {i}: no grid line fits boundary {top:.1f}")
                decisions.append(SnapDecision(zone_index=i, natural_position=top))
                continue

            position, distance = _choose_grid_line(candidates, top)
            if distance > SNAP_REACH * self.grid.spacing:
                logger.debug(
                    f"{template.id} zone {i}: nearest grid line {position:.1f} is "
                    f"{distance:.1f}cm away, left unsnapped"
                )
                decisions.append(SnapDecision(zone_index=i, natural_position=top))
                continue

            logger.debug(f"{template.id} zone {i}: snapped {top:.1f} -> {position:.1f}")
            zones[i] = self.calculator.build_zone(template, i, position - bottom)
            zones[i - 1] = self.calculator.build_zone(template, i - 1, above_top - position)
            decisions.append(
                SnapDecision(
                    zone_index=i,
                    natural_position=top,
                    snapped_position=position,
                    distance=distance,
                )
            )
        return zones, decisions


def layout_columns(
    templates: list[Template],
    column_width: float,
    column_height: float,
    calculator: ZoneLayoutCalculator,
    align_to_grid: bool = True,
) -> FurnitureLayout:
    """Lay out every column of one furniture instance.

    Args:
        templates: One template per column, left to right.
        column_width: Width of each column.
        column_height: Usable column height, plinth excluded.
        calculator: Family zone calculator.
        align_to_grid: Snap door and drawer boundaries to a master grid.

    Returns:
        The furniture layout with its grid (None when not aligned).
    """
    grid = compute_master_grid(column_height) if align_to_grid else None
    aligner = MasterGridAligner(calculator, grid) if grid is not None else None

    columns: list[AlignedColumn] = []
    for index, template in enumerate(templates):
        zones = calculator.calculate(template, column_height)
        decisions: list[SnapDecision] = []
        if aligner is not None:
            zones, decisions = aligner.align(template, zones)
        columns.append(
            AlignedColumn(
                index=index,
                width=column_width,
                template_id=template.id,
                zones=tuple(zones),
                door_types=tuple(resolve_door_type(d, column_width) for d in template.doors),
                snaps=tuple(decisions),
            )
        )
    return FurnitureLayout(grid=grid, columns=tuple(columns))
