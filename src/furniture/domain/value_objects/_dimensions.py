"""Dimension constraints and family constraint tables."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from ._configuration import FurnitureFamily

# Column counts the engine ever considers, regardless of family range.
POSSIBLE_COLUMN_COUNTS: tuple[int, ...] = (1, 2, 3, 4)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives.

    Python's round() uses banker's rounding, which would make 2.5 -> 2.
    """
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class DimensionConstraint:
    """Allowed range for a single numeric axis, in centimetres.

    Attributes:
        min: Smallest allowed value (inclusive).
        max: Largest allowed value (inclusive).
        default: Value used when the axis is not provided.
        step: Values are snapped to multiples of this step.
    """

    min: int
    max: int
    default: int
    step: int = 1

    def __post_init__(self) -> None:
        if self.min > self.max:
            raise ValueError("Dimension min must not exceed max")
        if self.step <= 0:
            raise ValueError("Dimension step must be positive")

    def contains(self, value: float) -> bool:
        """Check whether a value lies inside [min, max]."""
        return self.min <= value <= self.max

    def clamp(self, value: float) -> float:
        """Clamp a value into [min, max]."""
        return min(self.max, max(self.min, value))

    def snap(self, value: float) -> int:
        """Snap a value to the nearest multiple of step (round-half-up)."""
        return round_half_up(value / self.step) * self.step

    def normalize(self, value: float) -> int:
        """Clamp, snap, then clamp again.

        The second clamp keeps the result in range when the step does not
        evenly divide the range boundaries.
        """
        return int(self.clamp(self.snap(self.clamp(value))))


@dataclass(frozen=True)
class ColumnCountRange:
    """Allowed column counts for a family."""

    min: int
    max: int
    default: int

    def __post_init__(self) -> None:
        if self.min < 1 or self.min > self.max:
            raise ValueError("Column count range must satisfy 1 <= min <= max")

    def contains(self, count: int) -> bool:
        return self.min <= count <= self.max

    def clamp(self, count: int) -> int:
        return min(self.max, max(self.min, count))


@dataclass(frozen=True)
class WidthBand:
    """Inclusive width range for a single column."""

    min: float
    max: float

    def contains(self, width: float) -> bool:
        return self.min <= width <= self.max


@dataclass(frozen=True)
class TotalWidthBand:
    """Column counts allowed while the total width lies in [min_width, max_width]."""

    min_width: float
    max_width: float
    counts: frozenset[int]


@dataclass(frozen=True)
class TotalWidthRule:
    """Family-specific mapping from total width to allowed column counts.

    A width outside every band allows no count at all.
    """

    bands: tuple[TotalWidthBand, ...]

    def allowed_counts(self, total_width: float) -> frozenset[int]:
        """Return the counts allowed at this total width."""
        for band in self.bands:
            if band.min_width <= total_width <= band.max_width:
                return band.counts
        return frozenset()

    def allows(self, count: int, total_width: float) -> bool:
        return count in self.allowed_counts(total_width)


@dataclass(frozen=True)
class ColumnDimensions:
    """Interior dimensions of one column."""

    width: float
    height: float
    depth: float


@dataclass(frozen=True)
class FamilyConstraints:
    """Dimension table for one furniture family.

    Attributes:
        family: The family these constraints belong to.
        width: Total width constraint.
        height: Total height constraint, plinth included.
        depth: Depth constraint.
        plinth_height: Plinth height constraint.
        columns: Allowed column counts.
        column_width: Per-column width band used by the column-count validator.
        total_width_rule: Optional family-specific total width rule.
        plinth_in_query: Whether plinth height travels in shareable links.
    """

    family: FurnitureFamily
    width: DimensionConstraint
    height: DimensionConstraint
    depth: DimensionConstraint
    plinth_height: DimensionConstraint
    columns: ColumnCountRange
    column_width: WidthBand = field(default_factory=lambda: WidthBand(40, 100))
    total_width_rule: TotalWidthRule | None = None
    plinth_in_query: bool = False

    def column_dimensions(
        self, width: float, height: float, depth: float, plinth_height: float, count: int
    ) -> ColumnDimensions:
        """Dimensions of one column when the furniture is split into `count` columns."""
        return ColumnDimensions(
            width=width / count,
            height=height - plinth_height,
            depth=depth,
        )
