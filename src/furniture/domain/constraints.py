"""Dimension constraint tables for every furniture family.

The tables are pure data declared at import time. A ConstraintRegistry
groups them so callers can swap in overrides loaded from a file without
touching the module-level defaults.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass

from .value_objects import (
    ColumnCountRange,
    DimensionConstraint,
    FamilyConstraints,
    FurnitureFamily,
    TotalWidthBand,
    TotalWidthRule,
    WidthBand,
)

DEFAULT_COLOR = "#baa397"

_PLINTH = DimensionConstraint(min=2, max=10, default=2)

BEDSIDE_WIDTH_RULE = TotalWidthRule(bands=(TotalWidthBand(40, 80, frozenset({1})),))

TV_STAND_WIDTH_RULE = TotalWidthRule(
    bands=(
        TotalWidthBand(80, 100, frozenset({1, 2})),
        TotalWidthBand(101, 120, frozenset({2})),
        TotalWidthBand(121, 159, frozenset({2, 3})),
        TotalWidthBand(160, 200, frozenset({2, 3, 4})),
        TotalWidthBand(201, 270, frozenset({3, 4})),
    )
)

RACK_WIDTH_RULE = TotalWidthRule(
    bands=(
        TotalWidthBand(40, 80, frozenset({1})),
        TotalWidthBand(81, 160, frozenset({2})),
        TotalWidthBand(161, 240, frozenset({3})),
    )
)

STAND_CONSTRAINTS = FamilyConstraints(
    family=FurnitureFamily.STAND,
    width=DimensionConstraint(min=50, max=120, default=80),
    height=DimensionConstraint(min=70, max=130, default=70, step=5),
    depth=DimensionConstraint(min=35, max=50, default=40),
    plinth_height=_PLINTH,
    columns=ColumnCountRange(min=1, max=4, default=1),
    column_width=WidthBand(40, 120),
    plinth_in_query=True,
)

BEDSIDE_CONSTRAINTS = FamilyConstraints(
    family=FurnitureFamily.BEDSIDE,
    width=DimensionConstraint(min=40, max=80, default=60),
    height=DimensionConstraint(min=30, max=60, default=40),
    depth=DimensionConstraint(min=35, max=50, default=40),
    plinth_height=_PLINTH,
    columns=ColumnCountRange(min=1, max=3, default=1),
    column_width=WidthBand(40, 80),
    total_width_rule=BEDSIDE_WIDTH_RULE,
)

TV_STAND_CONSTRAINTS = FamilyConstraints(
    family=FurnitureFamily.TV_STAND,
    width=DimensionConstraint(min=80, max=240, default=160),
    height=DimensionConstraint(min=40, max=60, default=45),
    depth=DimensionConstraint(min=35, max=50, default=40),
    plinth_height=_PLINTH,
    columns=ColumnCountRange(min=1, max=4, default=2),
    column_width=WidthBand(40, 120),
    total_width_rule=TV_STAND_WIDTH_RULE,
)

WARDROBE_CONSTRAINTS = FamilyConstraints(
    family=FurnitureFamily.WARDROBE,
    width=DimensionConstraint(min=40, max=300, default=150),
    height=DimensionConstraint(min=180, max=260, default=240),
    depth=DimensionConstraint(min=50, max=65, default=60),
    plinth_height=_PLINTH,
    columns=ColumnCountRange(min=1, max=4, default=2),
)

RACK_CONSTRAINTS = FamilyConstraints(
    family=FurnitureFamily.RACK,
    width=DimensionConstraint(min=40, max=240, default=80),
    height=DimensionConstraint(min=60, max=260, default=180),
    depth=DimensionConstraint(min=25, max=45, default=35),
    plinth_height=_PLINTH,
    columns=ColumnCountRange(min=1, max=4, default=1),
    column_width=WidthBand(40, 80),
    total_width_rule=RACK_WIDTH_RULE,
)

BOOKCASE_CONSTRAINTS = FamilyConstraints(
    family=FurnitureFamily.BOOKCASE,
    width=DimensionConstraint(min=40, max=240, default=80),
    height=DimensionConstraint(min=60, max=260, default=180),
    depth=DimensionConstraint(min=25, max=45, default=35),
    plinth_height=_PLINTH,
    columns=ColumnCountRange(min=1, max=4, default=1),
    column_width=WidthBand(40, 80),
    total_width_rule=RACK_WIDTH_RULE,
)

SHOE_RACK_CONSTRAINTS = FamilyConstraints(
    family=FurnitureFamily.SHOE_RACK,
    width=DimensionConstraint(min=40, max=200, default=80),
    height=DimensionConstraint(min=30, max=200, default=90),
    depth=DimensionConstraint(min=25, max=40, default=30),
    plinth_height=_PLINTH,
    columns=ColumnCountRange(min=1, max=4, default=1),
)


@dataclass(frozen=True)
class ConstraintRegistry:
    """Read-only lookup of family constraints."""

    tables: Mapping[FurnitureFamily, FamilyConstraints]

    def get(self, family: FurnitureFamily | str) -> FamilyConstraints:
        """Return the constraints for a family.

        Raises:
            KeyError: If the family has no table.
        """
        return self.tables[FurnitureFamily(family)]

    def __iter__(self) -> Iterator[FamilyConstraints]:
        return iter(self.tables.values())

    def __contains__(self, family: object) -> bool:
        return family in self.tables

    def with_overrides(
        self, overrides: Mapping[FurnitureFamily, FamilyConstraints]
    ) -> "ConstraintRegistry":
        """Return a new registry with some family tables replaced."""
        merged = dict(self.tables)
        merged.update(overrides)
        return ConstraintRegistry(tables=merged)


DEFAULT_REGISTRY = ConstraintRegistry(
    tables={
        table.family: table
        for table in (
            STAND_CONSTRAINTS,
            BEDSIDE_CONSTRAINTS,
            TV_STAND_CONSTRAINTS,
            WARDROBE_CONSTRAINTS,
            RACK_CONSTRAINTS,
            BOOKCASE_CONSTRAINTS,
            SHOE_RACK_CONSTRAINTS,
        )
    }
)


def get_family_constraints(family: FurnitureFamily | str) -> FamilyConstraints:
    """Return the built-in constraints for a family."""
    return DEFAULT_REGISTRY.get(family)
