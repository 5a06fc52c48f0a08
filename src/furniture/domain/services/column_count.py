"""Column-count legality and fallback selection."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from ..column_rules import rules_for_family
from ..exceptions import ConstraintTableError
from ..templates import get_template_catalog, has_template_catalog
from ..value_objects import (
    POSSIBLE_COLUMN_COUNTS,
    ColumnDimensions,
    FamilyConstraints,
    FurnitureFamily,
)

logger = logging.getLogger(__name__)

ColumnFitPredicate = Callable[[ColumnDimensions], bool]


def family_column_fit(family: FurnitureFamily | str) -> ColumnFitPredicate:
    """Predicate telling whether anything can be built in a column.

    Template families need at least one template that fits the column;
    the others need at least one valid configuration type.
    """
    family = FurnitureFamily(family)
    if has_template_catalog(family):
        catalog = get_template_catalog(family)
        return lambda dims: bool(catalog.valid_templates(dims.width, dims.height))
    rules = rules_for_family(family)
    return lambda dims: bool(rules.valid_types(dims))


def get_valid_column_counts(
    width: float,
    height: float,
    depth: float,
    plinth_height: float,
    constraints: FamilyConstraints,
    column_fits: ColumnFitPredicate | None = None,
) -> dict[int, bool]:
    """Compute which column counts are legal for the given dimensions.

    A count is legal only when both checks pass:

    1. Dimensions: the count is inside the family's column range, the
       per-column width lies in the family's column width band, and, when
       a `column_fits` predicate is given, something can be built in the
       resulting column.
    2. Total width: the family's total width rule, if any, allows the count.

    Args:
        width: Total furniture width.
        height: Total furniture height, plinth included.
        depth: Furniture depth.
        plinth_height: Plinth height.
        constraints: The family's dimension table.
        column_fits: Optional extra column predicate.

    Returns:
        Mapping of every count in 1..4 to its legality.
    """
    validity: dict[int, bool] = {}
    for count in POSSIBLE_COLUMN_COUNTS:
        dims = constraints.column_dimensions(width, height, depth, plinth_height, count)
        dimension_ok = (
            constraints.columns.contains(count)
            and constraints.column_width.contains(dims.width)
            and (column_fits is None or column_fits(dims))
        )
        rule = constraints.total_width_rule
        width_rule_ok = rule is None or rule.allows(count, width)
        validity[count] = dimension_ok and width_rule_ok
    return validity


def preference_order(current: int) -> list[int]:
    """Ordered column counts to try: current, current-1, current+1, then 1..4."""
    order: list[int] = []
    for count in (current, current - 1, current + 1, *POSSIBLE_COLUMN_COUNTS):
        if count in POSSIBLE_COLUMN_COUNTS and count not in order:
            order.append(count)
    return order


def pick_column_count(validity: dict[int, bool], preferences: Iterable[int]) -> int:
    """Return the first legal count in preference order.

    Raises:
        ConstraintTableError: If no preferred count is legal.
    """
    preferences = list(preferences)
    for count in preferences:
        if validity.get(count, False):
            return count
    raise ConstraintTableError(
        f"No legal column count among {preferences}: {validity}"
    )


def resolve_column_count(
    current: int,
    width: float,
    height: float,
    depth: float,
    plinth_height: float,
    constraints: FamilyConstraints,
    column_fits: ColumnFitPredicate | None = None,
) -> tuple[int, dict[int, bool]]:
    """Keep the current count if legal, otherwise pick the closest legal one.

    Returns:
        The chosen count and the legality map it was picked from.

    Raises:
        ConstraintTableError: If no count is legal for the dimensions.
    """
    validity = get_valid_column_counts(
        width, height, depth, plinth_height, constraints, column_fits
    )
    chosen = pick_column_count(validity, preference_order(current))
    if chosen != current:
        logger.info(
            f"Column count {current} is not legal for {constraints.family.value} "
            f"width {width}, switching to {chosen}"
        )
    return chosen, validity
