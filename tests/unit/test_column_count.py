"""Unit tests for column-count legality and selection."""

import logging

import pytest

from furniture.domain.constraints import (
    BEDSIDE_CONSTRAINTS,
    RACK_CONSTRAINTS,
    STAND_CONSTRAINTS,
    TV_STAND_CONSTRAINTS,
)
from furniture.domain.exceptions import ConstraintTableError
from furniture.domain.services import (
    family_column_fit,
    get_valid_column_counts,
    pick_column_count,
    preference_order,
    resolve_column_count,
)
from furniture.domain.value_objects import (
    ColumnCountRange,
    ColumnDimensions,
    DimensionConstraint,
    FamilyConstraints,
    FurnitureFamily,
    TotalWidthBand,
    TotalWidthRule,
    WidthBand,
)


def _synthetic(rule: TotalWidthRule | None) -> FamilyConstraints:
    return FamilyConstraints(
        family=FurnitureFamily.STAND,
        width=DimensionConstraint(min=40, max=300, default=150),
        height=DimensionConstraint(min=60, max=200, default=100),
        depth=DimensionConstraint(min=30, max=60, default=40),
        plinth_height=DimensionConstraint(min=2, max=10, default=2),
        columns=ColumnCountRange(min=1, max=4, default=1),
        column_width=WidthBand(40, 100),
        total_width_rule=rule,
    )


class TestGetValidColumnCounts:
    """Tests for get_valid_column_counts."""

    def test_covers_every_possible_count(self) -> None:
        """The result has an entry for each count from 1 to 4."""
        validity = get_valid_column_counts(80, 70, 40, 2, STAND_CONSTRAINTS)

        assert sorted(validity) == [1, 2, 3, 4]

    def test_bedside_single_column(self) -> None:
        """A bedside is always one column; wider tables allow no count."""
        validity = get_valid_column_counts(
            70, 50, 40, 2, BEDSIDE_CONSTRAINTS, family_column_fit("bedside")
        )
        too_wide = get_valid_column_counts(
            100, 50, 40, 2, BEDSIDE_CONSTRAINTS, family_column_fit("bedside")
        )

        assert validity == {1: True, 2: False, 3: False, 4: False}
        assert not any(too_wide.values())

    def test_both_checks_must_pass(self) -> None:
        """A count is legal only when the dimension and total width checks agree."""
        rule = TotalWidthRule(bands=(TotalWidthBand(100, 200, frozenset({1})),))

        without_rule = get_valid_column_counts(150, 100, 40, 2, _synthetic(None))
        with_rule = get_valid_column_counts(150, 100, 40, 2, _synthetic(rule))

        # 1 column fails the band, 2 and 3 fail the total width rule
        assert without_rule == {1: False, 2: True, 3: True, 4: False}
        assert with_rule == {1: False, 2: False, 3: False, 4: False}

    def test_column_range_limits_counts(self) -> None:
        """Counts outside the family column range are never legal."""
        validity = get_valid_column_counts(240, 50, 40, 2, BEDSIDE_CONSTRAINTS)

        assert validity[4] is False

    def test_column_fit_predicate(self) -> None:
        """A column nothing can be built in is not legal."""
        validity = get_valid_column_counts(
            80, 30, 40, 2, STAND_CONSTRAINTS, family_column_fit("stand")
        )

        assert validity[1] is True
        validity_shallow = get_valid_column_counts(
            80, 70, 20, 2, STAND_CONSTRAINTS, family_column_fit("stand")
        )
        assert not any(validity_shallow.values())

    def test_tv_stand_bands(self) -> None:
        """TV stand column counts follow the total width rule."""
        validity = get_valid_column_counts(
            110, 45, 40, 2, TV_STAND_CONSTRAINTS, family_column_fit("tv-stand")
        )

        assert validity == {1: False, 2: True, 3: False, 4: False}


class TestFamilyColumnFit:
    """Tests for family_column_fit."""

    def test_template_family_needs_fitting_template(self) -> None:
        """Rack columns wider than every template do not fit."""
        fits = family_column_fit(FurnitureFamily.RACK)

        assert fits(ColumnDimensions(width=80, height=178, depth=35))
        assert not fits(ColumnDimensions(width=120, height=178, depth=35))

    def test_stand_family_needs_valid_type(self) -> None:
        """Stand columns narrower than every type do not fit."""
        fits = family_column_fit("stand")

        assert fits(ColumnDimensions(width=50, height=68, depth=40))
        assert not fits(ColumnDimensions(width=30, height=68, depth=40))


class TestPreferenceOrder:
    """Tests for preference_order."""

    @pytest.mark.parametrize(
        "current,expected",
        [
            (1, [1, 2, 3, 4]),
            (2, [2, 1, 3, 4]),
            (3, [3, 2, 4, 1]),
            (4, [4, 3, 1, 2]),
        ],
    )
    def test_order(self, current: int, expected: list[int]) -> None:
        """Current count first, then one fewer, one more, then ascending."""
        assert preference_order(current) == expected

    def test_out_of_range_current(self) -> None:
        """Counts outside 1-4 are skipped."""
        assert preference_order(5) == [4, 1, 2, 3]


class TestPickColumnCount:
    """Tests for pick_column_count and resolve_column_count."""

    def test_keeps_legal_current(self) -> None:
        """A legal current count is kept."""
        validity = {1: True, 2: True, 3: False, 4: False}

        assert pick_column_count(validity, preference_order(2)) == 2

    def test_prefers_fewer_columns(self) -> None:
        """One column fewer is tried before one more."""
        validity = {1: False, 2: True, 3: False, 4: True}

        assert pick_column_count(validity, preference_order(3)) == 2

    def test_no_legal_count_raises(self) -> None:
        """An all-illegal validity map is a constraint table defect."""
        validity = {1: False, 2: False, 3: False, 4: False}

        with pytest.raises(ConstraintTableError, match="No legal column count"):
            pick_column_count(validity, preference_order(1))

    def test_resolve_switches_and_logs(self, caplog: pytest.LogCaptureFixture) -> None:
        """Switching away from the current count is logged."""
        with caplog.at_level(logging.INFO):
            chosen, validity = resolve_column_count(
                4, 120, 70, 40, 2, STAND_CONSTRAINTS, family_column_fit("stand")
            )

        assert chosen == 3
        assert validity[4] is False
        assert "switching to 3" in caplog.text

    def test_resolve_keeps_legal_count(self, caplog: pytest.LogCaptureFixture) -> None:
        """A legal current count is kept without logging."""
        with caplog.at_level(logging.INFO):
            chosen, _ = resolve_column_count(
                1, 80, 70, 40, 2, STAND_CONSTRAINTS, family_column_fit("stand")
            )

        assert chosen == 1
        assert "switching" not in caplog.text

    def test_resolve_no_legal_count(self) -> None:
        """Dimensions nothing fits in are a constraint table defect."""
        with pytest.raises(ConstraintTableError):
            resolve_column_count(
                1, 80, 70, 20, 2, STAND_CONSTRAINTS, family_column_fit("stand")
            )

    def test_rack_width_rule(self) -> None:
        """A 160 cm rack always splits into two columns."""
        chosen, _ = resolve_column_count(
            1, 160, 180, 35, 2, RACK_CONSTRAINTS, family_column_fit("rack")
        )

        assert chosen == 2
