"""Tests for the aggregation functions."""

from dataclasses import replace
from datetime import date, datetime, UTC
from decimal import Decimal

import pytest

from spendview.domain.aggregation import (
    build_aggregate_view,
    calculate_category_totals,
    calculate_monthly_totals,
    calculate_total,
    filter_by_category,
    format_month_label,
    get_recent_expenses,
)
from spendview.domain.entities import EXPENSE_CATEGORIES, MonthlyTotal


class TestTotal:
    """Tests for calculate_total."""

    def test_empty_batch_is_zero(self):
        assert calculate_total([]) == Decimal("0")

    def test_scenario_total(self, scenario_batch):
        assert calculate_total(scenario_batch) == Decimal("35")

    def test_repeated_cents_do_not_drift(self, make_expense):
        batch = [make_expense("0.10") for _ in range(10)]
        assert calculate_total(batch) == Decimal("1.00")

    def test_float_amounts_are_summed_exactly(self, make_expense):
        batch = [replace(make_expense(1), amount=0.1) for _ in range(3)]
        assert calculate_total(batch) == Decimal("0.3")

    def test_non_positive_amounts_sum_arithmetically(self, make_expense):
        batch = [make_expense(10), make_expense(0), make_expense(-4)]
        assert calculate_total(batch) == Decimal("6")


class TestCategoryTotals:
    """Tests for calculate_category_totals."""

    def test_empty_batch(self):
        assert calculate_category_totals([]) == {}

    def test_scenario(self, scenario_batch):
        assert calculate_category_totals(scenario_batch) == {
            "Food": Decimal("30"),
            "Transport": Decimal("5"),
        }

    def test_only_present_categories(self, make_expense):
        totals = calculate_category_totals([make_expense(3, "Healthcare")])
        assert set(totals) == {"Healthcare"}

    def test_unknown_category_is_not_merged_into_other(self, make_expense):
        batch = [
            make_expense(7, "Other"),
            make_expense(11, "Pets"),
            make_expense(2, "food"),
        ]
        totals = calculate_category_totals(batch)
        assert totals == {
            "Other": Decimal("7"),
            "Pets": Decimal("11"),
            "food": Decimal("2"),
        }

    def test_values_sum_to_total(self, make_expense):
        batch = [
            make_expense(amount, category)
            for amount, category in zip(
                ["1.11", "2.22", "3.33", "4.44", "5.55", "6.66", "7.77", "8.88"],
                list(EXPENSE_CATEGORIES) + ["Food"],
            )
        ]
        assert sum(calculate_category_totals(batch).values()) == calculate_total(batch)


class TestMonthlyTotals:
    """Tests for calculate_monthly_totals."""

    def test_scenario_two_months(self, scenario_batch):
        buckets = calculate_monthly_totals(scenario_batch, months=2, now=date(2024, 2, 20))
        assert [(b.label, b.amount) for b in buckets] == [
            ("Jan 2024", Decimal("10")),
            ("Feb 2024", Decimal("25")),
        ]

    def test_empty_batch_is_zero_filled(self):
        buckets = calculate_monthly_totals([], months=6, now=date(2024, 3, 1))
        assert len(buckets) == 6
        assert all(b.amount == Decimal("0") for b in buckets)
        assert [b.label for b in buckets] == [
            "Oct 2023",
            "Nov 2023",
            "Dec 2023",
            "Jan 2024",
            "Feb 2024",
            "Mar 2024",
        ]

    def test_default_window_is_six_months(self):
        assert len(calculate_monthly_totals([], now=date(2024, 6, 30))) == 6

    def test_window_crosses_year_boundary(self, make_expense):
        batch = [make_expense(4, day=date(2023, 12, 31)), make_expense(6, day=date(2024, 1, 1))]
        buckets = calculate_monthly_totals(batch, months=2, now=date(2024, 1, 10))
        assert [(b.year, b.month, b.amount) for b in buckets] == [
            (2023, 12, Decimal("4")),
            (2024, 1, Decimal("6")),
        ]

    def test_records_outside_window_are_dropped(self, make_expense):
        batch = [
            make_expense(100, day=date(2023, 1, 15)),
            make_expense(1, day=date(2024, 2, 1)),
            make_expense(50, day=date(2024, 3, 1)),
        ]
        buckets = calculate_monthly_totals(batch, months=2, now=date(2024, 2, 28))
        assert sum(b.amount for b in buckets) == Decimal("1")
        assert sum(b.amount for b in buckets) <= calculate_total(batch)

    def test_same_month_different_year_is_separate(self, make_expense):
        batch = [make_expense(9, day=date(2023, 2, 10)), make_expense(3, day=date(2024, 2, 10))]
        buckets = calculate_monthly_totals(batch, months=13, now=date(2024, 2, 20))
        by_key = {b.key: b.amount for b in buckets}
        assert by_key[(2023, 2)] == Decimal("9")
        assert by_key[(2024, 2)] == Decimal("3")

    def test_buckets_are_ascending(self):
        buckets = calculate_monthly_totals([], months=14, now=date(2024, 5, 31))
        keys = [b.key for b in buckets]
        assert keys == sorted(keys)
        assert keys[-1] == (2024, 5)

    def test_datetime_records_and_reference(self, make_expense):
        record = make_expense(8)
        record = replace(record, date=datetime(2024, 2, 29, 23, 59, tzinfo=UTC))
        buckets = calculate_monthly_totals(
            [record], months=1, now=datetime(2024, 2, 1, 0, 0, tzinfo=UTC)
        )
        assert buckets == (MonthlyTotal(2024, 2, "Feb 2024", Decimal("8")),)

    def test_defaults_to_today(self):
        buckets = calculate_monthly_totals([], months=1)
        today = date.today()
        assert buckets[0].key == (today.year, today.month)

    @pytest.mark.parametrize("months", [0, -3])
    def test_non_positive_window_is_empty(self, scenario_batch, months):
        assert calculate_monthly_totals(scenario_batch, months=months, now=date(2024, 2, 1)) == ()

    def test_label_format(self):
        assert format_month_label(2024, 1) == "Jan 2024"
        assert format_month_label(1999, 12) == "Dec 1999"


class TestRecent:
    """Tests for get_recent_expenses."""

    def test_first_k_in_input_order(self, scenario_batch):
        assert get_recent_expenses(scenario_batch, 2) == tuple(scenario_batch[:2])

    def test_does_not_sort(self, scenario_batch):
        reversed_batch = list(reversed(scenario_batch))
        assert get_recent_expenses(reversed_batch, 1) == (scenario_batch[-1],)

    @pytest.mark.parametrize("limit", [0, 1, 3, 10])
    def test_length_is_min_of_limit_and_size(self, scenario_batch, limit):
        assert len(get_recent_expenses(scenario_batch, limit)) == min(limit, len(scenario_batch))

    def test_default_limit_is_five(self, make_expense):
        batch = [make_expense(i + 1) for i in range(8)]
        assert get_recent_expenses(batch) == tuple(batch[:5])

    def test_empty_and_negative(self, scenario_batch):
        assert get_recent_expenses([], 5) == ()
        assert get_recent_expenses(scenario_batch, -1) == ()


class TestFilter:
    """Tests for filter_by_category."""

    def test_all_returns_batch_unchanged(self, scenario_batch):
        assert filter_by_category(scenario_batch, "all") == tuple(scenario_batch)

    @pytest.mark.parametrize("category", [None, ""])
    def test_empty_filter_returns_batch(self, scenario_batch, category):
        assert filter_by_category(scenario_batch, category) == tuple(scenario_batch)

    def test_exact_match_only(self, scenario_batch, make_expense):
        batch = scenario_batch + [make_expense(1, "food"), make_expense(2, "Food ")]
        result = filter_by_category(batch, "Food")
        assert [e.amount for e in result] == [Decimal("10"), Decimal("20")]
        assert all(e.category == "Food" for e in result)

    def test_filters_partition_batch(self, scenario_batch, make_expense):
        batch = scenario_batch + [make_expense(3, "Pets"), make_expense(4, "Other")]
        categories = {expense.category for expense in batch}
        pieces = [e for category in categories for e in filter_by_category(batch, category)]
        assert len(pieces) == len(batch)
        assert sorted(e.id for e in pieces) == sorted(e.id for e in batch)

    def test_unknown_category_yields_empty(self, scenario_batch):
        assert filter_by_category(scenario_batch, "Shopping") == ()


class TestAggregateView:
    """Tests for build_aggregate_view."""

    def test_empty_batch(self):
        view = build_aggregate_view([], months=3, now=date(2024, 2, 20))
        assert view.total == Decimal("0")
        assert view.by_category == {}
        assert [amount for _, amount in view.monthly_series()] == [Decimal("0")] * 3
        assert view.recent == ()
        assert view.filtered == ()

    def test_scenario(self, scenario_batch):
        view = build_aggregate_view(
            scenario_batch,
            months=2,
            recent_limit=2,
            category="Transport",
            now=date(2024, 2, 20),
        )
        assert view.total == Decimal("35")
        assert view.by_category == {"Food": Decimal("30"), "Transport": Decimal("5")}
        assert view.monthly_series() == [
            ("Jan 2024", Decimal("10")),
            ("Feb 2024", Decimal("25")),
        ]
        assert view.recent == tuple(scenario_batch[:2])
        assert [e.category for e in view.filtered] == ["Transport"]

    def test_view_is_immutable(self, scenario_batch):
        view = build_aggregate_view(scenario_batch, now=date(2024, 2, 20))
        with pytest.raises(Exception):
            view.total = Decimal("1")
