from datetime import date

import pytest

from jexpense.core.errors import ValidationError
from jexpense.models.enums import TransactionType
from jexpense.services.category_summary import (
    aggregate_by_category,
    categories_by_range,
    top_categories,
)

from conftest import add_transaction


def test_groups_rows_and_sorts_descending() -> None:
    rows = [
        {"category": "Food", "amount": 100},
        {"category": "Rent", "amount": 400},
        {"category": "Food", "amount": 50},
    ]

    result = aggregate_by_category(rows)

    assert result.total_amount == 550
    assert [c.category for c in result.categories] == ["Rent", "Food"]
    assert [c.total for c in result.categories] == [400, 150]
    assert result.categories[0].percentage == pytest.approx(72.7272727, rel=1e-6)
    assert result.categories[1].percentage == pytest.approx(27.2727272, rel=1e-6)


def test_bucket_totals_and_percentages_add_up() -> None:
    rows = [
        {"category": name, "amount": amount}
        for name, amount in [
            ("Food", 12.5), ("Fuel", 40), ("Food", 7.5), ("Gym", 30),
            ("Fuel", 10), ("Books", 0), ("Gym", 3),
        ]
    ]

    result = aggregate_by_category(rows)

    assert sum(c.total for c in result.categories) == sum(r["amount"] for r in rows)
    assert sum(c.percentage for c in result.categories) == pytest.approx(100, abs=1e-9)
    totals = [c.total for c in result.categories]
    assert totals == sorted(totals, reverse=True)


def test_ties_are_ordered_by_category_name() -> None:
    rows = [
        {"category": "Travel", "amount": 20},
        {"category": "Books", "amount": 20},
        {"category": "Music", "amount": 20},
    ]

    result = aggregate_by_category(rows)

    assert [c.category for c in result.categories] == ["Books", "Music", "Travel"]


def test_empty_rows_give_zero_total() -> None:
    result = aggregate_by_category([])

    assert result.total_amount == 0
    assert result.categories == []


def test_zero_total_gives_zero_percentage() -> None:
    result = aggregate_by_category(
        [{"category": "Gift", "amount": 0}, {"category": "Refund", "amount": 0}]
    )

    assert result.total_amount == 0
    assert [c.percentage for c in result.categories] == [0.0, 0.0]


def test_categories_by_range_filters_type_and_dates(session, data) -> None:
    add_transaction(session, "Food", 30, TransactionType.expense, date(2025, 3, 1))
    add_transaction(session, "Food", 20, TransactionType.expense, date(2025, 3, 31))
    add_transaction(session, "Rent", 500, TransactionType.expense, date(2025, 2, 28))
    add_transaction(session, "Salary", 2000, TransactionType.income, date(2025, 3, 15))

    result = categories_by_range(
        data, TransactionType.expense, date(2025, 3, 1), date(2025, 3, 31)
    )

    assert result.total_amount == 50
    assert [(c.category, c.total, c.percentage) for c in result.categories] == [
        ("Food", 50, 100.0)
    ]


def test_categories_by_range_rejects_inverted_range(data) -> None:
    with pytest.raises(ValidationError):
        categories_by_range(
            data, TransactionType.income, date(2025, 4, 1), date(2025, 3, 1)
        )


def test_top_categories_keeps_the_largest() -> None:
    breakdown = aggregate_by_category(
        [
            {"category": "Loans", "amount": 1000},
            {"category": "Shopping", "amount": 2000},
            {"category": "Coffee", "amount": 15},
        ]
    )

    assert top_categories(breakdown, 2) == {"Shopping": 2000, "Loans": 1000}


def test_total_matches_bucket_sum_for_inexact_amounts() -> None:
    rows = [
        {"category": "A", "amount": 0.1},
        {"category": "B", "amount": 0.2},
        {"category": "C", "amount": 0.3},
        {"category": "A", "amount": 0.7},
        {"category": "D", "amount": 1.1},
    ]

    result = aggregate_by_category(rows)

    assert sum(c.total for c in result.categories) == result.total_amount
    assert sum(c.percentage for c in result.categories) == pytest.approx(100, abs=1e-9)
