# jexpense/services/dashboard.py

from datetime import date

from jexpense.constants.procedures import PERIOD_PROCEDURES, Period
from jexpense.database import DataAccess
from jexpense.models.enums import TransactionType
from jexpense.schemas.summary import DashboardSummary
from jexpense.services.category_summary import categories_by_range, top_categories
from jexpense.services.income_vs_expense import month_bounds
from jexpense.services.period_totals import compute_month, compute_period


def build_dashboard(data: DataAccess, today: date, top_limit: int = 5) -> DashboardSummary:
    """Totales de cada periodo más las categorías de gasto con mayor peso del mes y del año."""
    total_data = compute_period(data, PERIOD_PROCEDURES[Period.all])
    today_data = compute_period(data, PERIOD_PROCEDURES[Period.day])
    week_data = compute_period(data, PERIOD_PROCEDURES[Period.week])
    month_data = compute_month(data, PERIOD_PROCEDURES[Period.month], today)
    year_data = compute_period(data, PERIOD_PROCEDURES[Period.year])

    month_start, month_end = month_bounds(today.year, today.month)
    month_categories = categories_by_range(data, TransactionType.expense, month_start, month_end)
    year_categories = categories_by_range(
        data, TransactionType.expense, date(today.year, 1, 1), date(today.year, 12, 31)
    )

    return DashboardSummary(
        total_data=total_data,
        today_data=today_data,
        week_data=week_data,
        month_data=month_data,
        year_data=year_data,
        top_categories_month=top_categories(month_categories, top_limit),
        top_categories_year=top_categories(year_categories, top_limit),
    )
