# jexpense/services/income_vs_expense.py

import calendar
import logging
from datetime import date
from typing import Iterator, List, Optional

from jexpense.database import DataAccess, Filter, Ordering, validate_rows
from jexpense.models.enums import TransactionType
from jexpense.schemas.report import MonthlyReportEntry
from jexpense.schemas.transaction import TransactionDate, TransactionRead
from jexpense.services.category_summary import aggregate_by_category

logger = logging.getLogger(__name__)

_PROJECTION = ["category", "amount", "type", "date"]


def iter_months(start: date, end: date) -> Iterator[tuple[int, int]]:
    """(año, mes) desde el mes de ``start`` hasta el de ``end``, ambos incluidos."""
    year, month = start.year, start.month
    while (year, month) <= (end.year, end.month):
        yield year, month
        if month == 12:
            year, month = year + 1, 1
        else:
            month += 1


def month_bounds(year: int, month: int) -> tuple[date, date]:
    return date(year, month, 1), date(year, month, calendar.monthrange(year, month)[1])


def first_transaction_date(data: DataAccess) -> Optional[date]:
    rows = data.query(
        "transactions",
        order_by=[Ordering("date")],
        limit_range=(0, 0),
        columns=["date"],
    )
    if not rows:
        return None
    return validate_rows(TransactionDate, rows, "transactions")[0].date


def _month_entry(data: DataAccess, entry_id: int, year: int, month: int) -> MonthlyReportEntry:
    first_day, last_day = month_bounds(year, month)
    rows = data.query(
        "transactions",
        filters=[Filter("date", "gte", first_day), Filter("date", "lte", last_day)],
        columns=_PROJECTION,
    )
    transactions = validate_rows(TransactionRead, rows, "transactions")

    income = aggregate_by_category(t for t in transactions if t.type == TransactionType.income)
    expense = aggregate_by_category(t for t in transactions if t.type == TransactionType.expense)

    return MonthlyReportEntry(
        id=entry_id,
        period_key=f"{month:02d}-{year}",
        month_label=calendar.month_abbr[month],
        year=str(year),
        total_income=income.total_amount,
        total_expense=expense.total_amount,
        income_buckets=income.categories,
        expense_buckets=expense.categories,
    )


def build_income_vs_expense_report(
    data: DataAccess, first_date: date, today: date
) -> List[MonthlyReportEntry]:
    """
    Un registro por mes calendario, del mes de ``first_date`` al de ``today``.

    Se hace una consulta por mes, en orden; si una falla, el error sube tal
    cual y no se devuelve ningún resultado parcial.
    """
    report = [
        _month_entry(data, index, year, month)
        for index, (year, month) in enumerate(iter_months(first_date, today), start=1)
    ]
    logger.info("income vs expense report: %d months since %s", len(report), first_date)
    return report


def income_vs_expense_report(data: DataAccess, today: date) -> List[MonthlyReportEntry]:
    first_date = first_transaction_date(data)
    if first_date is None:
        return []
    return build_income_vs_expense_report(data, first_date, today)
