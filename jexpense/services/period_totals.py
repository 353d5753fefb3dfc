# jexpense/services/period_totals.py

import calendar
import logging
from datetime import date

from jexpense.constants.procedures import PERIOD_PROCEDURES, Period, PeriodProcedures
from jexpense.database import DataAccess
from jexpense.schemas.summary import MonthlyTotals, PeriodTotals

logger = logging.getLogger(__name__)


def _fetch_totals(data: DataAccess, procedures: PeriodProcedures) -> tuple[float, float]:
    # Primero ingresos, luego egresos; un fallo aborta ambos
    income = data.run_procedure(procedures.income) or 0
    expense = data.run_procedure(procedures.expense) or 0
    return float(income), float(expense)


def remaining_days_in_month(today: date) -> int:
    """Días restantes del mes incluyendo hoy (mínimo 1)."""
    days_in_month = calendar.monthrange(today.year, today.month)[1]
    return max(days_in_month - today.day + 1, 1)


def compute_period(data: DataAccess, procedures: PeriodProcedures) -> PeriodTotals:
    income, expense = _fetch_totals(data, procedures)
    return PeriodTotals(total_income=income, total_expenses=expense)


def compute_month(data: DataAccess, procedures: PeriodProcedures, today: date) -> MonthlyTotals:
    income, expense = _fetch_totals(data, procedures)
    totals = MonthlyTotals(
        total_income=income,
        total_expenses=expense,
        remaining_days=remaining_days_in_month(today),
    )
    logger.debug(
        "month totals: balance=%s remaining_days=%s daily_limit=%s",
        totals.total_balance, totals.remaining_days, totals.daily_limit,
    )
    return totals


def compute_for(data: DataAccess, period: Period, today: date) -> PeriodTotals:
    procedures = PERIOD_PROCEDURES[period]
    if period == Period.month:
        return compute_month(data, procedures, today)
    return compute_period(data, procedures)
