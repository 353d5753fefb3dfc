from dataclasses import dataclass
from enum import Enum


class Period(str, Enum):
    all = "all"
    day = "day"
    week = "week"
    month = "month"
    year = "year"


@dataclass(frozen=True)
class PeriodProcedures:
    income: str
    expense: str


# Los límites de cada periodo los resuelve la base remota
PERIOD_PROCEDURES: dict[Period, PeriodProcedures] = {
    Period.all: PeriodProcedures("get_total_income", "get_total_expenses"),
    Period.day: PeriodProcedures("get_income_current_day", "get_expenses_current_day"),
    Period.week: PeriodProcedures("get_income_current_week", "get_expenses_current_week"),
    Period.month: PeriodProcedures("get_income_current_month", "get_expenses_current_month"),
    Period.year: PeriodProcedures("get_income_current_year", "get_expenses_current_year"),
}

REPORTS_BY_TAGS = "get_reports_by_tags"
TRANSACTIONS_BY_TAG_ID = "get_transactions_by_tag_id"
