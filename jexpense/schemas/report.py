# jexpense/schemas/report.py

from pydantic import ConfigDict
from typing import List

from jexpense.schemas.base import CamelModel
from jexpense.schemas.summary import CategorySummary


class MonthlyReportEntry(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: int
    period_key: str  # "MM-YYYY"
    month_label: str  # "Jan", "Feb", ...
    year: str
    total_income: float
    total_expense: float
    income_buckets: List[CategorySummary]
    expense_buckets: List[CategorySummary]


class TagReport(CamelModel):
    id: int
    tag_id: int
    tag_name: str
    amount: float
