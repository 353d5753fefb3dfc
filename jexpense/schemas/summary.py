# jexpense/schemas/summary.py

from pydantic import Field, computed_field
from typing import Dict, List

from jexpense.schemas.base import CamelModel


class PeriodTotals(CamelModel):
    total_income: float = 0.0
    total_expenses: float = 0.0

    @computed_field(alias="totalBalance")
    @property
    def total_balance(self) -> float:
        return self.total_income - self.total_expenses


class MonthlyTotals(PeriodTotals):
    # Días que quedan en el mes, contando hoy
    remaining_days: int = Field(default=1, ge=1)

    @computed_field(alias="dailyLimit")
    @property
    def daily_limit(self) -> float:
        return self.total_balance / max(self.remaining_days, 1)


class CategorySummary(CamelModel):
    category: str
    total: float
    percentage: float


class CategoryBreakdown(CamelModel):
    total_amount: float = 0.0
    categories: List[CategorySummary] = Field(default_factory=list)


class DashboardSummary(CamelModel):
    total_data: PeriodTotals
    today_data: PeriodTotals
    week_data: PeriodTotals
    month_data: MonthlyTotals
    year_data: PeriodTotals
    top_categories_month: Dict[str, float]
    top_categories_year: Dict[str, float]
