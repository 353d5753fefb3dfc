# jexpense/api/dashboard.py

from datetime import date

from fastapi import APIRouter, Depends

from jexpense.api.deps import get_data_access, get_settings_dep, get_today
from jexpense.constants.procedures import Period
from jexpense.core.config import Settings
from jexpense.database import DataAccess
from jexpense.schemas.summary import DashboardSummary
from jexpense.services.dashboard import build_dashboard
from jexpense.services.period_totals import compute_for

router = APIRouter(tags=["dashboard"])


@router.get("/dashboard", response_model=DashboardSummary)
def dashboard(
    data: DataAccess = Depends(get_data_access),
    today: date = Depends(get_today),
    settings: Settings = Depends(get_settings_dep),
):
    return build_dashboard(data, today, settings.top_categories_limit)


# PeriodTotals o MonthlyTotals según el periodo; se serializa tal cual
@router.get("/totals/{period}", response_model=None)
def period_totals(
    period: Period,
    data: DataAccess = Depends(get_data_access),
    today: date = Depends(get_today),
):
    """Totales de un solo periodo; ``month`` incluye el límite diario."""
    return compute_for(data, period, today)
