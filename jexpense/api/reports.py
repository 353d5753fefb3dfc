# jexpense/api/reports.py

from datetime import date
from typing import List

from fastapi import APIRouter, Depends

from jexpense.api.deps import get_data_access, get_query_params, get_today
from jexpense.database import DataAccess
from jexpense.schemas.report import MonthlyReportEntry, TagReport
from jexpense.schemas.summary import CategoryBreakdown
from jexpense.schemas.transaction import TransactionRead
from jexpense.services.category_summary import categories_by_range
from jexpense.services.income_vs_expense import income_vs_expense_report
from jexpense.services.tag_reports import reports_by_tags, transactions_by_tag_id
from jexpense.utils.query_params import parse_date_range, parse_tag_id, parse_transaction_type

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("/categories", response_model=CategoryBreakdown)
def categories_report(
    params: dict = Depends(get_query_params),
    data: DataAccess = Depends(get_data_access),
):
    """?type=Income|Expense&startDate=YYYY-MM-DD&endDate=YYYY-MM-DD"""
    type_ = parse_transaction_type(params)
    start_date, end_date = parse_date_range(params)
    return categories_by_range(data, type_, start_date, end_date)


@router.get("/income-vs-expense", response_model=List[MonthlyReportEntry])
def income_vs_expense(
    data: DataAccess = Depends(get_data_access),
    today: date = Depends(get_today),
):
    return income_vs_expense_report(data, today)


@router.get("/tags", response_model=List[TagReport])
def tags_report(data: DataAccess = Depends(get_data_access)):
    return reports_by_tags(data)


@router.get("/tags/transactions", response_model=List[TransactionRead])
def tag_transactions(
    params: dict = Depends(get_query_params),
    data: DataAccess = Depends(get_data_access),
):
    """?tagId=<int>"""
    return transactions_by_tag_id(data, parse_tag_id(params))
