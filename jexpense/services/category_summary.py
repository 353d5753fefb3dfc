# jexpense/services/category_summary.py

from collections import defaultdict
from collections.abc import Mapping
from datetime import date
from typing import Any, Dict, Iterable

from jexpense.core.errors import ValidationError
from jexpense.database import DataAccess, Filter, validate_rows
from jexpense.models.enums import TransactionType
from jexpense.schemas.summary import CategoryBreakdown, CategorySummary
from jexpense.schemas.transaction import CategoryAmountRow


def _field(row: Any, name: str) -> Any:
    if isinstance(row, Mapping):
        return row[name]
    return getattr(row, name)


def aggregate_by_category(rows: Iterable[Any]) -> CategoryBreakdown:
    """
    Agrupa filas (category, amount) por categoría.

    Las filas ya vienen filtradas por tipo y rango de fechas. El porcentaje
    es 0 cuando el total del grupo es 0. Orden: total descendente y, en
    empate, nombre de categoría ascendente.
    """
    by_category: Dict[str, float] = defaultdict(float)

    for row in rows:
        by_category[_field(row, "category")] += float(_field(row, "amount"))

    buckets = sorted(by_category.items(), key=lambda item: (-item[1], item[0]))
    # El total sale de los buckets, en el mismo orden en que se devuelven
    total_amount = sum(amount for _, amount in buckets)

    summaries = [
        CategorySummary(
            category=name,
            total=amount,
            percentage=(amount / total_amount * 100) if total_amount != 0 else 0.0,
        )
        for name, amount in buckets
    ]

    return CategoryBreakdown(total_amount=total_amount, categories=summaries)


def categories_by_range(
    data: DataAccess,
    type_: TransactionType,
    start_date: date,
    end_date: date,
) -> CategoryBreakdown:
    if start_date > end_date:
        raise ValidationError("startDate must be on or before endDate")

    rows = data.query(
        "transactions",
        filters=[
            Filter("type", "eq", type_),
            Filter("date", "gte", start_date),
            Filter("date", "lte", end_date),
        ],
        columns=["category", "amount"],
    )
    return aggregate_by_category(validate_rows(CategoryAmountRow, rows, "transactions"))


def top_categories(breakdown: CategoryBreakdown, limit: int) -> Dict[str, float]:
    """Primeras ``limit`` categorías como {nombre: total}, en orden descendente."""
    return {c.category: c.total for c in breakdown.categories[:limit]}
