import datetime as dt
from typing import Optional

from jexpense.models.enums import TransactionType
from jexpense.schemas.base import CamelModel


class TransactionRead(CamelModel):
    id: Optional[int] = None
    category: str
    amount: float
    type: TransactionType
    date: dt.date
    description: Optional[str] = None
    payee: Optional[str] = None


class CategoryAmountRow(CamelModel):
    """Proyección mínima (category, amount) que consume el agregador."""

    category: str
    amount: float


class TransactionDate(CamelModel):
    date: dt.date
