from sqlmodel import AutoString, SQLModel, Field
from typing import Optional
import datetime as dt

from jexpense.models.enums import TransactionType


class Transaction(SQLModel, table=True):
    __tablename__ = "transactions"

    id: Optional[int] = Field(default=None, primary_key=True)
    category: str = Field(index=True)
    amount: float
    # Se guarda el valor ("Income"/"Expense"), igual que en la base remota
    type: TransactionType = Field(sa_type=AutoString, index=True)
    date: dt.date = Field(index=True)
    description: Optional[str] = None
    payee: Optional[str] = None
