from datetime import date
from typing import Optional

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from jexpense.core.errors import RemoteCallError
from jexpense.database import DataAccess
from jexpense.models.enums import TransactionType
from jexpense.models.tag import Tag
from jexpense.models.transaction import Transaction


class StubbedDataAccess(DataAccess):
    """DataAccess real para las tablas; los procedimientos remotos se simulan."""

    def __init__(self, session: Session, procedures=None, row_procedures=None):
        super().__init__(session)
        self.procedures = dict(procedures or {})
        self.row_procedures = dict(row_procedures or {})
        self.calls: list[tuple[str, dict]] = []
        self.query_count = 0
        self.fail_on_query: Optional[int] = None

    def _lookup(self, registry: dict, name: str, args):
        self.calls.append((name, dict(args or {})))
        if name not in registry:
            raise RemoteCallError(name, "function does not exist")
        value = registry[name]
        if isinstance(value, Exception):
            raise value
        return value

    def run_procedure(self, name, args=None):
        return self._lookup(self.procedures, name, args)

    def run_procedure_rows(self, name, args=None):
        return self._lookup(self.row_procedures, name, args)

    def query(self, table, *args, **kwargs):
        self.query_count += 1
        if self.fail_on_query == self.query_count:
            raise RemoteCallError(table, "connection reset")
        return super().query(table, *args, **kwargs)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def data(session) -> StubbedDataAccess:
    return StubbedDataAccess(session)


def add_transaction(
    session: Session,
    category: str,
    amount: float,
    type_: TransactionType,
    day: date,
) -> Transaction:
    txn = Transaction(category=category, amount=amount, type=type_, date=day)
    session.add(txn)
    session.commit()
    session.refresh(txn)
    return txn


def add_tag(session: Session, name: str) -> Tag:
    tag = Tag(name=name)
    session.add(tag)
    session.commit()
    session.refresh(tag)
    return tag
