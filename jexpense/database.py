import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Mapping, Optional, Sequence, Type, TypeVar

import pydantic
from sqlalchemy import Engine, func, select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel, Session, create_engine

from jexpense.core.config import Settings
from jexpense.core.errors import RemoteCallError
from jexpense.models.tag import Tag
from jexpense.models.transaction import Transaction

logger = logging.getLogger(__name__)

# Tablas que se pueden consultar por nombre
TABLES: dict[str, Type[SQLModel]] = {
    "transactions": Transaction,
    "tags": Tag,
}

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

_OPERATORS = {
    "eq": lambda col, value: col == value,
    "neq": lambda col, value: col != value,
    "gt": lambda col, value: col > value,
    "gte": lambda col, value: col >= value,
    "lt": lambda col, value: col < value,
    "lte": lambda col, value: col <= value,
    "in": lambda col, value: col.in_(value),
}

RowSchema = TypeVar("RowSchema", bound=pydantic.BaseModel)


@dataclass(frozen=True)
class Filter:
    column: str
    op: str
    value: Any


@dataclass(frozen=True)
class Ordering:
    column: str
    ascending: bool = True


def create_db_engine(settings: Settings) -> Engine:
    connect_args: dict[str, object] = {}
    if settings.database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(
        settings.database_url, echo=settings.sql_echo, connect_args=connect_args
    )


def _bind_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_bind_value(v) for v in value]
    return value


def _check_identifier(name: str, source: str) -> str:
    if not _IDENTIFIER.match(name):
        raise RemoteCallError(source, f"invalid identifier {name!r}")
    return name


class DataAccess:
    """
    Fachada sobre la base remota: procedimientos almacenados por nombre y
    consultas filtradas sobre tablas. Cualquier fallo sale como
    ``RemoteCallError`` con el nombre del procedimiento o tabla.
    """

    def __init__(self, session: Session):
        self.session = session

    def run_procedure(self, name: str, args: Optional[Mapping[str, Any]] = None) -> Any:
        """Ejecuta un procedimiento que devuelve un escalar."""
        _check_identifier(name, name)
        params = [_bind_value(v) for v in (args or {}).values()]
        statement = select(getattr(func, name)(*params))
        try:
            return self.session.exec(statement).scalar_one()
        except SQLAlchemyError as exc:
            logger.warning("procedure %s failed: %s", name, exc)
            raise RemoteCallError(name, str(exc)) from exc

    def run_procedure_rows(
        self, name: str, args: Optional[Mapping[str, Any]] = None
    ) -> list[dict]:
        """Ejecuta un procedimiento que devuelve filas (``SELECT * FROM name(...)``)."""
        _check_identifier(name, name)
        args = dict(args or {})
        for key in args:
            _check_identifier(key, name)
        placeholders = ", ".join(f":{key}" for key in args)
        statement = text(f"SELECT * FROM {name}({placeholders})").bindparams(
            **{key: _bind_value(value) for key, value in args.items()}
        )
        try:
            return [dict(row) for row in self.session.exec(statement).mappings().all()]
        except SQLAlchemyError as exc:
            logger.warning("procedure %s failed: %s", name, exc)
            raise RemoteCallError(name, str(exc)) from exc

    def query(
        self,
        table: str,
        filters: Iterable[Filter] = (),
        order_by: Optional[Sequence[Ordering]] = None,
        limit_range: Optional[tuple[int, int]] = None,
        columns: Optional[Sequence[str]] = None,
    ) -> list[dict]:
        """
        Consulta una tabla. ``limit_range`` es (inicio, fin) inclusivo sobre
        el orden de las filas, como ``range(0, 9)`` para las 10 primeras.
        """
        model = TABLES.get(table)
        if model is None:
            raise RemoteCallError(table, "unknown table")
        sa_table = model.__table__

        try:
            selected = [sa_table.c[c] for c in columns] if columns else list(sa_table.c)
            statement = select(*selected)
            for f in filters:
                operator = _OPERATORS.get(f.op)
                if operator is None:
                    raise RemoteCallError(table, f"unsupported operator {f.op!r}")
                statement = statement.where(operator(sa_table.c[f.column], _bind_value(f.value)))
            for ordering in order_by or ():
                column = sa_table.c[ordering.column]
                statement = statement.order_by(column.asc() if ordering.ascending else column.desc())
        except KeyError as exc:
            raise RemoteCallError(table, f"unknown column {exc.args[0]!r}") from exc

        if limit_range is not None:
            start, end = limit_range
            statement = statement.offset(start).limit(max(end - start + 1, 0))

        try:
            return [dict(row) for row in self.session.exec(statement).mappings().all()]
        except SQLAlchemyError as exc:
            logger.warning("query on %s failed: %s", table, exc)
            raise RemoteCallError(table, str(exc)) from exc


def validate_rows(
    schema: Type[RowSchema], rows: Iterable[Mapping[str, Any]], source: str
) -> list[RowSchema]:
    """Valida filas remotas contra un esquema; una fila mal formada aborta todo."""
    try:
        return [schema.model_validate(row) for row in rows]
    except pydantic.ValidationError as exc:
        logger.warning("malformed rows from %s: %s", source, exc)
        raise RemoteCallError(source, f"malformed row ({exc.error_count()} errors)") from exc
