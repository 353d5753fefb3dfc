# jexpense/api/deps.py

from datetime import date
from typing import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from jexpense.core.config import Settings
from jexpense.database import DataAccess
from jexpense.utils.dates import local_today
from jexpense.utils.query_params import normalize_query_string


def get_settings_dep(request: Request) -> Settings:
    return request.app.state.settings


def get_session(request: Request) -> Iterator[Session]:
    with Session(request.app.state.engine) as session:
        yield session


def get_data_access(session: Session = Depends(get_session)) -> DataAccess:
    return DataAccess(session)


def get_today(request: Request) -> date:
    return local_today(request.app.state.zone)


def get_query_params(request: Request) -> dict[str, str]:
    return normalize_query_string(request.url.query)
