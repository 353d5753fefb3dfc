import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from jexpense.api import dashboard, reports
from jexpense.core.config import Settings, get_settings
from jexpense.core.errors import JExpenseError
from jexpense.core.logging_setup import configure_logging
from jexpense.database import create_db_engine
from jexpense.utils.dates import resolve_zone

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        app.state.engine.dispose()

    app = FastAPI(title="jexpense", lifespan=lifespan)
    app.state.settings = settings
    # Una zona horaria inválida falla al arrancar, no en cada request
    app.state.zone = resolve_zone(settings.timezone)
    app.state.engine = create_db_engine(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.info("Received request for: %s", request.url.path)
        return await call_next(request)

    @app.exception_handler(JExpenseError)
    async def domain_error_handler(request: Request, exc: JExpenseError):
        if exc.status_code >= 500:
            logger.error("%s failed: %s", request.url.path, exc.message)
        return _error(exc.status_code, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            logger.info("Invalid endpoint requested: %s", request.url.path)
            return _error(404, "Invalid endpoint")
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return _error(400, "; ".join(str(e.get("msg")) for e in exc.errors()))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s", request.url.path)
        return _error(500, str(exc))

    app.include_router(dashboard.router, prefix=settings.route_prefix)
    app.include_router(reports.router, prefix=settings.route_prefix)

    @app.get("/")
    def root():
        return {"message": "jexpense reporting API"}

    return app
