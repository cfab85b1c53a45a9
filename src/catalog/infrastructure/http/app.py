"""FastAPI application factory and setup."""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from loguru import logger
from starlette.responses import JSONResponse

from catalog.domain.exceptions import StoreUnavailableError
from catalog.domain.repository.product_repository import ProductRepository
from catalog.infrastructure.bootstrap import product_repository
from catalog.infrastructure.config import Settings, get_settings
from catalog.infrastructure.http.problems import server_error_problem, validation_problem
from catalog.infrastructure.http.products import router as products_router
from catalog.infrastructure.logging_config import configure_logging

_REQUEST_LOCATIONS = {"body", "path", "query"}


def create_app(
    settings: Settings | None = None,
    product_repo: ProductRepository | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    ``product_repo`` overrides the store the composition root would build
    from ``settings``; tests use it to hand in a prepared store.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    if product_repo is None:
        product_repo = product_repository(settings)
    app.state.product_repo = product_repo

    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(StoreUnavailableError, _store_unavailable_handler)
    app.include_router(products_router)

    data_store = "SQL Database" if settings.store_backend == "sql" else "In-Memory"

    @app.get("/", tags=["Info"], include_in_schema=False)
    def root() -> dict[str, str]:
        return {
            "name": settings.project_name,
            "version": settings.api_version,
            "status": "Running",
            "dataStore": data_store,
            "documentation": "/docs",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    @app.get("/health", tags=["Info"])
    def health() -> dict[str, str]:
        return {"status": "Healthy"}

    logger.info("Application ready ({} store)", data_store)
    return app


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report unparsable input in the same shape as rule failures."""
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] in _REQUEST_LOCATIONS:
            loc = loc[1:]
        if error.get("type") == "json_invalid":
            field = "body"
        else:
            field = ".".join(loc) or "body"
        errors.setdefault(field, []).append(error.get("msg", "Invalid value"))
    return validation_problem(errors)


async def _store_unavailable_handler(request: Request, exc: StoreUnavailableError) -> JSONResponse:
    logger.error(
        "{} {} failed: store unavailable during {} (product id: {})",
        request.method,
        request.url.path,
        exc.operation,
        exc.product_id,
    )
    return server_error_problem()
