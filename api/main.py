"""FastAPI application for the Paddock API."""

from contextlib import asynccontextmanager

import fastapi
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from core.config import get_settings
from core.database import (
    create_engine,
    create_session_maker,
    dispose_engine,
    init_db,
)
from core.logger import configure_logging, get_logger
from core.middleware import RequestContextMiddleware
from repositories.exceptions import ConstraintViolationError
from routes import (
    addresses_router,
    cars_router,
    classes_router,
    drivers_router,
    health_router,
    race_results_router,
    races_router,
    teams_router,
)
from services.crud import EntityNotFoundError

_settings = get_settings()

configure_logging(level=_settings.log_level, log_format=_settings.log_format)
logger = get_logger(__name__)


async def not_found_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render a missing entity as 404."""
    if not isinstance(exc, EntityNotFoundError):
        return JSONResponse(status_code=500, content={"detail": "Unexpected error"})

    logger.info(
        "entity.not_found",
        entity=exc.entity,
        entity_id=exc.entity_id,
        path=request.url.path,
        method=request.method,
    )
    return JSONResponse(status_code=404, content={"detail": f"{exc.entity} not found"})


async def constraint_violation_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Render a storage constraint failure as 400."""
    if not isinstance(exc, ConstraintViolationError):
        return JSONResponse(status_code=500, content={"detail": "Unexpected error"})

    logger.warning(
        "storage.constraint_violation",
        entity=exc.entity,
        operation=exc.operation,
        path=request.url.path,
        method=request.method,
    )
    return JSONResponse(
        status_code=400,
        content={"detail": f"{exc.entity} {exc.operation} violated a constraint"},
    )


async def validation_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Handler for request validation errors."""
    if not isinstance(exc, RequestValidationError):
        return JSONResponse(status_code=500, content={"detail": "Unexpected error"})

    logger.warning(
        "request.validation_error",
        path=request.url.path,
        method=request.method,
        error_count=len(exc.errors()),
    )
    return JSONResponse(
        status_code=422,
        content={"detail": jsonable_errors(exc)},
    )


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    """Validation errors without the raw ``ctx`` objects, which may not serialize."""
    return [
        {key: value for key, value in error.items() if key != "ctx"}
        for error in exc.errors()
    ]


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler for unhandled exceptions."""
    logger.exception(
        "unhandled.exception",
        exc_type=type(exc).__name__,
        path=request.url.path,
        method=request.method,
    )
    return JSONResponse(
        status_code=500,
        content={"detail": "An unexpected error occurred. Please try again."},
    )


@asynccontextmanager
async def lifespan(app: fastapi.FastAPI):
    """Create DB engine at startup, dispose on shutdown."""
    app.state.engine = create_engine()
    app.state.session_maker = create_session_maker(app.state.engine)
    app.state.init_done = False

    try:
        await init_db(app.state.engine)
        app.state.init_done = True
        logger.info("init.complete")
    except TimeoutError:
        logger.error("init.timeout", hint="Startup hung, check DB connectivity")
        raise RuntimeError("Application startup timed out")
    except Exception as e:
        logger.error("init.failed", error=str(e), exc_info=True)
        raise

    try:
        yield
    finally:
        await dispose_engine(app.state.engine)


def create_app() -> fastapi.FastAPI:
    docs_enabled = _settings.enable_docs or _settings.debug
    application = fastapi.FastAPI(
        title="Paddock API",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )

    application.add_exception_handler(EntityNotFoundError, not_found_handler)
    application.add_exception_handler(
        ConstraintViolationError, constraint_violation_handler
    )
    application.add_exception_handler(
        RequestValidationError, validation_exception_handler
    )
    application.add_exception_handler(Exception, global_exception_handler)

    application.add_middleware(RequestContextMiddleware)

    application.include_router(health_router)
    application.include_router(addresses_router)
    application.include_router(classes_router)
    application.include_router(cars_router)
    application.include_router(drivers_router)
    application.include_router(teams_router)
    application.include_router(races_router)
    application.include_router(race_results_router)
    return application


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000)


if __name__ == "__main__":
    run()
