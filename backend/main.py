from contextlib import asynccontextmanager
from typing import Optional
import logging
import time
import uuid

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from api_health import router as health_router
from api_sixdegrees import router as sixdegrees_router
from config import ServiceSettings
from db_neo4j import create_driver, create_query_service
from logging_utils import configure_logging, structured_log_line
from utils.duration import cache_control_header

logger = logging.getLogger("sixdegrees")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Create the Neo4j driver and query service for the life of the process.
    A query service injected before startup (tests) is left alone.
    """
    settings: ServiceSettings = app.state.settings
    driver = None
    if getattr(app.state, "query_service", None) is None:
        driver = create_driver(settings)
        app.state.query_service = create_query_service(driver, settings)
        logger.info(
            f"{settings.app_name} connecting to {settings.neo4j_uri} "
            f"(database={settings.neo4j_database})"
        )

    yield  # App runs here

    if driver is not None:
        driver.close()
        app.state.query_service = None
        logger.info("Closed Neo4j driver")


def create_app(settings: Optional[ServiceSettings] = None) -> FastAPI:
    settings = settings or ServiceSettings.from_env()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Public Six Degrees API",
        description=(
            "A public API serving information about people's relationships "
            "to our content."
        ),
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    # Fails startup on an unparseable CACHE_DURATION
    app.state.cache_control = cache_control_header(settings.cache_duration)
    app.state.query_service = None

    app.include_router(sixdegrees_router)
    app.include_router(health_router)

    if settings.request_logging_on:
        @app.middleware("http")
        async def request_logging(request: Request, call_next):
            start = time.perf_counter()
            request_id = request.headers.get("x-request-id") or uuid.uuid4().hex
            request.state.request_id = request_id

            response = None
            try:
                response = await call_next(request)
            finally:
                latency_ms = int((time.perf_counter() - start) * 1000)
                status_code = getattr(response, "status_code", 500)
                logger.info(
                    structured_log_line(
                        {
                            "event": "request",
                            "request_id": request_id,
                            "route": request.url.path,
                            "method": request.method,
                            "status": status_code,
                            "latency_ms": latency_ms,
                        }
                    )
                )

            if isinstance(response, Response):
                response.headers["x-request-id"] = request_id
            return response

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """
        Handle request validation errors (422).
        These are client errors, so log at WARNING level.
        """
        logger.warning(
            f"Validation error on {request.method} {request.url.path}",
            extra={
                "method": request.method,
                "path": request.url.path,
                "errors": exc.errors(),
            },
        )
        return JSONResponse(status_code=422, content={"message": str(exc.errors())})

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """
        Catch-all handler for unhandled exceptions.
        Logs full stack trace but returns sanitized error message to client.
        """
        logger.exception(
            f"Unhandled exception on {request.method} {request.url.path}",
            extra={
                "method": request.method,
                "path": request.url.path,
                "exception_type": type(exc).__name__,
                "exception_message": str(exc),
            },
        )
        return JSONResponse(status_code=500, content={"message": "Internal server error"})

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=app.state.settings.port)
