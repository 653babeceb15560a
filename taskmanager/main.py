# taskmanager/main.py
"""FastAPI application for the Secure Task Manager backend and browser client."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.engine import Engine
from starlette.exceptions import HTTPException as StarletteHTTPException

from taskmanager.config import Settings
from taskmanager.database import create_db_and_tables, create_db_engine
from taskmanager.errors import AuthenticationError, ServiceError
from taskmanager.routes.auth import router as auth_router
from taskmanager.routes.tasks import router as tasks_router

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)


async def handle_service_error(request: Request, exc: ServiceError) -> JSONResponse:
    headers = None
    if isinstance(exc, AuthenticationError):
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse({"message": exc.message}, status_code=exc.status_code, headers=headers)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
    return JSONResponse(
        {"message": "Invalid request body", "errors": errors}, status_code=400
    )


async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Framework errors (unknown path, wrong method) in the same shape as service errors."""
    return JSONResponse(
        {"message": exc.detail}, status_code=exc.status_code, headers=exc.headers
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse({"message": "An unexpected error occurred"}, status_code=500)


def create_app(
    settings: Optional[Settings] = None, engine: Optional[Engine] = None
) -> FastAPI:
    """Build the application.

    Settings are read from the environment when not given, so a missing
    signing key fails here, before the server accepts any request.
    """
    settings = settings or Settings.from_env()
    owns_engine = engine is None
    engine = engine or create_db_engine(settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Create database tables on startup via SQLModel create_all."""
        configure_logging(settings.log_level)
        create_db_and_tables(engine)
        yield
        if owns_engine:
            engine.dispose()

    app = FastAPI(title="Secure Task Manager", lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = engine

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type", "Authorization"],
        expose_headers=["Location"],
    )

    app.add_exception_handler(ServiceError, handle_service_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    app.include_router(auth_router)
    app.include_router(tasks_router)

    @app.get("/api/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "service": "secure-task-manager"}

    app.mount("/", StaticFiles(directory=STATIC_DIR, html=True), name="client")
    return app


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    settings = Settings.from_env()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
