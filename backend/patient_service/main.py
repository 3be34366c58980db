"""Patient Service - Patient registry API

Main FastAPI application entry point.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from prometheus_client import make_asgi_app
from sqlalchemy.exc import SQLAlchemyError

from patient_service.api.errors import register_exception_handlers
from patient_service.api.middleware import install_request_logging
from patient_service.api.v1.router import api_router
from patient_service.core.config import settings
from patient_service.core.logging import get_logger, setup_logging
from patient_service.domain.exceptions import PatientRegistryError
from patient_service.models.base import (
    async_session_maker,
    create_tables,
    engine,
    ping_database,
)
from patient_service.services.demo_data import seed_demo_patients

setup_logging(
    log_level="DEBUG" if settings.debug else settings.log_level,
    json_logs=bool(settings.json_logs),
    log_file=settings.log_file,
)

logger = get_logger(__name__)


async def _seed_demo_data() -> None:
    # A failed seed leaves the registry usable, so startup continues
    try:
        async with async_session_maker() as session:
            inserted = await seed_demo_patients(session)
    except (PatientRegistryError, SQLAlchemyError) as e:
        logger.error("demo_data_seed_failed", error=str(e), exc_info=e)
        return
    logger.warning("Demo data enabled", patients_seeded=inserted)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Open the database pool, prepare optional tables and demo data, then dispose."""
    logger.info(
        "Starting Patient Service",
        version=settings.app_version,
        environment=settings.environment,
        database=("sqlite" if settings.database.is_sqlite else settings.database.host),
    )
    app.state.db_session_maker = async_session_maker

    if settings.database.create_tables_on_startup:
        await create_tables()
        logger.info("Database tables created (or already exist)")
    if settings.enable_demo_data:
        await _seed_demo_data()

    yield

    await engine.dispose()
    logger.info("Patient Service shutdown complete")


def create_application() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        description=(
            "Registry of patient records: registration with unique emails, "
            "updates of active patients, and deactivation/reactivation."
        ),
        version=settings.app_version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "X-Process-Time"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=1000)
    install_request_logging(app)

    app.mount("/metrics", make_asgi_app())
    app.include_router(api_router, prefix="/api/v1")
    register_exception_handlers(app)

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Liveness probe; does not touch the database."""
        return {
            "status": "healthy",
            "version": settings.app_version,
            "environment": settings.environment,
        }

    @app.get("/ready", tags=["Health"])
    async def readiness_check(request: Request):
        """Readiness probe; ready once the database answers."""
        session_maker = getattr(request.app.state, "db_session_maker", None)
        database_ok = session_maker is not None and await ping_database(session_maker)
        return JSONResponse(
            status_code=200 if database_ok else 503,
            content={"ready": database_ok, "checks": {"database": database_ok}},
        )

    return app


app = create_application()


def main() -> None:
    """Run the API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "patient_service.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        workers=1 if settings.debug else settings.workers,
        log_level="debug" if settings.debug else "info",
    )


if __name__ == "__main__":
    main()
