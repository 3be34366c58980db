"""
Database base, engine and session management.

Provides the declarative base shared by all models, the async engine
built from settings, and the FastAPI session dependency.
"""

from collections.abc import AsyncGenerator
from datetime import datetime

from sqlalchemy import DateTime, MetaData, func, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from patient_service.core.config import settings
from patient_service.core.logging import get_logger

logger = get_logger(__name__)

# Constraint naming convention shared with the Alembic migrations
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

metadata = MetaData(naming_convention=NAMING_CONVENTION)


class Base(DeclarativeBase):
    """Base class for all models, with creation and update timestamps."""

    metadata = metadata

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


def _engine_options() -> dict:
    options: dict = {"echo": settings.database.echo}
    if not settings.database.is_sqlite:
        options.update(
            pool_size=settings.database.pool_size,
            max_overflow=settings.database.max_overflow,
            pool_pre_ping=True,
        )
    return options


engine = create_async_engine(settings.database.connection_url, **_engine_options())

async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield a database session for one request."""
    async with async_session_maker() as session:
        yield session


async def create_tables() -> None:
    """Create any missing tables (development and SQLite deployments)."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def ping_database(
    session_maker: async_sessionmaker[AsyncSession] = async_session_maker,
) -> bool:
    """Run a trivial query and report whether the database answered."""
    try:
        async with session_maker() as session:
            await session.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        logger.warning("database_ping_failed", error=str(e))
        return False
    return True
