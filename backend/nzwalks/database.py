"""
NZWalks Backend — Database Session Management
==============================================

What:  Async SQLAlchemy engine, session factory, declarative base and the
       per-request session dependency.
How:   The engine owns the connection pool. `get_db_session` hands each
       request its own AsyncSession, commits when the handler returns and
       rolls back when it raises.
Who:   Used by the SQL repositories through `nzwalks.dependencies`.

Pooling:
    pool_size / max_overflow come from settings for PostgreSQL. SQLite
    engines use SQLAlchemy's default pool for the dialect, which rejects
    the sizing arguments, so they are only passed for server databases.

Foreign keys:
    SQLite ignores REFERENCES ... ON DELETE CASCADE unless each connection
    runs PRAGMA foreign_keys=ON, so SQLite engines get a connect hook.
"""

from typing import Any, AsyncGenerator, Dict

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from nzwalks.config import settings


def _engine_options() -> Dict[str, Any]:
    options: Dict[str, Any] = {"echo": settings.log_level == "DEBUG"}
    if not settings.is_sqlite:
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,
        )
    return options


def enable_sqlite_foreign_keys(async_engine: AsyncEngine) -> None:
    """Turn on foreign key enforcement for every new connection of a SQLite engine."""

    @event.listens_for(async_engine.sync_engine, "connect")
    def _set_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# ── Engine & Session Factory ──────────────────────────────────────────────
engine = create_async_engine(settings.database_url, **_engine_options())
if settings.is_sqlite:
    enable_sqlite_foreign_keys(engine)

# expire_on_commit=False: rows returned by repositories stay readable after
# the dependency commits, while the response is being serialized
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Every model registers with this metadata, which Alembic reads for
    autogenerate and `create_schema` uses for development databases.
    """
    pass


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    1. Creates a session from the factory
    2. Yields it to the repositories built for this request
    3. Commits on success, rolls back on any exception
    4. Always closes the session, returning the connection to the pool

    Exceptions are re-raised so the global handlers can answer the client.
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def create_schema() -> None:
    """Create all tables that do not exist yet. Development only; use Alembic elsewhere."""
    # Models must be imported so their tables are registered on Base.metadata
    import nzwalks.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def ping_database() -> None:
    """Run a trivial query; raises if the database cannot be reached."""
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))


async def dispose_engine() -> None:
    """Close every pooled connection. Called from the shutdown half of the lifespan."""
    await engine.dispose()
