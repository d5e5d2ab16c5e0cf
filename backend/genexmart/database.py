"""
GenexMart Backend: Store Connection and Session Management
=============================================================

What:  Async SQLAlchemy engine, session factory, declarative base and the
       FastAPI session dependency.
How:   One engine is created at import. Its pool holds a single connection,
       so every request talks to the store over the same handle, one
       statement at a time.
Who:   Route handlers receive sessions through Depends(get_db_session);
       services run their statements on those sessions.
When:  Engine at import, sessions per request, disposal at shutdown.

Transaction scope:
    There is no request-wide transaction. Services commit after each write
    statement, so a multi-statement flow (order header, then order lines)
    keeps whatever it committed before a later statement failed.
"""

from typing import Any, AsyncGenerator, Dict

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from genexmart.config import settings


def _engine_options(url: str) -> Dict[str, Any]:
    """
    Pool arguments for the configured store.

    SQLite (used by the test suite) picks its own pool class, which does not
    accept sizing arguments.
    """
    options: Dict[str, Any] = {"echo": settings.log_level == "DEBUG"}
    if not url.startswith("sqlite"):
        # Why a single connection: the API is a thin pass-through for one shop
        # floor, and requests queue on one handle instead of racing on many
        options.update(
            pool_size=1,
            max_overflow=0,
            # Why recycle: MySQL closes idle connections after wait_timeout
            pool_recycle=3600,
            pool_pre_ping=True,
        )
    return options


# ── Engine Configuration ──────────────────────────────────────────────────
engine = create_async_engine(
    settings.sqlalchemy_url,
    **_engine_options(settings.sqlalchemy_url),
)

# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False keeps generated keys readable after commit
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for the genexmart table mappings.

    All models inherit from this class so they share one metadata object
    (the test suite builds its SQLite schema from it).
    """
    pass


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the route handler
        3. On error: rolls back whatever the failing statement left pending
           (statements committed earlier in the request stay committed)
        4. Always: closes the session, handing the connection back

    Raises:
        Any exception from the handler is re-raised for the global handlers.
    """
    async with async_session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def dispose_engine() -> None:
    """Closes the store connection. Called from the shutdown half of lifespan."""
    await engine.dispose()
