"""
Database configuration.

Manages engine creation and the async session factory.
"""
from typing import Optional
import logging

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from checkout.settings.modules.database_settings import DatabaseSettings


logger = logging.getLogger(__name__)


# =============================================================================
# ENGINE CREATION
# =============================================================================

def create_engine(settings: Optional[DatabaseSettings] = None) -> AsyncEngine:
    """
    Create async SQLAlchemy engine.
    
    Args:
        settings: Database settings (loaded from env if None)
    
    Returns:
        Configured async engine
    """
    settings = settings or DatabaseSettings()
    url = make_url(settings.database_url)
    logger.info(f"Creating database engine: {url.render_as_string(hide_password=True)}")
    
    if url.drivername.startswith("sqlite"):
        # In-memory SQLite must share one connection across sessions
        return create_async_engine(
            url,
            echo=settings.echo_sql,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    
    return create_async_engine(
        url,
        echo=settings.echo_sql,
        pool_pre_ping=True,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Build a session factory bound to ``engine``.
    
    Returns:
        async_sessionmaker instance
    """
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


# =============================================================================
# LIFECYCLE
# =============================================================================

_engine: Optional[AsyncEngine] = None
_session_factory: Optional[async_sessionmaker[AsyncSession]] = None


async def init_database(settings: Optional[DatabaseSettings] = None) -> None:
    """
    Initialize global engine and session factory, creating tables.
    """
    global _engine, _session_factory
    
    if _engine is not None:
        return
    
    from checkout.infrastructure.database.models import Base
    
    logger.info("Initializing database...")
    
    _engine = create_engine(settings)
    _session_factory = create_session_factory(_engine)
    
    async with _engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    
    logger.info("✅ Database initialized successfully")


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get async session factory."""
    if _session_factory is None:
        raise RuntimeError(
            "Database not initialized. Call init_database() first."
        )
    return _session_factory


async def close_database() -> None:
    """Close database connections."""
    global _engine, _session_factory
    
    if _engine is not None:
        logger.info("Closing database connections...")
        await _engine.dispose()
        logger.info("✅ Database connections closed")
    
    _engine = None
    _session_factory = None
