"""Database engine configuration for the ORM benchmark.

Every adapter run gets its own engine. The URLs point at SQLite's in-memory
database and the engines are bound to a ``StaticPool``, so one engine holds
exactly one private store that disappears when the engine is disposed.
"""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from .schema import Base

# Database URLs - in-memory, one store per engine
DATABASE_URL = "sqlite://"
ASYNC_DATABASE_URL = "sqlite+aiosqlite://"


def create_sync_engine(echo: bool = False) -> Engine:
    """Create a fresh engine backed by its own in-memory database."""
    return create_engine(
        DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=echo,
    )


def create_async_db_engine(echo: bool = False) -> AsyncEngine:
    """Create a fresh aiosqlite engine backed by its own in-memory database."""
    return create_async_engine(
        ASYNC_DATABASE_URL,
        poolclass=StaticPool,
        echo=echo,
    )


def make_sync_sessionmaker(engine: Engine) -> sessionmaker:
    """Session factory matching the settings used across the benchmark."""
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


def make_async_sessionmaker(engine: AsyncEngine) -> async_sessionmaker:
    """Async session factory matching the settings used across the benchmark."""
    return async_sessionmaker(
        class_=AsyncSession,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
        bind=engine,
    )


def init_models(engine: Engine) -> None:
    """Initialize database tables."""
    Base.metadata.create_all(bind=engine)


async def init_models_async(engine: AsyncEngine) -> None:
    """Initialize database tables through an async engine."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
