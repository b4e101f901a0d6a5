"""Database package for the ORM benchmark."""

from .engine import (
    create_async_db_engine,
    create_sync_engine,
    init_models,
    init_models_async,
    make_async_sessionmaker,
    make_sync_sessionmaker,
)
from .schema import CREATE_PRODUCTS_SQL, ProductDB, products

__all__ = [
    "create_async_db_engine",
    "create_sync_engine",
    "init_models",
    "init_models_async",
    "make_async_sessionmaker",
    "make_sync_sessionmaker",
    "CREATE_PRODUCTS_SQL",
    "ProductDB",
    "products",
]
