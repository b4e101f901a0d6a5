"""Data-access strategies under benchmark.

``ADAPTERS`` is the fixed invocation order used by ``run_benchmark.py``. Add a
new ``Adapter`` subclass to the list and the benchmark will run it too.
"""

from .async_orm import AsyncORMAdapter
from .base import Adapter, Record
from .raw_sqlite import RawSQLiteAdapter
from .sqlalchemy_core import SQLAlchemyCoreAdapter
from .sqlalchemy_orm import SQLAlchemyORMAdapter

ADAPTERS = [
    RawSQLiteAdapter,
    SQLAlchemyCoreAdapter,
    SQLAlchemyORMAdapter,
    AsyncORMAdapter,
]

__all__ = [
    "ADAPTERS",
    "Adapter",
    "AsyncORMAdapter",
    "RawSQLiteAdapter",
    "Record",
    "SQLAlchemyCoreAdapter",
    "SQLAlchemyORMAdapter",
]
