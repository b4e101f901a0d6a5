"""
SQLAlchemy async ORM adapter: the declarative model through an AsyncSession
over aiosqlite.

The harness is sequential, so the adapter owns a private event loop and runs
each coroutine to completion before returning. The measured cost therefore
includes the event loop and aiosqlite's worker-thread hop on every statement.
"""

import asyncio
import logging

from orm_bench.db import ProductDB, create_async_db_engine, init_models_async, make_async_sessionmaker

from .base import Adapter, Record

logger = logging.getLogger(__name__)


class AsyncORMAdapter(Adapter):
    name = "SQLAlchemy Async ORM"

    def __init__(self, echo: bool = False):
        super().__init__(echo)
        self.loop = None
        self.engine = None
        self.session = None

    def _run(self, coro):
        return self.loop.run_until_complete(coro)

    def setup(self) -> None:
        self.loop = asyncio.new_event_loop()
        self.engine = create_async_db_engine(echo=self.echo)
        self._run(init_models_async(self.engine))
        self.session = make_async_sessionmaker(self.engine)()
        logger.debug("%s: products table created", self.name)

    def create(self, item) -> int:
        return self.parse_id(self._run(self._create(item)))

    async def _create(self, item):
        product = ProductDB(code=item.code, price=item.price)
        self.session.add(product)
        await self.session.commit()
        return product.id

    def read(self, record_id: int) -> Record:
        product = self._run(self.session.get(ProductDB, record_id, populate_existing=True))
        if product is None:
            raise self.missing("read", record_id)
        return Record(product.id, product.code, product.price)

    def update(self, record_id: int, item) -> None:
        self._run(self._update(record_id, item))

    async def _update(self, record_id: int, item) -> None:
        product = await self.session.get(ProductDB, record_id)
        if product is None:
            raise self.missing("update", record_id)
        product.price = item.updated_price
        await self.session.commit()

    def delete(self, record_id: int) -> None:
        self._run(self._delete(record_id))

    async def _delete(self, record_id: int) -> None:
        product = await self.session.get(ProductDB, record_id)
        if product is None:
            raise self.missing("delete", record_id)
        await self.session.delete(product)
        await self.session.commit()

    def close(self) -> None:
        if self.loop is None:
            return
        try:
            if self.session is not None:
                self._run(self.session.close())
            if self.engine is not None:
                self._run(self.engine.dispose())
        finally:
            self.session = None
            self.engine = None
            self.loop.close()
            self.loop = None
