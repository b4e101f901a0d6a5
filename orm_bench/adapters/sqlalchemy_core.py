"""SQLAlchemy Core adapter: statement builders executed on a single Connection."""

import logging

from sqlalchemy import delete, insert, select, update

from orm_bench.db import create_sync_engine, init_models, products

from .base import Adapter, Record

logger = logging.getLogger(__name__)


class SQLAlchemyCoreAdapter(Adapter):
    name = "SQLAlchemy Core"

    def __init__(self, echo: bool = False):
        super().__init__(echo)
        self.engine = None
        self.conn = None

    def setup(self) -> None:
        self.engine = create_sync_engine(echo=self.echo)
        init_models(self.engine)
        self.conn = self.engine.connect()
        logger.debug("%s: products table created", self.name)

    def create(self, item) -> int:
        with self.conn.begin():
            result = self.conn.execute(insert(products).values(code=item.code, price=item.price))
        return self.parse_id(result.inserted_primary_key[0])

    def read(self, record_id: int) -> Record:
        with self.conn.begin():
            row = self.conn.execute(
                select(products.c.id, products.c.code, products.c.price).where(products.c.id == record_id)
            ).one_or_none()
        if row is None:
            raise self.missing("read", record_id)
        return Record(row.id, row.code, row.price)

    def update(self, record_id: int, item) -> None:
        with self.conn.begin():
            result = self.conn.execute(
                update(products).where(products.c.id == record_id).values(price=item.updated_price)
            )
        if result.rowcount != 1:
            raise self.missing("update", record_id)

    def delete(self, record_id: int) -> None:
        with self.conn.begin():
            result = self.conn.execute(delete(products).where(products.c.id == record_id))
        if result.rowcount != 1:
            raise self.missing("delete", record_id)

    def close(self) -> None:
        if self.conn is not None:
            self.conn.close()
            self.conn = None
        if self.engine is not None:
            self.engine.dispose()
            self.engine = None
