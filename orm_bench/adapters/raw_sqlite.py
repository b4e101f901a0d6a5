"""
Raw DB-API adapter: parameterized SQL strings straight through ``sqlite3``.

This is the baseline the ORM adapters are measured against.
"""

import logging
import sqlite3

from orm_bench.db.schema import CREATE_PRODUCTS_SQL

from .base import Adapter, Record

logger = logging.getLogger(__name__)

INSERT_SQL = "INSERT INTO products (code, price) VALUES (?, ?)"
SELECT_SQL = "SELECT id, code, price FROM products WHERE id = ?"
UPDATE_SQL = "UPDATE products SET price = ? WHERE id = ?"
DELETE_SQL = "DELETE FROM products WHERE id = ?"


class RawSQLiteAdapter(Adapter):
    name = "sqlite3"

    def __init__(self, echo: bool = False):
        super().__init__(echo)
        self.conn = None

    def setup(self) -> None:
        # Autocommit, like a driver executing one statement at a time
        self.conn = sqlite3.connect(":memory:", isolation_level=None)
        if self.echo:
            self.conn.set_trace_callback(logger.info)
        self.conn.execute(CREATE_PRODUCTS_SQL)
        logger.debug("sqlite3: products table created")

    def create(self, item) -> int:
        cursor = self.conn.execute(INSERT_SQL, (item.code, item.price))
        return self.parse_id(cursor.lastrowid)

    def read(self, record_id: int) -> Record:
        row = self.conn.execute(SELECT_SQL, (record_id,)).fetchone()
        if row is None:
            raise self.missing("read", record_id)
        return Record(*row)

    def update(self, record_id: int, item) -> None:
        cursor = self.conn.execute(UPDATE_SQL, (item.updated_price, record_id))
        if cursor.rowcount != 1:
            raise self.missing("update", record_id)

    def delete(self, record_id: int) -> None:
        cursor = self.conn.execute(DELETE_SQL, (record_id,))
        if cursor.rowcount != 1:
            raise self.missing("delete", record_id)

    def close(self) -> None:
        if self.conn is not None:
            self.conn.close()
            self.conn = None
