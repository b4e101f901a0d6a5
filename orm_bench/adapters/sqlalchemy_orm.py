"""SQLAlchemy ORM adapter: the declarative model through a sync Session."""

import logging

from orm_bench.db import ProductDB, create_sync_engine, init_models, make_sync_sessionmaker

from .base import Adapter, Record

logger = logging.getLogger(__name__)


class SQLAlchemyORMAdapter(Adapter):
    name = "SQLAlchemy ORM"

    def __init__(self, echo: bool = False):
        super().__init__(echo)
        self.engine = None
        self.session = None

    def setup(self) -> None:
        self.engine = create_sync_engine(echo=self.echo)
        init_models(self.engine)
        self.session = make_sync_sessionmaker(self.engine)()
        logger.debug("%s: products table created", self.name)

    def create(self, item) -> int:
        product = ProductDB(code=item.code, price=item.price)
        self.session.add(product)
        self.session.commit()
        return self.parse_id(product.id)

    def read(self, record_id: int) -> Record:
        # populate_existing forces a SELECT instead of an identity-map hit
        product = self.session.get(ProductDB, record_id, populate_existing=True)
        if product is None:
            raise self.missing("read", record_id)
        return Record(product.id, product.code, product.price)

    def update(self, record_id: int, item) -> None:
        product = self.session.get(ProductDB, record_id)
        if product is None:
            raise self.missing("update", record_id)
        product.price = item.updated_price
        self.session.commit()

    def delete(self, record_id: int) -> None:
        product = self.session.get(ProductDB, record_id)
        if product is None:
            raise self.missing("delete", record_id)
        self.session.delete(product)
        self.session.commit()

    def close(self) -> None:
        if self.session is not None:
            self.session.close()
            self.session = None
        if self.engine is not None:
            self.engine.dispose()
            self.engine = None
