"""Database schema for the ORM benchmark."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class ProductDB(Base):
    """Product row written, read, updated and deleted by every workload cycle."""

    __tablename__ = "products"
    # Emit AUTOINCREMENT so SQLite never hands a deleted id out again
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(String(255), nullable=False)
    price = Column(Integer, nullable=False)


# Core handle on the same table for the builder-style adapter
products = ProductDB.__table__

# DDL for the raw driver adapter, kept in line with the model above
CREATE_PRODUCTS_SQL = """
CREATE TABLE products (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    code VARCHAR(255) NOT NULL,
    price INTEGER NOT NULL
)
"""
