"""Common interface for the data-access strategies under benchmark."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from orm_bench.errors import OperationFailure, ParseFailure
from orm_bench.workload import WorkloadItem


@dataclass(frozen=True)
class Record:
    """A product row as returned by ``Adapter.read``."""

    id: int
    code: str
    price: int


class Adapter(ABC):
    """One way of reaching the store.

    ``setup`` opens a fresh, private in-memory store and creates the schema;
    ``close`` releases it. In between, the four workload operations run
    against that store only. Every operation either succeeds or raises.
    """

    name: str = ""

    def __init__(self, echo: bool = False):
        self.echo = echo

    @abstractmethod
    def setup(self) -> None:
        """Open the backend handle and create the products table."""

    @abstractmethod
    def create(self, item: WorkloadItem) -> int:
        """Insert the item's payload and return the new row id."""

    @abstractmethod
    def read(self, record_id: int) -> Record:
        """Fetch a row that must exist."""

    @abstractmethod
    def update(self, record_id: int, item: WorkloadItem) -> None:
        """Set the row's price to ``item.updated_price``."""

    @abstractmethod
    def delete(self, record_id: int) -> None:
        """Remove the row."""

    @abstractmethod
    def close(self) -> None:
        """Release the backend handle. Safe to call after a failed setup."""

    def parse_id(self, value: Any) -> int:
        """Interpret a backend-assigned identifier as an int."""
        if isinstance(value, bool) or value is None:
            raise ParseFailure(self.name, "create", f"got {value!r}")
        try:
            return int(value)
        except (TypeError, ValueError) as exc:
            raise ParseFailure(self.name, "create", f"got {value!r}") from exc

    def missing(self, operation: str, record_id: int) -> OperationFailure:
        return OperationFailure(self.name, operation, f"no product with id {record_id}")

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"
