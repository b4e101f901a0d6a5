"""Deterministic CRUD workload shared by every adapter."""

from dataclasses import dataclass
from typing import Iterator

# Number of create/read/update/delete cycles per adapter
WORKLOAD_SIZE = 1000


@dataclass(frozen=True)
class WorkloadItem:
    """One cycle of the workload. Every payload field is derived from ``index``."""

    index: int

    @property
    def code(self) -> str:
        return f"P{self.index}"

    @property
    def price(self) -> int:
        return self.index * 10

    @property
    def updated_price(self) -> int:
        return self.index * 20


class Workload:
    """Finite sequence of items ``0..size-1`` in ascending order.

    Iterating starts over from index 0 every time, so each adapter run
    consumes the identical sequence.
    """

    def __init__(self, size: int = WORKLOAD_SIZE):
        if size <= 0:
            raise ValueError(f"workload size must be positive, got {size}")
        self.size = size

    def __iter__(self) -> Iterator[WorkloadItem]:
        return (WorkloadItem(i) for i in range(self.size))

    def __len__(self) -> int:
        return self.size
