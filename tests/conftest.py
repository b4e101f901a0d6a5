"""Shared fixtures for the orm-bench tests."""

import pytest

from orm_bench.adapters.base import Adapter, Record
from orm_bench.workload import Workload


class RecordingAdapter(Adapter):
    """In-memory fake that logs every call and can fail on demand."""

    name = "recording"

    def __init__(self, name: str = "recording", fail_on=None, first_id: int = 100, calls=None):
        super().__init__()
        self.name = name
        self.fail_on = fail_on  # (operation, item index)
        self.next_id = first_id
        self.calls = [] if calls is None else calls
        self.rows = None
        self.closed = False

    def _maybe_fail(self, operation, index):
        if self.fail_on == (operation, index):
            raise RuntimeError(f"boom in {operation}")

    def setup(self):
        self.calls.append((self.name, "setup", None))
        self._maybe_fail("setup", None)
        self.rows = {}

    def create(self, item):
        self._maybe_fail("create", item.index)
        record_id = self.next_id
        self.next_id += 1
        self.rows[record_id] = (item.index, item.code, item.price)
        self.calls.append((self.name, "create", record_id))
        return record_id

    def read(self, record_id):
        index, code, price = self.rows[record_id]
        self._maybe_fail("read", index)
        self.calls.append((self.name, "read", record_id))
        return Record(record_id, code, price)

    def update(self, record_id, item):
        self._maybe_fail("update", item.index)
        index, code, _ = self.rows[record_id]
        self.rows[record_id] = (index, code, item.updated_price)
        self.calls.append((self.name, "update", record_id))

    def delete(self, record_id):
        index, _, _ = self.rows[record_id]
        self._maybe_fail("delete", index)
        del self.rows[record_id]
        self.calls.append((self.name, "delete", record_id))

    def close(self):
        self.closed = True
        self.calls.append((self.name, "close", None))


@pytest.fixture
def recording_adapter():
    return RecordingAdapter()


@pytest.fixture
def small_workload():
    return Workload(25)
