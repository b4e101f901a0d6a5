"""Errors raised while running the benchmark.

Nothing in the harness retries or recovers from these. They travel up to
``run_benchmark.main``, which prints them and exits.
"""

from typing import Optional


class HarnessError(Exception):
    """Base error naming the adapter and operation that failed."""

    kind = "failure"

    def __init__(self, adapter: str, operation: str, detail: str = "", index: Optional[int] = None):
        self.adapter = adapter
        self.operation = operation
        self.detail = detail
        self.index = index
        super().__init__(str(self))

    def __str__(self) -> str:
        where = f"{self.adapter} {self.operation}"
        if self.index is not None:
            where += f" (item {self.index})"
        message = f"{where} {self.kind}"
        if self.detail:
            message += f": {self.detail}"
        return message


class SetupFailure(HarnessError):
    """Schema or table creation failed."""

    kind = "failed"


class OperationFailure(HarnessError):
    """The store rejected a create/read/update/delete, or a row was missing."""

    kind = "failed"


class ParseFailure(HarnessError):
    """A backend-assigned identifier could not be interpreted."""

    kind = "returned an unusable id"
