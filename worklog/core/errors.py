"""Error taxonomy shared by services and routers."""

from dataclasses import dataclass
from typing import Optional


class WorklogError(Exception):
    """Base error; routers render it as {"detail": message}."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(WorklogError):
    status_code = 400


class NotFoundError(WorklogError):
    status_code = 404


class StoreError(WorklogError):
    status_code = 500


@dataclass
class SessionConsistencyAnomaly:
    """Session bookkeeping found history it did not expect.

    Never raised: it travels inside a TransitionOutcome and is logged as a
    warning, the task mutation that triggered it stays committed.
    """

    task_id: int
    reason: str
    session_id: Optional[int] = None

    def __str__(self) -> str:
        return f"task_id={self.task_id}: {self.reason}"
