from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Log, SubmissionStatus


class LogRepository(Protocol):
    def list_for_day(self, *, employee_id: int, log_date: date) -> Sequence[Log]: ...

    def list_range(
        self, *, employee_id: Optional[int], date_from: Optional[date], date_to: Optional[date]
    ) -> Sequence[Log]: ...

    def get_submission(self, *, employee_id: int, submission_date: date) -> Optional[SubmissionStatus]: ...

    def replace_day(
        self, *, employee_id: int, log_date: date, logs: Sequence[Log], submission: SubmissionStatus
    ) -> Sequence[Log]: ...
