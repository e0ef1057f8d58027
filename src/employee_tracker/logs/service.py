from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..assignments.repository import TagRepository
from ..common.datetime_utils import now_local
from ..common.logging import get_logger
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import Log, SubmissionStatus
from .repository import LogRepository

logger = get_logger(__name__)


class LogService:
    """Use case: daily work-log submission per tag."""

    def __init__(self, logs: LogRepository, tags: TagRepository, employees: EmployeeRepository):
        self._logs = logs
        self._tags = tags
        self._employees = employees

    def logs_for_day(self, *, employee_id: int, log_date: date) -> tuple[Sequence[Log], Optional[SubmissionStatus]]:
        logs = self._logs.list_for_day(employee_id=employee_id, log_date=log_date)
        submission = self._logs.get_submission(employee_id=employee_id, submission_date=log_date)
        return logs, submission

    def logs_in_range(
        self, *, employee_id: Optional[int] = None, date_from: Optional[date] = None, date_to: Optional[date] = None
    ) -> Sequence[Log]:
        if date_from and date_to and date_from > date_to:
            raise ValidationError("dateFrom must not be after dateTo")
        return self._logs.list_range(employee_id=employee_id, date_from=date_from, date_to=date_to)

    def submit(self, *, employee_id: int, log_date: date, entries: Sequence[tuple[int, int]]) -> tuple[Sequence[Log], SubmissionStatus]:
        """Replace the day's logs with ``entries`` (``(tag_id, count)`` pairs) and lock the day."""
        if not self._employees.get_by_id(employee_id):
            raise NotFoundError("Employee not found")

        submission = self._logs.get_submission(employee_id=employee_id, submission_date=log_date)
        if submission and submission.is_locked:
            raise ConflictError("Logs for this date have already been submitted")

        counts: dict[int, int] = {}
        for tag_id, count in entries:
            if count < 0:
                raise ValidationError("Count cannot be negative")
            counts[tag_id] = counts.get(tag_id, 0) + count

        tags = {t.id: t for t in self._tags.get_many(list(counts))}
        missing = [str(t) for t in counts if t not in tags]
        if missing:
            raise NotFoundError(f"Tags not found: {', '.join(missing)}")

        logs = [
            Log(
                employee_id=employee_id,
                tag_id=tag_id,
                count=count,
                total_minutes=count * tags[tag_id].time_minutes,
                log_date=log_date,
            )
            for tag_id, count in counts.items()
            if count > 0
        ]
        total_minutes = sum(log.total_minutes for log in logs)

        if submission is None:
            submission = SubmissionStatus(employee_id=employee_id, submission_date=log_date)
        submission.submission_time = now_local()
        submission.is_locked = True
        submission.total_minutes = total_minutes
        submission.status_message = f"Submitted {total_minutes} minutes across {len(logs)} tags"

        self._logs.replace_day(employee_id=employee_id, log_date=log_date, logs=logs, submission=submission)
        logger.info("Employee %s submitted %d minutes for %s", employee_id, total_minutes, log_date)
        return logs, submission
