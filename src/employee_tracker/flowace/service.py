from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from ..common.datetime_utils import format_hours_hms, month_bounds, now_local, today_local
from ..common.logging import get_logger
from ..common.validators import optional_text
from ..core.constants import ALLOWED_FLOWACE_EXTENSIONS, FLOWACE_MAX_REPORTED_ERRORS
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..uploads.batch import build_summary, final_status, new_flowace_batch_id
from ..uploads.model import FlowaceUploadHistory
from ..uploads.repository import FlowaceUploadHistoryRepository
from .model import FlowaceRecord
from .parser import FlowaceRow, parse_flowace_csv
from .performance import performance_category
from .reconciliation import match_employee
from .repository import FlowaceFilters, FlowaceRepository

logger = get_logger(__name__)


@dataclass
class FlowaceUploadResult:
    batch_id: str
    status: str
    total_records: int
    processed_records: int
    errors: list[str] = field(default_factory=list)

    @property
    def message(self) -> str:
        return (
            f"Upload {self.status.lower()}: {self.processed_records} records processed, "
            f"{len(self.errors)} errors"
        )

    def to_dict(self) -> dict:
        return {
            "batchId": self.batch_id,
            "status": self.status,
            "totalRecords": self.total_records,
            "processedRecords": self.processed_records,
            "errorRecords": len(self.errors),
            "errors": self.errors[:FLOWACE_MAX_REPORTED_ERRORS],
        }


class FlowaceService:
    """Use case: ingest Flowace productivity exports and link them to employees."""

    def __init__(
        self,
        records: FlowaceRepository,
        uploads: FlowaceUploadHistoryRepository,
        employees: EmployeeRepository,
    ):
        self._records = records
        self._uploads = uploads
        self._employees = employees

    def upload(self, *, filename: str, content: str) -> FlowaceUploadResult:
        if not (filename or "").lower().endswith(ALLOWED_FLOWACE_EXTENSIONS):
            raise ValidationError("Invalid file type. Please upload a CSV file")

        parsed = parse_flowace_csv(content, default_date=today_local())
        batch_id = new_flowace_batch_id()
        employees = list(self._employees.list_all())

        records = [self._build_record(row, batch_id, employees) for row in parsed.rows]
        errors = list(parsed.errors)
        status = final_status(processed=len(records), errors=len(errors))

        history = FlowaceUploadHistory(
            batch_id=batch_id,
            filename=filename,
            status=status.value,
            total_records=parsed.total,
            processed_records=len(records),
            error_records=len(errors),
            uploaded_at=now_local(),
            completed_at=now_local(),
            errors=errors,
            original_headers=parsed.headers,
            summary=build_summary(
                processed=len(records),
                total=parsed.total,
                totalRows=parsed.total,
                successfulRows=len(records),
                errorRows=len(errors),
                columns=len(parsed.headers),
            ),
        )
        self._records.save_batch(records, history)
        logger.info(
            "Flowace upload %s (%s): %d/%d rows stored, %d errors",
            batch_id,
            filename,
            len(records),
            parsed.total,
            len(errors),
        )
        return FlowaceUploadResult(
            batch_id=batch_id,
            status=status.value,
            total_records=parsed.total,
            processed_records=len(records),
            errors=errors,
        )

    def list_records(
        self,
        *,
        month: Optional[int] = None,
        year: Optional[int] = None,
        date_from=None,
        date_to=None,
        employee_id: Optional[int] = None,
        search: Optional[str] = None,
    ) -> Sequence[FlowaceRecord]:
        if month and year:
            date_from, date_to = month_bounds(year, month)
        filters = FlowaceFilters(
            start_date=date_from,
            end_date=date_to,
            employee_id=employee_id,
            search=optional_text(search),
        )
        return self._records.list_records(filters)

    def delete_record(self, record_id: int) -> None:
        record = self._records.get_by_id(record_id)
        if not record:
            raise NotFoundError("Flowace record not found")
        self._records.delete(record)

    def list_upload_history(self) -> Sequence[FlowaceUploadHistory]:
        return self._uploads.list_all()

    def delete_batch(self, batch_id: str) -> int:
        history = self._uploads.get_by_batch(batch_id)
        if not history:
            raise NotFoundError("Upload batch not found")
        deleted = self._records.delete_batch(batch_id=batch_id, history=history)
        logger.info("Deleted Flowace batch %s (%d records)", batch_id, deleted)
        return deleted

    def reconcile(self) -> dict:
        """Link unlinked records to employees by name."""
        unlinked = self._records.list_unlinked()
        employees = list(self._employees.list_all())

        links: list[tuple[FlowaceRecord, int, str]] = []
        updates: list[dict] = []
        unmatched: list[dict] = []
        for record in unlinked:
            found = match_employee(record.employee_name, employees)
            if not found:
                unmatched.append({"id": record.id, "employeeName": record.employee_name})
                continue
            employee, reason = found
            links.append((record, employee.id, employee.employee_code))
            match = f"{record.employee_name} → {employee.name} ({reason})"
            updates.append({"id": record.id, "employeeId": employee.id, "match": match})
            logger.debug("Flowace record %s: %s", record.id, match)

        if links:
            self._records.link_employees(links)
        logger.info("Flowace reconciliation: %d linked, %d unmatched", len(links), len(unmatched))
        return {
            "totalUnmatchedRecords": len(unlinked),
            "successfulUpdates": len(links),
            "failedUpdates": len(unmatched),
            "updates": updates,
            "unmatched": unmatched,
        }

    @staticmethod
    def export_rows(records: Sequence[FlowaceRecord]) -> list[dict]:
        return [
            {
                "Employee Name": r.employee_name,
                "Employee Code": r.employee_code,
                "Date": r.date.isoformat(),
                "Teams": r.teams or "",
                "Logged Hours": format_hours_hms(r.logged_hours),
                "Active Hours": format_hours_hms(r.active_hours),
                "Productive Hours": format_hours_hms(r.productive_hours),
                "Idle Hours": format_hours_hms(r.idle_hours),
                "Productivity %": r.productivity_percentage,
                "Performance": performance_category(r.logged_hours, r.productivity_percentage).value,
            }
            for r in records
        ]

    def _build_record(self, row: FlowaceRow, batch_id: str, employees: list[Employee]) -> FlowaceRecord:
        employee = next(
            (e for e in employees if e.employee_code.upper() == row.employee_code.upper()),
            None,
        ) or next((e for e in employees if e.name == row.employee_name), None)
        return FlowaceRecord(
            employee_id=employee.id if employee else None,
            batch_id=batch_id,
            employee_name=row.employee_name,
            employee_code=row.employee_code,
            member_email=row.member_email,
            teams=row.teams,
            date=row.date,
            work_start_time=row.work_start_time,
            work_end_time=row.work_end_time,
            raw_data=row.raw_data,
            **row.metrics,
        )
