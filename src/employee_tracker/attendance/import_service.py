from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import combine_time, hours_between, now_local
from ..common.logging import get_logger
from ..core.constants import ALLOWED_ATTENDANCE_EXTENSIONS, ATTENDANCE_UPSERT_BATCH_SIZE, UPLOAD_HISTORY_LIMIT
from ..core.enums import AttendanceStatus, ImportSource, UploadStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..employees.service import EmployeeService
from ..uploads.batch import build_summary, final_status, new_attendance_batch_id
from ..uploads.model import UploadHistory
from ..uploads.repository import UploadHistoryRepository
from .csv_parser import parse_attendance_csv
from .repository import AttendanceRepository
from .srp_parser import NO_DATA_ERROR, parse_srp
from .status_rules import infer_status

logger = get_logger(__name__)


@dataclass
class ImportResult:
    batch_id: str
    total_records: int = 0
    processed_records: int = 0
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def error_records(self) -> int:
        return len(self.errors)

    @property
    def message(self) -> str:
        return f"Successfully processed {self.processed_records} out of {self.total_records} records"

    def to_dict(self) -> dict:
        return {
            "batchId": self.batch_id,
            "totalRecords": self.total_records,
            "processedRecords": self.processed_records,
            "errorRecords": self.error_records,
            "warningsCount": len(self.warnings),
            "errors": self.errors,
            "warnings": self.warnings,
        }


class AttendanceImportService:
    """Use case: import attendance from CSV or SRP files and manage upload batches."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        uploads: UploadHistoryRepository,
        employee_service: EmployeeService,
        *,
        batch_size: int = ATTENDANCE_UPSERT_BATCH_SIZE,
    ):
        self._attendance = attendance
        self._employees = employees
        self._uploads = uploads
        self._employee_service = employee_service
        self._batch_size = batch_size

    def import_file(self, *, filename: str, content: str, upload_date: Optional[date] = None) -> ImportResult:
        lower = (filename or "").lower()
        if not lower.endswith(ALLOWED_ATTENDANCE_EXTENSIONS):
            raise ValidationError("Invalid file type. Please upload a CSV or SRP file")
        if not content.strip():
            raise ValidationError("Uploaded file is empty")

        batch_id = new_attendance_batch_id()
        history = self._uploads.start(filename=filename, batch_id=batch_id)
        logger.info("Attendance upload %s started: %s", batch_id, filename)

        result = ImportResult(batch_id=batch_id)
        try:
            if lower.endswith(".srp"):
                self._import_srp(content, upload_date, result)
            else:
                self._import_csv(content, result)
        except ValidationError as e:
            result.errors.append(str(e))
            self._finish(history, result)
            raise
        except Exception:
            result.errors.append("Unexpected error while processing file")
            self._finish(history, result)
            raise

        self._finish(history, result)
        logger.info(
            "Attendance upload %s finished: %d/%d processed, %d errors, %d warnings",
            batch_id,
            result.processed_records,
            result.total_records,
            result.error_records,
            len(result.warnings),
        )
        return result

    def list_upload_history(self) -> Sequence[UploadHistory]:
        return self._uploads.list_recent(limit=UPLOAD_HISTORY_LIMIT)

    def delete_upload_history(self, history_id: int) -> None:
        history = self._uploads.get_by_id(history_id)
        if not history:
            raise NotFoundError("Upload history not found")
        self._uploads.delete(history)

    def delete_batch(self, batch_id: str) -> int:
        batch_id = (batch_id or "").strip()
        if not batch_id:
            raise ValidationError("Batch ID is required")
        history = self._uploads.get_by_batch(batch_id)
        if not history:
            raise NotFoundError("Batch not found")
        deleted = self._attendance.delete_batch(batch_id=batch_id, history=history)
        logger.info("Deleted batch %s (%d attendance records)", batch_id, deleted)
        return deleted

    def _import_csv(self, content: str, result: ImportResult) -> None:
        parsed = parse_attendance_csv(content)
        result.total_records = parsed.total
        result.errors.extend(parsed.errors)

        codes = sorted({row.employee_code.upper() for _, row in parsed.rows})
        by_code = {e.employee_code.upper(): e for e in self._employees.list_by_codes(codes)}

        rows: list[dict] = []
        for row_no, row in parsed.rows:
            employee = by_code.get(row.employee_code.upper())
            if not employee:
                result.errors.append(f"Row {row_no}: Employee with code {row.employee_code} not found")
                continue
            try:
                check_in = combine_time(row.work_date, row.check_in_time)
                check_out = combine_time(row.work_date, row.check_out_time)
            except ValueError:
                result.errors.append(f"Row {row_no}: Invalid check-in/check-out time")
                continue

            status = row.status or infer_status(
                total_hours=row.total_hours,
                has_check_in=check_in is not None,
                has_check_out=check_out is not None,
                tag_work_minutes=row.tag_work_minutes,
                flowace_minutes=row.flowace_minutes,
            )
            if status == AttendanceStatus.PRESENT and not check_in and not check_out:
                result.warnings.append(f"Row {row_no}: Employee marked present but no check-in/out times provided")
            if row.has_exception and not row.exception_notes:
                result.warnings.append(f"Row {row_no}: Exception marked but no notes provided")

            rows.append(
                {
                    "employee_id": employee.id,
                    "date": row.work_date,
                    "status": status.value,
                    "check_in_time": check_in,
                    "check_out_time": check_out,
                    "total_hours": row.total_hours if row.total_hours is not None else hours_between(check_in, check_out),
                    "tag_work_minutes": row.tag_work_minutes,
                    "flowace_minutes": row.flowace_minutes,
                    "has_exception": row.has_exception,
                    "exception_type": row.exception_type.value if row.exception_type else None,
                    "exception_notes": row.exception_notes,
                    "import_source": ImportSource.CSV_FILE.value,
                    "import_batch": result.batch_id,
                }
            )

        result.processed_records = self._attendance.upsert_many(rows, batch_size=self._batch_size)

    def _import_srp(self, content: str, upload_date: Optional[date], result: ImportResult) -> None:
        parsed = parse_srp(content, upload_date)
        if parsed.errors:
            raise ValidationError(NO_DATA_ERROR if NO_DATA_ERROR in parsed.errors else parsed.errors[0])

        result.total_records = len(parsed.records)
        result.warnings.extend(parsed.skipped)

        cache: dict[str, Employee] = {}
        created_employees: list[Employee] = []
        rows: list[dict] = []
        for rec in parsed.records:
            employee = cache.get(rec.employee_code)
            if employee is None:
                employee, created = self._employee_service.ensure_for_import(
                    employee_code=rec.employee_code, name=rec.employee_name
                )
                cache[rec.employee_code] = employee
                if created:
                    created_employees.append(employee)
                    result.warnings.append(f"Created new employee {rec.employee_code} ({employee.name})")

            times = {
                key: combine_time(rec.date, getattr(rec, key))
                for key in (
                    "check_in_time",
                    "check_out_time",
                    "lunch_out_time",
                    "lunch_in_time",
                    "break_out_time",
                    "break_in_time",
                )
            }
            hours = rec.hours_worked
            if hours is None:
                hours = hours_between(times["check_in_time"], times["check_out_time"])

            rows.append(
                {
                    "employee": employee,
                    "date": rec.date,
                    "status": rec.status.value,
                    "total_hours": hours,
                    "remarks": f"Shift: {rec.shift}, Start: {rec.shift_start or '-'}",
                    "shift": rec.shift,
                    "shift_start": rec.shift_start,
                    "import_source": ImportSource.SRP_FILE.value,
                    "import_batch": result.batch_id,
                    **times,
                }
            )

        result.processed_records = self._attendance.upsert_many(
            rows, batch_size=self._batch_size, new_employees=created_employees
        )

    def _finish(self, history: UploadHistory, result: ImportResult) -> None:
        status: UploadStatus = final_status(processed=result.processed_records, errors=result.error_records)
        history.status = status.value
        history.total_records = result.total_records
        history.processed_records = result.processed_records
        history.error_records = result.error_records
        history.completed_at = now_local()
        history.errors = list(result.errors)
        history.summary = build_summary(
            processed=result.processed_records,
            total=result.total_records,
            warnings=list(result.warnings),
        )
        self._uploads.finish(history)
