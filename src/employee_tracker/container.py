from __future__ import annotations

from dataclasses import dataclass

from .assets.service import AssetService
from .assets.sqlalchemy_asset_repository import SQLAlchemyAssetRepository
from .assignments.service import AssignmentService, TagService
from .assignments.sqlalchemy_assignment_repository import SQLAlchemyAssignmentRepository, SQLAlchemyTagRepository
from .attendance.import_service import AttendanceImportService
from .attendance.service import AttendanceService
from .attendance.sqlalchemy_attendance_repository import SQLAlchemyAttendanceRepository
from .breaks.service import BreakService
from .breaks.sqlalchemy_break_repository import SQLAlchemyBreakRepository
from .core.constants import ATTENDANCE_UPSERT_BATCH_SIZE, DEFAULT_BREAK_WARNING_MINUTES
from .employees.service import EmployeeService
from .employees.sqlalchemy_employee_repository import SQLAlchemyEmployeeRepository
from .flowace.service import FlowaceService
from .flowace.sqlalchemy_flowace_repository import SQLAlchemyFlowaceRepository
from .issues.service import IssueService
from .issues.sqlalchemy_issue_repository import SQLAlchemyIssueRepository
from .logs.service import LogService
from .logs.sqlalchemy_log_repository import SQLAlchemyLogRepository
from .uploads.sqlalchemy_upload_repository import (
    SQLAlchemyFlowaceUploadHistoryRepository,
    SQLAlchemyUploadHistoryRepository,
)
from .warnings.service import WarningService
from .warnings.sqlalchemy_warning_repository import SQLAlchemyWarningRepository


@dataclass(frozen=True)
class Container:
    employees_repo: SQLAlchemyEmployeeRepository
    attendance_repo: SQLAlchemyAttendanceRepository
    uploads_repo: SQLAlchemyUploadHistoryRepository
    flowace_repo: SQLAlchemyFlowaceRepository
    flowace_uploads_repo: SQLAlchemyFlowaceUploadHistoryRepository
    assets_repo: SQLAlchemyAssetRepository
    tags_repo: SQLAlchemyTagRepository
    assignments_repo: SQLAlchemyAssignmentRepository
    logs_repo: SQLAlchemyLogRepository
    breaks_repo: SQLAlchemyBreakRepository
    issues_repo: SQLAlchemyIssueRepository
    warnings_repo: SQLAlchemyWarningRepository

    employee_service: EmployeeService
    attendance_service: AttendanceService
    attendance_import_service: AttendanceImportService
    flowace_service: FlowaceService
    asset_service: AssetService
    tag_service: TagService
    assignment_service: AssignmentService
    log_service: LogService
    break_service: BreakService
    issue_service: IssueService
    warning_service: WarningService


def build_container(
    *,
    break_warning_minutes: int = DEFAULT_BREAK_WARNING_MINUTES,
    upsert_batch_size: int = ATTENDANCE_UPSERT_BATCH_SIZE,
) -> Container:
    employees_repo = SQLAlchemyEmployeeRepository()
    attendance_repo = SQLAlchemyAttendanceRepository()
    uploads_repo = SQLAlchemyUploadHistoryRepository()
    flowace_repo = SQLAlchemyFlowaceRepository()
    flowace_uploads_repo = SQLAlchemyFlowaceUploadHistoryRepository()
    assets_repo = SQLAlchemyAssetRepository()
    tags_repo = SQLAlchemyTagRepository()
    assignments_repo = SQLAlchemyAssignmentRepository()
    logs_repo = SQLAlchemyLogRepository()
    breaks_repo = SQLAlchemyBreakRepository()
    issues_repo = SQLAlchemyIssueRepository()
    warnings_repo = SQLAlchemyWarningRepository()

    employee_service = EmployeeService(employees_repo)
    attendance_service = AttendanceService(attendance_repo, employees_repo)
    attendance_import_service = AttendanceImportService(
        attendance_repo,
        employees_repo,
        uploads_repo,
        employee_service,
        batch_size=upsert_batch_size,
    )
    flowace_service = FlowaceService(flowace_repo, flowace_uploads_repo, employees_repo)
    asset_service = AssetService(assets_repo, employees_repo)
    tag_service = TagService(tags_repo)
    assignment_service = AssignmentService(assignments_repo, tags_repo, employees_repo)
    log_service = LogService(logs_repo, tags_repo, employees_repo)
    break_service = BreakService(breaks_repo, employees_repo, warning_minutes=break_warning_minutes)
    issue_service = IssueService(issues_repo, employees_repo)
    warning_service = WarningService(warnings_repo, employees_repo)

    return Container(
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        uploads_repo=uploads_repo,
        flowace_repo=flowace_repo,
        flowace_uploads_repo=flowace_uploads_repo,
        assets_repo=assets_repo,
        tags_repo=tags_repo,
        assignments_repo=assignments_repo,
        logs_repo=logs_repo,
        breaks_repo=breaks_repo,
        issues_repo=issues_repo,
        warnings_repo=warnings_repo,
        employee_service=employee_service,
        attendance_service=attendance_service,
        attendance_import_service=attendance_import_service,
        flowace_service=flowace_service,
        asset_service=asset_service,
        tag_service=tag_service,
        assignment_service=assignment_service,
        log_service=log_service,
        break_service=break_service,
        issue_service=issue_service,
        warning_service=warning_service,
    )
