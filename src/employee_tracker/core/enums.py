from __future__ import annotations

from enum import Enum


class EmployeeRole(str, Enum):
    EMPLOYEE = "employee"
    ADMIN = "admin"
    MANAGER = "manager"
    HR = "hr"


class AttendanceStatus(str, Enum):
    """Normalised attendance status stored in the database."""

    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    LATE = "LATE"
    HALF_DAY = "HALF_DAY"
    LEAVE_APPROVED = "LEAVE_APPROVED"
    WFH_APPROVED = "WFH_APPROVED"


class AttendanceExceptionType(str, Enum):
    WORKED_ON_APPROVED_LEAVE = "WORKED_ON_APPROVED_LEAVE"
    NO_WORK_ON_WFH = "NO_WORK_ON_WFH"
    ABSENT_DESPITE_DENIAL = "ABSENT_DESPITE_DENIAL"
    WORKED_DESPITE_DENIAL = "WORKED_DESPITE_DENIAL"
    ATTENDANCE_WORK_MISMATCH = "ATTENDANCE_WORK_MISMATCH"
    MISSING_CHECKOUT = "MISSING_CHECKOUT"
    WORK_WITHOUT_CHECKIN = "WORK_WITHOUT_CHECKIN"


class ImportSource(str, Enum):
    MANUAL = "manual"
    CSV_FILE = "CSV_FILE"
    SRP_FILE = "SRP_FILE"


class UploadStatus(str, Enum):
    """Lifecycle of an attendance or Flowace upload batch."""

    PROCESSING = "PROCESSING"
    COMPLETED = "COMPLETED"
    PARTIALLY_COMPLETED = "PARTIALLY_COMPLETED"
    FAILED = "FAILED"


class AssetStatus(str, Enum):
    AVAILABLE = "AVAILABLE"
    ASSIGNED = "ASSIGNED"
    MAINTENANCE = "MAINTENANCE"
    RETIRED = "RETIRED"
    LOST = "LOST"


class AssetCondition(str, Enum):
    EXCELLENT = "EXCELLENT"
    GOOD = "GOOD"
    FAIR = "FAIR"
    POOR = "POOR"
    DAMAGED = "DAMAGED"


class AssignmentStatus(str, Enum):
    """Status of an asset handed to an employee."""

    ACTIVE = "ACTIVE"
    RETURNED = "RETURNED"
    LOST = "LOST"
    DAMAGED_RETURN = "DAMAGED_RETURN"


class IssueStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    RESOLVED = "resolved"


class WarningType(str, Enum):
    ATTENDANCE = "ATTENDANCE"
    PERFORMANCE = "PERFORMANCE"
    CONDUCT = "CONDUCT"
    OTHER = "OTHER"


class PerformanceCategory(str, Enum):
    """Flowace productivity bucket derived from hours and productivity %."""

    EXCELLENT = "EXCELLENT"
    GOOD = "GOOD"
    AVERAGE = "AVERAGE"
    NEEDS_IMPROVEMENT = "NEEDS_IMPROVEMENT"
    LOW_HOURS = "LOW_HOURS"
