"""Constants and defaults.

Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100
UPLOAD_HISTORY_LIMIT = 50
MAX_CSV_ROWS = 10000
ATTENDANCE_UPSERT_BATCH_SIZE = 500

ALLOWED_ATTENDANCE_EXTENSIONS = (".csv", ".srp")
ALLOWED_FLOWACE_EXTENSIONS = (".csv",)

# Two punches further apart than this are treated as lunch rather than a short break
LUNCH_GAP_MINUTES = 45

DEFAULT_BREAK_WARNING_MINUTES = 30

FLOWACE_MAX_REPORTED_ERRORS = 10

AUTO_CREATED_EMPLOYEE_DOMAIN = "company.com"
AUTO_CREATED_EMPLOYEE_DEPARTMENT = "General"
AUTO_CREATED_EMPLOYEE_DESIGNATION = "Employee"

LEGACY_ATTENDANCE_PREFIX = "att_"
