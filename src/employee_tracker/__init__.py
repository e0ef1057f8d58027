"""Employee Tracker: attendance, work logs, breaks, assets and productivity imports."""

__version__ = "1.0.0"
