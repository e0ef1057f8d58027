"""Helpers shared by the attendance and Flowace importers."""

from __future__ import annotations

import random
import string
import time
import uuid
from typing import Any, Optional

from ..core.enums import UploadStatus

_BASE36 = string.digits + string.ascii_lowercase


def new_attendance_batch_id() -> str:
    """``batch_<epoch ms>_<9 base36 chars>``."""
    suffix = "".join(random.choices(_BASE36, k=9))
    return f"batch_{int(time.time() * 1000)}_{suffix}"


def new_flowace_batch_id() -> str:
    return str(uuid.uuid4())


def final_status(*, processed: int, errors: int) -> UploadStatus:
    if errors == 0:
        return UploadStatus.COMPLETED
    if processed > 0:
        return UploadStatus.PARTIALLY_COMPLETED
    return UploadStatus.FAILED


def success_rate(*, processed: int, total: int) -> float:
    if total <= 0:
        return 0.0
    return round(processed / total * 100, 2)


def build_summary(*, processed: int, total: int, warnings: Optional[list] = None, **extra: Any) -> dict[str, Any]:
    summary: dict[str, Any] = {"successRate": success_rate(processed=processed, total=total)}
    if warnings is not None:
        summary["warnings"] = warnings
    summary.update(extra)
    return summary
