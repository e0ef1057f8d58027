from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Protocol, Sequence

from ..uploads.model import FlowaceUploadHistory
from .model import FlowaceRecord


@dataclass(frozen=True)
class FlowaceFilters:
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    employee_id: Optional[int] = None
    search: Optional[str] = None


class FlowaceRepository(Protocol):
    def get_by_id(self, record_id: int) -> Optional[FlowaceRecord]: ...

    def list_records(self, filters: FlowaceFilters) -> Sequence[FlowaceRecord]: ...

    def list_unlinked(self) -> Sequence[FlowaceRecord]: ...

    def save_batch(self, records: Sequence[FlowaceRecord], history: FlowaceUploadHistory) -> None: ...

    def link_employees(self, links: Sequence[tuple[FlowaceRecord, int, str]]) -> int: ...

    def delete(self, record: FlowaceRecord) -> None: ...

    def delete_batch(self, *, batch_id: str, history: FlowaceUploadHistory) -> int: ...
