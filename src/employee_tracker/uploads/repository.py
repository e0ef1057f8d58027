from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import FlowaceUploadHistory, UploadHistory


class UploadHistoryRepository(Protocol):
    def start(self, *, filename: str, batch_id: str) -> UploadHistory: ...

    def finish(self, history: UploadHistory) -> UploadHistory: ...

    def get_by_id(self, history_id: int) -> Optional[UploadHistory]: ...

    def get_by_batch(self, batch_id: str) -> Optional[UploadHistory]: ...

    def list_recent(self, *, limit: int) -> Sequence[UploadHistory]: ...

    def delete(self, history: UploadHistory) -> None: ...


class FlowaceUploadHistoryRepository(Protocol):
    def add(self, history: FlowaceUploadHistory) -> FlowaceUploadHistory: ...

    def get_by_batch(self, batch_id: str) -> Optional[FlowaceUploadHistory]: ...

    def list_all(self) -> Sequence[FlowaceUploadHistory]: ...
