from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Issue


class IssueRepository(Protocol):
    def get_by_id(self, issue_id: int) -> Optional[Issue]: ...

    def list_all(self, *, employee_id: Optional[int] = None, status: Optional[str] = None) -> Sequence[Issue]: ...

    def save(self, issue: Issue) -> Issue: ...
