from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Assignment, Tag


class TagRepository(Protocol):
    def get_by_id(self, tag_id: int) -> Optional[Tag]: ...

    def get_by_name(self, tag_name: str) -> Optional[Tag]: ...

    def get_many(self, tag_ids: Sequence[int]) -> Sequence[Tag]: ...

    def list_all(self) -> Sequence[Tag]: ...

    def save(self, tag: Tag) -> Tag: ...

    def delete(self, tag: Tag) -> None: ...


class AssignmentRepository(Protocol):
    def get_by_id(self, assignment_id: int) -> Optional[Assignment]: ...

    def find(self, *, employee_id: int, tag_id: int) -> Optional[Assignment]: ...

    def list_for_employee_tags(self, *, employee_id: int, tag_ids: Sequence[int]) -> Sequence[Assignment]: ...

    def list_all(self, *, employee_id: Optional[int] = None) -> Sequence[Assignment]: ...

    def save(self, assignment: Assignment) -> Assignment: ...

    def add_many(self, assignments: Sequence[Assignment]) -> Sequence[Assignment]: ...

    def delete(self, assignment: Assignment) -> None: ...
