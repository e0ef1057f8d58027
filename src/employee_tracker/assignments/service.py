from __future__ import annotations

from typing import Optional, Sequence

from ..common.logging import get_logger
from ..common.validators import require_non_empty
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import Assignment, Tag
from .repository import AssignmentRepository, TagRepository

logger = get_logger(__name__)


class TagService:
    def __init__(self, tags: TagRepository):
        self._tags = tags

    def list_tags(self) -> Sequence[Tag]:
        return self._tags.list_all()

    def get_tag(self, tag_id: int) -> Tag:
        tag = self._tags.get_by_id(tag_id)
        if not tag:
            raise NotFoundError("Tag not found")
        return tag

    def create_tag(self, *, tag_name: str, time_minutes: int) -> Tag:
        tag_name = require_non_empty(tag_name, "Tag name")
        if time_minutes < 0:
            raise ValidationError("Time per item cannot be negative")
        if self._tags.get_by_name(tag_name):
            raise ConflictError("A tag with this name already exists")
        return self._tags.save(Tag(tag_name=tag_name, time_minutes=time_minutes))

    def update_tag(self, tag_id: int, *, tag_name: Optional[str] = None, time_minutes: Optional[int] = None) -> Tag:
        tag = self.get_tag(tag_id)
        if tag_name is not None:
            tag_name = require_non_empty(tag_name, "Tag name")
            other = self._tags.get_by_name(tag_name)
            if other and other.id != tag.id:
                raise ConflictError("A tag with this name already exists")
            tag.tag_name = tag_name
        if time_minutes is not None:
            if time_minutes < 0:
                raise ValidationError("Time per item cannot be negative")
            tag.time_minutes = time_minutes
        return self._tags.save(tag)

    def delete_tag(self, tag_id: int) -> None:
        self._tags.delete(self.get_tag(tag_id))


class AssignmentService:
    """Use case: map recurring work tags to employees."""

    def __init__(self, assignments: AssignmentRepository, tags: TagRepository, employees: EmployeeRepository):
        self._assignments = assignments
        self._tags = tags
        self._employees = employees

    def list_assignments(self, *, employee_id: Optional[int] = None) -> Sequence[Assignment]:
        return self._assignments.list_all(employee_id=employee_id)

    def get_assignment(self, assignment_id: int) -> Assignment:
        assignment = self._assignments.get_by_id(assignment_id)
        if not assignment:
            raise NotFoundError("Assignment not found")
        return assignment

    def create_assignment(self, *, employee_id: int, tag_id: int, is_mandatory: bool = False) -> Assignment:
        if not self._employees.get_by_id(employee_id):
            raise NotFoundError("Employee not found")
        if not self._tags.get_by_id(tag_id):
            raise NotFoundError("Tag not found")
        if self._assignments.find(employee_id=employee_id, tag_id=tag_id):
            raise ConflictError("Assignment already exists for this employee and tag")
        return self._assignments.save(
            Assignment(employee_id=employee_id, tag_id=tag_id, is_mandatory=bool(is_mandatory))
        )

    def set_mandatory(self, assignment_id: int, *, is_mandatory: bool) -> Assignment:
        assignment = self.get_assignment(assignment_id)
        assignment.is_mandatory = bool(is_mandatory)
        return self._assignments.save(assignment)

    def delete_assignment(self, assignment_id: int) -> None:
        self._assignments.delete(self.get_assignment(assignment_id))

    def bulk_assign(self, *, employee_id: int, tag_ids: Sequence[int], is_mandatory: bool = False) -> Sequence[Assignment]:
        if not tag_ids:
            raise ValidationError("At least one tag is required")
        if not self._employees.get_by_id(employee_id):
            raise NotFoundError("Employee not found")

        wanted = list(dict.fromkeys(int(t) for t in tag_ids))
        tags = {t.id: t for t in self._tags.get_many(wanted)}
        missing = [str(t) for t in wanted if t not in tags]
        if missing:
            raise NotFoundError(f"Tags not found: {', '.join(missing)}")

        existing = self._assignments.list_for_employee_tags(employee_id=employee_id, tag_ids=wanted)
        if existing:
            names = ", ".join(tags[a.tag_id].tag_name for a in existing)
            raise ConflictError(f"Assignments already exist for these tags: {names}")

        created = self._assignments.add_many(
            [Assignment(employee_id=employee_id, tag_id=t, is_mandatory=bool(is_mandatory)) for t in wanted]
        )
        logger.info("Bulk-assigned %d tags to employee %s", len(created), employee_id)
        return created
