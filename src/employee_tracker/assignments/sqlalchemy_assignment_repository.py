from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import func

from ..database.extensions import db
from ..database.session import session_scope
from ..employees.model import Employee
from .model import Assignment, Tag


class SQLAlchemyTagRepository:
    def get_by_id(self, tag_id: int) -> Optional[Tag]:
        return db.session.get(Tag, tag_id)

    def get_by_name(self, tag_name: str) -> Optional[Tag]:
        return Tag.query.filter(func.lower(Tag.tag_name) == tag_name.lower()).first()

    def get_many(self, tag_ids: Sequence[int]) -> Sequence[Tag]:
        if not tag_ids:
            return []
        return Tag.query.filter(Tag.id.in_(list(tag_ids))).all()

    def list_all(self) -> Sequence[Tag]:
        return Tag.query.order_by(Tag.tag_name.asc()).all()

    def save(self, tag: Tag) -> Tag:
        with session_scope() as session:
            session.add(tag)
        return tag

    def delete(self, tag: Tag) -> None:
        with session_scope() as session:
            session.delete(tag)


class SQLAlchemyAssignmentRepository:
    def get_by_id(self, assignment_id: int) -> Optional[Assignment]:
        return db.session.get(Assignment, assignment_id)

    def find(self, *, employee_id: int, tag_id: int) -> Optional[Assignment]:
        return Assignment.query.filter_by(employee_id=employee_id, tag_id=tag_id).first()

    def list_for_employee_tags(self, *, employee_id: int, tag_ids: Sequence[int]) -> Sequence[Assignment]:
        return Assignment.query.filter(
            Assignment.employee_id == employee_id, Assignment.tag_id.in_(list(tag_ids))
        ).all()

    def list_all(self, *, employee_id: Optional[int] = None) -> Sequence[Assignment]:
        q = (
            Assignment.query.join(Employee, Assignment.employee_id == Employee.id)
            .join(Tag, Assignment.tag_id == Tag.id)
        )
        if employee_id:
            q = q.filter(Assignment.employee_id == employee_id)
        return q.order_by(Employee.name.asc(), Tag.tag_name.asc()).all()

    def save(self, assignment: Assignment) -> Assignment:
        with session_scope() as session:
            session.add(assignment)
        return assignment

    def add_many(self, assignments: Sequence[Assignment]) -> Sequence[Assignment]:
        with session_scope() as session:
            session.add_all(assignments)
        return assignments

    def delete(self, assignment: Assignment) -> None:
        with session_scope() as session:
            session.delete(assignment)
