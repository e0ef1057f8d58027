from __future__ import annotations

from ..common.datetime_utils import iso
from ..database.extensions import db
from ..database.mixins import TimestampMixin


class Tag(TimestampMixin, db.Model):
    """A recurring unit of work with a standard time per item."""

    __tablename__ = "tags"

    id = db.Column(db.Integer, primary_key=True)
    tag_name = db.Column(db.String(120), nullable=False, unique=True)
    time_minutes = db.Column(db.Integer, nullable=False, default=0)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "tagName": self.tag_name,
            "timeMinutes": self.time_minutes,
            "createdAt": iso(self.created_at),
            "updatedAt": iso(self.updated_at),
        }


class Assignment(TimestampMixin, db.Model):
    __tablename__ = "assignments"
    __table_args__ = (db.UniqueConstraint("employee_id", "tag_id", name="uq_assignment_employee_tag"),)

    id = db.Column(db.Integer, primary_key=True)
    employee_id = db.Column(db.Integer, db.ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True)
    tag_id = db.Column(db.Integer, db.ForeignKey("tags.id", ondelete="CASCADE"), nullable=False, index=True)
    is_mandatory = db.Column(db.Boolean, nullable=False, default=False)

    employee = db.relationship("Employee", backref=db.backref("assignments", passive_deletes=True))
    tag = db.relationship("Tag", backref=db.backref("assignments", passive_deletes=True))

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "employeeId": self.employee_id,
            "tagId": self.tag_id,
            "isMandatory": self.is_mandatory,
            "employee": self.employee.to_brief() if self.employee else None,
            "tag": self.tag.to_dict() if self.tag else None,
            "createdAt": iso(self.created_at),
        }
