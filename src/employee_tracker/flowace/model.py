from __future__ import annotations

from ..common.datetime_utils import iso
from ..database.extensions import db
from ..database.mixins import TimestampMixin
from .performance import performance_category


class FlowaceRecord(TimestampMixin, db.Model):
    """One employee-day row from a Flowace productivity export."""

    __tablename__ = "flowace_records"

    id = db.Column(db.Integer, primary_key=True)
    employee_id = db.Column(db.Integer, db.ForeignKey("employees.id", ondelete="SET NULL"), index=True)
    batch_id = db.Column(db.String(64), nullable=False, index=True)
    employee_name = db.Column(db.String(120), nullable=False)
    employee_code = db.Column(db.String(120))
    member_email = db.Column(db.String(180))
    teams = db.Column(db.String(255))
    date = db.Column(db.Date, nullable=False, index=True)
    work_start_time = db.Column(db.String(16))
    work_end_time = db.Column(db.String(16))
    logged_hours = db.Column(db.Float, nullable=False, default=0)
    active_hours = db.Column(db.Float, nullable=False, default=0)
    idle_hours = db.Column(db.Float, nullable=False, default=0)
    classified_hours = db.Column(db.Float, nullable=False, default=0)
    unclassified_hours = db.Column(db.Float, nullable=False, default=0)
    productive_hours = db.Column(db.Float, nullable=False, default=0)
    unproductive_hours = db.Column(db.Float, nullable=False, default=0)
    neutral_hours = db.Column(db.Float, nullable=False, default=0)
    available_hours = db.Column(db.Float, nullable=False, default=0)
    missing_hours = db.Column(db.Float, nullable=False, default=0)
    activity_percentage = db.Column(db.Float)
    classified_percentage = db.Column(db.Float)
    productivity_percentage = db.Column(db.Float)
    classified_billable_duration = db.Column(db.Integer, nullable=False, default=0)
    classified_non_billable_duration = db.Column(db.Integer, nullable=False, default=0)
    raw_data = db.Column(db.JSON)

    employee = db.relationship("Employee", backref="flowace_records")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "employeeId": self.employee_id,
            "employee": self.employee.to_brief() if self.employee else None,
            "batchId": self.batch_id,
            "employeeName": self.employee_name,
            "employeeCode": self.employee_code,
            "memberEmail": self.member_email,
            "teams": self.teams,
            "date": iso(self.date),
            "workStartTime": self.work_start_time,
            "workEndTime": self.work_end_time,
            "loggedHours": self.logged_hours,
            "activeHours": self.active_hours,
            "idleHours": self.idle_hours,
            "classifiedHours": self.classified_hours,
            "unclassifiedHours": self.unclassified_hours,
            "productiveHours": self.productive_hours,
            "unproductiveHours": self.unproductive_hours,
            "neutralHours": self.neutral_hours,
            "availableHours": self.available_hours,
            "missingHours": self.missing_hours,
            "activityPercentage": self.activity_percentage,
            "classifiedPercentage": self.classified_percentage,
            "productivityPercentage": self.productivity_percentage,
            "classifiedBillableDuration": self.classified_billable_duration,
            "classifiedNonBillableDuration": self.classified_non_billable_duration,
            "performanceCategory": performance_category(self.logged_hours, self.productivity_percentage).value,
            "createdAt": iso(self.created_at),
        }
