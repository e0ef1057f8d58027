from __future__ import annotations

from flask import Flask, request

from ..common.excel import send_xlsx
from ..common.files import read_uploaded_text
from ..common.responses import ok
from ..common.validators import parse_date_param, parse_int_param, validate_month_year
from ..container import Container
from ..core.exceptions import ValidationError
from .schemas import CreateAttendanceRequest, UpdateAttendanceRequest


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service
    importer = container.attendance_import_service

    def _filters_from_args() -> dict:
        month, year = validate_month_year(request.args.get("month"), request.args.get("year"))
        return {
            "month": month,
            "year": year,
            "status": request.args.get("status"),
            "search": request.args.get("search"),
            "employee_id": parse_int_param(request.args.get("employeeId"), "employeeId"),
        }

    @app.route("/api/attendance", methods=["GET"], endpoint="list_attendance")
    def list_attendance():
        filters = _filters_from_args()
        records = service.list_attendance(**filters)
        return ok(
            [r.to_dict() for r in records],
            meta={
                "totalRecords": len(records),
                "filters": {
                    "month": filters["month"],
                    "year": filters["year"],
                    "status": filters["status"],
                    "search": filters["search"],
                    "employeeId": filters["employee_id"],
                },
            },
        )

    @app.route("/api/attendance", methods=["POST"], endpoint="create_attendance")
    def create_attendance():
        body = CreateAttendanceRequest.parse_body(request.get_json(silent=True))
        record = service.create_record(**body.model_dump())
        return ok(record.to_dict(), message="Attendance record created successfully", status=201)

    @app.route("/api/attendance/export", methods=["GET"], endpoint="export_attendance")
    def export_attendance():
        records = service.list_attendance(**_filters_from_args())
        rows = [
            {
                "Employee Code": r.employee.employee_code if r.employee else "",
                "Employee Name": r.employee.name if r.employee else "",
                "Date": r.date.isoformat(),
                "Status": r.status,
                "Check In": r.check_in_time.strftime("%H:%M") if r.check_in_time else "",
                "Check Out": r.check_out_time.strftime("%H:%M") if r.check_out_time else "",
                "Total Hours": r.total_hours,
                "Source": r.import_source,
            }
            for r in records
        ]
        return send_xlsx(rows, sheet_name="Attendance", download_name="attendance_report.xlsx")

    @app.route("/api/attendance/employee/<int:employee_id>", methods=["GET"], endpoint="employee_attendance")
    def employee_attendance(employee_id: int):
        month, year = validate_month_year(request.args.get("month"), request.args.get("year"))
        items, meta = service.employee_attendance(employee_id, month=month, year=year)
        return ok(items, meta=meta)

    @app.route("/api/attendance/employee/<int:employee_id>/summary", methods=["GET"], endpoint="attendance_summary")
    def attendance_summary(employee_id: int):
        month, year = validate_month_year(request.args.get("month"), request.args.get("year"))
        if month is None:
            raise ValidationError("Month and year are required")
        return ok(service.monthly_summary(employee_id, month=month, year=year))

    @app.route("/api/attendance/employee/<int:employee_id>/calendar", methods=["GET"], endpoint="attendance_calendar")
    def attendance_calendar(employee_id: int):
        month, year = validate_month_year(request.args.get("month"), request.args.get("year"))
        if month is None:
            raise ValidationError("Month and year are required")
        return ok(service.calendar(employee_id, month=month, year=year))

    @app.route("/api/attendance/record/<record_id>", methods=["PUT"], endpoint="update_attendance_record")
    def update_attendance_record(record_id: str):
        body = UpdateAttendanceRequest.parse_body(request.get_json(silent=True))
        record = service.update_record(record_id, changes=body.changes())
        return ok(record.to_dict(), message="Attendance record updated successfully")

    @app.route("/api/attendance/record/<record_id>", methods=["DELETE"], endpoint="delete_attendance_record")
    def delete_attendance_record(record_id: str):
        service.delete_record(record_id)
        return ok(None, message="Attendance record deleted successfully")

    @app.route("/api/attendance/upload", methods=["POST"], endpoint="upload_attendance")
    def upload_attendance():
        filename, content = read_uploaded_text()
        upload_date = parse_date_param(request.form.get("uploadDate"), "uploadDate")
        result = importer.import_file(filename=filename, content=content, upload_date=upload_date)
        return ok(result.to_dict(), message=result.message)

    @app.route("/api/attendance/upload-history", methods=["GET"], endpoint="attendance_upload_history")
    def attendance_upload_history():
        return ok([h.to_dict() for h in importer.list_upload_history()])

    @app.route("/api/attendance/upload-history", methods=["DELETE"], endpoint="delete_attendance_upload_history")
    def delete_attendance_upload_history():
        history_id = parse_int_param(request.args.get("id"), "id", required=True)
        importer.delete_upload_history(history_id)
        return ok(None, message="Upload history deleted successfully")

    @app.route("/api/attendance/delete-batch", methods=["DELETE"], endpoint="delete_attendance_batch")
    def delete_attendance_batch():
        deleted = importer.delete_batch(request.args.get("batchId") or "")
        return ok(
            {"deletedRecords": deleted},
            message=f"Deleted {deleted} attendance records from batch",
        )
