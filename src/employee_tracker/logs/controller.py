from __future__ import annotations

from flask import Flask, request

from ..common.responses import ok
from ..common.validators import parse_date_param, parse_int_param
from ..container import Container
from .schemas import SubmitLogsRequest


def register(app: Flask, container: Container) -> None:
    service = container.log_service

    @app.route("/api/logs/by-date", methods=["GET"], endpoint="logs_by_date")
    def logs_by_date():
        employee_id = parse_int_param(request.args.get("employeeId"), "employeeId", required=True)
        log_date = parse_date_param(request.args.get("logDate"), "logDate", required=True)
        logs, submission = service.logs_for_day(employee_id=employee_id, log_date=log_date)
        return ok(
            {
                "logs": [log.to_dict() for log in logs],
                "submissionStatus": submission.to_dict() if submission else None,
            }
        )

    @app.route("/api/logs", methods=["GET"], endpoint="list_logs")
    def list_logs():
        logs = service.logs_in_range(
            employee_id=parse_int_param(request.args.get("employeeId"), "employeeId"),
            date_from=parse_date_param(request.args.get("dateFrom"), "dateFrom"),
            date_to=parse_date_param(request.args.get("dateTo"), "dateTo"),
        )
        return ok([log.to_dict() for log in logs])

    @app.route("/api/logs", methods=["POST"], endpoint="submit_logs")
    def submit_logs():
        body = SubmitLogsRequest.parse_body(request.get_json(silent=True))
        logs, submission = service.submit(
            employee_id=body.employee_id,
            log_date=body.log_date,
            entries=[(entry.tag_id, entry.count) for entry in body.logs],
        )
        return ok(
            {"logs": [log.to_dict() for log in logs], "submissionStatus": submission.to_dict()},
            message=submission.status_message,
            status=201,
        )
