from __future__ import annotations

from flask import Flask, request

from ..common.responses import ok
from ..common.validators import parse_date_param, parse_int_param
from ..container import Container
from .schemas import BreakRequest


def register(app: Flask, container: Container) -> None:
    service = container.break_service

    @app.route("/api/breaks/in", methods=["POST"], endpoint="break_in")
    def break_in():
        body = BreakRequest.parse_body(request.get_json(silent=True))
        item = service.start_break(employee_id=body.employee_id)
        return ok(item.to_dict(), message="Break started", status=201)

    @app.route("/api/breaks/out", methods=["POST"], endpoint="break_out")
    def break_out():
        body = BreakRequest.parse_body(request.get_json(silent=True))
        item = service.end_break(employee_id=body.employee_id)
        return ok(item.to_dict(), message=f"Break ended after {item.break_duration} minutes")

    @app.route("/api/breaks/status", methods=["GET"], endpoint="break_status")
    def break_status():
        employee_id = parse_int_param(request.args.get("employeeId"), "employeeId", required=True)
        return ok(service.status(employee_id=employee_id))

    @app.route("/api/breaks/history/<int:employee_id>", methods=["GET"], endpoint="break_history")
    def break_history(employee_id: int):
        day = parse_date_param(request.args.get("date"), "date", required=True)
        return ok([b.to_dict() for b in service.history(employee_id=employee_id, break_date=day)])

    @app.route("/api/breaks/summary/<int:employee_id>", methods=["GET"], endpoint="break_summary")
    def break_summary(employee_id: int):
        day = parse_date_param(request.args.get("date"), "date", required=True)
        return ok(service.summary(employee_id=employee_id, break_date=day))
