from __future__ import annotations

from flask import Flask, request

from ..common.responses import ok
from ..common.validators import parse_bool_param, parse_int_param
from ..container import Container
from .schemas import CreateWarningRequest, UpdateWarningRequest


def register(app: Flask, container: Container) -> None:
    service = container.warning_service

    @app.route("/api/warnings", methods=["GET"], endpoint="list_warnings")
    def list_warnings():
        warnings = service.list_warnings(
            employee_id=parse_int_param(request.args.get("employeeId"), "employeeId"),
            is_active=parse_bool_param(request.args.get("active")),
        )
        return ok([w.to_dict() for w in warnings])

    @app.route("/api/warnings", methods=["POST"], endpoint="create_warning")
    def create_warning():
        body = CreateWarningRequest.parse_body(request.get_json(silent=True))
        warning = service.issue_warning(**body.model_dump())
        return ok(warning.to_dict(), message="Warning created successfully", status=201)

    @app.route("/api/warnings/<int:warning_id>", methods=["PUT"], endpoint="update_warning")
    def update_warning(warning_id: int):
        body = UpdateWarningRequest.parse_body(request.get_json(silent=True))
        warning = service.update_warning(warning_id, changes=body.changes())
        return ok(warning.to_dict(), message="Warning updated successfully")

    @app.route("/api/warnings/<int:warning_id>/dismiss", methods=["POST"], endpoint="dismiss_warning")
    def dismiss_warning(warning_id: int):
        warning = service.dismiss(warning_id)
        return ok(warning.to_dict(), message="Warning dismissed")

    @app.route("/api/warnings/<int:warning_id>", methods=["DELETE"], endpoint="delete_warning")
    def delete_warning(warning_id: int):
        service.delete_warning(warning_id)
        return ok(None, message="Warning deleted successfully")
