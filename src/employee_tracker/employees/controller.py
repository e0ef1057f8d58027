from __future__ import annotations

from flask import Flask, request

from ..common.responses import ok
from ..common.validators import parse_bool_param
from ..container import Container
from .schemas import CreateEmployeeRequest, UpdateEmployeeRequest


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        employees = service.list_employees(
            search=request.args.get("search"),
            is_active=parse_bool_param(request.args.get("active")),
        )
        return ok([e.to_dict() for e in employees])

    @app.route("/api/employees", methods=["POST"], endpoint="create_employee")
    def create_employee():
        body = CreateEmployeeRequest.parse_body(request.get_json(silent=True))
        employee = service.create_employee(**body.model_dump())
        return ok(employee.to_dict(), message="Employee created successfully", status=201)

    @app.route("/api/employees/<int:employee_id>", methods=["GET"], endpoint="get_employee")
    def get_employee(employee_id: int):
        return ok(service.get_employee(employee_id).to_dict())

    @app.route("/api/employees/<int:employee_id>", methods=["PUT"], endpoint="update_employee")
    def update_employee(employee_id: int):
        body = UpdateEmployeeRequest.parse_body(request.get_json(silent=True))
        employee = service.update_employee(employee_id, changes=body.changes())
        return ok(employee.to_dict(), message="Employee updated successfully")

    @app.route("/api/employees/code/<code>", methods=["GET"], endpoint="get_employee_by_code")
    def get_employee_by_code(code: str):
        return ok(service.get_active_by_code(code).to_dict())
