from __future__ import annotations

from flask import Flask, request

from ..common.responses import ok
from ..common.validators import optional_text, parse_int_param
from ..container import Container
from .schemas import CreateIssueRequest, UpdateIssueRequest


def register(app: Flask, container: Container) -> None:
    service = container.issue_service

    @app.route("/api/issues", methods=["GET"], endpoint="list_issues")
    def list_issues():
        issues = service.list_issues(
            employee_id=parse_int_param(request.args.get("employeeId"), "employeeId"),
            status=optional_text(request.args.get("status")),
        )
        return ok([i.to_dict() for i in issues])

    @app.route("/api/issues", methods=["POST"], endpoint="create_issue")
    def create_issue():
        body = CreateIssueRequest.parse_body(request.get_json(silent=True))
        issue = service.raise_issue(**body.model_dump())
        return ok(issue.to_dict(), message="Issue created successfully", status=201)

    @app.route("/api/issues/<int:issue_id>", methods=["GET"], endpoint="get_issue")
    def get_issue(issue_id: int):
        return ok(service.get_issue(issue_id).to_dict())

    @app.route("/api/issues/<int:issue_id>", methods=["PUT"], endpoint="update_issue")
    def update_issue(issue_id: int):
        body = UpdateIssueRequest.parse_body(request.get_json(silent=True))
        issue = service.update_issue(issue_id, changes=body.changes())
        return ok(issue.to_dict(), message="Issue updated successfully")
