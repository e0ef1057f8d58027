from __future__ import annotations

from flask import Flask, request

from ..common.responses import ok
from ..common.validators import parse_int_param
from ..container import Container
from .schemas import (
    BulkAssignmentRequest,
    CreateAssignmentRequest,
    TagRequest,
    UpdateAssignmentRequest,
    UpdateTagRequest,
)


def register(app: Flask, container: Container) -> None:
    tags = container.tag_service
    assignments = container.assignment_service

    @app.route("/api/tags", methods=["GET"], endpoint="list_tags")
    def list_tags():
        return ok([t.to_dict() for t in tags.list_tags()])

    @app.route("/api/tags", methods=["POST"], endpoint="create_tag")
    def create_tag():
        body = TagRequest.parse_body(request.get_json(silent=True))
        return ok(tags.create_tag(**body.model_dump()).to_dict(), message="Tag created successfully", status=201)

    @app.route("/api/tags/<int:tag_id>", methods=["GET"], endpoint="get_tag")
    def get_tag(tag_id: int):
        return ok(tags.get_tag(tag_id).to_dict())

    @app.route("/api/tags/<int:tag_id>", methods=["PUT"], endpoint="update_tag")
    def update_tag(tag_id: int):
        body = UpdateTagRequest.parse_body(request.get_json(silent=True))
        return ok(tags.update_tag(tag_id, **body.changes()).to_dict(), message="Tag updated successfully")

    @app.route("/api/tags/<int:tag_id>", methods=["DELETE"], endpoint="delete_tag")
    def delete_tag(tag_id: int):
        tags.delete_tag(tag_id)
        return ok(None, message="Tag deleted successfully")

    @app.route("/api/assignments", methods=["GET"], endpoint="list_assignments")
    def list_assignments():
        employee_id = parse_int_param(request.args.get("employeeId"), "employeeId")
        return ok([a.to_dict() for a in assignments.list_assignments(employee_id=employee_id)])

    @app.route("/api/assignments", methods=["POST"], endpoint="create_assignment")
    def create_assignment():
        body = CreateAssignmentRequest.parse_body(request.get_json(silent=True))
        assignment = assignments.create_assignment(**body.model_dump())
        return ok(assignment.to_dict(), message="Assignment created successfully", status=201)

    @app.route("/api/assignments/bulk", methods=["POST"], endpoint="bulk_create_assignments")
    def bulk_create_assignments():
        body = BulkAssignmentRequest.parse_body(request.get_json(silent=True))
        created = assignments.bulk_assign(**body.model_dump())
        return ok(
            [a.to_dict() for a in created],
            message=f"Successfully created {len(created)} assignments",
            status=201,
        )

    @app.route("/api/assignments/<int:assignment_id>", methods=["GET"], endpoint="get_assignment")
    def get_assignment(assignment_id: int):
        return ok(assignments.get_assignment(assignment_id).to_dict())

    @app.route("/api/assignments/<int:assignment_id>", methods=["PATCH"], endpoint="update_assignment")
    def update_assignment(assignment_id: int):
        body = UpdateAssignmentRequest.parse_body(request.get_json(silent=True))
        assignment = assignments.set_mandatory(assignment_id, is_mandatory=body.is_mandatory)
        return ok(assignment.to_dict(), message="Assignment updated successfully")

    @app.route("/api/assignments/<int:assignment_id>", methods=["DELETE"], endpoint="delete_assignment")
    def delete_assignment(assignment_id: int):
        assignments.delete_assignment(assignment_id)
        return ok(None, message="Assignment deleted successfully")
