from __future__ import annotations

from flask import Flask, request

from ..common.responses import ok, page_params, pagination
from ..common.validators import parse_date_param, parse_int_param
from ..container import Container
from .schemas import AssignAssetRequest, CreateAssetRequest, ReturnAssetRequest, UpdateAssetRequest


def register(app: Flask, container: Container) -> None:
    service = container.asset_service

    @app.route("/api/assets", methods=["GET"], endpoint="list_assets")
    def list_assets():
        page, limit = page_params(request.args)
        items, total = service.search_assets(
            page=page,
            limit=limit,
            search=request.args.get("search"),
            status=request.args.get("status"),
            asset_type=request.args.get("assetType"),
            employee_name=request.args.get("employeeName"),
            employee_code=request.args.get("employeeCode"),
            date_from=parse_date_param(request.args.get("dateFrom"), "dateFrom"),
            date_to=parse_date_param(request.args.get("dateTo"), "dateTo"),
        )
        return ok([a.to_dict() for a in items], pagination=pagination(total=total, page=page, limit=limit))

    @app.route("/api/assets", methods=["POST"], endpoint="create_asset")
    def create_asset():
        body = CreateAssetRequest.parse_body(request.get_json(silent=True))
        asset = service.create_asset(**body.model_dump())
        return ok(asset.to_dict(), message="Asset created successfully", status=201)

    @app.route("/api/assets/<int:asset_id>", methods=["GET"], endpoint="get_asset")
    def get_asset(asset_id: int):
        asset = service.get_asset(asset_id)
        data = asset.to_dict()
        data["assignments"] = [a.to_dict(include_asset=False) for a in asset.assignments]
        return ok(data)

    @app.route("/api/assets/<int:asset_id>", methods=["PUT"], endpoint="update_asset")
    def update_asset(asset_id: int):
        body = UpdateAssetRequest.parse_body(request.get_json(silent=True))
        asset = service.update_asset(asset_id, changes=body.changes())
        return ok(asset.to_dict(), message="Asset updated successfully")

    @app.route("/api/assets/<int:asset_id>", methods=["DELETE"], endpoint="delete_asset")
    def delete_asset(asset_id: int):
        service.delete_asset(asset_id)
        return ok(None, message="Asset deleted successfully")

    @app.route("/api/assets/assign", methods=["POST"], endpoint="assign_asset")
    def assign_asset():
        body = AssignAssetRequest.parse_body(request.get_json(silent=True))
        assignment = service.assign_asset(**body.model_dump())
        return ok(assignment.to_dict(), message="Asset assigned successfully", status=201)

    @app.route("/api/assets/assign", methods=["PUT"], endpoint="return_asset")
    def return_asset():
        body = ReturnAssetRequest.parse_body(request.get_json(silent=True))
        assignment = service.return_asset(**body.model_dump())
        return ok(assignment.to_dict(), message="Asset returned successfully")

    @app.route("/api/assets/history", methods=["GET"], endpoint="asset_history")
    def asset_history():
        page, limit = page_params(request.args)
        items, total = service.assignment_history(
            page=page,
            limit=limit,
            asset_id=parse_int_param(request.args.get("assetId"), "assetId"),
            employee_id=parse_int_param(request.args.get("employeeId"), "employeeId"),
            employee_name=request.args.get("employeeName"),
            employee_code=request.args.get("employeeCode"),
            asset_name=request.args.get("assetName"),
            asset_type=request.args.get("assetType"),
            status=request.args.get("status"),
            date_from=parse_date_param(request.args.get("dateFrom"), "dateFrom"),
            date_to=parse_date_param(request.args.get("dateTo"), "dateTo"),
        )
        return ok([a.to_dict() for a in items], pagination=pagination(total=total, page=page, limit=limit))

    @app.route("/api/assets/employee/<int:employee_id>", methods=["GET"], endpoint="employee_assets")
    def employee_assets(employee_id: int):
        return ok([a.to_dict() for a in service.employee_assets(employee_id)])
