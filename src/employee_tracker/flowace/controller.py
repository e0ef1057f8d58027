from __future__ import annotations

from flask import Flask, request

from ..common.excel import send_xlsx
from ..common.files import read_uploaded_text
from ..common.responses import ok
from ..common.validators import parse_date_param, parse_int_param, validate_month_year
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.flowace_service

    def _filters() -> dict:
        month, year = validate_month_year(request.args.get("month"), request.args.get("year"))
        return {
            "month": month,
            "year": year,
            "date_from": parse_date_param(request.args.get("dateFrom"), "dateFrom"),
            "date_to": parse_date_param(request.args.get("dateTo"), "dateTo"),
            "employee_id": parse_int_param(request.args.get("employeeId"), "employeeId"),
            "search": request.args.get("search"),
        }

    @app.route("/api/flowace", methods=["GET"], endpoint="list_flowace")
    def list_flowace():
        filters = _filters()
        records = service.list_records(**filters)
        meta_filters = {
            "month": filters["month"],
            "year": filters["year"],
            "dateFrom": request.args.get("dateFrom"),
            "dateTo": request.args.get("dateTo"),
            "employeeId": filters["employee_id"],
            "search": filters["search"],
        }
        return ok([r.to_dict() for r in records], meta={"totalRecords": len(records), "filters": meta_filters})

    @app.route("/api/flowace", methods=["DELETE"], endpoint="delete_flowace")
    def delete_flowace():
        record_id = parse_int_param(request.args.get("id"), "id", required=True)
        service.delete_record(record_id)
        return ok(None, message="Flowace record deleted successfully")

    @app.route("/api/flowace/upload", methods=["POST"], endpoint="upload_flowace")
    def upload_flowace():
        filename, content = read_uploaded_text()
        result = service.upload(filename=filename, content=content)
        return ok(result.to_dict(), message=result.message)

    @app.route("/api/flowace/upload-history", methods=["GET"], endpoint="flowace_upload_history")
    def flowace_upload_history():
        return ok({"history": [h.to_dict() for h in service.list_upload_history()]})

    @app.route("/api/flowace/upload-history/<batch_id>", methods=["DELETE"], endpoint="delete_flowace_batch")
    def delete_flowace_batch(batch_id: str):
        deleted = service.delete_batch(batch_id)
        return ok({"deletedRecords": deleted}, message=f"Deleted {deleted} Flowace records")

    @app.route("/api/flowace/reconcile", methods=["POST"], endpoint="reconcile_flowace")
    def reconcile_flowace():
        outcome = service.reconcile()
        return ok(outcome, message=f"Linked {outcome['successfulUpdates']} of {outcome['totalUnmatchedRecords']} records")

    @app.route("/api/flowace/export", methods=["GET"], endpoint="export_flowace")
    def export_flowace():
        records = service.list_records(**_filters())
        return send_xlsx(service.export_rows(records), sheet_name="Flowace", download_name="flowace_report.xlsx")
