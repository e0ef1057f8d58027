from __future__ import annotations

import math
from typing import Any, Optional

import pydantic
from flask import Flask, jsonify
from sqlalchemy.exc import IntegrityError
from werkzeug.exceptions import HTTPException, RequestEntityTooLarge

from ..core.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from ..core.exceptions import DomainError, ValidationError
from ..database.extensions import db
from .logging import get_logger
from .validators import parse_int_param

logger = get_logger(__name__)


def ok(data: Any = None, *, message: Optional[str] = None, status: int = 200, **extra: Any):
    body: dict[str, Any] = {"success": True, "data": data}
    if message:
        body["message"] = message
    body.update(extra)
    return jsonify(body), status


def fail(error: str, *, status: int = 400, details: Any = None, **extra: Any):
    body: dict[str, Any] = {"success": False, "error": error}
    if details is not None:
        body["details"] = details
    body.update(extra)
    return jsonify(body), status


def page_params(args) -> tuple[int, int]:
    page = parse_int_param(args.get("page"), "page") or 1
    limit = parse_int_param(args.get("limit"), "limit") or DEFAULT_PAGE_SIZE
    return max(page, 1), min(max(limit, 1), MAX_PAGE_SIZE)


def pagination(*, total: int, page: int, limit: int) -> dict[str, Any]:
    total_pages = math.ceil(total / limit) if limit else 0
    return {
        "total": total,
        "page": page,
        "limit": limit,
        "totalPages": total_pages,
        "hasNext": page < total_pages,
        "hasPrev": page > 1,
    }


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def _domain_error(e: DomainError):
        details = e.details if isinstance(e, ValidationError) else None
        return fail(str(e), status=e.status_code, details=details)

    @app.errorhandler(pydantic.ValidationError)
    def _schema_error(e: pydantic.ValidationError):
        return fail(
            "Validation failed",
            status=400,
            details=e.errors(include_url=False, include_context=False, include_input=False),
        )

    @app.errorhandler(IntegrityError)
    def _integrity_error(e: IntegrityError):
        db.session.rollback()
        logger.warning("Integrity error: %s", e.orig)
        return fail("Conflicting record", status=409)

    @app.errorhandler(RequestEntityTooLarge)
    def _too_large(e: RequestEntityTooLarge):
        return fail("File too large", status=413)

    @app.errorhandler(HTTPException)
    def _http_error(e: HTTPException):
        return fail(e.description or e.name, status=e.code or 500)

    @app.errorhandler(Exception)
    def _unexpected(e: Exception):
        db.session.rollback()
        logger.exception("Unhandled error")
        return fail("Internal server error", status=500)
