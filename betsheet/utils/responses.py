"""Helpers for the JSON envelope: {"success", "data", "error"}."""

from __future__ import annotations

from typing import Any

from flask import Response, jsonify

from betsheet.errors import AppError


def ok(data: Any, status_code: int = 200) -> tuple[Response, int]:
    return jsonify({"success": True, "data": data, "error": None}), status_code


def created(data: Any) -> tuple[Response, int]:
    return ok(data, status_code=201)


def fail(code: str, message: str, status_code: int, details: Any | None = None) -> tuple[Response, int]:
    error = {"code": code, "message": message, "details": details}
    return jsonify({"success": False, "data": None, "error": error}), status_code


def fail_with(exc: AppError) -> tuple[Response, int]:
    """Error response for an application error."""

    return fail(exc.code, exc.message, exc.status_code, exc.details)
