from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..core.exceptions import NotFoundError, StoreError, ValidationError

logger = logging.getLogger(__name__)


def ok(data=None, status: int = 200):
    return jsonify({"success": True, "data": data}), status


def fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Corpo da requisição inválido")
    return data


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def _validation(e: ValidationError):
        return fail(str(e), 400)

    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        return fail(str(e), 404)

    @app.errorhandler(StoreError)
    def _store(e: StoreError):
        # already logged where the driver error was caught
        return fail("Erro ao acessar os dados. Tente novamente.", 503)

    @app.errorhandler(Exception)
    def _unhandled(e: Exception):
        # let Flask render its own HTTP errors (404 route, 405 method, ...)
        code = getattr(e, "code", None)
        if isinstance(code, int) and 400 <= code < 500:
            return fail(getattr(e, "description", str(e)), code)

        logger.exception("unhandled error on %s %s", request.method, request.path)
        if bool(app.config.get("DEBUG", False)):
            return fail(f"Erro interno: {e}", 500)
        return fail("Erro interno", 500)
