from __future__ import annotations

import logging
from functools import wraps

from flask import current_app, jsonify, request

from ..core.exceptions import DomainError

logger = logging.getLogger(__name__)


def error_response(message: str, status: int):
    return jsonify({"erro": message}), status


def json_body() -> dict:
    """JSON object sent in the request; anything else (array, scalar, bad JSON) reads as empty."""
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


def json_errors(view):
    """Translate business errors to 400 and anything unexpected to 500."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except DomainError as e:
            return error_response(str(e), 400)
        except Exception as e:
            logger.exception("Unhandled error in %s", view.__name__)
            if bool(current_app.config.get("DEBUG", False)):
                return error_response(f"Erro interno: {e}", 500)
            return error_response("Erro interno do servidor.", 500)

    return wrapper
