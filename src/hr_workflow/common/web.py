from __future__ import annotations

import logging
from functools import wraps

from flask import g, jsonify, request

from ..core.enums import Role
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from ..users.tokens import Identity, TokenService

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (ConflictError, 409),
)


def status_for(exc: DomainError) -> int:
    for cls, code in _STATUS_BY_ERROR:
        if isinstance(exc, cls):
            return code
    return 400


def error_body(message: str, *, envelope: bool) -> dict:
    if envelope:
        return {"success": False, "error": message}
    return {"error": message}


def api_errors(failure_message: str, *, envelope: bool = False):
    """Translate domain errors to 4xx JSON and anything else to a fixed 500."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except DomainError as e:
                return jsonify(error_body(str(e), envelope=envelope)), status_for(e)
            except Exception:
                logger.exception("%s %s failed", request.method, request.path)
                return jsonify(error_body(failure_message, envelope=envelope)), 500

        return wrapper

    return decorator


def json_body() -> dict:
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


def role_required(tokens: TokenService, role: Role):
    """Require a valid bearer token whose role claim equals ``role``."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            header = request.headers.get("Authorization", "")
            scheme, _, token = header.partition(" ")
            if scheme.lower() != "bearer" or not token.strip():
                raise AuthenticationError("Authentication required")

            identity = tokens.verify(token.strip())
            if identity.role != role:
                raise AuthorizationError(f"Only {role.value}s can access this endpoint")

            g.identity = identity
            return view(*args, **kwargs)

        return wrapper

    return decorator


def current_identity() -> Identity:
    return g.identity


def own_email(requested: str | None) -> str:
    """Email an employee endpoint acts on; defaults to the caller's own."""

    identity = current_identity()
    email = (requested or "").strip() or identity.email
    if email.lower() != identity.email.lower():
        raise AuthorizationError("You can only access your own records")
    return email
