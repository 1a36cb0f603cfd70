"""Request guards: bearer-token authentication and role checks."""

from __future__ import annotations

import functools
import os
from collections.abc import Callable, Mapping
from typing import Any

import jwt
from flask import g, request

HMAC_ALGORITHMS = ["HS256", "HS384", "HS512"]
BEARER_PREFIX = "Bearer "


def jwt_protected(view: Callable[..., Any]) -> Callable[..., Any]:
    """Require a valid HMAC-signed JWT in the ``Authorization`` header.

    The token may carry a ``Bearer `` prefix. The verified claims are stored
    in ``flask.g.user`` before the wrapped view runs.
    """

    @functools.wraps(view)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        header = request.headers.get("Authorization", "")
        if not header:
            return {"error": "Missing token"}, 401

        token = header.removeprefix(BEARER_PREFIX)
        try:
            claims = jwt.decode(
                token,
                os.environ.get("JWT_SECRET", ""),
                algorithms=HMAC_ALGORITHMS,
            )
        except jwt.PyJWTError:
            return {"error": "Invalid token"}, 401

        g.user = claims
        return view(*args, **kwargs)

    return wrapper


def role_guard(required_role: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Allow the wrapped view only when the stored claims carry ``required_role``."""

    def decorator(view: Callable[..., Any]) -> Callable[..., Any]:
        @functools.wraps(view)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            claims = g.get("user")
            if claims is None:
                return {"error": "Unauthorized"}, 403
            if not isinstance(claims, Mapping):
                return {"error": "Invalid token claims"}, 403
            role = claims.get("role")
            if not isinstance(role, str) or role != required_role:
                return {"error": "Access denied. Insufficient role"}, 403
            return view(*args, **kwargs)

        return wrapper

    return decorator