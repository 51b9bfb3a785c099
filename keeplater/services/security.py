from __future__ import annotations

from functools import wraps

import jwt
from flask import current_app, g, jsonify, request
from jwt.exceptions import PyJWKClientConnectionError, PyJWKClientError

JWKS_EXTENSION_KEY = "jwks_client"


def create_jwks_client(config) -> jwt.PyJWKClient:
    # Caches the key set for JWKS_CACHE_SECONDS and refetches once when a
    # token names an unknown kid.
    return jwt.PyJWKClient(
        config["JWKS_URI"],
        cache_jwk_set=True,
        lifespan=config["JWKS_CACHE_SECONDS"],
        timeout=config["JWKS_FETCH_TIMEOUT"],
    )


def _bearer_token() -> str | None:
    auth_header = request.headers.get("Authorization", "")
    if not auth_header.startswith("Bearer "):
        return None
    token = auth_header.removeprefix("Bearer ").strip()
    return token or None


def decode_bearer_token(token: str) -> dict:
    jwks_client: jwt.PyJWKClient = current_app.extensions[JWKS_EXTENSION_KEY]
    signing_key = jwks_client.get_signing_key_from_jwt(token)
    audience = current_app.config.get("JWT_AUDIENCE")
    return jwt.decode(
        token,
        signing_key.key,
        algorithms=current_app.config["JWT_ALGORITHMS"],
        audience=audience,
        issuer=current_app.config.get("JWT_ISSUER"),
        options={"verify_aud": bool(audience)},
    )


def jwt_required():
    def decorator(func):
        @wraps(func)
        def wrapped(*args, **kwargs):
            token = _bearer_token()
            if not token:
                return jsonify({"error": "authentication required"}), 401
            try:
                claims = decode_bearer_token(token)
            except PyJWKClientConnectionError as exc:
                current_app.logger.warning("JWKS refresh failed: %s", exc)
                raise
            except (jwt.InvalidTokenError, PyJWKClientError) as exc:
                current_app.logger.info("Rejected bearer token: %s", exc)
                return jsonify({"error": "invalid token"}), 401
            g.jwt_claims = claims
            return func(*args, **kwargs)

        return wrapped

    return decorator
