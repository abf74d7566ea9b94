# -*- coding: utf-8 -*-
"""Auth — password hashing, bearer tokens and the FastAPI identity dependency.

Stored hashes look like ``pbkdf2_sha256$<iterations>$<salt>$<digest>``.
Tokens are compact HS256 JWTs carrying ``userId``, ``iat`` and ``exp``.
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import json
import os
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional, Tuple

from fastapi import Request

from ..errors import Unauthenticated

_HASH_ALG = "sha256"
_HASH_ITERATIONS = 200_000
_SALT_BYTES = 16

_TOKEN_HEADER = {"alg": "HS256", "typ": "JWT"}


def _encode_segment(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def _decode_segment(segment: str) -> bytes:
    return base64.urlsafe_b64decode(segment + "=" * (-len(segment) % 4))


def _derive(password: str, salt: bytes, iterations: int, alg: str = _HASH_ALG) -> bytes:
    return hashlib.pbkdf2_hmac(alg, password.encode("utf-8"), salt, iterations)


def hash_password(password: str) -> str:
    salt = os.urandom(_SALT_BYTES)
    digest = _derive(password, salt, _HASH_ITERATIONS)
    return "$".join(
        (f"pbkdf2_{_HASH_ALG}", str(_HASH_ITERATIONS), _encode_segment(salt), _encode_segment(digest))
    )


def _split_hash(password_hash: str) -> Optional[Tuple[str, int, bytes, bytes]]:
    fields = (password_hash or "").split("$")
    if len(fields) != 4 or not fields[0].startswith("pbkdf2_"):
        return None
    scheme, iterations, salt, digest = fields
    try:
        return scheme[len("pbkdf2_"):], int(iterations), _decode_segment(salt), _decode_segment(digest)
    except ValueError:
        return None


def verify_password(password: str, password_hash: str) -> bool:
    parts = _split_hash(password_hash)
    if parts is None:
        return False
    alg, iterations, salt, expected = parts
    try:
        actual = _derive(password, salt, iterations, alg)
    except ValueError:
        # Unknown digest name or a non-positive iteration count.
        return False
    return hmac.compare_digest(actual, expected)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _json_segment(obj: Dict[str, Any]) -> str:
    return _encode_segment(json.dumps(obj, separators=(",", ":")).encode("utf-8"))


def _signature(secret: str, header: str, payload: str) -> bytes:
    return hmac.new(secret.encode("utf-8"), f"{header}.{payload}".encode("ascii"), hashlib.sha256).digest()


def create_access_token(*, user_id: str, secret: str, ttl_seconds: int = 3600) -> str:
    issued = _utc_now()
    claims = {
        "userId": user_id,
        "iat": int(issued.timestamp()),
        "exp": int((issued + timedelta(seconds=int(ttl_seconds))).timestamp()),
    }
    header, payload = _json_segment(_TOKEN_HEADER), _json_segment(claims)
    return f"{header}.{payload}.{_encode_segment(_signature(secret, header, payload))}"


def _verified_claims(token: str, secret: str) -> Dict[str, Any]:
    try:
        header, payload, sig = (token or "").split(".")
    except ValueError:
        raise ValueError("token must have three segments")

    if json.loads(_decode_segment(header)) != _TOKEN_HEADER:
        raise ValueError("unexpected token header")
    if not hmac.compare_digest(_signature(secret, header, payload), _decode_segment(sig)):
        raise ValueError("bad signature")

    claims = json.loads(_decode_segment(payload))
    if not isinstance(claims, dict):
        raise ValueError("claims must be an object")
    return claims


def decode_token(token: str, secret: str) -> Dict[str, Any]:
    try:
        claims = _verified_claims(token, secret)
        expires = int(claims.get("exp") or 0)
    except (ValueError, TypeError) as exc:
        raise Unauthenticated() from exc
    if expires <= int(_utc_now().timestamp()):
        raise Unauthenticated()
    return claims


def authenticate(token: str, secret: str) -> str:
    user_id = str(decode_token(token, secret).get("userId") or "")
    if not user_id:
        raise Unauthenticated()
    return user_id


def get_token_from_request(request: Request) -> Optional[str]:
    scheme, _, credentials = (request.headers.get("authorization") or "").partition(" ")
    if scheme.lower() != "bearer":
        return None
    return credentials.strip() or None


def get_current_user_id(request: Request) -> str:
    """FastAPI dependency: the id bound to the request's bearer token."""
    token = get_token_from_request(request)
    if not token:
        raise Unauthenticated("No token, authorization denied")
    return authenticate(token, request.app.state.settings.jwt_secret)
