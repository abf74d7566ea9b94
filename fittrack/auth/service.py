# -*- coding: utf-8 -*-
"""Auth — registration and login over the user repository."""

from __future__ import annotations

import logging
from typing import Any, Dict

from ..errors import AlreadyExists, InvalidCredentials
from ..users.storage import UserRepository, new_user_record
from .security import create_access_token, hash_password, verify_password

logger = logging.getLogger(__name__)


def register(repo: UserRepository, *, name: str, email: str, password: str) -> Dict[str, Any]:
    # insert_user_unless_email re-checks under the repository lock.
    if repo.find_by_field("email", email):
        raise AlreadyExists()

    user = new_user_record(name=name, email=email, password_hash=hash_password(password))
    if repo.insert_user_unless_email(user) is None:
        raise AlreadyExists()
    logger.info("Registered user %s", user["id"])
    return user


def login(repo: UserRepository, *, email: str, password: str, secret: str, ttl_seconds: int = 3600) -> str:
    # Unknown email and wrong password are indistinguishable to the caller.
    user = repo.find_by_field("email", email)
    if not user or not verify_password(password, user.get("password") or ""):
        logger.info("Failed login attempt")
        raise InvalidCredentials()

    return create_access_token(user_id=user["id"], secret=secret, ttl_seconds=ttl_seconds)
