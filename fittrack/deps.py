# -*- coding: utf-8 -*-
"""Shared FastAPI dependencies."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import Depends, Request

from .auth.security import get_current_user_id
from .errors import NotFound
from .users.storage import UserRepository


def get_repository(request: Request) -> UserRepository:
    return request.app.state.repository


def get_current_user(
    user_id: str = Depends(get_current_user_id),
    repo: UserRepository = Depends(get_repository),
) -> Dict[str, Any]:
    user = repo.find_by_field("id", user_id)
    if not user:
        raise NotFound()
    return user
