# -*- coding: utf-8 -*-
"""Profile — API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ..deps import get_current_user, get_repository
from ..errors import NotFound
from ..users.models import DashboardResponse
from ..users.storage import UserRepository, normalize_email, public_view, utc_now
from .models import ProfileUpdateRequest

router = APIRouter(prefix="/api/profile", tags=["Profile"])


@router.patch("", response_model=DashboardResponse, summary="Update name and/or email")
def update_profile(
    request: ProfileUpdateRequest,
    user: dict = Depends(get_current_user),
    repo: UserRepository = Depends(get_repository),
):
    changes = request.model_dump(exclude_none=True)
    if "email" in changes:
        changes["email"] = normalize_email(changes["email"])
    if changes:
        changes["updatedAt"] = utc_now()

    updated = repo.update_user_unless_email_taken(user["id"], changes)
    if updated is None:
        raise NotFound()
    return {"user": public_view(updated)}
