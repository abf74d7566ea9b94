# -*- coding: utf-8 -*-
"""Workouts — API endpoints."""

from __future__ import annotations

from uuid import uuid4

from fastapi import APIRouter, Depends

from ..auth.security import get_current_user_id
from ..deps import get_repository
from ..errors import NotFound
from ..users.models import MessageResponse, Workout
from ..users.storage import UserRepository
from .models import WorkoutCreateRequest

router = APIRouter(prefix="/api", tags=["Workouts"])


@router.post("/add-workout", response_model=MessageResponse, summary="Log a workout")
def add_workout(
    request: WorkoutCreateRequest,
    user_id: str = Depends(get_current_user_id),
    repo: UserRepository = Depends(get_repository),
):
    workout = Workout(id=uuid4().hex, **request.model_dump())
    if repo.add_workout(user_id, workout.model_dump()) is None:
        raise NotFound()
    return MessageResponse(message="Workout added successfully")
