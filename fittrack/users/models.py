# -*- coding: utf-8 -*-
"""Users — Pydantic models."""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


class Workout(BaseModel):
    id: str
    exerciseName: str
    sets: int = Field(..., ge=0)
    reps: int = Field(..., ge=0)
    date: str = Field(..., description="YYYY-MM-DD or ISO-8601 datetime")
    intensity: str = ""
    duration: float = Field(..., ge=0, description="minutes")
    calories: float = Field(..., ge=0, description="calories burned per minute")


class UserPublic(BaseModel):
    """A stored user as returned to clients (no password)."""

    model_config = ConfigDict(extra="allow")

    id: str
    name: str = ""
    email: str
    # Stored as written; older records may carry loosely typed values.
    workouts: List[Dict[str, Any]] = Field(default_factory=list)
    createdAt: str
    updatedAt: str


class DashboardResponse(BaseModel):
    user: UserPublic


class MessageResponse(BaseModel):
    message: str
