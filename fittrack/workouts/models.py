# -*- coding: utf-8 -*-
"""Workouts — Pydantic models."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from ..dashboard.stats import utc_day


class WorkoutCreateRequest(BaseModel):
    exerciseName: str = Field(..., min_length=1, max_length=200)
    sets: int = Field(..., ge=0)
    reps: int = Field(..., ge=0)
    date: str = Field(..., description="YYYY-MM-DD or ISO-8601 datetime")
    intensity: str = Field("", max_length=50)
    duration: float = Field(..., ge=0, description="minutes")
    calories: float = Field(..., ge=0, description="calories burned per minute")

    @field_validator("date")
    @classmethod
    def _date_must_parse(cls, value: str) -> str:
        value = value.strip()
        if utc_day(value) is None:
            raise ValueError("date must be YYYY-MM-DD or an ISO-8601 datetime")
        return value
