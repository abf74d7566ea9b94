# -*- coding: utf-8 -*-
"""Dashboard — Pydantic models."""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, Field


class CaloriesDay(BaseModel):
    date: str = Field(..., description="YYYY-MM-DD")
    calories: Union[int, float] = Field(0, description="sum of calories * duration")


class DashboardStats(BaseModel):
    totalCalories: Union[int, float] = 0
    totalWorkouts: int = Field(0, ge=0)
    avgCaloriesPerWorkout: Union[int, float] = 0
