# -*- coding: utf-8 -*-
"""Dashboard — API endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from ..deps import get_current_user
from ..users.models import DashboardResponse
from ..users.storage import public_view
from .models import CaloriesDay, DashboardStats
from .stats import calories_by_day, dashboard_stats

router = APIRouter(prefix="/api/dashboard", tags=["Dashboard"])


@router.get("", response_model=DashboardResponse, summary="Current user without password")
def dashboard(user: dict = Depends(get_current_user)):
    return {"user": public_view(user)}


@router.get("/calories-by-day", response_model=List[CaloriesDay], summary="Calories burned per day")
def dashboard_calories_by_day(user: dict = Depends(get_current_user)):
    return calories_by_day(user.get("workouts") or [])


@router.get("/stats", response_model=DashboardStats, summary="Today's workout statistics")
def dashboard_today_stats(user: dict = Depends(get_current_user)):
    return dashboard_stats(user.get("workouts") or [])
