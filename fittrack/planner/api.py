# -*- coding: utf-8 -*-
"""Planner — API endpoints (no auth, nothing stored)."""

from __future__ import annotations

from fastapi import APIRouter

from .diet import generate_diet_plan
from .exercise import generate_exercise_plan
from .models import DietPlanRequest, ExercisePlanRequest, PlanResponse

router = APIRouter(prefix="/api", tags=["Planner"])


@router.post("/dietPlanner", response_model=PlanResponse, summary="Templated diet plan")
def diet_planner(request: DietPlanRequest):
    return PlanResponse(response=generate_diet_plan(request))


@router.post("/exercise", response_model=PlanResponse, summary="Templated workout plan")
def exercise_planner(request: ExercisePlanRequest):
    return PlanResponse(response=generate_exercise_plan(request))
