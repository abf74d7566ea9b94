# -*- coding: utf-8 -*-
"""Planner — Pydantic models."""

from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel

# Form inputs arrive as numbers or as the raw text the user typed.
Scalar = Optional[Union[int, float, str]]


class DietPlanRequest(BaseModel):
    age: Scalar = None
    gender: Scalar = None
    height: Scalar = None
    weight: Scalar = None
    targetWeight: Scalar = None
    goal: Scalar = None
    dietType: Scalar = None
    mealTime: Scalar = None
    question: Scalar = None


class ExercisePlanRequest(BaseModel):
    time: Scalar = None
    difficulty: Scalar = None
    focus: Scalar = None
    training: Scalar = None
    equipment: Scalar = None
    age: Scalar = None
    gender: Scalar = None
    height: Scalar = None
    weight: Scalar = None


class PlanResponse(BaseModel):
    response: str
