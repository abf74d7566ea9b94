# -*- coding: utf-8 -*-
"""Planner: canned diet and exercise recommendations rendered as HTML."""

from .diet import generate_diet_plan
from .exercise import generate_exercise_plan

__all__ = ["generate_diet_plan", "generate_exercise_plan"]
