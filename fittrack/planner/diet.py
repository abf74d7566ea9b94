# -*- coding: utf-8 -*-
"""Diet plan template."""

from __future__ import annotations

import re
from html import escape
from typing import Any, List

from .models import DietPlanRequest

_MAX_MEALS = 5

_PLANT_MEALS = [
    "Oatmeal with fruits and nuts",
    "Vegetable salad with tofu",
    "Bean and vegetable soup",
    "Smoothie with plant protein",
    "Roasted vegetables with quinoa",
]
_KETO_MEALS = [
    "Eggs and avocado",
    "Cheese and nuts",
    "Salmon with green vegetables",
    "Greek yogurt with berries",
    "Chicken with cauliflower rice",
]
_DEFAULT_MEALS = [
    "Eggs with whole grain toast",
    "Grilled chicken salad",
    "Fish with steamed vegetables",
    "Protein shake with fruits",
    "Lean meat with sweet potatoes",
]

_GOAL_TIPS = {
    "Weight Loss": [
        "Maintain a calorie deficit of 500 calories per day",
        "Focus on protein-rich foods for satiety",
        "Include plenty of fiber-rich vegetables",
    ],
    "Muscle Gain": [
        "Consume 1.6-2.2g of protein per kg of body weight",
        "Eat in a moderate calorie surplus",
        "Time protein intake around workouts",
    ],
}


def _text(value: Any) -> str:
    return "" if value is None else escape(str(value))


def meal_count(value: Any) -> int:
    """Leading integer of ``value`` (``"3 meals"`` -> 3), 0 when there is none."""
    match = re.match(r"\s*([+-]?\d+)", str(value if value is not None else ""))
    return max(int(match.group(1)), 0) if match else 0


def meals_for(diet_type: Any) -> List[str]:
    if diet_type in ("Vegetarian", "Vegan"):
        return _PLANT_MEALS
    if diet_type == "Keto":
        return _KETO_MEALS
    return _DEFAULT_MEALS


def generate_diet_plan(request: DietPlanRequest) -> str:
    parts = [
        f"<p>Based on your profile ({_text(request.age)} years old, {_text(request.gender)}, "
        f"{_text(request.height)}cm, {_text(request.weight)}kg) and your goal to {_text(request.goal)} "
        f"to reach {_text(request.targetWeight)}kg, here's a personalized {_text(request.dietType)} "
        f"diet plan with {_text(request.mealTime)} meals per day:</p>",
        "<p><strong>Sample Daily Meal Plan:</strong></p>",
    ]

    meals = meals_for(request.dietType)
    for i, meal in enumerate(meals[: min(meal_count(request.mealTime), _MAX_MEALS)], start=1):
        parts.append(f"<p>Meal {i}: {meal}</p>")

    tips = _GOAL_TIPS.get(str(request.goal))
    if tips:
        parts.append(f"<p><strong>{escape(str(request.goal))} Tips:</strong></p>")
        parts.extend(f"<p>{i}. {tip}</p>" for i, tip in enumerate(tips, start=1))

    question = str(request.question or "").strip()
    if question:
        q = escape(question)
        parts.append(f"<p><strong>Regarding your specific concern about {q}:</strong></p>")
        parts.append(
            f"<p>Avoid foods containing {q} and replace them with suitable alternatives. "
            "Consult with a dietitian for personalized advice.</p>"
        )

    return "".join(parts)
