# -*- coding: utf-8 -*-
"""Exercise plan template."""

from __future__ import annotations

from html import escape
from typing import Any, List

from .models import ExercisePlanRequest

_FULL_BODY = [
    "Jumping Jacks: 3 sets of 1 minute",
    "Burpees: 3 sets of 10 reps",
    "Mountain Climbers: 3 sets of 20 reps",
    "Squat Jumps: 3 sets of 12 reps",
    "Push-ups: 3 sets of 10-15 reps",
]
_ABS = [
    "Crunches: 3 sets of 15 reps",
    "Plank: 3 sets of 30-60 seconds",
    "Russian Twists: 3 sets of 20 reps",
    "Leg Raises: 3 sets of 12 reps",
    "Mountain Climbers: 3 sets of 20 reps",
]
_LEG = [
    "Squats: 4 sets of 12 reps",
    "Lunges: 3 sets of 10 reps per leg",
    "Calf Raises: 3 sets of 15 reps",
    "Glute Bridges: 3 sets of 12 reps",
    "Wall Sit: 3 sets of 30-60 seconds",
]
_UPPER_BODY = [
    "Push-ups: 3 sets of 10-15 reps",
    "Dumbbell Curls: 3 sets of 12 reps",
    "Shoulder Press: 3 sets of 10 reps",
    "Tricep Dips: 3 sets of 12 reps",
    "Rows: 3 sets of 12 reps",
]

_CIRCUITS = {
    "Hard": "Complete the following circuit 3 times with minimal rest between exercises:",
    "Medium": "Complete the following circuit 2 times with 30 seconds rest between exercises:",
}
_DEFAULT_CIRCUIT = "Complete the following exercises with 1-minute rest between sets:"


def _text(value: Any) -> str:
    return "" if value is None else escape(str(value))


def exercises_for(focus: Any) -> List[str]:
    if focus in ("Full Body", "Cardio"):
        return _FULL_BODY
    if focus == "Abs":
        return _ABS
    if focus == "Leg":
        return _LEG
    return _UPPER_BODY


def generate_exercise_plan(request: ExercisePlanRequest) -> str:
    focus = _text(request.focus)
    training = _text(request.training)
    difficulty = _text(request.difficulty)

    parts = [
        f"Based on your profile ({_text(request.age)} years old, {_text(request.gender)}, "
        f"{_text(request.height)}cm, {_text(request.weight)}kg) and your preferences, here's a "
        f"{difficulty} intensity {training} workout focusing on {focus} using "
        f"{_text(request.equipment)} for {_text(request.time)} minutes:\n\n",
        f"<h3>{focus} {training} Workout - {difficulty} Intensity</h3>",
        "<ul>",
        f"<p>{_CIRCUITS.get(str(request.difficulty), _DEFAULT_CIRCUIT)}</p>",
    ]
    parts.extend(f"<li>{exercise}</li>" for exercise in exercises_for(request.focus))
    parts.append("</ul>")
    parts.append("<h3>Cool Down</h3>")
    parts.append("<p>Finish with 5 minutes of light stretching focusing on the muscle groups you worked.</p>")
    return "".join(parts)
