# -*- coding: utf-8 -*-
"""Dashboard aggregation over a user's workout list.

Pure functions: they never touch storage and never mutate their input.
A workout burns ``calories * duration`` (calories per minute times minutes).
"""

from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date, datetime, timezone
from typing import Any, Dict, Iterable, List, Optional, Union

logger = logging.getLogger(__name__)


def _parse_when(value: Any) -> Optional[Union[date, datetime]]:
    text = str(value or "").strip()
    if not text:
        return None
    try:
        if len(text) == 10:
            return date.fromisoformat(text)
        # Handle trailing Z.
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        return None


def utc_day(value: Any) -> Optional[date]:
    """Calendar day of ``value`` in UTC.

    Plain dates are taken as-is. Naive datetimes are read as server-local
    time, then converted like any other datetime.
    """
    when = _parse_when(value)
    if when is None:
        return None
    if isinstance(when, datetime):
        try:
            # astimezone() on a naive value assumes local time.
            return when.astimezone(timezone.utc).date()
        except (OverflowError, OSError):
            return None
    return when


def local_day(value: Any) -> Optional[date]:
    """Calendar day of ``value`` on the server's local clock."""
    when = _parse_when(value)
    if when is None:
        return None
    if isinstance(when, datetime):
        if when.tzinfo is not None:
            when = when.astimezone()
        return when.date()
    return when


def _number(value: Any) -> float:
    try:
        return float(value or 0)
    except (TypeError, ValueError):
        return 0.0


def _plain(total: float) -> Union[int, float]:
    """Whole totals as ints, so 25.0 is reported as 25."""
    return int(total) if float(total).is_integer() else total


def burned_calories(workout: Dict[str, Any]) -> float:
    return _number(workout.get("calories")) * _number(workout.get("duration"))


def calories_by_day(workouts: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Total burned calories per UTC calendar day, oldest day first."""
    totals: Dict[date, float] = defaultdict(float)
    for workout in workouts:
        day = utc_day(workout.get("date"))
        if day is None:
            logger.warning("Skipping workout %s with unparseable date %r", workout.get("id"), workout.get("date"))
            continue
        totals[day] += burned_calories(workout)

    return [{"date": day.isoformat(), "calories": _plain(totals[day])} for day in sorted(totals)]


def dashboard_stats(workouts: Iterable[Dict[str, Any]], today: Optional[date] = None) -> Dict[str, Any]:
    today = today or date.today()
    todays = [w for w in workouts if local_day(w.get("date")) == today]

    total_calories = sum(burned_calories(w) for w in todays)
    total_workouts = len(todays)
    avg = total_calories / total_workouts if total_workouts else 0

    return {
        "totalCalories": _plain(total_calories),
        "totalWorkouts": total_workouts,
        "avgCaloriesPerWorkout": _plain(avg),
    }
