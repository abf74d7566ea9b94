# -*- coding: utf-8 -*-
"""Dashboard: the signed-in user's profile, calorie history and today's stats."""

from .stats import calories_by_day, dashboard_stats

__all__ = ["calories_by_day", "dashboard_stats"]
