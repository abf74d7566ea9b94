# -*- coding: utf-8 -*-
"""Workouts: logging a workout against the signed-in user."""
