# -*- coding: utf-8 -*-
"""Profile — Pydantic models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class ProfileUpdateRequest(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=120)
    email: Optional[str] = Field(None, min_length=3, max_length=254)
