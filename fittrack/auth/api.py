# -*- coding: utf-8 -*-
"""Auth — API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from ..deps import get_repository
from ..users.models import MessageResponse
from ..users.storage import UserRepository
from . import service
from .models import LoginRequest, RegisterRequest, TokenResponse

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post("/register", status_code=201, response_model=MessageResponse, summary="Register a new user")
def register(request: RegisterRequest, repo: UserRepository = Depends(get_repository)):
    service.register(repo, name=request.name, email=request.email, password=request.password)
    return MessageResponse(message="User registered successfully")


@router.post("/login", response_model=TokenResponse, summary="Login")
def login(request: LoginRequest, http_request: Request, repo: UserRepository = Depends(get_repository)):
    settings = http_request.app.state.settings
    token = service.login(
        repo,
        email=request.email,
        password=request.password,
        secret=settings.jwt_secret,
        ttl_seconds=settings.token_ttl_seconds,
    )
    return TokenResponse(token=token)
