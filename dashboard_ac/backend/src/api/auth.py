"""Registration, login, token refresh and profile endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..core.security import RequestContext, get_request_context, get_token_codec
from ..core.tokens import TokenCodec
from ..db import get_session_dependency
from ..schemas.auth import (
    LoginRequest,
    LoginResult,
    ProfileRead,
    RefreshResult,
    RefreshTokenRequest,
    RegisterRequest,
)
from ..schemas.common import Envelope, envelope
from ..schemas.user import UserSummary
from ..services.accounts import AccountService

router = APIRouter(tags=["auth"])


def get_account_service(
    session: Annotated[Session, Depends(get_session_dependency)],
    codec: Annotated[TokenCodec, Depends(get_token_codec)],
) -> AccountService:
    return AccountService(session, codec)


AccountServiceDep = Annotated[AccountService, Depends(get_account_service)]


@router.post(
    "/auth/register",
    response_model=Envelope[UserSummary],
    status_code=status.HTTP_201_CREATED,
)
def register(payload: RegisterRequest, accounts: AccountServiceDep) -> dict[str, object]:
    """Create a new account."""

    user = accounts.register(payload)
    return envelope("User registered successfully", user)


@router.post("/auth/login", response_model=Envelope[LoginResult])
def login(payload: LoginRequest, accounts: AccountServiceDep) -> dict[str, object]:
    """Exchange credentials for an access/refresh token pair."""

    tokens, user = accounts.login(payload.email, payload.password)
    return envelope("Login successful", {"user": user, "tokens": tokens.as_dict()})


@router.post("/auth/refresh", response_model=Envelope[RefreshResult])
def refresh(payload: RefreshTokenRequest, accounts: AccountServiceDep) -> dict[str, object]:
    """Exchange a refresh token for a new token pair."""

    tokens = accounts.refresh(payload.refresh_token)
    return envelope("Token refreshed successfully", {"tokens": tokens.as_dict()})


@router.get("/me", response_model=Envelope[ProfileRead])
def read_profile(
    context: Annotated[RequestContext, Depends(get_request_context)],
) -> dict[str, object]:
    """Return the authenticated caller's identity."""

    return envelope(
        "User profile retrieved successfully",
        {"id": context.account_id, "email": context.email, "role": context.role},
    )
