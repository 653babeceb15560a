# taskmanager/routes/auth.py
"""Registration and login endpoints."""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from taskmanager.database import get_session
from taskmanager.dependencies import get_auth_service
from taskmanager.models import LoginRequest, LoginResponse, RegisterRequest, RegisterResponse
from taskmanager.services.auth import AuthService

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register")
def register(
    body: RegisterRequest,
    session: Session = Depends(get_session),
    auth: AuthService = Depends(get_auth_service),
) -> RegisterResponse:
    """Create an account."""
    user_id = auth.register(session, body.username, body.email, body.password)
    return RegisterResponse(message="User registered successfully", user_id=user_id)


@router.post("/login")
def login(
    body: LoginRequest,
    session: Session = Depends(get_session),
    auth: AuthService = Depends(get_auth_service),
) -> LoginResponse:
    """Exchange credentials for a bearer token and the public profile."""
    result = auth.login(session, body.username, body.password)
    return LoginResponse(
        token=result.token,
        user_id=result.user.user_id,
        username=result.user.username,
        email=result.user.email,
    )
