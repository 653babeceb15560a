# taskmanager/dependencies.py
"""FastAPI dependencies: settings, auth service, and the authenticated caller."""

from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from taskmanager.config import Settings
from taskmanager.errors import AuthenticationError
from taskmanager.security import Identity
from taskmanager.services.auth import AuthService

bearer_scheme = HTTPBearer(auto_error=False)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_auth_service(settings: Settings = Depends(get_settings)) -> AuthService:
    return AuthService(settings)


def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: AuthService = Depends(get_auth_service),
) -> Identity:
    """Verify the bearer token and return the identity it asserts."""
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise AuthenticationError("Missing bearer token")
    return auth.verify_token(credentials.credentials)
