"""Authentication related API routes.

Annotations stay evaluated here: the rate-limit decorator wraps the endpoints and
FastAPI resolves their signatures through the wrapper.
"""

from fastapi import APIRouter, Depends, Request, Response, status

from ..config import Settings, get_settings
from ..dependencies import get_auth_service, get_current_user
from ..models import User
from ..rate_limit import AUTH_RATE_LIMIT_MESSAGE, auth_rate_limit, limiter
from ..schemas import AuthResponse, LoginRequest, MessageResponse, RegisterRequest, UserSummary
from ..services import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


def set_session_cookie(response: Response, token: str, settings: Settings) -> None:
    response.set_cookie(
        settings.cookie_name,
        token,
        max_age=settings.cookie_max_age,
        httponly=True,
        secure=settings.cookie_secure,
        samesite=settings.cookie_samesite,
        path="/",
    )


def clear_session_cookie(response: Response, settings: Settings) -> None:
    response.delete_cookie(
        settings.cookie_name,
        httponly=True,
        secure=settings.cookie_secure,
        samesite=settings.cookie_samesite,
        path="/",
    )


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(auth_rate_limit, error_message=AUTH_RATE_LIMIT_MESSAGE)
async def register_endpoint(
    request: Request,
    payload: RegisterRequest,
    response: Response,
    auth: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings),
) -> AuthResponse:
    user, token = auth.register(str(payload.email), payload.username, payload.password)
    set_session_cookie(response, token, settings)
    return AuthResponse(user=UserSummary.model_validate(user), access_token=token)


@router.post("/login", response_model=AuthResponse)
@limiter.limit(auth_rate_limit, error_message=AUTH_RATE_LIMIT_MESSAGE)
async def login_endpoint(
    request: Request,
    payload: LoginRequest,
    response: Response,
    auth: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings),
) -> AuthResponse:
    user, token = auth.login(str(payload.email), payload.password)
    set_session_cookie(response, token, settings)
    return AuthResponse(user=UserSummary.model_validate(user), access_token=token)


@router.post("/logout", response_model=MessageResponse)
async def logout_endpoint(response: Response, settings: Settings = Depends(get_settings)) -> MessageResponse:
    clear_session_cookie(response, settings)
    return MessageResponse(message="Logged out successfully")


@router.get("/me", response_model=UserSummary)
async def me_endpoint(current_user: User = Depends(get_current_user)) -> UserSummary:
    return UserSummary.model_validate(current_user)


__all__ = ["router", "set_session_cookie", "clear_session_cookie"]
