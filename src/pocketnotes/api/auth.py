"""Authentication API endpoints."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import Settings, get_settings
from ..core.models.user import User
from ..core.schemas import ApiResponse, AuthData, LoginRequest, RegisterRequest, UserData
from ..core.services import AuthService
from ..database import get_db_session
from ..middleware.auth import get_current_user

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post(
    "/register",
    response_model=ApiResponse[AuthData],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    request: RegisterRequest,
    session: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
):
    """Register a new user and return a session token."""
    auth_service = AuthService(session, settings)
    data = await auth_service.register(request)
    return ApiResponse[AuthData].ok(data, "User registered successfully")


@router.post("/login", response_model=ApiResponse[AuthData], response_model_exclude_none=True)
async def login(
    request: LoginRequest,
    session: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
):
    """Login with username or email."""
    auth_service = AuthService(session, settings)
    data = await auth_service.login(request)
    return ApiResponse[AuthData].ok(data, "Login successful")


@router.get("/me", response_model=ApiResponse[UserData], response_model_exclude_none=True)
async def get_me(
    current_user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
):
    """Get current user profile."""
    auth_service = AuthService(session, settings)
    user = await auth_service.get_current_user(current_user)
    return ApiResponse[UserData].ok(UserData(user=user))
