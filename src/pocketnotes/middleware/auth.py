"""Authentication guard and the FastAPI dependency built on it."""

from typing import Optional

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import Settings, get_settings
from ..core.exceptions import InvalidToken, Unauthenticated
from ..core.models.user import User
from ..core.repositories.user_repository import UserRepository
from ..database import get_db_session
from ..security import SessionIssuer


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Return the token of an ``Authorization: Bearer <token>`` header, else None."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


class AccessGuard:
    """Resolves the bearer token of a request to a stored user."""

    def __init__(self, session: AsyncSession, settings: Settings):
        self.issuer = SessionIssuer(settings)
        self.user_repo = UserRepository(session)

    async def authenticate(self, request: Request) -> User:
        token = extract_bearer_token(request.headers.get("Authorization"))
        if token is None:
            raise Unauthenticated("Access token required")

        try:
            user_id = self.issuer.verify(token)
        except InvalidToken as e:
            raise Unauthenticated("Invalid or expired token") from e

        user = await self.user_repo.get_by_id(user_id)
        if not user:
            raise Unauthenticated("User not found")
        return user


# Dependency for getting the authenticated caller
async def get_current_user(
    request: Request,
    session: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
) -> User:
    """Authenticated user for the current request, or 401."""
    return await AccessGuard(session, settings).authenticate(request)
