"""Authentication service implementation."""

from sqlalchemy.ext.asyncio import AsyncSession

from ...config import Settings
from ...security import SessionIssuer, hash_password, verify_and_upgrade
from ..exceptions import Duplicate, InvalidCredentials
from ..logging import get_logger
from ..models.user import User
from ..repositories.user_repository import UserRepository
from ..schemas.auth import AuthData, LoginRequest, RegisterRequest, UserResponse
from .interfaces import IAuthService

logger = get_logger("services.auth")


class AuthService(IAuthService):
    """Authentication service implementation."""

    def __init__(self, session: AsyncSession, settings: Settings):
        self.session = session
        self.user_repo = UserRepository(session)
        self.issuer = SessionIssuer(settings)

    async def register_user(self, request: RegisterRequest) -> User:
        """Register new user."""
        username = request.username.strip()
        email = User.normalize_email(request.email)

        if await self.user_repo.is_email_taken(email):
            raise Duplicate("Email already registered")
        if await self.user_repo.is_username_taken(username):
            raise Duplicate("Username already taken")

        user = await self.user_repo.create_user(
            {
                "username": username,
                "email": email,
                "password_hash": hash_password(request.password),
            }
        )
        logger.info("User registered", extra={"user_id": str(user.id)})
        return user

    async def verify_credentials(self, identifier: str, password: str) -> User:
        """Check identifier/password. Unknown user and bad password look the same."""
        user = await self.user_repo.get_by_identifier(identifier)
        if not user:
            raise InvalidCredentials()

        valid, new_hash = verify_and_upgrade(password, user.password_hash)
        if not valid:
            raise InvalidCredentials()

        if new_hash:
            # stored hash used outdated settings, swap it while we have the plaintext
            await self.user_repo.update_user(user, {"password_hash": new_hash})

        return user

    async def register(self, request: RegisterRequest) -> AuthData:
        user = await self.register_user(request)
        return self._auth_data(user)

    async def login(self, request: LoginRequest) -> AuthData:
        """Login user and return a session token."""
        user = await self.verify_credentials(request.identifier, request.password)
        logger.info("User logged in", extra={"user_id": str(user.id)})
        return self._auth_data(user)

    async def get_current_user(self, user: User) -> UserResponse:
        return UserResponse.model_validate(user)

    def _auth_data(self, user: User) -> AuthData:
        return AuthData(token=self.issuer.issue(user.id), user=UserResponse.model_validate(user))
