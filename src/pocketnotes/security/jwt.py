"""Session tokens: signed, time-limited JWTs carrying the user id."""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
from uuid import UUID

from jose import JWTError, jwt

from ..config import Settings
from ..core.exceptions import InvalidToken


class SessionIssuer:
    """Mints and verifies session tokens.

    All signing parameters come from the ``Settings`` passed in; the issuer
    never looks at the environment itself. Tokens are not tracked
    server-side, so a token stays valid until it expires.
    """

    def __init__(self, settings: Settings):
        self.secret_key = settings.secret_key
        self.algorithm = settings.algorithm
        self.lifetime = timedelta(days=settings.token_expire_days)
        self.issuer = settings.token_issuer
        self.audience = settings.token_audience

    def issue(self, user_id: UUID, expires_delta: Optional[timedelta] = None) -> str:
        """Create a token for ``user_id``."""
        now = datetime.now(timezone.utc)
        claims: Dict[str, Any] = {
            "sub": str(user_id),
            "iat": now,
            "exp": now + (expires_delta if expires_delta is not None else self.lifetime),
            "iss": self.issuer,
            "aud": self.audience,
        }
        return jwt.encode(claims, self.secret_key, algorithm=self.algorithm)

    def decode(self, token: str) -> Dict[str, Any]:
        """Validate signature, expiry, issuer and audience; return the claims."""
        try:
            return jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                audience=self.audience,
                issuer=self.issuer,
            )
        except JWTError as e:
            raise InvalidToken() from e

    def verify(self, token: str) -> UUID:
        """Return the user id a valid token was issued for."""
        payload = self.decode(token)
        subject = payload.get("sub")
        if not subject:
            raise InvalidToken()
        try:
            return UUID(subject)
        except (TypeError, ValueError) as e:
            raise InvalidToken() from e
