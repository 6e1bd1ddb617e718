"""Password hashing utilities."""

from typing import Optional

from passlib.context import CryptContext

# bcrypt_sha256 pre-hashes with SHA-256, so passwords past bcrypt's 72-byte
# limit are not silently truncated.
pwd_context = CryptContext(schemes=["bcrypt_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    """Hash a password. The plaintext is never stored."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a plaintext password against a stored hash."""
    return pwd_context.verify(plain_password, hashed_password)


def verify_and_upgrade(plain_password: str, hashed_password: str) -> tuple[bool, Optional[str]]:
    """Verify, and return a fresh hash when the stored one uses outdated settings."""
    return pwd_context.verify_and_update(plain_password, hashed_password)
