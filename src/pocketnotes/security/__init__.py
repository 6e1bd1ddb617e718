"""Security utilities."""

from .jwt import SessionIssuer
from .password import hash_password, verify_and_upgrade, verify_password

__all__ = [
    "hash_password",
    "verify_password",
    "verify_and_upgrade",
    "SessionIssuer",
]
