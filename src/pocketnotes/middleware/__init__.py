"""Middleware for authentication and other cross-cutting concerns."""

from .auth import AccessGuard, extract_bearer_token, get_current_user

__all__ = ["AccessGuard", "extract_bearer_token", "get_current_user"]
