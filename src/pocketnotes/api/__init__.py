"""API routers for Pocket Notes."""

from .auth import router as auth_router
from .error_handlers import register_exception_handlers
from .groups import router as groups_router
from .notes import router as notes_router

__all__ = ["auth_router", "groups_router", "notes_router", "register_exception_handlers"]
