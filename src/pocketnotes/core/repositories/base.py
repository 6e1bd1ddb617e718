"""Shared repository plumbing."""

from contextlib import asynccontextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import StoreUnavailable
from ..logging import get_logger

logger = get_logger("repositories")


class BaseRepository:
    """Holds the session and translates driver errors into StoreUnavailable."""

    def __init__(self, session: AsyncSession):
        self.session = session

    @asynccontextmanager
    async def store_operation(self, operation: str):
        """Run a store round-trip; roll back and raise StoreUnavailable on failure."""
        try:
            yield
        except SQLAlchemyError as e:
            logger.error(
                "Store operation failed",
                extra={"operation": operation, "repository": type(self).__name__},
                exc_info=e,
            )
            await self.session.rollback()
            raise StoreUnavailable() from e
