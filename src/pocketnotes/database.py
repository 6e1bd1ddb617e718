# Database connection setup
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from .config import Settings, get_settings
from .core.models import BaseModel


def build_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine described by the given settings."""
    return create_async_engine(settings.database_url, echo=settings.database_echo)


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


engine = build_engine(get_settings())

# Session factory
AsyncSessionLocal = build_session_factory(engine)


async def get_db_session():
    """Get database session, one per request."""
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()


async def create_tables(target: AsyncEngine = engine) -> None:
    """Create all tables."""
    async with target.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)
