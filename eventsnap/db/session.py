from typing import AsyncGenerator
from datetime import datetime, timezone
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base
from eventsnap.core.config import settings


def _engine_options(url: str) -> dict:
    # SQLite (local runs, tests) has no server-side pool to tune
    if url.startswith("sqlite"):
        return {}
    return {
        "pool_size": 20,              # Number of permanent connections to maintain
        "max_overflow": 10,           # Maximum number of connections to allow beyond pool_size
        "pool_pre_ping": True,        # Verify connections before using them
        "pool_recycle": 3600,         # Recycle connections after 1 hour (3600 seconds)
    }


engine = create_async_engine(
    settings.DATABASE_URL,
    echo=False,
    **_engine_options(settings.DATABASE_URL),
)
AsyncSessionLocal = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
Base = declarative_base()


def utcnow() -> datetime:
    """Timezone-aware current time used for every timestamp column."""
    return datetime.now(timezone.utc)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    async with AsyncSessionLocal() as session:
        yield session
