"""Post Store Connection — the async engine and sessions behind SqlPostRepository.

Invariants:
    - A session that sees an exception is rolled back before it is closed
    - SQLAlchemy faults leave here as StoreError, so the API answers 500 with
      the driver's message as detail
    - get_db() refuses to hand out sessions before init_db() has run

Design Decisions:
    - Module-level db_manager set by the app lifespan; /api/health/ready and the
      tests read or replace it directly
    - expire_on_commit=False: repositories turn rows into dicts after commit
    - Pool sizing only applies to PostgreSQL; the in-memory SQLite used by the
      tests keeps SQLAlchemy's default pool
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy import text

from blog.core.errors import StoreError

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Engine plus session factory for the posts database."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        engine_kwargs: dict = {"pool_pre_ping": True}
        if not database_url.startswith("sqlite"):
            engine_kwargs.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_recycle=3600,
            )
        self.engine = create_async_engine(database_url, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Yield a session; roll back and translate SQLAlchemy faults to StoreError."""
        session = self._session_factory()
        try:
            yield session
        except IntegrityError as e:
            await session.rollback()
            logger.error("Post store rejected write: %s", e.orig)
            raise StoreError(str(e.orig), "commit")
        except OperationalError as e:
            await session.rollback()
            logger.error("Post store unavailable: %s", e.orig)
            raise StoreError(str(e.orig), "execute")
        except DBAPIError as e:
            await session.rollback()
            logger.error("Post store driver error: %s", e.orig)
            raise StoreError(str(e.orig), "query")
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error("Post store error: %s", e)
            raise StoreError(str(e), "unknown")
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """True when the posts database answers SELECT 1."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.warning("Post store readiness check failed: %s", e)
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()


# Set by init_db() from the app lifespan
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Request-scoped session for get_post_service()."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
