from sqlalchemy import text
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base
from fastapi import Request
from typing import Any, AsyncGenerator
import logging

logger = logging.getLogger(__name__)

Base = declarative_base()


class Database:
    """
    Database handle owning the async engine and session factory.

    Constructed once at startup and stored on ``app.state``; handlers
    receive sessions from it through ``get_db``.
    """

    def __init__(self, url: str, echo: bool = False, **engine_options: Any):
        self.url = url
        self.engine = create_async_engine(url, echo=echo, future=True, **engine_options)
        self.sessionmaker = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False
        )

    @property
    def dialect_name(self) -> str:
        return self.engine.dialect.name

    async def connect(self) -> None:
        """Ping the database and create missing tables"""
        async with self.engine.begin() as conn:
            await conn.execute(text("SELECT 1"))
            logger.info(f"Pinged {self.dialect_name} database, connection established")
            await conn.run_sync(Base.metadata.create_all)

    async def ping(self) -> bool:
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True

    async def close(self) -> None:
        await self.engine.dispose()
        logger.info("Database connections closed")


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Get async database session from the application's database handle"""
    database: Database = request.app.state.database
    async with database.sessionmaker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
