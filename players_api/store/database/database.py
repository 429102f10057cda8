from typing import TYPE_CHECKING, Optional

from loguru import logger
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import DeclarativeMeta, sessionmaker

from players_api.store.database.sqlalchemy_database import db

if TYPE_CHECKING:
    from players_api.web.app import Application


def _enable_case_sensitive_like(dbapi_connection, _connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA case_sensitive_like = ON")
    cursor.close()


class Database:
    def __init__(self, app: "Application"):
        self.app = app
        self._engine: Optional[AsyncEngine] = None
        self._db: Optional[DeclarativeMeta] = None
        self.session: Optional[sessionmaker] = None

    @staticmethod
    def _build_url_to_connect(
            username: str, password: str, database: str, host: str = "localhost", port: int = 5432
    ) -> str:
        return f"postgresql+asyncpg://{username}:{password}@{host}:{port}/{database}"

    async def connect(self, *_, **__) -> None:
        self._db = db
        config = self.app.config.database
        url_to_connect: str = config.url or self._build_url_to_connect(
            username=config.user,
            password=config.password,
            database=config.database,
            host=config.host,
            port=config.port,
        )
        self._engine = create_async_engine(url_to_connect, echo=config.echo, future=True)
        if self._engine.dialect.name == "sqlite":
            event.listen(self._engine.sync_engine, "connect", _enable_case_sensitive_like)

        async with self._engine.begin() as connection:
            await connection.run_sync(self._db.metadata.create_all)

        self.session = sessionmaker(self._engine, expire_on_commit=False, future=True, class_=AsyncSession)
        logger.info("Connected to {} database", self._engine.dialect.name)

    async def disconnect(self, *_, **__) -> None:
        if self._engine:
            await self._engine.dispose()
            logger.info("Database connection closed")
