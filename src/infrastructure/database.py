"""SQLAlchemy engine, connection factory, and declarative base."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from functools import lru_cache
from typing import Any

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy import URL, Connection, Engine, Row, create_engine
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.sql.base import Executable

from src.domain.errors import StoreUnavailable
from src.infrastructure.errors import translate_error


class Settings(BaseSettings):
    """Connection settings.

    The individual db_* fields describe the default server; database_url,
    when set (env DATABASE_URL), overrides all of them.
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    database_url: str | None = None
    db_driver: str = "postgresql+psycopg"
    db_host: str = "localhost"
    db_port: int = 5432
    db_name: str = "db"
    db_user: str = "app"
    db_password: str = "app"
    db_echo: bool = False

    @property
    def url(self) -> str:
        if self.database_url:
            return self.database_url
        return URL.create(
            self.db_driver,
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        ).render_as_string(hide_password=False)


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    """Build the process-wide engine from Settings on first use."""
    settings = Settings()
    return create_engine(settings.url, echo=settings.db_echo, pool_pre_ping=True)


class Base(DeclarativeBase):
    """Shared declarative base for all ORM models."""


class ConnectionFactory:
    """Hands out transaction-scoped connections, one per repository call.

    Every SQLAlchemy error raised inside a scope is translated into the
    StoreError taxonomy before it leaves the factory.
    """

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    @contextmanager
    def open(self) -> Iterator[Connection]:
        """Yield a connection inside a transaction.

        Commits when the block completes, rolls back when it raises, and
        always returns the connection to the engine.
        """
        try:
            conn = self.engine.connect()
        except DBAPIError as exc:
            where = self.engine.url.render_as_string(hide_password=True)
            raise StoreUnavailable(f"cannot connect to {where}: {exc.orig}") from exc
        try:
            with conn.begin():
                yield conn
        except SQLAlchemyError as exc:
            raise translate_error(exc) from exc
        finally:
            conn.close()

    def execute(self, statement: Executable, params: Mapping[str, Any] | None = None) -> int:
        """Run a write statement and return the number of affected rows."""
        with self.open() as conn:
            return conn.execute(statement, params).rowcount

    def query(self, statement: Executable, params: Mapping[str, Any] | None = None) -> list[Row]:
        with self.open() as conn:
            return list(conn.execute(statement, params).all())
