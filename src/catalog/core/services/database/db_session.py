"""Database engine and session factory used across the application."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from loguru import logger
from sqlalchemy import Engine, StaticPool, event, text
from sqlmodel import Session, create_engine

from src.catalog.runtime.config.config_data import DatabaseConfig
from src.catalog.runtime.context import get_config


def _unicode_lower(value: object) -> object:
    return value.lower() if isinstance(value, str) else value


def _register_sqlite_functions(dbapi_connection, connection_record) -> None:
    # SQLite's built-in lower() only folds ASCII letters
    dbapi_connection.create_function("lower", 1, _unicode_lower, deterministic=True)


class DbSessionService:
    def __init__(self, db_config: DatabaseConfig | None = None):
        """Initialize the shared database engine and session factory."""

        main_config = get_config()
        db_config = db_config or main_config.database
        self._config = db_config

        logger.info(
            "Configuring database engine for environment: {}", main_config.app.environment
        )
        engine_kwargs: dict[str, Any] = {
            "echo": db_config.echo,
            "connect_args": self._get_connect_args(db_config, main_config.app.environment),
        }

        if db_config.is_in_memory:
            # Every session must see the same in-memory database
            engine_kwargs["poolclass"] = StaticPool
        elif not db_config.is_sqlite:
            engine_kwargs.update(
                {
                    "pool_size": db_config.pool_size,
                    "max_overflow": db_config.max_overflow,
                    "pool_timeout": db_config.pool_timeout,
                    "pool_recycle": db_config.pool_recycle,
                    "pool_pre_ping": True,
                }
            )

        self._engine = create_engine(db_config.url, **engine_kwargs)
        if db_config.is_sqlite:
            event.listen(self._engine, "connect", _register_sqlite_functions)
        logger.info("Database engine initialized for {}", self._engine.url.render_as_string())

    @staticmethod
    def _get_connect_args(db_config: DatabaseConfig, environment: str) -> dict:
        """Get database-specific connection arguments."""
        connect_args: dict[str, Any] = {}

        if db_config.is_sqlite:
            connect_args.update(
                {
                    "check_same_thread": False,  # sessions cross the threadpool
                    "timeout": 20,  # lock timeout
                }
            )
            if environment == "production":
                logger.warning(
                    "SQLite is not recommended for production use. "
                    "Consider PostgreSQL for better performance and reliability."
                )

        return connect_args

    @property
    def engine(self) -> Engine:
        return self._engine

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(
            self._engine,
            expire_on_commit=False,  # rows stay readable after commit
            autoflush=True,
        )

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Context manager style helper for repositories and tests."""
        db = self.get_session()
        try:
            yield db
            db.commit()
        except Exception as e:
            db.rollback()
            logger.error(
                "Database transaction failed: {}: {}",
                type(e).__name__,
                e,
            )
            raise
        finally:
            db.close()

    def health_check(self) -> bool:
        """Perform a health check on the database connection."""
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                return True
        except Exception as e:
            logger.error("Database health check failed: {}: {}", type(e).__name__, e)
            return False

    def dispose(self) -> None:
        """Release pooled connections."""
        self._engine.dispose()
