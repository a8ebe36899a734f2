"""Connection pool management and identifier helpers."""

from __future__ import annotations

import logging
from uuid import UUID, uuid4

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import ArgumentError, SQLAlchemyError
from sqlalchemy.pool import QueuePool

logger = logging.getLogger(__name__)

MAX_CONNECTIONS = 20
ACQUIRE_TIMEOUT_SECONDS = 30
MAX_LIFETIME_SECONDS = 1800


class DatabaseError(Exception):
    """Raised when the database cannot be reached or answers unexpectedly."""


class Database:
    """A pooled connection to the application database."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine
        self._closed = False

    @classmethod
    def connect(cls, database_url: str) -> Database:
        """Create the pool and make sure a connection can be opened."""
        logger.info("Connecting to database...")
        try:
            url = make_url(database_url)
            connect_args = {}
            if url.get_backend_name() == "sqlite":
                connect_args["check_same_thread"] = False
            engine = create_engine(
                url,
                poolclass=QueuePool,
                pool_size=MAX_CONNECTIONS,
                max_overflow=0,
                pool_timeout=ACQUIRE_TIMEOUT_SECONDS,
                pool_recycle=MAX_LIFETIME_SECONDS,
                pool_pre_ping=True,
                connect_args=connect_args,
            )
            with engine.connect():
                pass
        except (ArgumentError, SQLAlchemyError, ValueError) as exc:
            raise DatabaseError(str(exc)) from exc
        logger.info("Database connection established")
        return cls(engine)

    @property
    def engine(self) -> Engine:
        """The underlying connection pool."""
        return self._engine

    def health_check(self) -> None:
        """Run a trivial query; raise DatabaseError if it does not answer 1."""
        if self._closed:
            raise DatabaseError("attempted to acquire a connection on a closed pool")
        try:
            with self._engine.connect() as connection:
                row = connection.execute(text("SELECT 1 AS health")).mappings().first()
        except SQLAlchemyError as exc:
            raise DatabaseError(str(exc)) from exc
        if row is None or row["health"] != 1:
            raise DatabaseError("no rows returned by a query that expected to return at least one row")

    def close(self) -> None:
        """Close every pooled connection; the pool is unusable afterwards."""
        self._closed = True
        self._engine.dispose()

    def __enter__(self) -> Database:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def generate_id() -> UUID:
    """A fresh random identifier."""
    return uuid4()


def parse_uuid(value: str) -> UUID:
    """Parse an identifier from text; raise ValueError if it is malformed."""
    if not isinstance(value, str):
        raise ValueError("identifier must be a string")
    return UUID(value)