# invoicebook/db/engine.py

import logging
from contextlib import contextmanager
from functools import lru_cache
from typing import Iterator

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.pool import StaticPool

from invoicebook.config import get_settings
from invoicebook.errors import ConstraintViolation, TransientStorageFailure

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores REFERENCES clauses unless asked per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(
    database_url: str,
    echo: bool = False,
    pool_size: int = 10,
    max_overflow: int = 10,
) -> Engine:
    """
    Create the connection pool for database_url.

    SQLite gets foreign keys switched on, and in-memory databases share one
    connection across threads so every request sees the same data.
    """
    url = make_url(database_url)

    if url.get_backend_name() == "sqlite":
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
        engine = create_engine(url, echo=echo, **kwargs)
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    return create_engine(
        url,
        echo=echo,
        pool_size=pool_size,
        max_overflow=max_overflow,
        pool_pre_ping=True,
    )


@lru_cache
def get_engine() -> Engine:
    """
    Process-wide engine built from settings. Also used as a FastAPI dependency.
    """
    settings = get_settings()
    return build_engine(
        settings.database_url,
        echo=settings.database_echo,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )


@contextmanager
def storage_errors(operation: str) -> Iterator[None]:
    """
    Translate SQLAlchemy failures raised inside the block into domain errors.

    The driver's own message is kept so callers see what the database said.
    Only a debug line is written here; the error itself is logged where it
    is answered.
    """
    try:
        yield
    except IntegrityError as e:
        logger.debug("Integrity error during %s: %s", operation, e.orig)
        raise ConstraintViolation(str(e.orig)) from e
    except SQLAlchemyError as e:
        orig = getattr(e, "orig", None)
        logger.debug("Storage failure during %s: %s", operation, orig or e)
        raise TransientStorageFailure(str(orig or e)) from e


def ping(engine: Engine) -> bool:
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError as e:
        logger.error("Database ping failed: %s", e)
        return False
