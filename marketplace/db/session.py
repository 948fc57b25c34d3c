"""
Database Session
Provides engine and session factory construction for the SQL stores.
"""

import logging

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from .models import Base

logger = logging.getLogger(__name__)


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Create a database engine.

    SQLite engines are shared across threads; an in-memory SQLite database
    is pinned to a single connection so every session sees the same data.
    """
    if database_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in database_url or database_url in ("sqlite://", "sqlite:///"):
            kwargs["poolclass"] = StaticPool
        engine = create_engine(database_url, echo=echo, **kwargs)
        event.listen(engine, "connect", _register_sqlite_functions)
    else:
        engine = create_engine(
            database_url,
            echo=echo,
            pool_pre_ping=True,  # Verify connections before using
        )

    logger.info(f"Database engine created: {engine.url.render_as_string(hide_password=True)}")
    return engine


def _unicode_lower(value):
    return value.lower() if isinstance(value, str) else value


def _register_sqlite_functions(dbapi_connection, connection_record) -> None:
    """Replace SQLite's ASCII-only lower() so text filters fold case like str.lower()."""
    dbapi_connection.create_function("lower", 1, _unicode_lower, deterministic=True)


def create_session_factory(engine: Engine, create_tables: bool = True) -> sessionmaker:
    """Create a session factory bound to ``engine``, creating tables if asked."""
    if create_tables:
        Base.metadata.create_all(engine)
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)
