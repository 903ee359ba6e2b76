"""
Database connection and session management module.

Uses SQLAlchemy for ORM operations. Supports PostgreSQL (production/Docker)
and SQLite (local development fallback).
Provides session factory and dependency injection for FastAPI routes.
"""

import os
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, DeclarativeBase

# Fallback to SQLite for local development when PostgreSQL is not available
DATABASE_URL = os.getenv(
    "DATABASE_URL",
    "sqlite:///./student_tracker.db"
)

# Milliseconds a SQLite writer waits for the file lock before failing
SQLITE_BUSY_TIMEOUT_MS = int(os.getenv("SQLITE_BUSY_TIMEOUT_MS", "5000"))


def _sqlite_pragmas(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    # WAL lets list/get requests read while another request writes
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA busy_timeout={}".format(SQLITE_BUSY_TIMEOUT_MS))
    cursor.close()


def build_engine(url: str, **overrides):
    """
    Create an engine tuned for the database behind `url`.

    PostgreSQL gets a connection pool; SQLite gets cross-thread access
    (sync endpoints run in a threadpool) and per-connection pragmas.
    Keyword overrides are passed straight to create_engine.
    """
    kwargs = {"echo": False}
    if url.startswith("postgresql"):
        kwargs.update({
            "pool_size": 10,
            "max_overflow": 20,
            "pool_pre_ping": True,
        })
    elif url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
    kwargs.update(overrides)

    new_engine = create_engine(url, **kwargs)
    if url.startswith("sqlite"):
        event.listen(new_engine, "connect", _sqlite_pragmas)
    return new_engine


engine = build_engine(DATABASE_URL)

# Session factory - creates new database sessions
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""
    pass


def get_db():
    """
    FastAPI dependency that provides a database session.

    Yields a session and closes it after the request completes,
    even if an exception occurs during request processing.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables():
    """
    Create all database tables directly (used for SQLite local dev).
    For PostgreSQL, use Alembic migrations instead.
    """
    Base.metadata.create_all(bind=engine)
