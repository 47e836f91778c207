"""
Database - engine and session helpers for the SQL Item Store.

Uses SQLAlchemy with any backend it supports (Postgres in production,
SQLite locally and in tests).
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import create_engine, inspect
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from vocabflow import config
from vocabflow.store.models import Base


# Global engine (reused across requests)
_engine: Optional[Engine] = None


def get_engine(url: Optional[str] = None) -> Engine:
    """
    Get the SQLAlchemy engine.

    Without an explicit URL the process-wide engine for DATABASE_URL is
    created on first use and reused afterwards.

    Args:
        url: Optional connection string overriding DATABASE_URL

    Returns:
        SQLAlchemy Engine instance
    """
    global _engine

    if url is not None:
        return _create_engine(url)

    if _engine is None:
        _engine = _create_engine(config.get_database_url())
    return _engine


def _create_engine(url: str) -> Engine:
    if url.startswith("sqlite"):
        return create_engine(url, echo=False)
    return create_engine(
        url,
        pool_size=5,           # Keep 5 connections open
        max_overflow=10,       # Allow up to 10 extra connections
        pool_pre_ping=True,    # Verify connections before use
        echo=False
    )


def get_session_factory(engine: Engine) -> sessionmaker:
    """Session factory bound to an engine."""
    return sessionmaker(bind=engine, expire_on_commit=False)


def get_session(engine: Optional[Engine] = None) -> Session:
    """
    Get a SQLAlchemy session for database operations.

    Returns:
        SQLAlchemy Session instance
    """
    return get_session_factory(engine or get_engine())()


def init_db(engine: Optional[Engine] = None) -> None:
    """
    Initialize database schema if tables don't exist.

    Safe to call multiple times.
    """
    engine = engine or get_engine()
    existing_tables = inspect(engine).get_table_names()
    if 'vocab_items' not in existing_tables:
        Base.metadata.create_all(engine)


def reset_db(engine: Optional[Engine] = None) -> None:
    """
    DANGEROUS: Delete all data and recreate tables.

    All vocabulary items will be lost!
    """
    engine = engine or get_engine()
    Base.metadata.drop_all(engine)
    Base.metadata.create_all(engine)
    print("[ITEM STORE] All tables dropped and recreated")
