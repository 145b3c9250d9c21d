"""Database engine and session bootstrap."""

from .config import (
    close_database,
    create_engine,
    get_engine,
    get_session_factory,
    init_database,
)

__all__ = [
    "close_database",
    "create_engine",
    "get_engine",
    "get_session_factory",
    "init_database",
]
