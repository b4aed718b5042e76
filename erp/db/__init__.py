"""Database helpers for the SQL backing store."""

from .session import Base, create_all, get_engine, get_session

__all__ = ["Base", "create_all", "get_engine", "get_session"]
