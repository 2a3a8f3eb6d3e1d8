"""
Database layer for ShopMesh.

Structure:
- entities/: SQLModel record shapes, one module per aggregate
- repositories/: data access layer mapping aggregates to records
- session.py: lazily built global engine and session factory
- utils.py: engine, session factory and DDL helpers
"""

from .base import Base
from .repositories import SqlRepoBundle, build_sql_repos
from .session import dispose_engine, get_engine, get_session, get_session_maker
from .utils import create_all, create_engine, create_sessionmaker, drop_all

__all__ = [
    "Base",
    "SqlRepoBundle",
    "build_sql_repos",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "dispose_engine",
    "drop_all",
    "get_engine",
    "get_session",
    "get_session_maker",
]
