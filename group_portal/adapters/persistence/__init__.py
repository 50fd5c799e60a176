# group_portal\adapters\persistence\__init__.py
"""
SQL persistence adapters (SQLAlchemy 2.x).
"""

from .content_repository import SqlAccountRepository, SqlGroupRepository
from .membership_store import SqlMembershipStore
from .session import build_engine, build_session_factory, init_schema

__all__ = [
    "SqlAccountRepository",
    "SqlGroupRepository",
    "SqlMembershipStore",
    "build_engine",
    "build_session_factory",
    "init_schema",
]
