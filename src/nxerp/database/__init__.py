"""Database layer for nxerp application."""

from nxerp.database.base import Repository
from nxerp.database.factories import create_repositories, default_database_path
from nxerp.database.memory import InMemoryRepository
from nxerp.database.repository import SQLAlchemyRepository
from nxerp.database.store import Store

__all__ = [
    "Repository",
    "SQLAlchemyRepository",
    "InMemoryRepository",
    "Store",
    "create_repositories",
    "default_database_path",
]
