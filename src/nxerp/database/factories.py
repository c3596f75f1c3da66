"""Factory functions for the store and its repositories."""

import os
import sys
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional, Union

from nxerp.database.repository import SQLAlchemyRepository, utc_now
from nxerp.database.store import Store
from nxerp.database.tables import CUSTOMERS, SUPPLIERS, CATEGORIES
from nxerp.domain.entities import Customer, Supplier, Category
from nxerp.domain.errors import StorageError

APP_DIR_NAME = "NxERP"
DATABASE_FILE_NAME = "nxerp-local.db"
LOG_FILE_NAME = "nxerp.log"


def user_data_dir() -> Path:
    """Return the user-local application data directory of this OS."""
    if sys.platform == "win32":
        local_app_data = os.environ.get("LOCALAPPDATA")
        if local_app_data:
            return Path(local_app_data)
        return Path.home() / "AppData" / "Local"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    xdg_data_home = os.environ.get("XDG_DATA_HOME")
    if xdg_data_home:
        return Path(xdg_data_home)
    return Path.home() / ".local" / "share"


def default_database_path() -> Path:
    """Return the default database file, e.g. ~/.local/share/NxERP/nxerp-local.db."""
    return user_data_dir() / APP_DIR_NAME / DATABASE_FILE_NAME


def default_log_path(database_path: Union[str, Path]) -> Path:
    """Return the log file kept next to a database file."""
    return Path(database_path).parent / LOG_FILE_NAME


@dataclass(frozen=True)
class Repositories:
    """The three master-data repositories over one store."""

    store: Store
    customers: SQLAlchemyRepository[Customer]
    suppliers: SQLAlchemyRepository[Supplier]
    categories: SQLAlchemyRepository[Category]


def create_repositories(
    database_path: Optional[Union[str, Path]] = None,
    clock: Callable[[], datetime] = utc_now,
    seed: bool = True,
    seed_counts: Optional[dict[str, int]] = None,
) -> Repositories:
    """Open (creating and seeding if needed) the master-data database.

    Args:
        database_path: Path to SQLite database file. If None, uses
            default_database_path()
        clock: Source of ``updated_at`` timestamps
        seed: Whether empty tables get demo rows
        seed_counts: Optional generated-row counts keyed by table label
            ("customer", "supplier", "category")

    Returns:
        Repositories bundle sharing one Store
    """
    if database_path is None:
        database_path = default_database_path()
    seed_counts = seed_counts or {}

    store = Store(database_path)

    def build(table):
        return SQLAlchemyRepository(
            store, table, clock=clock, seed=seed, seed_count=seed_counts.get(table.label)
        )

    try:
        return Repositories(
            store=store,
            customers=build(CUSTOMERS),
            suppliers=build(SUPPLIERS),
            categories=build(CATEGORIES),
        )
    except StorageError:
        store.close()
        raise
