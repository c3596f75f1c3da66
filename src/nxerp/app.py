"""Wiring of services over the master-data database."""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional, Union

from nxerp.database.factories import create_repositories
from nxerp.database.repository import utc_now
from nxerp.database.store import Store
from nxerp.domain.category import CategoryService
from nxerp.domain.customer import CustomerService
from nxerp.domain.supplier import SupplierService


@dataclass(frozen=True)
class MasterData:
    """Services for every master-data entity, sharing one store."""

    store: Store
    customers: CustomerService
    suppliers: SupplierService
    categories: CategoryService

    def close(self) -> None:
        """Release the underlying store."""
        self.store.close()


def create_services(
    database_path: Optional[Union[str, Path]] = None,
    clock: Callable[[], datetime] = utc_now,
    seed: bool = True,
    seed_counts: Optional[dict[str, int]] = None,
) -> MasterData:
    """Open the master-data database and build its services.

    Args:
        database_path: Path to SQLite database file. If None, uses the
            user-local application data directory
        clock: Source of ``updated_at`` timestamps
        seed: Whether empty tables get demo rows
        seed_counts: Optional generated-row counts keyed by table label

    Returns:
        MasterData bundle
    """
    repositories = create_repositories(
        database_path=database_path, clock=clock, seed=seed, seed_counts=seed_counts
    )
    return MasterData(
        store=repositories.store,
        customers=CustomerService(repositories.customers),
        suppliers=SupplierService(repositories.suppliers),
        categories=CategoryService(repositories.categories),
    )
