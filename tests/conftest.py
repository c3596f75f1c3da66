"""Shared pytest fixtures for nxerp tests."""

from datetime import datetime, timedelta, UTC

import pytest

from nxerp.app import create_services
from nxerp.database.memory import InMemoryRepository
from nxerp.database.repository import SQLAlchemyRepository, utc_now
from nxerp.database.store import Store
from nxerp.database.tables import CUSTOMERS
from nxerp.domain.customer import CustomerService

FIXED_NOW = datetime(2026, 3, 1, 9, 30, tzinfo=UTC)

# Small seed sizes keep CLI tests fast; tables with rows are never reseeded
TEST_SEED_COUNTS = {"customer": 25, "supplier": 12, "category": 8}


class TickingClock:
    """Clock that advances by ``step`` on every call."""

    def __init__(self, start: datetime = FIXED_NOW, step: timedelta = timedelta(seconds=1)):
        self.current = start
        self.step = step

    def __call__(self) -> datetime:
        self.current += self.step
        return self.current


@pytest.fixture
def temp_db_path(tmp_path):
    """Path to a database file inside a directory that does not exist yet."""
    return tmp_path / "data" / "nxerp-test.db"


@pytest.fixture
def store(temp_db_path):
    """Create a Store on a temporary database file."""
    store = Store(temp_db_path)
    yield store
    store.close()


@pytest.fixture
def customer_repo(store):
    """Create an unseeded SQLite customer repository."""
    return SQLAlchemyRepository(store, CUSTOMERS, seed=False)


@pytest.fixture
def customer_service(customer_repo):
    """Create a CustomerService over an unseeded SQLite repository."""
    return CustomerService(customer_repo)


@pytest.fixture(params=["sqlite", "memory"])
def make_repo(request, store):
    """Factory for unseeded repositories of either backend.

    Tests using it run once against SQLite and once in memory.
    """

    def build(table=CUSTOMERS, clock=utc_now):
        if request.param == "sqlite":
            return SQLAlchemyRepository(store, table, clock=clock, seed=False)
        return InMemoryRepository(table, clock=clock, seed=False)

    return build


@pytest.fixture
def seeded_db_path(temp_db_path):
    """Create a database seeded with a small demo data set and return its path."""
    services = create_services(database_path=temp_db_path, seed_counts=TEST_SEED_COUNTS)
    services.close()
    return temp_db_path


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
