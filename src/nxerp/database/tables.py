"""Per-entity table descriptions consumed by the generic repositories."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Generic, TypeVar

from nxerp.database import models, mappers, seeding

E = TypeVar("E")


@dataclass(frozen=True)
class EntityTable(Generic[E]):
    """Everything a repository needs to know about one entity table.

    Attributes:
        label: Human-readable entity name (e.g. "customer")
        model: SQLAlchemy model class
        search_columns: Columns matched by substring search
        to_domain: ORM instance -> domain entity
        generate: (count, now) -> generated demo rows
        known_rows: now -> hand-authored demo rows
        default_seed_count: Generated rows inserted into an empty table
    """

    label: str
    model: type
    search_columns: tuple[str, ...]
    to_domain: Callable[[Any], E]
    generate: Callable[[int, datetime], list[E]]
    known_rows: Callable[[datetime], list[E]]
    default_seed_count: int


CUSTOMERS = EntityTable(
    label="customer",
    model=models.Customer,
    search_columns=("code", "name", "contact"),
    to_domain=mappers.customer_to_domain,
    generate=seeding.generate_customers,
    known_rows=seeding.known_customers,
    default_seed_count=5000,
)

SUPPLIERS = EntityTable(
    label="supplier",
    model=models.Supplier,
    search_columns=("code", "name", "contact"),
    to_domain=mappers.supplier_to_domain,
    generate=seeding.generate_suppliers,
    known_rows=seeding.known_suppliers,
    default_seed_count=500,
)

CATEGORIES = EntityTable(
    label="category",
    model=models.Category,
    search_columns=("code", "name"),
    to_domain=mappers.category_to_domain,
    generate=seeding.generate_categories,
    known_rows=seeding.known_categories,
    default_seed_count=100,
)
