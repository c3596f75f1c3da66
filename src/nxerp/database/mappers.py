"""Mapper functions to convert between domain models and SQLAlchemy models.

Rows go into the database as plain column dictionaries (they feed
``INSERT ... ON CONFLICT`` statements directly) and come back as ORM
instances converted to domain entities.
"""

from dataclasses import fields, replace
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, TypeVar

from nxerp.domain import entities as domain
from nxerp.database.models import (
    Customer as ORMCustomer,
    Supplier as ORMSupplier,
    Category as ORMCategory,
)

E = TypeVar("E")

CENT = Decimal("0.01")


def normalize_for_storage(entity: E, updated_at: datetime) -> E:
    """Return the entity as it will be persisted.

    Text fields are trimmed, money is rounded to cents and ``updated_at`` is
    replaced with the given timestamp.
    """
    changes: dict[str, Any] = {"updated_at": updated_at}
    for f in fields(entity):
        value = getattr(entity, f.name)
        if isinstance(value, str):
            changes[f.name] = value.strip()
        elif isinstance(value, Decimal):
            changes[f.name] = value.quantize(CENT, rounding=ROUND_HALF_UP)
    return replace(entity, **changes)


def entity_to_row(entity: Any) -> dict[str, Any]:
    """Convert a domain entity to a column-name -> value dictionary."""
    return {f.name: getattr(entity, f.name) for f in fields(entity)}


def customer_to_domain(orm_customer: ORMCustomer) -> domain.Customer:
    """Convert SQLAlchemy Customer model to domain Customer entity."""
    return domain.Customer(
        code=orm_customer.code,
        name=orm_customer.name,
        type=orm_customer.type,
        contact=orm_customer.contact,
        opening_date=orm_customer.opening_date,
        opening_balance=orm_customer.opening_balance,
        is_active=orm_customer.is_active,
        updated_at=orm_customer.updated_at,
    )


def supplier_to_domain(orm_supplier: ORMSupplier) -> domain.Supplier:
    """Convert SQLAlchemy Supplier model to domain Supplier entity."""
    return domain.Supplier(
        code=orm_supplier.code,
        name=orm_supplier.name,
        type=orm_supplier.type,
        contact=orm_supplier.contact,
        onboard_date=orm_supplier.onboard_date,
        opening_payable=orm_supplier.opening_payable,
        is_active=orm_supplier.is_active,
        updated_at=orm_supplier.updated_at,
    )


def category_to_domain(orm_category: ORMCategory) -> domain.Category:
    """Convert SQLAlchemy Category model to domain Category entity."""
    return domain.Category(
        code=orm_category.code,
        name=orm_category.name,
        type=orm_category.type,
        parent_category=orm_category.parent_category,
        created_date=orm_category.created_date,
        is_active=orm_category.is_active,
        updated_at=orm_category.updated_at,
    )
