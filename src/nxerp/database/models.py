"""SQLAlchemy models for the nxerp database."""

from datetime import datetime, UTC
from typing import Optional
from sqlalchemy import (
    Column,
    String,
    DateTime,
    Date,
    Numeric,
    Boolean,
    Index,
)
from sqlalchemy.orm import declarative_base
from sqlalchemy.types import TypeDecorator

Base = declarative_base()


class UTCDateTime(TypeDecorator):
    """DateTime stored as naive UTC text, returned as an aware UTC datetime."""

    impl = DateTime
    cache_ok = True

    def process_bind_param(self, value: Optional[datetime], dialect) -> Optional[datetime]:
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(UTC).replace(tzinfo=None)
        return value

    def process_result_value(self, value: Optional[datetime], dialect) -> Optional[datetime]:
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value


def code_column() -> Column:
    """Primary key column for a record code, compared case-insensitively."""
    return Column(String(collation="nocase"), primary_key=True)


class Customer(Base):
    """Customer model."""

    __tablename__ = "customers"

    code = code_column()
    name = Column(String, nullable=False, index=True)
    type = Column(String, nullable=False)
    contact = Column(String, nullable=False, index=True)
    opening_date = Column(Date, nullable=False)
    opening_balance = Column(Numeric(18, 2), nullable=False)
    is_active = Column(Boolean, nullable=False)
    updated_at = Column(UTCDateTime, nullable=False)


class Supplier(Base):
    """Supplier model."""

    __tablename__ = "suppliers"

    code = code_column()
    name = Column(String, nullable=False, index=True)
    type = Column(String, nullable=False)
    contact = Column(String, nullable=False)
    onboard_date = Column(Date, nullable=False)
    opening_payable = Column(Numeric(18, 2), nullable=False)
    is_active = Column(Boolean, nullable=False)
    updated_at = Column(UTCDateTime, nullable=False)


class Category(Base):
    """Category model. ``parent_category`` is a parent code or ''."""

    __tablename__ = "categories"

    code = code_column()
    name = Column(String, nullable=False, index=True)
    type = Column(String, nullable=False)
    parent_category = Column(String, nullable=False)
    created_date = Column(Date, nullable=False)
    is_active = Column(Boolean, nullable=False)
    updated_at = Column(UTCDateTime, nullable=False)


# Default listing order is most recently updated first
Index("ix_customers_updated_at", Customer.updated_at.desc())
Index("ix_suppliers_updated_at", Supplier.updated_at.desc())
Index("ix_categories_updated_at", Category.updated_at.desc())
