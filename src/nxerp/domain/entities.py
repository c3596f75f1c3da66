"""Domain model entities for nxerp master data.

These are pure data classes for the three master-data records, independent of
the database schema. Code is the identity of every record; ``updated_at`` is
assigned by the repository on each write and does not take part in equality.
"""

from dataclasses import dataclass, field
from datetime import datetime, date
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Customer:
    """Customer domain entity."""

    code: str
    name: str
    type: str = "Retail"
    contact: str = ""
    opening_date: date = field(default_factory=date.today)
    opening_balance: Decimal = Decimal("0")
    is_active: bool = True
    updated_at: Optional[datetime] = field(default=None, compare=False)


@dataclass(frozen=True)
class Supplier:
    """Supplier domain entity."""

    code: str
    name: str
    type: str = "Distributor"
    contact: str = ""
    onboard_date: date = field(default_factory=date.today)
    opening_payable: Decimal = Decimal("0")
    is_active: bool = True
    updated_at: Optional[datetime] = field(default=None, compare=False)


@dataclass(frozen=True)
class Category:
    """Category domain entity.

    ``parent_category`` holds the code of the parent category, or an empty
    string for a top-level category.
    """

    code: str
    name: str
    type: str = "Medicine"
    parent_category: str = ""
    created_date: date = field(default_factory=date.today)
    is_active: bool = True
    updated_at: Optional[datetime] = field(default=None, compare=False)
