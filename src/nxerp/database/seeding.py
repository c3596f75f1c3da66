"""Deterministic demo data for first-run seeding.

Generated series come from a fixed-seed ``random.Random`` and a caller-supplied
reference time, so the same ``(count, now)`` always yields the same rows on
any machine. The known sample rows are applied after the generated series and
win over a generated row with the same code.
"""

import random
from datetime import date, datetime, timedelta
from decimal import Decimal

from nxerp.domain.entities import Customer, Supplier, Category

SEED = 42

CUSTOMER_TYPES = ("Retail", "Corporate", "Insurance")
SUPPLIER_TYPES = ("Distributor", "Wholesaler", "Manufacturer")
CATEGORY_TYPES = ("Medicine", "Surgical", "General")


def _phone(rng: random.Random) -> str:
    return f"03{rng.randrange(10, 49)}-{rng.randrange(1000000, 9999999)}"


def generate_customers(count: int, now: datetime) -> list[Customer]:
    """Generate ``count`` customers CUS-00001, CUS-00002, ..."""
    rng = random.Random(SEED)
    today = now.date()
    return [
        Customer(
            code=f"CUS-{i:05d}",
            name=f"Customer {i:05d}",
            type=CUSTOMER_TYPES[i % len(CUSTOMER_TYPES)],
            contact=_phone(rng),
            opening_date=today - timedelta(days=i % 365),
            opening_balance=Decimal(rng.randrange(0, 15000)),
            updated_at=now - timedelta(minutes=i),
        )
        for i in range(1, count + 1)
    ]


def generate_suppliers(count: int, now: datetime) -> list[Supplier]:
    """Generate ``count`` suppliers SUP-00001, SUP-00002, ..."""
    rng = random.Random(SEED)
    today = now.date()
    return [
        Supplier(
            code=f"SUP-{i:05d}",
            name=f"Supplier {i:05d}",
            type=SUPPLIER_TYPES[i % len(SUPPLIER_TYPES)],
            contact=_phone(rng),
            onboard_date=today - timedelta(days=i % 730),
            # Whole cents, so the payable exercises two decimal places
            opening_payable=Decimal(rng.randrange(0, 2_000_000)) / 100,
            updated_at=now - timedelta(minutes=i),
        )
        for i in range(1, count + 1)
    ]


def generate_categories(count: int, now: datetime) -> list[Category]:
    """Generate ``count`` categories CAT-00001, ..., some nested under the known ones."""
    rng = random.Random(SEED)
    today = now.date()
    parents = ("",) + tuple(c.code for c in known_categories(now))
    return [
        Category(
            code=f"CAT-{i:05d}",
            name=f"Category {i:05d}",
            type=CATEGORY_TYPES[i % len(CATEGORY_TYPES)],
            parent_category=rng.choice(parents),
            created_date=today - timedelta(days=i % 365),
            updated_at=now - timedelta(minutes=i),
        )
        for i in range(1, count + 1)
    ]


def known_customers(now: datetime) -> list[Customer]:
    """Hand-authored customers used in demos."""
    return [
        Customer(
            code="CUS-00001",
            name="Acme Traders",
            type="Retail",
            contact="0321-5550101",
            opening_date=date(2025, 7, 1),
            opening_balance=Decimal("12500.00"),
            updated_at=now,
        ),
        Customer(
            code="CUS-1002",
            name="City Clinic",
            type="Corporate",
            contact="0300-1234567",
            opening_date=date(2026, 2, 19),
            opening_balance=Decimal("2150.00"),
            updated_at=now,
        ),
    ]


def known_suppliers(now: datetime) -> list[Supplier]:
    """Hand-authored suppliers used in demos."""
    return [
        Supplier("SUP-301", "HealthLine Pharma", "Distributor", "0300-1111111",
                 date(2026, 1, 5), Decimal("4200.00"), updated_at=now),
        Supplier("SUP-302", "Global Medics", "Wholesaler", "0300-2222222",
                 date(2026, 1, 12), Decimal("7860.00"), updated_at=now),
        Supplier("SUP-303", "Sterile Supply Co", "Distributor", "0300-3333333",
                 date(2026, 1, 20), Decimal("2410.00"), updated_at=now),
    ]


def known_categories(now: datetime) -> list[Category]:
    """Hand-authored top-level categories used in demos."""
    return [
        Category("CAT-101", "Antibiotic", "Medicine", "", date(2026, 1, 1), updated_at=now),
        Category("CAT-102", "Drip/Infusion", "Medicine", "", date(2026, 1, 1), updated_at=now),
        Category("CAT-103", "Syrup", "Medicine", "", date(2026, 1, 1), updated_at=now),
        Category("CAT-104", "Painkiller", "Medicine", "", date(2026, 1, 1), updated_at=now),
    ]
