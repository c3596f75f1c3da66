"""Tests for database mappers."""

from datetime import date, datetime, timedelta, timezone, UTC
from decimal import Decimal

from nxerp.database.mappers import (
    customer_to_domain,
    supplier_to_domain,
    category_to_domain,
    entity_to_row,
    normalize_for_storage,
)
from nxerp.database.models import (
    Customer as ORMCustomer,
    Supplier as ORMSupplier,
    Category as ORMCategory,
    UTCDateTime,
)
from nxerp.domain.entities import Customer, Supplier, Category

NOW = datetime(2026, 3, 1, 9, 30, tzinfo=UTC)


class TestToDomain:
    """Tests for ORM -> domain conversion."""

    def test_customer_to_domain(self):
        """Test converting ORM Customer to domain Customer."""
        orm_customer = ORMCustomer(
            code="CUS-1002",
            name="City Clinic",
            type="Corporate",
            contact="0300-1234567",
            opening_date=date(2026, 2, 19),
            opening_balance=Decimal("2150.00"),
            is_active=True,
            updated_at=NOW,
        )
        customer = customer_to_domain(orm_customer)

        assert isinstance(customer, Customer)
        assert customer.code == "CUS-1002"
        assert customer.contact == "0300-1234567"
        assert customer.opening_balance == Decimal("2150.00")
        assert customer.updated_at == NOW

    def test_supplier_to_domain(self):
        """Test converting ORM Supplier to domain Supplier."""
        orm_supplier = ORMSupplier(
            code="SUP-301",
            name="HealthLine Pharma",
            type="Distributor",
            contact="0300-1111111",
            onboard_date=date(2026, 1, 5),
            opening_payable=Decimal("4200.00"),
            is_active=False,
            updated_at=NOW,
        )
        supplier = supplier_to_domain(orm_supplier)

        assert isinstance(supplier, Supplier)
        assert supplier.onboard_date == date(2026, 1, 5)
        assert supplier.opening_payable == Decimal("4200.00")
        assert supplier.is_active is False

    def test_category_to_domain(self):
        """Test converting ORM Category to domain Category."""
        orm_category = ORMCategory(
            code="CAT-201",
            name="Oral",
            type="Medicine",
            parent_category="CAT-101",
            created_date=date(2026, 1, 1),
            is_active=True,
            updated_at=NOW,
        )
        category = category_to_domain(orm_category)

        assert isinstance(category, Category)
        assert category.parent_category == "CAT-101"
        assert category.created_date == date(2026, 1, 1)


class TestNormalizeForStorage:
    """Tests for the pre-write normalization."""

    def test_trims_text_and_stamps_time(self):
        """Test that strings are trimmed and updated_at replaced."""
        stored = normalize_for_storage(
            Category(code=" CAT-1 ", name=" Syrup\t", type="Medicine ", parent_category="  "),
            NOW,
        )

        assert stored.code == "CAT-1"
        assert stored.name == "Syrup"
        assert stored.type == "Medicine"
        assert stored.parent_category == ""
        assert stored.updated_at == NOW

    def test_rounds_money_half_up(self):
        """Test that money is rounded to cents, halves away from zero."""
        stored = normalize_for_storage(
            Supplier(code="SUP-1", name="S", opening_payable=Decimal("2.345")), NOW
        )
        assert stored.opening_payable == Decimal("2.35")
        assert str(stored.opening_payable) == "2.35"

        negative = normalize_for_storage(
            Supplier(code="SUP-1", name="S", opening_payable=Decimal("-2.345")), NOW
        )
        assert negative.opening_payable == Decimal("-2.35")

    def test_entity_to_row(self):
        """Test that rows carry every entity field by name."""
        row = entity_to_row(Customer(code="CUS-1", name="N", updated_at=NOW))

        assert set(row) == {
            "code",
            "name",
            "type",
            "contact",
            "opening_date",
            "opening_balance",
            "is_active",
            "updated_at",
        }
        assert row["updated_at"] == NOW


class TestUTCDateTime:
    """Tests for the UTC timestamp column type."""

    def test_bind_converts_to_naive_utc(self):
        """Test that aware datetimes are stored as naive UTC."""
        plus_five = timezone(timedelta(hours=5))
        value = datetime(2026, 3, 1, 14, 30, tzinfo=plus_five)

        assert UTCDateTime().process_bind_param(value, None) == datetime(2026, 3, 1, 9, 30)

    def test_result_is_aware_utc(self):
        """Test that stored values come back tagged as UTC."""
        assert UTCDateTime().process_result_value(datetime(2026, 3, 1, 9, 30), None) == NOW
        assert UTCDateTime().process_result_value(None, None) is None
