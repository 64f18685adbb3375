"""Pytest configuration and fixtures."""

from datetime import datetime, timedelta
from decimal import Decimal
from typing import Any, Callable

import pytest

from portfolio_dash.models import (
    PaymentStatus,
    Property,
    PropertyStatus,
    PropertyType,
    RentPayment,
    Tenant,
)

REFERENCE_TIME = datetime(2025, 2, 15)


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def reference_time() -> datetime:
    """Fixed "now" for lease classification."""
    return REFERENCE_TIME


@pytest.fixture
def make_property() -> Callable[..., Property]:
    """Factory for properties with sensible defaults."""

    def _make(
        property_id: str = "prop-001",
        *,
        status: PropertyStatus = PropertyStatus.RENTED,
        monthly_rent: int | Decimal = 10000,
        city: str = "Oslo",
        address: str | None = None,
        tenant_name: str | None = "Kari N.",
        lease_in_days: float | None = None,
        **overrides: Any,
    ) -> Property:
        tenant = Tenant(tenant_id=f"tenant-{property_id}", name=tenant_name) if tenant_name else None
        lease_expires = None
        if lease_in_days is not None:
            lease_expires = REFERENCE_TIME + timedelta(days=lease_in_days)
        values: dict[str, Any] = {
            "property_id": property_id,
            "address": address or f"Storgata {property_id}",
            "city": city,
            "postal_code": "0150",
            "property_type": PropertyType.FLAT,
            "status": status,
            "monthly_rent": Decimal(monthly_rent),
            "tenant": tenant,
            "lease_expires": lease_expires,
            "created_at": datetime(2024, 1, 1),
            "updated_at": datetime(2025, 1, 1),
        }
        values.update(overrides)
        return Property(**values)

    return _make


@pytest.fixture
def make_payment() -> Callable[..., RentPayment]:
    """Factory for rent payments."""

    def _make(
        property_id: str = "prop-001",
        *,
        status: PaymentStatus = PaymentStatus.PAID,
        amount: int | Decimal = 10000,
        month: str = "2025-02",
        payment_id: str | None = None,
        tenant_name: str = "Kari N.",
    ) -> RentPayment:
        due_date = datetime.strptime(f"{month}-01", "%Y-%m-%d")
        return RentPayment(
            payment_id=payment_id or f"pay-{property_id}-{month}",
            property_id=property_id,
            property_address=f"Storgata {property_id}",
            tenant_id=f"tenant-{property_id}",
            tenant_name=tenant_name,
            amount=Decimal(amount),
            due_date=due_date,
            paid_date=due_date if status == PaymentStatus.PAID else None,
            status=status,
            month=month,
        )

    return _make
