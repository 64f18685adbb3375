"""Fixed demo portfolio served by the sample data source.

The last three properties exist to exercise error paths in the dashboard:
one without images, one whose id is the literal ``"null"`` and one whose id
triggers a simulated server error.
"""

from datetime import datetime
from decimal import Decimal

from portfolio_dash.models import (
    PaymentStatus,
    Property,
    PropertyStatus,
    PropertyType,
    RentPayment,
    Tenant,
)

SAMPLE_IMAGES: tuple[str, ...] = tuple(
    f"https://picsum.photos/seed/apartment{i}/800/600" for i in range(1, 8)
)

_CREATED = datetime(2024, 1, 1)
_UPDATED = datetime(2025, 2, 1)

_MADS = Tenant(
    tenant_id="tenant-4",
    name="Mads L.",
    email="mads.l@example.com",
    phone="+47 456 78 901",
)


def _property(
    property_id: str,
    address: str,
    city: str,
    postal_code: str,
    property_type: PropertyType,
    status: PropertyStatus,
    monthly_rent: int,
    tenant: Tenant | None,
    lease_expires: datetime | None,
    images: tuple[str, ...] = SAMPLE_IMAGES,
) -> Property:
    return Property(
        property_id=property_id,
        address=address,
        city=city,
        postal_code=postal_code,
        property_type=property_type,
        status=status,
        monthly_rent=Decimal(monthly_rent),
        tenant=tenant,
        lease_expires=lease_expires,
        created_at=_CREATED,
        updated_at=_UPDATED,
        images=images,
    )


SAMPLE_PROPERTIES: tuple[Property, ...] = (
    _property(
        "prop-1", "Thereses gate 12", "Oslo", "0452",
        PropertyType.FLAT, PropertyStatus.RENTED, 12500,
        Tenant("tenant-1", "Anna M.", "anna.m@example.com", "+47 123 45 678"),
        datetime(2026, 8, 31),
    ),
    _property(
        "prop-2", "Grünerløkka 45", "Oslo", "0552",
        PropertyType.FLAT, PropertyStatus.RENTED, 14800,
        Tenant("tenant-2", "Erik S.", "erik.s@example.com", "+47 234 56 789"),
        datetime(2025, 4, 15),
    ),
    _property(
        "prop-3", "Nordnes gate 8", "Bergen", "5005",
        PropertyType.FLAT, PropertyStatus.AVAILABLE, 10200,
        None,
        None,
    ),
    _property(
        "prop-4", "Solsiden 22", "Trondheim", "7014",
        PropertyType.HOUSE, PropertyStatus.RESERVED, 16500,
        Tenant("tenant-pending", "Pending", "pending@example.com"),
        datetime(2026, 1, 1),
    ),
    _property(
        "prop-5", "Frognerveien 33", "Oslo", "0263",
        PropertyType.FLAT, PropertyStatus.RENTED, 18200,
        Tenant("tenant-3", "Sofie K.", "sofie.k@example.com", "+47 345 67 890"),
        datetime(2025, 11, 30),
    ),
    _property(
        "prop-6", "Damsgårdsveien 61", "Bergen", "5058",
        PropertyType.STUDIO, PropertyStatus.RENTED, 8900,
        _MADS,
        datetime(2025, 9, 1),
    ),
    _property(
        "prop-7", "Error - No Images", "Bergen", "5058",
        PropertyType.STUDIO, PropertyStatus.RENTED, 8900,
        _MADS,
        datetime(2025, 9, 1),
        images=(),
    ),
    _property(
        "null", "Error - No ID", "Bergen", "5058",
        PropertyType.STUDIO, PropertyStatus.RENTED, 8900,
        _MADS,
        datetime(2025, 9, 1),
        images=(),
    ),
    _property(
        "Server_error", "Server_error", "Bergen", "5058",
        PropertyType.STUDIO, PropertyStatus.RENTED, 8900,
        _MADS,
        datetime(2025, 9, 1),
        images=(),
    ),
)

SAMPLE_PAYMENTS: tuple[RentPayment, ...] = (
    RentPayment(
        payment_id="pay-1",
        property_id="prop-1",
        property_address="Thereses gate 12",
        tenant_id="tenant-1",
        tenant_name="Anna M.",
        amount=Decimal(12500),
        due_date=datetime(2025, 2, 1),
        paid_date=datetime(2025, 2, 1),
        status=PaymentStatus.PAID,
        month="2025-02",
    ),
    RentPayment(
        payment_id="pay-2",
        property_id="prop-2",
        property_address="Grünerløkka 45",
        tenant_id="tenant-2",
        tenant_name="Erik S.",
        amount=Decimal(14800),
        due_date=datetime(2025, 2, 1),
        paid_date=None,
        status=PaymentStatus.OVERDUE,
        month="2025-02",
    ),
    RentPayment(
        payment_id="pay-3",
        property_id="prop-5",
        property_address="Frognerveien 33",
        tenant_id="tenant-3",
        tenant_name="Sofie K.",
        amount=Decimal(18200),
        due_date=datetime(2025, 2, 1),
        paid_date=datetime(2025, 2, 1),
        status=PaymentStatus.PAID,
        month="2025-02",
    ),
)
