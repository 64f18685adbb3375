"""Synthetic landlord portfolios."""

import logging
import random
from datetime import datetime, timedelta
from decimal import Decimal

from portfolio_dash.generators.base import BaseGenerator
from portfolio_dash.models import (
    PaymentStatus,
    Property,
    PropertyStatus,
    PropertyType,
    RentPayment,
    Tenant,
)

logger = logging.getLogger(__name__)


class PortfolioGenerator(BaseGenerator):
    """Generate properties with tenants, leases and current-month payments.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale for addresses and names.
    reference_time : datetime | None
        "Today" for lease dates and the billing month (default: now).
    """

    STATUS_WEIGHTS = {
        PropertyStatus.RENTED: 0.70,
        PropertyStatus.AVAILABLE: 0.20,
        PropertyStatus.RESERVED: 0.10,
    }

    PAYMENT_STATUS_WEIGHTS = {
        PaymentStatus.PAID: 0.75,
        PaymentStatus.PENDING: 0.15,
        PaymentStatus.OVERDUE: 0.10,
    }

    # Monthly rent range (NOK) by property type
    RENT_RANGES = {
        PropertyType.STUDIO: (7000, 10000),
        PropertyType.FLAT: (10000, 20000),
        PropertyType.HOUSE: (15000, 30000),
    }

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "no_NO",
        reference_time: datetime | None = None,
    ) -> None:
        super().__init__(seed, locale)
        self.reference_time = reference_time or datetime.now()

    def _tenant(self) -> Tenant:
        return Tenant(
            tenant_id=f"tenant-{self.fake.uuid4()}",
            name=self.fake.name(),
            email=self.fake.email(),
            phone=self.fake.phone_number(),
        )

    def generate(self) -> Property:
        """Generate a property.

        Returns
        -------
        Property
            Rented properties get a tenant and a lease ending between 30 days
            ago and 400 days ahead; reserved ones a future lease; available
            ones neither.
        """
        status = random.choices(
            list(self.STATUS_WEIGHTS), weights=list(self.STATUS_WEIGHTS.values())
        )[0]
        property_type = random.choice(list(PropertyType))
        low, high = self.RENT_RANGES[property_type]
        rent = random.randint(low // 100, high // 100) * 100

        tenant = None
        lease_expires = None
        if status == PropertyStatus.RENTED:
            tenant = self._tenant()
            lease_expires = self.reference_time + timedelta(days=random.randint(-30, 400))
        elif status == PropertyStatus.RESERVED:
            tenant = self._tenant()
            lease_expires = self.reference_time + timedelta(days=random.randint(180, 730))

        created_at = self.reference_time - timedelta(days=random.randint(90, 1500))

        return Property(
            property_id=f"prop-{self.fake.uuid4()}",
            address=self.fake.street_address(),
            city=self.fake.city(),
            postal_code=self.fake.postcode(),
            property_type=property_type,
            status=status,
            monthly_rent=Decimal(rent),
            tenant=tenant,
            lease_expires=lease_expires,
            created_at=created_at,
            updated_at=created_at + timedelta(days=random.randint(0, 60)),
            images=tuple(
                f"https://picsum.photos/seed/{self.fake.uuid4()}/800/600"
                for _ in range(random.randint(0, 4))
            ),
        )

    def generate_payment(self, prop: Property) -> RentPayment:
        """Generate the current month's rent payment for a tenanted property."""
        if prop.tenant is None:
            raise ValueError(f"Property {prop.property_id} has no tenant")

        due_date = self.reference_time.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
        status = random.choices(
            list(self.PAYMENT_STATUS_WEIGHTS),
            weights=list(self.PAYMENT_STATUS_WEIGHTS.values()),
        )[0]
        paid_date = None
        if status == PaymentStatus.PAID:
            paid_date = due_date + timedelta(days=random.randint(0, 5))

        return RentPayment(
            payment_id=f"pay-{self.fake.uuid4()}",
            property_id=prop.property_id,
            property_address=prop.address,
            tenant_id=prop.tenant.tenant_id,
            tenant_name=prop.tenant.name,
            amount=prop.monthly_rent,
            due_date=due_date,
            paid_date=paid_date,
            status=status,
            month=due_date.strftime("%Y-%m"),
        )

    def generate_portfolio(
        self, num_properties: int
    ) -> tuple[list[Property], list[RentPayment]]:
        """Generate properties plus one payment per rented property."""
        properties = [self.generate() for _ in range(num_properties)]
        payments = [
            self.generate_payment(prop)
            for prop in properties
            if prop.status == PropertyStatus.RENTED
        ]
        logger.debug(
            "Generated %d properties and %d payments", len(properties), len(payments)
        )
        return properties, payments
