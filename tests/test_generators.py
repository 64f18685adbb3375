"""Tests for synthetic portfolio generation."""

from datetime import timedelta

import pytest

from portfolio_dash.generators import PortfolioGenerator
from portfolio_dash.models import PaymentStatus, PropertyStatus, PropertyType


class TestPortfolioGenerator:
    """Tests for PortfolioGenerator."""

    def test_generate_property(self, seed: int, reference_time) -> None:
        gen = PortfolioGenerator(seed=seed, reference_time=reference_time)
        prop = gen.generate()

        assert prop.property_id.startswith("prop-")
        assert prop.address
        assert prop.city
        low, high = PortfolioGenerator.RENT_RANGES[PropertyType(prop.property_type)]
        assert low <= prop.monthly_rent <= high
        assert prop.monthly_rent % 100 == 0
        assert prop.created_at <= prop.updated_at

    def test_tenant_and_lease_follow_status(self, seed: int, reference_time) -> None:
        gen = PortfolioGenerator(seed=seed, reference_time=reference_time)

        for prop in (gen.generate() for _ in range(50)):
            if prop.status == PropertyStatus.AVAILABLE:
                assert prop.tenant is None
                assert prop.lease_expires is None
            elif prop.status == PropertyStatus.RENTED:
                assert prop.tenant is not None
                assert reference_time - timedelta(days=30) <= prop.lease_expires
                assert prop.lease_expires <= reference_time + timedelta(days=400)
            else:
                assert prop.tenant is not None
                assert prop.lease_expires >= reference_time + timedelta(days=180)

    def test_unique_ids(self, seed: int, reference_time) -> None:
        gen = PortfolioGenerator(seed=seed, reference_time=reference_time)
        ids = [gen.generate().property_id for _ in range(20)]

        assert len(set(ids)) == 20

    def test_seed_is_reproducible(self, seed: int, reference_time) -> None:
        first, _ = PortfolioGenerator(seed=seed, reference_time=reference_time).generate_portfolio(10)
        second, _ = PortfolioGenerator(seed=seed, reference_time=reference_time).generate_portfolio(10)

        assert first == second

    def test_generate_payment(self, seed: int, reference_time, make_property) -> None:
        gen = PortfolioGenerator(seed=seed, reference_time=reference_time)
        prop = make_property("p1", monthly_rent=12000)

        payment = gen.generate_payment(prop)

        assert payment.property_id == "p1"
        assert payment.tenant_name == "Kari N."
        assert payment.amount == prop.monthly_rent
        assert payment.month == "2025-02"
        assert payment.due_date.day == 1
        if payment.status == PaymentStatus.PAID:
            assert payment.paid_date is not None
        else:
            assert payment.paid_date is None

    def test_generate_payment_without_tenant(self, seed: int, make_property) -> None:
        gen = PortfolioGenerator(seed=seed)
        prop = make_property("p1", status=PropertyStatus.AVAILABLE, tenant_name=None)

        with pytest.raises(ValueError, match="has no tenant"):
            gen.generate_payment(prop)

    def test_generate_portfolio(self, seed: int, reference_time) -> None:
        gen = PortfolioGenerator(seed=seed, reference_time=reference_time)

        properties, payments = gen.generate_portfolio(30)

        rented_ids = {p.property_id for p in properties if p.status == PropertyStatus.RENTED}
        assert len(properties) == 30
        assert len(payments) == len(rented_ids)
        assert {p.property_id for p in payments} == rented_ids

    def test_empty_portfolio(self, seed: int) -> None:
        assert PortfolioGenerator(seed=seed).generate_portfolio(0) == ([], [])

    def test_default_locale(self, seed: int, reference_time) -> None:
        gen = PortfolioGenerator(seed=seed, reference_time=reference_time)

        properties, _ = gen.generate_portfolio(3)

        assert len(properties) == 3
        assert all(p.city for p in properties)
