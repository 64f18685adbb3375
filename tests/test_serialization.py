"""Tests for shared serialization utilities."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from portfolio_dash.models import AttentionReason, PropertyStatus, PropertyWithStatus
from portfolio_dash.sinks.serialization import dataclass_to_dict, serialize_value, to_dict


@dataclass
class _SampleData:
    name: str
    amount: Decimal
    created_at: datetime


class TestToDict:
    """Tests for to_dict function."""

    def test_dataclass(self) -> None:
        obj = _SampleData(name="test", amount=Decimal("100.50"), created_at=datetime(2024, 1, 1))
        result = to_dict(obj)
        assert result["name"] == "test"
        assert result["amount"] == "100.50"
        assert result["created_at"] == "2024-01-01T00:00:00"

    def test_dict_passthrough(self) -> None:
        d = {"key": "value"}
        assert to_dict(d) == d

    def test_other_type(self) -> None:
        assert to_dict(42) == {"value": "42"}


class TestSerializeValue:
    """Tests for serialize_value function."""

    def test_decimal(self) -> None:
        assert serialize_value(Decimal("99.99")) == "99.99"

    def test_datetime(self) -> None:
        assert serialize_value(datetime(2024, 6, 15, 10, 30, 0)) == "2024-06-15T10:30:00"

    def test_date(self) -> None:
        assert serialize_value(date(2024, 6, 15)) == "2024-06-15"

    def test_enum(self) -> None:
        assert serialize_value(PropertyStatus.RENTED) == "rented"

    def test_nested_dict(self) -> None:
        assert serialize_value({"a": {"b": Decimal("1.5")}}) == {"a": {"b": "1.5"}}

    def test_tuple_becomes_list(self) -> None:
        assert serialize_value((Decimal("1"), None)) == ["1", None]

    def test_passthrough(self) -> None:
        assert serialize_value(None) is None
        assert serialize_value(7) == 7


class TestDataclassToDict:
    """Tests for dataclass_to_dict with portfolio models."""

    def test_annotated_property(self, make_property) -> None:
        base = make_property("p1", lease_in_days=10, images=("a.jpg",))
        prop = PropertyWithStatus(
            **{name: getattr(base, name) for name in base.__dataclass_fields__},
            needs_attention=True,
            attention_reason=AttentionReason.LEASE_EXPIRING_SOON,
            days_until_lease_expiry=10,
        )

        result = dataclass_to_dict(prop)

        assert result["status"] == "rented"
        assert result["monthly_rent"] == "10000"
        assert result["tenant"]["name"] == "Kari N."
        assert result["lease_expires"] == "2025-02-25T00:00:00"
        assert result["images"] == ["a.jpg"]
        assert result["attention_reason"] == "lease_expiring_soon"
        assert result["has_overdue_payment"] is False
