"""
Pytest configuration and fixtures for Correios shipping tests.
"""
import os
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

# Set test environment before importing app modules
os.environ["ENVIRONMENT"] = "development"
os.environ.setdefault("SHIPPING_ORIGIN_ZIP", "01310100")

from correios_shipping.core.config import Settings
from correios_shipping.modules.shipping.cart import CartItem, ShippingAddress, ShippingOptionRequest
from correios_shipping.modules.shipping.measures import (
    InMemoryMeasureService,
    MeasureDimension,
    MeasureWeight,
)
from correios_shipping.modules.shipping.quotes import ServiceQuote


@pytest.fixture
def test_settings() -> Settings:
    """Settings with a valid origin CEP and no optional features."""
    return Settings(
        _env_file=None,
        ENVIRONMENT="development",
        SHIPPING_ORIGIN_ZIP="01310100",
        CORREIOS_SERVICES_OFFERED=["40010", "41106"],
        CORREIOS_ADDITIONAL_LEAD_DAYS=0,
        CORREIOS_ADDITIONAL_SHIPPING_FEE=Decimal("0"),
    )


@pytest.fixture
def metric_measure_service() -> InMemoryMeasureService:
    """Store whose primary units are kilograms and millimetres (ratio 1)."""
    return InMemoryMeasureService(
        weights=[MeasureWeight("kg", "kg(s)", Decimal("1"))],
        dimensions=[MeasureDimension("millimetres", "millimetre(s)", Decimal("1"))],
    )


@pytest.fixture
def mock_requestor() -> AsyncMock:
    """Quote requestor returning one SEDEX and one PAC quote."""
    requestor = AsyncMock()
    requestor.calculate = AsyncMock(return_value=[
        ServiceQuote(service_code="40010", price="25,90", delivery_days=1),
        ServiceQuote(service_code="41106", price="15,30", delivery_days=6),
    ])
    return requestor


def make_cart(length_mm=250, width_mm=100, height_mm=100, weight_kg=5, price="100.00", quantity=1):
    """Single-line cart measured in millimetres/kilograms."""
    item = CartItem(
        sku="SKU-1",
        quantity=quantity,
        unit_price=Decimal(price),
        length=Decimal(length_mm),
        width=Decimal(width_mm),
        height=Decimal(height_mm),
        weight=Decimal(weight_kg),
    )
    return ShippingOptionRequest(items=[item], shipping_address=ShippingAddress(postal_code="20040-020"))


@pytest.fixture
def sample_cart() -> ShippingOptionRequest:
    """25 x 10 x 10 cm, 5 kg, R$ 100."""
    return make_cart()


@pytest.fixture
def cart_factory():
    """Build carts with custom totals."""
    return make_cart
