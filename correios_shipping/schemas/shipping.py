"""
Shipping Schemas

Pydantic models for the shipping options API.
"""
from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from correios_shipping.modules.shipping.cart import CartItem, ShippingAddress, ShippingOptionRequest


class CartItemSchema(BaseModel):
    """Cart line; measurements per unit in the store's primary units."""
    sku: str = Field(..., min_length=1, max_length=100)
    quantity: int = Field(1, ge=1)
    unit_price: Decimal = Field(Decimal("0"), ge=0)
    length: Decimal = Field(Decimal("0"), ge=0)
    width: Decimal = Field(Decimal("0"), ge=0)
    height: Decimal = Field(Decimal("0"), ge=0)
    weight: Decimal = Field(Decimal("0"), ge=0)
    additional_shipping_charge: Decimal = Field(Decimal("0"), ge=0)
    is_ship_enabled: bool = True
    is_free_shipping: bool = False


class ShippingAddressSchema(BaseModel):
    postal_code: Optional[str] = Field(None, max_length=9)
    country_code: str = Field("BR", min_length=2, max_length=2)
    city: Optional[str] = Field(None, max_length=100)
    state_province: Optional[str] = Field(None, max_length=50)

    @field_validator("country_code")
    @classmethod
    def validate_country_code(cls, v):
        return v.upper()


class ShippingOptionsRequestSchema(BaseModel):
    """Request shipping options for a cart."""
    items: List[CartItemSchema] = []
    shipping_address: Optional[ShippingAddressSchema] = None

    def to_domain(self) -> ShippingOptionRequest:
        address = None
        if self.shipping_address is not None:
            address = ShippingAddress(**self.shipping_address.model_dump())
        return ShippingOptionRequest(
            items=[CartItem(**item.model_dump()) for item in self.items],
            shipping_address=address,
        )


class ShippingOptionSchema(BaseModel):
    name: str
    description: str
    rate: Decimal

    class Config:
        from_attributes = True


class ShippingOptionsResponseSchema(BaseModel):
    """Available options, or the errors explaining why there are none."""
    options: List[ShippingOptionSchema] = []
    errors: List[str] = []


class FixedRateResponse(BaseModel):
    rate: Optional[Decimal] = None


class ConfigurationRouteResponse(BaseModel):
    action_name: str
    controller_name: str
    route_values: Dict[str, Any] = {}
