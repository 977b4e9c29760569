"""
Cart-side inputs for rate computation.

ShippingOptionRequest aggregates the physical totals of the cart;
totals calculators supply the money amounts (subtotal with discounts,
item-level additional shipping charges).
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional, Sequence

from correios_shipping.modules.shipping.measures import CartPhysicalProfile


@dataclass
class CartItem:
    """Cart line. Measurements are per unit, in primary measure units."""
    sku: str
    quantity: int = 1
    unit_price: Decimal = Decimal("0")
    length: Decimal = Decimal("0")
    width: Decimal = Decimal("0")
    height: Decimal = Decimal("0")
    weight: Decimal = Decimal("0")
    additional_shipping_charge: Decimal = Decimal("0")
    is_ship_enabled: bool = True
    is_free_shipping: bool = False


@dataclass
class ShippingAddress:
    postal_code: Optional[str]
    country_code: str = "BR"
    city: Optional[str] = None
    state_province: Optional[str] = None


@dataclass
class ShippingOptionRequest:
    """A request for shipping options for a cart."""
    items: Optional[List[CartItem]] = field(default_factory=list)
    shipping_address: Optional[ShippingAddress] = None

    def _shippable(self) -> List[CartItem]:
        return [item for item in self.items or [] if item.is_ship_enabled]

    def get_total_length(self) -> Decimal:
        return sum((Decimal(i.length) * i.quantity for i in self._shippable()), Decimal("0"))

    def get_total_width(self) -> Decimal:
        return sum((Decimal(i.width) * i.quantity for i in self._shippable()), Decimal("0"))

    def get_total_height(self) -> Decimal:
        return sum((Decimal(i.height) * i.quantity for i in self._shippable()), Decimal("0"))

    def get_total_weight(self) -> Decimal:
        return sum((Decimal(i.weight) * i.quantity for i in self._shippable()), Decimal("0"))

    def physical_profile(self) -> CartPhysicalProfile:
        return CartPhysicalProfile(
            length_raw=self.get_total_length(),
            width_raw=self.get_total_width(),
            height_raw=self.get_total_height(),
            weight_raw=self.get_total_weight(),
        )


class BaseTotalsCalculator(ABC):
    """Money amounts of a cart."""

    @abstractmethod
    def get_subtotal_with_discounts(self, items: Sequence[CartItem]) -> Decimal:
        pass

    @abstractmethod
    def get_additional_shipping_charge(self, items: Sequence[CartItem]) -> Decimal:
        pass


class CartTotalsCalculator(BaseTotalsCalculator):
    """Sums cart lines; an optional flat discount is taken off the subtotal."""

    def __init__(self, discount_amount: Decimal = Decimal("0")):
        self.discount_amount = Decimal(discount_amount)

    def get_subtotal_with_discounts(self, items: Sequence[CartItem]) -> Decimal:
        subtotal = sum((Decimal(i.unit_price) * i.quantity for i in items), Decimal("0"))
        return max(subtotal - self.discount_amount, Decimal("0"))

    def get_additional_shipping_charge(self, items: Sequence[CartItem]) -> Decimal:
        return sum(
            (
                Decimal(i.additional_shipping_charge) * i.quantity
                for i in items
                if i.is_ship_enabled and not i.is_free_shipping
            ),
            Decimal("0"),
        )
