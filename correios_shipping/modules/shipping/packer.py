"""
Parcel packing.

A cart that fits the carrier envelope ships as one parcel. Otherwise it is
approximated as N identical parcels: one representative parcel is quoted
and the quote is later multiplied by N.
"""
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Tuple

from correios_shipping.modules.shipping.envelope import CarrierEnvelope, CORREIOS_ENVELOPE
from correios_shipping.modules.shipping.measures import NormalizedDimensions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParcelDescriptor:
    """
    Parcel submitted for quoting.

    When count > 1 the measurements are the per-parcel share of the cart.
    """
    length: int
    width: int
    height: int
    weight: int
    declared_value: Decimal = Decimal("0")
    is_box_shaped: bool = True
    diameter: int = 0
    count: int = 1

    def __post_init__(self):
        if self.count < 1:
            raise ValueError(f"Parcel count must be >= 1, got {self.count}")


def _ceil_div(numerator: int, denominator: int) -> int:
    return -(-numerator // denominator)


def parcel_count(dims: NormalizedDimensions, envelope: CarrierEnvelope = CORREIOS_ENVELOPE) -> int:
    """Number of identical parcels needed for the cart to fit the envelope."""
    by_weight = 1
    by_dims = 1

    if envelope.is_too_heavy(dims.weight):
        by_weight = _ceil_div(dims.weight, envelope.max_weight)
    if envelope.is_too_large(dims.length, dims.height, dims.width):
        by_dims = _ceil_div(dims.total, envelope.max_total_dimension)

    return max(by_weight, by_dims, 1)


def pack(
    dims: NormalizedDimensions,
    declared_value: Decimal,
    envelope: CarrierEnvelope = CORREIOS_ENVELOPE,
    include_declared_value: bool = True,
) -> Tuple[ParcelDescriptor, int]:
    """
    Build the representative parcel for a cart.

    Args:
        dims: Normalized cart totals
        declared_value: Cart subtotal with discounts
        envelope: Carrier limits
        include_declared_value: Send the declared value, else 0

    Returns:
        (parcel, count) where count is the parcel multiplier
    """
    length, width, height, weight = dims.length, dims.width, dims.height, dims.weight
    value = Decimal(declared_value) if include_declared_value else Decimal("0")

    # Undersized carts ship in the smallest accepted box
    if envelope.is_too_small(length, height, width):
        length = envelope.min_length
        height = envelope.min_height
        width = envelope.min_width

    if not envelope.is_too_heavy(weight) and not envelope.is_too_large(length, height, width):
        logger.debug(f"Single parcel: {length}x{width}x{height} cm, {weight} kg")
        parcel = ParcelDescriptor(
            length=length,
            width=width,
            height=height,
            weight=weight,
            declared_value=value,
        )
        return parcel, 1

    count = parcel_count(
        NormalizedDimensions(length=length, width=width, height=height, weight=weight),
        envelope,
    )

    share_length = max(length // count, 1)
    share_width = max(width // count, 1)
    share_height = max(height // count, 1)
    share_weight = max(weight // count, 1)

    # After splitting, width (not length) absorbs an oversized height
    if share_height > share_width:
        share_width = share_height

    logger.debug(
        f"Multiple parcels: {count} x {share_length}x{share_width}x{share_height} cm, "
        f"{share_weight} kg"
    )

    parcel = ParcelDescriptor(
        length=share_length,
        width=share_width,
        height=share_height,
        weight=share_weight,
        declared_value=value / count,
        count=count,
    )
    return parcel, count
