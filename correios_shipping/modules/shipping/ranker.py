"""
Shipping option ranking.

Successful quotes become customer-facing options, cheapest first, one per
public service name. Erroring quotes are only reported to the operator log.
"""
import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Sequence

from correios_shipping.modules.shipping.quotes import ServiceQuote, read_price
from correios_shipping.modules.shipping.services import get_service_name, get_service_public_name

logger = logging.getLogger(__name__)

NO_SERVICES_AVAILABLE = "Não há serviços disponíveis no momento"


@dataclass
class ShippingOption:
    """Priced option shown at checkout."""
    name: str
    description: str
    rate: Decimal


@dataclass
class ShippingOptionResponse:
    """Options for a cart, or the errors explaining why there are none."""
    shipping_options: List[ShippingOption] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    def add_error(self, error: str) -> None:
        self.errors.append(error)

    @property
    def success(self) -> bool:
        return not self.errors


def describe_lead_time(days: int) -> str:
    return f"Prazo médio de entrega {days} dias úteis"


def rank(
    quotes: Sequence[ServiceQuote],
    additional_charge: Decimal = Decimal("0"),
    surcharge: Decimal = Decimal("0"),
    lead_time_adjustment_days: int = 0,
) -> List[ShippingOption]:
    """
    Turn carrier quotes into ranked, deduplicated shipping options.

    Args:
        quotes: Quotes for the whole shipment (already rescaled)
        additional_charge: Cart-level additional shipping charge
        surcharge: Flat fee configured for the carrier
        lead_time_adjustment_days: Handling days added to the carrier estimate

    Returns:
        Options sorted by rate, cheapest per public name
    """
    for quote in quotes:
        if not quote.is_success:
            logger.error(
                f"Error calculating shipping: ({get_service_name(quote.service_code)})"
                f"({quote.error_code}) {quote.error_message}"
            )

    priced = []
    for quote in quotes:
        if not quote.is_success:
            continue
        price = read_price(quote)
        if price is not None:
            priced.append((price, quote))

    priced.sort(key=lambda pair: pair[0])

    options: List[ShippingOption] = []
    seen_names = set()

    for price, quote in priced:
        name = get_service_public_name(quote.service_code)
        if name in seen_names:
            logger.debug(f"Skipping duplicate service {quote.service_code} ({name})")
            continue

        options.append(ShippingOption(
            name=name,
            description=describe_lead_time(quote.delivery_days + lead_time_adjustment_days),
            rate=price + Decimal(additional_charge) + Decimal(surcharge),
        ))
        seen_names.add(name)

    return options
