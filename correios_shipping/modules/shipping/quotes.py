"""
Carrier service quotes and multi-parcel rescaling.

Correios serializes money in pt-BR format ("1.234,56"). Values are parsed
into Decimal at this boundary and written back in the same format.
"""
import logging
from dataclasses import dataclass, replace
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import List, Optional, Sequence

from correios_shipping.modules.shipping.services import get_service_name

logger = logging.getLogger(__name__)

SUCCESS_CODE = "0"

CENTS = Decimal("0.01")


def parse_carrier_decimal(text: Optional[str]) -> Decimal:
    """
    Parse a pt-BR formatted number.

    "1.234,56" -> Decimal("1234.56"); blank -> Decimal("0")

    Raises:
        ValueError: not a finite number ("-", "abc", "NaN", "Infinity")
    """
    if text is None:
        return Decimal("0")
    cleaned = str(text).strip().replace("R$", "").strip()
    if not cleaned:
        return Decimal("0")
    cleaned = cleaned.replace(".", "").replace(",", ".")
    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        raise ValueError(f"Invalid carrier decimal: {text!r}")
    if not value.is_finite():
        raise ValueError(f"Invalid carrier decimal: {text!r}")
    return value


def format_carrier_decimal(value: Decimal) -> str:
    """Format a Decimal as pt-BR with two places, e.g. Decimal("1234.5") -> "1.234,50"."""
    quantized = Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)
    sign = "-" if quantized < 0 else ""
    integer_part, _, fraction = f"{abs(quantized):f}".partition(".")
    groups = []
    while len(integer_part) > 3:
        groups.insert(0, integer_part[-3:])
        integer_part = integer_part[:-3]
    groups.insert(0, integer_part)
    return f"{sign}{'.'.join(groups)},{fraction or '00'}"


@dataclass(frozen=True)
class ServiceQuote:
    """One carrier service result. Monetary fields stay in carrier format."""
    service_code: str
    price: str = "0,00"
    price_own_hands: str = "0,00"
    price_receipt_notice: str = "0,00"
    price_declared_value: str = "0,00"
    delivery_days: int = 0
    home_delivery: str = ""
    saturday_delivery: str = ""
    error_code: str = SUCCESS_CODE
    error_message: str = ""

    @property
    def is_success(self) -> bool:
        return self.error_code.strip() == SUCCESS_CODE

    @property
    def price_value(self) -> Decimal:
        return parse_carrier_decimal(self.price)


def read_price(quote: ServiceQuote) -> Optional[Decimal]:
    """
    Price of a successful quote, or None when the carrier sent an unreadable one.

    Unreadable prices are logged like any other per-service error.
    """
    try:
        return quote.price_value
    except ValueError as e:
        logger.error(
            f"Error calculating shipping: ({get_service_name(quote.service_code)})"
            f"(INVALID_PRICE) {e}"
        )
        return None


def _multiply(text: str, factor: int) -> str:
    return format_carrier_decimal(parse_carrier_decimal(text) * factor)


def rescale(quotes: Sequence[ServiceQuote], count: int) -> List[ServiceQuote]:
    """
    Scale successful quotes from one representative parcel to `count` parcels.

    Erroring quotes are returned unchanged; their money fields mean nothing.
    Successful quotes with an unreadable money field are logged and dropped.
    """
    if count < 1:
        raise ValueError(f"Parcel count must be >= 1, got {count}")

    if count == 1:
        return list(quotes)

    rescaled = []
    for quote in quotes:
        if not quote.is_success:
            rescaled.append(quote)
            continue

        if read_price(quote) is None:
            continue

        try:
            rescaled.append(replace(
                quote,
                price=_multiply(quote.price, count),
                price_own_hands=_multiply(quote.price_own_hands, count),
                price_receipt_notice=_multiply(quote.price_receipt_notice, count),
                price_declared_value=_multiply(quote.price_declared_value, count),
            ))
        except ValueError as e:
            logger.error(
                f"Error calculating shipping: ({get_service_name(quote.service_code)})"
                f"(INVALID_PRICE) {e}"
            )

    logger.debug(f"Rescaled {len(rescaled)} quotes by {count} parcels")
    return rescaled
