"""
Quote requestor interface.

The rate computation hands one QuoteRequest to a requestor and awaits a
single answer. How the request travels (HTTP, SOAP, a test double) is up to
the implementation.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional

from correios_shipping.modules.shipping.packer import ParcelDescriptor
from correios_shipping.modules.shipping.quotes import ServiceQuote


@dataclass
class QuoteRequest:
    """Shipment-level parameters plus the parcel(s) to quote."""
    origin_postal_code: str
    destination_postal_code: str
    service_codes: List[str]
    company_code: str = ""
    password: str = ""
    include_receipt_notice: bool = False
    include_own_hands: bool = False
    parcels: List[ParcelDescriptor] = field(default_factory=list)


class BaseQuoteRequestor(ABC):
    """Source of carrier quotes."""

    @abstractmethod
    async def calculate(self, request: QuoteRequest) -> Optional[List[ServiceQuote]]:
        """
        Quote every requested service for the given parcels.

        Returns:
            One ServiceQuote per service (errors included), or None when no
            answer could be obtained at all
        """
        pass
