"""
Shipping Module v1.0.0

Cart normalization, parcel packing, quote rescaling and option ranking for
the Correios carrier. Pure transformations; no I/O.
"""
from correios_shipping.modules.shipping.envelope import CarrierEnvelope, CORREIOS_ENVELOPE
from correios_shipping.modules.shipping.measures import normalize, resolve_carrier_units
from correios_shipping.modules.shipping.packer import ParcelDescriptor, pack
from correios_shipping.modules.shipping.quotes import ServiceQuote, rescale
from correios_shipping.modules.shipping.ranker import ShippingOption, ShippingOptionResponse, rank
from correios_shipping.modules.shipping.requestor import BaseQuoteRequestor, QuoteRequest

__all__ = [
    "CarrierEnvelope",
    "CORREIOS_ENVELOPE",
    "normalize",
    "resolve_carrier_units",
    "ParcelDescriptor",
    "pack",
    "ServiceQuote",
    "rescale",
    "ShippingOption",
    "ShippingOptionResponse",
    "rank",
    "BaseQuoteRequestor",
    "QuoteRequest",
]
