"""
Correios Rate Computation Service v1.0.0

Real-time shipping rate computation for a cart:
- Request validation (items, address, destination CEP)
- Unit normalization and parcel packing
- One quote call per computation
- Multi-parcel rescaling
- Ranking into checkout shipping options

Configuration problems (unknown measure units, bad origin CEP) are fatal:
they are logged at critical level and raised as ConfigurationError.
Everything else is reported inline in the response errors.
"""
import enum
import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, Optional

from correios_shipping.core.config import Settings, default_install_settings, settings as default_settings
from correios_shipping.core.exceptions import (
    ConfigurationError,
    ServiceUnavailableError,
    ShippingValidationError,
)
from correios_shipping.modules.shipping.cart import (
    BaseTotalsCalculator,
    CartTotalsCalculator,
    ShippingOptionRequest,
)
from correios_shipping.modules.shipping.envelope import CarrierEnvelope, CORREIOS_ENVELOPE
from correios_shipping.modules.shipping.measures import (
    BaseMeasureService,
    InMemoryMeasureService,
    normalize,
    resolve_carrier_units,
)
from correios_shipping.modules.shipping.packer import pack
from correios_shipping.modules.shipping.quotes import ServiceQuote, rescale
from correios_shipping.modules.shipping.ranker import (
    NO_SERVICES_AVAILABLE,
    ShippingOptionResponse,
    rank,
)
from correios_shipping.modules.shipping.requestor import BaseQuoteRequestor, QuoteRequest

logger = logging.getLogger(__name__)

NO_ITEMS = "Sem items para enviar"
NO_SHIPPING_ADDRESS = "Endereço de envio em branco"
NO_DESTINATION_POSTAL_CODE = "CEP de envio em branco"

ORIGIN_POSTAL_CODE_MIN_LENGTH = 8
ORIGIN_POSTAL_CODE_MAX_LENGTH = 9


class RateComputationMethodType(str, enum.Enum):
    OFFLINE = "offline"
    REALTIME = "realtime"


@dataclass(frozen=True)
class ConfigurationRoute:
    """Where the admin UI finds the plugin's configuration screen."""
    action_name: str
    controller_name: str
    route_values: Dict[str, Any] = field(default_factory=dict)


CONFIGURATION_ROUTE = ConfigurationRoute(
    action_name="Configure",
    controller_name="ShippingCorreios",
    route_values={"namespaces": "correios_shipping.api.routes", "area": None},
)


def validate_request(request: ShippingOptionRequest) -> Optional[ShippingValidationError]:
    """Return the first problem with the request, or None."""
    if not request.items:
        return ShippingValidationError(NO_ITEMS, code="NO_ITEMS")
    if request.shipping_address is None:
        return ShippingValidationError(NO_SHIPPING_ADDRESS, code="NO_SHIPPING_ADDRESS")
    postal_code = request.shipping_address.postal_code
    if postal_code is None or not postal_code.strip():
        return ShippingValidationError(NO_DESTINATION_POSTAL_CODE, code="NO_DESTINATION_POSTAL_CODE")
    return None


class CorreiosRateService:
    """
    Shipping rate computation method for Correios.

    Collaborators are injected; the service keeps no state between calls.
    """

    def __init__(
        self,
        requestor: BaseQuoteRequestor,
        settings: Optional[Settings] = None,
        measure_service: Optional[BaseMeasureService] = None,
        totals_calculator: Optional[BaseTotalsCalculator] = None,
        envelope: CarrierEnvelope = CORREIOS_ENVELOPE,
    ):
        self.requestor = requestor
        self.settings = settings or default_settings
        self.measure_service = measure_service or InMemoryMeasureService()
        self.totals_calculator = totals_calculator or CartTotalsCalculator()
        self.envelope = envelope

    @property
    def rate_computation_method_type(self) -> RateComputationMethodType:
        return RateComputationMethodType.REALTIME

    def _get_origin_postal_code(self) -> str:
        """
        Origin CEP from settings.

        Raises:
            ConfigurationError: blank, or not 8-9 characters long
        """
        postal_code = (self.settings.SHIPPING_ORIGIN_ZIP or "").strip()
        if ORIGIN_POSTAL_CODE_MIN_LENGTH <= len(postal_code) <= ORIGIN_POSTAL_CODE_MAX_LENGTH:
            return postal_code

        message = (
            "Origin CEP is blank or invalid; set SHIPPING_ORIGIN_ZIP "
            "(format: 00000000)"
        )
        logger.critical(message)
        raise ConfigurationError(message, code="INVALID_ORIGIN_POSTAL_CODE",
                                 details={"postal_code": postal_code})

    async def _process_shipping(self, request: ShippingOptionRequest) -> Optional[List[ServiceQuote]]:
        weight_unit, dimension_unit = resolve_carrier_units(
            self.measure_service,
            self.settings.MEASURE_WEIGHT_KEYWORD,
            self.settings.MEASURE_DIMENSION_KEYWORD,
        )
        origin_postal_code = self._get_origin_postal_code()

        subtotal = self.totals_calculator.get_subtotal_with_discounts(request.items)

        dims = normalize(request.physical_profile(), weight_unit, dimension_unit, self.measure_service)
        parcel, count = pack(
            dims,
            subtotal,
            self.envelope,
            include_declared_value=self.settings.CORREIOS_INCLUDE_DECLARED_VALUE,
        )

        quote_request = QuoteRequest(
            origin_postal_code=origin_postal_code,
            destination_postal_code=request.shipping_address.postal_code.strip(),
            service_codes=list(self.settings.CORREIOS_SERVICES_OFFERED),
            company_code=self.settings.CORREIOS_COMPANY_CODE,
            password=self.settings.CORREIOS_PASSWORD,
            include_receipt_notice=self.settings.CORREIOS_INCLUDE_RECEIPT_NOTICE,
            include_own_hands=self.settings.CORREIOS_INCLUDE_OWN_HANDS,
            parcels=[parcel],
        )

        quotes = await self.requestor.calculate(quote_request)
        if quotes is None:
            return None

        return rescale(quotes, count)

    async def get_shipping_options(self, request: ShippingOptionRequest) -> ShippingOptionResponse:
        """
        Get available shipping options for a cart.

        Raises:
            ValueError: request is None
            ConfigurationError: measure units or origin CEP misconfigured
        """
        if request is None:
            raise ValueError("request is required")

        response = ShippingOptionResponse()

        problem = validate_request(request)
        if problem:
            logger.info(f"Shipping options request rejected: {problem.code}")
            response.add_error(problem.message)
            return response

        quotes = await self._process_shipping(request)

        options = []
        if quotes is not None:
            options = rank(
                quotes,
                additional_charge=self.totals_calculator.get_additional_shipping_charge(request.items),
                surcharge=self.settings.CORREIOS_ADDITIONAL_SHIPPING_FEE,
                lead_time_adjustment_days=self.settings.CORREIOS_ADDITIONAL_LEAD_DAYS,
            )

        if not options:
            unavailable = ServiceUnavailableError(NO_SERVICES_AVAILABLE)
            logger.warning(f"No Correios services available ({unavailable.code})")
            response.add_error(unavailable.message)
            return response

        response.shipping_options.extend(options)
        return response

    def get_fixed_rate(self, request: ShippingOptionRequest) -> Optional[Decimal]:
        """Correios prices are real-time only; there is never a fixed rate."""
        return None

    def get_configuration_route(self) -> ConfigurationRoute:
        return CONFIGURATION_ROUTE

    def install(self, settings_store) -> Dict[str, str]:
        """Persist default settings through any store exposing save_setting()."""
        payload = default_install_settings()
        settings_store.save_setting(payload)
        logger.info("Correios shipping plugin installed with default settings")
        return payload
