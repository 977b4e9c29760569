"""
Correios price/lead-time web service client.

Calls the CalcPrecoPrazo HTTP GET endpoint and turns the XML answer into
ServiceQuote objects. Failures are logged and reported as "no result"
(None) so the rate computation can answer "no services available".
"""
import logging
import xml.etree.ElementTree as ET
from decimal import Decimal
from typing import Dict, List, Optional

import httpx

from correios_shipping.core.config import Settings, settings as default_settings
from correios_shipping.core.exceptions import CorreiosAPIError
from correios_shipping.modules.shipping.packer import ParcelDescriptor
from correios_shipping.modules.shipping.quotes import ServiceQuote
from correios_shipping.modules.shipping.requestor import BaseQuoteRequestor, QuoteRequest

logger = logging.getLogger(__name__)

CALCULATE_PATH = "/CalcPrecoPrazo"

# nCdFormato
FORMAT_BOX = 1
FORMAT_ROLL = 2


def _flag(value: bool) -> str:
    return "S" if value else "N"


def _local_name(tag: str) -> str:
    # Drops the "{namespace}" prefix the asmx endpoint adds
    return tag.rsplit("}", 1)[-1]


def _to_int(text: Optional[str], field_name: str = "") -> int:
    try:
        return int((text or "0").strip())
    except ValueError:
        logger.warning(f"Unreadable {field_name or 'integer'} in Correios response: {text!r}; using 0")
        return 0


def build_query_params(request: QuoteRequest, parcel: ParcelDescriptor) -> Dict[str, str]:
    """Query string for one parcel."""
    return {
        "nCdEmpresa": request.company_code,
        "sDsSenha": request.password,
        "nCdServico": ",".join(request.service_codes),
        "sCepOrigem": request.origin_postal_code.replace("-", ""),
        "sCepDestino": request.destination_postal_code.replace("-", ""),
        "nVlPeso": str(parcel.weight),
        "nCdFormato": str(FORMAT_BOX if parcel.is_box_shaped else FORMAT_ROLL),
        "nVlComprimento": str(parcel.length),
        "nVlAltura": str(parcel.height),
        "nVlLargura": str(parcel.width),
        "nVlDiametro": str(parcel.diameter),
        "sCdMaoPropria": _flag(request.include_own_hands),
        "nVlValorDeclarado": str(Decimal(parcel.declared_value).quantize(Decimal("0.01"))),
        "sCdAvisoRecebimento": _flag(request.include_receipt_notice),
        "StrRetorno": "xml",
    }


def parse_services(payload: str) -> List[ServiceQuote]:
    """
    Parse a <Servicos> document into quotes.

    Raises:
        CorreiosAPIError: payload is not XML
    """
    try:
        root = ET.fromstring(payload)
    except ET.ParseError as e:
        raise CorreiosAPIError(f"Malformed Correios response: {e}", code="INVALID_RESPONSE")

    quotes = []
    for element in root.iter():
        if _local_name(element.tag) != "cServico":
            continue

        fields = {_local_name(child.tag): (child.text or "").strip() for child in element}
        quotes.append(ServiceQuote(
            service_code=fields.get("Codigo", ""),
            price=fields.get("Valor") or "0,00",
            price_own_hands=fields.get("ValorMaoPropria") or "0,00",
            price_receipt_notice=fields.get("ValorAvisoRecebimento") or "0,00",
            price_declared_value=fields.get("ValorValorDeclarado") or "0,00",
            delivery_days=_to_int(fields.get("PrazoEntrega"), "PrazoEntrega"),
            home_delivery=fields.get("EntregaDomiciliar", ""),
            saturday_delivery=fields.get("EntregaSabado", ""),
            error_code=fields.get("Erro") or "0",
            error_message=fields.get("MsgErro", ""),
        ))

    return quotes


class CorreiosClient(BaseQuoteRequestor):
    """
    HTTP client for the Correios CalcPrecoPrazo service.

    Usage:
        async with CorreiosClient() as client:
            quotes = await client.calculate(request)
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.settings = settings or default_settings
        self._http_client = http_client

    @property
    def base_url(self) -> str:
        return self.settings.CORREIOS_URL.rstrip("/")

    async def _get_http_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=self.settings.CORREIOS_TIMEOUT_SECONDS)
        return self._http_client

    async def close(self):
        """Close HTTP client."""
        if self._http_client:
            await self._http_client.aclose()
            self._http_client = None

    async def __aenter__(self) -> "CorreiosClient":
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    async def _make_request(self, params: Dict[str, str]) -> str:
        client = await self._get_http_client()
        url = f"{self.base_url}{CALCULATE_PATH}"

        try:
            response = await client.get(url, params=params)
        except httpx.RequestError as e:
            logger.error(f"Correios request failed: {e}")
            raise CorreiosAPIError(f"Network error: {e}", code="NETWORK_ERROR")

        logger.debug(f"Correios GET {CALCULATE_PATH} -> {response.status_code}")

        if response.status_code >= 400:
            logger.error(f"Correios API error: HTTP {response.status_code}")
            raise CorreiosAPIError(
                f"Correios API error: HTTP {response.status_code}",
                status_code=response.status_code,
                details={"raw": response.text[:500]},
            )

        return response.text

    async def calculate(self, request: QuoteRequest) -> Optional[List[ServiceQuote]]:
        """Quote the first parcel of the request for every requested service."""
        if not request.parcels:
            logger.error("Correios quote requested without parcels")
            return None

        if len(request.parcels) > 1:
            logger.warning(f"Only the first of {len(request.parcels)} parcels is quoted")

        params = build_query_params(request, request.parcels[0])

        try:
            payload = await self._make_request(params)
            quotes = parse_services(payload)
        except CorreiosAPIError as e:
            logger.error(f"Correios calculation error: {e.message}")
            return None

        if not quotes:
            logger.error("Correios response contained no services")
            return None

        return quotes
