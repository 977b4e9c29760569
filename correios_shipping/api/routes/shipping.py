"""
Shipping API Routes

Provides endpoints for:
- Shipping options for a cart (real-time Correios quotes)
- Fixed rate lookup (always empty for Correios)
- Admin configuration route descriptor
"""
import logging
from typing import AsyncGenerator

from fastapi import APIRouter, Depends, HTTPException, status

from correios_shipping.core.config import get_settings
from correios_shipping.core.exceptions import ConfigurationError
from correios_shipping.schemas.shipping import (
    ConfigurationRouteResponse,
    FixedRateResponse,
    ShippingOptionSchema,
    ShippingOptionsRequestSchema,
    ShippingOptionsResponseSchema,
)
from correios_shipping.services.correios_client import CorreiosClient
from correios_shipping.services.shipping_service import CorreiosRateService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/shipping/correios", tags=["shipping"])


async def get_rate_service() -> AsyncGenerator[CorreiosRateService, None]:
    """Rate service with a Correios client that is closed after the request."""
    settings = get_settings()
    client = CorreiosClient(settings)
    try:
        yield CorreiosRateService(client, settings=settings)
    finally:
        await client.close()


@router.post("/options", response_model=ShippingOptionsResponseSchema)
async def get_shipping_options(
    request_data: ShippingOptionsRequestSchema,
    rate_service: CorreiosRateService = Depends(get_rate_service),
):
    """
    Get shipping options for a cart.

    Validation problems and "no services available" come back in `errors`
    with HTTP 200; a misconfigured deployment is a 500.
    """
    try:
        result = await rate_service.get_shipping_options(request_data.to_domain())
    except ConfigurationError as e:
        logger.error(f"Shipping options failed, configuration error: {e.to_dict()}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Shipping is not configured",
        )

    return ShippingOptionsResponseSchema(
        options=[ShippingOptionSchema.model_validate(o, from_attributes=True) for o in result.shipping_options],
        errors=result.errors,
    )


@router.post("/fixed-rate", response_model=FixedRateResponse)
async def get_fixed_rate(
    request_data: ShippingOptionsRequestSchema,
    rate_service: CorreiosRateService = Depends(get_rate_service),
):
    """Correios has real-time prices only."""
    return FixedRateResponse(rate=rate_service.get_fixed_rate(request_data.to_domain()))


@router.get("/configuration-route", response_model=ConfigurationRouteResponse)
async def get_configuration_route(
    rate_service: CorreiosRateService = Depends(get_rate_service),
):
    route = rate_service.get_configuration_route()
    return ConfigurationRouteResponse(
        action_name=route.action_name,
        controller_name=route.controller_name,
        route_values=dict(route.route_values),
    )
