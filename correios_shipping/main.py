"""
Correios Shipping
FastAPI application entry point
"""
import logging

from fastapi import FastAPI

from correios_shipping import __version__
from correios_shipping.api.routes import shipping
from correios_shipping.core.config import settings

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(title=settings.APP_NAME, version=__version__)
    app.include_router(shipping.router)

    @app.get("/health")
    async def health():
        return {"status": "healthy", "version": __version__, "environment": settings.ENVIRONMENT}

    logger.info(f"{settings.APP_NAME} v{__version__} starting ({settings.ENVIRONMENT})")
    return app


app = create_app()
