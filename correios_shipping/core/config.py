"""
Application configuration

Carrier credentials and plugin options are read from the environment
(or a local .env file). Defaults match a fresh plugin install: service URL
set, credentials empty, optional carrier features off.
"""
import json
import logging
from decimal import Decimal
from functools import lru_cache
from typing import List, Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_CORREIOS_URL = "http://ws.correios.com.br/calculador/CalcPrecoPrazo.asmx"

# SEDEX, PAC
DEFAULT_SERVICES_OFFERED = ["40010", "41106"]


class Settings(BaseSettings):
    # App
    APP_NAME: str = "Correios Shipping"
    ENVIRONMENT: str = "production"
    LOG_LEVEL: str = "INFO"

    # Correios web service
    CORREIOS_URL: str = DEFAULT_CORREIOS_URL
    CORREIOS_COMPANY_CODE: str = ""
    CORREIOS_PASSWORD: str = ""
    CORREIOS_TIMEOUT_SECONDS: float = 30.0

    # Accepts JSON array or comma-separated string
    CORREIOS_SERVICES_OFFERED: Union[str, List[str]] = DEFAULT_SERVICES_OFFERED

    @field_validator("CORREIOS_SERVICES_OFFERED", mode="before")
    @classmethod
    def parse_services_offered(cls, v):
        if isinstance(v, list):
            return [str(code).strip() for code in v if str(code).strip()]
        if isinstance(v, str):
            if not v.strip():
                return list(DEFAULT_SERVICES_OFFERED)
            if v.startswith("["):
                try:
                    return [str(code).strip() for code in json.loads(v)]
                except json.JSONDecodeError:
                    pass
            return [code.strip() for code in v.split(",") if code.strip()]
        return v

    # Optional carrier features
    CORREIOS_INCLUDE_RECEIPT_NOTICE: bool = False  # aviso de recebimento
    CORREIOS_INCLUDE_OWN_HANDS: bool = False  # mao propria
    CORREIOS_INCLUDE_DECLARED_VALUE: bool = False

    # Option presentation
    CORREIOS_ADDITIONAL_LEAD_DAYS: int = Field(0, ge=0)
    CORREIOS_ADDITIONAL_SHIPPING_FEE: Decimal = Field(Decimal("0"), ge=0)

    # Origin address (CEP, 8 digits or 9 with hyphen)
    SHIPPING_ORIGIN_ZIP: str = ""

    # Measure system keywords the carrier expects
    MEASURE_WEIGHT_KEYWORD: str = "kg"
    MEASURE_DIMENSION_KEYWORD: str = "millimetres"

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )


def default_install_settings() -> dict:
    """Settings payload persisted when the plugin is installed."""
    return {
        "CORREIOS_URL": DEFAULT_CORREIOS_URL,
        "CORREIOS_COMPANY_CODE": "",
        "CORREIOS_PASSWORD": "",
    }


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
