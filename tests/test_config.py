"""
Tests for application settings.
"""
from decimal import Decimal

import pytest
from pydantic import ValidationError

from correios_shipping.core.config import (
    DEFAULT_CORREIOS_URL,
    DEFAULT_SERVICES_OFFERED,
    Settings,
    default_install_settings,
)


class TestSettings:
    """Test settings parsing and defaults."""

    def test_defaults(self, monkeypatch):
        """Fresh settings match a new plugin install."""
        monkeypatch.delenv("SHIPPING_ORIGIN_ZIP", raising=False)

        settings = Settings(_env_file=None)

        assert settings.CORREIOS_URL == DEFAULT_CORREIOS_URL
        assert settings.CORREIOS_COMPANY_CODE == ""
        assert settings.CORREIOS_SERVICES_OFFERED == DEFAULT_SERVICES_OFFERED
        assert settings.CORREIOS_INCLUDE_DECLARED_VALUE is False
        assert settings.CORREIOS_ADDITIONAL_SHIPPING_FEE == Decimal("0")
        assert settings.MEASURE_WEIGHT_KEYWORD == "kg"

    def test_services_from_comma_separated_env(self, monkeypatch):
        """Comma-separated service codes are split and trimmed."""
        monkeypatch.setenv("CORREIOS_SERVICES_OFFERED", "40010, 41106 ,81019")

        settings = Settings(_env_file=None)

        assert settings.CORREIOS_SERVICES_OFFERED == ["40010", "41106", "81019"]

    def test_services_from_json_env(self, monkeypatch):
        """JSON arrays are accepted too."""
        monkeypatch.setenv("CORREIOS_SERVICES_OFFERED", '["40010", "04510"]')

        settings = Settings(_env_file=None)

        assert settings.CORREIOS_SERVICES_OFFERED == ["40010", "04510"]

    def test_blank_services_fall_back_to_defaults(self, monkeypatch):
        """An empty value means the default services."""
        monkeypatch.setenv("CORREIOS_SERVICES_OFFERED", "")

        settings = Settings(_env_file=None)

        assert settings.CORREIOS_SERVICES_OFFERED == DEFAULT_SERVICES_OFFERED

    def test_negative_fee_rejected(self):
        """Surcharge cannot be negative."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, CORREIOS_ADDITIONAL_SHIPPING_FEE=Decimal("-1"))

    def test_install_payload(self):
        """Install payload carries the service URL and blank credentials."""
        assert default_install_settings() == {
            "CORREIOS_URL": DEFAULT_CORREIOS_URL,
            "CORREIOS_COMPANY_CODE": "",
            "CORREIOS_PASSWORD": "",
        }
