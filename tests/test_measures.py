"""
Tests for unit normalization.
"""
import logging
from decimal import Decimal

import pytest

from correios_shipping.core.exceptions import ConfigurationError
from correios_shipping.modules.shipping.measures import (
    CartPhysicalProfile,
    InMemoryMeasureService,
    normalize,
    resolve_carrier_units,
)


def profile(length, width, height, weight) -> CartPhysicalProfile:
    return CartPhysicalProfile(
        length_raw=Decimal(str(length)),
        width_raw=Decimal(str(width)),
        height_raw=Decimal(str(height)),
        weight_raw=Decimal(str(weight)),
    )


class TestResolveCarrierUnits:
    """Test measure unit lookup."""

    def test_resolves_default_keywords(self):
        """kg and millimetres exist in the default catalogue."""
        weight_unit, dimension_unit = resolve_carrier_units(InMemoryMeasureService())

        assert weight_unit.system_keyword == "kg"
        assert dimension_unit.system_keyword == "millimetres"

    def test_missing_weight_unit_is_fatal(self, caplog):
        """Unknown weight keyword raises ConfigurationError and logs critical."""
        service = InMemoryMeasureService(weights=[])

        with caplog.at_level(logging.CRITICAL):
            with pytest.raises(ConfigurationError) as exc_info:
                resolve_carrier_units(service)

        assert exc_info.value.code == "MEASURE_WEIGHT_NOT_FOUND"
        assert exc_info.value.severity == "P0"
        assert any(r.levelno == logging.CRITICAL for r in caplog.records)

    def test_missing_dimension_unit_is_fatal(self):
        """Unknown dimension keyword raises ConfigurationError."""
        service = InMemoryMeasureService(dimensions=[])

        with pytest.raises(ConfigurationError) as exc_info:
            resolve_carrier_units(service)

        assert exc_info.value.code == "MEASURE_DIMENSION_NOT_FOUND"


class TestNormalize:
    """Test conversion to whole carrier units."""

    def _normalize(self, service, p):
        weight_unit, dimension_unit = resolve_carrier_units(service)
        return normalize(p, weight_unit, dimension_unit, service)

    def test_millimetres_to_centimetres(self, metric_measure_service):
        """250 x 100 x 100 mm, 5 kg -> 25 x 10 x 10 cm, 5 kg."""
        dims = self._normalize(metric_measure_service, profile(250, 100, 100, 5))

        assert (dims.length, dims.width, dims.height, dims.weight) == (25, 10, 10, 5)

    def test_centimetres_are_truncated_not_rounded(self, metric_measure_service):
        """259 mm becomes 25 cm; the ceiling applies to millimetres only."""
        dims = self._normalize(metric_measure_service, profile(259, 101, 100.2, 1))

        assert dims.length == 25
        assert dims.width == 10
        assert dims.height == 10

    def test_weight_rounds_up(self, metric_measure_service):
        """Any fraction of a kilogram counts as a whole kilogram."""
        dims = self._normalize(metric_measure_service, profile(250, 100, 100, "2.1"))

        assert dims.weight == 3

    def test_floors_every_field_at_one(self, metric_measure_service):
        """Tiny or empty carts still produce fields >= 1."""
        dims = self._normalize(metric_measure_service, profile(0, 5, 9, 0))

        assert dims.length >= 1
        assert dims.width >= 1
        assert dims.height >= 1
        assert dims.weight >= 1

    def test_height_greater_than_length_raises_length(self, metric_measure_service):
        """Length is raised to height when height exceeds it."""
        dims = self._normalize(metric_measure_service, profile(100, 200, 300, 1))

        assert dims.height == 30
        assert dims.length == 30
        assert dims.width == 20

    def test_converts_from_imperial_primary_units(self):
        """10 in = 254 mm -> 25 cm; 11 lb ~ 4.99 kg -> 5 kg."""
        dims = self._normalize(InMemoryMeasureService(), profile(10, 10, 4, 11))

        assert dims.length == 25
        assert dims.width == 25
        assert dims.height == 10
        assert dims.weight == 5

    @pytest.mark.parametrize("raw", [
        (1, 1, 1, 0),
        (5000, 10, 20000, "0.3"),
        (123, 456, 789, 12),
    ])
    def test_invariants_hold(self, metric_measure_service, raw):
        """All fields >= 1 and height <= length for assorted inputs."""
        dims = self._normalize(metric_measure_service, profile(*raw))

        assert min(dims.length, dims.width, dims.height, dims.weight) >= 1
        assert dims.height <= dims.length
