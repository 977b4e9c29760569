"""
Measure units and cart normalization.

Cart totals arrive in the store's primary measure units. The carrier wants
whole kilograms and whole centimetres, so every value is converted, rounded
up and floored at 1.
"""
import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Iterable, Optional, Tuple

from correios_shipping.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

WEIGHT_KEYWORD = "kg"
DIMENSION_KEYWORD = "millimetres"


@dataclass(frozen=True)
class MeasureWeight:
    """Weight unit. ratio converts a primary-unit value into this unit."""
    system_keyword: str
    name: str
    ratio: Decimal


@dataclass(frozen=True)
class MeasureDimension:
    """Dimension unit. ratio converts a primary-unit value into this unit."""
    system_keyword: str
    name: str
    ratio: Decimal


@dataclass(frozen=True)
class CartPhysicalProfile:
    """Aggregate cart measurements in primary units."""
    length_raw: Decimal
    width_raw: Decimal
    height_raw: Decimal
    weight_raw: Decimal


@dataclass(frozen=True)
class NormalizedDimensions:
    """Whole carrier units (cm / kg), every field >= 1."""
    length: int
    width: int
    height: int
    weight: int

    @property
    def total(self) -> int:
        return self.length + self.width + self.height


class BaseMeasureService(ABC):
    """Resolves measure units by system keyword and converts from primary units."""

    @abstractmethod
    def get_measure_weight_by_keyword(self, keyword: str) -> Optional[MeasureWeight]:
        pass

    @abstractmethod
    def get_measure_dimension_by_keyword(self, keyword: str) -> Optional[MeasureDimension]:
        pass

    def convert_from_primary_weight(self, value: Decimal, measure: MeasureWeight) -> Decimal:
        return Decimal(value) * measure.ratio

    def convert_from_primary_dimension(self, value: Decimal, measure: MeasureDimension) -> Decimal:
        return Decimal(value) * measure.ratio


# Default catalogue: pounds and inches are primary
DEFAULT_WEIGHTS = (
    MeasureWeight("lb", "lb(s)", Decimal("1")),
    MeasureWeight("ounce", "ounce(s)", Decimal("16")),
    MeasureWeight("kg", "kg(s)", Decimal("0.45359237")),
    MeasureWeight("grams", "gram(s)", Decimal("453.59237")),
)

DEFAULT_DIMENSIONS = (
    MeasureDimension("inches", "inch(es)", Decimal("1")),
    MeasureDimension("feet", "feet", Decimal("0.08333333")),
    MeasureDimension("meters", "meter(s)", Decimal("0.0254")),
    MeasureDimension("millimetres", "millimetre(s)", Decimal("25.4")),
)


class InMemoryMeasureService(BaseMeasureService):
    """
    Measure service backed by a fixed catalogue.

    Pass custom weights/dimensions to model a store whose primary units
    differ from the defaults.
    """

    def __init__(
        self,
        weights: Iterable[MeasureWeight] = DEFAULT_WEIGHTS,
        dimensions: Iterable[MeasureDimension] = DEFAULT_DIMENSIONS,
    ):
        self._weights: Dict[str, MeasureWeight] = {w.system_keyword.lower(): w for w in weights}
        self._dimensions: Dict[str, MeasureDimension] = {d.system_keyword.lower(): d for d in dimensions}

    def get_measure_weight_by_keyword(self, keyword: str) -> Optional[MeasureWeight]:
        if not keyword:
            return None
        return self._weights.get(keyword.lower())

    def get_measure_dimension_by_keyword(self, keyword: str) -> Optional[MeasureDimension]:
        if not keyword:
            return None
        return self._dimensions.get(keyword.lower())


def resolve_carrier_units(
    measure_service: BaseMeasureService,
    weight_keyword: str = WEIGHT_KEYWORD,
    dimension_keyword: str = DIMENSION_KEYWORD,
) -> Tuple[MeasureWeight, MeasureDimension]:
    """
    Look up the weight and dimension units the carrier expects.

    Raises:
        ConfigurationError: either unit is unknown to the measure service
    """
    weight_unit = measure_service.get_measure_weight_by_keyword(weight_keyword)
    if weight_unit is None:
        message = f"Could not load \"{weight_keyword}\" measure weight"
        logger.critical(message)
        raise ConfigurationError(message, code="MEASURE_WEIGHT_NOT_FOUND",
                                 details={"keyword": weight_keyword})

    dimension_unit = measure_service.get_measure_dimension_by_keyword(dimension_keyword)
    if dimension_unit is None:
        message = f"Could not load \"{dimension_keyword}\" measure dimension"
        logger.critical(message)
        raise ConfigurationError(message, code="MEASURE_DIMENSION_NOT_FOUND",
                                 details={"keyword": dimension_keyword})

    return weight_unit, dimension_unit


def _to_centimetres(raw: Decimal, unit: MeasureDimension, measure_service: BaseMeasureService) -> int:
    # Round up in millimetres, then truncate to centimetres
    return int(math.ceil(measure_service.convert_from_primary_dimension(raw, unit))) // 10


def normalize(
    profile: CartPhysicalProfile,
    weight_unit: MeasureWeight,
    dimension_unit: MeasureDimension,
    measure_service: BaseMeasureService,
) -> NormalizedDimensions:
    """Convert cart totals into whole carrier units."""
    length = max(_to_centimetres(profile.length_raw, dimension_unit, measure_service), 1)
    width = max(_to_centimetres(profile.width_raw, dimension_unit, measure_service), 1)
    height = max(_to_centimetres(profile.height_raw, dimension_unit, measure_service), 1)
    weight = max(int(math.ceil(measure_service.convert_from_primary_weight(profile.weight_raw, weight_unit))), 1)

    # Carrier rejects height > length; the package is adapted instead
    if height > length:
        length = height

    return NormalizedDimensions(length=length, width=width, height=height, weight=weight)
