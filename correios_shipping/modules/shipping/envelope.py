"""
Carrier size and weight limits.

Values are whole centimetres and kilograms. The packer receives an
envelope explicitly, so tests can swap in alternate limits.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class CarrierEnvelope:
    """Min/max limits a parcel must satisfy to be quoted as one parcel."""
    # Box-shaped parcels
    max_weight: int = 30
    max_total_dimension: int = 200
    max_size: int = 105
    min_length: int = 16
    min_width: int = 11
    min_height: int = 2
    min_total: int = 29

    # Roll/cylinder parcels
    max_roll_total: int = 200
    max_roll_length: int = 105
    max_roll_diameter: int = 91
    min_roll_length: int = 18
    min_roll_diameter: int = 5
    min_roll_total: int = 28

    def __post_init__(self):
        if self.max_weight < 1 or self.max_total_dimension < 1:
            raise ValueError("max_weight and max_total_dimension must be positive")

    @staticmethod
    def total_size(length: int, height: int, width: int) -> int:
        return length + width + height

    def is_too_heavy(self, weight: int) -> bool:
        return weight > self.max_weight

    def is_too_large(self, length: int, height: int, width: int) -> bool:
        return (
            self.total_size(length, height, width) > self.max_total_dimension
            or length > self.max_size
            or height > self.max_size
            or width > self.max_size
        )

    def is_too_small(self, length: int, height: int, width: int) -> bool:
        return (
            self.total_size(length, height, width) < self.min_total
            or length < self.min_length
            or height < self.min_height
            or width < self.min_width
        )

    @staticmethod
    def roll_total_size(length: int, diameter: int) -> int:
        return length + 2 * diameter

    def is_roll_too_heavy(self, weight: int) -> bool:
        return weight > self.max_weight

    def is_roll_too_large(self, length: int, diameter: int) -> bool:
        return (
            self.roll_total_size(length, diameter) > self.max_roll_total
            or length > self.max_roll_length
            or diameter > self.max_roll_diameter
        )

    def is_roll_too_small(self, length: int, diameter: int) -> bool:
        return (
            self.roll_total_size(length, diameter) < self.min_roll_total
            or length < self.min_roll_length
            or diameter < self.min_roll_diameter
        )


CORREIOS_ENVELOPE = CarrierEnvelope()
