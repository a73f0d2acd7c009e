"""
Domain models for the container ship app.

These are pure Python/domain classes with no I/O.
"""

from containership_app.models.product import (
    ProductKind,
    REQUIRED_TEMPERATURE_C,
    parse_product_kind,
    required_temperature,
)
from containership_app.models.container import (
    CARGO_RULES,
    CargoRule,
    Container,
    ContainerDimensions,
    ContainerKind,
    GasDetails,
    HazardNotifier,
    LiquidDetails,
    RefrigeratedDetails,
)
from containership_app.models.ship import ContainerShip, sum_weight_t

__all__ = [
    "ProductKind",
    "REQUIRED_TEMPERATURE_C",
    "parse_product_kind",
    "required_temperature",
    "CARGO_RULES",
    "CargoRule",
    "Container",
    "ContainerDimensions",
    "ContainerKind",
    "GasDetails",
    "HazardNotifier",
    "LiquidDetails",
    "RefrigeratedDetails",
    "ContainerShip",
    "sum_weight_t",
]
