from __future__ import annotations

from enum import Enum
from typing import Dict

from containership_app.errors import ContainerValidationError


class ProductKind(Enum):
    BANANAS = "Bananas"
    CHOCOLATE = "Chocolate"
    FISH = "Fish"
    MEAT = "Meat"
    ICE_CREAM = "Ice cream"
    FROZEN_PIZZA = "Frozen pizza"
    CHEESE = "Cheese"
    SAUSAGES = "Sausages"
    BUTTER = "Butter"
    EGGS = "Eggs"


# Minimum safe storage temperature (°C) per refrigerated product
REQUIRED_TEMPERATURE_C: Dict[ProductKind, float] = {
    ProductKind.BANANAS: 13.3,
    ProductKind.CHOCOLATE: 18.0,
    ProductKind.FISH: 2.0,
    ProductKind.MEAT: 4.0,
    ProductKind.ICE_CREAM: -18.0,
    ProductKind.FROZEN_PIZZA: -18.0,
    ProductKind.CHEESE: 7.2,
    ProductKind.SAUSAGES: 5.0,
    ProductKind.BUTTER: 10.0,
    ProductKind.EGGS: 19.0,
}


def parse_product_kind(value: ProductKind | str) -> ProductKind:
    """
    Accept a ProductKind, its display value ("Ice cream") or its name
    ("ICE_CREAM", case-insensitive).
    """
    if isinstance(value, ProductKind):
        return value
    text = str(value).strip()
    for kind in ProductKind:
        if text.lower() == kind.value.lower() or text.upper().replace(" ", "_") == kind.name:
            return kind
    raise ContainerValidationError(f"Unknown product kind '{value}'.")


def required_temperature(product: ProductKind | str) -> float:
    """Lowest temperature (°C) at which the product may be kept."""
    return REQUIRED_TEMPERATURE_C[parse_product_kind(product)]
