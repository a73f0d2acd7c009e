"""
Shipping container model.

A Container is one record type tagged with its ContainerKind. Variant data
lives in a small frozen details object, and the per-kind cargo behaviour
(effective limit, residue after emptying, hazard message) is looked up in
CARGO_RULES instead of being spread over subclasses.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Optional, Union

from containership_app.config.limits import (
    GAS_RESIDUAL_FRACTION,
    KG_PER_TONNE,
    LIQUID_HAZARDOUS_FILL_FRACTION,
    LIQUID_SAFE_FILL_FRACTION,
    PREFIX_BASIC,
    PREFIX_GAS,
    PREFIX_LIQUID,
    PREFIX_REFRIGERATED,
)
from containership_app.errors import (
    ContainerValidationError,
    InvalidProductTemperatureError,
    OverfillError,
)
from containership_app.models.product import ProductKind, parse_product_kind, required_temperature

_LOG = logging.getLogger(__name__)

# Receives a human-readable description of a dangerous overload attempt
HazardNotifier = Callable[[str], None]


class ContainerKind(Enum):
    BASIC = "Basic"
    LIQUID = "Liquid"
    GAS = "Gas"
    REFRIGERATED = "Refrigerated"


@dataclass(frozen=True, slots=True)
class ContainerDimensions:
    """Fixed physical data: sizes in cm, weights in kg."""
    height_cm: float
    tare_weight_kg: float
    depth_cm: float
    max_payload_kg: float

    def __post_init__(self) -> None:
        for label, value in (
            ("Height", self.height_cm),
            ("Tare weight", self.tare_weight_kg),
            ("Depth", self.depth_cm),
            ("Max payload", self.max_payload_kg),
        ):
            if not math.isfinite(value) or value < 0:
                raise ContainerValidationError(f"{label} must be a non-negative number, got {value}.")


@dataclass(frozen=True, slots=True)
class LiquidDetails:
    is_dangerous: bool = False


@dataclass(frozen=True, slots=True)
class GasDetails:
    # Informational only; no rule depends on it
    pressure_atm: float = 0.0


@dataclass(frozen=True, slots=True)
class RefrigeratedDetails:
    product: ProductKind
    maintained_temperature_c: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "product", parse_product_kind(self.product))
        required = required_temperature(self.product)
        if not self.maintained_temperature_c >= required:
            raise InvalidProductTemperatureError(self.product.value, self.maintained_temperature_c, required)


VariantDetails = Optional[Union[LiquidDetails, GasDetails, RefrigeratedDetails]]


@dataclass(frozen=True, slots=True)
class CargoRule:
    """Per-kind behaviour of the shared container contract."""
    prefix: str
    details_type: type | None
    effective_limit: Callable[["Container"], float]
    residual_after_empty: Callable[["Container"], float]
    hazard_message: Callable[["Container", float, float], str] | None = None

    @property
    def hazard_capable(self) -> bool:
        return self.hazard_message is not None


def _nominal_limit(container: "Container") -> float:
    return container.max_payload_kg


def _liquid_limit(container: "Container") -> float:
    fraction = LIQUID_HAZARDOUS_FILL_FRACTION if container.is_dangerous else LIQUID_SAFE_FILL_FRACTION
    return fraction * container.max_payload_kg


def _no_residue(container: "Container") -> float:
    return 0.0


def _gas_residue(container: "Container") -> float:
    return GAS_RESIDUAL_FRACTION * container.cargo_mass_kg


def _liquid_hazard_message(container: "Container", mass_kg: float, limit_kg: float) -> str:
    cargo = "hazardous" if container.is_dangerous else "ordinary"
    return (
        f"{container.kind.value} container {container.serial_number}: attempted to load "
        f"{_fmt(mass_kg)} kg, above the permitted {_fmt(limit_kg)} kg for {cargo} cargo "
        f"(dangerous: {'yes' if container.is_dangerous else 'no'})."
    )


def _gas_hazard_message(container: "Container", mass_kg: float, limit_kg: float) -> str:
    return (
        f"{container.kind.value} container {container.serial_number}: attempted to load "
        f"{_fmt(mass_kg)} kg of gas, above the maximum payload of {_fmt(limit_kg)} kg."
    )


CARGO_RULES: Dict[ContainerKind, CargoRule] = {
    ContainerKind.BASIC: CargoRule(
        prefix=PREFIX_BASIC,
        details_type=None,
        effective_limit=_nominal_limit,
        residual_after_empty=_no_residue,
    ),
    ContainerKind.LIQUID: CargoRule(
        prefix=PREFIX_LIQUID,
        details_type=LiquidDetails,
        effective_limit=_liquid_limit,
        residual_after_empty=_no_residue,
        hazard_message=_liquid_hazard_message,
    ),
    ContainerKind.GAS: CargoRule(
        prefix=PREFIX_GAS,
        details_type=GasDetails,
        effective_limit=_nominal_limit,
        residual_after_empty=_gas_residue,
        hazard_message=_gas_hazard_message,
    ),
    ContainerKind.REFRIGERATED: CargoRule(
        prefix=PREFIX_REFRIGERATED,
        details_type=RefrigeratedDetails,
        effective_limit=_nominal_limit,
        residual_after_empty=_no_residue,
    ),
}


def _fmt(value: float) -> str:
    """Compact number for display: 250.0 -> '250', 2.5 -> '2.5'."""
    return f"{value:.10g}"


@dataclass(frozen=True, slots=True, eq=False)
class Container:
    """
    A shipping container identified by its serial number.

    Every attribute is fixed at construction; only the cargo mass changes,
    through load_cargo() and empty_cargo().
    """
    serial_number: str
    kind: ContainerKind
    dimensions: ContainerDimensions
    details: VariantDetails = None
    notifier: HazardNotifier | None = field(default=None, repr=False)
    _cargo_mass_kg: float = field(default=0.0, init=False)

    def __post_init__(self) -> None:
        rule = CARGO_RULES[self.kind]
        if rule.details_type is None:
            if self.details is not None:
                raise ContainerValidationError(f"{self.kind.value} containers take no variant details.")
        elif not isinstance(self.details, rule.details_type):
            raise ContainerValidationError(
                f"{self.kind.value} containers need {rule.details_type.__name__}."
            )
        if self.notifier is not None and not rule.hazard_capable:
            raise ContainerValidationError(
                f"{self.kind.value} containers do not raise hazard notifications."
            )

    # --- Fixed attributes ---

    @property
    def rule(self) -> CargoRule:
        return CARGO_RULES[self.kind]

    @property
    def prefix(self) -> str:
        return self.rule.prefix

    @property
    def height_cm(self) -> float:
        return self.dimensions.height_cm

    @property
    def tare_weight_kg(self) -> float:
        return self.dimensions.tare_weight_kg

    @property
    def depth_cm(self) -> float:
        return self.dimensions.depth_cm

    @property
    def max_payload_kg(self) -> float:
        return self.dimensions.max_payload_kg

    @property
    def is_dangerous(self) -> bool:
        """Only liquid containers can carry a hazardous flag."""
        return isinstance(self.details, LiquidDetails) and self.details.is_dangerous

    @property
    def is_hazard_capable(self) -> bool:
        return self.rule.hazard_capable

    # --- Cargo state ---

    @property
    def cargo_mass_kg(self) -> float:
        return self._cargo_mass_kg

    @property
    def effective_max_load_kg(self) -> float:
        """Highest cargo mass this container accepts (below max payload for liquids)."""
        return self.rule.effective_limit(self)

    @property
    def gross_weight_kg(self) -> float:
        return self.tare_weight_kg + self._cargo_mass_kg

    @property
    def gross_weight_t(self) -> float:
        return self.gross_weight_kg / KG_PER_TONNE

    def load_cargo(self, mass_kg: float) -> None:
        """
        Set the cargo mass to mass_kg (replaces the current cargo, does not add).

        Raises OverfillError above the effective limit. Hazard-capable
        containers first report the attempt to their notifier, once.
        """
        if not mass_kg >= 0:
            raise ContainerValidationError(f"Cargo mass must be a non-negative number, got {mass_kg}.")
        limit = self.effective_max_load_kg
        if mass_kg > limit:
            rule = self.rule
            if self.notifier is not None and rule.hazard_message is not None:
                self.notifier(rule.hazard_message(self, mass_kg, limit))
            _LOG.warning("Rejected %s kg for container %s (limit %s kg)", mass_kg, self.serial_number, limit)
            raise OverfillError(self.serial_number, mass_kg, limit)
        self._set_cargo(float(mass_kg))

    def empty_cargo(self) -> None:
        """Empty the container; gas containers keep a small residue."""
        self._set_cargo(self.rule.residual_after_empty(self))

    def _set_cargo(self, mass_kg: float) -> None:
        # Cargo mass is the one field that changes after construction
        object.__setattr__(self, "_cargo_mass_kg", mass_kg)

    # --- Display ---

    def to_display_string(self) -> str:
        text = (
            f"Container {self.serial_number}: type {self.kind.value}, "
            f"height {_fmt(self.height_cm)} cm, tare weight {_fmt(self.tare_weight_kg)} kg, "
            f"depth {_fmt(self.depth_cm)} cm, max payload {_fmt(self.max_payload_kg)} kg, "
            f"cargo mass {_fmt(self.cargo_mass_kg)} kg"
        )
        details = self.details
        if isinstance(details, LiquidDetails):
            text += f", hazardous cargo: {'yes' if details.is_dangerous else 'no'}"
        elif isinstance(details, GasDetails):
            text += f", pressure {_fmt(details.pressure_atm)} atm"
        elif isinstance(details, RefrigeratedDetails):
            text += f", product {details.product.value} at {_fmt(details.maintained_temperature_c)}°C"
        return text

    def __str__(self) -> str:
        return self.to_display_string()
