"""
Constructors for each container variant.

Every constructor validates its arguments before asking the registry for a
serial number, so a rejected construction never uses up a serial.
"""

from __future__ import annotations

import logging
from typing import Callable

from containership_app.models import (
    CARGO_RULES,
    Container,
    ContainerDimensions,
    ContainerKind,
    GasDetails,
    HazardNotifier,
    LiquidDetails,
    ProductKind,
    RefrigeratedDetails,
    parse_product_kind,
)
from containership_app.services.fleet_registry import FleetRegistry
from containership_app.services.hazard import log_hazard

_LOG = logging.getLogger(__name__)

# Builds a notifier bound to the serial number the new container receives
NotifierFactory = Callable[[str], HazardNotifier]


def _build(
    registry: FleetRegistry,
    kind: ContainerKind,
    dimensions: ContainerDimensions,
    details=None,
    notifier: HazardNotifier | None = None,
    notifier_for: NotifierFactory | None = None,
) -> Container:
    serial = registry.next_serial(CARGO_RULES[kind].prefix)
    if notifier_for is not None:
        notifier = notifier_for(serial)
    container = Container(
        serial_number=serial,
        kind=kind,
        dimensions=dimensions,
        details=details,
        notifier=notifier,
    )
    _LOG.info("Created %s container %s", kind.value.lower(), serial)
    return container


def new_basic_container(
    registry: FleetRegistry,
    height_cm: float,
    tare_weight_kg: float,
    depth_cm: float,
    max_payload_kg: float,
) -> Container:
    dims = ContainerDimensions(height_cm, tare_weight_kg, depth_cm, max_payload_kg)
    return _build(registry, ContainerKind.BASIC, dims)


def new_liquid_container(
    registry: FleetRegistry,
    height_cm: float,
    tare_weight_kg: float,
    depth_cm: float,
    max_payload_kg: float,
    is_dangerous: bool = False,
    notifier: HazardNotifier | None = log_hazard,
    notifier_for: NotifierFactory | None = None,
) -> Container:
    """
    Liquid container; pass notifier=None to build it without a hazard sink.

    notifier_for, when given, is called with the new serial number and its
    result replaces notifier.
    """
    dims = ContainerDimensions(height_cm, tare_weight_kg, depth_cm, max_payload_kg)
    return _build(
        registry, ContainerKind.LIQUID, dims, LiquidDetails(bool(is_dangerous)),
        notifier, notifier_for,
    )


def new_gas_container(
    registry: FleetRegistry,
    height_cm: float,
    tare_weight_kg: float,
    depth_cm: float,
    max_payload_kg: float,
    pressure_atm: float = 0.0,
    notifier: HazardNotifier | None = log_hazard,
    notifier_for: NotifierFactory | None = None,
) -> Container:
    dims = ContainerDimensions(height_cm, tare_weight_kg, depth_cm, max_payload_kg)
    return _build(
        registry, ContainerKind.GAS, dims, GasDetails(float(pressure_atm)),
        notifier, notifier_for,
    )


def new_refrigerated_container(
    registry: FleetRegistry,
    height_cm: float,
    tare_weight_kg: float,
    depth_cm: float,
    max_payload_kg: float,
    product: ProductKind | str,
    maintained_temperature_c: float,
) -> Container:
    """
    Refrigerated container for one product kind.

    Raises InvalidProductTemperatureError when the maintained temperature is
    below what the product requires; no container is created in that case.
    """
    dims = ContainerDimensions(height_cm, tare_weight_kg, depth_cm, max_payload_kg)
    details = RefrigeratedDetails(
        product=parse_product_kind(product),
        maintained_temperature_c=float(maintained_temperature_c),
    )
    return _build(registry, ContainerKind.REFRIGERATED, dims, details)
