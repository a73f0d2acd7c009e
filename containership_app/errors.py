"""
Error kinds raised by container and ship operations.

Every error derives from ContainerShipError so a caller can catch them
uniformly and show the message. A failed call leaves containers and ships
exactly as they were before it.
"""

from __future__ import annotations


class ContainerShipError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ContainerValidationError(ContainerShipError):
    """Impossible container arguments (negative sizes, negative cargo mass)."""


class ShipValidationError(ContainerShipError):
    """Impossible ship arguments (negative speed, count or weight cap)."""


class OverfillError(ContainerShipError):
    """Cargo mass above the container's effective limit."""

    def __init__(self, serial_number: str, mass_kg: float, limit_kg: float) -> None:
        self.serial_number = serial_number
        self.mass_kg = mass_kg
        self.limit_kg = limit_kg
        super().__init__(
            f"Cargo mass {mass_kg} kg exceeds the {limit_kg} kg limit of container {serial_number}."
        )


class InvalidProductTemperatureError(ContainerShipError):
    """Refrigerated container kept colder than its product allows."""

    def __init__(self, product: str, temperature_c: float, required_c: float) -> None:
        self.product = product
        self.temperature_c = temperature_c
        self.required_c = required_c
        super().__init__(
            f"Maintained temperature {temperature_c}°C is below the required "
            f"{required_c}°C for {product}."
        )


class CapacityExceededError(ContainerShipError):
    """Ship already holds its maximum number of containers."""

    def __init__(self, max_container_count: int, attempted_count: int) -> None:
        self.max_container_count = max_container_count
        self.attempted_count = attempted_count
        super().__init__(
            f"Cannot hold {attempted_count} containers; the ship takes at most {max_container_count}."
        )


class WeightExceededError(ContainerShipError):
    """Ship total weight would go over its cap."""

    def __init__(self, attempted_weight_t: float, max_weight_t: float) -> None:
        self.attempted_weight_t = attempted_weight_t
        self.max_weight_t = max_weight_t
        super().__init__(
            f"Total weight {attempted_weight_t:.3f} t would exceed the ship maximum of {max_weight_t} t."
        )


class ContainerNotFoundError(ContainerShipError):
    def __init__(self, serial_number: str, where: str = "this ship") -> None:
        self.serial_number = serial_number
        super().__init__(f"Container {serial_number} not found on {where}.")


class ShipNotFoundError(ContainerShipError):
    def __init__(self, ship_name: str) -> None:
        self.ship_name = ship_name
        super().__init__(f"Ship '{ship_name}' not found in the fleet.")


class DuplicateShipError(ContainerShipError):
    def __init__(self, ship_name: str) -> None:
        self.ship_name = ship_name
        super().__init__(f"A ship named '{ship_name}' is already in the fleet.")


class DuplicateContainerError(ContainerShipError):
    def __init__(self, serial_number: str) -> None:
        self.serial_number = serial_number
        super().__init__(f"Container {serial_number} is already in the fleet or named twice in the batch.")
