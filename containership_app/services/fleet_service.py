"""
Fleet operations: ships, the container yard, and moving containers between them.

Containers that are not aboard any ship sit in the yard. Every operation
either completes or raises with the fleet unchanged.
"""

from __future__ import annotations

import logging
from typing import Dict, List

from containership_app.errors import (
    ContainerNotFoundError,
    DuplicateContainerError,
    DuplicateShipError,
    ShipNotFoundError,
)
from containership_app.models import Container, ContainerShip, ProductKind
from containership_app.services import container_service
from containership_app.services.fleet_registry import FleetRegistry
from containership_app.services.hazard import HazardAlert, HazardJournal

_LOG = logging.getLogger(__name__)

_YARD = "the yard"


class FleetService:
    """Encapsulates fleet rules and operations."""

    def __init__(
        self,
        registry: FleetRegistry | None = None,
        journal: HazardJournal | None = None,
    ) -> None:
        self.registry = registry if registry is not None else FleetRegistry()
        self.journal = journal if journal is not None else HazardJournal()
        self._ships: Dict[str, ContainerShip] = {}
        self._yard: List[Container] = []

    # --- Ships ---

    def add_ship(self, ship: ContainerShip) -> ContainerShip:
        if not ship.name.strip():
            ship.name = self._next_ship_name()
        if ship.name in self._ships:
            raise DuplicateShipError(ship.name)
        self._ships[ship.name] = ship
        _LOG.info("Added ship %s", ship.name)
        return ship

    def get_ship(self, name: str) -> ContainerShip:
        ship = self._ships.get(name)
        if ship is None:
            raise ShipNotFoundError(name)
        return ship

    def list_ships(self) -> List[ContainerShip]:
        return list(self._ships.values())

    def remove_ship(self, name: str) -> ContainerShip:
        """Remove a ship; its containers go back to the yard."""
        ship = self.get_ship(name)
        del self._ships[name]
        for container in ship.list_containers():
            ship.remove_container(container.serial_number)
            self._yard.append(container)
        _LOG.info("Removed ship %s", name)
        return ship

    def _next_ship_name(self) -> str:
        n = len(self._ships) + 1
        while f"Ship {n}" in self._ships:
            n += 1
        return f"Ship {n}"

    # --- Yard ---

    def create_liquid_container(
        self,
        height_cm: float,
        tare_weight_kg: float,
        depth_cm: float,
        max_payload_kg: float,
        is_dangerous: bool = False,
    ) -> Container:
        # Hazard alerts are recorded against the container that raised them
        container = container_service.new_liquid_container(
            self.registry, height_cm, tare_weight_kg, depth_cm, max_payload_kg,
            is_dangerous=is_dangerous,
            notifier_for=self.journal.notifier_for,
        )
        return self.add_container(container)

    def create_gas_container(
        self,
        height_cm: float,
        tare_weight_kg: float,
        depth_cm: float,
        max_payload_kg: float,
        pressure_atm: float = 0.0,
    ) -> Container:
        container = container_service.new_gas_container(
            self.registry, height_cm, tare_weight_kg, depth_cm, max_payload_kg,
            pressure_atm=pressure_atm,
            notifier_for=self.journal.notifier_for,
        )
        return self.add_container(container)

    def create_refrigerated_container(
        self,
        height_cm: float,
        tare_weight_kg: float,
        depth_cm: float,
        max_payload_kg: float,
        product: ProductKind | str,
        maintained_temperature_c: float,
    ) -> Container:
        container = container_service.new_refrigerated_container(
            self.registry, height_cm, tare_weight_kg, depth_cm, max_payload_kg,
            product, maintained_temperature_c,
        )
        return self.add_container(container)

    def add_container(self, container: Container) -> Container:
        """Put a container in the yard; its serial must be new to the fleet."""
        if self._holds(container.serial_number):
            raise DuplicateContainerError(container.serial_number)
        self._yard.append(container)
        return container

    def list_yard(self) -> List[Container]:
        return list(self._yard)

    def remove_container(self, serial_number: str) -> Container:
        """Discard a container from the yard. Its serial is not reused."""
        container = self._take_from_yard(serial_number)
        _LOG.info("Discarded container %s", serial_number)
        return container

    def find_container(self, serial_number: str) -> Container:
        """Look a container up in the yard or aboard any ship."""
        for container in self._yard:
            if container.serial_number == serial_number:
                return container
        for ship in self._ships.values():
            found = ship.find_container(serial_number)
            if found is not None:
                return found
        raise ContainerNotFoundError(serial_number, "any ship or in the yard")

    def locate_container(self, serial_number: str) -> ContainerShip | None:
        """Ship carrying the container, or None when it is in the yard."""
        self.find_container(serial_number)
        for ship in self._ships.values():
            if ship.has_container(serial_number):
                return ship
        return None

    # --- Cargo ---

    def load_cargo(self, serial_number: str, mass_kg: float) -> Container:
        """
        Set a container's cargo. A container aboard a ship must also keep
        the ship within its weight cap.

        The container's own limit wins: an over-limit mass notifies and
        raises OverfillError even when the ship could not carry it either.
        """
        container = self.find_container(serial_number)
        ship = self.locate_container(serial_number)
        if ship is not None and 0 <= mass_kg <= container.effective_max_load_kg:
            ship.check_cargo_change(serial_number, mass_kg)
        container.load_cargo(mass_kg)
        return container

    def empty_cargo(self, serial_number: str) -> Container:
        container = self.find_container(serial_number)
        container.empty_cargo()
        return container

    # --- Moving containers ---

    def ship_container(self, serial_number: str, ship_name: str) -> None:
        """Move a container from the yard onto a ship."""
        ship = self.get_ship(ship_name)
        container = self._yard_container(serial_number)
        ship.load_container(container)
        self._yard.remove(container)

    def ship_containers(self, serial_numbers: List[str], ship_name: str) -> None:
        """Move several yard containers onto a ship, all or none."""
        ship = self.get_ship(ship_name)
        seen = set()
        for serial_number in serial_numbers:
            if serial_number in seen:
                raise DuplicateContainerError(serial_number)
            seen.add(serial_number)
        batch = [self._yard_container(s) for s in serial_numbers]
        ship.load_containers(batch)
        for container in batch:
            self._yard.remove(container)

    def unship_container(self, ship_name: str, serial_number: str) -> Container:
        """Take a container off a ship and put it in the yard."""
        container = self.get_ship(ship_name).remove_container(serial_number)
        self._yard.append(container)
        return container

    def replace_on_ship(self, ship_name: str, old_serial_number: str, new_serial_number: str) -> Container:
        """Swap a container aboard for one from the yard; the old one goes to the yard."""
        ship = self.get_ship(ship_name)
        new_container = self._yard_container(new_serial_number)
        old = ship.replace_container(old_serial_number, new_container)
        self._yard.remove(new_container)
        self._yard.append(old)
        return old

    def transfer_container(self, from_ship: str, to_ship: str, serial_number: str) -> None:
        """Move a container directly between two ships."""
        source = self.get_ship(from_ship)
        target = self.get_ship(to_ship)
        container = source.find_container(serial_number)
        if container is None:
            raise ContainerNotFoundError(serial_number, f"ship {from_ship}")
        if source is target:
            return
        target.load_container(container)
        source.remove_container(serial_number)
        _LOG.info("Transferred container %s from %s to %s", serial_number, from_ship, to_ship)

    # --- Hazards ---

    @property
    def hazard_alerts(self) -> List[HazardAlert]:
        return self.journal.alerts

    # --- Helpers ---

    def _holds(self, serial_number: str) -> bool:
        try:
            self.find_container(serial_number)
        except ContainerNotFoundError:
            return False
        return True

    def _yard_container(self, serial_number: str) -> Container:
        for container in self._yard:
            if container.serial_number == serial_number:
                return container
        raise ContainerNotFoundError(serial_number, _YARD)

    def _take_from_yard(self, serial_number: str) -> Container:
        container = self._yard_container(serial_number)
        self._yard.remove(container)
        return container
