"""Tests for fleet, yard and transfer operations."""

from __future__ import annotations

import pytest

from containership_app.errors import (
    CapacityExceededError,
    ContainerNotFoundError,
    DuplicateContainerError,
    DuplicateShipError,
    InvalidProductTemperatureError,
    OverfillError,
    ShipNotFoundError,
    WeightExceededError,
)
from containership_app.models import ContainerShip, ProductKind
from containership_app.services.container_service import new_basic_container


@pytest.fixture
def two_ships(fleet):
    first = fleet.add_ship(ContainerShip(20.0, 5, 30.0, name="Ship 1"))
    second = fleet.add_ship(ContainerShip(18.0, 2, 25.0, name="Ship 2"))
    return first, second


class TestShips:
    def test_add_and_get(self, fleet, two_ships):
        first, _ = two_ships
        assert fleet.get_ship("Ship 1") is first
        assert [s.name for s in fleet.list_ships()] == ["Ship 1", "Ship 2"]

    def test_unnamed_ship_gets_a_name(self, fleet):
        ship = fleet.add_ship(ContainerShip(10.0, 1, 1.0))
        assert ship.name == "Ship 1"

    def test_duplicate_name(self, fleet, two_ships):
        with pytest.raises(DuplicateShipError):
            fleet.add_ship(ContainerShip(10.0, 1, 1.0, name="Ship 1"))

    def test_unknown_ship(self, fleet):
        with pytest.raises(ShipNotFoundError):
            fleet.get_ship("Ghost")

    def test_remove_ship_returns_containers_to_yard(self, fleet, two_ships):
        c = fleet.create_liquid_container(250, 1000, 300, 5000)
        fleet.ship_container(c.serial_number, "Ship 1")
        assert fleet.list_yard() == []
        fleet.remove_ship("Ship 1")
        assert fleet.list_yard() == [c]
        assert [s.name for s in fleet.list_ships()] == ["Ship 2"]


class TestYard:
    def test_created_containers_land_in_yard(self, fleet):
        liquid = fleet.create_liquid_container(250, 1000, 300, 5000, is_dangerous=True)
        gas = fleet.create_gas_container(250, 1200, 300, 4000, pressure_atm=2.5)
        reefer = fleet.create_refrigerated_container(250, 1500, 300, 6000, ProductKind.BANANAS, 15.0)
        assert [c.serial_number for c in fleet.list_yard()] == ["L-1", "G-1", "C-1"]
        assert fleet.find_container("G-1") is gas
        assert liquid.is_dangerous
        assert reefer.details.product is ProductKind.BANANAS

    def test_invalid_reefer_not_added(self, fleet):
        with pytest.raises(InvalidProductTemperatureError):
            fleet.create_refrigerated_container(250, 1500, 300, 6000, ProductKind.BANANAS, 10.0)
        assert fleet.list_yard() == []

    def test_discard_does_not_reuse_serial(self, fleet):
        fleet.create_liquid_container(250, 1000, 300, 5000)
        fleet.remove_container("L-1")
        again = fleet.create_liquid_container(250, 1000, 300, 5000)
        assert again.serial_number == "L-2"

    def test_remove_unknown(self, fleet):
        with pytest.raises(ContainerNotFoundError):
            fleet.remove_container("L-1")

    def test_find_container_aboard(self, fleet, two_ships):
        c = fleet.create_gas_container(250, 1000, 300, 4000)
        fleet.ship_container(c.serial_number, "Ship 2")
        assert fleet.find_container(c.serial_number) is c
        assert fleet.locate_container(c.serial_number) is two_ships[1]

    def test_add_container_already_aboard(self, fleet, two_ships):
        c = fleet.create_gas_container(250, 1000, 300, 4000)
        fleet.ship_container(c.serial_number, "Ship 2")
        with pytest.raises(DuplicateContainerError):
            fleet.add_container(c)
        assert fleet.list_yard() == []
        assert two_ships[1].list_containers() == [c]

    def test_add_container_already_in_yard(self, fleet):
        c = fleet.create_liquid_container(250, 1000, 300, 5000)
        with pytest.raises(DuplicateContainerError):
            fleet.add_container(c)
        assert fleet.list_yard() == [c]

    def test_add_container_built_elsewhere(self, fleet, registry):
        c = new_basic_container(registry, 250, 800, 300, 2000)
        assert fleet.add_container(c) is c
        assert fleet.locate_container(c.serial_number) is None


class TestCargo:
    def test_hazard_alerts_recorded_per_container(self, fleet):
        c = fleet.create_liquid_container(250, 1000, 300, 5000, is_dangerous=True)
        with pytest.raises(OverfillError):
            fleet.load_cargo(c.serial_number, 3000)
        alerts = fleet.hazard_alerts
        assert len(alerts) == 1
        assert alerts[0].serial_number == "L-1"
        assert "3000" in alerts[0].message

    def test_cargo_aboard_respects_ship_weight(self, fleet, two_ships):
        c = fleet.create_gas_container(250, 10000, 300, 30000)
        fleet.ship_container(c.serial_number, "Ship 2")
        with pytest.raises(WeightExceededError):
            fleet.load_cargo(c.serial_number, 16000)
        assert c.cargo_mass_kg == 0.0
        fleet.load_cargo(c.serial_number, 15000)
        assert c.cargo_mass_kg == 15000

    def test_overfill_aboard_notifies_before_ship_weight(self, fleet):
        fleet.add_ship(ContainerShip(10.0, 2, 2.0, name="Small"))
        c = fleet.create_liquid_container(250, 1000, 300, 5000, is_dangerous=True)
        fleet.ship_container(c.serial_number, "Small")
        with pytest.raises(OverfillError):
            fleet.load_cargo(c.serial_number, 3000)
        assert len(fleet.hazard_alerts) == 1
        assert c.cargo_mass_kg == 0.0

    def test_ship_weight_checked_within_container_limit(self, fleet):
        fleet.add_ship(ContainerShip(10.0, 2, 2.0, name="Small"))
        c = fleet.create_liquid_container(250, 1000, 300, 5000, is_dangerous=True)
        fleet.ship_container(c.serial_number, "Small")
        with pytest.raises(WeightExceededError):
            fleet.load_cargo(c.serial_number, 1500)
        assert fleet.hazard_alerts == []
        assert c.cargo_mass_kg == 0.0

    def test_empty_cargo(self, fleet):
        c = fleet.create_gas_container(250, 1000, 300, 4000)
        fleet.load_cargo(c.serial_number, 2000)
        fleet.empty_cargo(c.serial_number)
        assert c.cargo_mass_kg == pytest.approx(100.0)


class TestMoves:
    def test_ship_container_failure_keeps_it_in_yard(self, fleet, two_ships):
        a = fleet.create_liquid_container(250, 1000, 300, 5000)
        b = fleet.create_liquid_container(250, 1000, 300, 5000)
        c = fleet.create_liquid_container(250, 1000, 300, 5000)
        fleet.ship_containers([a.serial_number, b.serial_number], "Ship 2")
        with pytest.raises(CapacityExceededError):
            fleet.ship_container(c.serial_number, "Ship 2")
        assert fleet.list_yard() == [c]

    def test_ship_containers_all_or_nothing(self, fleet, two_ships):
        serials = [fleet.create_liquid_container(250, 1000, 300, 5000).serial_number for _ in range(3)]
        with pytest.raises(CapacityExceededError):
            fleet.ship_containers(serials, "Ship 2")
        assert len(fleet.list_yard()) == 3
        assert two_ships[1].container_count == 0

    def test_ship_containers_rejects_repeated_serial(self, fleet, two_ships):
        c = fleet.create_liquid_container(250, 1000, 300, 5000)
        with pytest.raises(DuplicateContainerError):
            fleet.ship_containers([c.serial_number, c.serial_number], "Ship 1")
        assert fleet.list_yard() == [c]
        assert two_ships[0].list_containers() == []

    def test_unship_container(self, fleet, two_ships):
        c = fleet.create_liquid_container(250, 1000, 300, 5000)
        fleet.ship_container(c.serial_number, "Ship 1")
        fleet.unship_container("Ship 1", c.serial_number)
        assert fleet.list_yard() == [c]
        assert two_ships[0].container_count == 0

    def test_replace_on_ship_swaps_with_yard(self, fleet, two_ships):
        old = fleet.create_liquid_container(250, 1000, 300, 5000)
        new = fleet.create_gas_container(250, 1200, 300, 4000)
        fleet.ship_container(old.serial_number, "Ship 1")
        fleet.replace_on_ship("Ship 1", old.serial_number, new.serial_number)
        assert two_ships[0].list_containers() == [new]
        assert fleet.list_yard() == [old]

    def test_transfer_between_ships(self, fleet, two_ships):
        first, second = two_ships
        c = fleet.create_refrigerated_container(250, 1500, 300, 6000, "Bananas", 15.0)
        fleet.ship_container(c.serial_number, "Ship 1")
        fleet.transfer_container("Ship 1", "Ship 2", c.serial_number)
        assert first.container_count == 0
        assert second.list_containers() == [c]

    def test_failed_transfer_leaves_source(self, fleet, two_ships):
        first, second = two_ships
        heavy = fleet.create_gas_container(250, 20000, 300, 10000)
        heavy.load_cargo(6000)
        fleet.ship_container(heavy.serial_number, "Ship 1")
        with pytest.raises(WeightExceededError):
            fleet.transfer_container("Ship 1", "Ship 2", heavy.serial_number)
        assert first.list_containers() == [heavy]
        assert second.container_count == 0

    def test_transfer_unknown(self, fleet, two_ships):
        with pytest.raises(ContainerNotFoundError):
            fleet.transfer_container("Ship 1", "Ship 2", "L-1")
