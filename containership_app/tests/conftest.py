"""Pytest configuration and fixtures."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List

import pytest

# Ensure project root is on path when running tests
_project_root = Path(__file__).resolve().parents[2]
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from containership_app.models import ContainerShip, ProductKind
from containership_app.services.container_service import (
    new_gas_container,
    new_liquid_container,
    new_refrigerated_container,
)
from containership_app.services.fleet_registry import FleetRegistry
from containership_app.services.fleet_service import FleetService
from containership_app.services.hazard import HazardJournal


@pytest.fixture
def registry():
    """Fresh serial number registry for each test."""
    return FleetRegistry()


@pytest.fixture
def hazard_messages() -> List[str]:
    return []


@pytest.fixture
def notifier(hazard_messages):
    """Hazard sink that records messages in hazard_messages."""
    return hazard_messages.append


@pytest.fixture
def liquid(registry, notifier):
    return new_liquid_container(registry, 250, 1000, 300, 5000, is_dangerous=False, notifier=notifier)


@pytest.fixture
def dangerous_liquid(registry, notifier):
    return new_liquid_container(registry, 250, 1000, 300, 5000, is_dangerous=True, notifier=notifier)


@pytest.fixture
def gas(registry, notifier):
    return new_gas_container(registry, 250, 1200, 300, 4000, pressure_atm=2.5, notifier=notifier)


@pytest.fixture
def reefer(registry):
    return new_refrigerated_container(registry, 250, 1500, 300, 6000, ProductKind.BANANAS, 15.0)


@pytest.fixture
def sample_ship():
    """Ship taking 3 containers and 30 t."""
    return ContainerShip(max_speed_knots=20.0, max_container_count=3, max_weight_t=30.0, name="Test Vessel")


@pytest.fixture
def fleet(registry):
    return FleetService(registry=registry, journal=HazardJournal(forward=None))
