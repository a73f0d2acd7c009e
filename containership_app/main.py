"""
Application entry point for the container ship app.

Runs a short demonstration: builds one container of each kind, loads them
on a ship, empties one and moves another to a second ship.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from containership_app.config.settings import Settings, init_logging
from containership_app.errors import ContainerShipError
from containership_app.models import ContainerShip, ProductKind
from containership_app.reports import build_container_summary_text, build_ship_summary_text
from containership_app.services.fleet_service import FleetService

_LOG = logging.getLogger(__name__)


def run_demo(fleet: FleetService) -> None:
    liquid = fleet.create_liquid_container(250, 1000, 300, 5000, is_dangerous=True)
    gas = fleet.create_gas_container(250, 1200, 300, 4000, pressure_atm=2.5)
    reefer = fleet.create_refrigerated_container(250, 1500, 300, 6000, ProductKind.BANANAS, 15.0)

    fleet.load_cargo(liquid.serial_number, 2000)
    fleet.load_cargo(gas.serial_number, 3000)
    fleet.load_cargo(reefer.serial_number, 5000)

    first = fleet.add_ship(ContainerShip(20.0, 5, 30.0, name="Ship 1"))
    for container in (liquid, gas, reefer):
        fleet.ship_container(container.serial_number, first.name)
    print(build_ship_summary_text(first))

    fleet.empty_cargo(liquid.serial_number)
    print(f"\nAfter emptying: {build_container_summary_text(liquid)}")

    second = fleet.add_ship(ContainerShip(18.0, 2, 25.0, name="Ship 2"))
    fleet.transfer_container(first.name, second.name, reefer.serial_number)

    print("\nAfter transfer:")
    print(build_ship_summary_text(first))
    print()
    print(build_ship_summary_text(second))


def main() -> None:
    """Bootstraps logging and runs the demonstration."""
    settings = Settings.default()
    init_logging(settings)

    try:
        run_demo(FleetService())
    except ContainerShipError as exc:
        _LOG.error("Demo failed: %s", exc.message)
        sys.exit(1)


if __name__ == "__main__":
    # Allow running as a script: `python -m containership_app.main`
    # or `python containership_app/main.py` (when cwd is project root)
    project_root = Path(__file__).resolve().parents[1]
    if project_root.exists():
        sys.path.insert(0, str(project_root))
    main()
