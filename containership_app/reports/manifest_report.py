"""
Cargo manifest as a pandas table, one row per container aboard a ship.
"""

from __future__ import annotations

from typing import Any, Dict, List

import pandas as pd

from containership_app.models import (
    Container,
    ContainerShip,
    GasDetails,
    LiquidDetails,
    RefrigeratedDetails,
)

MANIFEST_COLUMNS = [
    "serial_number",
    "type",
    "height_cm",
    "tare_weight_kg",
    "depth_cm",
    "max_payload_kg",
    "cargo_mass_kg",
    "gross_weight_t",
    "details",
]


def _details_text(container: Container) -> str:
    details = container.details
    if isinstance(details, LiquidDetails):
        return "hazardous" if details.is_dangerous else "ordinary"
    if isinstance(details, GasDetails):
        return f"{details.pressure_atm:g} atm"
    if isinstance(details, RefrigeratedDetails):
        return f"{details.product.value} @ {details.maintained_temperature_c:g}°C"
    return ""


def manifest_row(container: Container) -> Dict[str, Any]:
    return {
        "serial_number": container.serial_number,
        "type": container.kind.value,
        "height_cm": container.height_cm,
        "tare_weight_kg": container.tare_weight_kg,
        "depth_cm": container.depth_cm,
        "max_payload_kg": container.max_payload_kg,
        "cargo_mass_kg": container.cargo_mass_kg,
        "gross_weight_t": container.gross_weight_t,
        "details": _details_text(container),
    }


def build_manifest_frame(ship: ContainerShip) -> pd.DataFrame:
    """Manifest of the ship's containers in loading order."""
    rows: List[Dict[str, Any]] = [manifest_row(c) for c in ship.list_containers()]
    return pd.DataFrame(rows, columns=MANIFEST_COLUMNS)


def manifest_totals(frame: pd.DataFrame) -> Dict[str, float]:
    """Column totals used under the manifest: cargo (kg) and gross weight (t)."""
    if frame.empty:
        return {"containers": 0, "cargo_mass_kg": 0.0, "gross_weight_t": 0.0}
    return {
        "containers": int(len(frame)),
        "cargo_mass_kg": float(frame["cargo_mass_kg"].sum()),
        "gross_weight_t": float(frame["gross_weight_t"].sum()),
    }
