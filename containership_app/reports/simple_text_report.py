"""
Simple text-based summaries for containers and ships.
"""

from __future__ import annotations

from containership_app.models import Container, ContainerShip


def build_container_summary_text(container: Container) -> str:
    return container.to_display_string()


def build_ship_summary_text(ship: ContainerShip) -> str:
    lines: list[str] = []
    title = f"Ship: {ship.name}" if ship.name else "Ship"
    lines.append(title)
    lines.append(f"Max speed: {ship.max_speed_knots} kn")
    lines.append(f"Containers: {ship.container_count} / {ship.max_container_count}")
    lines.append(f"Weight: {ship.total_weight_t():.3f} t / {ship.max_weight_t} t")
    lines.append("")
    containers = ship.list_containers()
    if not containers:
        lines.append("No containers aboard.")
    for container in containers:
        lines.append(build_container_summary_text(container))
    return "\n".join(lines)
