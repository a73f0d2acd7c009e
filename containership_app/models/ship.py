"""
Container ship with fixed capacity limits.

All count and weight checks run before the container list is touched, so a
rejected call leaves the ship exactly as it was.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Iterable, List

from containership_app.config.limits import EPS, KG_PER_TONNE
from containership_app.errors import (
    CapacityExceededError,
    ContainerNotFoundError,
    ShipValidationError,
    WeightExceededError,
)
from containership_app.models.container import Container

_LOG = logging.getLogger(__name__)


def sum_weight_t(containers: Iterable[Container]) -> float:
    """Sum of tare + cargo over the containers, in tonnes."""
    return math.fsum(c.gross_weight_t for c in containers)


@dataclass(slots=True, eq=False)
class ContainerShip:
    max_speed_knots: float
    max_container_count: int
    max_weight_t: float
    name: str = ""
    _containers: List[Container] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        if not math.isfinite(self.max_speed_knots) or self.max_speed_knots < 0:
            raise ShipValidationError("Max speed must be a non-negative number.")
        if isinstance(self.max_container_count, bool) or not isinstance(self.max_container_count, int):
            raise ShipValidationError("Max container count must be a whole number.")
        if self.max_container_count < 0:
            raise ShipValidationError("Max container count cannot be negative.")
        if not math.isfinite(self.max_weight_t) or self.max_weight_t < 0:
            raise ShipValidationError("Max weight must be a non-negative number.")

    # --- Queries ---

    @property
    def container_count(self) -> int:
        return len(self._containers)

    def total_weight_t(self) -> float:
        return sum_weight_t(self._containers)

    def list_containers(self) -> List[Container]:
        """Snapshot of the containers aboard; changing the list does not change the ship."""
        return list(self._containers)

    def find_container(self, serial_number: str) -> Container | None:
        index = self._index_of(serial_number)
        return None if index is None else self._containers[index]

    def has_container(self, serial_number: str) -> bool:
        return self._index_of(serial_number) is not None

    # --- Mutations ---

    def load_container(self, container: Container) -> None:
        self._check_count(self.container_count + 1)
        self._check_weight(self.total_weight_t() + container.gross_weight_t)
        self._containers.append(container)
        _LOG.info("Loaded container %s onto ship %s", container.serial_number, self._label)

    def load_containers(self, batch: Iterable[Container]) -> None:
        """Load all containers of the batch, or none of them."""
        new = list(batch)
        self._check_count(self.container_count + len(new))
        self._check_weight(sum_weight_t(self._containers + new))
        self._containers.extend(new)
        _LOG.info("Loaded %d containers onto ship %s", len(new), self._label)

    def remove_container(self, serial_number: str) -> Container:
        """Take the container off the ship and return it."""
        index = self._require_index(serial_number)
        removed = self._containers.pop(index)
        _LOG.info("Removed container %s from ship %s", serial_number, self._label)
        return removed

    def replace_container(self, old_serial_number: str, new_container: Container) -> Container:
        """Swap a container in place; returns the one taken off."""
        index = self._require_index(old_serial_number)
        old = self._containers[index]
        remaining = self._containers[:index] + self._containers[index + 1:]
        self._check_weight(sum_weight_t(remaining) + new_container.gross_weight_t)
        self._containers[index] = new_container
        _LOG.info(
            "Replaced container %s with %s on ship %s",
            old_serial_number, new_container.serial_number, self._label,
        )
        return old

    def check_cargo_change(self, serial_number: str, new_cargo_mass_kg: float) -> None:
        """
        Raise WeightExceededError if setting the cargo of a container aboard
        to new_cargo_mass_kg would overload the ship.
        """
        container = self._containers[self._require_index(serial_number)]
        others = [c for c in self._containers if c is not container]
        new_gross_t = (container.tare_weight_kg + new_cargo_mass_kg) / KG_PER_TONNE
        self._check_weight(sum_weight_t(others) + new_gross_t)

    # --- Helpers ---

    @property
    def _label(self) -> str:
        return self.name or hex(id(self))

    def _index_of(self, serial_number: str) -> int | None:
        for i, container in enumerate(self._containers):
            if container.serial_number == serial_number:
                return i
        return None

    def _require_index(self, serial_number: str) -> int:
        index = self._index_of(serial_number)
        if index is None:
            _LOG.warning("Container %s not found on ship %s", serial_number, self._label)
            raise ContainerNotFoundError(serial_number, f"ship {self.name}" if self.name else "this ship")
        return index

    def _check_count(self, attempted: int) -> None:
        if attempted > self.max_container_count:
            _LOG.warning("Ship %s cannot take %d containers (max %d)", self._label, attempted, self.max_container_count)
            raise CapacityExceededError(self.max_container_count, attempted)

    def _check_weight(self, attempted_t: float) -> None:
        if attempted_t > self.max_weight_t + EPS:
            _LOG.warning("Ship %s cannot carry %.3f t (max %s t)", self._label, attempted_t, self.max_weight_t)
            raise WeightExceededError(attempted_t, self.max_weight_t)
