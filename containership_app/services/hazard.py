"""
Hazard notifications raised by liquid and gas containers.

A notifier is any callable taking the message. It is advisory only: the
overfill error is still raised after it runs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List

from containership_app.models import HazardNotifier

_LOG = logging.getLogger(__name__)

__all__ = ["HazardNotifier", "HazardAlert", "HazardJournal", "log_hazard"]


def log_hazard(message: str) -> None:
    """Default sink: write the notification to the log."""
    _LOG.warning("Hazard notification: %s", message)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(slots=True)
class HazardAlert:
    message: str
    serial_number: str = ""
    timestamp: datetime = field(default_factory=_utc_now)


class HazardJournal:
    """
    Notifier that keeps every alert and forwards it to the log.

    Use notifier_for(serial) to get a sink bound to one container so the
    alert records which container raised it.
    """

    def __init__(self, forward: HazardNotifier | None = log_hazard) -> None:
        self._alerts: List[HazardAlert] = []
        self._forward = forward

    def __call__(self, message: str) -> None:
        self.record(message)

    def record(self, message: str, serial_number: str = "") -> HazardAlert:
        alert = HazardAlert(message=message, serial_number=serial_number)
        self._alerts.append(alert)
        if self._forward is not None:
            self._forward(message)
        return alert

    def notifier_for(self, serial_number: str) -> HazardNotifier:
        def _notify(message: str) -> None:
            self.record(message, serial_number)

        return _notify

    @property
    def alerts(self) -> List[HazardAlert]:
        return list(self._alerts)

    def for_container(self, serial_number: str) -> List[HazardAlert]:
        return [a for a in self._alerts if a.serial_number == serial_number]

    def clear(self) -> None:
        self._alerts.clear()

    def __len__(self) -> int:
        return len(self._alerts)
