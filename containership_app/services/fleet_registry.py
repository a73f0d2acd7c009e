"""
Serial number allocation for containers.
"""

from __future__ import annotations

import logging
import threading
from typing import Dict

_LOG = logging.getLogger(__name__)


class FleetRegistry:
    """
    Hands out serial numbers "<PREFIX>-<n>" with n starting at 1 per prefix.

    Numbers only go up: a serial is never reused, even after its container
    is discarded. One registry is shared by everything that builds
    containers for the same fleet; tests create a fresh one each.
    """

    def __init__(self) -> None:
        self._last_issued: Dict[str, int] = {}
        self._lock = threading.Lock()

    def next_serial(self, prefix: str) -> str:
        if not prefix or "-" in prefix:
            raise ValueError(f"Invalid serial prefix '{prefix}'.")
        with self._lock:
            number = self._last_issued.get(prefix, 0) + 1
            self._last_issued[prefix] = number
        serial = f"{prefix}-{number}"
        _LOG.debug("Issued serial %s", serial)
        return serial

    def last_issued(self, prefix: str) -> int:
        """Highest sequence number issued for the prefix (0 if none)."""
        with self._lock:
            return self._last_issued.get(prefix, 0)

    def issued_counts(self) -> Dict[str, int]:
        with self._lock:
            return dict(self._last_issued)
