from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import List, Optional
import logging

from .e_device import EDevice
from .notification_system import NotificationSystem

logger = logging.getLogger(__name__)


class DeviceStatus(str, Enum):
    """Classification produced by a monitoring pass."""
    RECYCLED = "recycled"
    NEEDS_REPLACEMENT = "needs_replacement"
    SAFE = "safe"


class RecycleOutcome(str, Enum):
    RECYCLED = "recycled"
    ALREADY_RECYCLED = "already_recycled"
    NOT_FOUND = "not_found"


@dataclass(slots=True)
class DeviceReport:
    """One row of a monitoring pass."""

    device: EDevice
    status: DeviceStatus


@dataclass(slots=True)
class DeviceStatistics:
    """Counts from one statistics pass; ``in_use`` is ``total - recycled``."""

    total: int
    recycled: int
    in_use: int


class EWasteMonitoringSystem:
    """In-memory registry of tracked devices.

    Keeps devices in insertion order without deduplication. Statuses are
    derived on every call from the recycled flag and the date comparison;
    nothing is cached.
    """

    def __init__(self, notifier: Optional[NotificationSystem] = None) -> None:
        self._devices: List[EDevice] = []
        self.notifier = notifier or NotificationSystem()

    def __len__(self) -> int:
        return len(self._devices)

    def add_device(self, device: EDevice) -> None:
        self._devices.append(device)
        self.notifier.notify_added(device)

    def devices(self) -> List[EDevice]:
        """Return a snapshot of tracked devices in insertion order."""
        return list(self._devices)

    def find_device(self, name: str) -> Optional[EDevice]:
        """Return the first device whose name matches case-insensitively."""
        wanted = name.casefold()
        for device in self._devices:
            if device.name.casefold() == wanted:
                return device
        return None

    def monitor_devices(self, current_date: date) -> List[DeviceReport]:
        logger.debug("monitor_devices as of %s -> %d devices", current_date, len(self._devices))
        reports: List[DeviceReport] = []
        for device in self._devices:
            if device.recycled:
                status = DeviceStatus.RECYCLED
            elif device.needs_replacement(current_date):
                status = DeviceStatus.NEEDS_REPLACEMENT
            else:
                status = DeviceStatus.SAFE
            reports.append(DeviceReport(device, status))
        return reports

    def recycle_device(self, name: str) -> RecycleOutcome:
        """Recycle the first device matching ``name``.

        Later devices sharing the same name are never reached.
        """
        device = self.find_device(name)
        if device is None:
            logger.debug("recycle_device: %s not found", name)
            return RecycleOutcome.NOT_FOUND
        if device.recycled:
            logger.debug("recycle_device: %s already recycled", device.name)
            return RecycleOutcome.ALREADY_RECYCLED
        device.recycle(self.notifier)
        return RecycleOutcome.RECYCLED

    def show_statistics(self) -> DeviceStatistics:
        recycled = sum(1 for device in self._devices if device.recycled)
        total = len(self._devices)
        return DeviceStatistics(total=total, recycled=recycled, in_use=total - recycled)
