"""Model package for the e-waste monitor.

Holds the device record, the in-memory monitoring registry and the
notification hooks used when devices change lifecycle state.
"""
from .e_device import EDevice
from .monitoring_registry import (
    DeviceReport,
    DeviceStatistics,
    DeviceStatus,
    EWasteMonitoringSystem,
    RecycleOutcome,
)
from .notification_system import NotificationSystem

__all__ = [
    "EDevice",
    "EWasteMonitoringSystem",
    "DeviceReport",
    "DeviceStatistics",
    "DeviceStatus",
    "RecycleOutcome",
    "NotificationSystem",
]
