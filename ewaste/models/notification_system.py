from __future__ import annotations
import logging
from typing import TYPE_CHECKING, Callable, Optional

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .e_device import EDevice

logger = logging.getLogger(__name__)


class NotificationSystem:
    """Handles notifications for device lifecycle events.

    Provides consistent logging and user-facing messages when devices enter
    the registry or are recycled. Output goes through ``echo`` so the CLI can
    route it to its console and tests can capture it.
    """

    def __init__(self, echo: Optional[Callable[[str], None]] = None) -> None:
        self.echo: Callable[[str], None] = echo or print

    def notify_added(self, device: "EDevice") -> None:
        logger.debug("Device added: %s (purchased %s)", device.name, device.purchase_date)

    def notify_recycled(self, device: "EDevice") -> None:
        """Notify that a device was recycled and must no longer be used."""
        message = f"{device.name} has been recycled and is now considered unsafe for use."
        logger.info("[x] Device Recycled: %s", device.name)
        self.echo(message)
