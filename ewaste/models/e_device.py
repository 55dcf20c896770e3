from __future__ import annotations
from dataclasses import dataclass
from datetime import MINYEAR, date
from typing import Optional
import logging

from ewaste.dates import add_years
from .notification_system import NotificationSystem

logger = logging.getLogger(__name__)


@dataclass
class EDevice:
    """A tracked electronic device.

    ``expected_life`` is a whole number of years and is not validated; a
    zero or negative value makes the device due for replacement as soon as
    the current date passes the purchase date.
    """
    name: str
    purchase_date: date
    expected_life: int
    recycled: bool = False

    def replacement_date(self) -> Optional[date]:
        """Date the device reaches end of life, or None if off the calendar."""
        return add_years(self.purchase_date, self.expected_life)

    def needs_replacement(self, current_date: date) -> bool:
        if self.recycled:
            return False
        due = self.replacement_date()
        if due is None:
            # below MINYEAR is always in the past, above MAXYEAR never arrives
            return self.purchase_date.year + self.expected_life < MINYEAR
        return due < current_date

    def recycle(self, notifier: Optional[NotificationSystem] = None) -> None:
        """Mark the device recycled and announce it is unsafe for use.

        Does not guard against repeat calls.
        """
        self.recycled = True
        logger.debug("Recycled %s", self.name)
        (notifier or NotificationSystem()).notify_recycled(self)

    def describe(self) -> str:
        return (
            f"{self.name} (Purchased: {self.purchase_date.isoformat()}, "
            f"Expected Life: {self.expected_life} years, "
            f"Recycled: {str(self.recycled).lower()})"
        )

    def __str__(self) -> str:
        return self.describe()
