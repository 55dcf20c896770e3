"""Calendar helpers for purchase dates and replacement thresholds."""
from __future__ import annotations

import calendar
import re
from datetime import MAXYEAR, MINYEAR, date
from typing import Optional


DATE_PATTERN = "yyyy-MM-dd"
_DATE_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")


def parse_date(raw: str) -> date:
    """Parse a ``yyyy-MM-dd`` string.

    The text must be zero padded with a month in 1..12 and a day in 1..31.
    A day past the end of its month is moved back to the month's last day,
    so ``2023-02-30`` reads as 2023-02-28. Raises ``ValueError`` otherwise.
    """
    text = (raw or "").strip()
    match = _DATE_RE.match(text)
    if not match:
        raise ValueError(f"expected a date in {DATE_PATTERN} format, got {raw!r}")
    year, month, day = (int(part) for part in match.groups())
    if year < MINYEAR:
        raise ValueError(f"year out of range in {text!r}")
    if not 1 <= month <= 12:
        raise ValueError(f"month out of range in {text!r}")
    if not 1 <= day <= 31:
        raise ValueError(f"day out of range in {text!r}")
    return date(year, month, min(day, calendar.monthrange(year, month)[1]))


def add_years(start: date, years: int) -> Optional[date]:
    """Return ``start`` shifted by ``years`` calendar years.

    Feb 29 maps to Feb 28 when the target year is not a leap year. Returns
    ``None`` when the target year is outside ``MINYEAR..MAXYEAR``.
    """
    year = start.year + years
    if year < MINYEAR or year > MAXYEAR:
        return None
    try:
        return start.replace(year=year)
    except ValueError:
        # only Feb 29 can fail here
        return start.replace(year=year, day=28)


__all__ = ["DATE_PATTERN", "parse_date", "add_years"]
