from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime

TIME_SLOT_LABEL_PATTERN = re.compile(
    r"(?P<weekday>[A-Za-z]+),\s+"
    r"(?P<month>[A-Za-z]+)\s+"
    r"(?P<day>\d{1,2})\s+-\s+"
    r"(?P<hour>\d{1,2}):(?P<minute>\d{2})\s+"
    r"(?P<meridiem>AM|PM)",
    re.ASCII,
)
MONTH_NUMBER_BY_ABBREVIATION = {
    "Jan": 1,
    "Feb": 2,
    "Mar": 3,
    "Apr": 4,
    "May": 5,
    "Jun": 6,
    "Jul": 7,
    "Aug": 8,
    "Sep": 9,
    "Oct": 10,
    "Nov": 11,
    "Dec": 12,
}


@dataclass(frozen=True)
class ParsedTimeSlot:
    label: str
    starts_at: datetime


@dataclass(frozen=True)
class TimeSlotParseFailure:
    label: str
    reason: str


def _utc_now() -> datetime:
    return datetime.now(UTC)


class TimeSlotParser:
    """Turns labels such as ``"Monday, Dec 16 - 10:00 AM"`` into UTC datetimes.

    Labels carry no year, so the current year at parse time is used. A slot
    offered in late December for early January resolves to the wrong year;
    that limitation is kept as is. The weekday is not checked against the date.
    """

    def __init__(self, now: Callable[[], datetime] | None = None) -> None:
        self._now = now or _utc_now

    def parse(self, label: str) -> ParsedTimeSlot | TimeSlotParseFailure:
        match = TIME_SLOT_LABEL_PATTERN.fullmatch(label.strip())
        if not match:
            return TimeSlotParseFailure(label=label, reason="format")

        month = MONTH_NUMBER_BY_ABBREVIATION.get(match.group("month"))
        if month is None:
            return TimeSlotParseFailure(label=label, reason="month")

        hour = int(match.group("hour"))
        if not 1 <= hour <= 12:
            return TimeSlotParseFailure(label=label, reason="hour")

        minute = int(match.group("minute"))
        if minute > 59:
            return TimeSlotParseFailure(label=label, reason="minute")

        try:
            starts_at = datetime(
                self._now().year,
                month,
                int(match.group("day")),
                _to_24_hour(hour, match.group("meridiem")),
                minute,
                tzinfo=UTC,
            )
        except ValueError:
            return TimeSlotParseFailure(label=label, reason="date")

        return ParsedTimeSlot(label=label, starts_at=starts_at)


def _to_24_hour(hour: int, meridiem: str) -> int:
    if meridiem == "AM":
        return 0 if hour == 12 else hour
    return hour if hour == 12 else hour + 12
