from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum


class BookingStatus(StrEnum):
    accepted = "ACCEPTED"


@dataclass(frozen=True)
class BookingAttendee:
    name: str
    email: str
    time_zone: str = "UTC"
    locale: str = "en"


@dataclass(frozen=True)
class Booking:
    id: int
    uid: str
    title: str
    start_time: datetime
    end_time: datetime
    description: str
    meeting_link: str
    selected_time_slot: str
    status: BookingStatus = BookingStatus.accepted
    event_type_id: int = 1
    user_id: int = 1
    attendees: tuple[BookingAttendee, ...] = ()
    metadata: dict[str, str | None] = field(default_factory=dict)
