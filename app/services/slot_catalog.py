from __future__ import annotations

from abc import ABC, abstractmethod

DEFAULT_EVENT_TYPE_ID = "1"
DEFAULT_TIMEZONE = "UTC"

DISCOVERY_CALL_SLOT_LABELS: tuple[str, ...] = (
    "Monday, Dec 16 - 10:00 AM",
    "Monday, Dec 16 - 2:00 PM",
    "Tuesday, Dec 17 - 11:00 AM",
    "Tuesday, Dec 17 - 3:00 PM",
    "Wednesday, Dec 18 - 9:00 AM",
    "Wednesday, Dec 18 - 1:00 PM",
    "Thursday, Dec 19 - 10:00 AM",
    "Thursday, Dec 19 - 4:00 PM",
    "Friday, Dec 20 - 11:00 AM",
    "Friday, Dec 20 - 2:00 PM",
)


class SlotProvider(ABC):
    @abstractmethod
    def list_slots(
        self,
        *,
        event_type_id: str = DEFAULT_EVENT_TYPE_ID,
        date_from: str | None = None,
        date_to: str | None = None,
        timezone: str = DEFAULT_TIMEZONE,
    ) -> list[str]:
        raise NotImplementedError


class StaticSlotProvider(SlotProvider):
    """Fixed catalog of offered labels.

    The range and timezone arguments are accepted but ignored until a real
    availability source replaces this provider.
    """

    def __init__(self, slot_labels: tuple[str, ...] = DISCOVERY_CALL_SLOT_LABELS) -> None:
        self._slot_labels = slot_labels

    def list_slots(
        self,
        *,
        event_type_id: str = DEFAULT_EVENT_TYPE_ID,
        date_from: str | None = None,
        date_to: str | None = None,
        timezone: str = DEFAULT_TIMEZONE,
    ) -> list[str]:
        return list(self._slot_labels)
