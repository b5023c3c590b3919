from __future__ import annotations

from abc import ABC, abstractmethod

from app.services.identifier_generator import IdentifierGenerator

DEFAULT_MEETING_LINK_BASE_URL = "https://meet.google.com"


class MeetingLinkProvider(ABC):
    """Builds the join link for a booking.

    ``booking_uid`` lets a real conferencing integration tie the meeting to the
    booking; implementations that mint standalone links may ignore it.
    """

    @abstractmethod
    def create_meeting_link(self, booking_uid: str) -> str:
        raise NotImplementedError


class SyntheticMeetLinkProvider(MeetingLinkProvider):
    """Meet-shaped links that are never registered with a conferencing service."""

    def __init__(
        self,
        identifier_generator: IdentifierGenerator | None = None,
        base_url: str = DEFAULT_MEETING_LINK_BASE_URL,
    ) -> None:
        self.identifier_generator = identifier_generator or IdentifierGenerator()
        self.base_url = base_url.rstrip("/")

    def create_meeting_link(self, booking_uid: str) -> str:
        return f"{self.base_url}/{self.identifier_generator.next_meeting_id()}"
