from __future__ import annotations

from datetime import timedelta

from app.schemas.discovery_call import DiscoveryCallBookingResponse, DiscoveryCallRequest
from app.services.booking_models import Booking, BookingAttendee, BookingStatus
from app.services.discovery_call_errors import InvalidTimeSlotError, MissingRequiredFieldsError
from app.services.identifier_generator import IdentifierGenerator
from app.services.meeting_link_provider import MeetingLinkProvider, SyntheticMeetLinkProvider
from app.services.time_slot_parser import TimeSlotParseFailure, TimeSlotParser

DISCOVERY_CALL_DURATION = timedelta(minutes=15)
DISCOVERY_CALL_EVENT_TYPE_ID = 1
DISCOVERY_CALL_ORGANIZER_USER_ID = 1
MISSING_VALUE_PLACEHOLDER = "N/A"


class BookingFactory:
    def __init__(
        self,
        time_slot_parser: TimeSlotParser | None = None,
        identifier_generator: IdentifierGenerator | None = None,
        meeting_link_provider: MeetingLinkProvider | None = None,
    ) -> None:
        self.time_slot_parser = time_slot_parser or TimeSlotParser()
        self.identifier_generator = identifier_generator or IdentifierGenerator()
        self.meeting_link_provider = meeting_link_provider or SyntheticMeetLinkProvider(
            self.identifier_generator,
        )

    def create(self, payload: DiscoveryCallRequest) -> DiscoveryCallBookingResponse:
        booking = self.build_booking(payload)
        return DiscoveryCallBookingResponse(
            booking_id=booking.id,
            meeting_link=booking.meeting_link,
            selected_time_slot=booking.selected_time_slot,
            status=booking.status.value,
            start_time=booking.start_time,
            end_time=booking.end_time,
            uid=booking.uid,
        )

    def build_booking(self, payload: DiscoveryCallRequest) -> Booking:
        name = _clean(payload.name)
        email = _clean(payload.email)
        selected_time_slot = _clean(payload.selected_time_slot)
        if not name or not email or not selected_time_slot:
            raise MissingRequiredFieldsError()

        parsed_slot = self.time_slot_parser.parse(payload.selected_time_slot)
        if isinstance(parsed_slot, TimeSlotParseFailure):
            raise InvalidTimeSlotError(parsed_slot.reason)

        uid = self.identifier_generator.next_uid()
        start_time = parsed_slot.starts_at
        return Booking(
            id=self.identifier_generator.next_booking_id(),
            uid=uid,
            title=f"Discovery Call: {name}",
            start_time=start_time,
            end_time=start_time + DISCOVERY_CALL_DURATION,
            description=_build_description(payload),
            meeting_link=self.meeting_link_provider.create_meeting_link(uid),
            selected_time_slot=payload.selected_time_slot,
            status=BookingStatus.accepted,
            event_type_id=DISCOVERY_CALL_EVENT_TYPE_ID,
            user_id=DISCOVERY_CALL_ORGANIZER_USER_ID,
            attendees=(BookingAttendee(name=name, email=email),),
            metadata={
                "startupName": payload.startup_name,
                "website": payload.website,
                "category": payload.category,
                "discussionTopic": payload.discussion_topic,
                "stage": payload.stage,
            },
        )


def _build_description(payload: DiscoveryCallRequest) -> str:
    lines = (
        ("Startup", payload.startup_name),
        ("Stage", payload.stage),
        ("Category", payload.category),
        ("Discussion Topic", payload.discussion_topic),
        ("Website", payload.website),
    )
    return "\n".join(
        f"{label}: {_clean(value) or MISSING_VALUE_PLACEHOLDER}" for label, value in lines
    )


def _clean(value: str | None) -> str:
    if value is None:
        return ""
    return value.strip()
