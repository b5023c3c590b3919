import logging

from app.core.config import Settings, get_settings
from app.schemas.discovery_call import (
    DiscoveryCallBookingResponse,
    DiscoveryCallRequest,
    DiscoveryCallSlotsResponse,
)
from app.services.booking_factory import BookingFactory
from app.services.discovery_call_errors import DiscoveryCallValidationError
from app.services.identifier_generator import IdentifierGenerator
from app.services.meeting_link_provider import SyntheticMeetLinkProvider
from app.services.slot_catalog import (
    DEFAULT_EVENT_TYPE_ID,
    DEFAULT_TIMEZONE,
    SlotProvider,
    StaticSlotProvider,
)

logger = logging.getLogger(__name__)


class DiscoveryCallService:
    def __init__(
        self,
        settings: Settings | None = None,
        slot_provider: SlotProvider | None = None,
        booking_factory: BookingFactory | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.slot_provider = slot_provider or StaticSlotProvider()
        if booking_factory is None:
            identifier_generator = IdentifierGenerator()
            booking_factory = BookingFactory(
                identifier_generator=identifier_generator,
                meeting_link_provider=SyntheticMeetLinkProvider(
                    identifier_generator,
                    base_url=self.settings.meeting_link_base_url,
                ),
            )
        self.booking_factory = booking_factory

    def list_slots(
        self,
        *,
        event_type_id: str = DEFAULT_EVENT_TYPE_ID,
        date_from: str | None = None,
        date_to: str | None = None,
        timezone: str = DEFAULT_TIMEZONE,
    ) -> DiscoveryCallSlotsResponse:
        slots = self.slot_provider.list_slots(
            event_type_id=event_type_id,
            date_from=date_from,
            date_to=date_to,
            timezone=timezone,
        )
        logger.info(
            "Discovery call slots listed event_type_id=%s timezone=%s count=%s",
            event_type_id,
            timezone,
            len(slots),
        )
        return DiscoveryCallSlotsResponse(slots=slots)

    def create_booking(self, payload: DiscoveryCallRequest) -> DiscoveryCallBookingResponse:
        try:
            result = self.booking_factory.create(payload)
        except DiscoveryCallValidationError as exc:
            logger.warning(
                "Discovery call booking rejected message=%s selected_time_slot=%r",
                exc.message,
                payload.selected_time_slot,
            )
            raise

        logger.info(
            "Discovery call booked booking_id=%s uid=%s start_time=%s",
            result.booking_id,
            result.uid,
            result.start_time.isoformat(),
        )
        return result
