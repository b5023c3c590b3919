import logging

from fastapi import APIRouter, Query

from app.schemas.discovery_call import (
    DiscoveryCallBookingResponse,
    DiscoveryCallErrorResponse,
    DiscoveryCallRequest,
    DiscoveryCallSlotsResponse,
)
from app.services.discovery_call_errors import (
    DiscoveryCallInternalError,
    DiscoveryCallValidationError,
)
from app.services.discovery_call_service import DiscoveryCallService

router = APIRouter(prefix="/custom", tags=["discovery-call"])
logger = logging.getLogger(__name__)

_ERROR_RESPONSES = {
    500: {"model": DiscoveryCallErrorResponse},
}


@router.get(
    "/discovery-call",
    response_model=DiscoveryCallSlotsResponse,
    responses=_ERROR_RESPONSES,
)
def list_discovery_call_slots(
    event_type_id: str = Query("1", alias="eventTypeId"),
    date_from: str | None = Query(None, alias="dateFrom"),
    date_to: str | None = Query(None, alias="dateTo"),
    timezone: str = Query("UTC"),
) -> DiscoveryCallSlotsResponse:
    try:
        service = DiscoveryCallService()
        return service.list_slots(
            event_type_id=event_type_id,
            date_from=date_from,
            date_to=date_to,
            timezone=timezone,
        )
    except Exception as exc:
        logger.exception("Error fetching discovery call slots event_type_id=%s", event_type_id)
        raise DiscoveryCallInternalError(
            "Failed to fetch time slots",
            error=str(exc) or "Unknown error",
        ) from exc


@router.post(
    "/discovery-call",
    response_model=DiscoveryCallBookingResponse,
    responses={400: {"model": DiscoveryCallErrorResponse}, **_ERROR_RESPONSES},
)
def create_discovery_call(
    payload: DiscoveryCallRequest | None = None,
) -> DiscoveryCallBookingResponse:
    try:
        service = DiscoveryCallService()
        return service.create_booking(payload or DiscoveryCallRequest())
    except DiscoveryCallValidationError:
        raise
    except Exception as exc:
        logger.exception("Error creating discovery call booking")
        raise DiscoveryCallInternalError(
            "Failed to create booking",
            error=str(exc) or "Unknown error",
        ) from exc
