from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DiscoveryCallRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str | None = None
    email: str | None = None
    startup_name: str | None = Field(default=None, alias="startupName")
    website: str | None = None
    category: str | None = None
    discussion_topic: str | None = Field(default=None, alias="discussionTopic")
    stage: str | None = None
    selected_time_slot: str | None = Field(default=None, alias="selectedTimeSlot")

    @field_validator("startup_name", "website", "category", "discussion_topic", "stage", mode="before")
    @classmethod
    def stringify_business_detail(cls, value: object) -> object:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class DiscoveryCallSlotsResponse(BaseModel):
    slots: list[str]


class DiscoveryCallBookingResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    booking_id: int = Field(alias="bookingId")
    meeting_link: str = Field(alias="meetingLink")
    selected_time_slot: str = Field(alias="selectedTimeSlot")
    status: str
    start_time: datetime = Field(alias="startTime")
    end_time: datetime = Field(alias="endTime")
    uid: str


class DiscoveryCallErrorResponse(BaseModel):
    message: str
    error: str | None = None
