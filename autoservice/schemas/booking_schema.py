"""Booking data models exchanged with the REST backend."""

import datetime as dt
from enum import Enum
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from autoservice.utils import parse_calendar_date


class BookingStatus(str, Enum):
    """Known booking statuses. The backend may send others; they are kept as-is."""
    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class BookingRecord(BaseModel):
    """One customer service request as returned by the backend.

    Treated as an immutable snapshot; a new fetch replaces the whole list.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    id: Optional[str] = Field(default=None, validation_alias=AliasChoices("id", "_id"))
    customer_name: Optional[str] = Field(default=None, alias="customerName")
    contact: Optional[str] = None
    service: Optional[str] = None
    date: Optional[dt.date] = None
    status: str = BookingStatus.PENDING.value
    vehicle_info: Optional[str] = Field(default=None, alias="vehicleInfo")

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_string(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        return str(value)

    @field_validator("date", mode="before")
    @classmethod
    def _calendar_date(cls, value: Any) -> Optional[dt.date]:
        return parse_calendar_date(value)

    @field_validator("status", mode="before")
    @classmethod
    def _status_value(cls, value: Any) -> str:
        if isinstance(value, BookingStatus):
            return value.value
        return value


class BookingCreate(BaseModel):
    """POST body for a new booking."""

    model_config = ConfigDict(populate_by_name=True)

    customer_name: str = Field(alias="customerName")
    contact: str
    service: str
    vehicle_info: str = Field(alias="vehicleInfo")


class RatingFeedback(BaseModel):
    """Customer rating for a completed booking."""
    booking_id: Optional[str] = None
    rating: int = Field(ge=1, le=5)
    comment: str = ""
