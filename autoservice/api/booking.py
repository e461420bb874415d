"""
Booking endpoints: collection reads and booking creation.

Reads never raise for remote failures; they return a ``FetchResult``
the calling view turns into its Ready or Error state.
"""

import logging
import time
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, ValidationError

from autoservice.api.client import ApiClient
from autoservice.errors import FetchError
from autoservice.schemas.booking_schema import BookingCreate, BookingRecord

logger = logging.getLogger(__name__)

BOOKINGS_ENDPOINT = "/api/booking"


def user_bookings_endpoint(user_id: str) -> str:
    return f"{BOOKINGS_ENDPOINT}/user/{user_id}"


class FetchResult(BaseModel):
    """Result of fetching one booking collection."""

    endpoint: str
    fetched_at_utc: str  # ISO 8601
    status: str  # SUCCESS | FAILURE
    error_kind: Optional[str] = None  # NetworkError | HttpError | FetchError
    status_code: Optional[int] = None
    error: Optional[str] = None
    duration_seconds: Optional[float] = None
    items: list[BookingRecord] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status == "SUCCESS"


def _parse_collection(payload: object, endpoint: str) -> list[BookingRecord]:
    if not isinstance(payload, list):
        raise FetchError(f"Expected a list of bookings from {endpoint}, got {type(payload).__name__}")
    try:
        return [BookingRecord.model_validate(item) for item in payload]
    except ValidationError as exc:
        raise FetchError(f"Malformed booking record from {endpoint}: {exc.error_count()} error(s)") from exc


def fetch_collection(client: ApiClient, endpoint: str) -> FetchResult:
    """
    Fetch a whole booking collection in one read.

    Args:
        client: API client bound to the backend.
        endpoint: Path such as ``/api/booking``.

    Returns:
        FetchResult with ``items`` on success, or the error details on failure.
    """
    fetched_at_utc = datetime.now(timezone.utc).isoformat()
    start_time = time.monotonic()
    try:
        payload = client.get_json(endpoint)
        items = _parse_collection(payload, endpoint)
    except FetchError as exc:
        logger.error("Failed to fetch bookings from %s: %s", endpoint, exc.message)
        return FetchResult(
            endpoint=endpoint,
            fetched_at_utc=fetched_at_utc,
            status="FAILURE",
            error_kind=type(exc).__name__,
            status_code=exc.status_code,
            error=exc.message,
            duration_seconds=time.monotonic() - start_time,
        )

    logger.info("Fetched %d bookings from %s", len(items), endpoint)
    return FetchResult(
        endpoint=endpoint,
        fetched_at_utc=fetched_at_utc,
        status="SUCCESS",
        duration_seconds=time.monotonic() - start_time,
        items=items,
    )


def fetch_all_bookings(client: ApiClient) -> FetchResult:
    """Admin read: every booking."""
    return fetch_collection(client, BOOKINGS_ENDPOINT)


def fetch_user_bookings(client: ApiClient, user_id: str) -> FetchResult:
    """Customer read: bookings scoped to one user."""
    return fetch_collection(client, user_bookings_endpoint(user_id))


def create_booking(client: ApiClient, booking: BookingCreate) -> BookingRecord:
    """Submit a new booking and return the created record.

    Raises:
        NetworkError, HttpError: propagated for the form to report.
        FetchError: the reply was not a booking record.
    """
    data = client.post_json(BOOKINGS_ENDPOINT, booking.model_dump(by_alias=True))
    try:
        record = BookingRecord.model_validate(data)
    except ValidationError as exc:
        raise FetchError("Malformed booking returned by backend") from exc
    logger.info("Booking created: %s for %s (%s)", record.id, booking.customer_name, booking.service)
    return record
