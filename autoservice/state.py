"""Application state shared across views and forms."""

import logging
from dataclasses import dataclass, field
from typing import Optional

from autoservice.schemas.booking_schema import BookingRecord
from autoservice.storage import USER_ID_KEY, LocalStorage

logger = logging.getLogger(__name__)


@dataclass
class AppState:
    """
    Cross-screen state passed explicitly to every view and form.

    Holds the logged-in flag and the customer's booking list (published by
    the history view). The opaque ``userId`` lives in ``storage`` so it
    survives restarts; everything else is per process.
    """
    storage: LocalStorage = field(default_factory=LocalStorage)
    is_logged_in: bool = False
    _bookings: tuple[BookingRecord, ...] = ()

    def __post_init__(self) -> None:
        if self.user_id:
            self.is_logged_in = True

    @property
    def user_id(self) -> Optional[str]:
        return self.storage.get_item(USER_ID_KEY)

    @property
    def bookings(self) -> tuple[BookingRecord, ...]:
        return self._bookings

    def set_bookings(self, bookings: list[BookingRecord]) -> None:
        """Replace the shared booking list wholesale."""
        self._bookings = tuple(bookings)

    def sign_in(self, user_id: Optional[str]) -> None:
        self.is_logged_in = True
        if user_id:
            self.storage.set_item(USER_ID_KEY, user_id)
        logger.info("Signed in (userId stored: %s)", bool(user_id))

    def sign_out(self) -> None:
        self.is_logged_in = False
        self.storage.remove_item(USER_ID_KEY)
        self._bookings = ()
        logger.info("Signed out")
