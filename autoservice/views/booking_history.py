"""Customer screen: the signed-in user's own bookings."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from autoservice.api.booking import FetchResult, fetch_user_bookings, user_bookings_endpoint
from autoservice.api.client import ApiClient
from autoservice.errors import FormValidationError
from autoservice.logging_context import get_view_logger
from autoservice.schemas.booking_schema import BookingRecord, BookingStatus, RatingFeedback
from autoservice.state import AppState
from autoservice.views.base import ListViewController

logger = get_view_logger(__name__)

MIN_RATING = 1
MAX_RATING = 5


@dataclass
class RatingPrompt:
    """Rating popup offered for a completed booking."""
    booking: BookingRecord
    is_open: bool = True


class BookingHistoryView(ListViewController):
    """
    Controller for the booking-history modal.

    The user is identified by the ``userId`` persisted at sign-in. The
    fetched list is published to the shared ``AppState``.
    """

    def __init__(
        self,
        client: ApiClient,
        app_state: AppState,
        *,
        items_per_page: Optional[int] = None,
    ) -> None:
        super().__init__(client, items_per_page=items_per_page)
        self.app_state = app_state
        self.rating_prompt: Optional[RatingPrompt] = None
        self.feedback: list[RatingFeedback] = []

    def _fetch(self) -> FetchResult:
        user_id = self.app_state.user_id
        if not user_id:
            logger.warning("No userId stored; sign in to see booking history")
            return FetchResult(
                endpoint=user_bookings_endpoint("<none>"),
                fetched_at_utc=datetime.now(timezone.utc).isoformat(),
                status="FAILURE",
                error_kind="FetchError",
                error="Not signed in",
            )
        return fetch_user_bookings(self.client, user_id)

    def _on_loaded(self, records: list[BookingRecord]) -> None:
        self.app_state.set_bookings(records)
        completed = next(
            (r for r in records if r.status == BookingStatus.COMPLETED.value), None,
        )
        if completed is not None:
            self.rating_prompt = RatingPrompt(booking=completed)
            logger.debug("Rating prompt opened for booking %s", completed.id)

    def deactivate(self) -> None:
        self.rating_prompt = None
        super().deactivate()

    def dismiss_rating(self) -> None:
        if self.rating_prompt is not None:
            self.rating_prompt.is_open = False
            self._notify()

    def submit_rating(self, rating: int, comment: str = "") -> RatingFeedback:
        """
        Record the customer's rating for the prompted booking and close the prompt.

        Raises:
            FormValidationError: If no prompt is open or rating is outside 1..5.
        """
        if self.rating_prompt is None or not self.rating_prompt.is_open:
            raise FormValidationError({"rating": "There is no completed booking to rate"})
        if not MIN_RATING <= rating <= MAX_RATING:
            raise FormValidationError(
                {"rating": f"Rating must be between {MIN_RATING} and {MAX_RATING}"}
            )

        feedback = RatingFeedback(
            booking_id=self.rating_prompt.booking.id,
            rating=rating,
            comment=comment.strip(),
        )
        self.feedback.append(feedback)
        logger.info("Rating %d recorded for booking %s", rating, feedback.booking_id)
        self.rating_prompt.is_open = False
        self._notify()
        return feedback
