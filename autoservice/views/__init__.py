from autoservice.views.base import ListViewController, ViewSnapshot
from autoservice.views.booked_services import BookedServicesView
from autoservice.views.booking_history import BookingHistoryView, RatingPrompt
from autoservice.views.state_machine import (
    InvalidTransitionError,
    ViewState,
    ViewStateMachine,
    ViewTrigger,
)

__all__ = [
    "ListViewController",
    "ViewSnapshot",
    "BookedServicesView",
    "BookingHistoryView",
    "RatingPrompt",
    "ViewStateMachine",
    "ViewState",
    "ViewTrigger",
    "InvalidTransitionError",
]
