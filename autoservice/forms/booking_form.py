"""
Booking form with a two-step gate: Validate -> Confirm.

The booking is only posted after the customer has reviewed the entered
details in the confirmation modal and confirmed them.

Usage:
    form = BookingFormController(client)
    form.update("customer_name", "Jane Doe")
    ...
    if form.open_confirmation():
        summary = form.get_confirmation_summary()
        # ... customer confirms ...
        form.confirm()
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from autoservice.api.booking import create_booking
from autoservice.api.client import ApiClient
from autoservice.errors import FetchError, FormValidationError
from autoservice.forms.validators import is_contact_number_valid, is_filled
from autoservice.schemas.booking_schema import BookingCreate, BookingRecord

logger = logging.getLogger(__name__)

SUBMIT_ERROR_MESSAGE = (
    "An error occurred while processing your request. Please try again later."
)


@dataclass(frozen=True)
class FieldDefinition:
    """Schema for a single form field."""

    name: str
    label: str
    required: bool = True
    validator: Optional[Callable[[str], bool]] = None
    invalid_message: str = ""


@dataclass
class ModalState:
    """The review modal and the booking-confirmed modal."""
    is_open: bool = False
    is_booking_confirmed: bool = False

    @property
    def any_open(self) -> bool:
        return self.is_open or self.is_booking_confirmed


class BookingFormController:
    """
    Collects a new booking and posts it once the customer confirms.

    Remote failures never escape ``confirm``: they become
    ``error_message`` and the entered values are kept for another try.
    """

    FIELD_DEFINITIONS: list[FieldDefinition] = [
        FieldDefinition(name="customer_name", label="Full Name"),
        FieldDefinition(
            name="contact",
            label="Contact Number",
            validator=is_contact_number_valid,
            invalid_message="Please enter a valid contact number (10-15 digits)",
        ),
        FieldDefinition(name="service", label="Service"),
        FieldDefinition(name="vehicle_info", label="Service Info"),
    ]

    def __init__(self, client: ApiClient) -> None:
        self.client = client
        self.values: dict[str, str] = {defn.name: "" for defn in self.FIELD_DEFINITIONS}
        self.modal = ModalState()
        self.error_message: Optional[str] = None
        self.last_booking: Optional[BookingRecord] = None

    def _get_definition(self, name: str) -> FieldDefinition:
        for defn in self.FIELD_DEFINITIONS:
            if defn.name == name:
                return defn
        raise ValueError(f"Unknown field: {name}")

    def update(self, name: str, value: str) -> None:
        self._get_definition(name)
        self.values[name] = value

    def errors(self) -> dict[str, str]:
        """Per-field error messages for the current values; empty when valid."""
        errors: dict[str, str] = {}
        for defn in self.FIELD_DEFINITIONS:
            value = self.values[defn.name]
            if not is_filled(value):
                if defn.required:
                    errors[defn.name] = f"{defn.label} is required"
                continue
            if defn.validator and not defn.validator(value.strip()):
                errors[defn.name] = defn.invalid_message or f"{defn.label} is invalid"
        return errors

    def is_valid(self) -> bool:
        return not self.errors()

    def open_confirmation(self) -> bool:
        """Show the review modal. Refused while any field is invalid."""
        errors = self.errors()
        if errors:
            logger.debug("Confirmation blocked; invalid fields: %s", ", ".join(errors))
            return False
        self.error_message = None
        self.modal.is_open = True
        return True

    def get_confirmation_summary(self) -> str:
        """Read-back text shown in the review modal."""
        lines = [
            f"  {defn.label}: {self.values[defn.name].strip()}"
            for defn in self.FIELD_DEFINITIONS
        ]
        return "Please confirm your booking:\n" + "\n".join(lines)

    def cancel(self) -> None:
        self.modal.is_open = False

    def build_request(self) -> BookingCreate:
        """
        Build the POST body from the trimmed values.

        Raises:
            FormValidationError: If any field is missing or invalid.
        """
        errors = self.errors()
        if errors:
            raise FormValidationError(errors)
        return BookingCreate(**{name: value.strip() for name, value in self.values.items()})

    def confirm(self) -> Optional[BookingRecord]:
        """
        Post the booking. On success the form is cleared and the
        booking-confirmed modal opens; on failure the values are kept.
        """
        request = self.build_request()
        try:
            booking = create_booking(self.client, request)
        except FetchError as exc:
            logger.error("Booking submission failed: %s", exc.message)
            self.error_message = SUBMIT_ERROR_MESSAGE
            return None

        self.last_booking = booking
        self.error_message = None
        self.reset()
        self.modal = ModalState(is_open=False, is_booking_confirmed=True)
        logger.info("Booking %s created for %s", booking.id, booking.customer_name)
        return booking

    def close_confirmation(self) -> None:
        self.modal.is_booking_confirmed = False

    def reset(self) -> None:
        self.values = {defn.name: "" for defn in self.FIELD_DEFINITIONS}
