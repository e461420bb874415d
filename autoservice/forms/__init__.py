from autoservice.forms.auth_form import (
    AuthAction,
    AuthActionType,
    AuthFormController,
    AuthFormState,
    AuthMode,
    reduce,
    validate,
)
from autoservice.forms.booking_form import BookingFormController, FieldDefinition, ModalState
from autoservice.forms.validators import is_contact_number_valid, is_email_valid

__all__ = [
    "AuthAction",
    "AuthActionType",
    "AuthFormController",
    "AuthFormState",
    "AuthMode",
    "reduce",
    "validate",
    "BookingFormController",
    "FieldDefinition",
    "ModalState",
    "is_contact_number_valid",
    "is_email_valid",
]
