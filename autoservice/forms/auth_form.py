"""
Sign-in / sign-up form.

Field edits go through a pure reducer over tagged actions, so the form
state is only ever replaced, never mutated in place. The controller
around it handles mode switching, validation and the remote call.
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from autoservice.api.auth import sign_in, sign_up
from autoservice.api.client import ApiClient
from autoservice.errors import FetchError, HttpError
from autoservice.forms.validators import is_email_valid, is_password_long_enough
from autoservice.schemas.user_schema import AuthResponse, SignInRequest, SignUpRequest
from autoservice.state import AppState

logger = logging.getLogger(__name__)

SERVICES_ROUTE = "/services"
HTTP_ERROR_FALLBACK = "An error occurred"
NETWORK_ERROR_MESSAGE = (
    "An error occurred while processing your request. Please try again later."
)
SUCCESS_FALLBACK = "Operation successful"


class AuthActionType(str, Enum):
    SET_EMAIL = "SET_EMAIL"
    SET_FIRSTNAME = "SET_FIRSTNAME"
    SET_LASTNAME = "SET_LASTNAME"
    SET_PASSWORD = "SET_PASSWORD"
    RESET = "RESET"


class AuthMode(str, Enum):
    SIGN_IN = "Sign In"
    SIGN_UP = "Sign Up"


@dataclass(frozen=True)
class AuthAction:
    type: AuthActionType
    payload: str = ""


@dataclass(frozen=True)
class AuthFormState:
    email: str = ""
    firstname: str = ""
    lastname: str = ""
    password: str = ""


INITIAL_STATE = AuthFormState()

_FIELD_FOR_ACTION: dict[AuthActionType, str] = {
    AuthActionType.SET_EMAIL: "email",
    AuthActionType.SET_FIRSTNAME: "firstname",
    AuthActionType.SET_LASTNAME: "lastname",
    AuthActionType.SET_PASSWORD: "password",
}


def reduce(state: AuthFormState, action: AuthAction) -> AuthFormState:
    """
    Apply one action and return the next state.

    Raises:
        ValueError: If the action type is not one of ``AuthActionType``.
    """
    try:
        action_type = AuthActionType(action.type)
    except ValueError:
        raise ValueError(f"Unknown auth form action: {action.type!r}") from None
    if action_type is AuthActionType.RESET:
        return INITIAL_STATE
    return replace(state, **{_FIELD_FOR_ACTION[action_type]: action.payload})


def validate(state: AuthFormState, mode: AuthMode) -> dict[str, str]:
    """Per-field error messages; empty when the form may be submitted."""
    errors: dict[str, str] = {}
    if not state.email:
        errors["email"] = "Email is required"
    elif not is_email_valid(state.email):
        errors["email"] = "Please enter a valid email address"

    if not state.password:
        errors["password"] = "Password is required"
    elif not is_password_long_enough(state.password):
        errors["password"] = "Password must be at least 6 characters"

    if mode is AuthMode.SIGN_UP:
        if not state.firstname:
            errors["firstname"] = "First name is required"
        if not state.lastname:
            errors["lastname"] = "Last name is required"
    return errors


class AuthFormController:
    """Login/signup modal bound to the shared ``AppState``."""

    def __init__(
        self,
        client: ApiClient,
        app_state: AppState,
        mode: AuthMode = AuthMode.SIGN_IN,
    ) -> None:
        self.client = client
        self.app_state = app_state
        self.mode = AuthMode(mode)
        self.state = INITIAL_STATE
        self.errors: dict[str, str] = {}
        self.loading = False
        self.response_message = ""
        self.is_open = True
        self.redirect: Optional[str] = None

    def dispatch(self, action: AuthAction) -> AuthFormState:
        self.state = reduce(self.state, action)
        return self.state

    def toggle_mode(self) -> AuthMode:
        """Switch between Sign In and Sign Up, clearing everything entered."""
        self.mode = AuthMode.SIGN_UP if self.mode is AuthMode.SIGN_IN else AuthMode.SIGN_IN
        self.dispatch(AuthAction(AuthActionType.RESET))
        self.errors = {}
        self.response_message = ""
        return self.mode

    def _build_request(self) -> SignInRequest:
        email = self.state.email.strip()
        password = self.state.password.strip()
        if self.mode is AuthMode.SIGN_UP:
            return SignUpRequest(
                email=email,
                password=password,
                first_name=self.state.firstname.strip(),
                last_name=self.state.lastname.strip(),
            )
        return SignInRequest(email=email, password=password)

    def submit(self) -> bool:
        """
        Validate and post the credentials.

        Returns True on success. Validation failures fill ``errors``;
        remote failures fill ``response_message``. Neither raises.
        """
        self.response_message = ""
        errors = validate(self.state, self.mode)
        if errors:
            self.errors = errors
            logger.debug("%s blocked; invalid fields: %s", self.mode.value, ", ".join(errors))
            return False
        self.errors = {}
        self.loading = True

        request = self._build_request()
        try:
            if self.mode is AuthMode.SIGN_IN:
                response = sign_in(self.client, request)
            else:
                response = sign_up(self.client, request)
        except HttpError as exc:
            self.response_message = exc.backend_message or HTTP_ERROR_FALLBACK
            logger.warning("%s rejected (%s): %s", self.mode.value, exc.status_code, exc.message)
            return False
        except FetchError as exc:
            self.response_message = NETWORK_ERROR_MESSAGE
            logger.error("%s failed: %s", self.mode.value, exc.message)
            return False
        finally:
            self.loading = False

        self._on_success(response)
        return True

    def _on_success(self, response: AuthResponse) -> None:
        self.app_state.sign_in(response.user_id)
        self.response_message = "Success: " + (response.message or SUCCESS_FALLBACK)
        if self.mode is AuthMode.SIGN_IN:
            self.redirect = SERVICES_ROUTE
        self.is_open = False
