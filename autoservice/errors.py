"""Error kinds surfaced by the booking client."""

from typing import Optional


class FetchError(Exception):
    """A remote call did not produce a usable response."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class NetworkError(FetchError):
    """Transport failure: connection refused, DNS, timeout."""


class HttpError(FetchError):
    """Backend answered with a non-2xx status.

    ``backend_message`` is the ``message`` field of the error payload, if
    the backend sent one; ``message`` falls back to the HTTP reason.
    """

    def __init__(
        self, status_code: int, message: str, backend_message: Optional[str] = None,
    ) -> None:
        super().__init__(message, status_code=status_code)
        self.backend_message = backend_message


class FormValidationError(Exception):
    """Client-side form input is invalid; the action is blocked."""

    def __init__(self, errors: dict[str, str]) -> None:
        fields = ", ".join(sorted(errors))
        super().__init__(f"Invalid form fields: {fields}")
        self.errors = dict(errors)
