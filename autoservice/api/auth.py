"""
Sign-in and sign-up endpoints.

The session protocol belongs to the backend; the client only posts
credentials and keeps the opaque ``userId`` it gets back.
"""

import logging

from pydantic import ValidationError

from autoservice.api.client import ApiClient
from autoservice.errors import FetchError
from autoservice.schemas.user_schema import AuthResponse, SignInRequest, SignUpRequest

logger = logging.getLogger(__name__)

SIGN_IN_ENDPOINT = "/api/auth"
SIGN_UP_ENDPOINT = "/api/users"


def _auth_response(data: object) -> AuthResponse:
    try:
        return AuthResponse.model_validate(data)
    except ValidationError as exc:
        raise FetchError("Malformed authentication response") from exc


def sign_in(client: ApiClient, request: SignInRequest) -> AuthResponse:
    """Authenticate an existing user. HTTP and network errors propagate."""
    response = _auth_response(client.post_json(SIGN_IN_ENDPOINT, request.model_dump()))
    logger.info("Sign-in succeeded for %s", request.email)
    return response


def sign_up(client: ApiClient, request: SignUpRequest) -> AuthResponse:
    """Create an account. HTTP and network errors propagate."""
    response = _auth_response(
        client.post_json(SIGN_UP_ENDPOINT, request.model_dump(by_alias=True))
    )
    logger.info("Sign-up succeeded for %s", request.email)
    return response
