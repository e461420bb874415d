"""Authentication request/response models."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SignInRequest(BaseModel):
    """Credentials posted to /api/auth."""
    email: str
    password: str


class SignUpRequest(SignInRequest):
    """New account posted to /api/users."""

    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")


class AuthResponse(BaseModel):
    """Backend reply to a successful sign-in or sign-up."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    user_id: Optional[str] = Field(default=None, alias="userId")
    message: Optional[str] = None

    @field_validator("user_id", mode="before")
    @classmethod
    def _id_as_string(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        return str(value)
