from pydantic import EmailStr, field_validator

from shared.core.schemas import CamelModel
from .user_schemas import PasswordIn


def _normalize(value):
    return value.strip().lower() if isinstance(value, str) else value


class LoginRequest(PasswordIn):
    email: EmailStr

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value):
        return _normalize(value)


class LoginResponse(CamelModel):
    access_token: str


class ForgotPasswordRequest(CamelModel):
    email: EmailStr

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value):
        return _normalize(value)
