from datetime import date, datetime
from typing import Optional
from uuid import UUID

from dateutil.relativedelta import relativedelta
from pydantic import EmailStr, Field, field_validator

from shared.core.schemas import BaseOut, CamelModel
from shared.utils.enums import UserGender, UserRole

MINIMUM_AGE = 14


class PasswordIn(CamelModel):
    password: str = Field(..., min_length=8, max_length=255)

    @field_validator("password", mode="before")
    @classmethod
    def strip_password(cls, value):
        return value.strip() if isinstance(value, str) else value


class UserBase(CamelModel):
    first_name: str = Field(..., min_length=1, max_length=255)
    last_name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    document_id: str = Field(..., min_length=1, max_length=255)
    phone_number: Optional[str] = Field(None, max_length=50)

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value):
        return value.strip().lower() if isinstance(value, str) else value


class UserSignup(UserBase, PasswordIn):
    birth_date: date
    gender: Optional[UserGender] = None

    @field_validator("birth_date")
    @classmethod
    def check_minimum_age(cls, value: date):
        if value > date.today() - relativedelta(years=MINIMUM_AGE):
            raise ValueError(
                f"user must be at least {MINIMUM_AGE} years old")
        return value


class UserCreate(UserSignup):
    role: UserRole = UserRole.CUSTOMER
    branch_id: Optional[UUID] = None


class UserUpdate(CamelModel):
    first_name: Optional[str] = Field(None, min_length=1, max_length=255)
    last_name: Optional[str] = Field(None, min_length=1, max_length=255)
    phone_number: Optional[str] = Field(None, max_length=50)
    role: Optional[UserRole] = None
    branch_id: Optional[UUID] = None


class ProfileOut(CamelModel):
    birth_date: date
    gender: Optional[UserGender] = None
    profile_picture: Optional[str] = None


class UserOut(BaseOut):
    first_name: str
    last_name: str
    email: str
    document_id: str
    phone_number: Optional[str] = None
    role: UserRole
    is_validated: bool
    last_order_date: Optional[datetime] = None
    branch_id: Optional[UUID] = None


class UserListOut(UserOut):
    profile: Optional[ProfileOut] = None


class UserProfileOut(CamelModel):
    first_name: str
    last_name: str
    email: str
    document_id: str
    phone_number: Optional[str] = None
    birth_date: Optional[date] = None
    gender: Optional[UserGender] = None
    profile_picture: Optional[str] = None
    role: UserRole


class OtpIn(CamelModel):
    otp: str = Field(..., min_length=6, max_length=6)
