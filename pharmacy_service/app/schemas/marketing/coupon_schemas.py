from datetime import datetime, timezone
from typing import Optional

from pydantic import Field, field_validator

from shared.core.schemas import BaseOut, CamelModel

CODE_PATTERN = r"^[A-Za-z0-9]{3,20}$"


def _in_future(value: Optional[datetime]) -> Optional[datetime]:
    if value is None:
        return value
    compare_to = value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if compare_to <= datetime.now(timezone.utc):
        raise ValueError("expirationDate must be in the future")
    return value


class CouponCreate(CamelModel):
    code: str = Field(..., pattern=CODE_PATTERN)
    discount: int = Field(..., ge=1, le=100)
    min_purchase: int = Field(0, ge=0)
    max_uses: int = Field(..., ge=1, le=1000)
    expiration_date: datetime

    @field_validator("expiration_date")
    @classmethod
    def check_expiration(cls, value):
        return _in_future(value)


class CouponUpdate(CamelModel):
    discount: Optional[int] = Field(None, ge=1, le=100)
    min_purchase: Optional[int] = Field(None, ge=0)
    max_uses: Optional[int] = Field(None, ge=1, le=1000)
    expiration_date: Optional[datetime] = None

    @field_validator("expiration_date")
    @classmethod
    def check_expiration(cls, value):
        return _in_future(value)


class CouponOut(BaseOut):
    code: str
    discount: int
    min_purchase: int
    max_uses: int
    expiration_date: datetime
