from datetime import datetime, timezone
from typing import Optional

from pydantic import Field, model_validator

from shared.core.schemas import BaseOut, CamelModel


def _as_utc(value: datetime) -> datetime:
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


def _ends_before_start(start_at: datetime, expired_at: datetime) -> bool:
    return _as_utc(expired_at) <= _as_utc(start_at)


class PromoCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    discount: int = Field(..., ge=1, le=100)
    start_at: datetime
    expired_at: datetime

    @model_validator(mode="after")
    def check_dates(self):
        if _ends_before_start(self.start_at, self.expired_at):
            raise ValueError("expiredAt must be after startAt")
        return self


class PromoUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    discount: Optional[int] = Field(None, ge=1, le=100)
    start_at: Optional[datetime] = None
    expired_at: Optional[datetime] = None

    @model_validator(mode="after")
    def check_dates(self):
        if self.start_at and self.expired_at and _ends_before_start(self.start_at, self.expired_at):
            raise ValueError("expiredAt must be after startAt")
        return self


class PromoOut(BaseOut):
    name: str
    discount: int
    start_at: datetime
    expired_at: datetime
