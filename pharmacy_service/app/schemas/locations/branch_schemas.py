from typing import Optional
from uuid import UUID

from pydantic import Field, field_validator

from shared.core.schemas import BaseOut, CamelModel
from .city_schemas import CityOut


def _max_six_decimals(value: Optional[float]) -> Optional[float]:
    if value is not None and round(value, 6) != value:
        raise ValueError("must have at most 6 decimal places")
    return value


class BranchCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    address: str = Field(..., min_length=1, max_length=255)
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    city_id: UUID

    @field_validator("latitude", "longitude")
    @classmethod
    def check_coordinates(cls, value):
        return _max_six_decimals(value)


class BranchUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    address: Optional[str] = Field(None, min_length=1, max_length=255)
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)
    city_id: Optional[UUID] = None

    @field_validator("latitude", "longitude")
    @classmethod
    def check_coordinates(cls, value):
        return _max_six_decimals(value)


class BranchOut(BaseOut):
    name: str
    address: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    city_id: UUID
    city: Optional[CityOut] = None
