from typing import Optional
from uuid import UUID

from pydantic import Field

from shared.core.schemas import BaseOut, CamelModel
from ..locations.country_schemas import CountryOut


class ManufacturerCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    country_id: UUID


class ManufacturerUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    country_id: Optional[UUID] = None


class ManufacturerOut(BaseOut):
    name: str
    description: Optional[str] = None
    country_id: UUID
    country: Optional[CountryOut] = None
