from typing import Optional
from uuid import UUID

from pydantic import Field

from shared.core.schemas import BaseOut, CamelModel
from .country_schemas import CountryOut


class StateCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    country_id: UUID


class StateUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    country_id: Optional[UUID] = None


class StateOut(BaseOut):
    name: str
    country_id: UUID
    country: Optional[CountryOut] = None
