from typing import Optional
from uuid import UUID

from pydantic import Field

from shared.core.schemas import BaseOut, CamelModel
from .state_schemas import StateOut


class CityCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    state_id: UUID


class CityUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    state_id: Optional[UUID] = None


class CityOut(BaseOut):
    name: str
    state_id: UUID
    state: Optional[StateOut] = None
