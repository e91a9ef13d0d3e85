from typing import Optional

from pydantic import Field

from shared.core.schemas import BaseOut, CamelModel


class PresentationCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    quantity: int = Field(..., gt=0)
    measurement_unit: str = Field(..., min_length=1, max_length=50)


class PresentationUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, min_length=1)
    quantity: Optional[int] = Field(None, gt=0)
    measurement_unit: Optional[str] = Field(None, min_length=1, max_length=50)


class PresentationOut(BaseOut):
    name: str
    description: str
    quantity: int
    measurement_unit: str
