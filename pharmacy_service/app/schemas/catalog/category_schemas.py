from typing import Optional

from pydantic import Field

from shared.core.schemas import BaseOut, CamelModel


class CategoryCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1, max_length=255)


class CategoryUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, min_length=1, max_length=255)


class CategoryOut(BaseOut):
    name: str
    description: str
