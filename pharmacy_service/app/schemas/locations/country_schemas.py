from typing import Optional

from pydantic import Field

from shared.core.schemas import BaseOut, CamelModel


class CountryBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)


class CountryCreate(CountryBase):
    pass


class CountryUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)


class CountryOut(CountryBase, BaseOut):
    pass
