from typing import Optional

from pydantic import Field

from shared.core.schemas import BaseOut, CamelModel


class EmailTemplateCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    html: str = Field(..., min_length=1)
    text: Optional[str] = None


class EmailTemplateUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    html: Optional[str] = Field(None, min_length=1)
    text: Optional[str] = None


class EmailTemplateOut(BaseOut):
    name: str
    html: str
    text: str
