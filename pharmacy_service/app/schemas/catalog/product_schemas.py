from datetime import date
from typing import List, Optional
from uuid import UUID

from pydantic import Field

from shared.core.schemas import BaseOut, CamelModel
from .category_schemas import CategoryOut
from .presentation_schemas import PresentationOut


class ProductPresentationCreate(CamelModel):
    presentation_id: UUID
    price: int = Field(..., ge=0)


class ProductPresentationUpdate(CamelModel):
    presentation_id: Optional[UUID] = None
    price: Optional[int] = Field(None, ge=0)


class ProductCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    generic_name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    priority: int
    manufacturer: UUID
    category_ids: List[UUID] = []
    image_urls: List[str] = []
    presentations: List[ProductPresentationCreate] = []


class ProductUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    generic_name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    priority: Optional[int] = None
    manufacturer: Optional[UUID] = None
    category_ids: Optional[List[UUID]] = None


class ProductImageCreate(CamelModel):
    url: str = Field(..., min_length=1, max_length=1024)


class LotCreate(CamelModel):
    expiration_date: date


class ManufacturerSummary(BaseOut):
    name: str
    description: Optional[str] = None


class ProductImageOut(BaseOut):
    url: str


class LotOut(BaseOut):
    expiration_date: date


class ProductOut(BaseOut):
    name: str
    generic_name: str
    description: Optional[str] = None
    priority: int
    manufacturer: Optional[ManufacturerSummary] = None
    images: List[ProductImageOut] = []
    categories: List[CategoryOut] = []


class ProductDetailOut(ProductOut):
    presentations: List["ProductPresentationSummary"] = []


class ProductPresentationSummary(BaseOut):
    price: int
    presentation: PresentationOut


class ProductPresentationOut(BaseOut):
    price: int
    presentation: PresentationOut
    product: ProductOut
    lots: List[LotOut] = []


ProductDetailOut.model_rebuild()
