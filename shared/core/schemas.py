from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Generic, List, Optional, TypeVar
from uuid import UUID
from datetime import datetime

# Shared properties
T = TypeVar("T")


class CamelModel(BaseModel):
    """Base schema: snake_case in Python, camelCase on the wire."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class UUIDBaseOut(CamelModel):
    id: UUID


class BaseOut(UUIDBaseOut):
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None


class UserToken(BaseModel):
    email: str
    sub: str
    exp: Optional[int] = None


class PaginatedResponse(BaseModel, Generic[T]):
    results: List[T]
    count: int
    next: Optional[str] = None
    previous: Optional[str] = None


class JsonOutResult(BaseModel, Generic[T]):
    data: Optional[T] = None
    status: str
    status_code: str
    message: str
