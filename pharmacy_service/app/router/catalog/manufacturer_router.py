from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.orm import Session

from shared.core.auth import allow_catalog_manager
from shared.core.database import get_db
from shared.core.schemas import PaginatedResponse
from shared.helpers.pagination_helper import paginate

from ...crud.catalog import manufacturer_crud as crud
from ...schemas.catalog.manufacturer_schemas import (
    ManufacturerCreate, ManufacturerOut, ManufacturerUpdate
)

router = APIRouter(
    prefix="/manufacturer",
    tags=["Manufacturer"],
    dependencies=[Depends(allow_catalog_manager)]
)


@router.post("", response_model=ManufacturerOut, status_code=status.HTTP_201_CREATED)
def create_manufacturer(manufacturer: ManufacturerCreate, db: Session = Depends(get_db)):
    return crud.create_manufacturer(db, manufacturer)


@router.get("", response_model=PaginatedResponse[ManufacturerOut])
def get_manufacturers(
    request: Request,
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1),
    country_id: Optional[UUID] = Query(None, alias="countryId"),
    db: Session = Depends(get_db)
):
    count = crud.count_manufacturers(db, country_id)
    results = crud.get_manufacturers(db, page, limit, country_id)
    return paginate(request, results, page, limit, count, countryId=country_id)


@router.get("/{manufacturer_id}", response_model=ManufacturerOut)
def get_manufacturer(manufacturer_id: UUID, db: Session = Depends(get_db)):
    return crud.get_manufacturer_by_id(db, manufacturer_id)


@router.patch("/{manufacturer_id}", response_model=ManufacturerOut)
def update_manufacturer(manufacturer_id: UUID, manufacturer: ManufacturerUpdate,
                        db: Session = Depends(get_db)):
    return crud.update_manufacturer(db, manufacturer_id, manufacturer)


@router.delete("/{manufacturer_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_manufacturer(manufacturer_id: UUID, db: Session = Depends(get_db)):
    crud.delete_manufacturer(db, manufacturer_id)
