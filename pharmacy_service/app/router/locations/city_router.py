from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.orm import Session

from shared.core.auth import allow_admin
from shared.core.database import get_db
from shared.core.schemas import PaginatedResponse
from shared.helpers.pagination_helper import paginate

from ...crud.locations import city_crud as crud
from ...schemas.locations.city_schemas import CityCreate, CityOut, CityUpdate

router = APIRouter(prefix="/city", tags=["City"])


@router.post("", response_model=CityOut, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(allow_admin)])
def create_city(city: CityCreate, db: Session = Depends(get_db)):
    return crud.create_city(db, city)


@router.get("", response_model=PaginatedResponse[CityOut])
def get_cities(
    request: Request,
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1),
    state_id: Optional[UUID] = Query(None, alias="stateId"),
    db: Session = Depends(get_db)
):
    count = crud.count_cities(db, state_id)
    results = crud.get_cities(db, page, limit, state_id)
    return paginate(request, results, page, limit, count, stateId=state_id)


@router.get("/{city_id}", response_model=CityOut)
def get_city(city_id: UUID, db: Session = Depends(get_db)):
    return crud.get_city_by_id(db, city_id)


@router.patch("/{city_id}", response_model=CityOut,
              dependencies=[Depends(allow_admin)])
def update_city(city_id: UUID, city: CityUpdate, db: Session = Depends(get_db)):
    return crud.update_city(db, city_id, city)


@router.delete("/{city_id}", status_code=status.HTTP_204_NO_CONTENT,
               dependencies=[Depends(allow_admin)])
def delete_city(city_id: UUID, db: Session = Depends(get_db)):
    crud.delete_city(db, city_id)
