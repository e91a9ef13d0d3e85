from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.orm import Session

from shared.core.auth import allow_admin
from shared.core.database import get_db
from shared.core.schemas import PaginatedResponse
from shared.helpers.pagination_helper import paginate

from ...crud.locations import country_crud as crud
from ...schemas.locations.country_schemas import CountryCreate, CountryOut, CountryUpdate

router = APIRouter(prefix="/country", tags=["Country"])


@router.post("", response_model=CountryOut, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(allow_admin)])
def create_country(country: CountryCreate, db: Session = Depends(get_db)):
    return crud.create_country(db, country)


@router.get("", response_model=PaginatedResponse[CountryOut])
def get_countries(
    request: Request,
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1),
    db: Session = Depends(get_db)
):
    count = crud.count_countries(db)
    results = crud.get_countries(db, page, limit)
    return paginate(request, results, page, limit, count)


@router.get("/{country_id}", response_model=CountryOut)
def get_country(country_id: UUID, db: Session = Depends(get_db)):
    return crud.get_country_by_id(db, country_id)


@router.patch("/{country_id}", response_model=CountryOut,
              dependencies=[Depends(allow_admin)])
def update_country(country_id: UUID, country: CountryUpdate, db: Session = Depends(get_db)):
    return crud.update_country(db, country_id, country)


@router.delete("/{country_id}", status_code=status.HTTP_204_NO_CONTENT,
               dependencies=[Depends(allow_admin)])
def delete_country(country_id: UUID, db: Session = Depends(get_db)):
    crud.delete_country(db, country_id)
