from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.orm import Session

from shared.core.auth import allow_admin
from shared.core.database import get_db
from shared.core.schemas import PaginatedResponse
from shared.helpers.pagination_helper import paginate

from ...crud.locations import state_crud as crud
from ...schemas.locations.state_schemas import StateCreate, StateOut, StateUpdate

router = APIRouter(prefix="/state", tags=["State"])


@router.post("", response_model=StateOut, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(allow_admin)])
def create_state(state: StateCreate, db: Session = Depends(get_db)):
    return crud.create_state(db, state)


@router.get("", response_model=PaginatedResponse[StateOut])
def get_states(
    request: Request,
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1),
    country_id: Optional[UUID] = Query(None, alias="countryId"),
    db: Session = Depends(get_db)
):
    count = crud.count_states(db, country_id)
    results = crud.get_states(db, page, limit, country_id)
    return paginate(request, results, page, limit, count, countryId=country_id)


@router.get("/{state_id}", response_model=StateOut)
def get_state(state_id: UUID, db: Session = Depends(get_db)):
    return crud.get_state_by_id(db, state_id)


@router.patch("/{state_id}", response_model=StateOut,
              dependencies=[Depends(allow_admin)])
def update_state(state_id: UUID, state: StateUpdate, db: Session = Depends(get_db)):
    return crud.update_state(db, state_id, state)


@router.delete("/{state_id}", status_code=status.HTTP_204_NO_CONTENT,
               dependencies=[Depends(allow_admin)])
def delete_state(state_id: UUID, db: Session = Depends(get_db)):
    crud.delete_state(db, state_id)
