from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.orm import Session

from shared.core.auth import allow_catalog_manager
from shared.core.database import get_db
from shared.core.schemas import PaginatedResponse
from shared.helpers.pagination_helper import paginate

from ...crud.catalog import presentation_crud as crud
from ...schemas.catalog.presentation_schemas import (
    PresentationCreate, PresentationOut, PresentationUpdate
)

router = APIRouter(
    prefix="/presentation",
    tags=["Presentation"],
    dependencies=[Depends(allow_catalog_manager)]
)


@router.post("", response_model=PresentationOut, status_code=status.HTTP_201_CREATED)
def create_presentation(presentation: PresentationCreate, db: Session = Depends(get_db)):
    return crud.create_presentation(db, presentation)


@router.get("", response_model=PaginatedResponse[PresentationOut])
def get_presentations(
    request: Request,
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1),
    db: Session = Depends(get_db)
):
    count = crud.count_presentations(db)
    results = crud.get_presentations(db, page, limit)
    return paginate(request, results, page, limit, count)


@router.get("/{presentation_id}", response_model=PresentationOut)
def get_presentation(presentation_id: UUID, db: Session = Depends(get_db)):
    return crud.get_presentation_by_id(db, presentation_id)


@router.patch("/{presentation_id}", response_model=PresentationOut)
def update_presentation(presentation_id: UUID, presentation: PresentationUpdate,
                        db: Session = Depends(get_db)):
    return crud.update_presentation(db, presentation_id, presentation)


@router.delete("/{presentation_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_presentation(presentation_id: UUID, db: Session = Depends(get_db)):
    crud.delete_presentation(db, presentation_id)
