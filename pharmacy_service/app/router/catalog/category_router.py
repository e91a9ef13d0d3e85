from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.orm import Session

from shared.core.auth import allow_catalog_manager
from shared.core.database import get_db
from shared.core.schemas import PaginatedResponse
from shared.helpers.pagination_helper import paginate

from ...crud.catalog import category_crud as crud
from ...schemas.catalog.category_schemas import CategoryCreate, CategoryOut, CategoryUpdate

router = APIRouter(prefix="/category", tags=["Category"])


@router.post("", response_model=CategoryOut, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(allow_catalog_manager)])
def create_category(category: CategoryCreate, db: Session = Depends(get_db)):
    return crud.create_category(db, category)


@router.get("", response_model=PaginatedResponse[CategoryOut])
def get_categories(
    request: Request,
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1),
    db: Session = Depends(get_db)
):
    count = crud.count_categories(db)
    results = crud.get_categories(db, page, limit)
    return paginate(request, results, page, limit, count)


@router.get("/{category_id}", response_model=CategoryOut)
def get_category(category_id: UUID, db: Session = Depends(get_db)):
    return crud.get_category_by_id(db, category_id)


@router.patch("/{category_id}", response_model=CategoryOut,
              dependencies=[Depends(allow_catalog_manager)])
def update_category(category_id: UUID, category: CategoryUpdate, db: Session = Depends(get_db)):
    return crud.update_category(db, category_id, category)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT,
               dependencies=[Depends(allow_catalog_manager)])
def delete_category(category_id: UUID, db: Session = Depends(get_db)):
    crud.delete_category(db, category_id)
