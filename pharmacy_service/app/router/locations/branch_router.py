from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.orm import Session

from shared.core.auth import allow_admin
from shared.core.database import get_db
from shared.core.schemas import PaginatedResponse
from shared.helpers.pagination_helper import paginate

from ...crud.locations import branch_crud as crud
from ...schemas.locations.branch_schemas import BranchCreate, BranchOut, BranchUpdate

router = APIRouter(prefix="/branch", tags=["Branch"])


@router.post("", response_model=BranchOut, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(allow_admin)])
def create_branch(branch: BranchCreate, db: Session = Depends(get_db)):
    return crud.create_branch(db, branch)


@router.get("", response_model=PaginatedResponse[BranchOut])
def get_branches(
    request: Request,
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1),
    city_id: Optional[UUID] = Query(None, alias="cityId"),
    db: Session = Depends(get_db)
):
    count = crud.count_branches(db, city_id)
    results = crud.get_branches(db, page, limit, city_id)
    return paginate(request, results, page, limit, count, cityId=city_id)


@router.get("/{branch_id}", response_model=BranchOut)
def get_branch(branch_id: UUID, db: Session = Depends(get_db)):
    return crud.get_branch_by_id(db, branch_id)


@router.patch("/{branch_id}", response_model=BranchOut,
              dependencies=[Depends(allow_admin)])
def update_branch(branch_id: UUID, branch: BranchUpdate, db: Session = Depends(get_db)):
    return crud.update_branch(db, branch_id, branch)


@router.delete("/{branch_id}", status_code=status.HTTP_204_NO_CONTENT,
               dependencies=[Depends(allow_admin)])
def delete_branch(branch_id: UUID, db: Session = Depends(get_db)):
    crud.delete_branch(db, branch_id)
