from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.orm import Session

from shared.core.auth import allow_catalog_manager
from shared.core.database import get_db
from shared.core.schemas import PaginatedResponse
from shared.helpers.date_range_helper import parse_date_range
from shared.helpers.pagination_helper import paginate

from ...crud.marketing import promo_crud as crud
from ...schemas.marketing.promo_schemas import PromoCreate, PromoOut, PromoUpdate

router = APIRouter(prefix="/promo", tags=["Promo"])


@router.post("", response_model=PromoOut, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(allow_catalog_manager)])
def create_promo(promo: PromoCreate, db: Session = Depends(get_db)):
    return crud.create_promo(db, promo)


@router.get("", response_model=PaginatedResponse[PromoOut])
def get_promos(
    request: Request,
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1),
    q: Optional[str] = None,
    expiration_between: Optional[str] = Query(None, alias="expirationBetween"),
    db: Session = Depends(get_db)
):
    date_range = parse_date_range(expiration_between)
    count = crud.count_promos(db, q, date_range)
    results = crud.get_promos(db, page, limit, q, date_range)
    return paginate(request, results, page, limit, count,
                    q=q, expirationBetween=expiration_between)


@router.get("/{promo_id}", response_model=PromoOut)
def get_promo(promo_id: UUID, db: Session = Depends(get_db)):
    return crud.get_promo_by_id(db, promo_id)


@router.patch("/{promo_id}", response_model=PromoOut,
              dependencies=[Depends(allow_catalog_manager)])
def update_promo(promo_id: UUID, promo: PromoUpdate, db: Session = Depends(get_db)):
    return crud.update_promo(db, promo_id, promo)


@router.delete("/{promo_id}", status_code=status.HTTP_204_NO_CONTENT,
               dependencies=[Depends(allow_catalog_manager)])
def delete_promo(promo_id: UUID, db: Session = Depends(get_db)):
    crud.delete_promo(db, promo_id)
