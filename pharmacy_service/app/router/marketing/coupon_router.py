from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.orm import Session

from shared.core.auth import allow_catalog_manager
from shared.core.database import get_db
from shared.core.schemas import PaginatedResponse
from shared.helpers.date_range_helper import parse_date_range
from shared.helpers.pagination_helper import paginate

from ...crud.marketing import coupon_crud as crud
from ...schemas.marketing.coupon_schemas import CouponCreate, CouponOut, CouponUpdate

router = APIRouter(prefix="/coupon", tags=["Coupon"])


@router.post("", response_model=CouponOut, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(allow_catalog_manager)])
def create_coupon(coupon: CouponCreate, db: Session = Depends(get_db)):
    return crud.create_coupon(db, coupon)


@router.get("", response_model=PaginatedResponse[CouponOut])
def get_coupons(
    request: Request,
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1),
    q: Optional[str] = None,
    expiration_between: Optional[str] = Query(None, alias="expirationBetween"),
    db: Session = Depends(get_db)
):
    date_range = parse_date_range(expiration_between)
    count = crud.count_coupons(db, q, date_range)
    results = crud.get_coupons(db, page, limit, q, date_range)
    return paginate(request, results, page, limit, count,
                    q=q, expirationBetween=expiration_between)


@router.get("/{code}", response_model=CouponOut)
def get_coupon(code: str, db: Session = Depends(get_db)):
    return crud.get_coupon_by_code(db, code)


@router.patch("/{code}", response_model=CouponOut,
              dependencies=[Depends(allow_catalog_manager)])
def update_coupon(code: str, coupon: CouponUpdate, db: Session = Depends(get_db)):
    return crud.update_coupon(db, code, coupon)


@router.delete("/{code}", status_code=status.HTTP_204_NO_CONTENT,
               dependencies=[Depends(allow_catalog_manager)])
def delete_coupon(code: str, db: Session = Depends(get_db)):
    crud.delete_coupon(db, code)
