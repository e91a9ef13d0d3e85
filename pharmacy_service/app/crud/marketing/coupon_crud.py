import logging
from datetime import datetime
from typing import Optional, Tuple

from sqlalchemy.orm import Session

from shared.helpers.db_helper import apply_updates, commit_or_fail
from shared.helpers.json_response_helper import error_response, not_found_response
from shared.utils.app_status_code import AppStatusCode

from ...models.marketing.coupon import Coupon
from ...schemas.marketing.coupon_schemas import CouponCreate, CouponUpdate

logger = logging.getLogger(__name__)


def _filtered(db: Session, q: Optional[str] = None,
              expiration_between: Optional[Tuple[datetime, datetime]] = None):
    query = Coupon.active_query(db)
    if q:
        query = query.filter(Coupon.code.ilike(f"%{q}%"))
    if expiration_between:
        start, end = expiration_between
        query = query.filter(Coupon.expiration_date.between(start, end))
    return query


def create_coupon(db: Session, coupon: CouponCreate) -> Coupon:
    data = coupon.model_dump()
    if db.query(Coupon).filter(Coupon.code == data["code"]).first():
        return error_response(
            message=f"Coupon '{data['code']}' already exists",
            status_code=str(AppStatusCode.DUPLICATE_ADD_ERROR),
            http_status=400
        )
    db_coupon = Coupon(**data)
    db.add(db_coupon)
    return commit_or_fail(db, db_coupon, "Error creating coupon")


def count_coupons(db: Session, q: Optional[str] = None,
                  expiration_between: Optional[Tuple[datetime, datetime]] = None) -> int:
    return _filtered(db, q, expiration_between).count()


def get_coupons(db: Session, page: int, limit: int, q: Optional[str] = None,
                expiration_between: Optional[Tuple[datetime, datetime]] = None):
    return (
        _filtered(db, q, expiration_between)
        .order_by(Coupon.expiration_date)
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )


def get_coupon_by_code(db: Session, code: str) -> Coupon:
    db_coupon = Coupon.active_query(db).filter(
        Coupon.code == code).first()
    if not db_coupon:
        return not_found_response("Coupon", code)
    return db_coupon


def update_coupon(db: Session, code: str, coupon: CouponUpdate) -> Coupon:
    db_coupon = get_coupon_by_code(db, code)
    apply_updates(db_coupon, coupon.model_dump(exclude_unset=True))
    return commit_or_fail(db, db_coupon, "Error updating coupon")


def delete_coupon(db: Session, code: str) -> bool:
    db_coupon = get_coupon_by_code(db, code)
    db_coupon.soft_delete()
    db.commit()
    logger.info(f"Coupon {db_coupon.code} soft deleted")
    return True
