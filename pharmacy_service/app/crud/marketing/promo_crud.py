import logging
from datetime import datetime
from typing import Optional, Tuple
from uuid import UUID

from sqlalchemy.orm import Session

from shared.helpers.db_helper import apply_updates, commit_or_fail
from shared.helpers.json_response_helper import error_response, not_found_response
from shared.utils.app_status_code import AppStatusCode

from ...models.marketing.promo import Promo
from ...schemas.marketing.promo_schemas import PromoCreate, PromoUpdate

logger = logging.getLogger(__name__)


def _filtered(db: Session, q: Optional[str] = None,
              expiration_between: Optional[Tuple[datetime, datetime]] = None):
    query = Promo.active_query(db)
    if q:
        query = query.filter(Promo.name.ilike(f"%{q}%"))
    if expiration_between:
        start, end = expiration_between
        query = query.filter(Promo.expired_at.between(start, end))
    return query


def create_promo(db: Session, promo: PromoCreate) -> Promo:
    db_promo = Promo(**promo.model_dump())
    db.add(db_promo)
    return commit_or_fail(db, db_promo, "Error creating promo")


def count_promos(db: Session, q: Optional[str] = None,
                 expiration_between: Optional[Tuple[datetime, datetime]] = None) -> int:
    return _filtered(db, q, expiration_between).count()


def get_promos(db: Session, page: int, limit: int, q: Optional[str] = None,
               expiration_between: Optional[Tuple[datetime, datetime]] = None):
    return (
        _filtered(db, q, expiration_between)
        .order_by(Promo.start_at)
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )


def get_promo_by_id(db: Session, promo_id: UUID) -> Promo:
    db_promo = Promo.active_query(db).filter(Promo.id == promo_id).first()
    if not db_promo:
        return not_found_response("Promo", promo_id)
    return db_promo


def update_promo(db: Session, promo_id: UUID, promo: PromoUpdate) -> Promo:
    db_promo = get_promo_by_id(db, promo_id)
    update_data = promo.model_dump(exclude_unset=True)

    # a partial update can still break the date order against stored values
    start_at = update_data.get("start_at", db_promo.start_at)
    expired_at = update_data.get("expired_at", db_promo.expired_at)
    if _as_naive(expired_at) <= _as_naive(start_at):
        return error_response(
            message="expiredAt must be after startAt",
            status_code=str(AppStatusCode.INVALID_INPUT),
            http_status=422
        )

    apply_updates(db_promo, update_data)
    return commit_or_fail(db, db_promo, "Error updating promo")


def delete_promo(db: Session, promo_id: UUID) -> bool:
    db_promo = get_promo_by_id(db, promo_id)
    db_promo.soft_delete()
    db.commit()
    logger.info(f"Promo {promo_id} soft deleted")
    return True


def _as_naive(value: datetime) -> datetime:
    if value.tzinfo is not None:
        return value.replace(tzinfo=None) - value.utcoffset()
    return value
