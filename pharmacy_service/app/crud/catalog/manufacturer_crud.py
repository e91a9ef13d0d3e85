import logging
from typing import Optional
from uuid import UUID

from sqlalchemy.orm import Session

from shared.helpers.db_helper import apply_updates, commit_or_fail, ensure_no_dependents
from shared.helpers.json_response_helper import not_found_response

from ...models.catalog.manufacturer import Manufacturer
from ...models.catalog.product import Product
from ...schemas.catalog.manufacturer_schemas import ManufacturerCreate, ManufacturerUpdate
from ..locations.country_crud import get_country_by_id

logger = logging.getLogger(__name__)


def _filtered(db: Session, country_id: Optional[UUID] = None):
    query = Manufacturer.active_query(db)
    if country_id:
        get_country_by_id(db, country_id)
        query = query.filter(Manufacturer.country_id == country_id)
    return query


def create_manufacturer(db: Session, manufacturer: ManufacturerCreate) -> Manufacturer:
    db_manufacturer = Manufacturer(
        **manufacturer.model_dump(exclude={"country_id"}))
    db_manufacturer.country = get_country_by_id(db, manufacturer.country_id)
    db.add(db_manufacturer)
    return commit_or_fail(db, db_manufacturer, "Error creating manufacturer")


def count_manufacturers(db: Session, country_id: Optional[UUID] = None) -> int:
    return _filtered(db, country_id).count()


def get_manufacturers(db: Session, page: int, limit: int, country_id: Optional[UUID] = None):
    return (
        _filtered(db, country_id)
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )


def get_manufacturer_by_id(db: Session, manufacturer_id: UUID) -> Manufacturer:
    db_manufacturer = Manufacturer.active_query(db).filter(
        Manufacturer.id == manufacturer_id).first()
    if not db_manufacturer:
        return not_found_response("Manufacturer", manufacturer_id)
    return db_manufacturer


def update_manufacturer(db: Session, manufacturer_id: UUID, manufacturer: ManufacturerUpdate) -> Manufacturer:
    db_manufacturer = get_manufacturer_by_id(db, manufacturer_id)
    update_data = manufacturer.model_dump(exclude_unset=True)
    country_id = update_data.pop("country_id", None)
    if country_id:
        db_manufacturer.country = get_country_by_id(db, country_id)
    apply_updates(db_manufacturer, update_data)
    return commit_or_fail(db, db_manufacturer, "Error updating manufacturer")


def delete_manufacturer(db: Session, manufacturer_id: UUID) -> bool:
    db_manufacturer = get_manufacturer_by_id(db, manufacturer_id)
    ensure_no_dependents(
        Product.active_query(db).filter(
            Product.manufacturer_id == manufacturer_id),
        "Manufacturer", manufacturer_id, "products")
    db_manufacturer.soft_delete()
    db.commit()
    logger.info(f"Manufacturer {manufacturer_id} soft deleted")
    return True
