import logging
from typing import Optional
from uuid import UUID

from sqlalchemy.orm import Session

from shared.helpers.db_helper import apply_updates, commit_or_fail, ensure_no_dependents
from shared.helpers.json_response_helper import not_found_response

from ...models.locations.branch import Branch
from ...models.locations.city import City
from ...schemas.locations.city_schemas import CityCreate, CityUpdate
from .state_crud import get_state_by_id

logger = logging.getLogger(__name__)


def _filtered(db: Session, state_id: Optional[UUID] = None):
    query = City.active_query(db)
    if state_id:
        # unknown state is a 404, not an empty listing
        get_state_by_id(db, state_id)
        query = query.filter(City.state_id == state_id)
    return query


def create_city(db: Session, city: CityCreate) -> City:
    db_city = City(**city.model_dump(exclude={"state_id"}))
    db_city.state = get_state_by_id(db, city.state_id)
    db.add(db_city)
    return commit_or_fail(db, db_city, "Error creating city")


def count_cities(db: Session, state_id: Optional[UUID] = None) -> int:
    return _filtered(db, state_id).count()


def get_cities(db: Session, page: int, limit: int, state_id: Optional[UUID] = None):
    return (
        _filtered(db, state_id)
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )


def get_city_by_id(db: Session, city_id: UUID) -> City:
    db_city = City.active_query(db).filter(City.id == city_id).first()
    if not db_city:
        return not_found_response("City", city_id)
    return db_city


def update_city(db: Session, city_id: UUID, city: CityUpdate) -> City:
    db_city = get_city_by_id(db, city_id)
    update_data = city.model_dump(exclude_unset=True)
    state_id = update_data.pop("state_id", None)
    if state_id:
        db_city.state = get_state_by_id(db, state_id)
    apply_updates(db_city, update_data)
    return commit_or_fail(db, db_city, "Error updating city")


def delete_city(db: Session, city_id: UUID) -> bool:
    db_city = get_city_by_id(db, city_id)
    ensure_no_dependents(
        Branch.active_query(db).filter(Branch.city_id == city_id),
        "City", city_id, "branches")
    db_city.soft_delete()
    db.commit()
    logger.info(f"City {city_id} soft deleted")
    return True
