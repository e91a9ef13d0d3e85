import logging
from typing import Optional
from uuid import UUID

from sqlalchemy.orm import Session

from shared.helpers.db_helper import apply_updates, commit_or_fail, ensure_no_dependents
from shared.helpers.json_response_helper import not_found_response

from ...models.locations.city import City
from ...models.locations.state import State
from ...schemas.locations.state_schemas import StateCreate, StateUpdate
from .country_crud import get_country_by_id

logger = logging.getLogger(__name__)


def _filtered(db: Session, country_id: Optional[UUID] = None):
    query = State.active_query(db)
    if country_id:
        get_country_by_id(db, country_id)
        query = query.filter(State.country_id == country_id)
    return query


def create_state(db: Session, state: StateCreate) -> State:
    data = state.model_dump(exclude={"country_id"})
    db_state = State(**data)
    db_state.country = get_country_by_id(db, state.country_id)
    db.add(db_state)
    return commit_or_fail(db, db_state, "Error creating state")


def count_states(db: Session, country_id: Optional[UUID] = None) -> int:
    return _filtered(db, country_id).count()


def get_states(db: Session, page: int, limit: int, country_id: Optional[UUID] = None):
    return (
        _filtered(db, country_id)
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )


def get_state_by_id(db: Session, state_id: UUID) -> State:
    db_state = State.active_query(db).filter(State.id == state_id).first()
    if not db_state:
        return not_found_response("State", state_id)
    return db_state


def update_state(db: Session, state_id: UUID, state: StateUpdate) -> State:
    db_state = get_state_by_id(db, state_id)
    update_data = state.model_dump(exclude_unset=True)
    country_id = update_data.pop("country_id", None)
    if country_id:
        db_state.country = get_country_by_id(db, country_id)
    apply_updates(db_state, update_data)
    return commit_or_fail(db, db_state, "Error updating state")


def delete_state(db: Session, state_id: UUID) -> bool:
    db_state = get_state_by_id(db, state_id)
    ensure_no_dependents(
        City.active_query(db).filter(City.state_id == state_id),
        "State", state_id, "cities")
    db_state.soft_delete()
    db.commit()
    logger.info(f"State {state_id} soft deleted")
    return True
