import logging
from uuid import UUID

from sqlalchemy.orm import Session

from shared.helpers.db_helper import apply_updates, commit_or_fail, ensure_no_dependents
from shared.helpers.json_response_helper import not_found_response

from ...models.catalog.manufacturer import Manufacturer
from ...models.locations.country import Country
from ...models.locations.state import State
from ...schemas.locations.country_schemas import CountryCreate, CountryUpdate

logger = logging.getLogger(__name__)


def create_country(db: Session, country: CountryCreate) -> Country:
    db_country = Country(**country.model_dump())
    db.add(db_country)
    return commit_or_fail(db, db_country, "Error creating country")


def count_countries(db: Session) -> int:
    return Country.active_query(db).count()


def get_countries(db: Session, page: int, limit: int):
    return (
        Country.active_query(db)
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )


def get_country_by_id(db: Session, country_id: UUID) -> Country:
    db_country = Country.active_query(db).filter(
        Country.id == country_id).first()
    if not db_country:
        return not_found_response("Country", country_id)
    return db_country


def update_country(db: Session, country_id: UUID, country: CountryUpdate) -> Country:
    db_country = get_country_by_id(db, country_id)
    apply_updates(db_country, country.model_dump(exclude_unset=True))
    return commit_or_fail(db, db_country, "Error updating country")


def delete_country(db: Session, country_id: UUID) -> bool:
    db_country = get_country_by_id(db, country_id)
    ensure_no_dependents(
        State.active_query(db).filter(State.country_id == country_id),
        "Country", country_id, "states")
    ensure_no_dependents(
        Manufacturer.active_query(db).filter(
            Manufacturer.country_id == country_id),
        "Country", country_id, "manufacturers")
    db_country.soft_delete()
    db.commit()
    logger.info(f"Country {country_id} soft deleted")
    return True
