import logging
from uuid import UUID

from sqlalchemy.orm import Session

from shared.helpers.db_helper import apply_updates, commit_or_fail, ensure_no_dependents
from shared.helpers.json_response_helper import not_found_response

from ...models.catalog.presentation import Presentation
from ...models.catalog.product import Product
from ...models.catalog.product_presentation import ProductPresentation
from ...schemas.catalog.presentation_schemas import PresentationCreate, PresentationUpdate

logger = logging.getLogger(__name__)


def create_presentation(db: Session, presentation: PresentationCreate) -> Presentation:
    db_presentation = Presentation(**presentation.model_dump())
    db.add(db_presentation)
    return commit_or_fail(db, db_presentation, "Error creating presentation")


def count_presentations(db: Session) -> int:
    return Presentation.active_query(db).count()


def get_presentations(db: Session, page: int, limit: int):
    return (
        Presentation.active_query(db)
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )


def get_presentation_by_id(db: Session, presentation_id: UUID) -> Presentation:
    db_presentation = Presentation.active_query(db).filter(
        Presentation.id == presentation_id).first()
    if not db_presentation:
        return not_found_response("Presentation", presentation_id)
    return db_presentation


def update_presentation(db: Session, presentation_id: UUID, presentation: PresentationUpdate) -> Presentation:
    db_presentation = get_presentation_by_id(db, presentation_id)
    apply_updates(db_presentation, presentation.model_dump(exclude_unset=True))
    return commit_or_fail(db, db_presentation, "Error updating presentation")


def delete_presentation(db: Session, presentation_id: UUID) -> bool:
    db_presentation = get_presentation_by_id(db, presentation_id)
    ensure_no_dependents(
        ProductPresentation.active_query(db)
        .join(Product, ProductPresentation.product_id == Product.id)
        .filter(Product.not_deleted(),
                ProductPresentation.presentation_id == presentation_id),
        "Presentation", presentation_id, "products")
    db_presentation.soft_delete()
    db.commit()
    logger.info(f"Presentation {presentation_id} soft deleted")
    return True
