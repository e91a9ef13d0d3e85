import logging
from typing import List
from uuid import UUID

from sqlalchemy.orm import Session

from shared.helpers.db_helper import apply_updates, commit_or_fail
from shared.helpers.json_response_helper import not_found_response

from ...models.catalog.category import Category
from ...schemas.catalog.category_schemas import CategoryCreate, CategoryUpdate

logger = logging.getLogger(__name__)


def create_category(db: Session, category: CategoryCreate) -> Category:
    db_category = Category(**category.model_dump())
    db.add(db_category)
    return commit_or_fail(db, db_category, "Error creating category")


def count_categories(db: Session) -> int:
    return Category.active_query(db).count()


def get_categories(db: Session, page: int, limit: int):
    return (
        Category.active_query(db)
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )


def get_category_by_id(db: Session, category_id: UUID) -> Category:
    db_category = Category.active_query(db).filter(
        Category.id == category_id).first()
    if not db_category:
        return not_found_response("Category", category_id)
    return db_category


def get_categories_by_ids(db: Session, category_ids: List[UUID]) -> List[Category]:
    """Load every requested category or fail on the first missing one."""
    unique_ids = list(dict.fromkeys(category_ids))
    if not unique_ids:
        return []
    found = {
        c.id: c for c in Category.active_query(db).filter(
            Category.id.in_(unique_ids)).all()
    }
    for category_id in unique_ids:
        if category_id not in found:
            return not_found_response("Category", category_id)
    return [found[category_id] for category_id in unique_ids]


def update_category(db: Session, category_id: UUID, category: CategoryUpdate) -> Category:
    db_category = get_category_by_id(db, category_id)
    apply_updates(db_category, category.model_dump(exclude_unset=True))
    return commit_or_fail(db, db_category, "Error updating category")


def delete_category(db: Session, category_id: UUID) -> bool:
    db_category = get_category_by_id(db, category_id)
    db_category.soft_delete()
    db.commit()
    logger.info(f"Category {category_id} soft deleted")
    return True
