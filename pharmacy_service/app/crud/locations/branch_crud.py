import logging
from typing import Optional
from uuid import UUID

from sqlalchemy.orm import Session

from shared.helpers.db_helper import apply_updates, commit_or_fail
from shared.helpers.json_response_helper import not_found_response

from ...models.locations.branch import Branch
from ...schemas.locations.branch_schemas import BranchCreate, BranchUpdate
from .city_crud import get_city_by_id

logger = logging.getLogger(__name__)


def _filtered(db: Session, city_id: Optional[UUID] = None):
    query = Branch.active_query(db)
    if city_id:
        get_city_by_id(db, city_id)
        query = query.filter(Branch.city_id == city_id)
    return query


def create_branch(db: Session, branch: BranchCreate) -> Branch:
    db_branch = Branch(**branch.model_dump(exclude={"city_id"}))
    db_branch.city = get_city_by_id(db, branch.city_id)
    db.add(db_branch)
    return commit_or_fail(db, db_branch, "Error creating branch")


def count_branches(db: Session, city_id: Optional[UUID] = None) -> int:
    return _filtered(db, city_id).count()


def get_branches(db: Session, page: int, limit: int, city_id: Optional[UUID] = None):
    return (
        _filtered(db, city_id)
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )


def get_branch_by_id(db: Session, branch_id: UUID) -> Branch:
    db_branch = Branch.active_query(db).filter(Branch.id == branch_id).first()
    if not db_branch:
        return not_found_response("Branch", branch_id)
    return db_branch


def update_branch(db: Session, branch_id: UUID, branch: BranchUpdate) -> Branch:
    db_branch = get_branch_by_id(db, branch_id)
    update_data = branch.model_dump(exclude_unset=True)
    city_id = update_data.pop("city_id", None)
    if city_id:
        db_branch.city = get_city_by_id(db, city_id)
    apply_updates(db_branch, update_data)
    return commit_or_fail(db, db_branch, "Error updating branch")


def delete_branch(db: Session, branch_id: UUID) -> bool:
    db_branch = get_branch_by_id(db, branch_id)
    db_branch.soft_delete()
    db.commit()
    logger.info(f"Branch {branch_id} soft deleted")
    return True
