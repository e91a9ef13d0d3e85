import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from shared.helpers.json_response_helper import error_response
from shared.utils.app_status_code import AppStatusCode

logger = logging.getLogger(__name__)


def commit_or_fail(db: Session, instance=None, message: str = "Error saving record"):
    """Commit the session, turning constraint violations into a 400."""
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"{message}: {e.orig}")
        return error_response(
            message=message,
            status_code=str(AppStatusCode.OPERATION_ERROR),
            http_status=400
        )
    if instance is not None:
        db.refresh(instance)
    return instance


def apply_updates(instance, data: dict):
    for key, value in data.items():
        setattr(instance, key, value)
    return instance


def ensure_no_dependents(query, entity: str, entity_id, dependents: str):
    """Refuse to remove a record while active rows still reference it."""
    if query.first() is not None:
        return error_response(
            message=f"Cannot delete {entity} #{entity_id} that has active {dependents} associated with it.",
            status_code=str(AppStatusCode.OPERATION_ERROR),
            http_status=400
        )
