import logging
from uuid import UUID

from sqlalchemy.orm import Session

from shared.helpers.db_helper import apply_updates, commit_or_fail
from shared.helpers.email_helper import EmailHelper
from shared.helpers.json_response_helper import error_response, not_found_response
from shared.models.email_template import EmailTemplate
from shared.utils.app_status_code import AppStatusCode

from ...schemas.users.email_template_schemas import EmailTemplateCreate, EmailTemplateUpdate

logger = logging.getLogger(__name__)


def _ensure_unique_name(db: Session, name: str, exclude_id: UUID = None):
    query = db.query(EmailTemplate).filter(EmailTemplate.name == name)
    if exclude_id:
        query = query.filter(EmailTemplate.id != exclude_id)
    if query.first():
        return error_response(
            message=f"Email template '{name}' already exists",
            status_code=str(AppStatusCode.DUPLICATE_ADD_ERROR),
            http_status=400
        )


def create_template(db: Session, template: EmailTemplateCreate) -> EmailTemplate:
    _ensure_unique_name(db, template.name)
    db_template = EmailTemplate(
        name=template.name,
        html=template.html,
        text=template.text or EmailHelper.strip_html_tags(template.html),
    )
    db.add(db_template)
    return commit_or_fail(db, db_template, "Error creating email template")


def get_templates(db: Session):
    return EmailTemplate.active_query(db).order_by(EmailTemplate.name).all()


def get_template_by_name(db: Session, name: str) -> EmailTemplate:
    db_template = EmailTemplate.active_query(db).filter(
        EmailTemplate.name == name).first()
    if not db_template:
        return not_found_response("EmailTemplate", name)
    return db_template


def get_template_by_id(db: Session, template_id: UUID) -> EmailTemplate:
    db_template = EmailTemplate.active_query(db).filter(
        EmailTemplate.id == template_id).first()
    if not db_template:
        return not_found_response("EmailTemplate", template_id)
    return db_template


def update_template(db: Session, template_id: UUID, template: EmailTemplateUpdate) -> EmailTemplate:
    db_template = get_template_by_id(db, template_id)
    update_data = template.model_dump(exclude_unset=True)
    if update_data.get("name"):
        _ensure_unique_name(db, update_data["name"], exclude_id=template_id)
    if update_data.get("text") is None:
        update_data.pop("text", None)
    apply_updates(db_template, update_data)
    return commit_or_fail(db, db_template, "Error updating email template")


def delete_template(db: Session, template_id: UUID) -> bool:
    db_template = get_template_by_id(db, template_id)
    db_template.soft_delete()
    db.commit()
    logger.info(f"Email template {db_template.name} soft deleted")
    return True
