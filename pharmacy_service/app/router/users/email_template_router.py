from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from shared.core.auth import allow_admin
from shared.core.database import get_db

from ...crud.users import email_template_crud as crud
from ...schemas.users.email_template_schemas import (
    EmailTemplateCreate, EmailTemplateOut, EmailTemplateUpdate
)

router = APIRouter(
    prefix="/email",
    tags=["Email Template"],
    dependencies=[Depends(allow_admin)]
)


@router.post("", response_model=EmailTemplateOut, status_code=status.HTTP_201_CREATED)
def create_template(template: EmailTemplateCreate, db: Session = Depends(get_db)):
    return crud.create_template(db, template)


@router.get("", response_model=List[EmailTemplateOut])
def get_templates(db: Session = Depends(get_db)):
    return crud.get_templates(db)


@router.get("/{name}", response_model=EmailTemplateOut)
def get_template(name: str, db: Session = Depends(get_db)):
    return crud.get_template_by_name(db, name)


@router.put("/{template_id}", response_model=EmailTemplateOut)
def update_template(template_id: UUID, template: EmailTemplateUpdate,
                    db: Session = Depends(get_db)):
    return crud.update_template(db, template_id, template)


@router.delete("/{template_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_template(template_id: UUID, db: Session = Depends(get_db)):
    crud.delete_template(db, template_id)
