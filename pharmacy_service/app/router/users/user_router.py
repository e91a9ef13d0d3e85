from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.orm import Session

from shared.core.auth import allow_admin, allow_user_or_admin, validate_current_token
from shared.core.database import get_db
from shared.core.schemas import PaginatedResponse
from shared.helpers.json_response_helper import error_response
from shared.helpers.pagination_helper import paginate
from shared.models.users import Users
from shared.utils.app_status_code import AppStatusCode
from shared.utils.enums import UserRole

from ...crud.users import user_crud as crud
from ...schemas.users.user_schemas import (
    OtpIn, UserCreate, UserListOut, UserOut, UserProfileOut, UserUpdate
)

router = APIRouter(prefix="/user", tags=["User"])


@router.post("/otp", status_code=status.HTTP_204_NO_CONTENT)
def validate_otp(
    request: OtpIn,
    db: Session = Depends(get_db),
    current_user: Users = Depends(validate_current_token)
):
    user_otp = crud.find_user_otp(db, current_user.id, request.otp)
    crud.validate_email(db, user_otp)


@router.get("", response_model=PaginatedResponse[UserListOut],
            dependencies=[Depends(allow_admin)])
def get_users(
    request: Request,
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1),
    role: Optional[UserRole] = None,
    db: Session = Depends(get_db)
):
    count = crud.count_users(db, role)
    results = crud.get_users(db, page, limit, role)
    return paginate(request, results, page, limit, count,
                    role=role.value if role else None)


@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(allow_admin)])
def create_user(user: UserCreate, db: Session = Depends(get_db)):
    if crud.user_exists(db, email=user.email):
        return error_response(
            message="The email is already in use",
            status_code=str(AppStatusCode.USER_EMAIL_IS_UNIQUE)
        )
    if crud.user_exists(db, document_id=user.document_id):
        return error_response(
            message="The document is already in use",
            status_code=str(AppStatusCode.USER_DOCUMENT_IS_UNIQUE)
        )
    # accounts created by an admin skip email validation
    return crud.create_user(db, user, role=user.role, is_validated=True)


@router.get("/{user_id}", response_model=UserProfileOut,
            dependencies=[Depends(allow_user_or_admin)])
def get_profile(user_id: UUID, db: Session = Depends(get_db)):
    return crud.get_user_profile(db, user_id)


@router.patch("/{user_id}", response_model=UserOut,
              dependencies=[Depends(allow_admin)])
def update_user(user_id: UUID, user: UserUpdate, db: Session = Depends(get_db)):
    return crud.update_user(db, user_id, user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT,
               dependencies=[Depends(allow_user_or_admin)])
def delete_user(user_id: UUID, db: Session = Depends(get_db)):
    crud.delete_user(db, user_id)
