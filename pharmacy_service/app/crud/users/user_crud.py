import logging
from datetime import datetime, timedelta, timezone
from typing import Optional, Union
from uuid import UUID

from sqlalchemy.orm import Session, joinedload

from shared.core.config import settings
from shared.helpers.db_helper import apply_updates, commit_or_fail
from shared.helpers.json_response_helper import error_response, not_found_response
from shared.helpers.otp_generator import generate_otp
from shared.models.profile import Profile
from shared.models.user_otp import UserOTP
from shared.models.users import Users
from shared.utils.app_status_code import AppStatusCode
from shared.utils.enums import OTPType, UserRole

from ...schemas.users.user_schemas import UserCreate, UserSignup, UserUpdate
from ..locations.branch_crud import get_branch_by_id

logger = logging.getLogger(__name__)

MAX_OTP_ATTEMPTS = 10


# ----------------------------------------------------------------------
# Lookups
# ----------------------------------------------------------------------

def user_exists(db: Session, **filters) -> bool:
    # deleted users still hold their email and document
    return db.query(Users).filter_by(**filters).first() is not None


def get_user_by_email(db: Session, email: str) -> Optional[Users]:
    return Users.active_query(db).filter(Users.email == email).first()


def get_user_by_id(db: Session, user_id: UUID) -> Users:
    db_user = Users.active_query(db).filter(Users.id == user_id).first()
    if not db_user:
        return not_found_response("User", user_id)
    return db_user


def get_user_profile(db: Session, user_id: UUID) -> dict:
    db_user = get_user_by_id(db, user_id)
    profile = db_user.profile
    if not profile:
        return error_response(
            message="Profile not found",
            status_code=str(AppStatusCode.NOT_FOUND),
            http_status=404
        )
    return {
        "first_name": db_user.first_name,
        "last_name": db_user.last_name,
        "email": db_user.email,
        "document_id": db_user.document_id,
        "phone_number": db_user.phone_number,
        "birth_date": profile.birth_date,
        "gender": profile.gender,
        "profile_picture": profile.profile_picture,
        "role": db_user.role,
    }


# ----------------------------------------------------------------------
# Create / list / update / delete
# ----------------------------------------------------------------------

def create_user(
    db: Session,
    user: Union[UserSignup, UserCreate],
    role: UserRole = UserRole.CUSTOMER,
    is_validated: bool = False,
) -> Users:
    """Create a user and its profile in one commit."""
    db_user = Users(
        first_name=user.first_name,
        last_name=user.last_name,
        email=user.email,
        document_id=user.document_id,
        phone_number=user.phone_number,
        role=role,
        is_validated=is_validated,
    )
    db_user.set_password(user.password)

    branch_id = getattr(user, "branch_id", None)
    if branch_id:
        db_user.branch = get_branch_by_id(db, branch_id)

    db_user.profile = Profile(birth_date=user.birth_date, gender=user.gender)
    db.add(db_user)
    return commit_or_fail(db, db_user, "Error creating user")


def count_users(db: Session, role: Optional[UserRole] = None) -> int:
    query = Users.active_query(db)
    if role:
        query = query.filter(Users.role == role)
    return query.count()


def get_users(db: Session, page: int, limit: int, role: Optional[UserRole] = None):
    query = Users.active_query(db).options(joinedload(Users.profile))
    if role:
        query = query.filter(Users.role == role)
    return (
        query.order_by(Users.created_at.desc())
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )


def update_user(db: Session, user_id: UUID, user: UserUpdate) -> Users:
    db_user = get_user_by_id(db, user_id)
    update_data = user.model_dump(exclude_unset=True)
    if "branch_id" in update_data:
        branch_id = update_data.pop("branch_id")
        db_user.branch = get_branch_by_id(db, branch_id) if branch_id else None
    apply_updates(db_user, update_data)
    return commit_or_fail(db, db_user, "Error updating user")


def update_password(db: Session, db_user: Users, password: str) -> bool:
    db_user.set_password(password)
    db.commit()
    return True


def delete_user(db: Session, user_id: UUID) -> bool:
    db_user = get_user_by_id(db, user_id)
    db_user.soft_delete()
    db.commit()
    logger.info(f"User {user_id} soft deleted")
    return True


# ----------------------------------------------------------------------
# One-time passwords
# ----------------------------------------------------------------------

def save_otp(db: Session, db_user: Users, otp_type: OTPType) -> UserOTP:
    """Issue a fresh OTP for the user, replacing the one they hold."""
    if db_user.otp is not None:
        db.delete(db_user.otp)
        db.flush()

    code = generate_otp(6)
    for _ in range(MAX_OTP_ATTEMPTS):
        taken = db.query(UserOTP).filter(
            UserOTP.code == code, UserOTP.type == otp_type).first()
        if not taken:
            break
        code = generate_otp(6)

    db_otp = UserOTP(
        user_id=db_user.id,
        code=code,
        type=otp_type,
        expires_at=datetime.now(timezone.utc) +
        timedelta(minutes=settings.OTP_EXPIRE_MINUTES),
    )
    db.add(db_otp)
    commit_or_fail(db, db_otp, "Error issuing OTP")
    db.refresh(db_user)
    logger.info(f"Issued {otp_type.value} OTP for user {db_user.id}")
    return db_otp


def get_or_issue_otp(db: Session, db_user: Users, otp_type: OTPType) -> UserOTP:
    current = db_user.otp
    if current is not None and current.type == otp_type and not current.is_expired():
        return current
    return save_otp(db, db_user, otp_type)


def find_otp_by_code(db: Session, code: str, otp_type: Optional[OTPType] = None) -> UserOTP:
    query = db.query(UserOTP).filter(UserOTP.code == code)
    if otp_type:
        query = query.filter(UserOTP.type == otp_type)
    db_otp = query.first()
    if not db_otp:
        return error_response(
            message="Invalid or not found OTP code",
            status_code=str(AppStatusCode.AUTHENTICATION_USER_OTP_INVALID),
            http_status=404
        )
    return db_otp


def find_user_otp(db: Session, user_id: UUID, code: str) -> UserOTP:
    db_otp = db.query(UserOTP).filter(
        UserOTP.user_id == user_id, UserOTP.code == code).first()
    if not db_otp:
        return error_response(
            message="Invalid or not found OTP code",
            status_code=str(AppStatusCode.AUTHENTICATION_USER_OTP_INVALID),
            http_status=404
        )
    return db_otp


def ensure_not_expired(db_otp: UserOTP):
    if db_otp.is_expired():
        return error_response(
            message="OTP code has expired",
            status_code=str(AppStatusCode.AUTHENTICATION_USER_OTP_EXPIRED),
            http_status=400
        )
    return db_otp


def delete_otp(db: Session, db_otp: UserOTP):
    db.delete(db_otp)
    db.commit()


def validate_email(db: Session, db_otp: UserOTP) -> Users:
    ensure_not_expired(db_otp)
    db_user = db_otp.user
    db_user.is_validated = True
    db.delete(db_otp)
    db.commit()
    logger.info(f"User {db_user.id} validated their email")
    return db_user
