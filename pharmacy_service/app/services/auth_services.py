import logging
from typing import Optional

from fastapi import BackgroundTasks, status
from sqlalchemy.orm import Session

from shared.core.auth import create_access_token
from shared.core.config import settings
from shared.helpers.email_helper import EmailHelper
from shared.helpers.json_response_helper import error_response, not_found_response
from shared.models.users import Users
from shared.utils.app_status_code import AppStatusCode
from shared.utils.enums import OTPType, UserRole

from ..crud.users import user_crud
from ..schemas.users.auth_schemas import LoginRequest
from ..schemas.users.user_schemas import UserSignup

logger = logging.getLogger(__name__)

OTP_TEMPLATE = "otp_verification"
DASHBOARD_DENIED_ROLES = (UserRole.CUSTOMER, UserRole.DELIVERY)


def _invalid_credentials():
    return error_response(
        message="Invalid credentials",
        status_code=str(AppStatusCode.AUTHENTICATION_CREDENTIALS_INVALID),
        http_status=status.HTTP_401_UNAUTHORIZED
    )


def generate_token(user: Users) -> dict:
    return {"access_token": create_access_token(user)}


def login(db: Session, request: LoginRequest, origin: Optional[str]) -> dict:
    if not origin:
        logger.warning(f"Login rejected for {request.email}: missing origin")
        return _invalid_credentials()

    user = user_crud.get_user_by_email(db, request.email)
    if user is None or not user.verify_password(request.password):
        logger.warning(f"Login rejected for {request.email}: bad credentials")
        return _invalid_credentials()

    if user.role in DASHBOARD_DENIED_ROLES and origin in settings.admin_origins:
        logger.warning(
            f"Login rejected for {request.email}: role {user.role.value} from admin origin")
        return error_response(
            message="Access denied",
            status_code=str(AppStatusCode.AUTHENTICATION_ORIGIN_FORBIDDEN),
            http_status=status.HTTP_403_FORBIDDEN
        )

    return generate_token(user)


def send_verification_otp(
    background_tasks: BackgroundTasks,
    db: Session,
    email_helper: EmailHelper,
    user: Users,
    otp: str
):
    rendered = email_helper.render_template(
        db, OTP_TEMPLATE, {"otp": otp, "name": user.first_name})
    if rendered is None:
        return
    html_body, text_body = rendered
    background_tasks.add_task(
        email_helper.send_email,
        recipients=[(user.email, user.first_name)],
        subject="Email Verification",
        html_body=html_body,
        text_body=text_body,
    )


def sign_up(
    background_tasks: BackgroundTasks,
    db: Session,
    email_helper: EmailHelper,
    request: UserSignup
) -> Users:
    if user_crud.user_exists(db, email=request.email):
        return error_response(
            message="The email is already in use",
            status_code=str(AppStatusCode.USER_EMAIL_IS_UNIQUE),
            http_status=status.HTTP_400_BAD_REQUEST
        )
    if user_crud.user_exists(db, document_id=request.document_id):
        return error_response(
            message="The document is already in use",
            status_code=str(AppStatusCode.USER_DOCUMENT_IS_UNIQUE),
            http_status=status.HTTP_400_BAD_REQUEST
        )

    user = user_crud.create_user(db, request)
    logger.info(f"New user signed up: {user.id}")

    otp = user_crud.save_otp(db, user, OTPType.EMAIL)
    send_verification_otp(background_tasks, db, email_helper, user, otp.code)
    return user


def forgot_password(
    background_tasks: BackgroundTasks,
    db: Session,
    email_helper: EmailHelper,
    email: str
):
    user = user_crud.get_user_by_email(db, email)
    if not user:
        return error_response(
            message="Invalid request",
            status_code=str(AppStatusCode.INVALID_INPUT),
            http_status=status.HTTP_400_BAD_REQUEST
        )

    otp = user_crud.get_or_issue_otp(db, user, OTPType.PASSWORD)
    background_tasks.add_task(
        email_helper.send_email,
        recipients=[(user.email, user.first_name)],
        subject="Reset your password",
        html_body=f"<p>Your OTP is <b>{otp.code}</b></p>",
        text_body=f"Your OTP is {otp.code}",
    )


def reset_password(db: Session, code: str) -> dict:
    """Exchange a password-recovery OTP for a fresh access token."""
    db_otp = user_crud.find_otp_by_code(db, code, OTPType.PASSWORD)
    user_crud.ensure_not_expired(db_otp)

    user = db_otp.user
    if user.deleted_at is not None:
        return not_found_response("User", user.id)
    result = generate_token(user)
    user_crud.delete_otp(db, db_otp)
    return result


def update_password(db: Session, user: Users, password: str) -> bool:
    return user_crud.update_password(db, user, password)


def send_otp(
    background_tasks: BackgroundTasks,
    db: Session,
    email_helper: EmailHelper,
    user: Users
):
    otp = user_crud.get_or_issue_otp(db, user, OTPType.EMAIL)
    send_verification_otp(background_tasks, db, email_helper, user, otp.code)
