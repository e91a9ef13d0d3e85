import logging
from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import UUID

from fastapi import Depends, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from shared.core.config import settings
from shared.core.database import get_db
from shared.core.schemas import UserToken
from shared.helpers.json_response_helper import error_response
from shared.models.users import Users
from shared.utils.app_status_code import AppStatusCode
from shared.utils.enums import UserRole

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def create_access_token(user: Users) -> str:
    payload = {
        "email": user.email,
        "sub": str(user.id),
        "exp": datetime.now(timezone.utc) + timedelta(minutes=settings.JWT_EXPIRE_MINUTES),
    }
    return jwt.encode(payload, settings.JWT_SECRET,
                      algorithm=settings.JWT_ALGORITHM)


def unauthorized(message: str, status_code: str = AppStatusCode.AUTHENTICATION_TOKEN_INVALID):
    return error_response(
        message=message,
        status_code=str(status_code),
        http_status=status.HTTP_401_UNAUTHORIZED,
        headers={"WWW-Authenticate": "Bearer"}
    )


def verify_token(token: str) -> UserToken:
    """Verify and decode a JWT token."""
    try:
        payload = jwt.decode(token, settings.JWT_SECRET,
                             algorithms=[settings.JWT_ALGORITHM])
        return UserToken(**payload)
    except (JWTError, ValueError):
        return unauthorized("Invalid or expired token",
                            AppStatusCode.AUTHENTICATION_TOKEN_EXPIRED)


def validate_current_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db)
) -> Users:
    if credentials is None or credentials.scheme.lower() != "bearer":
        return unauthorized("Not authenticated")

    # decoded token → contains the user id in "sub"
    user_data = verify_token(credentials.credentials)

    try:
        user_id = UUID(user_data.sub)
    except ValueError:
        return unauthorized("Invalid token structure")

    user = db.query(Users).filter(
        Users.id == user_id, Users.not_deleted()).first()

    if not user:
        return unauthorized("User not found",
                            AppStatusCode.AUTHENTICATION_USER_INVALID)

    return user


def require_roles(*roles: UserRole):
    """Dependency factory: the authenticated user must hold one of `roles`."""

    def role_checker(current_user: Users = Depends(validate_current_token)) -> Users:
        if current_user.role not in roles:
            allowed = ", ".join(role.value for role in roles)
            return error_response(
                message=f"Access denied: You must have one of the following roles: {allowed}",
                status_code=str(AppStatusCode.UNAUTHORIZED_ACTION),
                http_status=status.HTTP_403_FORBIDDEN
            )
        return current_user

    return role_checker


def allow_admin(current_user: Users = Depends(validate_current_token)) -> Users:
    return require_roles(UserRole.ADMIN)(current_user)


def allow_user_or_admin(
    user_id: UUID,
    current_user: Users = Depends(validate_current_token)
) -> Users:
    if current_user.role == UserRole.ADMIN or current_user.id == user_id:
        return current_user

    return error_response(
        message="Access denied: You are not allowed to access this profile.",
        status_code=str(AppStatusCode.UNAUTHORIZED_ACTION),
        http_status=status.HTTP_403_FORBIDDEN
    )


def allow_catalog_manager(
    current_user: Users = Depends(validate_current_token)
) -> Users:
    return require_roles(UserRole.ADMIN, UserRole.BRANCH_ADMIN)(current_user)
