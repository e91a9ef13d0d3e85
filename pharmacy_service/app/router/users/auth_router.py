from fastapi import APIRouter, BackgroundTasks, Depends, Request, status
from sqlalchemy.orm import Session

from shared.core.auth import validate_current_token
from shared.core.database import get_db
from shared.helpers.email_helper import EmailHelper, get_email_helper
from shared.models.users import Users

from ...schemas.users.auth_schemas import ForgotPasswordRequest, LoginRequest, LoginResponse
from ...schemas.users.user_schemas import OtpIn, PasswordIn, UserOut, UserSignup
from ...services import auth_services

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/login", response_model=LoginResponse)
def login(
    request: LoginRequest,
    api_request: Request,
    db: Session = Depends(get_db)
):
    return auth_services.login(db, request, api_request.headers.get("origin"))


@router.post("/signup", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def sign_up(
    request: UserSignup,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
    email_helper: EmailHelper = Depends(get_email_helper)
):
    return auth_services.sign_up(background_tasks, db, email_helper, request)


@router.post("/forgot-password", status_code=status.HTTP_204_NO_CONTENT)
def forgot_password(
    request: ForgotPasswordRequest,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
    email_helper: EmailHelper = Depends(get_email_helper)
):
    auth_services.forgot_password(
        background_tasks, db, email_helper, request.email)


@router.post("/reset-password", response_model=LoginResponse)
def reset_password(request: OtpIn, db: Session = Depends(get_db)):
    return auth_services.reset_password(db, request.otp)


@router.patch("/password", status_code=status.HTTP_204_NO_CONTENT)
def update_password(
    request: PasswordIn,
    db: Session = Depends(get_db),
    current_user: Users = Depends(validate_current_token)
):
    auth_services.update_password(db, current_user, request.password)


@router.post("/otp", status_code=status.HTTP_204_NO_CONTENT)
def send_otp(
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
    email_helper: EmailHelper = Depends(get_email_helper),
    current_user: Users = Depends(validate_current_token)
):
    auth_services.send_otp(background_tasks, db, email_helper, current_user)
