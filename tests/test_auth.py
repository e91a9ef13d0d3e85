from datetime import date, datetime, timedelta, timezone

from jose import jwt

from shared.models.user_otp import UserOTP
from shared.models.users import Users
from shared.utils.enums import OTPType, UserRole

from conftest import ADMIN_ORIGIN, PASSWORD, SHOP_ORIGIN, bearer


def signup_payload(**overrides):
    payload = {
        "firstName": "Ana",
        "lastName": "Perez",
        "email": "  Ana.Perez@Example.com ",
        "password": "Password123",
        "documentId": "V-12345678",
        "phoneNumber": "+58 414 0000000",
        "birthDate": "1995-04-12",
        "gender": "f",
    }
    payload.update(overrides)
    return payload


# ----------------------------------------------------------------------
# Login
# ----------------------------------------------------------------------

def test_login_returns_token_with_email_and_subject(client, admin):
    response = client.post("/auth/login", json={"email": admin.email, "password": PASSWORD},
                           headers={"Origin": ADMIN_ORIGIN})
    assert response.status_code == 200
    token = response.json()["accessToken"]
    payload = jwt.decode(token, "test-secret", algorithms=["HS256"])
    assert payload["email"] == admin.email
    assert payload["sub"] == str(admin.id)


def test_login_without_origin_is_unauthorized(client, admin):
    response = client.post("/auth/login", json={"email": admin.email, "password": PASSWORD})
    assert response.status_code == 401


def test_login_with_wrong_password_is_unauthorized(client, admin):
    response = client.post("/auth/login", json={"email": admin.email, "password": "WrongPass123"},
                           headers={"Origin": ADMIN_ORIGIN})
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid credentials"


def test_login_with_unknown_email_is_unauthorized(client):
    response = client.post("/auth/login", json={"email": "ghost@example.com", "password": PASSWORD},
                           headers={"Origin": ADMIN_ORIGIN})
    assert response.status_code == 401


def test_customer_cannot_login_from_admin_origin(client, customer):
    response = client.post("/auth/login", json={"email": customer.email, "password": PASSWORD},
                           headers={"Origin": ADMIN_ORIGIN})
    assert response.status_code == 403


def test_delivery_cannot_login_from_second_admin_origin(client, make_user):
    delivery = make_user(UserRole.DELIVERY)
    response = client.post("/auth/login", json={"email": delivery.email, "password": PASSWORD},
                           headers={"Origin": "http://dashboard.pharmacy.local"})
    assert response.status_code == 403


def test_customer_can_login_from_shop_origin(client, customer):
    response = client.post("/auth/login", json={"email": customer.email.upper(), "password": PASSWORD},
                           headers={"Origin": SHOP_ORIGIN})
    assert response.status_code == 200
    assert response.json()["accessToken"]


# ----------------------------------------------------------------------
# Signup
# ----------------------------------------------------------------------

def test_signup_creates_user_profile_and_sends_otp(client, db, email_helper, otp_template):
    response = client.post("/auth/signup", json=signup_payload())
    assert response.status_code == 201
    body = response.json()
    assert body["email"] == "ana.perez@example.com"
    assert body["role"] == "customer"
    assert body["isValidated"] is False
    assert "password" not in body

    user = db.query(Users).filter(Users.email == "ana.perez@example.com").one()
    assert user.password != "Password123"
    assert user.verify_password("Password123")
    assert user.profile.birth_date == date(1995, 4, 12)
    assert user.otp.type == OTPType.EMAIL
    assert len(user.otp.code) == 6

    assert len(email_helper.sent) == 1
    sent = email_helper.sent[0]
    assert sent["recipients"] == [("ana.perez@example.com", "Ana")]
    assert sent["subject"] == "Email Verification"
    assert user.otp.code in sent["html"]


def test_signup_without_template_still_creates_user(client, email_helper):
    response = client.post("/auth/signup", json=signup_payload())
    assert response.status_code == 201
    assert email_helper.sent == []


def test_signup_with_used_email_in_other_case_is_rejected(client):
    assert client.post("/auth/signup", json=signup_payload()).status_code == 201
    response = client.post("/auth/signup", json=signup_payload(
        email="ANA.PEREZ@example.com", documentId="V-999"))
    assert response.status_code == 400
    assert response.json()["message"] == "The email is already in use"


def test_signup_with_used_document_is_rejected(client):
    assert client.post("/auth/signup", json=signup_payload()).status_code == 201
    response = client.post("/auth/signup", json=signup_payload(email="other@example.com"))
    assert response.status_code == 400
    assert response.json()["message"] == "The document is already in use"


def test_signup_requires_minimum_age(client):
    too_young = (date.today() - timedelta(days=365 * 10)).isoformat()
    response = client.post("/auth/signup", json=signup_payload(birthDate=too_young))
    assert response.status_code == 422


def test_signup_requires_long_password(client):
    response = client.post("/auth/signup", json=signup_payload(password="short"))
    assert response.status_code == 422


# ----------------------------------------------------------------------
# Password recovery
# ----------------------------------------------------------------------

def test_forgot_password_with_unknown_email_is_bad_request(client):
    response = client.post("/auth/forgot-password", json={"email": "ghost@example.com"})
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid request"


def test_forgot_password_then_reset_returns_token(client, db, customer, email_helper):
    response = client.post("/auth/forgot-password", json={"email": customer.email})
    assert response.status_code == 204

    otp = db.query(UserOTP).filter(UserOTP.user_id == customer.id).one()
    assert otp.type == OTPType.PASSWORD
    assert otp.code in email_helper.sent[0]["text"]

    response = client.post("/auth/reset-password", json={"otp": otp.code})
    assert response.status_code == 200
    payload = jwt.decode(response.json()["accessToken"], "test-secret", algorithms=["HS256"])
    assert payload["sub"] == str(customer.id)

    db.expire_all()
    assert db.query(UserOTP).filter(UserOTP.user_id == customer.id).first() is None


def test_forgot_password_reuses_unexpired_otp(client, db, customer):
    client.post("/auth/forgot-password", json={"email": customer.email})
    first = db.query(UserOTP).filter(UserOTP.user_id == customer.id).one().code

    client.post("/auth/forgot-password", json={"email": customer.email})
    db.expire_all()
    second = db.query(UserOTP).filter(UserOTP.user_id == customer.id).one().code
    assert first == second


def test_reset_password_with_unknown_otp_is_not_found(client):
    response = client.post("/auth/reset-password", json={"otp": "000000"})
    assert response.status_code == 404


def test_reset_password_with_expired_otp_is_bad_request(client, db, customer):
    db.add(UserOTP(user_id=customer.id, code="123456", type=OTPType.PASSWORD,
                   expires_at=datetime.now(timezone.utc) - timedelta(minutes=1)))
    db.commit()
    response = client.post("/auth/reset-password", json={"otp": "123456"})
    assert response.status_code == 400


def test_reset_password_for_deleted_user_is_not_found(client, db, customer):
    db.add(UserOTP(user_id=customer.id, code="654321", type=OTPType.PASSWORD,
                   expires_at=datetime.now(timezone.utc) + timedelta(minutes=5)))
    customer.soft_delete()
    db.commit()

    response = client.post("/auth/reset-password", json={"otp": "654321"})
    assert response.status_code == 404
    assert "accessToken" not in response.json()


def test_update_password(client, db, customer):
    response = client.patch("/auth/password", json={"password": "BrandNew123"},
                            headers=bearer(customer))
    assert response.status_code == 204

    db.expire_all()
    user = db.get(Users, customer.id)
    assert user.verify_password("BrandNew123")


def test_update_password_requires_token(client):
    response = client.patch("/auth/password", json={"password": "BrandNew123"})
    assert response.status_code == 401


# ----------------------------------------------------------------------
# Email validation OTP
# ----------------------------------------------------------------------

def test_send_otp_and_validate_email(client, db, make_user, email_helper, otp_template):
    user = make_user(is_validated=False)
    headers = bearer(user)

    assert client.post("/auth/otp", headers=headers).status_code == 204
    otp = db.query(UserOTP).filter(UserOTP.user_id == user.id).one()
    assert otp.type == OTPType.EMAIL
    assert otp.code in email_helper.sent[0]["html"]

    response = client.post("/user/otp", json={"otp": otp.code}, headers=headers)
    assert response.status_code == 204

    db.expire_all()
    assert db.get(Users, user.id).is_validated is True
    assert db.query(UserOTP).filter(UserOTP.user_id == user.id).first() is None


def test_validate_email_with_wrong_code_is_not_found(client, make_user):
    user = make_user(is_validated=False)
    response = client.post("/user/otp", json={"otp": "999999"}, headers=bearer(user))
    assert response.status_code == 404


def test_expired_otp_keeps_user_unvalidated(client, db, make_user):
    user = make_user(is_validated=False)
    db.add(UserOTP(user_id=user.id, code="654321", type=OTPType.EMAIL,
                   expires_at=datetime.now(timezone.utc) - timedelta(minutes=10)))
    db.commit()

    response = client.post("/user/otp", json={"otp": "654321"}, headers=bearer(user))
    assert response.status_code == 400

    db.expire_all()
    assert db.get(Users, user.id).is_validated is False


# ----------------------------------------------------------------------
# Guards
# ----------------------------------------------------------------------

def test_garbage_token_is_unauthorized(client):
    response = client.post("/country", json={"name": "X"},
                           headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401


def test_expired_token_is_unauthorized(client, admin):
    token = jwt.encode({"email": admin.email, "sub": str(admin.id),
                        "exp": datetime.now(timezone.utc) - timedelta(minutes=1)},
                       "test-secret", algorithm="HS256")
    response = client.post("/country", json={"name": "X"},
                           headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_token_of_deleted_user_is_unauthorized(client, admin, admin_headers, customer):
    headers = bearer(customer)
    assert client.delete(f"/user/{customer.id}", headers=admin_headers).status_code == 204
    response = client.patch("/auth/password", json={"password": "BrandNew123"}, headers=headers)
    assert response.status_code == 401


def test_role_mismatch_is_forbidden(client, customer_headers):
    response = client.post("/country", json={"name": "X"}, headers=customer_headers)
    assert response.status_code == 403
