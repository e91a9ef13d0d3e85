import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["API_URL"] = "http://testserver"
os.environ["ALLOWED_ADMIN_ORIGIN"] = "http://admin.pharmacy.local, http://dashboard.pharmacy.local"
os.environ.pop("SMTP_HOST", None)

from datetime import date  # noqa: E402
from itertools import count  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from shared.core.auth import create_access_token  # noqa: E402
from shared.core.database import Base, engine, get_db  # noqa: E402
from shared.helpers.email_helper import EmailHelper, get_email_helper  # noqa: E402
from shared.models.email_template import EmailTemplate  # noqa: E402
from shared.models.profile import Profile  # noqa: E402
from shared.models.users import Users  # noqa: E402
from shared.utils.enums import UserRole  # noqa: E402

from pharmacy_service.app.main import app  # noqa: E402

TestingSessionLocal = sessionmaker(
    autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)

PASSWORD = "Secret123!"
ADMIN_ORIGIN = "http://admin.pharmacy.local"
SHOP_ORIGIN = "http://shop.pharmacy.local"

_sequence = count(1)


class RecordingEmailHelper(EmailHelper):
    """Renders templates from the database but keeps sent mail in memory."""

    def __init__(self):
        super().__init__()
        self.sent = []

    def send_email(self, recipients, subject, html_body, text_body=None):
        self.sent.append({
            "recipients": recipients,
            "subject": subject,
            "html": html_body,
            "text": text_body,
        })
        return True


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(autouse=True)
def reset_database():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def email_helper():
    return RecordingEmailHelper()


@pytest.fixture
def client(email_helper):
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_email_helper] = lambda: email_helper
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def otp_template(db):
    template = EmailTemplate(
        name="otp_verification",
        html="<p>Hi {name}, your code is <b>{otp}</b></p>",
        text="Hi {name}, your code is {otp}",
    )
    db.add(template)
    db.commit()
    return template


@pytest.fixture
def make_user(db):
    def _make_user(role=UserRole.CUSTOMER, email=None, password=PASSWORD, **kwargs):
        n = next(_sequence)
        user = Users(
            first_name=kwargs.pop("first_name", f"User{n}"),
            last_name=kwargs.pop("last_name", "Tester"),
            email=email or f"user{n}@example.com",
            document_id=kwargs.pop("document_id", f"DOC-{n:05d}"),
            role=role,
            is_validated=kwargs.pop("is_validated", True),
            **kwargs
        )
        user.set_password(password)
        user.profile = Profile(birth_date=date(1990, 5, 17))
        db.add(user)
        db.commit()
        return user

    return _make_user


def bearer(user):
    return {"Authorization": f"Bearer {create_access_token(user)}"}


@pytest.fixture
def admin(make_user):
    return make_user(UserRole.ADMIN)


@pytest.fixture
def branch_admin(make_user):
    return make_user(UserRole.BRANCH_ADMIN)


@pytest.fixture
def customer(make_user):
    return make_user(UserRole.CUSTOMER)


@pytest.fixture
def admin_headers(admin):
    return bearer(admin)


@pytest.fixture
def branch_admin_headers(branch_admin):
    return bearer(branch_admin)


@pytest.fixture
def customer_headers(customer):
    return bearer(customer)


@pytest.fixture
def location_tree(client, admin_headers):
    """A country > state > city chain created through the API."""
    country = client.post("/country", json={"name": "Venezuela"},
                          headers=admin_headers).json()
    state = client.post("/state", json={"name": "Bolivar", "countryId": country["id"]},
                        headers=admin_headers).json()
    city = client.post("/city", json={"name": "Puerto Ordaz", "stateId": state["id"]},
                       headers=admin_headers).json()
    return {"country": country, "state": state, "city": city}
