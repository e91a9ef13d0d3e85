import logging
import os
from datetime import date

from shared.core.database import Base, SessionLocal, engine
from shared.models.profile import Profile
from shared.models.users import Users
from shared.utils.enums import UserRole

import pharmacy_service.app.models  # noqa: F401

logging.basicConfig(level=logging.INFO,
                    format="%(asctime)s [%(levelname)s]: %(message)s")
logger = logging.getLogger(__name__)

ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "admin@pharmacy.local")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "ChangeMe123")

Base.metadata.create_all(bind=engine)

db = SessionLocal()

try:
    # Check if an admin already exists
    existing_admin = (
        Users.active_query(db)
        .filter(Users.role == UserRole.ADMIN)
        .first()
    )

    if existing_admin:
        logger.info(f"Admin already exists: {existing_admin.email}")
    else:
        admin = Users(
            first_name="Admin",
            last_name="Pharmacy",
            email=ADMIN_EMAIL,
            document_id="ADMIN-0001",
            role=UserRole.ADMIN,
            is_validated=True,
        )
        admin.set_password(ADMIN_PASSWORD)
        admin.profile = Profile(birth_date=date(1990, 1, 1))

        db.add(admin)
        db.commit()

        logger.info(f"Admin created successfully: {ADMIN_EMAIL}")

except Exception as e:
    db.rollback()
    logger.error(f"Error creating admin: {e}")
    raise

finally:
    db.close()
