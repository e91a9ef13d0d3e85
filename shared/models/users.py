from sqlalchemy import TIMESTAMP, Boolean, Column, Enum, ForeignKey, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from passlib.context import CryptContext

from shared.core.database import Base
from shared.models.base import SoftDeleteModel
from shared.utils.enums import UserRole

bcrypt_context = CryptContext(
    schemes=['bcrypt'], deprecated='auto', bcrypt__rounds=10)


def enum_values(enum_cls):
    return [member.value for member in enum_cls]


class Users(SoftDeleteModel, Base):
    __tablename__ = "users"

    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
    password = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    document_id = Column(String(255), unique=True, nullable=False)
    phone_number = Column(String(50), nullable=True)
    is_validated = Column(Boolean, default=False, nullable=False)
    last_order_date = Column(TIMESTAMP(timezone=True), nullable=True)
    role = Column(
        Enum(UserRole, values_callable=enum_values,
             native_enum=False, length=20),
        default=UserRole.CUSTOMER,
        nullable=False
    )
    branch_id = Column(UUID(as_uuid=True), ForeignKey(
        "branch.id"), nullable=True)

    branch = relationship("Branch", back_populates="users")
    profile = relationship(
        "Profile",
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan"
    )
    otp = relationship(
        "UserOTP",
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan"
    )

    def set_password(self, password: str):
        self.password = bcrypt_context.hash(password)

    def verify_password(self, password: str) -> bool:
        return bcrypt_context.verify(password, self.password)
