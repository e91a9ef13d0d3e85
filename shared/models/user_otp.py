from datetime import datetime, timezone

from sqlalchemy import TIMESTAMP, Column, Enum, ForeignKey, String, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from shared.core.database import Base
from shared.models.base import UUIDModel
from shared.models.users import enum_values
from shared.utils.enums import OTPType


class UserOTP(UUIDModel, Base):
    __tablename__ = "user_otp"

    user_id = Column(UUID(as_uuid=True), ForeignKey(
        "users.id", ondelete="CASCADE"), unique=True, nullable=False)
    code = Column(String(6), nullable=False)
    expires_at = Column(TIMESTAMP(timezone=True), nullable=False)
    type = Column(
        Enum(OTPType, values_callable=enum_values,
             native_enum=False, length=20),
        nullable=True
    )

    user = relationship("Users", back_populates="otp")

    __table_args__ = (
        UniqueConstraint("code", "type", name="unique_otp_code_per_type"),
    )

    def is_expired(self) -> bool:
        expires_at = self.expires_at
        # sqlite hands back naive datetimes; they are stored as UTC
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)
        return datetime.now(timezone.utc) > expires_at
