from sqlalchemy import Column, Date, Enum, ForeignKey, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from shared.core.database import Base
from shared.models.base import UUIDModel
from shared.models.users import enum_values
from shared.utils.enums import UserGender


class Profile(UUIDModel, Base):
    __tablename__ = "profile"

    user_id = Column(UUID(as_uuid=True), ForeignKey(
        "users.id", ondelete="CASCADE"), unique=True, nullable=False)
    profile_picture = Column(Text, nullable=True)
    birth_date = Column(Date, nullable=False)
    gender = Column(
        Enum(UserGender, values_callable=enum_values,
             native_enum=False, length=1),
        nullable=True
    )

    user = relationship("Users", back_populates="profile")
