from sqlalchemy import Column, Float, ForeignKey, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from shared.core.database import Base
from shared.models.base import SoftDeleteModel


class Branch(SoftDeleteModel, Base):
    __tablename__ = "branch"

    name = Column(String(255), nullable=False)
    address = Column(String(255), nullable=False)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
    city_id = Column(UUID(as_uuid=True), ForeignKey(
        "city.id"), nullable=False, index=True)

    city = relationship("City", back_populates="branches", lazy="joined")
    users = relationship("Users", back_populates="branch")
