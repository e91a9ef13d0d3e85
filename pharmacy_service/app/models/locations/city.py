from sqlalchemy import Column, ForeignKey, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from shared.core.database import Base
from shared.models.base import SoftDeleteModel


class City(SoftDeleteModel, Base):
    __tablename__ = "city"

    name = Column(String(255), nullable=False)
    state_id = Column(UUID(as_uuid=True), ForeignKey(
        "state.id"), nullable=False, index=True)

    state = relationship("State", back_populates="cities", lazy="joined")
    branches = relationship("Branch", back_populates="city")
