from sqlalchemy import Column, ForeignKey, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from shared.core.database import Base
from shared.models.base import SoftDeleteModel


class State(SoftDeleteModel, Base):
    __tablename__ = "state"

    name = Column(String(255), nullable=False)
    country_id = Column(UUID(as_uuid=True), ForeignKey(
        "country.id"), nullable=False, index=True)

    country = relationship("Country", back_populates="states", lazy="joined")
    cities = relationship("City", back_populates="state")
