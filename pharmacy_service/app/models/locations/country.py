from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from shared.core.database import Base
from shared.models.base import SoftDeleteModel


class Country(SoftDeleteModel, Base):
    __tablename__ = "country"

    name = Column(String(255), nullable=False)

    states = relationship("State", back_populates="country")
    manufacturers = relationship("Manufacturer", back_populates="country")
