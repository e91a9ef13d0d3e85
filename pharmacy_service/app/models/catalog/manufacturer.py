from sqlalchemy import Column, ForeignKey, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from shared.core.database import Base
from shared.models.base import SoftDeleteModel


class Manufacturer(SoftDeleteModel, Base):
    __tablename__ = "manufacturer"

    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    country_id = Column(UUID(as_uuid=True), ForeignKey(
        "country.id"), nullable=False, index=True)

    country = relationship(
        "Country", back_populates="manufacturers", lazy="joined")
    products = relationship("Product", back_populates="manufacturer")
