from sqlalchemy import Column, Integer, String, Text

from shared.core.database import Base
from shared.models.base import SoftDeleteModel


class Presentation(SoftDeleteModel, Base):
    __tablename__ = "presentation"

    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    quantity = Column(Integer, nullable=False)
    # mg, ml, pills...
    measurement_unit = Column(String(50), nullable=False)
