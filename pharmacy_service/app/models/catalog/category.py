from sqlalchemy import Column, String, Text

from shared.core.database import Base
from shared.models.base import SoftDeleteModel


class Category(SoftDeleteModel, Base):
    __tablename__ = "category"

    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
