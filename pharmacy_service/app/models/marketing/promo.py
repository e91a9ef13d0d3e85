from sqlalchemy import TIMESTAMP, Column, Integer, String

from shared.core.database import Base
from shared.models.base import SoftDeleteModel


class Promo(SoftDeleteModel, Base):
    __tablename__ = "promo"

    name = Column(String(255), nullable=False)
    discount = Column(Integer, nullable=False)
    start_at = Column(TIMESTAMP(timezone=True), nullable=False)
    expired_at = Column(TIMESTAMP(timezone=True), nullable=False)
