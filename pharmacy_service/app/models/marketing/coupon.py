from sqlalchemy import TIMESTAMP, Column, Integer, String

from shared.core.database import Base
from shared.models.base import SoftDeleteModel


class Coupon(SoftDeleteModel, Base):
    __tablename__ = "coupon"

    code = Column(String(20), unique=True, index=True, nullable=False)
    discount = Column(Integer, nullable=False)
    min_purchase = Column(Integer, nullable=False, default=0)
    max_uses = Column(Integer, nullable=False)
    expiration_date = Column(TIMESTAMP(timezone=True), nullable=False)
