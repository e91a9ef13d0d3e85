from sqlalchemy import Column, ForeignKey, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from shared.core.database import Base
from shared.models.base import SoftDeleteModel


class ProductImage(SoftDeleteModel, Base):
    __tablename__ = "product_image"

    url = Column(String(1024), nullable=False)
    product_id = Column(UUID(as_uuid=True), ForeignKey(
        "product.id", ondelete="CASCADE"), nullable=False, index=True)

    product = relationship("Product")
