from sqlalchemy import Column, ForeignKey, Integer
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from shared.core.database import Base
from shared.models.base import SoftDeleteModel


class ProductPresentation(SoftDeleteModel, Base):
    __tablename__ = "product_presentation"

    price = Column(Integer, nullable=False)
    product_id = Column(UUID(as_uuid=True), ForeignKey(
        "product.id", ondelete="CASCADE"), nullable=False, index=True)
    presentation_id = Column(UUID(as_uuid=True), ForeignKey(
        "presentation.id"), nullable=False, index=True)

    product = relationship("Product", lazy="joined")
    presentation = relationship("Presentation", lazy="joined")
    lots = relationship(
        "Lot",
        viewonly=True,
        primaryjoin="and_(Lot.product_presentation_id == ProductPresentation.id, Lot.deleted_at.is_(None))",
    )
