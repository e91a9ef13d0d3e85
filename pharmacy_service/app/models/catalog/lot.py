from sqlalchemy import Column, Date, ForeignKey
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from shared.core.database import Base
from shared.models.base import SoftDeleteModel


class Lot(SoftDeleteModel, Base):
    __tablename__ = "lot"

    expiration_date = Column(Date, nullable=False)
    product_presentation_id = Column(UUID(as_uuid=True), ForeignKey(
        "product_presentation.id", ondelete="CASCADE"), nullable=False, index=True)

    product_presentation = relationship("ProductPresentation")
