from sqlalchemy import Column, ForeignKey, Integer, String, Table, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from shared.core.database import Base
from shared.models.base import SoftDeleteModel

product_category = Table(
    "product_category",
    Base.metadata,
    Column("product_id", UUID(as_uuid=True), ForeignKey(
        "product.id", ondelete="CASCADE"), primary_key=True),
    Column("category_id", UUID(as_uuid=True), ForeignKey(
        "category.id", ondelete="CASCADE"), primary_key=True),
)


class Product(SoftDeleteModel, Base):
    __tablename__ = "product"

    name = Column(String(255), nullable=False)
    generic_name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    priority = Column(Integer, nullable=False)
    manufacturer_id = Column(UUID(as_uuid=True), ForeignKey(
        "manufacturer.id"), nullable=False, index=True)

    manufacturer = relationship(
        "Manufacturer", back_populates="products", lazy="joined")
    images = relationship(
        "ProductImage",
        viewonly=True,
        primaryjoin="and_(ProductImage.product_id == Product.id, ProductImage.deleted_at.is_(None))",
    )
    categories = relationship(
        "Category",
        secondary=product_category,
        secondaryjoin="and_(Category.id == product_category.c.category_id, Category.deleted_at.is_(None))",
    )
    presentations = relationship(
        "ProductPresentation",
        viewonly=True,
        primaryjoin="and_(ProductPresentation.product_id == Product.id, ProductPresentation.deleted_at.is_(None))",
    )
