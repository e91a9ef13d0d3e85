import logging
from uuid import UUID

from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from shared.helpers.db_helper import apply_updates, commit_or_fail
from shared.helpers.json_response_helper import error_response, not_found_response
from shared.utils.app_status_code import AppStatusCode

from ...models.catalog.lot import Lot
from ...models.catalog.presentation import Presentation
from ...models.catalog.product import Product
from ...models.catalog.product_image import ProductImage
from ...models.catalog.product_presentation import ProductPresentation
from ...schemas.catalog.product_schemas import (
    LotCreate, ProductCreate, ProductImageCreate, ProductPresentationCreate,
    ProductPresentationUpdate, ProductUpdate
)
from .category_crud import get_categories_by_ids
from .manufacturer_crud import get_manufacturer_by_id
from .presentation_crud import get_presentation_by_id

logger = logging.getLogger(__name__)


# ----------------------------------------------------------------------
# Products
# ----------------------------------------------------------------------

def create_product(db: Session, product: ProductCreate) -> Product:
    """
    Create a product together with its images, categories and
    presentations. Everything is flushed inside the same transaction and
    committed once, so a missing category or presentation leaves nothing
    behind.
    """
    try:
        manufacturer = get_manufacturer_by_id(db, product.manufacturer)
        categories = get_categories_by_ids(db, product.category_ids)

        db_product = Product(
            name=product.name,
            generic_name=product.generic_name,
            description=product.description,
            priority=product.priority,
            manufacturer=manufacturer,
        )
        db_product.categories = categories
        db.add(db_product)
        db.flush()

        for url in product.image_urls:
            db.add(ProductImage(url=url, product_id=db_product.id))

        for item in product.presentations:
            presentation = get_presentation_by_id(db, item.presentation_id)
            db.add(ProductPresentation(
                price=item.price,
                product_id=db_product.id,
                presentation_id=presentation.id,
            ))

        db.commit()
    except HTTPException:
        db.rollback()
        raise
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Error creating product: {e.orig}")
        return error_response(
            message="Error creating product",
            status_code=str(AppStatusCode.OPERATION_ERROR),
            http_status=400
        )

    db.refresh(db_product)
    logger.info(f"Product {db_product.id} created")
    return db_product


def get_product_by_id(db: Session, product_id: UUID) -> Product:
    db_product = Product.active_query(db).filter(
        Product.id == product_id).first()
    if not db_product:
        return not_found_response("Product", product_id)
    return db_product


def update_product(db: Session, product_id: UUID, product: ProductUpdate) -> Product:
    db_product = get_product_by_id(db, product_id)
    update_data = product.model_dump(exclude_unset=True)

    manufacturer_id = update_data.pop("manufacturer", None)
    if manufacturer_id:
        db_product.manufacturer = get_manufacturer_by_id(db, manufacturer_id)

    category_ids = update_data.pop("category_ids", None)
    if category_ids is not None:
        db_product.categories = get_categories_by_ids(db, category_ids)

    apply_updates(db_product, update_data)
    return commit_or_fail(db, db_product, "Error updating product")


def delete_product(db: Session, product_id: UUID) -> bool:
    db_product = get_product_by_id(db, product_id)
    db_product.soft_delete()
    db.commit()
    logger.info(f"Product {product_id} soft deleted")
    return True


# ----------------------------------------------------------------------
# Product presentations
# ----------------------------------------------------------------------

def _active_product_presentations(db: Session):
    return (
        ProductPresentation.active_query(db)
        .join(Product, ProductPresentation.product_id == Product.id)
        .join(Presentation, ProductPresentation.presentation_id == Presentation.id)
        .filter(Product.not_deleted(), Presentation.not_deleted())
    )


def count_product_presentations(db: Session) -> int:
    return _active_product_presentations(db).count()


def get_product_presentations(db: Session, page: int, limit: int):
    """Catalog listing: one row per product presentation with its product loaded."""
    return (
        _active_product_presentations(db)
        .order_by(Product.priority, Product.name)
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )


def create_product_presentation(db: Session, product_id: UUID,
                                data: ProductPresentationCreate) -> ProductPresentation:
    db_product = get_product_by_id(db, product_id)
    presentation = get_presentation_by_id(db, data.presentation_id)
    db_item = ProductPresentation(
        price=data.price,
        product_id=db_product.id,
        presentation_id=presentation.id,
    )
    db.add(db_item)
    return commit_or_fail(db, db_item, "Error creating product presentation")


def get_product_presentation_by_id(db: Session, product_id: UUID,
                                   product_presentation_id: UUID) -> ProductPresentation:
    get_product_by_id(db, product_id)
    db_item = ProductPresentation.active_query(db).filter(
        ProductPresentation.id == product_presentation_id,
        ProductPresentation.product_id == product_id,
    ).first()
    if not db_item:
        return not_found_response("ProductPresentation", product_presentation_id)
    return db_item


def update_product_presentation(db: Session, product_id: UUID, product_presentation_id: UUID,
                                data: ProductPresentationUpdate) -> ProductPresentation:
    db_item = get_product_presentation_by_id(
        db, product_id, product_presentation_id)
    update_data = data.model_dump(exclude_unset=True)
    presentation_id = update_data.pop("presentation_id", None)
    if presentation_id:
        db_item.presentation = get_presentation_by_id(db, presentation_id)
    apply_updates(db_item, update_data)
    return commit_or_fail(db, db_item, "Error updating product presentation")


def delete_product_presentation(db: Session, product_id: UUID, product_presentation_id: UUID) -> bool:
    db_item = get_product_presentation_by_id(
        db, product_id, product_presentation_id)
    db_item.soft_delete()
    db.commit()
    logger.info(f"ProductPresentation {product_presentation_id} soft deleted")
    return True


# ----------------------------------------------------------------------
# Images and lots
# ----------------------------------------------------------------------

def add_product_image(db: Session, product_id: UUID, image: ProductImageCreate) -> ProductImage:
    db_product = get_product_by_id(db, product_id)
    db_image = ProductImage(url=image.url, product_id=db_product.id)
    db.add(db_image)
    return commit_or_fail(db, db_image, "Error adding product image")


def delete_product_image(db: Session, product_id: UUID, image_id: UUID) -> bool:
    get_product_by_id(db, product_id)
    db_image = ProductImage.active_query(db).filter(
        ProductImage.id == image_id,
        ProductImage.product_id == product_id,
    ).first()
    if not db_image:
        return not_found_response("ProductImage", image_id)
    db_image.soft_delete()
    db.commit()
    return True


def create_lot(db: Session, product_id: UUID, product_presentation_id: UUID, lot: LotCreate) -> Lot:
    db_item = get_product_presentation_by_id(
        db, product_id, product_presentation_id)
    db_lot = Lot(expiration_date=lot.expiration_date,
                 product_presentation_id=db_item.id)
    db.add(db_lot)
    return commit_or_fail(db, db_lot, "Error creating lot")
