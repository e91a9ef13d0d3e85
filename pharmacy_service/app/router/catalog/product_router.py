from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.orm import Session

from shared.core.auth import allow_catalog_manager
from shared.core.database import get_db
from shared.core.schemas import PaginatedResponse
from shared.helpers.pagination_helper import paginate

from ...crud.catalog import product_crud as crud
from ...schemas.catalog.product_schemas import (
    LotCreate, LotOut, ProductCreate, ProductDetailOut, ProductImageCreate,
    ProductImageOut, ProductPresentationCreate, ProductPresentationOut,
    ProductPresentationUpdate, ProductUpdate
)

router = APIRouter(prefix="/product", tags=["Product"])


@router.post("", response_model=ProductDetailOut, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(allow_catalog_manager)])
def create_product(product: ProductCreate, db: Session = Depends(get_db)):
    return crud.create_product(db, product)


@router.get("", response_model=PaginatedResponse[ProductPresentationOut])
def get_products(
    request: Request,
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1),
    db: Session = Depends(get_db)
):
    """Catalog listing: every active presentation of every active product."""
    count = crud.count_product_presentations(db)
    results = crud.get_product_presentations(db, page, limit)
    return paginate(request, results, page, limit, count)


@router.get("/{product_id}", response_model=ProductDetailOut)
def get_product(product_id: UUID, db: Session = Depends(get_db)):
    return crud.get_product_by_id(db, product_id)


@router.patch("/{product_id}", response_model=ProductDetailOut,
              dependencies=[Depends(allow_catalog_manager)])
def update_product(product_id: UUID, product: ProductUpdate, db: Session = Depends(get_db)):
    return crud.update_product(db, product_id, product)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT,
               dependencies=[Depends(allow_catalog_manager)])
def delete_product(product_id: UUID, db: Session = Depends(get_db)):
    crud.delete_product(db, product_id)


# Product presentations

@router.post("/{product_id}/presentation", response_model=ProductPresentationOut,
             status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(allow_catalog_manager)])
def create_product_presentation(product_id: UUID, data: ProductPresentationCreate,
                                db: Session = Depends(get_db)):
    return crud.create_product_presentation(db, product_id, data)


@router.get("/{product_id}/presentation/{product_presentation_id}",
            response_model=ProductPresentationOut)
def get_product_presentation(product_id: UUID, product_presentation_id: UUID,
                             db: Session = Depends(get_db)):
    return crud.get_product_presentation_by_id(db, product_id, product_presentation_id)


@router.patch("/{product_id}/presentation/{product_presentation_id}",
              response_model=ProductPresentationOut,
              dependencies=[Depends(allow_catalog_manager)])
def update_product_presentation(product_id: UUID, product_presentation_id: UUID,
                                data: ProductPresentationUpdate, db: Session = Depends(get_db)):
    return crud.update_product_presentation(db, product_id, product_presentation_id, data)


@router.delete("/{product_id}/presentation/{product_presentation_id}",
               status_code=status.HTTP_204_NO_CONTENT,
               dependencies=[Depends(allow_catalog_manager)])
def delete_product_presentation(product_id: UUID, product_presentation_id: UUID,
                                db: Session = Depends(get_db)):
    crud.delete_product_presentation(db, product_id, product_presentation_id)


@router.post("/{product_id}/presentation/{product_presentation_id}/lot",
             response_model=LotOut, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(allow_catalog_manager)])
def create_lot(product_id: UUID, product_presentation_id: UUID, lot: LotCreate,
               db: Session = Depends(get_db)):
    return crud.create_lot(db, product_id, product_presentation_id, lot)


# Images

@router.post("/{product_id}/image", response_model=ProductImageOut,
             status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(allow_catalog_manager)])
def add_product_image(product_id: UUID, image: ProductImageCreate, db: Session = Depends(get_db)):
    return crud.add_product_image(db, product_id, image)


@router.delete("/{product_id}/image/{image_id}", status_code=status.HTTP_204_NO_CONTENT,
               dependencies=[Depends(allow_catalog_manager)])
def delete_product_image(product_id: UUID, image_id: UUID, db: Session = Depends(get_db)):
    crud.delete_product_image(db, product_id, image_id)
