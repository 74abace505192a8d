"""Products Routes: list, get, create, update and delete over the products table.

Invariants:
    - Ids are validated by ProductIdPath before a handler body runs
    - Bodies are validated by ProductCreate/ProductUpdate before a handler body runs
    - A missing row raises ResourceNotFoundError (404); store failures raise DatabaseError (500)
    - PATCH answers 201 with the updated product; DELETE answers 200 with a message
"""

import logging

from fastapi import APIRouter, Depends, status

from products_api.api.dependencies import ProductIdPath, get_product_repository
from products_api.core.domain_types import ProductId
from products_api.core.errors import ErrorContext, ResourceNotFoundError
from products_api.core.repository_protocols import ProductRepository
from products_api.schemas.product import (
    DeleteResponse,
    ProductCreate,
    ProductListResponse,
    ProductResponse,
    ProductUpdate,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/products", tags=["Products"])

_ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"description": "Invalid id or request body"},
    status.HTTP_404_NOT_FOUND: {"description": "No product with this id"},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"description": "Some server error"},
}


def _not_found(product_id: int, operation: str) -> ResourceNotFoundError:
    return ResourceNotFoundError(
        "Product", product_id,
        ErrorContext(product_id=product_id, operation=operation),
    )


@router.get(
    "",
    response_model=ProductListResponse,
    summary="Get all products from database",
    responses={500: _ERROR_RESPONSES[500]},
)
async def list_products(
    repo: ProductRepository = Depends(get_product_repository),
):
    """Retrieve the complete array of products with its total count."""
    products = await repo.list_all()
    return ProductListResponse(
        total=len(products),
        products=[ProductResponse.model_validate(p) for p in products],
    )


@router.get(
    "/{id}",
    response_model=ProductResponse,
    summary="Get a product by id",
    responses=_ERROR_RESPONSES,
)
async def get_product(
    id: ProductIdPath,
    repo: ProductRepository = Depends(get_product_repository),
):
    product = await repo.get(ProductId(id))
    if product is None:
        raise _not_found(id, "get")
    return ProductResponse.model_validate(product)


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new product",
    responses={
        400: _ERROR_RESPONSES[400], 500: _ERROR_RESPONSES[500],
    },
)
async def create_product(
    body: ProductCreate,
    repo: ProductRepository = Depends(get_product_repository),
):
    """Create a product. The database assigns id, createdAt and updatedAt."""
    product = await repo.create(body.to_fields())
    logger.info(f"Product {product.id} created", extra={"product_id": product.id})
    return ProductResponse.model_validate(product)


@router.patch(
    "/{id}",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Update some fields of a product",
    responses=_ERROR_RESPONSES,
)
async def update_product(
    id: ProductIdPath,
    body: ProductUpdate,
    repo: ProductRepository = Depends(get_product_repository),
):
    """Partially update a product. Fields absent from the body are left as stored."""
    fields = body.to_fields()
    product = await repo.update(ProductId(id), fields)
    if product is None:
        raise _not_found(id, "update")
    logger.info(
        f"Product {id} updated: {', '.join(sorted(fields))}",
        extra={"product_id": id},
    )
    return ProductResponse.model_validate(product)


@router.delete(
    "/{id}",
    response_model=DeleteResponse,
    summary="Delete a product",
    responses=_ERROR_RESPONSES,
)
async def delete_product(
    id: ProductIdPath,
    repo: ProductRepository = Depends(get_product_repository),
):
    """Hard-delete a product."""
    deleted = await repo.delete(ProductId(id))
    if not deleted:
        raise _not_found(id, "delete")
    logger.info(f"Product {id} deleted", extra={"product_id": id})
    return DeleteResponse(
        message=f"The resource with id of {id} was successfully deleted from database.",
    )
