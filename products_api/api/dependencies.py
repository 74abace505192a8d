"""Request Dependencies: path-parameter rules and repository wiring.

Invariants:
    - ProductIdPath is the single declaration of the id rule (integer, 1..MAX_PRODUCT_ID);
      every id-bearing route uses it, so a bad id is rejected before the handler runs
    - Rejected ids never reach get_product_repository consumers
    - get_product_repository is the one seam tests override to swap the store
"""

from typing import Annotated

from fastapi import Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from products_api.core.domain_types import MAX_PRODUCT_ID
from products_api.core.repository_protocols import ProductRepository
from products_api.infrastructure.database import get_db
from products_api.infrastructure.product_repository import SqlAlchemyProductRepository

ProductIdPath = Annotated[
    int,
    Path(
        gt=0,
        le=MAX_PRODUCT_ID,
        title="Product id",
        description="Numeric id of the product, assigned by the database",
        examples=[1],
    ),
]


def get_product_repository(
    db: AsyncSession = Depends(get_db),
) -> ProductRepository:
    return SqlAlchemyProductRepository(db)
