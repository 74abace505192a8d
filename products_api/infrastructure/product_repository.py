"""Product Repository: SQLAlchemy implementation of the ProductRepository protocol.

Invariants:
    - One repository per AsyncSession (one per request)
    - Every mutating call commits exactly once; nothing is retried
    - Missing rows return None/False; callers decide how to report them
    - SQLAlchemy exceptions roll back and surface as DatabaseError
    - Only WRITABLE_FIELDS reach the ORM; any other key raises InvalidParameterError

Design Decisions:
    - Existence checked by primary-key lookup in the same session before update/delete,
      so not-found never depends on driver-specific "0 rows affected" behavior
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from sqlalchemy import select
from sqlalchemy.exc import (
    DBAPIError, IntegrityError, OperationalError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import AsyncSession

from products_api.core.domain_types import ProductId, WRITABLE_FIELDS
from products_api.core.errors import (
    DatabaseError, ErrorContext, InvalidParameterError,
)
from products_api.models.product import Product, utcnow

logger = logging.getLogger(__name__)


class SqlAlchemyProductRepository:
    """Product persistence over a single AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def list_all(self) -> list[Product]:
        async with self._translate_errors("list"):
            result = await self._db.execute(select(Product).order_by(Product.id))
            return list(result.scalars().all())

    async def get(self, product_id: ProductId) -> Product | None:
        async with self._translate_errors("get", product_id):
            return await self._db.get(Product, product_id)

    async def create(self, fields: dict[str, Any]) -> Product:
        _check_writable(fields)
        async with self._translate_errors("create"):
            product = Product(**fields)
            self._db.add(product)
            await self._db.commit()
            await self._db.refresh(product)
            return product

    async def update(
        self, product_id: ProductId, fields: dict[str, Any],
    ) -> Product | None:
        """Apply a partial update. Returns None if the row does not exist."""
        _check_writable(fields)
        async with self._translate_errors("update", product_id):
            product = await self._db.get(Product, product_id)
            if product is None:
                return None
            for name, value in fields.items():
                setattr(product, name, value)
            # refreshed even when no column value changed
            product.updated_at = utcnow()
            await self._db.commit()
            await self._db.refresh(product)
            return product

    async def delete(self, product_id: ProductId) -> bool:
        """Hard delete. Returns False if the row does not exist."""
        async with self._translate_errors("delete", product_id):
            product = await self._db.get(Product, product_id)
            if product is None:
                return False
            await self._db.delete(product)
            await self._db.commit()
            return True

    @asynccontextmanager
    async def _translate_errors(
        self, operation: str, product_id: ProductId | None = None,
    ) -> AsyncGenerator[None, None]:
        """Roll back and map SQLAlchemy failures to DatabaseError."""
        context = ErrorContext(product_id=product_id, operation=operation)
        try:
            yield
        except IntegrityError as e:
            await self._db.rollback()
            logger.error(f"DB integrity error on {operation}: {e}")
            raise DatabaseError("Integrity constraint violated", operation, context) from e
        except OperationalError as e:
            await self._db.rollback()
            logger.error(f"DB operational error on {operation}: {e}")
            raise DatabaseError("Connection or operational error", operation, context) from e
        except DBAPIError as e:
            await self._db.rollback()
            logger.error(f"DB driver error on {operation}: {e}")
            raise DatabaseError("Database driver error", operation, context) from e
        except SQLAlchemyError as e:
            await self._db.rollback()
            logger.error(f"SQLAlchemy error on {operation}: {e}")
            raise DatabaseError("Database operation failed", operation, context) from e


def _check_writable(fields: dict[str, Any]) -> None:
    unknown = sorted(set(fields) - WRITABLE_FIELDS)
    if unknown:
        raise InvalidParameterError(
            f"Fields are not writable: {', '.join(unknown)}", field=unknown[0],
        )
