"""Boundary Protocols: contract between the HTTP handlers and the product store.

Invariants:
    - Handlers depend on ProductRepository only, never on a concrete session
    - Lookups by key return None for a missing row; they never raise not-found
    - Storage failures surface as DatabaseError (core/errors.py)

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no inheritance
"""

from typing import Any, Protocol

from products_api.core.domain_types import ProductId


class ProductLike(Protocol):
    """Structural contract for Product rows returned by a repository."""
    id: int
    title: str
    description: str
    category: str
    is_available: bool
    image: str
    price: float


class ProductRepository(Protocol):
    """Contract for product persistence, implemented by infrastructure/."""
    async def list_all(self) -> list[ProductLike]: ...
    async def get(self, product_id: ProductId) -> ProductLike | None: ...
    async def create(self, fields: dict[str, Any]) -> ProductLike: ...
    async def update(
        self, product_id: ProductId, fields: dict[str, Any],
    ) -> ProductLike | None: ...
    async def delete(self, product_id: ProductId) -> bool: ...
