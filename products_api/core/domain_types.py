"""Domain Types: identity type and the writable-field allow-list.

Invariants:
    - ProductId wraps a positive int assigned by the database, at most MAX_PRODUCT_ID
    - WRITABLE_FIELDS is the only set of attributes a client may set
"""

from typing import NewType

ProductId = NewType("ProductId", int)

# Largest value a 32-bit INTEGER primary key column can hold
MAX_PRODUCT_ID = 2_147_483_647

# Attribute names on the ORM model, not JSON aliases
WRITABLE_FIELDS: frozenset[str] = frozenset({
    "title", "description", "category", "is_available", "image", "price",
})
