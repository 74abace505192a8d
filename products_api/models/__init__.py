"""ORM Models: SQLAlchemy declarative models.

All models imported here so Base.metadata is complete before create_all or
alembic autogenerate runs.
"""

from products_api.models.product import Product  # noqa: F401
