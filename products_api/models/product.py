"""Product ORM: the single catalog table.

Invariants:
    - id is an autoincrement integer primary key, never written by clients
    - All six catalog fields are non-nullable
    - created_at set on insert; updated_at set on insert and on every UPDATE

Design Decisions:
    - Column names in snake_case; the camelCase JSON names live in schemas/product.py
    - Python-side timestamp defaults: identical behavior on PostgreSQL and SQLite
"""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from products_api.db.base import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Product(Base):
    """Product row: catalog entry with price and availability."""
    __tablename__ = "products"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str] = mapped_column(String(100), nullable=False)
    is_available: Mapped[bool] = mapped_column(Boolean, nullable=False)
    image: Mapped[str] = mapped_column(String(2048), nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
        default=utcnow, onupdate=utcnow,
    )

    def __repr__(self) -> str:
        return f"<Product id={self.id} title={self.title!r}>"
