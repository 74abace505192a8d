"""Product Schemas: typed allow-lists for request bodies and response shapes.

Invariants:
    - JSON uses camelCase (isAvailable, createdAt, updatedAt); Python uses snake_case
    - ProductCreate requires all six writable fields and rejects any other key
    - ProductUpdate accepts any non-empty subset of the writable fields, never null
    - id, createdAt and updatedAt are response-only

Design Decisions:
    - extra="forbid" closes mass-assignment: unknown keys fail with 400 before any DB call
    - Strict str/bool types: "true" is not a boolean and 42 is not a title
    - Strict price: true is not a number, integers are still accepted
"""

from datetime import datetime
from typing import Annotated

from pydantic import (
    BaseModel, ConfigDict, Field, StrictBool, StrictStr, model_validator,
)
from pydantic.alias_generators import to_camel

Title = Annotated[StrictStr, Field(min_length=1, max_length=255)]
Description = Annotated[StrictStr, Field(min_length=1)]
Category = Annotated[StrictStr, Field(min_length=1, max_length=100)]
ImageUrl = Annotated[StrictStr, Field(min_length=1, max_length=2048)]
Price = Annotated[float, Field(strict=True, ge=0, allow_inf_nan=False)]

PRODUCT_EXAMPLE = {
    "title": "Apple Iphone 14",
    "description": (
        "Scopri iPhone 14 e il grandissimo iPhone 14 Plus. Con Rilevamento "
        "incidenti, durata della batteria mai vista, fotografia notturna "
        "ancora più spettacolare. E cinque colori favolosi."
    ),
    "category": "smartphone",
    "isAvailable": True,
    "image": (
        "https://www.apple.com/newsroom/images/product/iphone/geo/"
        "Apple-iPhone-14-iPhone-14-Plus-hero-220907-geo_Full-Bleed-Image.jpg.large.jpg"
    ),
    "price": 999.9,
}


class ProductCreate(BaseModel):
    """Product creation: every writable field required."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="forbid",
        json_schema_extra={"examples": [PRODUCT_EXAMPLE]},
    )

    title: Title = Field(description="The title of your product")
    description: Description = Field(description="The product description")
    category: Category = Field(description="The product category")
    is_available: StrictBool = Field(
        description="True or False if the product is available/unavailable",
    )
    image: ImageUrl = Field(description="The product image URL")
    price: Price = Field(description="The product price")

    def to_fields(self) -> dict:
        return self.model_dump()


class ProductUpdate(BaseModel):
    """Partial update: only fields present in the body are written."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="forbid",
        json_schema_extra={"examples": [{"price": 899.0, "isAvailable": False}]},
    )

    title: Title | None = None
    description: Description | None = None
    category: Category | None = None
    is_available: StrictBool | None = None
    image: ImageUrl | None = None
    price: Price | None = None

    @model_validator(mode="after")
    def validate_fields_present(self):
        if not self.model_fields_set:
            raise ValueError("update requires at least one field")
        nulls = sorted(
            name for name in self.model_fields_set if getattr(self, name) is None
        )
        if nulls:
            raise ValueError(f"fields cannot be null: {', '.join(nulls)}")
        return self

    def to_fields(self) -> dict:
        return self.model_dump(exclude_unset=True)


class ProductResponse(BaseModel):
    """Product response: stored row including generated id and timestamps."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )

    id: int
    title: str
    description: str
    category: str
    is_available: bool
    image: str
    price: float
    created_at: datetime
    updated_at: datetime


class ProductListResponse(BaseModel):
    """Full-table listing with its row count."""
    total: int
    products: list[ProductResponse]


class DeleteResponse(BaseModel):
    message: str
