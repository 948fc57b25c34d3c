"""
Product domain model.
Catalog record validated on construction and on every assignment.
"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Product(BaseModel):
    """
    Catalog product.

    ``id`` stays ``None`` until the catalog store assigns one on first save.
    Equality covers every field, identity included.
    """

    model_config = ConfigDict(
        str_strip_whitespace=True,
        validate_assignment=True,
    )

    id: Optional[int] = Field(default=None, gt=0)
    name: str = Field(..., min_length=1, max_length=255)
    category: Optional[str] = Field(default=None, max_length=255)
    brand: Optional[str] = Field(default=None, max_length=255)
    price: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
    stock: int = Field(default=0, ge=0)

    @field_validator("category", "brand", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        """Treat empty strings as missing values."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, name={self.name[:30]})>"
