"""
Product request/response schemas.
"""

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ...models import Product


class ProductPayload(BaseModel):
    """Request schema for creating or replacing a product."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=255, description="Product name")
    category: Optional[str] = Field(None, max_length=255, description="Category name")
    brand: Optional[str] = Field(None, max_length=255, description="Brand name")
    price: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2, description="Unit price")
    stock: int = Field(0, ge=0, description="Units in stock")

    def to_product(self, product_id: Optional[int] = None) -> Product:
        return Product(id=product_id, **self.model_dump())


class ProductResponse(BaseModel):
    """Response schema for a single product."""

    id: int
    name: str
    category: Optional[str] = None
    brand: Optional[str] = None
    price: float
    stock: int

    @classmethod
    def from_product(cls, product: Product) -> "ProductResponse":
        return cls(
            id=product.id,
            name=product.name,
            category=product.category,
            brand=product.brand,
            price=float(product.price),
            stock=product.stock,
        )


class ProductListResponse(BaseModel):
    """Response schema for product listings and searches."""

    products: List[ProductResponse]
    total: int = Field(..., description="Number of products returned")
