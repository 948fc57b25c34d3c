"""
Search criteria model.
Immutable filter set that doubles as the search cache key.
"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SearchCriteria(BaseModel):
    """
    Optional catalog filters.

    Frozen and hashable: two criteria with the same field values are
    interchangeable as cache keys, whatever order the keywords were passed in.
    Blank strings are normalized to absent.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    category: Optional[str] = None
    brand: Optional[str] = None
    min_price: Optional[Decimal] = Field(default=None, ge=0)
    max_price: Optional[Decimal] = Field(default=None, ge=0)

    @field_validator("category", "brand", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def is_empty(self) -> bool:
        """True when no filter field is present."""
        return (
            self.category is None
            and self.brand is None
            and self.min_price is None
            and self.max_price is None
        )
