"""
Product Filtering
Structured predicates over search criteria, evaluated in-process or as SQL.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, List

from sqlalchemy import func
from sqlalchemy.sql.elements import ColumnElement

from ..models import Product, SearchCriteria

logger = logging.getLogger(__name__)


class FilterOperator(Enum):
    """Comparison operators for filters."""

    IEQ = "IEQ"  # Case-insensitive equality
    GTE = ">="
    LTE = "<="


@dataclass(frozen=True)
class ProductFilter:
    """
    Single filter condition for products.

    Example:
        ProductFilter("price", FilterOperator.LTE, Decimal("100"))  # price <= 100
        ProductFilter("brand", FilterOperator.IEQ, "acme")           # lower(brand) = 'acme'
    """

    field: str
    operator: FilterOperator
    value: Any

    def matches(self, product: Product) -> bool:
        """Evaluate the condition against an in-memory product."""
        actual = getattr(product, self.field)
        if actual is None:
            return False

        if self.operator is FilterOperator.IEQ:
            return actual.lower() == self.value.lower()
        if self.operator is FilterOperator.GTE:
            return actual >= self.value
        if self.operator is FilterOperator.LTE:
            return actual <= self.value

        raise ValueError(f"Unsupported operator: {self.operator}")

    def to_clause(self, model: Any) -> ColumnElement:
        """
        Convert filter to a parameterized SQLAlchemy clause.

        Args:
            model: ORM class whose column is named like ``field``
        """
        column = getattr(model, self.field)

        if self.operator is FilterOperator.IEQ:
            return func.lower(column) == self.value.lower()
        if self.operator is FilterOperator.GTE:
            return column >= self.value
        if self.operator is FilterOperator.LTE:
            return column <= self.value

        raise ValueError(f"Unsupported operator: {self.operator}")


def build_filters(criteria: SearchCriteria) -> List[ProductFilter]:
    """
    Build the conjunctive filter list for ``criteria``.

    Absent fields contribute no filter, so empty criteria match everything.
    """
    filters = []

    if criteria.category is not None:
        filters.append(ProductFilter("category", FilterOperator.IEQ, criteria.category))
    if criteria.brand is not None:
        filters.append(ProductFilter("brand", FilterOperator.IEQ, criteria.brand))

    # Price range, bounds inclusive
    if criteria.min_price is not None:
        filters.append(ProductFilter("price", FilterOperator.GTE, criteria.min_price))
    if criteria.max_price is not None:
        filters.append(ProductFilter("price", FilterOperator.LTE, criteria.max_price))

    return filters


def matches_all(filters: List[ProductFilter], product: Product) -> bool:
    """True when ``product`` satisfies every filter."""
    return all(f.matches(product) for f in filters)


def to_where_clauses(filters: List[ProductFilter], model: Any) -> List[ColumnElement]:
    """Translate filters into clauses for ``select(model).where(*clauses)``."""
    return [f.to_clause(model) for f in filters]
